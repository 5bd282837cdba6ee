"""Application integration and streaming: SNS, SQS, EventBridge, Step Functions, Kinesis, MSK."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

from ..core.aws_console import regional_url, service_domain

if TYPE_CHECKING:
    from ..core.arn import ParsedArn
    from ..core.types import ServiceTemplates


def _sqs_queue(arn: ParsedArn) -> str:
    queue_url = f"https://sqs.{arn.region}.{service_domain(arn)}/{arn.account}/{arn.resource}"
    return regional_url(arn, f"sqs/v2/home?region={arn.region}#/queues/{quote(queue_url, safe='')}")


def _events(arn: ParsedArn, route: str) -> str:
    return regional_url(arn, f"events/home?region={arn.region}#/{route}")


def _events_rule(arn: ParsedArn) -> str:
    # rule/<name> lives on the default bus, rule/<bus>/<name> on a custom one
    event_bus = arn.path_all_but_last or "default"
    return _events(arn, f"eventbus/{event_bus}/rules/{arn.path_last}")


def _schema(arn: ParsedArn) -> str | None:
    registry = arn.path_all_but_last
    if not registry:
        return None
    return _events(arn, f"registries/{registry}/schemas/{arn.path_last}")


def _states(arn: ParsedArn, route: str) -> str:
    return regional_url(arn, f"states/home?region={arn.region}#/{route}")


def _mq_broker(arn: ParsedArn) -> str | None:
    # broker:<name>:<broker-id>
    qualifiers = arn.qualifiers
    if len(qualifiers) < 2:
        return None
    return regional_url(arn, f"amazon-mq/home?region={arn.region}#/brokers/details?id={qualifiers[1]}")


LINK_TEMPLATES: dict[str, ServiceTemplates] = {
    "appflow": {  # Amazon AppFlow
        "connectorprofile": None,
        "flow": lambda arn: regional_url(arn, f"appflow/home?region={arn.region}#/details/{arn.resource}"),
    },
    "appsync": {  # AWS AppSync
        "apis": lambda arn: regional_url(
            arn, f"appsync/home?region={arn.region}#/{arn.resource.split('/')[0]}/v1/home"
        ),
    },
    "events": {  # Amazon EventBridge
        "event-bus": lambda arn: _events(arn, f"eventbus/{arn.resource}"),
        "event-source": None,
        "rule": _events_rule,
    },
    "firehose": {  # Amazon Kinesis Data Firehose
        "deliverystream": lambda arn: regional_url(
            arn, f"firehose/home?region={arn.region}#/details/{arn.resource}/monitoring"
        ),
    },
    "kafka": {  # Amazon Managed Streaming for Apache Kafka
        "cluster": lambda arn: regional_url(
            arn, f"msk/home?region={arn.region}#/cluster/{quote(arn.string, safe='')}/view"
        ),
    },
    "kinesis": {  # Amazon Kinesis Data Streams
        "stream": lambda arn: regional_url(
            arn, f"kinesis/home?region={arn.region}#/streams/details/{arn.resource}/monitoring"
        ),
    },
    "kinesisanalytics": {  # Amazon Kinesis Data Analytics
        "application": lambda arn: regional_url(arn, f"flink/home?region={arn.region}#/application/{arn.resource}"),
    },
    "kinesisvideo": {  # Amazon Kinesis Video Streams
        "channel": None,
        # stream/<name>/<creation-time>
        "stream": lambda arn: regional_url(
            arn, f"kinesisvideo/home?region={arn.region}#/streams/streamName/{arn.path_all_but_last or arn.resource}"
        ),
    },
    "mq": {  # Amazon MQ
        "broker": _mq_broker,
        "configuration": None,
    },
    "schemas": {  # Amazon EventBridge Schemas
        "discoverer": None,
        "registry": lambda arn: _events(arn, f"registries/{arn.resource}"),
        "schema": _schema,
    },
    "sns": {  # Amazon SNS
        "": lambda arn: regional_url(arn, f"sns/v3/home?region={arn.region}#/topic/{arn.string}"),
    },
    "sqs": {  # Amazon SQS
        "": _sqs_queue,
    },
    "states": {  # AWS Step Functions
        "activity": lambda arn: _states(arn, f"activities/{arn.string}"),
        "execution": lambda arn: _states(arn, f"v2/executions/details/{arn.string}"),
        "stateMachine": lambda arn: _states(arn, f"statemachines/view/{arn.string}"),
    },
    "swf": {  # Amazon Simple Workflow Service
        "domain": None,
    },
}
