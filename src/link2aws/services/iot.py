"""IoT, robotics and satellite services."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..core.aws_console import regional_url

if TYPE_CHECKING:
    from ..core.arn import ParsedArn
    from ..core.types import ServiceTemplates


def _iot(arn: ParsedArn, route: str) -> str:
    return regional_url(arn, f"iot/home?region={arn.region}#/{route}/{arn.resource}")


LINK_TEMPLATES: dict[str, ServiceTemplates] = {
    "freertos": {  # Amazon FreeRTOS
        "configuration": None,
    },
    "greengrass": {  # AWS IoT Greengrass
        "": None,
    },
    "groundstation": {  # AWS Ground Station
        "config": None,
        "contact": None,
        "dataflow-endpoint-group": None,
        "groundstation": None,
        "mission-profile": None,
        "satellite": None,
    },
    "iot": {  # AWS IoT Core
        "authorizer": None,
        "billinggroup": None,
        "cacert": None,
        "cert": lambda arn: _iot(arn, "certificate"),
        "client": None,
        "dimension": None,
        "index": None,
        "job": None,
        "mitigationaction": None,
        "otaupdate": None,
        "policy": lambda arn: _iot(arn, "policy"),
        "provisioningtemplate": None,
        "rolealias": None,
        "rule": lambda arn: _iot(arn, "rule"),
        "scheduledaudit": None,
        "securityprofile": None,
        "stream": None,
        "thing": lambda arn: _iot(arn, "thing"),
        "thinggroup": lambda arn: _iot(arn, "thinggroup"),
        "thingtype": lambda arn: _iot(arn, "thingtype"),
        "topic": None,
        "topicfilter": None,
        "tunnel": None,
    },
    "iot1click": {  # AWS IoT 1-Click
        "devices": None,
        "projects": None,
    },
    "iotanalytics": {  # AWS IoT Analytics
        "channel": None,
        "dataset": None,
        "datastore": None,
        "pipeline": None,
    },
    "iotevents": {  # AWS IoT Events
        "detectorModel": None,
        "input": None,
    },
    "iotsitewise": {  # AWS IoT SiteWise
        "access-policy": None,
        "asset": None,
        "asset-model": None,
        "dashboard": None,
        "gateway": None,
        "portal": None,
        "project": None,
    },
    "iotthingsgraph": {  # AWS IoT Things Graph
        "Deployment": None,
        "System": None,
        "Workflow": None,
    },
    "robomaker": {  # AWS RoboMaker
        "deployment-fleet": None,
        "deployment-job": None,
        "robot": None,
        "robot-application": None,
        "simulation-application": None,
        "simulation-job": None,
        "simulation-job-batch": None,
    },
}
