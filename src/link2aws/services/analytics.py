"""Analytics and machine learning."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..core.aws_console import regional_url

if TYPE_CHECKING:
    from ..core.arn import ParsedArn
    from ..core.types import LinkBuilder, ServiceTemplates


def _glue(arn: ParsedArn, route: str) -> str:
    return regional_url(arn, f"glue/home?region={arn.region}#/v2/data-catalog/{route}")


def _glue_table(arn: ParsedArn) -> str | None:
    # table/<database>/<table>
    database = arn.path_all_but_last
    if not database:
        return None
    return _glue(arn, f"tables/view/{arn.path_last}?database={database}")


def _sagemaker(section: str) -> LinkBuilder:
    def build(arn: ParsedArn) -> str:
        return regional_url(arn, f"sagemaker/home?region={arn.region}#/{section}/{arn.resource}")

    return build


LINK_TEMPLATES: dict[str, ServiceTemplates] = {
    "athena": {  # Amazon Athena
        "datacatalog": lambda arn: regional_url(
            arn, f"athena/home?region={arn.region}#/data-sources/details/{arn.resource}"
        ),
        "workgroup": lambda arn: regional_url(arn, f"athena/home?region={arn.region}#/workgroups/details/{arn.resource}"),
    },
    "cloudsearch": {  # Amazon CloudSearch
        "domain": None,
    },
    "comprehend": {  # Amazon Comprehend
        "document-classifier": None,
        "document-classifier-endpoint": None,
        "entity-recognizer": None,
    },
    "dataexchange": {  # AWS Data Exchange
        "data-sets": None,
        "jobs": None,
    },
    "deepcomposer": {  # AWS DeepComposer
        "audio": None,
        "composition": None,
        "model": None,
    },
    "deeplens": {  # AWS DeepLens
        "device": None,
        "model": None,
        "project": None,
    },
    "deepracer": {  # AWS DeepRacer
        "evaluation_job": None,
        "leaderboard": None,
        "leaderboard_evaluation_job": None,
        "model": None,
        "track": None,
        "training_job": None,
    },
    "elasticmapreduce": {  # Amazon EMR
        "cluster": lambda arn: regional_url(arn, f"emr/home?region={arn.region}#/clusterDetails/{arn.resource}"),
        "editor": None,
    },
    "es": {  # Amazon OpenSearch Service
        "domain": lambda arn: regional_url(arn, f"esv3/home?region={arn.region}#opensearch/domains/{arn.resource}"),
    },
    "forecast": {  # Amazon Forecast
        "algorithm": None,
        "dataset": None,
        "dataset-group": None,
        "dataset-import-job": None,
        "forecast": None,
        "forecast-export-job": None,
        "predictor": None,
    },
    "glue": {  # AWS Glue
        "catalog": None,
        "connection": None,
        "crawler": lambda arn: _glue(arn, f"crawlers/view/{arn.resource}"),
        "database": lambda arn: _glue(arn, f"databases/view/{arn.resource}"),
        "devendpoint": None,
        "job": lambda arn: regional_url(arn, f"gluestudio/home?region={arn.region}#/editor/job/{arn.resource}/details"),
        "mlTransform": None,
        "table": _glue_table,
        "tableVersion": None,
        "trigger": None,
        "userDefinedFunction": None,
        "workflow": None,
    },
    "kendra": {  # Amazon Kendra
        "index": None,
    },
    "lex": {  # Amazon Lex
        "bot": None,
        "bot-channel": None,
        "intent": None,
        "slottype": None,
    },
    "machinelearning": {  # Amazon Machine Learning
        "batchprediction": None,
        "datasource": None,
        "evaluation": None,
        "mlmodel": None,
    },
    "personalize": {  # Amazon Personalize
        "algorithm": None,
        "campaign": None,
        "dataset": None,
        "dataset-group": None,
        "dataset-import-job": None,
        "event-tracker": None,
        "feature-transformation": None,
        "recipe": None,
        "schema": None,
        "solution": None,
    },
    "polly": {  # Amazon Polly
        "lexicon": None,
    },
    "quicksight": {  # Amazon QuickSight
        "assignment": None,
        "dashboard": None,
        "group": None,
        "template": None,
        "user": None,
    },
    "rekognition": {  # Amazon Rekognition
        "collection": None,
        "project": None,
        "streamprocessor": None,
    },
    "sagemaker": {  # Amazon SageMaker
        "algorithm": None,
        "app": None,
        "automl-job": None,
        "code-repository": None,
        "compilation-job": None,
        "domain": None,
        "endpoint": _sagemaker("endpoints"),
        "endpoint-config": _sagemaker("endpointConfig"),
        "experiment": None,
        "experiment-trial": None,
        "experiment-trial-component": None,
        "flow-definition": None,
        "human-loop": None,
        "human-task-ui": None,
        "hyper-parameter-tuning-job": _sagemaker("hyper-tuning-jobs"),
        "labeling-job": _sagemaker("labeling-jobs"),
        "model": _sagemaker("models"),
        "model-package": None,
        "monitoring-schedule": None,
        "notebook-instance": _sagemaker("notebook-instances"),
        "notebook-instance-lifecycle-config": None,
        "processing-job": _sagemaker("processing-jobs"),
        "training-job": _sagemaker("jobs"),
        "transform-job": _sagemaker("transform-jobs"),
        "user-profile": None,
        "workforce": None,
        "workteam": None,
    },
}
