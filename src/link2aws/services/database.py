"""Databases: DynamoDB, RDS, Redshift, ElastiCache and the rest."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..core.aws_console import regional_url

if TYPE_CHECKING:
    from ..core.arn import ParsedArn
    from ..core.types import ServiceTemplates


def _dynamodb_table(arn: ParsedArn) -> str | None:
    # table/<name>/stream/<label> and table/<name>/index/<index> are not linked
    if "/" in arn.resource:
        return None
    return regional_url(arn, f"dynamodbv2/home?region={arn.region}#table?name={arn.resource}")


def _rds(arn: ParsedArn, route: str) -> str:
    return regional_url(arn, f"rds/home?region={arn.region}#{route}")


def _elasticache(arn: ParsedArn, route: str) -> str:
    return regional_url(arn, f"elasticache/home?region={arn.region}#/{route}")


LINK_TEMPLATES: dict[str, ServiceTemplates] = {
    "cassandra": {  # Amazon Keyspaces (for Apache Cassandra)
        "": None,
    },
    "dax": {  # Amazon DynamoDB Accelerator (DAX)
        "cache": None,
    },
    "dms": {  # AWS Database Migration Service
        "cert": None,
        "endpoint": None,
        "es": None,
        "rep": None,
        "subgrp": None,
        "task": None,
    },
    "dynamodb": {  # Amazon DynamoDB
        "global-table": None,
        "table": _dynamodb_table,
    },
    "elasticache": {  # Amazon ElastiCache
        "cluster": lambda arn: _elasticache(arn, f"redis/{arn.resource}"),
        "parametergroup": None,
        "replicationgroup": lambda arn: _elasticache(arn, f"redis/{arn.resource}"),
        "snapshot": None,
        "subnetgroup": None,
    },
    "neptune-db": {  # Amazon Neptune
    },
    "qldb": {  # Amazon QLDB
        "ledger": None,
        "stream": None,
    },
    "rds": {  # Amazon RDS
        "cluster": lambda arn: _rds(arn, f"database:id={arn.resource};is-cluster=true"),
        "cluster-endpoint": None,
        "cluster-pg": None,
        "cluster-snapshot": lambda arn: _rds(arn, f"db-cluster-snapshot:id={arn.resource}"),
        "db": lambda arn: _rds(arn, f"database:id={arn.resource};is-cluster=false"),
        "db-proxy": None,
        "es": None,
        "og": None,
        "pg": lambda arn: _rds(arn, f"parameter-groups-detail:ids={arn.resource};type=DbParameterGroup;editing=false"),
        "ri": None,
        "secgrp": None,
        "snapshot": lambda arn: _rds(arn, f"db-snapshot:id={arn.resource}"),
        "subgrp": lambda arn: _rds(arn, f"db-subnet-group:id={arn.resource}"),
        "target": None,
        "target-group": None,
    },
    "rds-db": {  # Amazon RDS IAM Authentication
        "dbuser": None,
    },
    "redshift": {  # Amazon Redshift
        "cluster": lambda arn: regional_url(
            arn, f"redshiftv2/home?region={arn.region}#cluster-details?cluster={arn.resource}"
        ),
        "dbgroup": None,
        "dbname": None,
        "dbuser": None,
        "eventsubscription": None,
        "hsmclientcertificate": None,
        "hsmconfiguration": None,
        "parametergroup": None,
        "securitygroup": None,
        "securitygroupingress": None,
        "snapshot": None,
        "snapshotcopygrant": None,
        "snapshotschedule": None,
        "subnetgroup": None,
    },
    "sdb": {  # Amazon SimpleDB
        "domain": None,
    },
}
