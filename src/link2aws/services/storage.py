"""Storage: S3, EFS, FSx, Glacier, Backup, DataSync, Storage Gateway."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..core.aws_console import regional_url

if TYPE_CHECKING:
    from ..core.arn import ParsedArn
    from ..core.types import ServiceTemplates


def _s3(arn: ParsedArn, path: str) -> str:
    return f"https://s3.{arn.console}/{path}"


def _backup(arn: ParsedArn, route: str) -> str:
    return regional_url(arn, f"backup/home?region={arn.region}#/{route}")


def _datasync(arn: ParsedArn, route: str) -> str:
    return regional_url(arn, f"datasync/home?region={arn.region}#/{route}")


def _datasync_task(arn: ParsedArn) -> str:
    # task/<task-id>/execution/<exec-id>
    task_id, _, execution = arn.resource.partition("/execution/")
    if execution:
        return _datasync(arn, f"history/{task_id}/{execution}")
    return _datasync(arn, f"tasks/{task_id}")


def _efs(arn: ParsedArn, route: str) -> str:
    return regional_url(arn, f"efs/home?region={arn.region}#/{route}")


def _fsx(arn: ParsedArn, route: str) -> str:
    return regional_url(arn, f"fsx/home?region={arn.region}#{route}")


LINK_TEMPLATES: dict[str, ServiceTemplates] = {
    "backup": {  # AWS Backup
        "backup-plan": lambda arn: _backup(arn, f"backupplan/details/{arn.resource}"),
        "backup-vault": lambda arn: _backup(arn, f"backupvaults/details/{arn.resource}"),
    },
    "datasync": {  # AWS DataSync
        "agent": lambda arn: _datasync(arn, f"agents/{arn.resource}"),
        "location": lambda arn: _datasync(arn, f"locations/{arn.resource}"),
        "task": _datasync_task,
    },
    "dlm": {  # Amazon Data Lifecycle Manager
        "policy": None,
    },
    "elasticfilesystem": {  # Amazon Elastic File System
        "access-point": lambda arn: _efs(arn, f"access-points/{arn.resource}"),
        "file-system": lambda arn: _efs(arn, f"file-systems/{arn.resource}"),
    },
    "fsx": {  # Amazon FSx
        "backup": lambda arn: _fsx(arn, f"backup-details/{arn.resource}"),
        "file-system": lambda arn: _fsx(arn, f"file-system-details/{arn.resource}"),
        "task": None,
    },
    "glacier": {  # Amazon S3 Glacier
        "vaults": lambda arn: regional_url(arn, f"glacier/home?region={arn.region}#/vault/{arn.resource}/view/details"),
    },
    "s3": {  # Amazon S3
        "": lambda arn: _s3(arn, f"s3/buckets/{arn.resource}"),
        "accesspoint": lambda arn: _s3(arn, f"s3/ap/{arn.account}/{arn.resource}?region={arn.region}"),
        "job": lambda arn: _s3(arn, f"s3/jobs/{arn.resource}?region={arn.region}"),
    },
    "storagegateway": {  # AWS Storage Gateway
        "gateway": None,
        "share": None,
        "tape": None,
    },
}
