"""Developer tools: Amplify, CodeSuite, Cloud9, Device Farm."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

from ..core.aws_console import regional_url, strip_zero_padding

if TYPE_CHECKING:
    from ..core.arn import ParsedArn
    from ..core.types import ServiceTemplates


def _amplify_app(arn: ParsedArn) -> str | None:
    """Only build jobs are linked: apps/<app-id>/branches/<branch>/jobs/<job-id>."""
    parts = arn.resource.split("/")
    if len(parts) != 5 or parts[1] != "branches" or parts[3] != "jobs":
        return None
    app_id, branch, job_id = parts[0], parts[2], strip_zero_padding(parts[4])
    return regional_url(arn, f"amplify/home?region={arn.region}#/{app_id}/{branch}/{job_id}")


def _codesuite(arn: ParsedArn, path: str) -> str:
    return regional_url(arn, f"codesuite/{path}?region={arn.region}")


def _codebuild_build(arn: ParsedArn) -> str:
    # build/<project>:<build-uuid>
    build_id = quote(f"{arn.resource}:{arn.resource_revision}", safe="")
    return _codesuite(arn, f"codebuild/{arn.account}/projects/{arn.resource}/build/{build_id}/")


def _codeartifact_repository(arn: ParsedArn) -> str | None:
    # repository/<domain>/<repository>
    domain = arn.path_all_but_last
    if not domain:
        return None
    return _codesuite(arn, f"codeartifact/d/{arn.account}/{domain}/r/{arn.path_last}")


def _deployment_group(arn: ParsedArn) -> str | None:
    # deploymentgroup:<application>/<group>
    application = arn.path_all_but_last
    if not application:
        return None
    return _codesuite(arn, f"codedeploy/applications/{application}/deployment-groups/{arn.path_last}")


LINK_TEMPLATES: dict[str, ServiceTemplates] = {
    "amplify": {  # AWS Amplify
        "apps": _amplify_app,
    },
    "cloud9": {  # AWS Cloud9
        "environment": lambda arn: regional_url(arn, f"cloud9/ide/{arn.resource}"),
    },
    "codeartifact": {  # AWS CodeArtifact
        "domain": lambda arn: _codesuite(arn, f"codeartifact/d/{arn.account}/{arn.resource}"),
        "package": None,
        "repository": _codeartifact_repository,
    },
    "codebuild": {  # AWS CodeBuild
        "build": _codebuild_build,
        "project": lambda arn: _codesuite(arn, f"codebuild/{arn.account}/projects/{arn.resource}"),
        "report": None,
        "report-group": lambda arn: _codesuite(arn, f"codebuild/{arn.account}/testReports/reportGroups/{arn.resource}"),
    },
    "codecommit": {  # AWS CodeCommit
        "": lambda arn: _codesuite(arn, f"codecommit/repositories/{arn.resource}/browse"),
    },
    "codedeploy": {  # AWS CodeDeploy
        "application": lambda arn: _codesuite(arn, f"codedeploy/applications/{arn.resource}"),
        "deploymentconfig": None,
        "deploymentgroup": _deployment_group,
        "instance": None,
    },
    "codeguru-profiler": {  # Amazon CodeGuru Profiler
        "profilingGroup": None,
    },
    "codeguru-reviewer": {  # Amazon CodeGuru Reviewer
        ".+": None,
        "association": None,
    },
    "codepipeline": {  # AWS CodePipeline
        "": lambda arn: _codesuite(arn, f"codepipeline/pipelines/{arn.resource}/view"),
        "actiontype": None,
        "webhook": None,
    },
    "codestar": {  # AWS CodeStar
        "project": None,
    },
    "codestar-connections": {  # AWS CodeStar Connections
        "connection": lambda arn: _codesuite(arn, f"settings/{arn.account}/{arn.region}/connections/{arn.resource}"),
    },
    "codestar-notifications": {  # AWS CodeStar Notifications
        "notificationrule": None,
    },
    "devicefarm": {  # AWS Device Farm
        "artifact": None,
        "device": None,
        "deviceinstance": None,
        "devicepool": None,
        "instanceprofile": None,
        "job": None,
        "networkprofile": None,
        "project": None,
        "run": None,
        "sample": None,
        "session": None,
        "suite": None,
        "test": None,
        "testgrid-project": None,
        "testgrid-session": None,
        "upload": None,
        "vpceconfiguration": None,
    },
    "mobilehub": {  # AWS Mobile Hub
        "project": None,
    },
    "serverlessrepo": {  # AWS Serverless Application Repository
        "applications": None,
    },
}
