"""Containers: ECS, ECR, EKS, App Mesh."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..core.aws_console import regional_url

if TYPE_CHECKING:
    from ..core.arn import ParsedArn
    from ..core.types import ServiceTemplates


def _ecs_cluster(arn: ParsedArn) -> str:
    return regional_url(arn, f"ecs/v2/clusters/{arn.resource}")


def _ecs_service(arn: ParsedArn) -> str | None:
    # Old style service ARNs (service/<name>) carry no cluster name.
    cluster_name = arn.path_all_but_last
    if not cluster_name:
        return None
    return regional_url(arn, f"ecs/v2/clusters/{cluster_name}/services/{arn.path_last}")


def _ecs_task(arn: ParsedArn) -> str | None:
    cluster_name = arn.path_all_but_last
    if not cluster_name:
        return None
    return regional_url(arn, f"ecs/v2/clusters/{cluster_name}/tasks/{arn.path_last}")


def _ecs_task_definition(arn: ParsedArn) -> str:
    """task-definition/<family>:<revision>"""
    if arn.resource_revision:
        return regional_url(arn, f"ecs/v2/task-definitions/{arn.resource}/{arn.resource_revision}")
    return regional_url(arn, f"ecs/v2/task-definitions/{arn.resource}")


def _eks(arn: ParsedArn, route: str) -> str:
    return regional_url(arn, f"eks/home?region={arn.region}#/clusters/{route}")


def _eks_nodegroup(arn: ParsedArn) -> str | None:
    # nodegroup/<cluster>/<nodegroup>/<uuid>
    parts = arn.resource.split("/")
    if len(parts) < 2:
        return None
    return _eks(arn, f"{parts[0]}/nodegroups/{parts[1]}")


def _eks_fargate_profile(arn: ParsedArn) -> str | None:
    parts = arn.resource.split("/")
    if len(parts) < 2:
        return None
    return _eks(arn, f"{parts[0]}/fargate-profiles/{parts[1]}")


LINK_TEMPLATES: dict[str, ServiceTemplates] = {
    "appmesh": {  # AWS App Mesh
        "mesh": None,
    },
    "appmesh-preview": {  # AWS App Mesh Preview
        "mesh": None,
    },
    "ecr": {  # Amazon Elastic Container Registry
        "repository": lambda arn: regional_url(
            arn, f"ecr/repositories/private/{arn.account}/{arn.resource}?region={arn.region}"
        ),
    },
    "ecs": {  # Amazon Elastic Container Service
        "cluster": _ecs_cluster,
        "container-instance": None,
        "service": _ecs_service,
        "task": _ecs_task,
        "task-definition": _ecs_task_definition,
        "task-set": None,
    },
    "eks": {  # Amazon Elastic Kubernetes Service
        "cluster": lambda arn: _eks(arn, arn.resource),
        "fargateprofile": _eks_fargate_profile,
        "nodegroup": _eks_nodegroup,
    },
}
