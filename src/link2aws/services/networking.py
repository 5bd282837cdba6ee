"""Networking and content delivery."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..core.aws_console import global_url, regional_url

if TYPE_CHECKING:
    from ..core.arn import ParsedArn
    from ..core.types import ServiceTemplates


def _api(arn: ParsedArn) -> str | None:
    """/restapis/<id>, /restapis/<id>/stages/<stage> and /apis/<id>"""
    parts = arn.resource.split("/")
    if len(parts) < 3 or parts[0] or not parts[2]:
        return None
    kind, api_id = parts[1], parts[2]
    if kind == "apis":
        return regional_url(arn, f"apigateway/main/api-detail?api={api_id}&region={arn.region}")
    if kind != "restapis":
        return None
    if len(parts) > 4 and parts[3] == "stages" and parts[4]:
        return regional_url(arn, f"apigateway/home?region={arn.region}#/apis/{api_id}/stages/{parts[4]}")
    return regional_url(arn, f"apigateway/home?region={arn.region}#/apis/{api_id}/resources")


def _load_balancer(arn: ParsedArn) -> str:
    # Application and network load balancers are app/<name>/<id> or net/<name>/<id>,
    # classic load balancers are just <name>.
    if "/" in arn.resource:
        return regional_url(arn, f"ec2/home?region={arn.region}#LoadBalancer:loadBalancerArn={arn.string}")
    return regional_url(arn, f"ec2/home?region={arn.region}#LoadBalancers:search={arn.resource}")


LINK_TEMPLATES: dict[str, ServiceTemplates] = {
    "apigateway": {  # Amazon API Gateway
        "": _api,
    },
    "cloudfront": {  # Amazon CloudFront
        "distribution": lambda arn: global_url(arn, f"cloudfront/v4/home#/distributions/{arn.resource}"),
        "origin-access-identity": None,
        "streaming-distribution": None,
    },
    "directconnect": {  # AWS Direct Connect
        "dx-gateway": None,
        "dxcon": None,
        "dxlag": None,
        "dxvif": None,
    },
    "elasticloadbalancing": {  # Elastic Load Balancing
        "listener": None,
        "listener-rule": None,
        "loadbalancer": _load_balancer,
        "targetgroup": lambda arn: regional_url(
            arn, f"ec2/home?region={arn.region}#TargetGroup:targetGroupArn={arn.string}"
        ),
    },
    "execute-api": {  # Amazon API Gateway execution
    },
    "globalaccelerator": {  # AWS Global Accelerator
        "accelerator": None,
    },
    "networkmanager": {  # Network Manager
        "device": None,
        "global-network": None,
        "link": None,
        "site": None,
    },
    "route53": {  # Amazon Route 53
        "change": None,
        "delegationset": None,
        "healthcheck": lambda arn: global_url(arn, "route53/healthchecks/home"),
        "hostedzone": lambda arn: global_url(arn, f"route53/home?#resource-record-sets:{arn.resource}"),
        "queryloggingconfig": None,
        "trafficpolicy": lambda arn: global_url(arn, f"route53/trafficflow/home#/policy/{arn.resource}"),
        "trafficpolicyinstance": lambda arn: global_url(
            arn, f"route53/trafficflow/home#/modify-records/edit/{arn.resource}"
        ),
    },
    "route53resolver": {  # Amazon Route 53 Resolver
        "resolver-endpoint": None,
        "resolver-rule": None,
    },
    "servicediscovery": {  # AWS Cloud Map
        "namespace": lambda arn: regional_url(arn, f"cloudmap/home?region={arn.region}#/namespaces/{arn.resource}"),
        "service": None,
    },
}
