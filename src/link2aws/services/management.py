"""Management and governance: CloudFormation, CloudWatch, Systems Manager, Organizations."""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

from ..core.aws_console import console_escape, global_url, regional_url

if TYPE_CHECKING:
    from ..core.arn import ParsedArn
    from ..core.types import ServiceTemplates


def _cloudformation(arn: ParsedArn, route: str) -> str:
    return regional_url(arn, f"cloudformation/home?region={arn.region}#/{route}")


def _cloudwatch(arn: ParsedArn, route: str) -> str:
    return regional_url(arn, f"cloudwatch/home?region={arn.region}#{route}")


def _log_group(arn: ParsedArn) -> str:
    """log-group:<name>[:*] and log-group:<name>:log-stream:<stream>"""
    group, _, stream = arn.resource.partition(":log-stream:")
    route = f"logsV2:log-groups/log-group/{console_escape(group.removesuffix(':*'))}"
    if stream and stream != "*":
        route = f"{route}/log-events/{console_escape(stream)}"
    return _cloudwatch(arn, route)


def _systems_manager(arn: ParsedArn, path: str) -> str:
    return regional_url(arn, f"systems-manager/{path}?region={arn.region}")


def _parameter(arn: ParsedArn) -> str:
    # parameter/a/b is the ARN of the hierarchical parameter /a/b
    name = f"/{arn.resource}" if "/" in arn.resource else arn.resource
    return _systems_manager(arn, f"parameters/{quote(name, safe='')}/description")


def _organizations(arn: ParsedArn, path: str) -> str:
    return global_url(arn, f"organizations/v2/home/{path}")


def _organizations_policy(arn: ParsedArn) -> str | None:
    # policy/<org-id or "aws">/<policy-type>/<policy-id>
    parts = arn.resource.split("/")
    if len(parts) < 3:
        return None
    return _organizations(arn, f"policies/{parts[1]}/{parts[2]}")


def _conformance_pack(arn: ParsedArn) -> str:
    name = arn.path_all_but_last or arn.resource
    return regional_url(arn, f"config/home?region={arn.region}#/conformance-packs/details?conformancePackName={name}")


LINK_TEMPLATES: dict[str, ServiceTemplates] = {
    "appconfig": {  # AWS AppConfig
        "application": lambda arn: _systems_manager(arn, f"appconfig/applications/{arn.resource.split('/')[0]}"),
        "deploymentstrategy": None,
    },
    "aws-marketplace": {  # AWS Marketplace Catalog
    },
    "budgets": {  # AWS Budgets
        "budget": lambda arn: global_url(arn, f"billing/home#/budgets/details?name={quote(arn.resource)}"),
    },
    "catalog": {  # AWS Service Catalog
        "portfolio": lambda arn: regional_url(arn, f"servicecatalog/home?region={arn.region}#portfolios/{arn.resource}"),
        "product": lambda arn: regional_url(arn, f"servicecatalog/home?region={arn.region}#admin-products/{arn.resource}"),
    },
    "chatbot": {  # AWS Chatbot
    },
    "cloudformation": {  # AWS CloudFormation
        "changeSet": None,
        "stack": lambda arn: _cloudformation(arn, f"stacks/stackinfo?stackId={quote(arn.string, safe='')}"),
        "stackset": lambda arn: _cloudformation(arn, f"stacksets/{arn.resource}/info"),
    },
    "cloudtrail": {  # AWS CloudTrail
        "trail": lambda arn: regional_url(
            arn, f"cloudtrail/home?region={arn.region}#/trails/{quote(arn.string, safe='')}"
        ),
    },
    "cloudwatch": {  # Amazon CloudWatch
        "alarm": lambda arn: _cloudwatch(arn, f"alarmsV2:alarm/{quote(arn.resource)}"),
        "dashboard": lambda arn: global_url(arn, f"cloudwatch/home#dashboards/dashboard/{arn.resource}"),
        "insight-rule": None,
    },
    "config": {  # AWS Config
        "aggregation-authorization": None,
        "config-aggregator": None,
        "config-rule": None,
        "conformance-pack": _conformance_pack,
        "organization-config-rule": None,
        "organization-conformance-pack": None,
        "remediation-configuration": None,
    },
    "cur": {  # AWS Cost and Usage Report
        "definition": None,
    },
    "health": {  # AWS Health APIs and Notifications
        "event": None,
    },
    "license-manager": {  # AWS License Manager
        "license-configuration": None,
    },
    "logs": {  # Amazon CloudWatch Logs
        "log-group": _log_group,
    },
    "mgh": {  # AWS Migration Hub
        "progressUpdateStream": None,
    },
    "opsworks": {  # AWS OpsWorks
        "stack": None,
    },
    "organizations": {  # AWS Organizations
        "account": lambda arn: _organizations(arn, f"accounts/{arn.path_last}"),
        "handshake": None,
        "organization": lambda arn: global_url(arn, "organizations/v2/home"),
        "ou": lambda arn: _organizations(arn, f"organizational-units/{arn.path_last}"),
        "policy": _organizations_policy,
        "root": lambda arn: _organizations(arn, "root"),
    },
    "pi": {  # AWS Performance Insights
        "metrics": None,
    },
    "resource-groups": {  # AWS Resource Groups
        "group": lambda arn: regional_url(arn, f"resource-groups/group/{arn.resource}?region={arn.region}"),
    },
    "savingsplans": {  # AWS Savings Plans
        "savingsplan": None,
    },
    "servicequotas": {  # Service Quotas
    },
    "ssm": {  # AWS Systems Manager
        "association": None,
        "automation-definition": None,
        "automation-execution": lambda arn: _systems_manager(arn, f"automation/execution/{arn.resource}"),
        "document": lambda arn: _systems_manager(arn, f"documents/{arn.resource}/description"),
        "maintenancewindow": lambda arn: _systems_manager(arn, f"maintenance-windows/{arn.resource}"),
        "managed-instance": lambda arn: _systems_manager(arn, f"fleet-manager/managed-nodes/{arn.resource}/general"),
        "managed-instance-inventory": None,
        "opsitem": lambda arn: _systems_manager(arn, f"opsitems/{arn.resource}"),
        "parameter": _parameter,
        "patchbaseline": None,
        "resource-data-sync": None,
        "servicesetting": None,
        "session": None,
        "windowtarget": None,
        "windowtask": None,
    },
    "synthetics": {  # Amazon CloudWatch Synthetics
        "canary": lambda arn: _cloudwatch(arn, f"synthetics:canary/detail/{arn.resource}"),
    },
    "trustedadvisor": {  # AWS Trusted Advisor
        "checks": None,
    },
    "wellarchitected": {  # AWS Well-Architected Tool
        "workload": lambda arn: regional_url(
            arn, f"wellarchitected/home?region={arn.region}#/workload/{arn.resource}/overview"
        ),
    },
    "xray": {  # AWS X-Ray
        "group": None,
        "sampling-rule": None,
    },
}
