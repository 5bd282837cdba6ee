"""Security, identity and compliance."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING
from urllib.parse import quote

from ..core.aws_console import global_url, regional_url

if TYPE_CHECKING:
    from ..core.arn import ParsedArn
    from ..core.types import ServiceTemplates

_SECRET_SUFFIX = re.compile(r"-[A-Za-z0-9]{6}$")

_WAF_TYPES = (
    "bytematchset",
    "geomatchset",
    "ipset",
    "ratebasedrule",
    "regexmatch",
    "regexpatternset",
    "rule",
    "rulegroup",
    "sizeconstraintset",
    "sqlinjectionset",
    "webacl",
    "xssmatchset",
)


def _iam(arn: ParsedArn, route: str) -> str:
    return global_url(arn, f"iam/home?#/{route}")


def _secret(arn: ParsedArn) -> str:
    # Secrets Manager appends "-" and six random characters to the secret name.
    name = _SECRET_SUFFIX.sub("", arn.resource)
    return regional_url(arn, f"secretsmanager/secret?name={quote(name, safe='')}&region={arn.region}")


def _identity_pool(arn: ParsedArn) -> str:
    # Pool ids look like <region>:<uuid>, so the tokenizer splits them in two.
    pool_id = f"{arn.resource}:{arn.resource_revision}" if arn.resource_revision else arn.resource
    return regional_url(arn, f"cognito/v2/identity/identity-pools/{pool_id}?region={arn.region}")


LINK_TEMPLATES: dict[str, ServiceTemplates] = {
    "access-analyzer": {  # IAM Access Analyzer
        "analyzer": lambda arn: regional_url(
            arn, f"access-analyzer/home?region={arn.region}#/analyzer/{arn.resource}"
        ),
    },
    "acm": {  # AWS Certificate Manager
        "certificate": lambda arn: global_url(arn, f"acm/home?region={arn.region}#/?id={arn.resource}"),
    },
    "acm-pca": {  # AWS Certificate Manager Private Certificate Authority
        "certificate-authority": lambda arn: regional_url(
            arn, f"acm-pca/home?region={arn.region}#/details?arn={quote(arn.string, safe='')}"
        ),
    },
    "artifact": {  # AWS Artifact
        "agreement": None,
        "customer-agreement": None,
        "report-package": None,
    },
    "cognito-identity": {  # Amazon Cognito Identity
        "identitypool": _identity_pool,
    },
    "cognito-idp": {  # Amazon Cognito User Pools
        "userpool": lambda arn: regional_url(
            arn, f"cognito/v2/idp/user-pools/{arn.resource}/users?region={arn.region}"
        ),
    },
    "cognito-sync": {  # Amazon Cognito Sync
        "identitypool": None,
    },
    "detective": {  # Amazon Detective
        "graph": None,
    },
    "ds": {  # AWS Directory Service
        "directory": lambda arn: regional_url(
            arn, f"directoryservicev2/home?region={arn.region}#!/directories/{arn.resource}"
        ),
    },
    "fms": {  # AWS Firewall Manager
        "policy": None,
    },
    "guardduty": {  # Amazon GuardDuty
        "detector": None,
    },
    "iam": {  # AWS Identity and Access Management
        "access-report": None,
        "assumed-role": None,
        "federated-user": None,
        "group": lambda arn: global_url(arn, f"iamv2/home#/groups/details/{arn.path_last}"),
        "instance-profile": None,
        "mfa": None,
        "oidc-provider": lambda arn: _iam(arn, f"providers/{arn.string}"),
        "policy": lambda arn: _iam(arn, f"policies/{arn.string}"),
        "role": lambda arn: _iam(arn, f"roles/{arn.path_last}"),
        "saml-provider": lambda arn: _iam(arn, f"providers/{arn.string}"),
        "server-certificate": None,
        "sms-mfa": None,
        "user": lambda arn: _iam(arn, f"users/{arn.path_last}"),
    },
    "kms": {  # AWS Key Management Service
        "alias": None,
        "key": lambda arn: regional_url(arn, f"kms/home?region={arn.region}#/kms/keys/{arn.resource}"),
    },
    "macie2": {  # Amazon Macie
        "classification-job": None,
        "custom-data-identifier": None,
        "findings-filter": None,
        "member": None,
    },
    "ram": {  # AWS Resource Access Manager
        "permission": None,
        "resource-share": None,
        "resource-share-invitation": None,
    },
    "secretsmanager": {  # AWS Secrets Manager
        "secret": _secret,
    },
    "securityhub": {  # AWS Security Hub
        "hub": lambda arn: regional_url(arn, f"securityhub/home?region={arn.region}#/summary"),
        "product": None,
    },
    "shield": {  # AWS Shield
        "attack": None,
        "protection": None,
    },
    "signer": {  # AWS Signer
        "": None,
    },
    "waf": dict.fromkeys(_WAF_TYPES),  # AWS WAF
    "waf-regional": dict.fromkeys(_WAF_TYPES),  # AWS WAF Regional
    "wafv2": {  # AWS WAF V2
    },
}
