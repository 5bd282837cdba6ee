"""End user computing, business applications and the remaining catalogue."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..core.aws_console import regional_url

if TYPE_CHECKING:
    from ..core.arn import ParsedArn
    from ..core.types import ServiceTemplates


def _connect_instance(arn: ParsedArn) -> str | None:
    # instance/<id>/queue/<queue-id> and friends are not linked
    if "/" in arn.resource:
        return None
    return regional_url(arn, f"connect/v2/app/instances/{arn.resource}")


def _transfer_user(arn: ParsedArn) -> str | None:
    # user/<server-id>/<user-name>
    server_id = arn.path_all_but_last
    if not server_id:
        return None
    return regional_url(arn, f"transfer/home?region={arn.region}#/servers/{server_id}/users/{arn.path_last}")


LINK_TEMPLATES: dict[str, ServiceTemplates] = {
    "a4b": {  # Alexa for Business
        "address-book": None,
        "conference-provider": None,
        "contact": None,
        "device": None,
        "network-profile": None,
        "profile": None,
        "room": None,
        "schedule": None,
        "skill-group": None,
        "user": None,
    },
    "appstream": {  # Amazon AppStream 2.0
        "fleet": None,
        "image": None,
        "image-builder": None,
        "stack": None,
    },
    "chime": {  # Amazon Chime
        "meeting": None,
    },
    "clouddirectory": {  # Amazon Cloud Directory
        "directory": None,
        "schema": None,
    },
    "cloudhsm": {  # AWS CloudHSM
        "backup": None,
        "cluster": None,
    },
    "connect": {  # Amazon Connect
        "instance": _connect_instance,
    },
    "honeycode": {  # Amazon Honeycode
        "screen": None,
        "screen-automation": None,
    },
    "managedblockchain": {  # Amazon Managed Blockchain
        "invitations": None,
        "members": None,
        "networks": None,
        "nodes": None,
        "proposals": None,
    },
    "mobiletargeting": {  # Amazon Pinpoint
        "apps": None,
        "recommenders": None,
        "templates": None,
    },
    "ses": {  # Amazon SES
        "configuration-set": None,
        "custom-verification-email-template": None,
        "dedicated-ip-pool": None,
        "deliverability-test-report": None,
        "identity": lambda arn: regional_url(arn, f"ses/home?region={arn.region}#/identities/{arn.resource}"),
        "receipt-filter": None,
        "receipt-rule-set": None,
        "template": None,
    },
    "sumerian": {  # Amazon Sumerian
        "project": None,
    },
    "transfer": {  # AWS Transfer Family
        "server": lambda arn: regional_url(arn, f"transfer/home?region={arn.region}#/servers/{arn.resource}"),
        "user": _transfer_user,
    },
    "worklink": {  # Amazon WorkLink
        "fleet": None,
    },
    "workmail": {  # Amazon WorkMail
        "organization": None,
    },
    "workmailmessageflow": {  # Amazon WorkMail Message Flow
        "message": None,
    },
    "workspaces": {  # Amazon WorkSpaces
        "directory": None,
        "workspace": lambda arn: regional_url(
            arn, f"workspaces/home?region={arn.region}#listworkspaces:search={arn.resource}"
        ),
        "workspacebundle": None,
        "workspaceipgroup": None,
    },
}
