"""The link template table: service -> resource type -> link builder.

A resource type mapped to None is known but has no console link yet. The
table lists known types either way so it also documents coverage.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from . import analytics, compute, containers, database, developer, end_user, integration, iot, management, media
from . import networking, security, storage

if TYPE_CHECKING:
    from types import ModuleType

    from ..core.types import LinkTemplateTable, ServiceCoverage

SERVICE_MODULES: tuple[ModuleType, ...] = (
    analytics,
    compute,
    containers,
    database,
    developer,
    end_user,
    integration,
    iot,
    management,
    media,
    networking,
    security,
    storage,
)


def merge_templates(modules: tuple[ModuleType, ...]) -> LinkTemplateTable:
    """Merge the per-family tables, refusing a service defined twice."""
    table: LinkTemplateTable = {}
    for module in modules:
        for service, templates in module.LINK_TEMPLATES.items():
            if service in table:
                raise ValueError(f"Service {service!r} defined in more than one module ({module.__name__})")
            table[service] = templates
    return dict(sorted(table.items()))


LINK_TEMPLATES: LinkTemplateTable = merge_templates(SERVICE_MODULES)


def coverage() -> list[ServiceCoverage]:
    """Known and linked resource types for every service, sorted by service."""
    return [
        {
            "service": service,
            "known_types": len(templates),
            "linked_types": sum(1 for builder in templates.values() if builder is not None),
            "linked": sorted(resource_type for resource_type, builder in templates.items() if builder is not None),
        }
        for service, templates in LINK_TEMPLATES.items()
    ]
