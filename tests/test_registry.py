"""Tests for the merged link template table."""

from types import SimpleNamespace

import pytest

from link2aws.services.registry import LINK_TEMPLATES, SERVICE_MODULES, coverage, merge_templates


def test_table_covers_the_aws_catalogue():
    assert len(LINK_TEMPLATES) >= 150


def test_table_is_sorted_by_service():
    assert list(LINK_TEMPLATES) == sorted(LINK_TEMPLATES)


def test_every_entry_is_a_builder_or_none():
    for service, templates in LINK_TEMPLATES.items():
        assert isinstance(templates, dict), service
        for resource_type, builder in templates.items():
            assert builder is None or callable(builder), f"{service}:{resource_type}"


def test_resource_type_keys_have_no_stray_whitespace():
    for service, templates in LINK_TEMPLATES.items():
        assert service == service.strip()
        for resource_type in templates:
            assert resource_type == resource_type.strip(), f"{service}:{resource_type!r}"


@pytest.mark.parametrize("service", ["s3", "ec2", "ecs", "lambda", "iam", "logs", "sqs", "sns", "wafv2", "mediaconvert"])
def test_well_known_services_present(service):
    assert service in LINK_TEMPLATES


def test_known_service_with_no_types():
    assert LINK_TEMPLATES["wafv2"] == {}


def test_every_module_contributes():
    for module in SERVICE_MODULES:
        assert module.LINK_TEMPLATES, module.__name__


def test_merge_templates_rejects_duplicate_service():
    first = SimpleNamespace(__name__="first", LINK_TEMPLATES={"s3": {}})
    second = SimpleNamespace(__name__="second", LINK_TEMPLATES={"s3": {"": None}})

    with pytest.raises(ValueError, match="s3"):
        merge_templates((first, second))


def test_merge_templates_sorts_services():
    module = SimpleNamespace(__name__="m", LINK_TEMPLATES={"b": {}, "a": {}})

    assert list(merge_templates((module,))) == ["a", "b"]


def test_coverage():
    rows = {row["service"]: row for row in coverage()}

    assert len(rows) == len(LINK_TEMPLATES)
    assert rows["s3"] == {"service": "s3", "known_types": 3, "linked_types": 3, "linked": ["", "accesspoint", "job"]}
    assert rows["waf"]["linked_types"] == 0
    assert rows["waf"]["known_types"] == 12
    assert "key-pair" not in rows["ec2"]["linked"]
    assert "instance" in rows["ec2"]["linked"]
