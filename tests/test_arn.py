"""Tests for the ARN tokenizer."""

import pytest

from link2aws.core.arn import MAX_ARN_LENGTH, ArnShape, ParsedArn, parse
from link2aws.core.errors import (
    ArnError,
    InvalidCharactersError,
    InvalidRegionError,
    MalformedArnError,
    TooLongError,
    TypeMismatchError,
)


def test_parse_bare_resource_id():
    arn = parse("arn:partition:service:region:account-id:resource-id")

    assert arn.prefix == "arn"
    assert arn.partition == "partition"
    assert arn.service == "service"
    assert arn.region == "region"
    assert arn.account == "account-id"
    assert arn.resource_type == ""
    assert arn.resource == "resource-id"
    assert arn.resource_revision == ""
    assert arn.shape is ArnShape.BARE
    assert not arn.has_path


def test_parse_type_and_id_separated_by_slash():
    arn = parse("arn:partition:service:region:account-id:resource-type/resource-id")

    assert arn.resource_type == "resource-type"
    assert arn.resource == "resource-id"
    assert arn.shape is ArnShape.PATH
    assert arn.has_path


def test_parse_type_and_id_separated_by_colon():
    arn = parse("arn:partition:service:region:account-id:resource-type:resource-id")

    assert arn.resource_type == "resource-type"
    assert arn.resource == "resource-id"
    assert arn.shape is ArnShape.TYPED
    assert not arn.has_path


def test_parse_path_resource_keeps_further_slashes():
    arn = parse("arn:aws:iam::123456789012:role/aws-service-role/support.amazonaws.com/AWSServiceRoleForSupport")

    assert arn.resource_type == "role"
    assert arn.resource == "aws-service-role/support.amazonaws.com/AWSServiceRoleForSupport"


def test_parse_leading_slash_is_not_a_type_separator():
    arn = parse("arn:aws:apigateway:us-east-1::/restapis/abc123")

    assert arn.resource_type == ""
    assert arn.resource == "/restapis/abc123"
    assert arn.shape is ArnShape.BARE
    assert not arn.has_path
    assert arn.string == "arn:aws:apigateway:us-east-1::/restapis/abc123"


def test_parse_single_leading_slash_is_bare():
    arn = parse("arn:aws:apigateway:us-east-1::/restapis")

    assert arn.resource_type == ""
    assert arn.resource == "/restapis"
    assert arn.shape is ArnShape.BARE


def test_parse_resource_with_colon_qualifiers():
    arn = parse("arn:partition:service:region:account-id:resource-type:q1:q2:q3")

    assert arn.resource_type == "resource-type"
    assert arn.resource == "q1:q2:q3"
    assert arn.qualifiers == ["q1", "q2", "q3"]


def test_parse_path_with_revision():
    arn = parse("arn:aws:ecs:us-east-1:123456789012:task-definition/web:42")

    assert arn.resource_type == "task-definition"
    assert arn.resource == "web"
    assert arn.resource_revision == "42"
    assert arn.shape is ArnShape.PATH_REVISION
    assert arn.has_path


def test_parse_revision_keeps_extra_colons():
    arn = parse("arn:aws:service:us-east-1:123456789012:type/id:rev:extra")

    assert arn.resource == "id"
    assert arn.resource_revision == "rev:extra"


def test_parse_log_group_keeps_slashes_and_wildcard_in_resource():
    arn = parse("arn:aws:logs:us-east-1:123456789012:log-group:/aws/lambda/my-function:*")

    assert arn.resource_type == "log-group"
    assert arn.resource == "/aws/lambda/my-function:*"
    assert arn.shape is ArnShape.TYPED


def test_parse_empty_region_and_account():
    arn = parse("arn:aws:s3:::my-bucket")

    assert arn.region == ""
    assert arn.account == ""
    assert arn.resource == "my-bucket"


def test_parse_strips_surrounding_whitespace():
    arn = parse("  arn:aws:s3:::my-bucket \n")

    assert arn.raw == "arn:aws:s3:::my-bucket"
    assert arn.string == "arn:aws:s3:::my-bucket"


def test_classmethod_parse_matches_function():
    text = "arn:aws:sqs:us-east-1:123456789012:queue"
    assert ParsedArn.parse(text) == parse(text)


@pytest.mark.parametrize(
    "text",
    [
        "arn:partition:service:region:account-id:resource-id",
        "arn:partition:service:region:account-id:resource-type/resource-id",
        "arn:partition:service:region:account-id:resource-type:resource-id",
        "arn:partition:service:region:account-id:/resource-type/resource-id",
        "arn:partition:service:region:account-id:resource-type/resource-id:revision",
        "arn:partition:service:region:account-id:resource-type:q1:q2:q3",
        "arn:partition:service:region:account-id::resource-id",
        "arn:partition:service:region:account-id:resource-type/resource-id:",
        "arn:partition:service:region:account-id:",
        "arn:aws:logs:us-east-1:123456789012:log-group:/aws/lambda/my-function:*",
    ],
)
def test_string_round_trips(text):
    assert parse(text).string == text


def test_str_is_canonical_string():
    text = "arn:aws:ecs:us-east-1:123456789012:cluster/production"
    assert str(parse(text)) == text


def test_path_accessors():
    arn = parse("arn:aws:iam::123456789012:role/aws-service-role/support.amazonaws.com/AWSServiceRoleForSupport")

    assert arn.path_all_but_last == "aws-service-role/support.amazonaws.com"
    assert arn.path_last == "AWSServiceRoleForSupport"


def test_path_accessors_without_slash():
    arn = parse("arn:aws:ecs:us-east-1:123456789012:cluster/production")

    assert arn.path_all_but_last == ""
    assert arn.path_last == "production"


def test_qualifiers_without_colon():
    arn = parse("arn:aws:lambda:us-east-1:123456789012:function:my-function")
    assert arn.qualifiers == ["my-function"]


def test_parsed_arn_is_immutable():
    arn = parse("arn:aws:s3:::my-bucket")
    with pytest.raises(AttributeError):
        arn.resource = "other"  # type: ignore[misc]


def test_to_dict():
    arn = parse("arn:aws:ecs:us-east-1:123456789012:task-definition/web:42")

    assert arn.to_dict() == {
        "prefix": "arn",
        "partition": "aws",
        "service": "ecs",
        "region": "us-east-1",
        "account": "123456789012",
        "resource_type": "task-definition",
        "resource": "web",
        "resource_revision": "42",
        "shape": "resource-type/resource-id:revision",
    }


def test_shape_formats_as_its_layout():
    arn = parse("arn:aws:sqs:us-east-1:123456789012:queue")

    assert str(arn.shape) == "resource-id"
    assert f"{ArnShape.TYPED}" == "resource-type:resource-id"


@pytest.mark.parametrize("value", [None, 123, [], {}, b"arn:aws:s3:::bucket"])
def test_rejects_non_strings(value):
    with pytest.raises(TypeMismatchError):
        parse(value)


def test_type_mismatch_is_also_a_type_error():
    with pytest.raises(TypeError):
        parse(123)


def test_rejects_too_few_tokens():
    with pytest.raises(MalformedArnError, match="bad number of tokens"):
        parse("foo")


def test_rejects_five_tokens():
    with pytest.raises(MalformedArnError):
        parse("arn:aws:s3:region:account")


def test_rejects_too_long_input():
    with pytest.raises(TooLongError):
        parse("arn:aws:s3:::" + "a" * 3000)


def test_accepts_input_at_length_limit():
    text = "arn:aws:s3:::" + "a" * (MAX_ARN_LENGTH - len("arn:aws:s3:::"))
    assert parse(text).resource == "a" * (MAX_ARN_LENGTH - len("arn:aws:s3:::"))


def test_length_is_checked_after_stripping():
    text = "arn:aws:s3:::bucket" + " " * 3000
    assert parse(text).resource == "bucket"


@pytest.mark.parametrize(
    "text",
    [
        "arn:aws:s3:::<script>alert(1)</script>",
        "arn:aws:s3:::bucket?x=1",
        "arn:aws:s3:::bucket%2F",
        'arn:aws:s3:::"bucket"',
        "arn:aws:s3:::bucket\nname",
        "arn:aws:s3:::bück",
    ],
)
def test_rejects_invalid_characters(text):
    with pytest.raises(InvalidCharactersError):
        parse(text)


def test_invalid_characters_are_reported():
    with pytest.raises(InvalidCharactersError) as excinfo:
        parse("arn:aws:s3:::<script>")
    assert excinfo.value.characters == "<>"


def test_accepts_all_allowed_punctuation():
    arn = parse("arn:aws:service:us-east-1:123:type/a+b=c,d.e@f_g*h#i-j")
    assert arn.resource == "a+b=c,d.e@f_g*h#i-j"


@pytest.mark.parametrize(
    "text",
    [
        "arn:aws:s3:::my bucket",
        "arn aws:s3:::bucket",
        "arn:aws:my service:us-east-1:1:thing",
        "arn:aws:s3:us-east-1:1 2:bucket",
        "arn:aws:ecs:us-east-1:1:task-definition/web:4 2",
    ],
)
def test_rejects_space_outside_region(text):
    with pytest.raises(InvalidCharactersError) as excinfo:
        parse(text)
    assert excinfo.value.characters == " "


@pytest.mark.parametrize("region", ["US WEST", "US-EAST-1", "us_east_1", "us.east.1"])
def test_rejects_unsafe_region(region):
    with pytest.raises(InvalidRegionError):
        parse(f"arn:aws:s3:{region}:1:bucket")


def test_all_errors_share_a_base_class():
    for text in ("foo", "arn:aws:s3:US WEST:1:bucket", "arn:aws:s3:::<b>"):
        with pytest.raises(ArnError):
            parse(text)
