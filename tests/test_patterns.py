import pytest
from superschema import ConfigError, StringPattern, parse_string_pattern

def test_plain_type():
    assert parse_string_pattern("string") == StringPattern("string", source="string")

def test_modifiers_in_any_order():
    a = parse_string_pattern("optional nullable number")
    b = parse_string_pattern("nullable optional number")
    assert a.optional and a.nullable and a.type_name == "number"
    assert (b.optional, b.nullable, b.type_name) == (True, True, "number")

def test_nested_sub_patterns():
    pattern = parse_string_pattern("optional array nullable observable string")
    assert pattern.type_name == "array"
    assert pattern.optional and not pattern.nullable
    inner = pattern.sub_pattern
    assert inner.nullable and inner.type_name == "observable"
    assert inner.sub_pattern.type_name == "string"
    assert inner.sub_pattern.sub_pattern is None

def test_extra_whitespace_is_ignored():
    assert parse_string_pattern("  array   number ").sub_pattern.type_name == "number"

def test_modifiers_after_type_belong_to_sub_pattern():
    pattern = parse_string_pattern("array optional string")
    assert not pattern.optional
    assert pattern.sub_pattern.optional

@pytest.mark.parametrize("text", ["string number", "object array string", "number optional string"])
def test_only_array_and_observable_nest(text):
    with pytest.raises(ConfigError, match="Invalid pattern"):
        parse_string_pattern(text)

@pytest.mark.parametrize("text", ["", "   ", "optional", "nullable optional", "array optional"])
def test_missing_type_token(text):
    with pytest.raises(ConfigError, match="Invalid pattern"):
        parse_string_pattern(text)

def test_unknown_type_anywhere():
    with pytest.raises(ConfigError, match="Unknown type: strng"):
        parse_string_pattern("optional array strng")
