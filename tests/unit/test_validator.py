"""Tests for YAML syntax validation, parsing and configuration shape checks."""

from __future__ import annotations

from clashyaml.models.errors import YAMLErrorDetail
from clashyaml.parser.loader import YAMLSafetyError
from clashyaml.parser.validator import (
    PARSE_FAILURE_MESSAGE,
    ConfigShapeValidator,
    describe_error,
    format_error,
    parse,
    stringify,
    validate,
    validate_config_shape,
)
from tests.conftest import SAMPLE_CONFIG_YAML


class TestValidate:
    def test_valid_document(self) -> None:
        result = validate("a: 1\n")
        assert result.is_valid
        assert result.diagnostics is None
        assert result.error is None

    def test_empty_document_is_valid(self) -> None:
        assert validate("").is_valid

    def test_unclosed_flow_sequence(self) -> None:
        result = validate("a: [")
        assert result.is_valid is False
        assert result.diagnostics
        assert result.diagnostics.startswith("YAML ")
        assert result.error is not None
        assert result.error.line is not None and result.error.line >= 1

    def test_scanner_error_position(self) -> None:
        result = validate("a: 1\nb: @x\n")
        assert not result.is_valid
        assert result.error is not None
        assert result.error.category == "scanning"
        assert result.error.line == 2
        assert result.error.column == 4
        assert "(line 2, column 4)" in result.diagnostics
        assert "cannot start any token" in result.diagnostics

    def test_unterminated_quote(self) -> None:
        result = validate("key: 'unterminated\n")
        assert not result.is_valid
        assert result.error is not None
        assert result.error.category == "scanning"

    def test_duplicate_key(self) -> None:
        result = validate("a: 1\na: 2\n")
        assert not result.is_valid
        assert result.error is not None
        assert result.error.category == "construction"

    def test_never_raises_on_garbage(self) -> None:
        for text in ["\x00\x01", "{{{{", "]]]: [[[", "- - - :\n\t:"]:
            result = validate(text)
            assert isinstance(result.is_valid, bool)


class TestErrorFormatting:
    def test_full_message(self) -> None:
        detail = YAMLErrorDetail(
            category="syntax",
            context="while parsing a flow sequence",
            problem="expected ',' or ']'",
            line=3,
            column=7,
        )
        assert format_error(detail) == (
            "YAML syntax error: while parsing a flow sequence"
            " - expected ',' or ']' (line 3, column 7)"
        )

    def test_without_context_or_position(self) -> None:
        detail = YAMLErrorDetail(category="representation", problem="cannot represent")
        assert format_error(detail) == "YAML representation error - cannot represent"

    def test_generic(self) -> None:
        detail = describe_error(RuntimeError("boom"))
        assert detail.category == "generic"
        assert format_error(detail) == "YAML error: boom"

    def test_safety_error(self) -> None:
        detail = describe_error(YAMLSafetyError("too big"))
        assert detail.category == "safety"
        assert detail.line is None


class TestParse:
    def test_returns_ordered_plain_mapping(self) -> None:
        config = parse(SAMPLE_CONFIG_YAML)
        assert config is not None
        assert type(config) is dict
        assert list(config)[:3] == ["port", "socks-port", "allow-lan"]
        assert type(config["proxies"]) is list
        assert type(config["proxies"][0]) is dict
        assert config["proxies"][0]["port"] == 8388
        assert config["allow-lan"] is False

    def test_non_mapping_top_level(self) -> None:
        assert parse("- a\n- b\n") is None
        assert parse("just a string") is None

    def test_empty_document(self) -> None:
        assert parse("") is None

    def test_invalid_yaml(self) -> None:
        assert parse("a: [") is None

    def test_merge_keys_resolved(self) -> None:
        text = "base: &b {type: ss}\nproxy:\n  <<: *b\n  name: x\n"
        config = parse(text)
        assert config is not None
        assert config["proxy"]["type"] == "ss"
        assert config["proxy"]["name"] == "x"


class TestStringify:
    def test_round_trip(self) -> None:
        mapping = {"port": 7890, "rules": ["MATCH,DIRECT"]}
        text = stringify(mapping)
        assert text is not None
        assert "port: 7890" in text
        assert parse(text) == mapping

    def test_unrepresentable_value(self) -> None:
        assert stringify({"a": object()}) is None


class TestConfigShape:
    def test_complete_config(self) -> None:
        result = validate_config_shape(SAMPLE_CONFIG_YAML)
        assert result.is_valid
        assert result.diagnostics is None
        assert result.warnings == []

    def test_rules_only(self) -> None:
        result = validate_config_shape("rules: []\n")
        assert result.is_valid
        assert result.warnings == [
            "missing 'port' field",
            "missing 'socks-port' field",
            "missing 'proxies' or 'proxy-providers' field",
        ]
        assert result.diagnostics == "\n".join(result.warnings)

    def test_proxy_providers_satisfy_proxy_check(self) -> None:
        text = "port: 1\nsocks-port: 2\nproxy-providers: {}\nrules: []\n"
        result = validate_config_shape(text)
        assert result.is_valid
        assert result.diagnostics is None

    def test_warnings_never_invalidate(self) -> None:
        result = validate_config_shape("foo: bar\n")
        assert result.is_valid
        assert len(result.warnings) == 4

    def test_syntax_error_short_circuits(self) -> None:
        assert validate_config_shape("a: [") == validate("a: [")

    def test_non_mapping_document(self) -> None:
        result = validate_config_shape("- a\n- b\n")
        assert result.is_valid is False
        assert result.diagnostics == PARSE_FAILURE_MESSAGE

    def test_empty_document(self) -> None:
        result = validate_config_shape("")
        assert result.is_valid is False
        assert result.diagnostics == PARSE_FAILURE_MESSAGE

    def test_checker_directly(self) -> None:
        checker = ConfigShapeValidator()
        assert checker.check({"port": 1, "socks-port": 2, "proxies": [], "rules": []}) == []
        assert checker.check({"port": 1, "socks-port": 2, "proxies": []}) == ["missing 'rules' field"]
