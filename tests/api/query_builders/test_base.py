"""Testes para api.query_builders.base.

Cobre: format_query_value, encode_query, QueryParams (ordem, imutabilidade,
validação de declaração e de valores).
"""

from __future__ import annotations

import logging
from enum import Enum
from urllib.parse import parse_qs

import pytest
from pydantic import Field, ValidationError

from api.query_builders import ListAccountsParams, SearchCardsParams, StatementParams
from api.query_builders.base import (
    INT64_MAX,
    INT64_MIN,
    QueryParams,
    encode_query,
    format_query_value,
)
from app.constants.banking import AccountStatus, RecurrenceStatus
from utils.errors import QueryParamsDefinitionError


class _Color(Enum):
    RED = "red"


class TestFormatQueryValue:
    """Testes para format_query_value."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (True, "true"),
            (False, "false"),
            (0, "0"),
            (42, "42"),
            (-7, "-7"),
            (INT64_MAX, "9223372036854775807"),
            (INT64_MIN, "-9223372036854775808"),
            ("John Doe", "John Doe"),
            ("", ""),
            (AccountStatus.ACTIVE, "ACTIVE"),
            (RecurrenceStatus.PENDING, "PDNG"),
            (_Color.RED, "red"),
        ],
    )
    def test_formats_by_type(self, value: object, expected: str) -> None:
        assert format_query_value(value) == expected  # type: ignore[arg-type]

    def test_unsupported_type_raises(self) -> None:
        with pytest.raises(TypeError, match="não suportado"):
            format_query_value(1.5)  # type: ignore[arg-type]


class TestEncodeQuery:
    """Testes para encode_query."""

    def test_none_returns_empty_string(self) -> None:
        """Sentinela "sem filtros" não é erro."""
        assert encode_query(None) == ""

    def test_all_unset_returns_empty_string(self) -> None:
        assert encode_query(ListAccountsParams()) == ""
        assert ListAccountsParams().query_string() == ""

    def test_one_field_starts_with_question_mark(self) -> None:
        assert encode_query(ListAccountsParams(first=1)) == "?first=1"

    def test_zero_is_emitted(self) -> None:
        """Zero informado é diferente de não informado."""
        assert encode_query(ListAccountsParams(first=0, max=100)) == "?first=0&max=100"

    def test_false_is_emitted(self) -> None:
        assert encode_query(StatementParams(is_pix=False)) == "?isPix=false"

    def test_declaration_order(self) -> None:
        """Chaves saem na ordem de declaração, não na ordem dos kwargs."""
        params = ListAccountsParams(max=50, name="Ana", status=AccountStatus.BLOCKED)
        assert encode_query(params) == "?status=BLOCKED&name=Ana&max=50"

    def test_space_encoded_as_plus(self) -> None:
        assert encode_query(ListAccountsParams(name="John Doe")) == "?name=John+Doe"

    @pytest.mark.parametrize(
        "name",
        ["John Doe Jr.", "a&b=c", "100% certo?", "João Ávila", "x+y/z#frag"],
    )
    def test_special_characters_round_trip(self, name: str) -> None:
        encoded = encode_query(ListAccountsParams(name=name))
        assert encoded.startswith("?name=")
        assert "&" not in encoded
        assert encoded.count("=") == 1
        assert parse_qs(encoded[1:]) == {"name": [name]}

    def test_method_matches_function(self) -> None:
        params = SearchCardsParams(account_id=123, first=0)
        assert params.query_string() == encode_query(params)

    def test_logs_only_metadata(self, caplog: pytest.LogCaptureFixture) -> None:
        """Log de debug não contém valores dos filtros (PII)."""
        caplog.set_level(logging.DEBUG, logger="api.query_builders.base")
        encode_query(ListAccountsParams(document="12345678901", first=0))
        records = [r for r in caplog.records if r.getMessage() == "query_string_encoded"]
        assert len(records) == 1
        assert records[0].params_type == "ListAccountsParams"
        assert records[0].field_count == 2
        assert "12345678901" not in caplog.text

    def test_no_log_when_nothing_encoded(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="api.query_builders.base")
        encode_query(None)
        encode_query(ListAccountsParams())
        assert not [r for r in caplog.records if r.getMessage() == "query_string_encoded"]


class TestQueryParamsModel:
    """Testes para o modelo base QueryParams."""

    def test_accepts_attribute_name_and_wire_name(self) -> None:
        by_name = ListAccountsParams(account_type="COMPANY")
        by_alias = ListAccountsParams(accountType="COMPANY")
        assert by_name == by_alias
        assert by_name.query_items() == [("accountType", "COMPANY")]

    def test_enum_field_accepts_literal_string(self) -> None:
        params = ListAccountsParams(status="ACTIVE")
        assert params.status is AccountStatus.ACTIVE

    def test_enum_field_rejects_unknown_literal(self) -> None:
        with pytest.raises(ValidationError):
            ListAccountsParams(status="BOGUS")

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ListAccountsParams(page=1)

    def test_frozen(self) -> None:
        params = ListAccountsParams(first=1)
        with pytest.raises(ValidationError):
            params.first = 2  # type: ignore[misc]

    def test_int64_bounds(self) -> None:
        assert SearchCardsParams(account_id=INT64_MAX).query_items() == [
            ("accountId", str(INT64_MAX)),
        ]
        with pytest.raises(ValidationError):
            SearchCardsParams(account_id=INT64_MAX + 1)
        with pytest.raises(ValidationError):
            SearchCardsParams(account_id=INT64_MIN - 1)

    def test_int_field_rejects_bool(self) -> None:
        """True não pode virar first=1 na query string."""
        with pytest.raises(ValidationError):
            ListAccountsParams(first=True)

    def test_int_field_rejects_numeric_string(self) -> None:
        with pytest.raises(ValidationError):
            ListAccountsParams(first="10")

    def test_int64_field_rejects_bool(self) -> None:
        with pytest.raises(ValidationError):
            SearchCardsParams(account_id=True)

    @pytest.mark.parametrize("value", [1, 0, "true"])
    def test_bool_field_rejects_non_bool(self, value: object) -> None:
        with pytest.raises(ValidationError):
            StatementParams(is_pix=value)

    def test_wire_names_in_declaration_order(self) -> None:
        assert ListAccountsParams.wire_names() == (
            "status",
            "accountType",
            "document",
            "name",
            "first",
            "max",
        )

    def test_duplicate_wire_name_rejected_at_definition(self) -> None:
        """Wire name duplicado é erro de programação na definição da classe."""
        with pytest.raises(QueryParamsDefinitionError, match="'status'"):

            class _Broken(QueryParams):
                status: str | None = None
                state: str | None = Field(None, alias="status")

    def test_definition_error_is_type_error(self) -> None:
        assert issubclass(QueryParamsDefinitionError, TypeError)
