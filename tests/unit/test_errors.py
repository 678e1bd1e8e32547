# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import json

import pytest

from ledger.errors import (
    ConfigError,
    DeserializationError,
    GraphQLParseError,
    InternalError,
    LedgerError,
    LedgerErrorCode,
    WireFormatError,
)


@pytest.mark.parametrize(
    "err, code",
    [
        (InternalError(), LedgerErrorCode.INTERNAL),
        (ConfigError(), LedgerErrorCode.CONFIG),
        (DeserializationError(), LedgerErrorCode.DESERIALIZATION),
        (GraphQLParseError(), LedgerErrorCode.GRAPHQL_PARSE),
        (WireFormatError(), LedgerErrorCode.WIRE_FORMAT),
    ],
)
def test_codes(err, code):
    assert isinstance(err, LedgerError)
    assert err.code == code
    assert str(err).startswith(code.value)


def test_hierarchy():
    assert issubclass(GraphQLParseError, DeserializationError)
    assert issubclass(WireFormatError, DeserializationError)
    with pytest.raises(DeserializationError):
        raise WireFormatError("bad envelope")


def test_graphql_error_carries_field():
    err = GraphQLParseError("bad value", field="cliffTime", value="-1")
    assert err.field == "cliffTime"
    assert err.data == {"field": "cliffTime", "value": "-1"}
    assert "field=cliffTime" in str(err)


def test_to_dict_is_json_safe():
    err = WireFormatError("bad", blob=b"\x01\x02", nested={"k": (1, 2)})
    d = err.with_cause(ValueError("inner")).to_dict(include_cause=True)
    json.dumps(d)
    assert d["code"] == "LEDGER/WIRE_FORMAT"
    assert d["cause"] == {"type": "ValueError", "message": "inner"}


def test_with_context_does_not_mutate():
    err = ConfigError("bad level", key="log_level")
    err2 = err.with_context(env="LEDGER_LOG_LEVEL")
    assert err.data == {"key": "log_level"}
    assert err2.data == {"key": "log_level", "env": "LEDGER_LOG_LEVEL"}
    assert type(err2) is ConfigError
    assert err2.message == err.message
