from __future__ import annotations

from datetime import timedelta
from enum import Enum
from typing import Any, Callable

from hitkit.core.errors import InvalidValue, UnknownEnumValue
from hitkit.schemas.enums import TriState
from hitkit.schemas.fields import EncodingKind, ParameterField

_ONE_MS = timedelta(milliseconds=1)


def encode_raw_string(value: Any, *, field: str) -> str | None:
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise InvalidValue(field, f"expected a string, got {type(value).__name__}")
    return value


def encode_tri_state(value: Any, *, field: str) -> str | None:
    if value is None or value is TriState.UNSET:
        return None
    if value is TriState.TRUE:
        return "1"
    if value is TriState.FALSE:
        return "0"
    raise UnknownEnumValue(field, value)


def encode_enum_token(
    value: Any, *, field: str, enum_type: type[Enum] | None
) -> str | None:
    if value is None:
        return None
    if enum_type is None:
        raise UnknownEnumValue(field, value)
    if isinstance(value, enum_type):
        return str(value.value)
    try:
        return str(enum_type(value).value)
    except (ValueError, TypeError):
        raise UnknownEnumValue(field, value) from None


def encode_integer(value: Any, *, field: str) -> str | None:
    if value is None:
        return None
    # bool is an int subclass; True/False are never a valid count.
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidValue(field, f"expected an integer, got {type(value).__name__}")
    if value < 0:
        raise InvalidValue(field, f"must be >= 0, got {value}")
    return str(value)


def encode_time_delta_ms(value: Any, *, field: str) -> str | None:
    # Deltas over ~4h may be dropped by the collector but still encode here;
    # the validator is the one that warns about them.
    if isinstance(value, timedelta):
        if value < timedelta(0):
            raise InvalidValue(field, f"must be >= 0, got {value}")
        value = value // _ONE_MS
    return encode_integer(value, field=field)


_ENCODERS: dict[EncodingKind, Callable[..., str | None]] = {
    EncodingKind.RAW_STRING: encode_raw_string,
    EncodingKind.TRI_STATE: encode_tri_state,
    EncodingKind.INTEGER: encode_integer,
    EncodingKind.TIME_DELTA_MS: encode_time_delta_ms,
}


def encode_value(field: ParameterField, value: Any) -> str | None:
    """Encode one value with the encoder matching the field's kind.

    Returns None when the key must be left out of the payload.
    """
    if field.kind is EncodingKind.ENUM_TOKEN:
        return encode_enum_token(value, field=field.key, enum_type=field.enum_type)
    return _ENCODERS[field.kind](value, field=field.key)
