from __future__ import annotations

from typing import Any


class HitError(Exception):
    """Base class for every error raised while validating or encoding a hit."""


class MissingRequiredField(HitError):
    def __init__(self, key: str) -> None:
        super().__init__(f"Missing required field: {key}")
        self.key = key


class InvalidValue(HitError):
    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"Invalid value for {field}: {reason}")
        self.field = field
        self.reason = reason


class UnknownEnumValue(HitError):
    def __init__(self, field: str, value: Any) -> None:
        super().__init__(f"Unknown enumeration value for {field}: {value!r}")
        self.field = field
        self.value = value


class EncodingFailed(HitError):
    def __init__(self, key: str, cause: BaseException) -> None:
        super().__init__(f"Encoding failed for {key}: {cause}")
        self.key = key
        self.cause = cause


class InvalidHit(HitError):
    def __init__(self, errors: list[HitError]) -> None:
        summary = "; ".join(str(e) for e in errors) or "invalid hit"
        super().__init__(summary)
        self.errors = list(errors)


class PayloadTooLarge(HitError):
    def __init__(self, *, size: int, limit: int) -> None:
        super().__init__(f"Payload is {size} bytes (limit {limit})")
        self.size = size
        self.limit = limit
