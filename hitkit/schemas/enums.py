from __future__ import annotations

from enum import Enum
from typing import Any


class HitType(str, Enum):
    PAGEVIEW = "pageview"
    SCREENVIEW = "screenview"
    EVENT = "event"
    TRANSACTION = "transaction"
    ITEM = "item"
    SOCIAL = "social"
    EXCEPTION = "exception"
    TIMING = "timing"


class SessionControl(str, Enum):
    START = "start"
    END = "end"


class TriState(Enum):
    """A boolean whose "not set" state is distinct from False.

    UNSET omits the parameter from the payload; FALSE still sends it.
    """

    TRUE = "true"
    FALSE = "false"
    UNSET = "unset"

    @classmethod
    def of(cls, value: Any) -> Any:
        if value is None:
            return cls.UNSET
        if value is True:
            return cls.TRUE
        if value is False:
            return cls.FALSE
        return value
