from __future__ import annotations

import os

import pytest

# Keep tests independent of a developer's local .env.
_ENV_DEFAULTS = {
    "HIT_APP_ENV": "test",
    "HIT_DEBUG": "false",
}
for _key, _value in _ENV_DEFAULTS.items():
    os.environ.setdefault(_key, _value)
os.environ.pop("HIT_DEFAULT_TRACKING_ID", None)

from hitkit.schemas.enums import HitType
from hitkit.schemas.parameters import ParameterSet
from tests.factories import make_params


@pytest.fixture
def pageview_params() -> ParameterSet:
    return make_params()


@pytest.fixture
def event_params() -> ParameterSet:
    return make_params(HitType.EVENT, location=None)
