from __future__ import annotations

import logging

from hitkit.core.config import settings
from hitkit.core.errors import (
    HitError,
    InvalidHit,
    InvalidValue,
    MissingRequiredField,
    UnknownEnumValue,
)
from hitkit.schemas.enums import HitType
from hitkit.schemas.fields import EncodingKind, all_fields, required_fields
from hitkit.schemas.parameters import ParameterSet
from hitkit.services.encoders import encode_value

logger = logging.getLogger(__name__)

# Reported key when a pageview has neither dl nor the dh+dp pair.
PAGEVIEW_LOCATION_KEY = "dl|dh+dp"


def _check_pageview_location(params: ParameterSet) -> list[HitError]:
    if params.is_present("document_location_url"):
        return []
    if params.is_present("document_host_name") and params.is_present(
        "document_path"
    ):
        return []
    return [MissingRequiredField(PAGEVIEW_LOCATION_KEY)]


def _check_document_path(params: ParameterSet) -> list[HitError]:
    path = params.content.document_path
    if isinstance(path, str) and path and not path.startswith("/"):
        return [InvalidValue("dp", "must begin with '/'")]
    return []


_HIT_TYPE_RULES = {
    HitType.PAGEVIEW: (_check_pageview_location,),
}


def validate(params: ParameterSet) -> list[HitError]:
    """Check a parameter set and return every problem found.

    An empty list means the hit can be built. Nothing is raised and the
    parameter set is left untouched.
    """
    errors: list[HitError] = []

    for field in required_fields():
        if not params.is_present(field.name):
            errors.append(MissingRequiredField(field.key))

    for rule in _HIT_TYPE_RULES.get(params.hit_type, ()):
        errors.extend(rule(params))

    errors.extend(_check_document_path(params))

    for field in all_fields(params.hit_type):
        if not params.is_present(field.name):
            continue
        try:
            encoded = encode_value(field, params.value_of(field.name))
        except (InvalidValue, UnknownEnumValue) as exc:
            errors.append(exc)
            continue
        if (
            field.kind is EncodingKind.TIME_DELTA_MS
            and encoded is not None
            and int(encoded) > settings.queue_time_soft_limit_ms
        ):
            logger.warning(
                "Parameter %s is %s ms, above the %s ms soft limit; "
                "the collector may drop this hit",
                field.key,
                encoded,
                settings.queue_time_soft_limit_ms,
            )

    return errors


def ensure_valid(params: ParameterSet) -> None:
    errors = validate(params)
    if errors:
        raise InvalidHit(errors)
