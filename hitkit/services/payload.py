from __future__ import annotations

from hitkit.core.errors import EncodingFailed, HitError, MissingRequiredField
from hitkit.schemas.fields import all_fields
from hitkit.schemas.parameters import ParameterSet
from hitkit.services.encoders import encode_value


def build(params: ParameterSet) -> list[tuple[str, str]]:
    """Encode a validated parameter set into ordered (key, value) pairs.

    Pairs follow registry order, so identical input always produces identical
    output. Optional fields without a value are skipped. Run
    `hitkit.services.validator.validate` first; this only stops on the first
    encoder failure.
    """
    pairs: list[tuple[str, str]] = []
    for field in all_fields(params.hit_type):
        if not params.is_present(field.name):
            if field.required:
                raise MissingRequiredField(field.key)
            continue

        try:
            encoded = encode_value(field, params.value_of(field.name))
        except HitError as exc:
            raise EncodingFailed(field.key, exc) from exc

        if encoded is None:
            if field.required:
                raise MissingRequiredField(field.key)
            continue
        pairs.append((field.key, encoded))
    return pairs
