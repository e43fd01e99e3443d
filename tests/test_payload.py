from __future__ import annotations

from datetime import timedelta

import pytest

from hitkit.core.errors import EncodingFailed, InvalidValue, MissingRequiredField
from hitkit.schemas.enums import HitType, SessionControl, TriState
from hitkit.schemas.parameters import (
    GeneralParameters,
    ParameterSet,
    SessionParameters,
    SystemInfoParameters,
    TrafficSourceParameters,
)
from hitkit.services.payload import build
from tests.factories import (
    TEST_CLIENT_ID,
    TEST_LOCATION,
    TEST_TRACKING_ID,
    make_params,
)


def test_end_to_end_pageview(pageview_params: ParameterSet) -> None:
    pairs = build(pageview_params)

    assert pairs == [
        ("v", "1"),
        ("tid", TEST_TRACKING_ID),
        ("t", "pageview"),
        ("cid", TEST_CLIENT_ID),
        ("dl", TEST_LOCATION),
    ]
    keys = [k for k, _ in pairs]
    assert "ni" not in keys
    assert "aip" not in keys


def test_build_is_deterministic(pageview_params: ParameterSet) -> None:
    assert build(pageview_params) == build(pageview_params)


def test_identical_sets_build_identical_output() -> None:
    first = make_params(traffic_source=TrafficSourceParameters(campaign_name="spring"))
    second = make_params(traffic_source=TrafficSourceParameters(campaign_name="spring"))
    assert build(first) == build(second)


def test_queue_time_encodes_as_integer_pair() -> None:
    params = make_params(
        general=GeneralParameters(tracking_id=TEST_TRACKING_ID, queue_time=560)
    )
    assert ("qt", "560") in build(params)


def test_queue_time_timedelta_is_converted_to_ms() -> None:
    params = make_params(
        general=GeneralParameters(
            tracking_id=TEST_TRACKING_ID, queue_time=timedelta(seconds=2)
        )
    )
    assert ("qt", "2000") in build(params)


def test_negative_queue_time_fails_with_wrapped_invalid_value() -> None:
    params = make_params(
        general=GeneralParameters(tracking_id=TEST_TRACKING_ID, queue_time=-1)
    )

    with pytest.raises(EncodingFailed) as exc:
        build(params)

    assert exc.value.key == "qt"
    assert isinstance(exc.value.cause, InvalidValue)
    assert exc.value.__cause__ is exc.value.cause


def test_tri_state_fields_encode_true_false_and_omit_unset() -> None:
    params = make_params(
        general=GeneralParameters(
            tracking_id=TEST_TRACKING_ID,
            anonymize_ip=TriState.TRUE,
            non_interaction_hit=TriState.FALSE,
        ),
        system_info=SystemInfoParameters(java_enabled=TriState.UNSET),
    )

    pairs = dict(build(params))

    assert pairs["aip"] == "1"
    assert pairs["ni"] == "0"
    assert "je" not in pairs


def test_output_follows_registry_order_with_cache_buster_last() -> None:
    params = make_params(
        general=GeneralParameters(
            tracking_id=TEST_TRACKING_ID,
            cache_buster="289372387623",
            non_interaction_hit=True,
        ),
        session=SessionParameters(session_control=SessionControl.START),
        traffic_source=TrafficSourceParameters(
            campaign_source="(direct)",
            google_adwords_id="CL6Q-OXyqKUCFcgK2goddQuoHg",
        ),
    )

    keys = [k for k, _ in build(params)]

    assert keys == ["v", "tid", "t", "ni", "cid", "dl", "sc", "cs", "gclid", "z"]


def test_empty_optional_strings_are_skipped() -> None:
    params = make_params(
        traffic_source=TrafficSourceParameters(document_referrer="", campaign_name="x")
    )
    pairs = dict(build(params))
    assert "dr" not in pairs
    assert pairs["cn"] == "x"


def test_build_fails_fast_on_missing_required_field() -> None:
    with pytest.raises(MissingRequiredField) as exc:
        build(ParameterSet(hit_type=HitType.EVENT))
    assert exc.value.key == "tid"


def test_build_does_not_mutate_input(pageview_params: ParameterSet) -> None:
    before = pageview_params.model_dump()
    build(pageview_params)
    assert pageview_params.model_dump() == before


def test_tri_state_fields_assigned_after_construction_are_encoded() -> None:
    params = make_params()

    params.general.anonymize_ip = True
    params.general.non_interaction_hit = False
    params.system_info.java_enabled = None

    pairs = dict(build(params))

    assert pairs["aip"] == "1"
    assert pairs["ni"] == "0"
    assert "je" not in pairs
