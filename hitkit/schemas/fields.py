from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from hitkit.schemas.enums import HitType, SessionControl


class EncodingKind(str, Enum):
    RAW_STRING = "raw_string"
    TRI_STATE = "tri_state"
    ENUM_TOKEN = "enum_token"
    INTEGER = "integer"
    TIME_DELTA_MS = "time_delta_ms"


@dataclass(frozen=True)
class ParameterField:
    name: str
    key: str
    kind: EncodingKind
    # Attribute on ParameterSet holding the group model; None for top-level fields.
    group: str | None
    required: bool = False
    enum_type: type[Enum] | None = None


def _f(
    group: str | None,
    name: str,
    key: str,
    kind: EncodingKind = EncodingKind.RAW_STRING,
    *,
    required: bool = False,
    enum_type: type[Enum] | None = None,
) -> ParameterField:
    return ParameterField(
        name=name,
        key=key,
        kind=kind,
        group=group,
        required=required,
        enum_type=enum_type,
    )


FIELDS: tuple[ParameterField, ...] = (
    # General
    _f("general", "protocol_version", "v", required=True),
    _f("general", "tracking_id", "tid", required=True),
    _f("general", "anonymize_ip", "aip", EncodingKind.TRI_STATE),
    _f("general", "queue_time", "qt", EncodingKind.TIME_DELTA_MS),
    _f(
        None,
        "hit_type",
        "t",
        EncodingKind.ENUM_TOKEN,
        required=True,
        enum_type=HitType,
    ),
    _f("general", "non_interaction_hit", "ni", EncodingKind.TRI_STATE),
    # User
    _f("user", "client_id", "cid", required=True),
    _f("user", "user_id", "uid"),
    # System info
    _f("system_info", "screen_resolution", "sr"),
    _f("system_info", "viewport_size", "vp"),
    _f("system_info", "document_encoding", "de"),
    _f("system_info", "screen_colors", "sd"),
    _f("system_info", "user_language", "ul"),
    _f("system_info", "java_enabled", "je", EncodingKind.TRI_STATE),
    _f("system_info", "flash_version", "fl"),
    # Content
    _f("content", "document_location_url", "dl"),
    _f("content", "document_host_name", "dh"),
    _f("content", "document_path", "dp"),
    _f("content", "document_title", "dt"),
    _f("content", "screen_name", "cd"),
    _f("content", "link_id", "linkid"),
    # Session
    _f(
        "session",
        "session_control",
        "sc",
        EncodingKind.ENUM_TOKEN,
        enum_type=SessionControl,
    ),
    _f("session", "ip_override", "uip"),
    _f("session", "user_agent_override", "ua"),
    # Traffic source
    _f("traffic_source", "document_referrer", "dr"),
    _f("traffic_source", "campaign_name", "cn"),
    _f("traffic_source", "campaign_source", "cs"),
    _f("traffic_source", "campaign_medium", "cm"),
    _f("traffic_source", "campaign_keyword", "ck"),
    _f("traffic_source", "campaign_content", "cc"),
    _f("traffic_source", "campaign_id", "ci"),
    _f("traffic_source", "google_adwords_id", "gclid"),
    _f("traffic_source", "google_display_ads_id", "dclid"),
    # Cache buster goes last: some filtering proxies append junk to GET requests.
    _f("general", "cache_buster", "z"),
)

_BY_NAME: MappingProxyType[str, ParameterField] = MappingProxyType(
    {f.name: f for f in FIELDS}
)
_BY_KEY: MappingProxyType[str, ParameterField] = MappingProxyType(
    {f.key: f for f in FIELDS}
)

if len(_BY_NAME) != len(FIELDS) or len(_BY_KEY) != len(FIELDS):
    raise RuntimeError("Parameter field names and keys must be unique")


def lookup(name: str) -> ParameterField:
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(f"Unknown parameter field: {name}") from None


def lookup_key(key: str) -> ParameterField:
    try:
        return _BY_KEY[key]
    except KeyError:
        raise KeyError(f"Unknown parameter key: {key}") from None


def all_fields(hit_type: HitType | None = None) -> tuple[ParameterField, ...]:
    # Every hit type shares one field list in this protocol version.
    return FIELDS


def required_fields() -> tuple[ParameterField, ...]:
    return tuple(f for f in FIELDS if f.required)
