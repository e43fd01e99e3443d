from __future__ import annotations

from datetime import timedelta
from typing import Annotated, Any, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, Strict, StrictInt

from hitkit.core.config import settings
from hitkit.schemas.enums import HitType, SessionControl, TriState
from hitkit.schemas.fields import lookup

TriStateValue = Annotated[TriState, BeforeValidator(TriState.of)]
# Only real ints and timedeltas; a float would otherwise coerce to seconds.
MillisValue = StrictInt | Annotated[timedelta, Strict()]


class GeneralParameters(BaseModel):
    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    protocol_version: Literal["1"] = "1"
    tracking_id: str | None = Field(default=None, description="UA-XXXX-Y")
    # Any value, including 0, anonymizes the sender IP on the collector side.
    anonymize_ip: TriStateValue = TriState.UNSET
    queue_time: MillisValue | None = Field(default=None, description="ms")
    cache_buster: str | None = None
    non_interaction_hit: TriStateValue = TriState.UNSET


class UserParameters(BaseModel):
    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    client_id: str | None = Field(default=None, description="UUID v4")
    user_id: str | None = None


class SystemInfoParameters(BaseModel):
    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    screen_resolution: str | None = Field(default=None, description="800x600")
    viewport_size: str | None = Field(default=None, description="123x456")
    document_encoding: str | None = None
    screen_colors: str | None = Field(default=None, description="24-bits")
    user_language: str | None = Field(default=None, description="en-us")
    java_enabled: TriStateValue = TriState.UNSET
    flash_version: str | None = None


class ContentParameters(BaseModel):
    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    document_location_url: str | None = None
    document_host_name: str | None = None
    document_path: str | None = Field(default=None, description="Begins with '/'")
    document_title: str | None = None
    screen_name: str | None = None
    link_id: str | None = None


class SessionParameters(BaseModel):
    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    session_control: SessionControl | None = None
    ip_override: str | None = None
    user_agent_override: str | None = None


class TrafficSourceParameters(BaseModel):
    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    document_referrer: str | None = None
    campaign_name: str | None = None
    campaign_source: str | None = None
    campaign_medium: str | None = None
    campaign_keyword: str | None = None
    campaign_content: str | None = None
    campaign_id: str | None = None
    google_adwords_id: str | None = None
    google_display_ads_id: str | None = None


class ParameterSet(BaseModel):
    """All values for one outgoing hit, grouped by concern.

    Holds data only. Checking it is `hitkit.services.validator`'s job and
    turning it into wire pairs is `hitkit.services.payload`'s.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    hit_type: HitType = Field(frozen=True)
    general: GeneralParameters = Field(default_factory=GeneralParameters)
    user: UserParameters = Field(default_factory=UserParameters)
    system_info: SystemInfoParameters = Field(default_factory=SystemInfoParameters)
    content: ContentParameters = Field(default_factory=ContentParameters)
    session: SessionParameters = Field(default_factory=SessionParameters)
    traffic_source: TrafficSourceParameters = Field(
        default_factory=TrafficSourceParameters
    )

    # Request hints for the transport (User-Agent / Referer headers); never
    # serialized as hit parameters.
    user_agent: str | None = None
    referral_url: str | None = None

    @classmethod
    def for_hit(cls, hit_type: HitType | str, **groups: Any) -> "ParameterSet":
        params = cls(hit_type=hit_type, **groups)
        if params.general.tracking_id is None and settings.default_tracking_id:
            params.general.tracking_id = settings.default_tracking_id
        return params

    def value_of(self, name: str) -> Any:
        field = lookup(name)
        owner = getattr(self, field.group) if field.group else self
        return getattr(owner, field.name)

    def is_present(self, name: str) -> bool:
        value = self.value_of(name)
        return value is not None and value != "" and value is not TriState.UNSET
