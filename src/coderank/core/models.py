from datetime import datetime
from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


PricingSource = Literal["official", "estimated", "unknown"]


class Record(BaseModel):
    # Stored JSON and API envelopes use camelCase keys for the dashboard
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        protected_namespaces=(),
    )

    def to_json_dict(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


def _check_timestamp(value: str) -> str:
    # ISO 8601, "Z" suffix allowed
    datetime.fromisoformat(value.replace("Z", "+00:00"))
    return value


class RawLeaderboardEntry(Record):
    raw_label: str
    column_rank: int = Field(ge=1)
    name: str  # resolved display name
    organization: str


class ResolvedModel(Record):
    rank: int = Field(ge=1)
    name: str
    score: int
    organization: str
    license: str
    votes: int = Field(default=0, ge=0)


class PricingRecord(Record):
    input_price_per_million: float = Field(ge=0)
    output_price_per_million: float = Field(ge=0)
    source: PricingSource


class SubscriptionTier(Record):
    name: str
    price: float = Field(ge=0)  # USD per month
    features: List[str] = Field(default_factory=list)


class SubscriptionPlan(Record):
    provider: str
    web_url: str
    tiers: List[SubscriptionTier]
    model_access: List[str] = Field(default_factory=list)


class EnrichedModel(ResolvedModel):
    display_name: str
    pricing: PricingRecord
    subscription: Optional[SubscriptionPlan] = None
    last_updated: str

    @field_validator("last_updated")
    @classmethod
    def check_last_updated(cls, value: str) -> str:
        return _check_timestamp(value)


class StoredBundle(Record):
    models: List[EnrichedModel]
    fetched_at: str
    source: str
    version: str

    @field_validator("fetched_at")
    @classmethod
    def check_fetched_at(cls, value: str) -> str:
        return _check_timestamp(value)


class ChartPoint(Record):
    name: str
    display_name: str
    input_price: float
    output_price: float
    score: int
    rank: int


class ApiResponse(Record):
    success: bool
    data: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
    timestamp: str
