from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

_WIRE_CONFIG = ConfigDict(frozen=True, populate_by_name=True)


class ProductEntry(BaseModel):
    model_config = _WIRE_CONFIG

    name: str = ""
    description: str = ""
    visual_style: str = Field("", alias="visualStyle")


class CampaignBrief(BaseModel):
    model_config = _WIRE_CONFIG

    campaign_name: str = Field("", alias="campaignName")
    target_region: str = Field("", alias="targetRegion")
    target_audience: str = Field("", alias="targetAudience")
    campaign_message: str = Field("", alias="campaignMessage")
    products: tuple[ProductEntry, ...] = Field(default_factory=lambda: (ProductEntry(),), min_length=1)

    def to_payload(self) -> dict[str, Any]:
        """Generate request body, camelCase keys in wire order."""
        return self.model_dump(mode="json", by_alias=True)


def _field_lookup(model: type[BaseModel], exclude: tuple[str, ...] = ()) -> dict[str, str]:
    lookup: dict[str, str] = {}
    for name, info in model.model_fields.items():
        if name in exclude:
            continue
        lookup[name] = name
        if info.alias:
            lookup[info.alias] = name
    return lookup


PRODUCT_FIELDS = _field_lookup(ProductEntry)
BRIEF_FIELDS = _field_lookup(CampaignBrief, exclude=("products",))


def resolve_product_field(field: str) -> str:
    try:
        return PRODUCT_FIELDS[field]
    except KeyError:
        raise ValueError(f"Unknown product field: {field}") from None


def resolve_brief_field(field: str) -> str:
    try:
        return BRIEF_FIELDS[field]
    except KeyError:
        raise ValueError(f"Unknown brief field: {field}") from None
