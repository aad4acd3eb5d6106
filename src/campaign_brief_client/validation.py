"""Structural submit checks for the generate and upload forms.

Only presence is checked.  A field holding whitespace counts as filled in, and
the upload file's bytes are never inspected.
"""

from __future__ import annotations

from campaign_brief_client.models.brief import CampaignBrief
from campaign_brief_client.models.upload import UploadFile

_SCALAR_FIELDS = ("campaign_name", "target_region", "target_audience", "campaign_message")
_PRODUCT_FIELDS = ("name", "description", "visual_style")


def missing_brief_fields(brief: CampaignBrief) -> list[str]:
    """Return wire paths of every empty field, e.g. ``products.1.visualStyle``."""
    missing: list[str] = []
    for name in _SCALAR_FIELDS:
        if not getattr(brief, name):
            missing.append(CampaignBrief.model_fields[name].alias or name)

    for index, product in enumerate(brief.products):
        for name in _PRODUCT_FIELDS:
            if not getattr(product, name):
                alias = type(product).model_fields[name].alias or name
                missing.append(f"products.{index}.{alias}")
    return missing


def can_submit_brief(brief: CampaignBrief) -> bool:
    return not missing_brief_fields(brief)


def can_submit_upload(product_name: str, file: UploadFile | None) -> bool:
    return bool(product_name) and file is not None
