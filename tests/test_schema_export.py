import json
from pathlib import Path

from campaign_brief_client.models.brief import CampaignBrief, ProductEntry
from campaign_brief_client.models.schema_export import campaign_brief_json_schema, write_campaign_schema


def test_schema_uses_wire_names() -> None:
    schema = campaign_brief_json_schema()
    assert set(schema["properties"]) == {
        "campaignName",
        "targetRegion",
        "targetAudience",
        "campaignMessage",
        "products",
    }
    assert "visualStyle" in schema["$defs"]["ProductEntry"]["properties"]


def test_write_schema(tmp_path: Path) -> None:
    schema_path = tmp_path / "schema" / "brief.json"
    write_campaign_schema(schema_path)
    assert json.loads(schema_path.read_text(encoding="utf-8"))["title"] == "CampaignBrief"


def test_payload_matches_generate_body() -> None:
    brief = CampaignBrief(
        campaign_name="Summer Launch",
        products=(ProductEntry(name="A", visual_style="Neon"), ProductEntry(name="B")),
    )
    assert brief.to_payload() == {
        "campaignName": "Summer Launch",
        "targetRegion": "",
        "targetAudience": "",
        "campaignMessage": "",
        "products": [
            {"name": "A", "description": "", "visualStyle": "Neon"},
            {"name": "B", "description": "", "visualStyle": ""},
        ],
    }
