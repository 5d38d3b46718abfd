"""
Pytest fixtures for the wf-items test suite.

Provides raw item records in the export's JSON shape and the parsed Item
objects built from them.
"""

import json

import pytest

from wf_items.data_models import Item
from helpers import make_record


# =============================================================================
# RAW RECORD FIXTURES
# =============================================================================


@pytest.fixture
def relic_records():
    """Relic records across eras, including two refinements of Meso A1."""
    return [
        make_record(
            "Meso A1 Relic (Intact)",
            "/Lotus/Types/Game/Projections/T2VoidProjectionA1Bronze",
            category="Relic",
        ),
        make_record(
            "Meso A1 Relic (Radiant)",
            "/Lotus/Types/Game/Projections/T2VoidProjectionA1Platinum",
            category="Relic",
        ),
        make_record("Lith B2 Relic", "lith/B2", category="Relic"),
        make_record("Meso C3 Relic", "meso/C3", category="Relic"),
        make_record("Axi K3", "axi/K3", category="Relic"),
    ]


@pytest.fixture
def full_record():
    """A record carrying every field the tool reads."""
    return {
        "name": "Neo N5 Relic",
        "uniqueName": "neo/N5",
        "description": "A Void Relic containing Prime parts.",
        "type": "Relic",
        "tradable": True,
        "category": "Relic",
        "productCategory": "Relics",
        "introduced": {
            "name": "Update 18",
            "url": "https://example.invalid/Update_18",
            "aliases": ["18", "18.0"],
            "parent": "18.0",
            "date": "2015-12-03",
        },
        "estimatedVaultDate": "2025-01-01",
        "components": [
            {
                "name": "Blueprint",
                "uniqueName": "neo/N5/Blueprint",
                "tradable": False,
                "description": "Blueprint part",
                "type": "Misc",
            }
        ],
        "rewards": [
            {
                "rarity": "Common",
                "chance": 0.2533,
                "item": {
                    "name": "Forma Blueprint",
                    "uniqueName": "/Lotus/StoreItems/Types/Recipes/Components/FormaBlueprint",
                    "warframeMarket": {"id": "abc123", "urlName": "forma_blueprint"},
                },
            },
            {
                "rarity": "Rare",
                "chance": 0.02,
                "item": {"name": "Nikana Prime Blueprint", "uniqueName": "nikana/bp"},
            },
        ],
        "patchlogs": [
            {
                "name": "Hotfix 18.0.1",
                "date": "2015-12-04",
                "url": "https://example.invalid/hotfix",
                "additions": "",
                "changes": "Fixed relic drops",
                "fixes": "",
            }
        ],
        "masterable": False,
    }


@pytest.fixture
def mixed_records(relic_records):
    """Relics plus non-relic items."""
    return [
        make_record("Excalibur", "/Lotus/Powersuits/Excalibur/Excalibur", category="Warframes"),
        *relic_records,
        make_record("Mesa Prime", "/Lotus/Powersuits/Cowgirl/MesaPrime", category="Warframes"),
    ]


# =============================================================================
# PARSED ITEM FIXTURES
# =============================================================================


@pytest.fixture
def relic_items(relic_records):
    return [Item.from_dict(r) for r in relic_records]


@pytest.fixture
def mixed_items(mixed_records):
    return [Item.from_dict(r) for r in mixed_records]


@pytest.fixture
def mixed_json_line(mixed_records):
    """The mixed records as a single line of JSON, the way stdin delivers them."""
    return json.dumps(mixed_records) + "\n"
