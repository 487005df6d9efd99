"""Curated ingestion targets."""

import json
from pathlib import Path

from .models.catalog import TargetSpec


CURATED_CATEGORIES: dict[str, list[dict]] = {
    "Action": [
        {"name": "Kill", "year": 2023, "tags": ["Action", "India"]},
        {"name": "Dhurandhar", "year": 2025, "tags": ["Action", "India"]},
        {"name": "Controll", "year": 2025, "tags": ["Action", "India"]},
        {"name": "Ek Tha Tiger", "year": 2012, "tags": ["Action", "India"]},
        {"name": "Singham", "year": 2011, "tags": ["Action", "India"]},
        {"name": "Krrish", "year": 2006, "tags": ["Action", "India"]},
        {"name": "Wanted", "year": 2009, "tags": ["Action", "India"]},
        {"name": "Rowdy Rathore", "year": 2012, "tags": ["Action", "India"]},
        {"name": "Dhoom", "year": 2004, "tags": ["Action", "India"]},
        {"name": "Ghajini", "year": 2008, "tags": ["Action", "India"]},
    ],
    "Netflix": [
        {"name": "Joe's College Road Trip", "year": 2025, "tags": ["Netflix", "Trending"]},
        {"name": "How to Train Your Dragon", "year": 2025, "tags": ["Netflix", "Trending"]},
        {"name": "The Investigation of Lucy Letby", "tags": ["Netflix", "Documentary", "Trending"]},
        {"name": "Dhurandhar", "year": 2025, "tags": ["Netflix", "India", "Trending"]},
        {"name": "Anaganaga Oka Raju", "tags": ["Netflix", "India", "Trending"]},
        {"name": "Twisters", "year": 2024, "tags": ["Netflix", "Trending"]},
    ],
    "India": [
        {"name": "O' Romeo", "year": 2025, "tags": ["India", "Trending", "Theatrical"]},
        {"name": "Dhurandhar", "year": 2025, "tags": ["India", "Trending", "Netflix"]},
        {"name": "Border 2", "year": 2026, "tags": ["India", "Trending", "Theatrical"]},
        {"name": "Tu Yaa Main", "tags": ["India", "Trending"]},
        {"name": "Param Sundari", "year": 2025, "tags": ["India", "Trending"]},
        {"name": "Trending", "year": 2025, "tags": ["India", "Trending"]},
    ],
    "Other": [
        {"name": "Sinners", "year": 2025, "tags": ["Trending", "Hollywood"]},
        {"name": "Nobody 2", "year": 2025, "tags": ["Trending", "Hollywood", "Action"]},
        {"name": "Weapons", "year": 2026, "tags": ["Trending", "Hollywood", "Horror"]},
    ],
    "Horror": [
        {"name": "Tumbbad", "year": 2018, "tags": ["Horror", "India"]},
        {"name": "Bulbbul", "year": 2020, "tags": ["Horror", "India", "Netflix"]},
        {"name": "13B: Fear Has a New Address", "year": 2009, "tags": ["Horror", "India"]},
        {"name": "Stree", "year": 2018, "tags": ["Horror", "India", "Comedy"]},
        {"name": "Haunted – 3D", "year": 2011, "tags": ["Horror", "India"]},
        {"name": "The House Next Door", "year": 2017, "tags": ["Horror", "India"]},
        {"name": "Bhoot", "year": 2003, "tags": ["Horror", "India"]},
    ],
}


def flatten_categories(categories: dict[str, list[dict]]) -> list[TargetSpec]:
    """Turn a category -> entries mapping into an ordered target list."""
    targets = []
    for category, entries in categories.items():
        if not isinstance(entries, list):
            raise ValueError(f"Category {category!r} must map to a list of entries")
        for entry in entries:
            if not isinstance(entry, dict):
                raise ValueError(f"Entry in {category!r} must be an object: {entry!r}")
            targets.append(TargetSpec.from_dict(entry, category=category))
    return targets


DEFAULT_TARGETS: list[TargetSpec] = flatten_categories(CURATED_CATEGORIES)


def load_targets(path: Path) -> list[TargetSpec]:
    """Load targets from JSON: a category mapping or a flat list of entries."""
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        return flatten_categories(data)
    if isinstance(data, list):
        targets = []
        for entry in data:
            if not isinstance(entry, dict):
                raise ValueError(f"Target entry must be an object: {entry!r}")
            targets.append(TargetSpec.from_dict(entry))
        return targets
    raise ValueError(f"Unsupported targets file layout in {path}")
