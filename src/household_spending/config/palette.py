"""Fallback colour palette loader."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

import yaml  # type: ignore[import-untyped]

from household_spending.config.settings import get_settings

DEFAULT_PALETTE_PATH = Path(__file__).resolve().parent / "palette.yaml"


def parse_palette(raw: str, source: str = "palette.yaml") -> tuple[str, ...]:
    """Parse palette YAML text into an ordered tuple of colour tokens.

    Accepts either a bare list or a mapping with a ``palette`` list.
    """
    data = yaml.safe_load(raw)
    if data is None:
        raise ValueError(f"{source}: palette file is empty")

    if isinstance(data, list):
        items = data
    elif isinstance(data, dict):
        items = data.get("palette")
    else:
        raise ValueError(f"{source}: must be a list or mapping with 'palette'")

    if not isinstance(items, list):
        raise ValueError(f"{source}: palette must be a list")
    if not items:
        raise ValueError(f"{source}: palette must contain at least one colour")

    colors: list[str] = []
    for idx, item in enumerate(items):
        if not isinstance(item, str) or not item.strip():
            raise ValueError(f"{source}: palette[{idx}] must be a non-empty string")
        colors.append(item.strip())

    return tuple(colors)


@lru_cache
def load_category_palette() -> tuple[str, ...]:
    """Load the fallback palette, honouring the PALETTE_PATH override."""
    override = get_settings().palette_path
    path = Path(override) if override else DEFAULT_PALETTE_PATH
    raw = path.read_text(encoding="utf-8")
    return parse_palette(raw, source=path.name)
