from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Sequence

from .errors import (
    CategorySourceUnavailable,
    EmptyCollection,
    InsufficientCategories,
    UnknownCollectionName,
)

logger = logging.getLogger(__name__)

CATEGORIES_DIR = Path(__file__).resolve().parent / "categories"


def _categories_dir(directory: str | Path | None) -> Path:
    return Path(directory) if directory else CATEGORIES_DIR


def available_collections(directory: str | Path | None = None) -> list[str]:
    """Names of the preset collections found in ``directory``."""
    base = _categories_dir(directory)
    if not base.is_dir():
        return []
    return sorted(p.stem for p in base.glob("*.txt") if p.is_file())


def load_collection(name: str, directory: str | Path | None = None) -> list[str]:
    """Reads a preset collection, one category per line.

    Blank lines and ``#`` comments are skipped, the order of the file is kept
    and duplicates are not removed.
    """
    presets = available_collections(directory)
    key = (name or "").strip()
    if key not in presets:
        raise UnknownCollectionName(f"unknown collection: {name!r}")

    path = _categories_dir(directory) / f"{key}.txt"
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CategorySourceUnavailable(f"cannot read collection {key!r}: {exc}") from exc

    categories: list[str] = []
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        categories.append(line)

    if not categories:
        raise CategorySourceUnavailable(f"collection {key!r} has no categories")

    logger.debug("loaded collection %s with %d categories", key, len(categories))
    return categories


def draw_card(
    collection: Sequence[str],
    n: int,
    rng: random.Random | None = None,
) -> list[str]:
    """Draws ``n`` distinct categories, in the order they were drawn.

    Each draw is an independent uniform pick; duplicates of an already drawn
    category are rejected and drawn again.
    """
    if not collection:
        raise EmptyCollection("cannot draw from an empty collection")

    distinct = len(set(collection))
    if n <= 0 or n > distinct:
        raise InsufficientCategories(
            f"cannot draw {n} distinct categories from {distinct} available"
        )

    r = rng or random
    card: list[str] = []
    while len(card) < n:
        category = r.choice(collection)
        if category in card:
            continue
        card.append(category)
    return card
