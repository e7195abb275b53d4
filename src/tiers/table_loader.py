"""Load and save tier tables as JSON.

File layout::

    {
      "volunteer_ranks": [{"name": ..., "min_points": 0, "max_points": 499, ...}, ...],
      "community_tiers": [...],
      "levels": [...]
    }

``max_points`` is ``null`` for the open top band. Every table is validated
on load; a malformed file fails with :class:`ConfigurationError`.
"""

import json
import logging
from pathlib import Path
from typing import Dict, Optional

from src.tiers.config import TIER_TABLES_FILE
from src.tiers.tier_table import TierTable
from src.validation import ConfigurationError

logger = logging.getLogger(__name__)

TABLE_KEYS = ("volunteer_ranks", "community_tiers", "levels")


def load_tier_tables(path: Optional[Path] = None) -> Dict[str, TierTable]:
    """Read and validate the tier tables stored at *path*.

    Only the tables present in the file are returned; callers fall back to
    the built-in tables for the rest.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ConfigurationError: If the JSON is corrupt or a table is malformed.
    """
    path = path or TIER_TABLES_FILE
    if not path.exists():
        raise FileNotFoundError(f"Tier table file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Corrupt tier table file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"{path}: expected a JSON object at top level")

    unknown = set(data) - set(TABLE_KEYS)
    if unknown:
        raise ConfigurationError(f"{path}: unknown table(s) {sorted(unknown)}")

    tables = {key: TierTable.from_dicts(key, data[key]) for key in TABLE_KEYS if key in data}
    logger.info("Loaded %d tier table(s) from %s", len(tables), path)
    return tables


def save_tier_tables(tables: Dict[str, TierTable], path: Optional[Path] = None) -> Path:
    """Write *tables* to *path* in the layout :func:`load_tier_tables` reads."""
    path = path or TIER_TABLES_FILE
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {key: [band.to_dict() for band in table] for key, table in tables.items()}
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)

    logger.info("Saved %d tier table(s) to %s", len(tables), path)
    return path
