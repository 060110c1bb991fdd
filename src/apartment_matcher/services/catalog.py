"""Load listing and building records from a JSON or YAML catalog file."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from ..models.listing import Building, Listing

logger = logging.getLogger(__name__)


def load_catalog(path: str) -> Tuple[List[Building], List[Listing]]:
    """
    Read buildings and listings from a catalog file.

    The file holds a mapping with ``buildings`` and ``listings`` arrays.
    Files ending in .json are parsed as JSON, anything else as YAML.

    Args:
        path: Path to the catalog file

    Returns:
        Tuple of (buildings, listings)

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file doesn't have the expected shape
    """
    catalog_file = Path(path)
    if not catalog_file.exists():
        raise FileNotFoundError(f"Catalog file not found: {path}")

    with open(catalog_file, "r") as f:
        if catalog_file.suffix.lower() == ".json":
            data = json.load(f)
        else:
            data = yaml.safe_load(f)

    buildings_raw, listings_raw = _validate_catalog(data, path)

    buildings = [Building.from_dict(raw) for raw in buildings_raw]
    listings = [Listing.from_dict(raw) for raw in listings_raw]

    logger.info(f"Loaded {len(listings)} listings and {len(buildings)} buildings from {path}")
    return buildings, listings


def _validate_catalog(data: Any, path: str) -> Tuple[List[Dict[str, Any]], List[Dict[str, Any]]]:
    """Validate catalog structure."""
    if not isinstance(data, dict):
        raise ValueError(f"Catalog {path} must contain a mapping with 'buildings' and 'listings'")

    buildings = data.get("buildings") or []
    listings = data.get("listings") or []
    if not isinstance(buildings, list) or not isinstance(listings, list):
        raise ValueError(f"Catalog {path}: 'buildings' and 'listings' must be lists")

    for section, records in (("buildings", buildings), ("listings", listings)):
        for index, record in enumerate(records):
            if not isinstance(record, dict) or record.get("id") is None:
                raise ValueError(f"Catalog {path}: {section}[{index}] must be a mapping with an 'id'")

    return buildings, listings
