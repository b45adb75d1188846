"""
Catalog loader for Phone Finder.

Loads data/phones.json once into an immutable tuple of PhoneRecord.
Records keep catalog order; that order decides which phones a summary
lists first.
"""

import json
from pathlib import Path
from typing import Optional, Sequence, Union

import pandas as pd

from config.settings import get_settings
from core.context import PhoneRecord
from core.errors import CatalogLoadError
from core.structured_logging import get_logger, timed

_logger = get_logger("catalog_loader")


def parse_catalog(raw: object) -> tuple[PhoneRecord, ...]:
    """
    Convert decoded catalog JSON into records.

    Accepts either a list of phone objects or {"phones": [...]}.

    Raises:
        CatalogLoadError: If the structure or any record is invalid
    """
    if isinstance(raw, dict) and "phones" in raw:
        raw = raw["phones"]
    if not isinstance(raw, list):
        raise CatalogLoadError("Catalog must be a list of phone objects")

    phones = []
    for idx, item in enumerate(raw):
        if not isinstance(item, dict):
            raise CatalogLoadError(f"Catalog entry {idx} is not an object")
        try:
            phones.append(PhoneRecord.from_dict(item))
        except (TypeError, ValueError) as e:
            raise CatalogLoadError(f"Catalog entry {idx} is invalid: {e}") from e
    return tuple(phones)


@timed("catalog_load")
def load_catalog(path: Optional[Union[str, Path]] = None) -> tuple[PhoneRecord, ...]:
    """
    Load the phone catalog.

    Args:
        path: JSON file to read (defaults to settings.catalog_path)

    Returns:
        Tuple of PhoneRecord in file order

    Raises:
        CatalogLoadError: If the file is missing, isn't valid JSON,
            or holds an invalid record
    """
    catalog_path = Path(path) if path else get_settings().catalog_path

    try:
        with open(catalog_path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError as e:
        raise CatalogLoadError(f"Catalog file not found: {catalog_path}") from e
    except json.JSONDecodeError as e:
        raise CatalogLoadError(f"Catalog file is not valid JSON: {catalog_path}: {e}") from e

    phones = parse_catalog(raw)
    _logger.info(
        f"Loaded {len(phones)} phones",
        extra={
            "event": "catalog_loaded",
            "catalog_path": str(catalog_path),
            "products_found": len(phones),
        }
    )
    return phones


def get_catalog_statistics(phones: Sequence[PhoneRecord]) -> dict:
    """
    Get statistics about the loaded catalog.

    Returns dict with:
    - total: Phone count
    - by_brand: Count by brand (largest first)
    - min_price / max_price / median_price: Price range in rupees
    - with_reviews: Phones that carry at least one review
    """
    if not phones:
        return {
            'total': 0,
            'by_brand': {},
            'min_price': None,
            'max_price': None,
            'median_price': None,
            'with_reviews': 0,
        }

    df = pd.DataFrame(
        [
            {
                'brand': p.brand,
                'price': p.price,
                'reviews': len(p.reviews),
            }
            for p in phones
        ]
    )
    by_brand = df['brand'].value_counts()

    return {
        'total': int(len(df)),
        'by_brand': {str(brand): int(count) for brand, count in by_brand.items()},
        'min_price': int(df['price'].min()),
        'max_price': int(df['price'].max()),
        'median_price': float(df['price'].median()),
        'with_reviews': int((df['reviews'] > 0).sum()),
    }
