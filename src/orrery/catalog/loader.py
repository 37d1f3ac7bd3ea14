"""Reading planet catalogs from JSON files."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..errors import CatalogUnreadable
from ..logging import get_logger

logger = get_logger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent / "planets.json"


def load_catalog_file(path: Optional[Union[str, Path]] = None) -> List[Dict[str, Any]]:
    """Load raw planet records from a JSON file.

    The file holds either a list of records or an object with a
    ``planets`` list. Records are returned untouched; normalization is
    the caller's business.

    Args:
        path: JSON file to read. Defaults to the catalog shipped with orrery.

    Returns:
        The raw records, in file order

    Raises:
        CatalogUnreadable: If the file cannot be read or does not hold a list
    """
    path = Path(path) if path is not None else DEFAULT_CATALOG_PATH
    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except OSError as e:
        raise CatalogUnreadable(str(path), e.strerror or str(e)) from e
    except json.JSONDecodeError as e:
        raise CatalogUnreadable(str(path), f"invalid JSON: {e}") from e

    if isinstance(payload, dict) and "planets" in payload:
        payload = payload["planets"]
    if not isinstance(payload, list):
        raise CatalogUnreadable(str(path), "expected a list of planet records")

    logger.debug(f"Loaded {len(payload)} catalog records from {path}")
    return payload
