"""Choosing where the catalog comes from."""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from sqlalchemy.exc import SQLAlchemyError

from ..logging import get_logger
from .loader import load_catalog_file
from .storage import PlanetStore

logger = get_logger(__name__)


def load_catalog(
    store: Optional[PlanetStore] = None,
    path: Optional[Union[str, Path]] = None,
) -> List[Dict[str, Any]]:
    """Load raw catalog records, preferring the planet store.

    The store wins when it holds any rows. An empty or failing store
    falls through to the JSON file.

    Args:
        store: Planet store to try first, if any
        path: JSON catalog to read otherwise; the packaged catalog by default

    Raises:
        CatalogUnreadable: If it comes to the file and the file cannot be read
    """
    if store is not None:
        try:
            records = store.list_records()
        except SQLAlchemyError as e:
            logger.warning(f"Planet store unavailable, using catalog file: {e}")
        else:
            if records:
                logger.debug(f"Using {len(records)} planets from {store.db_path}")
                return records
            logger.debug("Planet store is empty, using catalog file")

    return load_catalog_file(path)
