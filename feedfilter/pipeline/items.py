"""Loading candidate items from YAML or JSON files."""

from pathlib import Path
from typing import List

import yaml
from pydantic import ValidationError

from feedfilter.domain.models import FeedItem
from feedfilter.logging import get_logger

from .exceptions import ItemsFileError

logger = get_logger(__name__, component="items")


def load_items(path: Path) -> List[FeedItem]:
    """
    Load candidate items from a file.

    The file holds either a list of item mappings or a mapping with an
    ``items`` list. JSON files are read with the YAML parser, which accepts
    them as-is.

    Args:
        path: YAML or JSON file

    Returns:
        Validated items in file order

    Raises:
        ItemsFileError: If the file is unreadable, malformed, or an item is invalid
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ItemsFileError("file not found", path) from e
    except yaml.YAMLError as e:
        raise ItemsFileError(f"failed to parse: {e}", path) from e
    except OSError as e:
        raise ItemsFileError(f"failed to read: {e}", path) from e

    if data is None:
        raw_items = []
    elif isinstance(data, dict) and "items" in data:
        raw_items = data["items"] or []
    else:
        raw_items = data

    if not isinstance(raw_items, list):
        raise ItemsFileError(
            f"expected a list of items, got {type(raw_items).__name__}", path
        )

    items = []
    for index, raw_item in enumerate(raw_items):
        if not isinstance(raw_item, dict):
            raise ItemsFileError(
                f"expected a mapping, got {type(raw_item).__name__}", path, index
            )
        try:
            items.append(FeedItem.model_validate(raw_item))
        except ValidationError as e:
            messages = "; ".join(
                f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise ItemsFileError(messages, path, index) from e

    logger.debug(
        f"Loaded {len(items)} items from {path}",
        extra={"event": "items.loaded", "item_count": len(items), "path": str(path)},
    )
    return items
