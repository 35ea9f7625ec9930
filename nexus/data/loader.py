"""Load tagged entity exports from JSON files"""

import json
from pathlib import Path
from typing import Union

from loguru import logger

from nexus.data.schema import InvalidEntityError, TaggedEntity, coerce_entity


def load_entities(path: Union[str, Path]) -> list[TaggedEntity]:
    """
    Load a JSON array of HOST or persona records

    Args:
        path: JSON file holding a list of ``{"id", "name", "tags"}`` objects

    Returns:
        Validated TaggedEntity list, in file order

    Raises:
        FileNotFoundError: if the file does not exist
        InvalidEntityError: if the file is not a list or any record is malformed
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Entities file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        records = json.load(f)

    if not isinstance(records, list):
        raise InvalidEntityError(f"{path} must contain a JSON list, got {type(records).__name__}")

    entities = []
    for i, record in enumerate(records):
        try:
            entities.append(coerce_entity(record))
        except InvalidEntityError as e:
            raise InvalidEntityError(f"{path} record {i}: {e}") from e

    logger.info(f"Loaded {len(entities)} entities from {path}")
    return entities
