"""Utility functions for file I/O."""

import dataclasses
import json
import logging
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

T = TypeVar('T', bound=BaseModel)
logger = logging.getLogger('golfcup.utils')


def load_json(
    path: Path | str,
    schema: type[T] | None = None,
) -> Any | T:
    """
    Load JSON file with optional schema validation.

    Args:
        path: Path to JSON file (str or Path object)
        schema: Optional Pydantic model to validate against

    Returns:
        Parsed JSON (validated if schema provided)

    Raises:
        FileNotFoundError: If file doesn't exist
        json.JSONDecodeError: If JSON is malformed
        ValueError: If schema validation fails

    Example:
        from golfcup.schemas import TournamentFile
        tournament = load_json('data/tournament.json', schema=TournamentFile)
    """
    path = Path(path)

    logger.debug(f'Loading JSON from: {path}')

    if not path.exists():
        logger.error(f'File not found: {path}')
        raise FileNotFoundError(f'File not found: {path}')

    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f'Invalid JSON in {path}: {e.msg} at position {e.pos}')
        raise json.JSONDecodeError(f'Invalid JSON in {path}: {e.msg}', e.doc, e.pos) from e

    if schema:
        try:
            validated = schema.model_validate(data)
            logger.debug(f'Schema validation passed for: {path}')
            return validated
        except ValidationError as e:
            logger.error(f'Schema validation failed for {path}: {e}')
            raise ValueError(f'Schema validation failed for {path}:\n{e}') from e

    return data


def to_jsonable(data: Any) -> Any:
    """Convert dataclasses and Pydantic models (at any depth) to plain JSON data."""
    if isinstance(data, BaseModel):
        return data.model_dump()
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        return {f.name: to_jsonable(getattr(data, f.name)) for f in dataclasses.fields(data)}
    if isinstance(data, dict):
        return {str(k): to_jsonable(v) for k, v in data.items()}
    if isinstance(data, (list, tuple)):
        return [to_jsonable(v) for v in data]
    return data


def save_json(
    path: Path | str,
    data: Any,
    indent: int = 2,
) -> None:
    """
    Save data as JSON file, creating parent directories as needed.

    Args:
        path: Path to write to (str or Path object)
        data: JSON-serializable data, dataclass or Pydantic model
        indent: Indentation level (default: 2 spaces)

    Raises:
        TypeError: If data is not JSON-serializable
        OSError: If file cannot be written
    """
    path = Path(path)

    logger.debug(f'Saving JSON to: {path}')
    path.parent.mkdir(parents=True, exist_ok=True)

    try:
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(to_jsonable(data), f, indent=indent, ensure_ascii=False)
    except TypeError as e:
        logger.error(f'Data is not JSON-serializable: {e}')
        raise TypeError(f'Data is not JSON-serializable: {e}') from e
    except OSError as e:
        logger.error(f'Failed to write file {path}: {e}')
        raise
