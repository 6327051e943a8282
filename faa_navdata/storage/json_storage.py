import json
import logging
from pathlib import Path
from typing import Any, Dict, Type, TypeVar, Union

from ..exceptions import InvalidInputError, MissingInputError

logger = logging.getLogger(__name__)

T = TypeVar('T')

PathLike = Union[str, Path]


class JSONStorage:
    """
    Persist keyed databases as JSON objects.

    Output is written with a two-space indent in insertion order, so that
    byte-identical inputs give byte-identical files.
    """

    def __init__(self, indent: int = 2):
        self.indent = indent

    def dumps(self, data: Dict[str, Any]) -> str:
        return json.dumps(data, indent=self.indent, ensure_ascii=False)

    def save_raw(self, data: Dict[str, Any], filepath: PathLike) -> Path:
        """Save a plain dictionary to a JSON file, creating parent directories."""
        path = Path(filepath)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(self.dumps(data))
        logger.info(f"Output written to: {path} ({path.stat().st_size / 1024:.2f} KB)")
        return path

    def save_keyed(self, database: Dict[str, Any], filepath: PathLike) -> Path:
        """Save a mapping of key -> model object (anything with ``to_dict``)."""
        return self.save_raw({key: item.to_dict() for key, item in database.items()}, filepath)

    def load_raw(self, filepath: PathLike) -> Dict[str, Any]:
        """Load a JSON object from file."""
        path = Path(filepath)
        if not path.exists():
            raise MissingInputError(path, 'database file')
        with open(path, 'r', encoding='utf-8') as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise InvalidInputError('Database file is not valid JSON', path, str(e))
        if not isinstance(data, dict):
            raise InvalidInputError('Database file must contain a keyed JSON object', path)
        return data

    def load_keyed(self, filepath: PathLike, cls: Type[T]) -> Dict[str, T]:
        """
        Load a keyed database, converting each entry with ``cls.from_dict``.

        Raises:
            MissingInputError: If the file does not exist
            InvalidInputError: If the file or one of its entries is malformed
        """
        database = {}
        for key, item in self.load_raw(filepath).items():
            try:
                database[key] = cls.from_dict(item)
            except (KeyError, TypeError, AttributeError, ValueError) as e:
                raise InvalidInputError(f"Malformed entry {key!r} in database file", filepath,
                                        f"{type(e).__name__}: {e}")
        return database
