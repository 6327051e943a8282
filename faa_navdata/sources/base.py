from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Tuple, Union

from ..exceptions import MissingInputError
from ..models.report import BuildReport


class SourceInterface(ABC):
    """
    Base interface for all raw data sources.

    A source reads its own raw input file(s) and normalizes them into one
    keyed database plus a build report. Sources share no mutable state; a
    build is a full re-derivation from the input files.
    """

    @abstractmethod
    def build(self) -> Tuple[Dict[str, Any], BuildReport]:
        """
        Build the normalized database from this source.

        Implementations must check their required inputs (``require_file``)
        before doing any processing.

        Returns:
            Tuple of (database keyed by identifier, build report)
        """
        pass

    @staticmethod
    def require_file(path: Union[str, Path], description: str = 'input file') -> Path:
        """
        Return ``path`` as a Path, raising MissingInputError if it does not exist.
        """
        path = Path(path)
        if not path.is_file():
            raise MissingInputError(path, description)
        return path

    @staticmethod
    def read_text(path: Path) -> str:
        """Read an input file fully into memory."""
        with open(path, 'r', encoding='utf-8', errors='replace') as f:
            return f.read()
