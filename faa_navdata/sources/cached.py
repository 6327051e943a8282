from abc import ABC
import inspect
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

logger = logging.getLogger(__name__)


class CachedSource(ABC):
    """
    Base class for sources that download their raw data.

    Downloaded data is cached on disk so that repeated builds read the same
    bytes. It handles:
    - Caching downloaded text to disk
    - Checking cache validity based on age
    - Fetching and caching new data when needed

    Key Format:
    The cache key follows the format ``{base_key}_{parameter}``; the
    base_key must correspond to a fetch method in the implementing class.
    For example the key 'navaids_US' requires a method named
    'fetch_navaids' (taking no argument or the parameter 'US').
    """

    def __init__(self, cache_dir: str):
        """
        Initialize the cached source.

        Args:
            cache_dir: Base directory for caching
        """
        self.cache_dir = Path(cache_dir)
        self.source_name = self.__class__.__name__.lower()
        self.cache_path = self.cache_dir / self.source_name
        self.cache_path.mkdir(parents=True, exist_ok=True)
        self._force_refresh = False
        self._never_refresh = False

    def set_force_refresh(self, force_refresh: bool = True) -> None:
        """Set whether to force refresh of cached data."""
        self._force_refresh = force_refresh

    def set_never_refresh(self, never_refresh: bool = True) -> None:
        """
        Set whether to never refresh cached data.
        If set to True, will use cached data if it exists, regardless of age.
        """
        self._never_refresh = never_refresh

    def _get_cache_file(self, key: str, ext: str) -> Path:
        """Get the cache file path for a given key and extension."""
        return self.cache_path / f"{key}.{ext}"

    def _is_cache_valid(self, cache_file: Path, max_age_days: Optional[int] = None) -> Tuple[bool, Optional[str]]:
        """
        Check if the cache file is valid (exists and not too old).

        Returns:
            Tuple[bool, Optional[str]]: (is_valid, reason if invalid)
        """
        if self._force_refresh:
            return False, "force refresh"
        if not cache_file.exists():
            return False, "missing"
        if self._never_refresh:
            return True, None
        if max_age_days is None:
            return True, None
        file_age = datetime.now() - datetime.fromtimestamp(cache_file.stat().st_mtime)
        if file_age.days <= max_age_days:
            return True, None
        return False, "expired"

    def _save_to_cache(self, data: str, key: str, ext: str) -> None:
        """Save fetched text to cache with the specified extension."""
        if ext != 'csv':
            raise ValueError(f"Unsupported file extension: {ext}")
        with open(self._get_cache_file(key, ext), 'w', encoding='utf-8') as f:
            f.write(data)

    def _validate_fetch_method(self, base_key: str) -> None:
        """
        Validate that the fetch method exists for the given base key.

        Raises:
            NotImplementedError: If the fetch method doesn't exist
        """
        method_name = f"fetch_{base_key}"
        if not hasattr(self, method_name):
            raise NotImplementedError(
                f"No fetch method found for key '{base_key}'. "
                f"Class {self.__class__.__name__} must implement a method named '{method_name}'."
            )

    def get_cached_file(self, key: str, ext: str, param: str, max_age_days: Optional[int] = None) -> Path:
        """
        Return the path of a cached file, fetching it first if needed.

        Args:
            key: Base key for the data type (e.g., 'navaids')
            ext: File extension (only csv is supported)
            param: Parameter passed to the fetch method and used in the cache key
            max_age_days: Maximum age of cache in days (None for no limit)

        Returns:
            Path to the cached file

        Raises:
            NotImplementedError: If the fetch method doesn't exist
            ValueError: If the file extension is not supported
        """
        cache_key = f"{key}_{param}"
        cache_file = self._get_cache_file(cache_key, ext)

        is_valid, reason = self._is_cache_valid(cache_file, max_age_days)
        if is_valid:
            logger.info(f"{cache_file.name} retrieved from cache {self.source_name}")
            return cache_file

        self._validate_fetch_method(key)
        fetch_method = getattr(self, f"fetch_{key}")

        sig = inspect.signature(fetch_method)
        if len(sig.parameters) == 0:
            data = fetch_method()
        else:
            data = fetch_method(param)

        self._save_to_cache(data, cache_key, ext)
        logger.info(f"{cache_file.name} [{reason}] fetched using {fetch_method.__name__}")
        return cache_file
