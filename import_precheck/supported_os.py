"""
Catalog of operating systems supported for image import.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Set

from .exceptions import CatalogError, UnsupportedOSError
from .logging_config import get_logger

logger = get_logger('supported_os')


class SupportedOSCatalog:
    """Supported OS identifiers, loaded from a JSON catalog file."""

    # Class-level cache to prevent repeated loading
    _cached_data: Dict[str, Dict[str, str]] = {}

    def __init__(self, catalog_path: Optional[str] = None, extra_osids: Optional[Iterable[str]] = None):
        """
        Initialize the catalog.

        Args:
            catalog_path: Optional path to a catalog JSON file; defaults to the
                catalog shipped with the package
            extra_osids: Additional OS identifiers to treat as supported

        Raises:
            CatalogError: If the catalog file is missing or malformed
        """
        self.catalog_path = str(catalog_path or self._get_default_catalog_path())
        self.extra_osids: Set[str] = set(extra_osids or [])
        self._entries: Dict[str, str] = {}
        self._load_catalog()

    @staticmethod
    def _get_default_catalog_path() -> Path:
        return Path(__file__).parent / "data" / "supported_os.json"

    def _load_catalog(self) -> None:
        if self.catalog_path in self._cached_data:
            self._entries = self._cached_data[self.catalog_path]
            return

        try:
            with open(self.catalog_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            raise CatalogError("file not found", self.catalog_path) from None
        except json.JSONDecodeError as e:
            raise CatalogError(f"invalid JSON: {e}", self.catalog_path) from e

        self._entries = self._parse_catalog(data)
        self._cached_data[self.catalog_path] = self._entries
        logger.debug(f"Loaded {len(self._entries)} supported OS entries from {self.catalog_path}")

    def _parse_catalog(self, data: Any) -> Dict[str, str]:
        if not isinstance(data, dict) or not isinstance(data.get("supported_os"), list):
            raise CatalogError("expected an object with a 'supported_os' array", self.catalog_path)

        entries = {}
        for entry in data["supported_os"]:
            if not isinstance(entry, dict) or not isinstance(entry.get("osid"), str) or not entry["osid"]:
                raise CatalogError(f"invalid entry {entry!r}", self.catalog_path)
            entries[entry["osid"]] = entry.get("description", "")
        return entries

    def supported_osids(self) -> List[str]:
        """Return all supported OS identifiers, sorted."""
        return sorted(set(self._entries) | self.extra_osids)

    def get_description(self, osid: str) -> Optional[str]:
        """
        Get the human-readable name of an OS identifier.

        Args:
            osid: OS identifier, e.g. "ubuntu-1804"

        Returns:
            Description from the catalog, "" for identifiers added through
            configuration, or None when the identifier is unsupported
        """
        if osid in self._entries:
            return self._entries[osid]
        if osid in self.extra_osids:
            return ""
        return None

    def validate_os(self, osid: str) -> None:
        """
        Check that an OS identifier is supported for import.

        Raises:
            UnsupportedOSError: If the identifier is not in the catalog
        """
        if not self.is_supported(osid):
            raise UnsupportedOSError(osid)

    def is_supported(self, osid: str) -> bool:
        """Return True if the exact OS identifier, suffix included, is supported."""
        return osid in self._entries or osid in self.extra_osids

    def reload(self) -> None:
        """Reload the catalog from file, clearing its cache entry."""
        self._cached_data.pop(self.catalog_path, None)
        self._load_catalog()

    @classmethod
    def clear_cache(cls) -> None:
        """Clear all cached catalog data."""
        cls._cached_data.clear()
