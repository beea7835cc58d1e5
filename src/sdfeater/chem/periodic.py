"""
Periodic table lookup for atom enrichment.

The bundled ``data/periodic_table.json`` maps element symbols to their
attributes. It is read once per process.
"""

__all__ = ["PeriodicTable"]

import json
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Dict, Optional, Union

from loguru import logger


@lru_cache(maxsize=1)
def _bundled_elements() -> Dict[str, Dict[str, Any]]:
    text = (
        resources.files("sdfeater")
        .joinpath("data")
        .joinpath("periodic_table.json")
        .read_text(encoding="utf-8")
    )
    return json.loads(text)


class PeriodicTable:
    """Read-only element attributes keyed by symbol."""

    def __init__(self, elements: Dict[str, Dict[str, Any]]):
        self._elements = elements

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> "PeriodicTable":
        """
        Load a periodic table.

        Args:
            path: JSON file mapping symbols to attribute objects; the
                bundled table when omitted

        Returns:
            PeriodicTable instance

        Raises:
            OSError: If the file cannot be read
            ValueError: If the file is not valid JSON
        """
        if path is None:
            elements = _bundled_elements()
        else:
            elements = json.loads(Path(path).read_text(encoding="utf-8"))
        logger.debug(f"Loaded periodic table with {len(elements)} elements")
        return cls(elements)

    def lookup(self, symbol: str) -> Optional[Dict[str, Any]]:
        """
        Attributes of an element, or None for unknown symbols.

        Example:
            >>> PeriodicTable.load().lookup("C")["name"]
            'Carbon'
            >>> PeriodicTable.load().lookup("R#") is None
            True
        """
        return self._elements.get(symbol)

    def __contains__(self, symbol: str) -> bool:
        return symbol in self._elements

    def __len__(self) -> int:
        return len(self._elements)
