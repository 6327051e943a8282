"""
Identifier alias map and conflict detection.

Airports are reachable through their primary identifier and through their
alternate identifiers (ICAO, IATA, GPS and local codes). The alias map is
append-only: the first registration of an identifier wins and a later
registration pointing at a different primary is recorded as a conflict,
never applied.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AliasConflict:
    """An identifier claimed by two different primaries."""

    alias: str
    existing_primary: str
    new_primary: str

    def __str__(self) -> str:
        return f'"{self.alias}" maps to both "{self.existing_primary}" and "{self.new_primary}"'

    def to_dict(self) -> dict:
        return {
            'alias': self.alias,
            'existing_primary': self.existing_primary,
            'new_primary': self.new_primary,
        }


@dataclass
class AliasMap:
    """Append-only identifier -> primary identifier map."""

    _mapping: Dict[str, str] = field(default_factory=dict)
    conflicts: List[AliasConflict] = field(default_factory=list)
    alias_count: int = 0

    def register(self, identifier: str, primary: str) -> Optional[AliasConflict]:
        """
        Register ``identifier`` as pointing to ``primary``.

        An identifier already mapped to the same primary is left alone. One
        mapped to a different primary keeps its mapping and a conflict is
        recorded.

        Returns:
            The conflict, if one was detected
        """
        existing = self._mapping.get(identifier)
        if existing is None:
            self._mapping[identifier] = primary
            return None
        if existing == primary:
            return None

        conflict = AliasConflict(identifier, existing, primary)
        self.conflicts.append(conflict)
        logger.warning(f"Conflict: {conflict}")
        return conflict

    def register_alias(self, alias: str, primary: str) -> Optional[AliasConflict]:
        """Register an alternate identifier, counting it in ``alias_count``."""
        self.alias_count += 1
        return self.register(alias, primary)

    def resolve(self, identifier: str) -> Optional[str]:
        """Return the primary identifier for ``identifier`` (case-insensitive)."""
        if not identifier:
            return None
        return self._mapping.get(identifier.strip().upper(), self._mapping.get(identifier))

    @property
    def conflict_count(self) -> int:
        return len(self.conflicts)

    def __contains__(self, identifier: str) -> bool:
        return identifier in self._mapping

    def __len__(self) -> int:
        return len(self._mapping)

    def __iter__(self) -> Iterator[str]:
        return iter(self._mapping)

    def items(self) -> Iterable[Tuple[str, str]]:
        return self._mapping.items()

    def to_dict(self) -> Dict[str, str]:
        """Mapping in registration order, for serialization."""
        return dict(self._mapping)

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> 'AliasMap':
        alias_map = cls()
        for identifier, primary in data.items():
            alias_map.register(identifier, primary)
        return alias_map

    @classmethod
    def from_airports(cls, airports) -> 'AliasMap':
        """
        Build the map for a collection of airports.

        Every primary identifier is registered to itself first; aliases are
        then registered in airport-then-alias order.

        Args:
            airports: Mapping of primary identifier to Airport
        """
        alias_map = cls()
        for primary in airports:
            alias_map.register(primary, primary)
        for primary, airport in airports.items():
            for alias in airport.aliases:
                alias_map.register_alias(alias, primary)

        logger.info(f"Alias map built: {len(alias_map)} identifiers ({alias_map.alias_count} aliases, "
                    f"{alias_map.conflict_count} conflicts)")
        return alias_map
