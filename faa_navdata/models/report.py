"""
Build reports returned by the normalizers.

Each normalizer returns its database together with a report of counts and
diagnostics. Reports never print; ``summary_lines`` gives the text the CLI
logs.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .alias_map import AliasConflict, AliasMap


@dataclass
class BuildReport:
    """Base class for build reports."""

    warnings: List[str] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)

    def title(self) -> str:
        return 'Build Summary'

    def summary_lines(self) -> List[str]:
        """Human-readable summary of the counts."""
        return [f"Warnings: {len(self.warnings)}"] if self.warnings else []


@dataclass
class AirportBuildReport(BuildReport):
    """Counts from the airport/runway normalizer."""

    airports_read: int = 0
    runway_rows_read: int = 0
    airports_emitted: int = 0
    airports_without_runways: int = 0
    airports_with_aliases: int = 0
    alias_map: Optional[AliasMap] = None

    @property
    def alias_count(self) -> int:
        return self.alias_map.alias_count if self.alias_map else 0

    @property
    def conflicts(self) -> List[AliasConflict]:
        return list(self.alias_map.conflicts) if self.alias_map else []

    @property
    def conflict_count(self) -> int:
        return len(self.conflicts)

    def title(self) -> str:
        return 'Airport Database Build Summary'

    def summary_lines(self) -> List[str]:
        lines = [
            f"Airport database created with {self.airports_emitted} airports",
            f"Airports read: {self.airports_read}, runway rows read: {self.runway_rows_read}",
            f"Airports without runways: {self.airports_without_runways}",
            f"Airports with aliases: {self.airports_with_aliases}",
            f"Total alias count: {self.alias_count}",
        ]
        if self.conflict_count > 0:
            lines.append(f"WARNING: {self.conflict_count} identifier conflicts detected")
            lines.extend(f"  Conflict: {conflict}" for conflict in self.conflicts)
        return lines + super().summary_lines()


@dataclass
class NavaidBuildReport(BuildReport):
    """Counts from the navaid normalizer."""

    rows_read: int = 0
    navaids_emitted: int = 0
    skipped: int = 0
    replaced: int = 0
    kept_existing: int = 0
    type_distribution: Dict[str, int] = field(default_factory=dict)

    def title(self) -> str:
        return 'Navaid Database Build Summary'

    def summary_lines(self) -> List[str]:
        lines = [
            f"Total navaids: {self.navaids_emitted}",
            f"Skipped (invalid/missing data): {self.skipped}",
            f"Duplicate identifiers: {self.replaced} replaced, {self.kept_existing} kept",
            "Type distribution:",
        ]
        lines.extend(f"  {type_:<10} {count}" for type_, count in self.type_distribution.items())
        return lines + super().summary_lines()


@dataclass
class AirwayBuildReport(BuildReport):
    """Counts from the airway graph builder."""

    lines_read: int = 0
    waypoint_records: int = 0
    airway_records: int = 0
    non_victor_records: int = 0
    skipped_records: int = 0
    ignored_lines: int = 0
    victor_routes: int = 0
    airways_emitted: int = 0
    total_segments: int = 0
    resolved_from_navaid: int = 0
    resolved_from_waypoint: int = 0
    dropped_airways: List[str] = field(default_factory=list)
    missing_fixes: List[str] = field(default_factory=list)

    def add_missing_fix(self, identifier: str) -> None:
        """Record an unresolved fix once, keeping first-encounter order."""
        if identifier not in self.missing_fixes:
            self.missing_fixes.append(identifier)

    def title(self) -> str:
        return 'Airways Database Build Summary'

    def summary_lines(self, max_missing: int = 20) -> List[str]:
        lines = [
            f"Parsed {self.waypoint_records} enroute waypoint records, {self.airway_records} airway records",
            f"Skipped records: {self.skipped_records}",
            f"Victor routes found: {self.victor_routes} ({self.non_victor_records} non-Victor records ignored)",
            f"Total Victor airways: {self.airways_emitted}",
            f"Total segments: {self.total_segments}",
            f"  Resolved from navaids: {self.resolved_from_navaid}",
            f"  Resolved from EA waypoints: {self.resolved_from_waypoint}",
        ]
        if self.dropped_airways:
            lines.append(f"Airways dropped (fewer than 2 resolved fixes): {len(self.dropped_airways)}")
        if self.missing_fixes:
            shown = ', '.join(self.missing_fixes[:max_missing])
            more = '...' if len(self.missing_fixes) > max_missing else ''
            lines.append(f"Still missing fixes ({len(self.missing_fixes)} unique): {shown}{more}")
        return lines + super().summary_lines()


@dataclass
class NamedFixBuildReport(BuildReport):
    """Counts from the named-fix normalizer."""

    parsed: int = 0
    skipped: int = 0
    skip_reasons: Dict[str, int] = field(default_factory=dict)
    entries: int = 0
    columns: Dict[str, int] = field(default_factory=dict)

    def skip(self, reason: str) -> None:
        self.skipped += 1
        self.skip_reasons[reason] = self.skip_reasons.get(reason, 0) + 1

    def title(self) -> str:
        return 'VFR Waypoints Database Build Summary'

    def summary_lines(self) -> List[str]:
        columns = ', '.join(f"{key}={idx}" for key, idx in self.columns.items())
        lines = [
            f"Header columns found: {columns}",
            f"Total fixes parsed: {self.parsed}",
            f"Skipped (invalid): {self.skipped}",
        ]
        lines.extend(f"  {reason}: {count}" for reason, count in self.skip_reasons.items())
        lines.append(f"Output entries: {self.entries}")
        return lines + super().summary_lines()
