"""
Quote-aware parsing of comma-delimited extracts.

The FAA and OurAirports extracts wrap most fields in double quotes and may
carry commas inside quoted values (airport names, municipalities). Each line
is scanned character by character; a quote toggles the "inside quotes"
state and a comma outside quotes ends the current field.

Escaped or doubled quotes inside a quoted field are not supported: a doubled
quote simply toggles the state twice and both characters are dropped.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List

logger = logging.getLogger(__name__)

QUOTE = '"'
DELIMITER = ','


def parse_line(line: str) -> List[str]:
    """
    Split one delimited line into trimmed fields with quotes stripped.

    Args:
        line: A single line of comma-delimited text

    Returns:
        Ordered list of field values
    """
    fields = []
    current = []
    in_quotes = False

    for char in line:
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char == DELIMITER and not in_quotes:
            fields.append(''.join(current).strip())
            current = []
        else:
            current.append(char)
    fields.append(''.join(current).strip())

    return fields


@dataclass
class DelimitedTable:
    """Header plus data rows of a delimited extract."""

    header: List[str] = field(default_factory=list)
    rows: List[List[str]] = field(default_factory=list)

    def records(self) -> Iterator[Dict[str, str]]:
        """
        Iterate over rows as dictionaries keyed by header name.

        Ragged rows are padded: a column missing from a row yields an
        empty string rather than an error.
        """
        for row in self.rows:
            yield {
                name: row[idx] if idx < len(row) else ''
                for idx, name in enumerate(self.header)
            }

    def __len__(self) -> int:
        return len(self.rows)


def split_lines(text: str) -> List[str]:
    """Split raw text on newlines, dropping a leading byte order mark."""
    if text.startswith('\ufeff'):
        text = text[1:]
    return text.split('\n')


def parse_table(text: str) -> DelimitedTable:
    """
    Parse a full delimited extract whose first line is the header.

    Blank lines (including a trailing one) produce no row.

    Args:
        text: The full contents of the extract

    Returns:
        DelimitedTable with the header names and the parsed data rows
    """
    lines = split_lines(text)
    if not lines or not lines[0].strip():
        return DelimitedTable()

    table = DelimitedTable(header=parse_line(lines[0]))
    for line in lines[1:]:
        if not line.strip():
            continue
        table.rows.append(parse_line(line))

    logger.debug(f"Parsed {len(table.rows)} rows with {len(table.header)} columns")
    return table
