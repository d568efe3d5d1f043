"""Response Map Loader - Parse the keyword → response table.

File format (US-ASCII), one record per block:

    printer, printers
    Tell me more about that printer.
    Which model is it?
    <blank line>

The first line holds comma-separated keywords, the following non-blank lines
form the response. A blank line where keywords are expected ends the table,
and so does a keywords line without any response lines after it (that last
record is dropped).

Example:
    >>> loader = ResponseMapLoader("data/response_map.txt")
    >>> table = loader.load()
    >>> table["printer"]
    'Tell me more about that printer.\\nWhich model is it?'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)


@dataclass
class ResponseRecord:
    """One keywords line and the response registered under it."""

    keys: list[str] = field(default_factory=list)
    value: str = ""


def _split_keys(key_line: str) -> list[str]:
    """Split a keywords line at commas.

    "Crash, CRASHED ,slow" → ["crash", "crashed", "slow"]
    """
    keys = []
    for key in key_line.strip().lower().split(','):
        key = key.strip()
        if key:
            keys.append(key)
    return keys


def iter_records(lines: Iterable[str]) -> Iterator[ResponseRecord]:
    """Yield keyword records from raw resource lines.

    Stops at the first blank line in keyword position, at end of input,
    or at a keywords line that has no response lines.
    """
    it = iter(lines)
    while True:
        key_line = next(it, None)
        if key_line is None:
            return
        key_line = key_line.strip().lower()
        if not key_line:
            return

        value_lines = []
        for line in it:
            line = line.strip()
            if not line:
                break
            value_lines.append(line)

        if not value_lines:
            logger.debug(f"Keywords without a response, table ends: {key_line!r}")
            return

        yield ResponseRecord(keys=_split_keys(key_line), value="\n".join(value_lines))


def build_response_map(records: Iterable[ResponseRecord]) -> dict[str, str]:
    """Register each record's value under all of its keys (last write wins)."""
    response_map: dict[str, str] = {}
    for record in records:
        for key in record.keys:
            if key in response_map and response_map[key] != record.value:
                logger.debug(f"Keyword '{key}' redefined")
            response_map[key] = record.value
    return response_map


class ResponseMapLoader:
    """Load the keyword table from a text resource.

    The table is required: any read failure is logged and re-raised,
    so the caller never gets a partial or empty table by accident.

    Args:
        path: Path to the response map file
        encoding: Text encoding (default US-ASCII)
    """

    def __init__(self, path: str | Path, encoding: str = "ascii") -> None:
        self.path = Path(path)
        self.encoding = encoding

    def load(self) -> dict[str, str]:
        """Read and parse the resource.

        Returns:
            Mapping of keyword → response text

        Raises:
            FileNotFoundError: If the resource does not exist
            OSError: If the resource cannot be read or decoded
        """
        if not self.path.is_file():
            logger.error(f"Response map not found: {self.path}")
            raise FileNotFoundError(f"Response map not found: {self.path}")

        try:
            with open(self.path, encoding=self.encoding) as f:
                response_map = build_response_map(iter_records(f))
        except UnicodeDecodeError as e:
            logger.error(f"Error decoding {self.path}: {e}")
            raise OSError(f"Response map {self.path} is not valid {self.encoding} text: {e}") from e
        except OSError as e:
            logger.error(f"Error reading {self.path}: {e}")
            raise

        logger.info(f"Loaded {len(response_map)} keywords from {self.path}")
        return response_map
