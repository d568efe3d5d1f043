"""Input Reader - Turn multi-line text entries into sets of words.

An entry is one or more non-blank lines, ended by a blank line or the end of
the stream. Lines are trimmed, lower-cased and joined with single spaces; the
joined text is echoed (prefixed with '>') and then chopped into words with
punctuation removed.
"""

from __future__ import annotations

import logging
import re
import string
from typing import Iterator, TextIO

logger = logging.getLogger(__name__)

# ASCII punctuation, stripped so "broken." and "broken" are the same word
_PUNCT_RE = re.compile(f"[{re.escape(string.punctuation)}]")

ECHO_PREFIX = ">"


def tokenize(text: str) -> set[str]:
    """Normalize text into a set of words.

    "Hello, world!  Bye." → {"hello", "world", "bye"}
    """
    text = _PUNCT_RE.sub("", text.strip().lower())
    return set(text.split())


class InputReader:
    """Read entries from a text stream and provide them as word sets.

    Returns None once the stream is exhausted. An entry that has text but
    no words left after stripping punctuation (e.g. "?!") gives an empty
    set, which is not the end of input.

    Example:
        >>> reader = InputReader(io.StringIO("My printer\\nis broken\\n\\n"))
        >>> reader.next_record()
        >my printer is broken
        {'my', 'printer', 'is', 'broken'}
        >>> reader.next_record() is None
        True
    """

    def __init__(self, stream: TextIO, echo: bool = True) -> None:
        """Initialize reader.

        Args:
            stream: Source of raw lines (file, stdin, StringIO)
            echo: Print each collected entry before tokenizing it
        """
        self.stream = stream
        self.echo = echo
        self._exhausted = False

    def read_entry(self) -> str | None:
        """Collect one entry as a single normalized line of text.

        Returns:
            The joined text, or None if no line was collected
        """
        if self._exhausted:
            return None

        parts: list[str] = []
        while True:
            line = self.stream.readline()
            if not line:
                self._exhausted = True
                break
            line = line.strip().lower()
            if not line:
                break
            parts.append(line)

        if not parts:
            return None
        return " ".join(parts)

    def next_record(self) -> set[str] | None:
        """Read the next entry and return its words.

        Returns:
            Set of words, or None at end of input
        """
        try:
            text = self.read_entry()
        except (OSError, UnicodeDecodeError) as e:
            # Stream is unusable now; report this entry as empty and stop after it
            logger.error(f"Unexpected error reading input: {e}")
            self._exhausted = True
            return set()

        if text is None:
            return None

        if self.echo:
            print(ECHO_PREFIX + text)

        return tokenize(text)

    def __iter__(self) -> Iterator[set[str]]:
        while True:
            words = self.next_record()
            if words is None:
                return
            yield words
