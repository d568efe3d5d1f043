"""Default Responses Loader - What to say when no keyword matches.

One response per line, taken literally. Blank lines become empty responses.
The resource is optional: if it cannot be read, or is empty, the built-in
fallback response is used instead.
"""

from __future__ import annotations

import logging
from pathlib import Path

from supportdesk.core import FALLBACK_RESPONSE

logger = logging.getLogger(__name__)


class DefaultResponsesLoader:
    """Load fallback responses, never returning an empty list.

    Example:
        >>> loader = DefaultResponsesLoader("data/default.txt")
        >>> responses = loader.load()
        >>> len(responses) >= 1
        True
    """

    def __init__(
        self,
        path: str | Path,
        encoding: str = "ascii",
        fallback: str = FALLBACK_RESPONSE,
    ) -> None:
        self.path = Path(path)
        self.encoding = encoding
        self.fallback = fallback

    def load(self) -> list[str]:
        responses = []
        try:
            with open(self.path, encoding=self.encoding) as f:
                for line in f:
                    responses.append(line.rstrip('\n'))
        except FileNotFoundError:
            logger.warning(f"Unable to open {self.path}")
            responses = []
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"A problem was encountered reading {self.path}: {e}")
            responses = []

        # Make sure we have at least one response
        if not responses:
            responses.append(self.fallback)
        return responses
