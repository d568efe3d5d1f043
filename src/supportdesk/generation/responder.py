"""Responder - Generate a response from a set of input words."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Iterable

import numpy as np

from supportdesk.core import SupportConfig, DEFAULT_CONFIG, FALLBACK_RESPONSE
from supportdesk.data.loaders.response_map_loader import ResponseMapLoader
from supportdesk.data.loaders.default_responses_loader import DefaultResponsesLoader


class Responder:
    """Keyword lookup with a random default.

    If any input word is a known keyword, its response is returned.
    Otherwise one of the default responses is picked uniformly at random.

    NOTE: words are looked up in set iteration order, so when an input holds
    several keywords with different responses, which one wins is unspecified
    and may differ between runs.

    Example:
        >>> responder = Responder({"slow": "Have you tried rebooting?"}, ["Hmm."])
        >>> responder.generate_response({"it", "is", "slow"})
        'Have you tried rebooting?'
        >>> responder.generate_response({"hello"})
        'Hmm.'
    """

    def __init__(
        self,
        response_map: Mapping[str, str],
        default_responses: Sequence[str],
        seed: int | None = None,
        fallback: str = FALLBACK_RESPONSE,
    ) -> None:
        """Initialize responder.

        Args:
            response_map: Keyword → response
            default_responses: Responses used when nothing matches
            seed: Random seed for default picks (None = random)
            fallback: Used if default_responses is empty
        """
        self._response_map: dict[str, str] = dict(response_map)
        self._default_responses: tuple[str, ...] = tuple(default_responses) or (fallback,)
        self._rng = np.random.default_rng(seed)

    @classmethod
    def from_config(cls, config: SupportConfig | None = None) -> Responder:
        """Build a responder from the resources named in config.

        Raises:
            OSError: If the response map cannot be read
        """
        config = config or DEFAULT_CONFIG
        response_map = ResponseMapLoader(
            config.response_map_path, encoding=config.encoding,
        ).load()
        default_responses = DefaultResponsesLoader(
            config.default_responses_path,
            encoding=config.encoding,
            fallback=config.fallback_response,
        ).load()
        return cls(
            response_map,
            default_responses,
            seed=config.seed,
            fallback=config.fallback_response,
        )

    @property
    def default_responses(self) -> tuple[str, ...]:
        return self._default_responses

    def generate_response(self, words: Iterable[str]) -> str:
        """Generate a response from a given set of input words.

        Args:
            words: Words entered by the user

        Returns:
            The response to display
        """
        for word in words:
            response = self._response_map.get(word)
            if response is not None:
                return response
        # None of the words was recognized
        return self.pick_default_response()

    def pick_default_response(self) -> str:
        """Randomly select one of the default responses."""
        index = int(self._rng.integers(len(self._default_responses)))
        return self._default_responses[index]

    def lookup(self, keyword: str) -> str | None:
        return self._response_map.get(keyword)

    def keywords(self) -> list[str]:
        return list(self._response_map)

    def __len__(self) -> int:
        return len(self._response_map)

    def __contains__(self, keyword: str) -> bool:
        return keyword in self._response_map
