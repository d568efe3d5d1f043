"""Input parsing - entries to word sets."""

from supportdesk.parsing.input_reader import InputReader, tokenize

__all__ = ['InputReader', 'tokenize']
