"""SupportDesk - Keyword-triggered technical support responder.

Pipeline:
- InputReader: multi-line entries → normalized word sets
- Responder: keyword table lookup, random default fallback
- SupportSystem: welcome, dialog loop, goodbye

No NLU - a word either is a known keyword or it is not.
"""

__version__ = "0.1.0"
