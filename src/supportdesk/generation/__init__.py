"""Response generation."""

from supportdesk.generation.responder import Responder

__all__ = ['Responder']
