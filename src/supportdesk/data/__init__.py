"""Resource loaders for the keyword table and default responses."""

from supportdesk.data.loaders.response_map_loader import (
    ResponseMapLoader,
    ResponseRecord,
    build_response_map,
    iter_records,
)
from supportdesk.data.loaders.default_responses_loader import DefaultResponsesLoader

__all__ = [
    'ResponseMapLoader',
    'ResponseRecord',
    'build_response_map',
    'iter_records',
    'DefaultResponsesLoader',
]
