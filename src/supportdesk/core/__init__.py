"""Configuration for the support system."""

from dataclasses import dataclass


# Said when nothing else can be said and no default file is usable
FALLBACK_RESPONSE = "Could you elaborate on that?"


@dataclass
class SupportConfig:
    """Configuration for resources and session behavior.
    
    Attributes:
        response_map_path: Keyword table resource (required)
        default_responses_path: Fallback responses, one per line (optional)
        encoding: Text encoding of both resources and the input stream
        fallback_response: Used when the default responses are missing/empty
        exit_word: Token that ends the session
        seed: Random seed for default picks (None = random)
    """
    
    response_map_path: str = "data/response_map.txt"
    default_responses_path: str = "data/default.txt"
    encoding: str = "ascii"
    fallback_response: str = FALLBACK_RESPONSE
    exit_word: str = "bye"
    seed: int | None = None


# Global default config
DEFAULT_CONFIG = SupportConfig()
