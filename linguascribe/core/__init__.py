"""Configuration and shared helpers"""

from .config import LinguaScribeConfig, setup_logging
from .utils import extract_json_block

__all__ = [
    "LinguaScribeConfig",
    "setup_logging",
    "extract_json_block"
]
