"""
OpenRouter provider for raw API operations
Uses OpenAI client with OpenRouter's API endpoint
"""

import logging
from typing import Optional

from .openai import OpenAIProvider
from ..core.config import LinguaScribeConfig

logger = logging.getLogger(__name__)

OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"


class OpenRouterProvider(OpenAIProvider):
    """OpenRouter provider for raw API operations"""

    name = "openrouter"

    AUDIO_FORMATS = {
        **OpenAIProvider.AUDIO_FORMATS,
        "audio/aac": "aac",
        "audio/ogg": "ogg",
        "audio/flac": "flac",
        "audio/x-flac": "flac",
        "audio/mp4": "m4a",
        "audio/x-m4a": "m4a",
    }
    ACCEPTS_VIDEO = True

    def _get_api_key(self, config: LinguaScribeConfig) -> str:
        if not config.openrouter_api_key:
            raise ValueError("OpenRouter API key is required")
        return config.openrouter_api_key

    def _get_base_url(self) -> Optional[str]:
        return OPENROUTER_BASE_URL
