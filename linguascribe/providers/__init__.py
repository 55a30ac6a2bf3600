"""AI providers for LinguaScribe"""

from .base import BaseProvider
from .gemini import GeminiProvider
from .openai import OpenAIProvider
from .anthropic import AnthropicProvider
from .openrouter import OpenRouterProvider
from .factory import create_provider, get_available_providers, supports_media

__all__ = [
    "BaseProvider",
    "GeminiProvider",
    "OpenAIProvider",
    "AnthropicProvider",
    "OpenRouterProvider",
    "create_provider",
    "get_available_providers",
    "supports_media"
]
