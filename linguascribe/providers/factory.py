"""
Provider factory for creating AI providers
"""

from .base import BaseProvider
from .gemini import GeminiProvider
from .openai import OpenAIProvider
from .openrouter import OpenRouterProvider
from .anthropic import AnthropicProvider
from ..core.config import LinguaScribeConfig


PROVIDERS = {
    "gemini": GeminiProvider,
    "openai": OpenAIProvider,
    "openrouter": OpenRouterProvider,
    "anthropic": AnthropicProvider,
}

# Providers that can transcribe audio/video
MEDIA_PROVIDERS = ("gemini", "openai", "openrouter")


def create_provider(config: LinguaScribeConfig) -> BaseProvider:
    """
    Create AI provider based on configuration

    Args:
        config: LinguaScribe configuration

    Returns:
        Configured provider instance

    Raises:
        ValueError: If provider is not supported
    """
    provider_class = PROVIDERS.get(config.provider)
    if provider_class is None:
        raise ValueError(f"Unsupported provider: {config.provider}")
    return provider_class(config)


def get_available_providers() -> list[str]:
    """Get list of available provider names"""
    return list(PROVIDERS.keys())


def supports_media(provider: str) -> bool:
    """Whether the provider can transcribe audio/video"""
    return provider in MEDIA_PROVIDERS
