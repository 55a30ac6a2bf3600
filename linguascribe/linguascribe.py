"""
Main LinguaScribe API class
One round trip to the AI provider per capability, no retries or caching
"""

import asyncio
import logging
from pathlib import Path
from typing import Optional, Dict, Any, Union, Callable

from . import __version__
from .core.config import LinguaScribeConfig
from .models.media import MediaPayload
from .models.results import (
    Capability, TranscriptionResult, ImprovedText, SummaryResult, KeywordsResult
)
from .providers import create_provider, supports_media
from .providers.base import BaseProvider
from .ai import Transcriber, TextImprover, Summarizer, KeywordExtractor
from .utils.async_helpers import sync_wrapper

logger = logging.getLogger(__name__)


class LinguaScribe:
    """
    Gateway to the AI provider

    Transcribes audio/video and improves, summarizes or extracts
    keywords from text.
    """

    def __init__(
        self,
        config: Optional[LinguaScribeConfig] = None,
        provider: Optional[BaseProvider] = None,
        api_key: Optional[str] = None
    ):
        """
        Initialize LinguaScribe

        Args:
            config: Configuration object (uses environment defaults if None)
            provider: Provider instance (created from config if None)
            api_key: API key for the configured provider (can also use env vars)
        """
        if config is None:
            config = LinguaScribeConfig(**self._api_key_kwargs("gemini", api_key))
        elif api_key:
            setattr(config, f"{config.provider}_api_key", api_key)

        self.config = config
        self.provider = provider or create_provider(config)

        self.transcriber = Transcriber(self.provider, config)
        self.improver = TextImprover(self.provider, config)
        self.summarizer = Summarizer(config, self.provider)
        self.keyword_extractor = KeywordExtractor(self.provider, config)

        logger.info(f"Initialized LinguaScribe with {self.provider.name} provider ({config.model})")

    @staticmethod
    def _api_key_kwargs(provider: str, api_key: Optional[str]) -> Dict[str, Any]:
        kwargs = {"provider": provider}
        if api_key:
            kwargs[f"{provider}_api_key"] = api_key
        return kwargs

    # Capabilities

    async def transcribe(self, media: MediaPayload) -> TranscriptionResult:
        """Transcribe an audio/video payload"""
        return await self.transcriber.transcribe(media)

    async def transcribe_file(
        self,
        file_path: Union[str, Path],
        progress_callback: Optional[Callable[[int], None]] = None
    ) -> TranscriptionResult:
        """Read a media file into memory, then transcribe it"""
        media = await asyncio.get_running_loop().run_in_executor(
            None,
            MediaPayload.from_file,
            file_path,
            progress_callback,
            self.config.max_media_bytes
        )
        return await self.transcribe(media)

    async def improve(self, text: str) -> ImprovedText:
        """Correct spelling, grammar, punctuation and clarity"""
        return await self.improver.improve(text)

    async def summarize(self, text: str) -> SummaryResult:
        """Summarize text"""
        return await self.summarizer.summarize(text)

    async def extract_keywords(self, text: str) -> KeywordsResult:
        """Extract an ordered list of keywords"""
        return await self.keyword_extractor.extract_keywords(text)

    # Convenience Methods

    def supports_media(self) -> bool:
        """Whether the configured provider can transcribe"""
        return supports_media(self.provider.name)

    def get_stats(self) -> Dict[str, Any]:
        """Get system statistics"""
        capabilities = [c.value for c in Capability]
        if not self.supports_media():
            capabilities.remove(Capability.TRANSCRIBE.value)

        return {
            'linguascribe_version': __version__,
            'config': {
                'provider': self.config.provider,
                'model': self.config.model,
                'media_model': self.config.media_model,
                'max_media_mb': self.config.max_media_mb
            },
            'provider': self.provider.get_stats(),
            'summarizer': self.summarizer.get_summary_stats(),
            'capabilities': capabilities
        }

    # Synchronous API for easier adoption

    def transcribe_sync(self, media: MediaPayload) -> TranscriptionResult:
        """Synchronous version of transcribe"""
        return sync_wrapper(self.transcribe(media))

    def transcribe_file_sync(
        self,
        file_path: Union[str, Path],
        progress_callback: Optional[Callable[[int], None]] = None
    ) -> TranscriptionResult:
        """Synchronous version of transcribe_file"""
        return sync_wrapper(self.transcribe_file(file_path, progress_callback))

    def improve_sync(self, text: str) -> ImprovedText:
        """Synchronous version of improve"""
        return sync_wrapper(self.improve(text))

    def summarize_sync(self, text: str) -> SummaryResult:
        """Synchronous version of summarize"""
        return sync_wrapper(self.summarize(text))

    def extract_keywords_sync(self, text: str) -> KeywordsResult:
        """Synchronous version of extract_keywords"""
        return sync_wrapper(self.extract_keywords(text))


# Convenience factory functions

def create_linguascribe(
    provider: str = "gemini",
    api_key: Optional[str] = None,
    model: Optional[str] = None
) -> LinguaScribe:
    """
    Create a LinguaScribe instance with simple configuration

    Args:
        provider: AI provider ("gemini", "openai", "anthropic" or "openrouter")
        api_key: API key for the provider
        model: Text model override (provider default if None)

    Returns:
        Configured LinguaScribe instance
    """
    kwargs = LinguaScribe._api_key_kwargs(provider, api_key)
    if model:
        kwargs["model"] = model
    return LinguaScribe(config=LinguaScribeConfig(**kwargs))
