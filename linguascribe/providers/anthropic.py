"""
Anthropic Claude provider for raw API operations
Claude takes no audio or video input, so only the text capabilities work here
"""

import logging
from typing import List, Dict, Any

from .base import BaseProvider
from ..core.config import LinguaScribeConfig
from ..core.utils import truncate
from ..exceptions import ProviderError

logger = logging.getLogger(__name__)


class AnthropicProvider(BaseProvider):
    """Anthropic Claude provider for raw API operations"""

    name = "anthropic"

    def __init__(self, config: LinguaScribeConfig):
        super().__init__(config)

        if not config.anthropic_api_key:
            raise ValueError("Anthropic API key is required")

        # Import here to make it optional dependency
        try:
            import anthropic
            self.client = anthropic.AsyncAnthropic(api_key=config.anthropic_api_key)
        except ImportError:
            raise ImportError("Anthropic library not found. Install with: pip install anthropic")

    async def process_text_messages(
        self,
        messages: List[Dict[str, Any]],
        max_tokens: int = 300,
        temperature: float = 0.3
    ) -> str:
        """Process text-only messages through Anthropic API"""
        try:
            system_content, claude_messages = self._split_system_message(messages)

            request = {
                "model": self.config.model,
                "max_tokens": max_tokens,
                "temperature": temperature,
                "messages": claude_messages
            }
            if system_content:
                request["system"] = system_content

            self.call_count += 1
            response = await self.client.messages.create(**request)

            result = "".join(
                block.text for block in response.content if getattr(block, "type", None) == "text"
            ).strip()
            logger.debug(f"Anthropic text response: {truncate(result)}")

            return result

        except Exception as e:
            logger.error(f"Anthropic text processing failed: {e}")
            raise ProviderError(f"Text processing failed: {e}", self.name)

    async def process_multimodal_messages(
        self,
        messages: List[Dict[str, Any]],
        max_tokens: int = 300,
        temperature: float = 0.3
    ) -> str:
        """Claude has no audio/video input"""
        logger.error("Anthropic provider cannot process audio or video")
        raise ProviderError(
            "Anthropic models do not accept audio or video. Use the gemini, openai or openrouter provider to transcribe.",
            self.name
        )
