"""
Google Gemini provider for raw API operations
Gemini accepts audio and video inline, so it is the default for transcription
"""

import logging
from typing import List, Dict, Any

from .base import BaseProvider
from ..core.config import LinguaScribeConfig
from ..core.utils import truncate
from ..exceptions import LinguaScribeError, ProviderError

logger = logging.getLogger(__name__)


class GeminiProvider(BaseProvider):
    """Google Gemini provider for raw API operations"""

    name = "gemini"

    def __init__(self, config: LinguaScribeConfig):
        super().__init__(config)

        if not config.gemini_api_key:
            raise ValueError("Gemini API key is required")

        # Import here to make it optional dependency
        try:
            from google import genai
            from google.genai import types
        except ImportError:
            raise ImportError("google-genai library not found. Install with: pip install google-genai")

        self._types = types
        self.client = genai.Client(api_key=config.gemini_api_key)

    async def process_text_messages(
        self,
        messages: List[Dict[str, Any]],
        max_tokens: int = 300,
        temperature: float = 0.3
    ) -> str:
        """Process text-only messages through Gemini API"""
        try:
            result = await self._generate(self.config.model, messages, max_tokens, temperature)
            logger.debug(f"Gemini text response: {truncate(result)}")
            return result

        except LinguaScribeError:
            raise
        except Exception as e:
            logger.error(f"Gemini text processing failed: {e}")
            raise ProviderError(f"Text processing failed: {e}", self.name)

    async def process_multimodal_messages(
        self,
        messages: List[Dict[str, Any]],
        max_tokens: int = 300,
        temperature: float = 0.3
    ) -> str:
        """Process multimodal messages (text + audio/video) through Gemini API"""
        try:
            result = await self._generate(self.config.media_model, messages, max_tokens, temperature)
            logger.debug(f"Gemini multimodal response: {truncate(result)}")
            return result

        except LinguaScribeError:
            raise
        except Exception as e:
            logger.error(f"Gemini multimodal processing failed: {e}")
            raise ProviderError(f"Multimodal processing failed: {e}", self.name)

    async def _generate(
        self,
        model: str,
        messages: List[Dict[str, Any]],
        max_tokens: int,
        temperature: float
    ) -> str:
        system_content, conversation = self._split_system_message(messages)
        contents = self._prepare_gemini_contents(conversation)

        config_kwargs = {
            "temperature": temperature,
            "max_output_tokens": max_tokens,
            "response_mime_type": "text/plain",
        }
        if system_content:
            config_kwargs["system_instruction"] = system_content

        self.call_count += 1
        response = await self.client.aio.models.generate_content(
            model=model,
            contents=contents,
            config=self._types.GenerateContentConfig(**config_kwargs),
        )
        return (response.text or "").strip()

    def _prepare_gemini_contents(self, messages: List[Dict[str, Any]]) -> list:
        """Convert chat messages to Gemini contents with inline media parts"""
        types = self._types
        contents = []

        for message in messages:
            role = "model" if message["role"] == "assistant" else "user"
            content = message["content"]

            if isinstance(content, str):
                parts = [types.Part.from_text(text=content)]
            else:
                parts = []
                for content_item in content:
                    if content_item["type"] == "text":
                        parts.append(types.Part.from_text(text=content_item["text"]))
                    elif content_item["type"] == "media":
                        media = self._get_media(content_item)
                        parts.append(types.Part.from_bytes(data=media.raw_bytes(), mime_type=media.mime_type))
                    else:
                        logger.warning(f"Skipping unsupported content part: {content_item['type']}")

            contents.append(types.Content(role=role, parts=parts))

        return contents
