"""
Base provider interface for text and media AI operations
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple, Dict, Any
import logging

from ..core.config import LinguaScribeConfig
from ..exceptions import ProviderError
from ..models.media import MediaPayload

logger = logging.getLogger(__name__)


class BaseProvider(ABC):
    """Base class for AI providers

    Messages use the chat layout ``{"role": ..., "content": ...}``. For
    multimodal calls a user ``content`` may be a list of parts, either
    ``{"type": "text", "text": ...}`` or ``{"type": "media", "media": MediaPayload}``.
    """

    name = "base"

    def __init__(self, config: LinguaScribeConfig):
        self.config = config
        self.call_count: int = 0

    @abstractmethod
    async def process_text_messages(
        self,
        messages: List[dict],
        max_tokens: int = 300,
        temperature: float = 0.3
    ) -> str:
        """Process text-only messages through the provider API"""
        pass

    @abstractmethod
    async def process_multimodal_messages(
        self,
        messages: List[dict],
        max_tokens: int = 300,
        temperature: float = 0.3
    ) -> str:
        """Process messages with text and media parts through the provider API"""
        pass

    def get_stats(self) -> Dict[str, Any]:
        return {
            'provider': self.name,
            'model': self.config.model,
            'media_model': self.config.media_model,
            'calls': self.call_count
        }

    # Helper methods shared by all providers

    def _split_system_message(self, messages: List[Dict[str, Any]]) -> Tuple[Optional[str], List[Dict[str, Any]]]:
        """Separate the first system message from the conversation"""
        system_content = None
        rest = []
        for message in messages:
            if message["role"] == "system":
                if system_content is None:
                    system_content = message["content"]
                continue
            rest.append(message)
        return system_content, rest

    def _get_media(self, content_item: Dict[str, Any]) -> MediaPayload:
        media = content_item.get("media")
        if not isinstance(media, MediaPayload):
            raise ProviderError("Media part is missing its payload", self.name)
        return media
