"""
Keyword Extractor - pulls the main topics out of a transcription
"""

import json
import logging
from typing import Any, List

from ..providers.base import BaseProvider
from ..core.config import LinguaScribeConfig
from ..core.utils import extract_json_block
from ..exceptions import LinguaScribeError, ProviderError
from ..models.media import TextRequest
from ..models.results import Capability, KeywordsResult
from .prompts import SYSTEM_KEYWORD_EXTRACTOR, GENERATE_KEYWORDS_PROMPT

logger = logging.getLogger(__name__)


class KeywordExtractor:
    """
    Extracts keywords from text

    The model is asked for ``{"keywords": [...]}``. The list is returned in
    the order the model gave it, without deduplication or rewording.
    """

    def __init__(self, provider: BaseProvider, config: LinguaScribeConfig):
        self.provider = provider
        self.config = config

    async def extract_keywords(self, text: str) -> KeywordsResult:
        """
        Extract keywords from text

        Raises:
            ValidationError: If the text is empty
            ProviderError: If the model call fails or the response is not a list of strings
        """
        request = TextRequest(text)
        logger.info(f"Extracting keywords ({len(request.text)} characters)")

        messages = [
            {"role": "system", "content": SYSTEM_KEYWORD_EXTRACTOR},
            {"role": "user", "content": GENERATE_KEYWORDS_PROMPT.format(transcription=request.text)}
        ]

        try:
            response = await self.provider.process_text_messages(
                messages=messages,
                max_tokens=self.config.keywords_max_tokens,
                temperature=self.config.keywords_temperature
            )
        except LinguaScribeError:
            raise
        except Exception as e:
            logger.error(f"Keyword extraction failed: {e}")
            raise ProviderError(f"Failed to extract keywords: {e}", self.provider.name, Capability.KEYWORDS.value)

        keywords = self._parse_keywords(response)
        logger.info(f"Extracted {len(keywords)} keywords")
        return KeywordsResult(keywords=keywords)

    def _parse_keywords(self, response: str) -> List[str]:
        """Parse and validate the keyword JSON"""
        if not response or not response.strip():
            raise ProviderError("Model returned no keywords", self.provider.name, Capability.KEYWORDS.value)

        try:
            result: Any = json.loads(extract_json_block(response))
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse keywords JSON: {response}")
            raise ProviderError(
                f"Invalid JSON response from keyword extraction: {e}",
                self.provider.name,
                Capability.KEYWORDS.value
            )

        if isinstance(result, dict):
            if "keywords" not in result:
                raise ProviderError(
                    f"Missing 'keywords' field in keyword response: {result}",
                    self.provider.name,
                    Capability.KEYWORDS.value
                )
            result = result["keywords"]

        if not isinstance(result, list) or not all(isinstance(k, str) for k in result):
            raise ProviderError(
                f"Keywords must be a list of strings, got: {result!r}",
                self.provider.name,
                Capability.KEYWORDS.value
            )

        return result
