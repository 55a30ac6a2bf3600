"""
LinguaScribe - AI transcription and text tools

Transcribe audio/video, then improve, summarize, or extract keywords
with a hosted generative-AI model.
"""

__version__ = "0.1.0"

from .linguascribe import LinguaScribe, create_linguascribe
from .models import (
    MediaPayload, TextRequest, Capability,
    TranscriptionResult, ImprovedText, SummaryResult, KeywordsResult
)
from .core.config import LinguaScribeConfig
from .exceptions import LinguaScribeError, ValidationError, ProviderError
from .providers import BaseProvider, create_provider

__all__ = [
    "LinguaScribe",
    "create_linguascribe",
    "MediaPayload",
    "TextRequest",
    "Capability",
    "TranscriptionResult",
    "ImprovedText",
    "SummaryResult",
    "KeywordsResult",
    "LinguaScribeConfig",
    "LinguaScribeError",
    "ValidationError",
    "ProviderError",
    "BaseProvider",
    "create_provider"
]
