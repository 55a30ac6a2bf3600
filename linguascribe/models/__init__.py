"""Data models for LinguaScribe"""

from .media import MediaPayload, TextRequest
from .results import Capability, TranscriptionResult, ImprovedText, SummaryResult, KeywordsResult

__all__ = [
    "MediaPayload", "TextRequest",
    "Capability", "TranscriptionResult", "ImprovedText", "SummaryResult", "KeywordsResult"
]
