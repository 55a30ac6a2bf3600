"""AI capability components"""

from .transcriber import Transcriber
from .improver import TextImprover
from .summarizer import Summarizer
from .keyword_extractor import KeywordExtractor

__all__ = [
    "Transcriber",
    "TextImprover",
    "Summarizer",
    "KeywordExtractor"
]
