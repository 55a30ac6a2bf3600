"""
Result models returned by the AI gateway
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Union


class Capability(str, Enum):
    """Gateway capabilities"""
    TRANSCRIBE = "transcribe"
    IMPROVE = "improve"
    SUMMARIZE = "summarize"
    KEYWORDS = "keywords"


@dataclass
class TranscriptionResult:
    """Text derived from an audio/video source"""
    transcription: str

    @property
    def text(self) -> str:
        return self.transcription


@dataclass
class ImprovedText:
    """Corrected version of the submitted text"""
    improved_transcription: str

    @property
    def text(self) -> str:
        return self.improved_transcription


@dataclass
class SummaryResult:
    """Concise summary of the submitted text"""
    summary: str

    @property
    def text(self) -> str:
        return self.summary


@dataclass
class KeywordsResult:
    """Keywords in the order the model returned them"""
    keywords: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.keywords)


OutputValue = Union[str, List[str]]
