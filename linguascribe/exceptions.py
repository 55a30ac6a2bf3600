"""
Custom exceptions for LinguaScribe
"""

from typing import Optional


class LinguaScribeError(Exception):
    """Base exception for LinguaScribe errors"""
    pass


class ValidationError(LinguaScribeError):
    """Input failed a precondition (empty text, missing or unreadable file)"""
    pass


class ProviderError(LinguaScribeError):
    """Exception raised when the AI provider call fails or returns malformed output"""

    def __init__(self, message: str, provider: str = "unknown", capability: Optional[str] = None):
        self.provider = provider
        self.capability = capability
        super().__init__(message)
