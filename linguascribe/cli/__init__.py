"""
LinguaScribe terminal interface
"""

from .state_manager import AppStateManager, AiAction, OperationStatus
from .actions import ActionHandler, Notification

__all__ = [
    "AppStateManager",
    "AiAction",
    "OperationStatus",
    "ActionHandler",
    "Notification"
]
