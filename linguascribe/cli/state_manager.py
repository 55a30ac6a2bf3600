"""
State management for LinguaScribe CLI application
"""

from enum import Enum
from pathlib import Path
from typing import Optional

from linguascribe.models.results import OutputValue


class OperationStatus(str, Enum):
    """Status of the current (single) operation"""
    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class AiAction(str, Enum):
    """User-triggered AI actions"""
    IMPROVE = "improve"
    SUMMARIZE = "summarize"
    KEYWORDS = "keywords"
    TRANSCRIBE = "transcribe"

    @property
    def title(self) -> str:
        return ACTION_TITLES[self]


ACTION_TITLES = {
    AiAction.IMPROVE: "Improved Transcription",
    AiAction.SUMMARIZE: "Summary",
    AiAction.KEYWORDS: "Keywords",
    AiAction.TRANSCRIBE: "Transcription",
}


class AppStateManager:
    """Holds the page state: input, selected file, output and operation status"""

    def __init__(self):
        self.input_text = ""
        self.selected_file: Optional[Path] = None

        self.output: Optional[OutputValue] = None
        self.output_title = ""

        self.status = OperationStatus.IDLE
        self.loading_action: Optional[AiAction] = None
        self.last_error: Optional[str] = None

        self.progress = 0
        self.progress_status = ""

    def get_status_text(self) -> str:
        """Get current status bar text"""
        segments = [f"Status: {self.status.value}"]
        if self.loading_action:
            segments.append(f"Action: {self.loading_action.value}")
        if self.selected_file:
            segments.append(f"File: {self.selected_file.name}")
        segments.append(f"Chars: {len(self.input_text)}")
        if self.status == OperationStatus.FAILED and self.last_error:
            error = self.last_error[:60] + ("..." if len(self.last_error) > 60 else "")
            segments.append(f"Error: {error}")
        return " | ".join(segments)

    # Input

    def set_input_text(self, text: str) -> None:
        self.input_text = text

    def has_input_text(self) -> bool:
        return bool(self.input_text.strip())

    def select_file(self, file_path: Path) -> None:
        """Select a media file; the current output is kept"""
        self.selected_file = file_path
        self.reset_progress()

    def clear_selected_file(self) -> None:
        self.selected_file = None

    def has_selected_file(self) -> bool:
        return self.selected_file is not None

    # Operation lifecycle

    def is_loading(self) -> bool:
        """Check if an operation is in flight"""
        return self.status == OperationStatus.LOADING

    def start_operation(self, action: AiAction) -> None:
        self.status = OperationStatus.LOADING
        self.loading_action = action
        self.last_error = None

    def finish_success(self) -> None:
        self.status = OperationStatus.SUCCEEDED
        self.loading_action = None

    def finish_failure(self, message: str) -> None:
        self.status = OperationStatus.FAILED
        self.loading_action = None
        self.last_error = message

    # Output

    def set_output(self, value: OutputValue, title: str) -> None:
        self.output = value
        self.output_title = title

    def clear_output(self) -> None:
        self.output = None
        self.output_title = ""

    def has_output(self) -> bool:
        # An empty keyword list is still a result
        return self.output is not None

    # Transcription progress

    def set_progress(self, percentage: int, status: str) -> None:
        self.progress = max(0, min(100, percentage))
        self.progress_status = status

    def reset_progress(self) -> None:
        self.progress = 0
        self.progress_status = ""
