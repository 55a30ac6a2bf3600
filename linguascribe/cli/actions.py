"""
Action handling for LinguaScribe CLI
Sequences at most one AI gateway call at a time and reports outcomes as notifications
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from linguascribe.exceptions import LinguaScribeError, ValidationError
from linguascribe.models.media import MediaPayload
from .state_manager import AppStateManager, AiAction

if TYPE_CHECKING:
    from linguascribe import LinguaScribe

logger = logging.getLogger(__name__)

PROCESS_TEXT_FAILED = "Failed to process the text. Please try again."
TRANSCRIBE_FAILED = "Failed to transcribe the file. Please try again."
READ_FILE_FAILED = "Failed to read the selected file."


@dataclass
class Notification:
    """User-visible notification; severity follows Textual's notify levels"""
    title: str
    description: str = ""
    severity: str = "information"  # information, warning, error

    @property
    def is_error(self) -> bool:
        return self.severity == "error"


class ActionHandler:
    """Runs AI actions against the gateway and updates the page state"""

    def __init__(
        self,
        gateway: 'LinguaScribe',
        state_manager: AppStateManager,
        notify: Callable[[Notification], None],
        on_change: Optional[Callable[[], None]] = None,
        max_media_bytes: Optional[int] = None
    ):
        self.gateway = gateway
        self.state_manager = state_manager
        self.notify = notify
        self.on_change = on_change
        self.max_media_bytes = max_media_bytes

    async def run_action(self, action: AiAction) -> bool:
        """Run an action; returns True if it produced a result"""
        if action == AiAction.TRANSCRIBE:
            return await self.transcribe()
        return await self.process_text(action)

    async def process_text(self, action: AiAction) -> bool:
        """Improve, summarize or extract keywords from the input text"""
        if self.state_manager.is_loading():
            logger.debug(f"Ignoring {action.value}: another operation is in flight")
            return False

        if action == AiAction.TRANSCRIBE:
            raise ValueError("Use transcribe() for media actions")

        text = self.state_manager.input_text
        if not text.strip():
            self._fail_validation(
                ValidationError("Please enter some text to process."),
                "Input required"
            )
            return False

        self.state_manager.start_operation(action)
        self._changed()

        try:
            output = await self._call_gateway(action, text)
        except ValidationError as e:
            self._fail_validation(e, "Input required")
            return False
        except LinguaScribeError as e:
            logger.error(f"AI action {action.value} failed: {e}")
            self._fail(str(e), PROCESS_TEXT_FAILED)
            return False
        except Exception as e:
            logger.exception(f"AI action {action.value} failed unexpectedly: {e}")
            self._fail(str(e), PROCESS_TEXT_FAILED)
            return False

        self.state_manager.set_output(output, action.title)
        self.state_manager.finish_success()
        self._changed()
        return True

    async def _call_gateway(self, action: AiAction, text: str):
        if action == AiAction.IMPROVE:
            result = await self.gateway.improve(text)
            return result.improved_transcription
        elif action == AiAction.SUMMARIZE:
            result = await self.gateway.summarize(text)
            return result.summary
        elif action == AiAction.KEYWORDS:
            result = await self.gateway.extract_keywords(text)
            return result.keywords
        raise ValueError(f"Unsupported action: {action}")

    async def transcribe(self) -> bool:
        """Read the selected file and replace the input text with its transcription"""
        if self.state_manager.is_loading():
            logger.debug("Ignoring transcribe: another operation is in flight")
            return False

        file_path = self.state_manager.selected_file
        if file_path is None:
            self._fail_validation(
                ValidationError("Please select an audio or video file to transcribe."),
                "No file selected"
            )
            return False

        self.state_manager.start_operation(AiAction.TRANSCRIBE)
        self.state_manager.set_progress(0, "Preparing file...")
        self._changed()

        try:
            try:
                media = await self._read_media(file_path)
            except Exception as e:
                logger.error(f"File reading failed: {e}")
                self._fail(str(e), READ_FILE_FAILED)
                return False

            self.state_manager.set_progress(100, "File read complete. Transcribing with AI...")
            self._changed()

            try:
                result = await self.gateway.transcribe(media)
            except Exception as e:
                if isinstance(e, LinguaScribeError):
                    logger.error(f"Transcription failed: {e}")
                else:
                    logger.exception(f"Transcription failed unexpectedly: {e}")
                self._fail(str(e), TRANSCRIBE_FAILED)
                return False

            self.state_manager.set_input_text(result.transcription)
            self.state_manager.clear_selected_file()
            self.state_manager.clear_output()
            self.state_manager.finish_success()
            self.notify(Notification(
                title="Transcription Complete!",
                description="The transcribed text is now in the text area below."
            ))
            return True

        finally:
            self.state_manager.reset_progress()
            self._changed()

    async def _read_media(self, file_path) -> MediaPayload:
        """Read the file in a worker thread, reporting progress on the event loop"""
        loop = asyncio.get_running_loop()

        def on_progress(percentage: int) -> None:
            loop.call_soon_threadsafe(self._report_read_progress, percentage)

        return await loop.run_in_executor(
            None,
            MediaPayload.from_file,
            file_path,
            on_progress,
            self.max_media_bytes
        )

    def _report_read_progress(self, percentage: int) -> None:
        # Late callbacks must not overwrite the "transcribing" status
        if (self.state_manager.loading_action != AiAction.TRANSCRIBE
                or self.state_manager.progress_status.startswith("File read complete")):
            return
        self.state_manager.set_progress(percentage, f"Reading file: {percentage}%")
        self._changed()

    def _fail_validation(self, error: ValidationError, title: str) -> None:
        logger.info(f"{title}: {error}")
        self.state_manager.finish_failure(str(error))
        self.notify(Notification(title=title, description=str(error), severity="error"))
        self._changed()

    def _fail(self, detail: str, description: str) -> None:
        self.state_manager.finish_failure(detail)
        self.notify(Notification(title="An error occurred", description=description, severity="error"))
        self._changed()

    def _changed(self) -> None:
        if self.on_change:
            self.on_change()
