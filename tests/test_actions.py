import asyncio
import tempfile
import unittest
from pathlib import Path
from typing import List, Optional

from linguascribe.cli.actions import (
    ActionHandler, Notification, PROCESS_TEXT_FAILED, READ_FILE_FAILED, TRANSCRIBE_FAILED
)
from linguascribe.cli.state_manager import AppStateManager, AiAction, OperationStatus
from linguascribe.exceptions import ProviderError
from linguascribe.models.results import (
    ImprovedText, KeywordsResult, SummaryResult, TranscriptionResult
)


class StubGateway:
    """Gateway double: records calls and optionally blocks until released."""

    def __init__(self):
        self.calls: List[tuple] = []
        self.release: Optional[asyncio.Event] = None
        self.fail_with: Optional[Exception] = None

    async def _respond(self, name: str, value, result):
        self.calls.append((name, value))
        if self.release is not None:
            await self.release.wait()
        if self.fail_with:
            raise self.fail_with
        return result

    async def improve(self, text):
        return await self._respond("improve", text, ImprovedText(improved_transcription="Improved."))

    async def summarize(self, text):
        return await self._respond("summarize", text, SummaryResult(summary="Short."))

    async def extract_keywords(self, text):
        return await self._respond("keywords", text, KeywordsResult(keywords=["fox", "quick"]))

    async def transcribe(self, media):
        return await self._respond("transcribe", media, TranscriptionResult(transcription="hello world"))


class TestActionHandler(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        self.gateway = StubGateway()
        self.state = AppStateManager()
        self.notifications: List[Notification] = []
        self.changes = 0
        self.handler = ActionHandler(
            self.gateway,
            self.state,
            self.notifications.append,
            on_change=self._on_change,
            max_media_bytes=1024 * 1024
        )
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp_path = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def _on_change(self):
        self.changes += 1

    def _errors(self) -> List[Notification]:
        return [n for n in self.notifications if n.is_error]

    async def test_text_actions_set_output_and_title(self):
        self.state.set_input_text("The quick brown fox")

        expected = {
            AiAction.IMPROVE: ("Improved.", "Improved Transcription"),
            AiAction.SUMMARIZE: ("Short.", "Summary"),
            AiAction.KEYWORDS: (["fox", "quick"], "Keywords"),
        }
        for action, (output, title) in expected.items():
            self.assertTrue(await self.handler.run_action(action))
            self.assertEqual(self.state.output, output)
            self.assertEqual(self.state.output_title, title)
            self.assertEqual(self.state.status, OperationStatus.SUCCEEDED)

        self.assertEqual([c[0] for c in self.gateway.calls], ["improve", "summarize", "keywords"])
        self.assertEqual(self._errors(), [])
        self.assertGreater(self.changes, 0)

    async def test_empty_text_fails_without_gateway_call(self):
        self.state.set_input_text("   ")

        self.assertFalse(await self.handler.run_action(AiAction.SUMMARIZE))

        self.assertEqual(self.gateway.calls, [])
        self.assertEqual(self.state.status, OperationStatus.FAILED)
        self.assertEqual(len(self._errors()), 1)
        self.assertEqual(self._errors()[0].title, "Input required")

    async def test_second_trigger_while_loading_is_ignored(self):
        self.state.set_input_text("The quick brown fox")
        self.gateway.release = asyncio.Event()

        first = asyncio.ensure_future(self.handler.run_action(AiAction.IMPROVE))
        await asyncio.sleep(0)
        self.assertTrue(self.state.is_loading())
        self.assertEqual(self.state.loading_action, AiAction.IMPROVE)

        self.assertFalse(await self.handler.run_action(AiAction.KEYWORDS))
        self.assertFalse(await self.handler.run_action(AiAction.TRANSCRIBE))

        self.gateway.release.set()
        self.assertTrue(await first)

        self.assertEqual(len(self.gateway.calls), 1)
        self.assertEqual(self.state.output, "Improved.")
        self.assertEqual(self.notifications, [])

    async def test_failure_keeps_previous_output(self):
        self.state.set_input_text("The quick brown fox")
        await self.handler.run_action(AiAction.SUMMARIZE)

        self.gateway.fail_with = ProviderError("quota exceeded", "gemini", "keywords")
        self.assertFalse(await self.handler.run_action(AiAction.KEYWORDS))

        self.assertEqual(self.state.output, "Short.")
        self.assertEqual(self.state.output_title, "Summary")
        self.assertEqual(self.state.status, OperationStatus.FAILED)
        self.assertEqual(self.state.last_error, "quota exceeded")
        errors = self._errors()
        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0].title, "An error occurred")
        self.assertEqual(errors[0].description, PROCESS_TEXT_FAILED)

    async def test_unexpected_exception_becomes_one_notification(self):
        self.state.set_input_text("hello")
        self.gateway.fail_with = RuntimeError("socket closed")

        self.assertFalse(await self.handler.run_action(AiAction.IMPROVE))

        self.assertFalse(self.state.is_loading())
        self.assertEqual(len(self._errors()), 1)

    async def test_transcribe_without_file(self):
        self.assertFalse(await self.handler.run_action(AiAction.TRANSCRIBE))

        self.assertEqual(self.gateway.calls, [])
        self.assertEqual(self._errors()[0].title, "No file selected")

    async def test_transcribe_replaces_input_and_clears_output(self):
        audio = self.tmp_path / "memo.wav"
        audio.write_bytes(b"RIFF" + b"\x00" * 1000)

        self.state.set_input_text("old text")
        self.state.set_output("Short.", "Summary")
        self.state.select_file(audio)
        self.assertEqual(self.state.output, "Short.")

        self.assertTrue(await self.handler.run_action(AiAction.TRANSCRIBE))

        self.assertEqual(self.state.input_text, "hello world")
        self.assertIsNone(self.state.selected_file)
        self.assertIsNone(self.state.output)
        self.assertEqual(self.state.status, OperationStatus.SUCCEEDED)
        self.assertEqual(self.state.progress, 0)
        self.assertEqual(self.state.progress_status, "")

        media = self.gateway.calls[0][1]
        self.assertTrue(media.is_audio)
        self.assertEqual(self.notifications[-1].title, "Transcription Complete!")
        self.assertFalse(self.notifications[-1].is_error)

    async def test_transcribe_unreadable_file(self):
        self.state.set_input_text("keep me")
        self.state.select_file(self.tmp_path / "missing.mp3")

        self.assertFalse(await self.handler.run_action(AiAction.TRANSCRIBE))

        self.assertEqual(self.gateway.calls, [])
        self.assertEqual(self.state.input_text, "keep me")
        self.assertIsNotNone(self.state.selected_file)
        self.assertEqual(len(self._errors()), 1)
        self.assertEqual(self._errors()[0].description, READ_FILE_FAILED)

    async def test_transcribe_provider_failure(self):
        audio = self.tmp_path / "memo.mp3"
        audio.write_bytes(b"\xff\xfb" * 100)
        self.state.set_input_text("keep me")
        self.state.select_file(audio)
        self.gateway.fail_with = ProviderError("unsupported media", "gemini", "transcribe")

        self.assertFalse(await self.handler.run_action(AiAction.TRANSCRIBE))

        self.assertEqual(self.state.input_text, "keep me")
        self.assertEqual(self.state.selected_file, audio)
        self.assertEqual(self._errors()[0].description, TRANSCRIBE_FAILED)
        self.assertEqual(self.state.progress, 0)

    async def test_file_too_large(self):
        video = self.tmp_path / "talk.mp4"
        video.write_bytes(b"\x00" * (1024 * 1024 + 1))
        self.state.select_file(video)

        self.assertFalse(await self.handler.run_action(AiAction.TRANSCRIBE))

        self.assertEqual(self.gateway.calls, [])
        self.assertEqual(len(self._errors()), 1)


class TestAppStateManager(unittest.TestCase):
    def test_initial_state(self):
        state = AppStateManager()

        self.assertEqual(state.status, OperationStatus.IDLE)
        self.assertFalse(state.has_output())
        self.assertFalse(state.has_input_text())
        self.assertIn("Status: idle", state.get_status_text())

    def test_selecting_file_keeps_output(self):
        state = AppStateManager()
        state.set_output(["fox"], "Keywords")
        state.set_progress(40, "Reading file: 40%")

        state.select_file(Path("/tmp/new.mp3"))

        self.assertEqual(state.output, ["fox"])
        self.assertEqual(state.progress, 0)
        self.assertIn("File: new.mp3", state.get_status_text())

    def test_empty_keyword_list_counts_as_output(self):
        state = AppStateManager()
        state.set_output([], "Keywords")
        self.assertTrue(state.has_output())

        state.clear_output()
        self.assertFalse(state.has_output())

    def test_progress_is_clamped(self):
        state = AppStateManager()
        state.set_progress(150, "done")
        self.assertEqual(state.progress, 100)

    def test_failure_status_text(self):
        state = AppStateManager()
        state.start_operation(AiAction.SUMMARIZE)
        self.assertIn("Action: summarize", state.get_status_text())

        state.finish_failure("x" * 100)
        text = state.get_status_text()
        self.assertIn("Status: failed", text)
        self.assertIn("...", text)
        self.assertIsNone(state.loading_action)


if __name__ == "__main__":
    unittest.main()
