#!/usr/bin/env python3
"""
LinguaScribe Textual CLI - transcribe audio/video, then improve, summarize,
or extract keywords with AI
"""

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical, VerticalScroll
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.widgets import (
    Button, Footer, Header, Input, Label, LoadingIndicator, ProgressBar, Select, Static, TextArea
)

from linguascribe import LinguaScribe
from linguascribe.core.config import LinguaScribeConfig, setup_logging
from linguascribe.providers import get_available_providers

from .actions import ActionHandler, Notification
from .config import get_config_manager, PROVIDER_KEY_URLS
from .state_manager import AppStateManager, AiAction
from .styles import MAIN_APP_CSS, SETUP_SCREEN_CSS
from .widgets import OutputPanel

logger = logging.getLogger(__name__)

ACTION_BUTTONS = {
    "transcribe-btn": AiAction.TRANSCRIBE,
    "improve-btn": AiAction.IMPROVE,
    "summarize-btn": AiAction.SUMMARIZE,
    "keywords-btn": AiAction.KEYWORDS,
}


class SetupScreen(Screen):
    """First-time setup screen for API key configuration"""

    CSS = SETUP_SCREEN_CSS

    def compose(self) -> ComposeResult:
        provider = get_config_manager().get_provider()

        with Container(id="setup-container"):
            yield Static("[bold]Welcome to LinguaScribe![/bold]\n", classes="title")
            yield Static("Choose an AI provider and enter its API key.\n")
            yield Select(
                [(name, name) for name in get_available_providers()],
                value=provider,
                allow_blank=False,
                id="provider-select"
            )
            yield Static(self._key_hint(provider), id="key-hint")
            yield Input(placeholder=f"Enter your {provider} API key...", id="api-input", password=True)
            with Horizontal(id="button-container"):
                yield Button("Save & Continue", variant="primary", id="save-btn")
                yield Button("Exit", variant="error", id="exit-btn")

    @staticmethod
    def _key_hint(provider: str) -> str:
        return f"Get your {provider} API key from: [link]{PROVIDER_KEY_URLS[provider]}[/link]\n"

    async def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id != "provider-select" or event.value is Select.BLANK:
            return
        self.query_one("#key-hint", Static).update(self._key_hint(event.value))
        self.query_one("#api-input", Input).placeholder = f"Enter your {event.value} API key..."

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "save-btn":
            api_input = self.query_one("#api-input", Input)
            api_key = api_input.value.strip()

            config_manager = get_config_manager()
            if not config_manager.validate_api_key(api_key):
                api_input.value = ""
                api_input.placeholder = "That does not look like an API key, try again"
                return

            config_manager.set_provider(self.query_one("#provider-select", Select).value)
            config_manager.set_api_key(api_key)

            self.app.pop_screen()
            self.app.initialize_gateway()

        elif event.button.id == "exit-btn":
            self.app.exit()


class LinguaScribeTUI(App):
    """Main LinguaScribe Terminal UI Application"""

    CSS = MAIN_APP_CSS
    TITLE = "LinguaScribe"
    SUB_TITLE = "Transcribe audio/video, then improve, summarize, or extract keywords with AI."

    BINDINGS = [
        ("ctrl+q", "quit", "Quit"),
        Binding("ctrl+t", "transcribe", "Transcribe", priority=True),
        Binding("ctrl+r", "improve", "Improve", priority=True),
        Binding("ctrl+s", "summarize", "Summarize", priority=True),
        Binding("ctrl+g", "keywords", "Keywords", priority=True),
    ]

    def __init__(self, gateway: Optional[LinguaScribe] = None):
        super().__init__()
        self.config_manager = get_config_manager()
        self.state_manager = AppStateManager()
        self.gateway = gateway
        self.action_handler: Optional[ActionHandler] = None

    def compose(self) -> ComposeResult:
        """Create the main UI layout"""
        yield Header(show_clock=True)

        with VerticalScroll(id="page"):
            with Vertical(id="transcribe-card", classes="card"):
                yield Label("Transcribe Audio/Video", classes="card-title")
                yield Label("Enter the path of an audio or video file to get a transcription.",
                            classes="card-description")
                with Horizontal(id="file-row"):
                    yield Input(placeholder="/path/to/recording.mp3", id="file-input")
                    yield Button("Transcribe File", variant="primary", id="transcribe-btn", disabled=True)
                yield Label("", id="selected-file")
                with Vertical(id="progress-container"):
                    yield ProgressBar(total=100, show_eta=False, id="progress-bar")
                    yield Label("", id="progress-status")

            with Vertical(id="text-card", classes="card"):
                yield Label("Your Text", classes="card-title")
                yield Label("The transcription will appear here. You can also paste your own text.",
                            classes="card-description")
                yield TextArea("", id="input-text")
                with Horizontal(id="action-row"):
                    yield Button("Improve Text", variant="success", id="improve-btn", disabled=True)
                    yield Button("Summarize", variant="success", id="summarize-btn", disabled=True)
                    yield Button("Get Keywords", variant="success", id="keywords-btn", disabled=True)

            with Vertical(id="thinking"):
                yield LoadingIndicator()
                yield Label("AI is thinking...")
                yield Label("This may take a few moments.")

            yield OutputPanel(id="output-panel")

        yield Label(self.get_status_text(), id="status-bar")
        yield Footer()

    def get_status_text(self) -> str:
        """Get current status bar text"""
        if self.gateway:
            provider = self.gateway.config.provider
            model = self.gateway.config.model
        else:
            provider = self.config_manager.get_provider()
            model = self.config_manager.get_models()[0]
        return f"{provider} | {model} | {self.state_manager.get_status_text()}"

    async def on_mount(self) -> None:
        """Initialize the app when mounted"""
        if self.gateway is not None:
            self._attach_handler(self.gateway.config.max_media_bytes)
        elif not self.config_manager.has_api_key():
            await self.push_screen(SetupScreen())
        else:
            self.initialize_gateway()
        self.render_state()

    def initialize_gateway(self) -> bool:
        """Create the gateway from the saved configuration.
        Returns True if successful, False otherwise."""
        try:
            config = LinguaScribeConfig(**self.config_manager.get_config_kwargs())
            self.gateway = LinguaScribe(config=config)
        except (ValueError, ImportError) as e:
            logger.error(f"Failed to create LinguaScribe instance: {e}")
            self.notify(str(e), title="Setup failed", severity="error")
            return False

        self._attach_handler(config.max_media_bytes)
        if not self.gateway.supports_media():
            self.notify(
                f"The {config.provider} provider cannot transcribe audio or video.",
                title="Transcription unavailable",
                severity="warning"
            )
        self.render_state()
        return True

    def _attach_handler(self, max_media_bytes: int) -> None:
        self.action_handler = ActionHandler(
            self.gateway,
            self.state_manager,
            self.show_notification,
            on_change=self.render_state,
            max_media_bytes=max_media_bytes
        )

    def show_notification(self, notification: Notification) -> None:
        """Surface an action outcome as a Textual toast"""
        self.notify(
            notification.description or notification.title,
            title=notification.title,
            severity=notification.severity
        )

    def render_state(self) -> None:
        """Sync every widget with the state manager"""
        state = self.state_manager
        try:
            file_input = self.query_one("#file-input", Input)
            input_text = self.query_one("#input-text", TextArea)
            output_panel = self.query_one("#output-panel", OutputPanel)
        except NoMatches:
            return

        loading = state.is_loading()
        ready = self.action_handler is not None

        if state.selected_file is None and file_input.value:
            file_input.value = ""
        file_input.disabled = loading

        selected = self.query_one("#selected-file", Label)
        if state.selected_file:
            missing = "" if state.selected_file.exists() else " (not found)"
            selected.update(f"Selected: {state.selected_file.name}{missing}")
        else:
            selected.update("")

        if input_text.text != state.input_text:
            input_text.load_text(state.input_text)
        input_text.disabled = loading

        self.query_one("#transcribe-btn", Button).disabled = (
            not ready or loading or not state.has_selected_file()
        )
        for button_id in ("improve-btn", "summarize-btn", "keywords-btn"):
            self.query_one(f"#{button_id}", Button).disabled = not ready or loading or not state.input_text

        transcribing = loading and state.loading_action == AiAction.TRANSCRIBE
        self.query_one("#progress-container").display = transcribing
        if transcribing:
            self.query_one("#progress-bar", ProgressBar).update(progress=state.progress)
            self.query_one("#progress-status", Label).update(state.progress_status)

        self.query_one("#thinking").display = loading and not transcribing

        if not loading and state.has_output():
            output_panel.show_result(state.output_title, state.output)
        else:
            output_panel.clear()

        self.query_one("#status-bar", Label).update(self.get_status_text())

    async def on_input_changed(self, event: Input.Changed) -> None:
        """Track the selected media file"""
        if event.input.id != "file-input":
            return
        value = event.value.strip()
        if value:
            self.state_manager.select_file(Path(value).expanduser())
        else:
            self.state_manager.clear_selected_file()
        self.render_state()

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        """Enter in the file field starts transcription"""
        if event.input.id == "file-input":
            self.trigger(AiAction.TRANSCRIBE)

    async def on_text_area_changed(self, event: TextArea.Changed) -> None:
        """Keep the input text in state"""
        if event.text_area.id != "input-text":
            return
        if event.text_area.text != self.state_manager.input_text:
            self.state_manager.set_input_text(event.text_area.text)
            self.render_state()

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        action = ACTION_BUTTONS.get(event.button.id)
        if action is not None:
            self.trigger(action)

    def trigger(self, action: AiAction) -> None:
        """Start an action in a worker; the handler ignores it while another is in flight"""
        if self.action_handler is None:
            self.notify("Configure an API key first.", title="Not ready", severity="warning")
            return
        if self.state_manager.is_loading():
            return
        self.run_worker(self.action_handler.run_action(action), group="ai", exit_on_error=False)

    def action_transcribe(self) -> None:
        self.trigger(AiAction.TRANSCRIBE)

    def action_improve(self) -> None:
        self.trigger(AiAction.IMPROVE)

    def action_summarize(self) -> None:
        self.trigger(AiAction.SUMMARIZE)

    def action_keywords(self) -> None:
        self.trigger(AiAction.KEYWORDS)

    def action_quit(self) -> None:
        """Quit the application"""
        self.exit()


def main():
    """Main entry point for Textual CLI"""
    load_dotenv()
    config_manager = get_config_manager()
    setup_logging(config_manager.config.log_level, filename=str(config_manager.log_file))
    app = LinguaScribeTUI()
    app.run()


if __name__ == "__main__":
    main()
