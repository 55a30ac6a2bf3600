"""
Output panel for LinguaScribe CLI
Shows the last AI result: text in a read-only area, keywords as badges
"""

from typing import List, Optional, Union

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widgets import Label, Static, TextArea


class OutputPanel(Vertical):
    """Card that displays the latest result"""

    DEFAULT_CSS = """
    OutputPanel {
        height: auto;
        border: round $accent;
        padding: 0 1 1 1;
        display: none;
    }

    OutputPanel #output-title {
        text-style: bold;
        color: $accent;
        margin: 1 0 0 0;
    }

    OutputPanel #output-description {
        color: $text-muted;
        margin: 0 0 1 0;
    }

    OutputPanel #output-text {
        height: 14;
    }

    OutputPanel #output-keywords {
        height: auto;
    }
    """

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.value: Optional[Union[str, List[str]]] = None

    def compose(self) -> ComposeResult:
        yield Label("", id="output-title")
        yield Label("Here is the result from the AI.", id="output-description")
        yield TextArea("", id="output-text", read_only=True)
        yield Static("", id="output-keywords")

    def show_result(self, title: str, value: Union[str, List[str]]) -> None:
        """Display a result and make the panel visible"""
        self.value = value
        self.query_one("#output-title", Label).update(title)

        text_area = self.query_one("#output-text", TextArea)
        keywords = self.query_one("#output-keywords", Static)

        if isinstance(value, list):
            keywords.update(self.render_keywords(value))
            keywords.display = True
            text_area.display = False
        else:
            if text_area.text != value:
                text_area.load_text(value)
            text_area.display = True
            keywords.display = False

        self.display = True

    def clear(self) -> None:
        """Hide the panel"""
        self.value = None
        self.display = False

    @staticmethod
    def render_keywords(keywords: List[str]) -> Text:
        """Render keywords as a wrapping row of badges"""
        if not keywords:
            return Text("No keywords found.", style="italic")
        badges = Text()
        for index, keyword in enumerate(keywords):
            if index:
                badges.append("  ")
            badges.append(f" {keyword} ", style="bold black on #ff99cc")
        return badges
