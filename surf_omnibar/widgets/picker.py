"""Terminal picker: a dmenu stand-in built on Textual."""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Input, OptionList, Static
from textual.widgets.option_list import Option


class PickerApp(App[str]):
    """Filter *candidates* as the user types and return one line.

    Enter returns the highlighted candidate, or the typed text when
    nothing matches.  Escape exits with no result.
    """

    CSS = """
    #picker {
        height: auto;
    }
    #picker-prompt {
        color: $accent;
    }
    #picker-results {
        height: auto;
        max-height: 20;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", show=False),
    ]

    def __init__(self, prompt: str, candidates: list[str]) -> None:
        super().__init__()
        self.prompt_text = prompt
        self.candidates = list(candidates)
        self._shown: list[str] = []

    def compose(self) -> ComposeResult:
        with Vertical(id="picker"):
            yield Static(self.prompt_text, id="picker-prompt", markup=False)
            yield Input(placeholder="Type to filter…", id="picker-input")
            yield OptionList(id="picker-results")

    def on_mount(self) -> None:
        self._update_results("")
        self.query_one("#picker-input", Input).focus()

    def matches(self, query: str) -> list[str]:
        if not query:
            return list(self.candidates)
        q = query.lower()
        return [c for c in self.candidates if q in c.lower()]

    def _update_results(self, query: str) -> None:
        option_list = self.query_one("#picker-results", OptionList)
        option_list.clear_options()
        found = self.matches(query)
        for index, item in enumerate(found):
            option_list.add_option(Option(item, id=str(index)))
        self._shown = found
        if found:
            option_list.highlighted = 0

    def on_input_changed(self, event: Input.Changed) -> None:
        self._update_results(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        option_list = self.query_one("#picker-results", OptionList)
        if option_list.option_count > 0 and option_list.highlighted is not None:
            self.exit(self._shown[option_list.highlighted])
        else:
            self.exit(event.value.strip())

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.exit(self._shown[event.option_index])

    def action_cancel(self) -> None:
        self.exit(None)
