"""Executable Textual app that hosts the ed engine."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

try:  # pragma: no cover - imported only when the app is run
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.containers import Horizontal
    from textual.widgets import Footer, Header, Input, RichLog, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use ed_engine.adapters.textual.app"
    ) from exc

from ed_engine.host import create_default_manager
from ed_engine.runtime import LOG_PRESETS, EngineSettings, telemetry

from .controller import TextualEdAdapter, TextualUIHooks


@dataclass
class UIState:
    status_text: str = ""
    prompt_text: str = ""
    transcript: List[str] = field(default_factory=list)


class EdEngineApp(App[None]):
    """Line-at-a-time editor session: a transcript above, an input below."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#transcript {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
	}

	#input-row {
		height: 3;
	}

	#prompt {
		width: auto;
		padding: 1 0 0 1;
	}

	#line-input {
		width: 1fr;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", priority=True),
        Binding("ctrl+d", "quit", "Quit", priority=True),
    ]

    def __init__(
        self,
        *,
        settings: Optional[EngineSettings] = None,
        file_name: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._settings = settings or EngineSettings.from_env()
        self._file_name = file_name
        self._state = UIState()
        self.adapter: TextualEdAdapter | None = None
        self._transcript: RichLog | None = None
        self._prompt_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        self._transcript = RichLog(id="transcript", wrap=False, markup=False)
        yield self._transcript
        with Horizontal(id="input-row"):
            self._prompt_widget = Static("", id="prompt")
            yield self._prompt_widget
            yield Input(id="line-input")
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        if self._file_name:
            self.sub_title = self._file_name
        manager = create_default_manager(
            settings=self._settings, name=self._file_name or "default"
        )
        hooks = TextualUIHooks(
            write_output=self._write_output,
            update_status=self._update_status,
            update_prompt=self._update_prompt,
            log=self._log_line,
        )
        self.adapter = TextualEdAdapter(manager, hooks)
        self.query_one("#line-input", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if not self.adapter:
            return
        line = event.value
        event.input.value = ""
        self._echo(self.adapter.prompt + line)
        self.adapter.submit_line(line)
        event.stop()

    def _echo(self, text: str) -> None:
        self._state.transcript.append(text)
        if self._transcript:
            self._transcript.write(text)

    def _write_output(self, lines: Iterable[str]) -> None:
        for line in lines:
            self._echo(line)

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)

    def _update_prompt(self, prompt: str) -> None:
        self._state.prompt_text = prompt
        if self._prompt_widget:
            self._prompt_widget.update(prompt)

    def _log_line(self, line: str) -> None:
        telemetry.get_logger("ed_engine.adapters.textual").debug(line)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    defaults = EngineSettings.from_env()
    parser = argparse.ArgumentParser(
        prog="ed-engine", description="Line-oriented ed-style editor."
    )
    parser.add_argument(
        "-p",
        "--prompt",
        default=defaults.prompt,
        help="String to use for the interactive prompt (default: none)",
    )
    parser.add_argument(
        "--verbose-errors",
        action="store_true",
        default=defaults.verbose_errors,
        help="Show full parse diagnostics instead of '?'",
    )
    parser.add_argument(
        "--log-preset",
        choices=LOG_PRESETS,
        default=None,
        help="Telemetry preset to activate",
    )
    parser.add_argument("file", nargs="?", help="File to edit")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    if args.log_preset:
        telemetry.configure(preset=args.log_preset)
    settings = EngineSettings(prompt=args.prompt, verbose_errors=args.verbose_errors)
    app = EdEngineApp(settings=settings, file_name=args.file)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
