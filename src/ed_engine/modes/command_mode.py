"""Normal mode: parse a command line and run it."""

from __future__ import annotations

from ed_engine.actions import UnsupportedCommandError, execute
from ed_engine.buffer import AddressOutOfRange, EditorMode
from ed_engine.grammar import ParseError, command_name, parse_command
from ed_engine.runtime import telemetry

from .base_mode import Mode, ModeContext, ModeResult


class CommandMode(Mode):
    name = EditorMode.NORMAL.value

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("ed_engine.modes.command")

    def handle_line(self, line: str) -> ModeResult:
        self.context.bus.emit("command.submit", line)

        with telemetry.span(
            "command::line",
            metadata={"line": line, "buffer": self.context.state.name},
            logger_name="ed_engine.modes.command",
        ) as handle:
            try:
                command = parse_command(line)
            except ParseError as exc:
                rendered = exc.render(self._verbose, marker=self._marker)
                return self._error(handle, "parse_error", rendered, exc)

            self.logger.debug(f"parsed {line!r} as {command_name(command)}")

            try:
                outcome = execute(command, self.context.state)
            except AddressOutOfRange as exc:
                return self._error(handle, "address_error", self._detail(exc), exc)
            except UnsupportedCommandError as exc:
                return self._error(handle, "unsupported", self._detail(exc), exc)

        if outcome.output:
            self.context.bus.emit("command.output", outcome.output)
        switch_to = None
        if outcome.mode is not EditorMode.NORMAL:
            switch_to = outcome.mode.value
        return ModeResult(
            consumed=True,
            switch_to=switch_to,
            status=f"command_{command_name(command)}",
            message=outcome.status,
            output=outcome.output,
        )

    @property
    def _verbose(self) -> bool:
        return self.context.settings.verbose_errors

    @property
    def _marker(self) -> str:
        return self.context.settings.error_marker

    def _detail(self, exc: Exception) -> str:
        return str(exc) if self._verbose else self._marker

    def _error(
        self,
        handle: telemetry.SpanHandle,
        status: str,
        rendered: str,
        exc: Exception,
    ) -> ModeResult:
        self.context.extras["last_error"] = str(exc)
        self.context.bus.emit("command.error", rendered)
        handle.reject(status, str(exc))
        return ModeResult(
            consumed=True,
            status=f"command_{status}",
            message=str(exc),
            output=tuple(rendered.splitlines()),
        )
