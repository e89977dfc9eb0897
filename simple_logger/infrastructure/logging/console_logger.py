from io import StringIO
from typing import override

from rich.console import Console
from rich.markup import escape

from ...application.ports.services import LoggerPort, LogLevel

_LEVEL_STYLES: dict[LogLevel, str] = {
    LogLevel.INFO: "bold blue",
    LogLevel.DEBUG: "dim cyan",
    LogLevel.TRACE: "dim magenta",
}


class ConsoleLogger(LoggerPort):
    """Writes messages to a rich console.

    A message is printed when its level is no more verbose than the
    threshold: ``INFO`` shows info messages only, ``TRACE`` shows all.
    Message text is printed literally (no markup, no emoji codes). Write
    and encoding failures on the underlying stream are counted as
    ``dropped`` and never propagate.
    """

    def __init__(
        self,
        console: Console | None = None,
        threshold: LogLevel = LogLevel.INFO,
        *,
        show_level: bool = True,
    ) -> None:
        super().__init__()
        self.console = console or Console(stderr=True)
        self.show_level = show_level
        self._threshold = threshold
        self._stats: dict[str, int] = {
            "emitted": 0,
            "suppressed": 0,
            "dropped": 0,
        }

    @override
    def get_threshold(self) -> LogLevel:
        return self._threshold

    @override
    def set_threshold(self, level: LogLevel) -> None:
        self._threshold = level

    @override
    def log(self, level: LogLevel, message: str) -> None:
        if level > self._threshold:
            self._stats["suppressed"] += 1
            return
        text = escape(message)
        if self.show_level:
            style = _LEVEL_STYLES[level]
            text = f"[{style}]{level.name:<5}[/{style}] {text}"
        try:
            rendered = self._render(text)
            self.console.file.write(rendered)
            self.console.file.flush()
        except (OSError, ValueError):
            self._stats["dropped"] += 1
            return
        self._stats["emitted"] += 1

    def get_stats(self) -> dict[str, int]:
        return self._stats.copy()

    def reset_stats(self) -> None:
        self._stats = {
            "emitted": 0,
            "suppressed": 0,
            "dropped": 0,
        }

    def _render(self, text: str) -> str:
        # rendered off to the side: Console.print on the real stream turns
        # BrokenPipeError into SystemExit
        output = StringIO()
        buffer = Console(
            file=output,
            width=self.console.width,
            color_system=self.console.color_system,
            force_terminal=self.console.is_terminal,
            highlight=False,
            emoji=False,
        )
        buffer.print(text, soft_wrap=True)
        return output.getvalue()
