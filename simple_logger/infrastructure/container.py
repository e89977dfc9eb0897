from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..config import LoggerConfig
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import ensure_logger, get_null_logger

if TYPE_CHECKING:
    from ..application.ports.services import LoggerPort


class DependencyContainer:
    pass

    def __init__(
        self,
        config: LoggerConfig | None = None,
        console: Console | None = None,
        use_null_logger: bool = False,
    ) -> None:
        super().__init__()
        self.config = config or LoggerConfig()
        self.console = console or Console(stderr=True)
        self.use_null_logger = use_null_logger
        self._logger_instance: LoggerPort | None = None

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger or not self.config.enabled:
                self._logger_instance = get_null_logger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console,
                    threshold=self.config.threshold,
                    show_level=self.config.show_level,
                )
        return self._logger_instance

    def reset_singletons(self) -> None:
        self._logger_instance = None

    def override_logger(self, logger: LoggerPort | None) -> None:
        self._logger_instance = ensure_logger(logger)


def create_default_container(config: LoggerConfig | None = None) -> DependencyContainer:
    return DependencyContainer(config=config)
