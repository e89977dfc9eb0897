from dataclasses import dataclass

from .application.ports.services import LogLevel


@dataclass(frozen=True, slots=True)
class LoggerConfig:
    """Settings the container uses to build a sink."""

    threshold: LogLevel = LogLevel.INFO
    enabled: bool = True
    show_level: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.threshold, LogLevel):
            raise ValueError(
                f"threshold must be a LogLevel, got {type(self.threshold).__name__}"
            )
