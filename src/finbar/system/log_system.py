"""Structured logging for FINBAR.

structlog events are routed through the stdlib ``logging`` root logger so a
single set of handlers serves both: a console handler on stderr (colored
text or JSON) and an optional JSON-lines file handler.

Event names are dotted ``area.action`` strings (``series.generated``,
``portfolio.created``); the console renderer lays them out per area.
"""

import logging
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Literal

import structlog
from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_LOG_FILE = Path("logs/finbar.log")

# strftime patterns; "%C" is replaced by centiseconds
_TIMESTAMP_PATTERNS = {
    "compact": "%y%m%d-%H%M%S.%C",
    "time": "%H:%M:%S.%C",
    "short": "%m%dT%H%M%S",
}


class LoggingConfig(BaseModel):
    """Settings consumed by LoggerFactory.configure().

    What shows up at each level:

    DEBUG    series generation details
    INFO     chart snapshots, sign-in/out, portfolio and action changes
    WARNING  undefined P&L percentage, rejected credentials
    ERROR    backend failures

    Timestamp formats: "iso" (full ISO-8601), "compact" (251022-205007.28),
    "time" (20:50:07.28), "short" (1022T205007).
    """

    level: LogLevel = "INFO"
    format: Literal["console", "json"] = "console"
    timestamp_format: Literal["iso", "compact", "time", "short"] = "compact"
    enable_file: bool = True
    file_path: Path | None = Field(default=None, description="Defaults to logs/finbar.log")
    file_level: LogLevel = "WARNING"
    file_rotation: bool = True
    max_file_size_mb: int = Field(default=10, gt=0)
    backup_count: int = Field(default=3, ge=0)


class LoggerFactory:
    """
    Process-wide logging setup.

    The CLI calls configure() once per command; library modules simply use
    ``structlog.get_logger(__name__)``.

    Example:
        >>> LoggerFactory.configure(LoggingConfig(level="DEBUG", enable_file=False))
        >>> logger = LoggerFactory.get_logger("finbar.demo")
        >>> logger.info("portfolio.created", portfolio_id="p-1")
    """

    _config: LoggingConfig | None = None
    _configured: bool = False

    @classmethod
    def configure(cls, config: LoggingConfig | None = None) -> None:
        """Install handlers on the root logger and configure structlog."""
        config = config or LoggingConfig()
        if config.enable_file and config.file_path is None:
            config.file_path = DEFAULT_LOG_FILE

        pre_chain = cls._pre_chain(config.timestamp_format)

        handlers = [cls._console_handler(config, pre_chain)]
        root_level = logging.getLevelName(config.level)
        if config.enable_file:
            handlers.append(cls._file_handler(config, pre_chain))
            root_level = min(root_level, logging.getLevelName(config.file_level))

        logging.basicConfig(level=root_level, handlers=handlers, force=True)

        if config.format == "console":
            exception_processors = [
                structlog.dev.set_exc_info,
                structlog.processors.ExceptionRenderer(structlog.dev.plain_traceback),  # type: ignore[arg-type]
            ]
        else:
            exception_processors = [structlog.processors.format_exc_info]

        structlog.configure(
            processors=[
                *pre_chain,
                *exception_processors,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )

        cls._config = config
        cls._configured = True

    @classmethod
    def _pre_chain(cls, timestamp_format: str) -> list[Any]:
        """Processors applied to every record before rendering."""
        return [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            _Timestamper(timestamp_format),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.CallsiteParameterAdder(
                [
                    structlog.processors.CallsiteParameter.FILENAME,
                    structlog.processors.CallsiteParameter.LINENO,
                ]
            ),
        ]

    @staticmethod
    def _console_handler(config: LoggingConfig, pre_chain: list[Any]) -> logging.Handler:
        # stderr: stdout carries command output (e.g. --json)
        handler = logging.StreamHandler(stream=sys.stderr)
        handler.setLevel(config.level)
        renderer = _ConsoleRenderer() if config.format == "console" else structlog.processors.JSONRenderer()
        handler.setFormatter(structlog.stdlib.ProcessorFormatter(processor=renderer, foreign_pre_chain=pre_chain))
        return handler

    @staticmethod
    def _file_handler(config: LoggingConfig, pre_chain: list[Any]) -> logging.Handler:
        """JSON-lines file handler, rotating by size unless disabled."""
        path = config.file_path or DEFAULT_LOG_FILE
        path.parent.mkdir(parents=True, exist_ok=True)

        handler: logging.Handler
        if config.file_rotation:
            handler = RotatingFileHandler(
                path,
                maxBytes=config.max_file_size_mb * 1024 * 1024,
                backupCount=config.backup_count,
                encoding="utf-8",
            )
        else:
            handler = logging.FileHandler(path, encoding="utf-8")

        handler.setLevel(config.file_level)
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=structlog.processors.JSONRenderer(),
                foreign_pre_chain=pre_chain,
            )
        )
        return handler

    @classmethod
    def get_logger(cls, name: str = "finbar") -> Any:
        """Return a structlog logger, configuring defaults on first use."""
        if not cls._configured:
            cls.configure()
        return structlog.get_logger(name)

    @classmethod
    def get_config(cls) -> LoggingConfig:
        return cls._config if cls._config is not None else LoggingConfig()

    @classmethod
    def is_configured(cls) -> bool:
        return cls._configured

    @classmethod
    def reset(cls) -> None:
        """Remove all handlers and restore structlog defaults (tests)."""
        root = logging.getLogger()
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        root.setLevel(logging.NOTSET)
        structlog.reset_defaults()
        cls._config = None
        cls._configured = False


class _Timestamper:
    """Adds ``log_timestamp`` (never ``timestamp``/``date``, which are domain fields)."""

    def __init__(self, fmt: str):
        self._pattern = _TIMESTAMP_PATTERNS.get(fmt)

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        now = datetime.now(timezone.utc)
        if self._pattern is None:
            event_dict["log_timestamp"] = now.isoformat()
        else:
            centis = f"{now.microsecond // 10_000:02d}"
            event_dict["log_timestamp"] = now.strftime(self._pattern.replace("%C", centis))
        return event_dict


class _ConsoleRenderer:
    """
    Human-readable console lines.

    ``series.*`` and ``performance.*`` events get a chart layout (window,
    date range, point count); other dotted events list their context as
    key=value pairs. Undotted events fall back to a plain line with the
    call site.
    """

    DIM = "\033[2m"
    BOLD = "\033[1m"
    CYAN = "\033[36m"
    MAGENTA = "\033[35m"
    YELLOW = "\033[33m"
    GRAY = "\033[90m"
    RESET = "\033[0m"

    LEVEL_COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }

    CHART_AREAS = ("series", "performance")

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> str:
        timestamp = event_dict.pop("log_timestamp", "")
        level = str(event_dict.pop("level", "info")).upper()
        event = str(event_dict.pop("event", ""))
        filename = event_dict.pop("filename", "")
        lineno = event_dict.pop("lineno", "")
        logger_name = event_dict.pop("logger", "")
        context = {key: value for key, value in event_dict.items() if not key.startswith("_")}

        line = self.format_event(event, context, level, timestamp)
        if line is not None:
            return line
        return self._plain(event, context, level, timestamp, logger_name, filename, lineno)

    def format_event(self, event: str, context: dict[str, Any], level: str, timestamp: str) -> str | None:
        """Area-specific layout for a dotted event, or None if the event is not dotted."""
        area, dot, action = event.partition(".")
        if not dot:
            return None

        color = self.LEVEL_COLORS.get(level, self.RESET)
        parts = [
            f"{self.DIM}{timestamp}{self.RESET}",
            f"{color}{area.replace('_', ' ').title()}{self.RESET}",
            f"{self.BOLD}{action.replace('_', ' ').replace('.', ' ').title()}{self.RESET}",
        ]

        if area in self.CHART_AREAS:
            parts.extend(self._chart_details(context))
        else:
            parts.extend(f"{key}={self.CYAN}{value}{self.RESET}" for key, value in sorted(context.items()))

        return " | ".join(parts)

    def _chart_details(self, context: dict[str, Any]) -> list[str]:
        details = []
        if "window" in context:
            details.append(f"Window: {self.MAGENTA}{context['window']}{self.RESET}")
        if "start_date" in context and "end_date" in context:
            details.append(f"{self.CYAN}{context['start_date']}{self.RESET} → {self.CYAN}{context['end_date']}{self.RESET}")
        if "points" in context:
            details.append(f"Points: {self.YELLOW}{context['points']}{self.RESET}")
        if "initial_value" in context:
            details.append(f"Initial: {self.YELLOW}{context['initial_value']}{self.RESET}")
        return details

    def _plain(
        self,
        event: str,
        context: dict[str, Any],
        level: str,
        timestamp: str,
        logger_name: str,
        filename: str,
        lineno: Any,
    ) -> str:
        color = self.LEVEL_COLORS.get(level, "")
        parts = [timestamp, f"[{color}{level.lower()}{self.RESET}]", event]
        if context:
            parts.append(f"{self.GRAY}|{self.RESET} " + " ".join(f"{k}={v}" for k, v in sorted(context.items())))
        if filename and lineno:
            where = f"{Path(filename).stem}:{lineno}"
            if logger_name and logger_name != "finbar":
                where = f"{logger_name}.{where}"
            parts.append(f"{self.GRAY}({where}){self.RESET}")
        return " ".join(parts)
