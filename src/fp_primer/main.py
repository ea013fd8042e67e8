"""
Application entry point — loads settings, configures logging, runs demos.

Composition root: the only place that reads configuration, configures
structlog and decides which demos run.

Responsibilities:
  1. Load and validate configuration from environment/.env
  2. Configure structlog (console or JSON lines)
  3. Resolve the demo selection (CLI arguments override configuration)
  4. Emit every labelled demo value as a `demo.value` log event
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

import structlog

from fp_primer import __version__
from fp_primer.config import AppSettings
from fp_primer.demos import DEMOS, UnknownDemo, select_demos


def configure_structlog(log_level: str = "INFO", log_format: str = "console") -> None:
    """
    Configure structlog and the standard logging module.

    console: colored, human-readable lines. json: one JSON object per line.
    The standard logging module (used by fpkit's trace sink) writes plain
    messages to stdout at the same level.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO
    renderer = (
        structlog.processors.JSONRenderer(default=repr)
        if log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
    logging.basicConfig(level=level, format="%(name)s %(message)s", stream=sys.stdout, force=True)


def run_demos(names: Sequence[str]) -> int:
    """Run the named demos in order and log each value. Returns the number of values."""
    log = structlog.get_logger()
    emitted = 0
    for name in names:
        log.info("demo.started", demo=name)
        for label, value in DEMOS[name]():
            log.info("demo.value", demo=name, label=label, value=value)
            emitted += 1
    return emitted


def _reject(error: UnknownDemo) -> int:
    print(f"FATAL: {error.message}", file=sys.stderr)  # noqa: T201
    return 1


def main(argv: Sequence[str] | None = None) -> None:
    """Load settings, configure logging and run the selected demos."""
    try:
        settings = AppSettings()
    except Exception as e:
        print(f"FATAL: Configuration error — {e}", file=sys.stderr)  # noqa: T201
        sys.exit(1)

    configure_structlog(settings.log_level, settings.log_format)
    log = structlog.get_logger()

    requested = list(sys.argv[1:] if argv is None else argv) or settings.demos
    log.info("app.starting", version=__version__, log_level=settings.log_level, demos=requested)

    def _run(names: tuple[str, ...]) -> int:
        emitted = run_demos(names)
        log.info("app.finished", demos=len(names), values=emitted)
        return 0

    exit_code = select_demos(requested).match(on_failure=_reject, on_success=_run)
    if exit_code:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
