"""
Runtime configuration for git-rflow.

The CLI builds one ExecutionContext from the parsed options and passes it
down to the git client and formatter, so nothing below the entry point
reads global or environment state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import click

from git_rflow.options import OptionSet

LOGGER_NAME = "git_rflow"
TRACE_FORMAT = "+ %(name)s: %(message)s"


@dataclass(frozen=True, slots=True)
class ExecutionContext:
    """Immutable settings for one invocation."""

    print_git_commands: bool = False
    print_git_output: bool = False
    debug: bool = False
    cwd: Path | None = None

    @classmethod
    def from_options(cls, options: OptionSet, cwd: Path | None = None) -> "ExecutionContext":
        return cls(
            print_git_commands=options.print_git_commands,
            print_git_output=options.print_git_output,
            debug=options.debug,
            cwd=cwd,
        )

    def trace(self, logger: logging.Logger, msg: str, *args: object) -> None:
        """Log a trace line, only when this invocation asked for debugging."""
        if self.debug:
            logger.debug(msg, *args)


class ClickStderrHandler(logging.Handler):
    """Write log records through click so they follow its stream redirection."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:  # noqa: BLE001
            self.handleError(record)


def configure_logging(debug: bool) -> logging.Logger:
    """
    Configure the package logger.

    debug == False -> WARNING
    debug == True  -> DEBUG, every trace line prefixed with "+ "
    """

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = ClickStderrHandler()
    handler.setFormatter(logging.Formatter(TRACE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.propagate = False
    return logger
