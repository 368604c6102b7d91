"""Resolve positional tokens into a workflow command."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from git_rflow.errors import (
    MissingArgument,
    MissingCommand,
    MissingSubcommand,
    UnrecognizedParameter,
)

LOG = logging.getLogger(__name__)

# branch type -> subcommand -> names of required arguments
COMMANDS: dict[str, dict[str, tuple[str, ...]]] = {
    "feature": {
        "start": ("name",),
    },
}


@dataclass(frozen=True, slots=True)
class WorkflowCommand:
    """A validated branch type, subcommand and its arguments."""

    command_type: str
    subcommand: str
    arguments: tuple[str, ...]

    @property
    def name(self) -> str:
        return f"{self.command_type} {self.subcommand}"


def dispatch(positionals: Sequence[str]) -> WorkflowCommand:
    """Resolve a WorkflowCommand, consuming exactly its declared arity."""
    if not positionals:
        raise MissingCommand()

    command_type = positionals[0]
    subcommands = COMMANDS.get(command_type)
    if subcommands is None:
        raise UnrecognizedParameter(command_type)

    if len(positionals) < 2:
        raise MissingSubcommand(f"The {command_type} branch command is required.")

    subcommand = positionals[1]
    required = subcommands.get(subcommand)
    if required is None:
        raise UnrecognizedParameter(subcommand)

    arguments = tuple(positionals[2 : 2 + len(required)])
    if len(arguments) < len(required):
        missing = required[len(arguments)]
        raise MissingArgument(f"The {command_type} branch {missing} is required.")

    leftover = positionals[2 + len(required) :]
    if leftover:
        raise UnrecognizedParameter(leftover[0])

    command = WorkflowCommand(command_type, subcommand, arguments)
    LOG.debug("dispatch %s %s", command.name, " ".join(arguments))
    return command
