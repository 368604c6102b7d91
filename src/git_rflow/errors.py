"""Custom exceptions for git-rflow."""


class RflowError(Exception):
    """Base exception for all rflow errors."""

    exit_code: int = 1
    message: str = ""

    def __init__(self, message: str | None = None):
        super().__init__(message if message is not None else self.message)


class UsageError(RflowError):
    """Raised when the command line cannot be turned into a workflow command."""

    pass


class MissingCommand(UsageError):
    """Raised when no branch type was given."""

    message = "The branch type command is required."


class MissingSubcommand(UsageError):
    """Raised when a branch type was given without a command."""

    message = "The feature branch command is required."


class MissingArgument(UsageError):
    """Raised when a command is missing a required argument."""

    message = "The feature branch name is required."


class UnrecognizedParameter(UsageError):
    """Raised for unknown options and for tokens beyond a command's arity."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Unrecognized parameter '{token}'")


class PreconditionError(RflowError):
    """Raised when the local repository is not safe to modify."""

    pass


class NotClean(PreconditionError):
    """Raised when the working tree has uncommitted changes."""

    message = "Local repo is not clean. Please fix and retry."


class Gone(PreconditionError):
    """Raised when the upstream of the current branch was deleted."""

    message = 'Local repo is "gone". Please fix and retry.'


class Unpushed(PreconditionError):
    """Raised when the current branch is ahead of its upstream."""

    message = "Local repo has unpushed changes. Please fix and retry."


class CommandExecutionError(RflowError):
    """Raised when an underlying git command exits non-zero."""

    def __init__(self, command: str, output: str = "", exit_code: int | None = None):
        self.command = command
        self.output = output
        self.returncode = exit_code
        detail = output.strip()
        message = f"Git command failed: {command}"
        if detail:
            message = f"{message}\n{detail}"
        super().__init__(message)
