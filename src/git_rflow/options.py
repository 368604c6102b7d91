"""
Tokenizer for the git-rflow command line.

Every raw token is classified as an option, the ``--`` separator, or a
positional token. Options are recognised anywhere before the separator;
everything after it is ignored.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Mapping, Sequence

from git_rflow.errors import UnrecognizedParameter

LOG = logging.getLogger(__name__)

SEPARATOR = "--"


@dataclass(frozen=True, slots=True)
class OptionSpec:
    """One global option: canonical name, flags and help text."""

    name: str
    short: str
    long: str
    help: str


OPTION_SPECS: tuple[OptionSpec, ...] = (
    OptionSpec("help", "h", "help", "Display this [h]elp"),
    OptionSpec("version", "V", "version", "Display the program [v]ersion"),
    OptionSpec(
        "print_git_commands", "c", "print-git-commands", "Print git [c]ommands as they are run"
    ),
    OptionSpec("debug", "d", "debug", "Debug git-rflow with execution tracing"),
    OptionSpec("print_git_output", "o", "print-git-output", "Print [o]utput from git commands"),
)

SHORT_OPTIONS = {spec.short: spec.name for spec in OPTION_SPECS}
LONG_OPTIONS = {f"--{spec.long}": spec.name for spec in OPTION_SPECS}


@dataclass(frozen=True, slots=True)
class OptionSet:
    """Resolved global options, keyed by canonical name."""

    help: bool = False
    version: bool = False
    print_git_commands: bool = False
    print_git_output: bool = False
    debug: bool = False

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "OptionSet":
        """Build an OptionSet from structured data.

        Keys may be canonical names, long flag names (with or without the
        leading dashes) or short letters. Supplying both the long and the
        short alias of one option is rejected; repeating one option through
        two long spellings is reported separately. Unknown keys and
        non-boolean values are rejected too.
        """
        resolved: dict[str, bool] = {}
        seen: dict[str, str] = {}
        for key, value in values.items():
            name = _resolve_alias(key)
            if name is None:
                valid = ", ".join(sorted(_all_aliases()))
                raise ValueError(f"Invalid option '{key}' given. Valid options are: {valid}")
            if name in seen:
                previous = seen[name]
                if _is_short_alias(previous) != _is_short_alias(key):
                    raise ValueError(f"Cannot specify both '{previous}' and '{key}'")
                raise ValueError(f"Option '{key}' given more than once (also as '{previous}')")
            if not isinstance(value, bool):
                raise ValueError(f"Option '{key}' must be a boolean")
            seen[name] = key
            resolved[name] = value
        return cls(**resolved)

    def enabled(self) -> tuple[str, ...]:
        return tuple(f.name for f in fields(self) if getattr(self, f.name))


def _resolve_alias(key: str) -> str | None:
    for spec in OPTION_SPECS:
        if key in (spec.name, spec.short, spec.long, f"--{spec.long}", f"-{spec.short}"):
            return spec.name
    return None


def _is_short_alias(key: str) -> bool:
    return key.lstrip("-") in SHORT_OPTIONS and not key.startswith("--")


def _all_aliases() -> set[str]:
    aliases: set[str] = set()
    for spec in OPTION_SPECS:
        aliases.update((spec.name, spec.short, spec.long))
    return aliases


class TokenKind(Enum):
    OPTION = "option"
    SEPARATOR = "separator"
    POSITIONAL = "positional"


class _State(Enum):
    OPTIONS = "options"
    IGNORING = "ignoring"


@dataclass(frozen=True, slots=True)
class ParsedInvocation:
    """Result of tokenizing one invocation."""

    options: OptionSet
    positionals: tuple[str, ...]


def classify(token: str) -> TokenKind:
    """Classify a single token, independent of its position."""
    if token == SEPARATOR:
        return TokenKind.SEPARATOR
    if token.startswith("-"):
        return TokenKind.OPTION
    return TokenKind.POSITIONAL


def expand_option(token: str) -> tuple[str, ...]:
    """Return canonical option names for an option token.

    ``-co`` expands to both ``print_git_commands`` and ``print_git_output``.
    """
    if token in LONG_OPTIONS:
        return (LONG_OPTIONS[token],)
    if token.startswith("--") or len(token) < 2:
        raise UnrecognizedParameter(token)

    names = []
    for letter in token[1:]:
        if letter not in SHORT_OPTIONS:
            raise UnrecognizedParameter(token)
        names.append(SHORT_OPTIONS[letter])
    return tuple(names)


def debug_requested(tokens: Sequence[str]) -> bool:
    """Return True if a valid debug flag appears before the separator.

    Used to switch tracing on before the full parse, so the parse itself
    can be traced.
    """
    for token in tokens:
        kind = classify(token)
        if kind is TokenKind.SEPARATOR:
            return False
        if kind is not TokenKind.OPTION:
            continue
        try:
            if "debug" in expand_option(token):
                return True
        except UnrecognizedParameter:
            continue
    return False


def parse_invocation(tokens: Sequence[str]) -> ParsedInvocation:
    """Split raw tokens into global options and positional tokens."""
    state = _State.OPTIONS
    enabled: dict[str, bool] = {}
    positionals: list[str] = []

    for token in tokens:
        if state is _State.IGNORING:
            LOG.debug("ignoring %r after separator", token)
            continue

        kind = classify(token)
        if kind is TokenKind.SEPARATOR:
            state = _State.IGNORING
        elif kind is TokenKind.OPTION:
            for name in expand_option(token):
                enabled[name] = True
        else:
            positionals.append(token)
        LOG.debug("token %r -> %s", token, kind.value)

    return ParsedInvocation(options=OptionSet(**enabled), positionals=tuple(positionals))


def usage_text() -> str:
    """Render the usage message."""
    lines = [
        "Usage:",
        "    git-rflow [global options] <branch type> <command> [command options]",
        "",
        "Branch types and commands:",
        "    feature start <name>        Start a new feature branch",
        "",
        "Global options:",
    ]
    for spec in OPTION_SPECS:
        flags = f"-{spec.short}, --{spec.long}"
        lines.append(f"    {flags:<28}{spec.help}")
    lines.append(f"    {SEPARATOR:<28}Ignore all following options")
    return "\n".join(lines)
