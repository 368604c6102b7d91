"""CLI entry point for git-rflow."""

import logging
from pathlib import Path

import click

from git_rflow import PROG_NAME, __version__
from git_rflow.commands import run_command
from git_rflow.config import ExecutionContext, configure_logging
from git_rflow.dispatch import dispatch
from git_rflow.errors import RflowError
from git_rflow.operations import GitClient
from git_rflow.options import debug_requested, parse_invocation, usage_text
from git_rflow.output import OutputFormatter

LOG = logging.getLogger(__name__)


class InvocationCommand(click.Command):
    """Click command that hands the untouched argument list to the tokenizer.

    Click's own parser would drop the ``--`` separator and reject unknown
    options, so parsing is bypassed here.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.params["tokens"] = tuple(args)
        return []


@click.command(cls=InvocationCommand, add_help_option=False)
@click.pass_context
def cli(ctx: click.Context, tokens: tuple[str, ...]) -> None:
    """Git-rflow: guarded feature branch workflow on top of git."""
    configure_logging(debug_requested(tokens))
    formatter = OutputFormatter(ExecutionContext())
    try:
        parsed = parse_invocation(tokens)
    except RflowError as e:
        formatter.error(e)
        ctx.exit(e.exit_code)

    options = parsed.options
    LOG.debug("options: %s", ", ".join(options.enabled()) or "(none)")

    if options.help or (not parsed.positionals and not options.version):
        LOG.debug("print usage and exit")
        click.echo(usage_text())
        ctx.exit(1)

    if options.version:
        click.echo(f"{PROG_NAME}, version {__version__}")
        ctx.exit(0)

    context = ExecutionContext.from_options(options, cwd=Path.cwd())
    formatter = OutputFormatter(context)
    try:
        command = dispatch(parsed.positionals)
        result = run_command(command, GitClient(context, formatter))
    except RflowError as e:
        formatter.error(e)
        ctx.exit(e.exit_code)

    formatter.summary(result)


def main() -> None:
    cli(prog_name=PROG_NAME)


if __name__ == "__main__":
    main()
