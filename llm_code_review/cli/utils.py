"""Argument handling shared by the CLI command.

Click only knows about this tool's own flags. Everything else on the command
line belongs to `git diff` and must reach it untouched, so the raw arguments
are prepared here before Click parses them.
"""

import click
from typer.core import TyperCommand

from llm_code_review.git import split_path_separator


FILE_FLAGS = ("-f", "--file")

# Flags that always consume the following argument
VALUE_FLAGS = (
    "-c",
    "--context",
    "-s",
    "--system-prompt",
    "-F",
    "--output-format",
    "-U",
    "--unified",
)

# Prefixes git accepts for --unified
UNIFIED_ABBREVIATIONS = ("--unif", "--unifi", "--unifie")


def expand_unified_abbreviation(arg: str) -> str:
    """Spell out an abbreviated --unified so Click consumes it.

    git accepts any unambiguous prefix from `--unif` on. Left alone, such a
    flag would be forwarded to git next to the `-U<N>` this tool inserts.
    """
    name, separator, value = arg.partition("=")
    if name in UNIFIED_ABBREVIATIONS:
        return "--unified" + separator + value
    return arg


def normalize_options(args: list[str]) -> list[str]:
    """Prepare the arguments before `--` for Click.

    A bare -f/--file gets an explicit empty value: -f takes the next argument
    as the file name only when there is one and it is not another flag.
    Otherwise it becomes `--file=`, which asks for a generated name.
    Abbreviated `--unified` spellings are expanded.
    """
    normalized = []
    index = 0
    while index < len(args):
        arg = expand_unified_abbreviation(args[index])
        has_next = index + 1 < len(args)

        if arg in VALUE_FLAGS and has_next:
            normalized.extend([arg, args[index + 1]])
            index += 2
            continue

        if arg in FILE_FLAGS:
            next_arg = args[index + 1] if has_next else None
            if next_arg is None or next_arg.startswith("-"):
                normalized.append("--file=")
                index += 1
                continue
            normalized.extend([arg, next_arg])
            index += 2
            continue

        normalized.append(arg)
        index += 1
    return normalized


class ReviewCommand(TyperCommand):
    """Command that forwards unknown arguments and path filters to git diff.

    Arguments from the first bare `--` onward are kept away from Click, which
    would otherwise swallow the separator, and are appended to ctx.args
    after parsing. Usage errors exit with 1 like every other failure.
    """

    def parse_args(self, ctx, args):
        options, paths = split_path_separator(list(args))
        try:
            super().parse_args(ctx, normalize_options(options))
        except click.UsageError as e:
            e.exit_code = 1
            raise
        ctx.args = list(ctx.args) + paths
        return ctx.args
