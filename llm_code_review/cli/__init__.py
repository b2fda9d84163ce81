"""CLI entry point for llm_code_review.

The application has a single command, so arguments go straight to it:

    llm-code-review [OPTIONS] [GIT_DIFF_ARGS]...
"""

import typer

from llm_code_review.cli.main import review_command
from llm_code_review.cli.utils import ReviewCommand
from llm_code_review.prompts import REVIEW_EXAMPLES

app = typer.Typer(
    name="llm-code-review",
    help="llm-code-review: build code review prompts from git diffs",
    add_completion=False,
    rich_markup_mode=None,
)

app.command(
    cls=ReviewCommand,
    epilog=REVIEW_EXAMPLES,
    context_settings={
        "help_option_names": ["-h", "--help"],
        "allow_extra_args": True,
        "ignore_unknown_options": True,
    },
)(review_command)


__all__ = [
    "app",
    "review_command",
    "ReviewCommand",
]
