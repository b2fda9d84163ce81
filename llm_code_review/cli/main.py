"""Main CLI command for generating code review prompts."""

from typing import Optional

import typer
from loguru import logger

from llm_code_review.config import DEFAULT_UNIFIED_CONTEXT
from llm_code_review.exceptions import ReviewError
from llm_code_review.git import GitDiffSource, GitError
from llm_code_review.log import configure_logging
from llm_code_review.options import InvocationOptions
from llm_code_review.output import generate_output_filename, write_prompt_file
from llm_code_review.prompt import OutputFormat, format_system_prompt_display
from llm_code_review.review import generate_review_prompt


def review_command(
    ctx: typer.Context,
    context: Optional[str] = typer.Option(
        None,
        "--context",
        "-c",
        metavar="TEXT",
        help="Add additional context for the review, appended to the system prompt",
    ),
    system_prompt: Optional[str] = typer.Option(
        None,
        "--system-prompt",
        "-s",
        metavar="TEXT",
        help="Use something other than the default system prompt",
    ),
    show_system_prompt: bool = typer.Option(
        False,
        "--show-system-prompt",
        "-S",
        help="Print the default system prompt and exit",
    ),
    output_format: Optional[OutputFormat] = typer.Option(
        None,
        "--output-format",
        "-F",
        case_sensitive=False,
        help="Request the review in a specific format",
    ),
    unified: int = typer.Option(
        DEFAULT_UNIFIED_CONTEXT,
        "--unified",
        "-U",
        min=0,
        metavar="N",
        help="Number of context lines given to the LLM",
    ),
    output_file: Optional[str] = typer.Option(
        None,
        "--file",
        "-f",
        metavar="[NAME]",
        help="Write the prompt to a file (name is generated if none given)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-D",
        help="Enable debug output (very verbose mode, implies --verbose)",
    ),
    force_reduced: bool = typer.Option(
        False,
        "--force-reduced",
        hidden=True,
        help="Force context to be reduced, for testing",
    ),
) -> None:
    """Ask an LLM to review code changes.

    All arguments not listed below are passed directly to 'git diff',
    allowing you to use any git diff syntax or options.
    """
    configure_logging(verbose=verbose, debug=debug)
    if verbose:
        logger.info("Verbose mode enabled.")
    if debug:
        logger.trace("Debug mode enabled.")

    if show_system_prompt:
        typer.echo(format_system_prompt_display())
        raise typer.Exit(0)

    options = InvocationOptions(
        unified_context=unified,
        system_prompt=system_prompt,
        additional_context=context,
        output_format=output_format,
        output_file=output_file,
        passthrough_args=ctx.args,
        force_reduced=force_reduced,
        verbose=verbose or debug,
        debug=debug,
    )
    logger.trace("unified_context: {}", options.unified_context)
    if options.passthrough_args:
        logger.trace("remaining_args: {}", list(options.passthrough_args))

    try:
        prompt = generate_review_prompt(options, GitDiffSource())
    except (GitError, ReviewError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not options.writes_file:
        typer.echo(prompt)
        return

    filename = options.output_file or generate_output_filename(list(options.passthrough_args))
    try:
        write_prompt_file(prompt, filename)
    except OSError as e:
        typer.echo(f"Error: could not write {filename}: {e}", err=True)
        raise typer.Exit(1)
    typer.echo(f"Wrote: {filename}")
