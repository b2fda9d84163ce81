"""Review prompt pipeline.

Turns InvocationOptions into a finished prompt: build the git diff
arguments, fetch and fit the diff, then assemble the prompt around it.
"""

from loguru import logger

from llm_code_review.fitting import fit_diff
from llm_code_review.git import DiffSource, build_diff_arguments
from llm_code_review.options import InvocationOptions
from llm_code_review.prompt import build_review_prompt


def generate_review_prompt(options: InvocationOptions, source: DiffSource) -> str:
    """Produce the review prompt for the given options.

    Raises:
        GitError: If the diff cannot be produced or is empty.
        DiffTooLargeError: If the diff cannot be fitted into the budget.
    """
    diff_args = build_diff_arguments(list(options.passthrough_args), options.unified_context)
    logger.trace("git diff arguments: {}", diff_args)

    fitted = fit_diff(
        source,
        diff_args,
        options.unified_context,
        force_reduced=options.force_reduced,
    )
    if fitted.reduced:
        logger.debug("Using diff with {} context lines", fitted.unified_context)

    return build_review_prompt(
        fitted.text,
        system_prompt=options.system_prompt,
        additional_context=options.additional_context,
        output_format=options.output_format,
    )
