"""Fit a diff into the model's input budget.

There is no simple, consistent way to count tokens, so the size of a diff is
estimated from its character count. When the estimate exceeds the ceiling,
the unified context is scaled down proportionally and the diff is fetched
again, once.
"""

from dataclasses import dataclass

from loguru import logger

from llm_code_review.config import CHARS_PER_TOKEN, MAX_TOKENS
from llm_code_review.exceptions import DiffTooLargeError
from llm_code_review.git.diff import (
    LONG_UNIFIED_PATTERN,
    SHORT_UNIFIED_PATTERN,
    DiffSource,
    split_path_separator,
)
from llm_code_review.git.exceptions import EmptyDiffError


@dataclass
class FittedDiff:
    """Diff text that fits the token budget."""

    text: str
    unified_context: int
    estimated_tokens: int
    reduced: bool = False


def estimate_tokens(text: str, chars_per_token: int = CHARS_PER_TOKEN) -> int:
    """Estimate the number of tokens in text."""
    return len(text) // chars_per_token


def compute_reduced_context(
    original_context: int,
    estimated_tokens: int,
    max_tokens: int = MAX_TOKENS,
) -> int:
    """Scale the unified context down by how far the diff is over budget.

    Args:
        original_context: Context lines used for the oversized diff.
        estimated_tokens: Estimated tokens of that diff.
        max_tokens: Token ceiling.

    Returns:
        max(1, floor(original_context * max_tokens / estimated_tokens)), never
        more than original_context unless original_context is 0.
    """
    if estimated_tokens <= 0:
        return max(1, original_context)
    reduced = original_context * max_tokens // estimated_tokens
    return max(1, min(reduced, original_context))


def replace_unified_context(args: list[str], unified_context: int) -> list[str]:
    """Substitute every unified-context flag with a new value.

    Both `-U<N>` and `--unified=<N>` are replaced, abbreviated long flags
    being spelled out. Arguments after a bare
    `--` are paths and are left alone.
    """
    options, paths = split_path_separator(args)
    new_args = []
    for arg in options:
        if SHORT_UNIFIED_PATTERN.match(arg):
            new_args.append(f"-U{unified_context}")
        elif LONG_UNIFIED_PATTERN.match(arg):
            new_args.append(f"--unified={unified_context}")
        else:
            new_args.append(arg)
    return new_args + paths


def _fetch_diff(source: DiffSource, args: list[str]) -> str:
    diff_text = source.get_diff(args)
    if not diff_text:
        raise EmptyDiffError("No changes found to review.")
    return diff_text


def fit_diff(
    source: DiffSource,
    args: list[str],
    unified_context: int,
    max_tokens: int = MAX_TOKENS,
    chars_per_token: int = CHARS_PER_TOKEN,
    force_reduced: bool = False,
) -> FittedDiff:
    """Fetch a diff and shrink its context once if it is over budget.

    Args:
        source: Where diff text comes from.
        args: Full diff arguments, including the unified-context flag.
        unified_context: Context value present in args.
        max_tokens: Token ceiling.
        chars_per_token: Characters assumed per token.
        force_reduced: Take the reduction path even when within budget.

    Returns:
        FittedDiff with the diff text that was accepted.

    Raises:
        DiffTooLargeError: If the reduced diff is still over budget.
        EmptyDiffError: If either diff comes back empty.
        GitError: Propagated from the diff source.
    """
    diff_text = _fetch_diff(source, args)
    estimated = estimate_tokens(diff_text, chars_per_token)
    logger.trace("Estimated {} tokens for {} characters", estimated, len(diff_text))

    if estimated <= max_tokens and not force_reduced:
        return FittedDiff(
            text=diff_text,
            unified_context=unified_context,
            estimated_tokens=estimated,
        )

    logger.debug(
        "estimated_tokens > max_tokens! `{} > {}`. Need to reduce context from {}!",
        estimated,
        max_tokens,
        unified_context,
    )
    reduced_context = compute_reduced_context(unified_context, estimated, max_tokens)
    logger.info("Reducing context to {} lines to fit token limits", reduced_context)

    new_args = replace_unified_context(args, reduced_context)
    diff_text = _fetch_diff(source, new_args)
    estimated = estimate_tokens(diff_text, chars_per_token)

    if estimated > max_tokens:
        logger.trace("Reduced diff still estimated at {} tokens", estimated)
        raise DiffTooLargeError(
            "Diff is too large to process even with minimal context. "
            "Try reviewing a smaller set of changes."
        )

    return FittedDiff(
        text=diff_text,
        unified_context=reduced_context,
        estimated_tokens=estimated,
        reduced=True,
    )
