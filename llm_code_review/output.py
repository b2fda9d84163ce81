"""Prompt output: standard output or a file.

Contains:
- extract_branch_names: Work out (current, target) from diff selectors
- generate_output_filename: Build a file name from branches and a timestamp
- write_prompt_file: Write the prompt to disk
"""

from datetime import datetime
from pathlib import Path
from typing import Optional

from loguru import logger

from llm_code_review.config import DEFAULT_MAIN_BRANCH
from llm_code_review.git import get_branch, split_path_separator


TIMESTAMP_FORMAT = "%Y-%m-%d %H-%M-%S"


def _revision_selectors(args: list[str]) -> list[str]:
    """Return the non-option arguments that come before any `--`."""
    options, _ = split_path_separator(args)
    return [arg for arg in options if not arg.startswith("-")]


def extract_branch_names(
    args: list[str],
    main_branch: str = DEFAULT_MAIN_BRANCH,
) -> tuple[str, str]:
    """Work out which branch is reviewed against which.

    Args:
        args: Pass-through git diff arguments.
        main_branch: Target used when no revision is given.

    Returns:
        Tuple of (current, target) branch names.
    """
    selectors = _revision_selectors(args)

    if len(selectors) >= 2:
        return selectors[1], selectors[0]

    if len(selectors) == 1:
        selector = selectors[0]
        for dots in ("...", ".."):
            if dots in selector:
                target, current = selector.split(dots, 1)
                return current or "HEAD", target or "HEAD"
        return get_branch(), selector

    return get_branch(), main_branch


def generate_output_filename(
    args: list[str],
    main_branch: str = DEFAULT_MAIN_BRANCH,
    now: Optional[datetime] = None,
) -> str:
    """Generate a file name like "PR Review, feature -> main, 2024-01-31 12-00-00.md"."""
    current, target = extract_branch_names(args, main_branch)
    timestamp = (now or datetime.now()).strftime(TIMESTAMP_FORMAT)
    current = current.replace("/", "-")
    target = target.replace("/", "-")
    return f"PR Review, {current} -> {target}, {timestamp}.md"


def write_prompt_file(prompt: str, filename: str) -> Path:
    """Write the prompt to filename and return its path.

    Raises:
        OSError: If the file cannot be written.
    """
    path = Path(filename)
    path.write_text(prompt + "\n", encoding="utf-8")
    logger.debug("Wrote {} characters to {}", len(prompt), path)
    return path
