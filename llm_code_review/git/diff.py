"""Git diff acquisition.

Contains:
- DiffSource: Abstract source of diff text for a list of diff arguments
- GitDiffSource: DiffSource backed by the `git diff` command
- build_diff_arguments: Prepend a unified-context flag unless one is present
- has_unified_context: Check whether arguments already select unified context
- split_path_separator: Split arguments at the first bare `--`
"""

import re
import subprocess
from abc import ABC, abstractmethod

from loguru import logger

from llm_code_review.git.exceptions import DiffCommandError, EmptyDiffError


PATH_SEPARATOR = "--"

# Matches -U10 and --unified=10, including the abbreviations git accepts
SHORT_UNIFIED_PATTERN = re.compile(r"^-U(\d+)$")
LONG_UNIFIED_PATTERN = re.compile(r"^--unif(?:i|ie|ied)?=(\d+)$")


def split_path_separator(args: list[str]) -> tuple[list[str], list[str]]:
    """Split diff arguments at the first bare `--`.

    Args:
        args: Arguments destined for `git diff`.

    Returns:
        Tuple of (arguments before the separator, separator and everything after).
        The second list is empty when no separator is present.
    """
    if PATH_SEPARATOR in args:
        index = args.index(PATH_SEPARATOR)
        return list(args[:index]), list(args[index:])
    return list(args), []


def is_unified_context_flag(arg: str) -> bool:
    """Return True if arg is a `-U<N>` or `--unified=<N>` flag, or `--unif=<N>` and the like."""
    return bool(SHORT_UNIFIED_PATTERN.match(arg) or LONG_UNIFIED_PATTERN.match(arg))


def has_unified_context(args: list[str]) -> bool:
    """Check whether a unified-context flag appears before any path separator."""
    options, _ = split_path_separator(args)
    return any(is_unified_context_flag(arg) for arg in options)


def build_diff_arguments(args: list[str], unified_context: int) -> list[str]:
    """Build the argument list for `git diff`.

    A `-U<N>` flag is inserted at the front unless the caller already
    supplied a unified-context flag.

    Args:
        args: Pass-through arguments, in their original order.
        unified_context: Number of context lines to request.

    Returns:
        A new list of arguments.
    """
    if has_unified_context(args):
        return list(args)
    return [f"-U{unified_context}"] + list(args)


class DiffSource(ABC):
    """Something that turns diff arguments into diff text."""

    @abstractmethod
    def get_diff(self, args: list[str]) -> str:
        """Return the diff text for the given arguments.

        Raises:
            DiffCommandError: If the diff cannot be produced.
            EmptyDiffError: If there are no changes.
        """
        pass


def _decode(output: bytes) -> str:
    """Decode git output, replacing bytes that are not valid UTF-8."""
    if not output:
        return ""
    return output.decode("utf-8", errors="replace")


class GitDiffSource(DiffSource):
    """DiffSource that runs `git diff` in the current working directory."""

    def __init__(self, git_executable: str = "git"):
        self.git_executable = git_executable

    def get_diff(self, args: list[str]) -> str:
        command = [self.git_executable, "diff"] + list(args)
        logger.debug("Running command: {}", command)

        try:
            result = subprocess.run(
                command,
                capture_output=True,
            )
        except FileNotFoundError:
            raise DiffCommandError("Git is not installed or not in PATH.")
        except OSError as e:
            raise DiffCommandError(f"Unable to run git diff: {e}")

        if result.returncode != 0:
            stderr = _decode(result.stderr).strip()
            logger.debug("git diff exited with {}: {}", result.returncode, stderr)
            message = "Git diff command failed. Check your arguments."
            if stderr:
                message = f"{message}\n{stderr}"
            raise DiffCommandError(message)

        diff_output = _decode(result.stdout)
        if not diff_output.strip():
            raise EmptyDiffError("No changes found to review.")

        logger.trace("git diff returned {} characters", len(diff_output))
        return diff_output
