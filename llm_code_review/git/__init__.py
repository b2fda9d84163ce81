"""Git integration for llm_code_review.

This package provides:
- exceptions: GitError, DiffCommandError, EmptyDiffError
- runner: _run_git_command
- branch: get_branch
- diff: DiffSource, GitDiffSource, build_diff_arguments and flag helpers
"""

# Exceptions
from llm_code_review.git.exceptions import (
    GitError,
    DiffCommandError,
    EmptyDiffError,
)

# Runner utilities
from llm_code_review.git.runner import _run_git_command

# Branch utilities
from llm_code_review.git.branch import get_branch

# Diff utilities
from llm_code_review.git.diff import (
    PATH_SEPARATOR,
    DiffSource,
    GitDiffSource,
    build_diff_arguments,
    has_unified_context,
    is_unified_context_flag,
    split_path_separator,
)


__all__ = [
    # Exceptions
    "GitError",
    "DiffCommandError",
    "EmptyDiffError",
    # Runner
    "_run_git_command",
    # Branch
    "get_branch",
    # Diff
    "PATH_SEPARATOR",
    "DiffSource",
    "GitDiffSource",
    "build_diff_arguments",
    "has_unified_context",
    "is_unified_context_flag",
    "split_path_separator",
]
