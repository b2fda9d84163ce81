"""Git branch utilities.

Contains:
- get_branch: Get the current branch name
"""

from llm_code_review.git.runner import _run_git_command
from llm_code_review.git.exceptions import GitError


def get_branch() -> str:
    """Get the current branch name.

    Returns:
        The current branch name, or 'HEAD' if detached or outside a repository.
    """
    try:
        branch = _run_git_command(["branch", "--show-current"])
    except GitError:
        return "HEAD"
    if not branch:
        # Detached HEAD state
        return "HEAD"
    return branch
