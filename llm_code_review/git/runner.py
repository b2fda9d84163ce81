"""Git command runner.

Contains:
- _run_git_command: Run a git command and return its output
"""

import subprocess

from loguru import logger

from llm_code_review.git.exceptions import GitError


def _run_git_command(args: list[str]) -> str:
    """Run a git command and return its output.

    Args:
        args: List of arguments to pass to git.

    Returns:
        The stdout of the git command.

    Raises:
        GitError: If the command fails.
    """
    logger.debug("Running command: git {}", " ".join(args))
    try:
        result = subprocess.run(
            ["git"] + args,
            capture_output=True,
            text=True,
            check=True,
        )
        return result.stdout.strip()
    except subprocess.CalledProcessError as e:
        raise GitError(f"Git command failed: git {' '.join(args)}\n{(e.stderr or '').strip()}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")
