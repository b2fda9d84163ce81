"""LLM code review prompt generator."""

from importlib.metadata import version, PackageNotFoundError

from loguru import logger

try:
    __version__ = version("llm-code-review")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"

# Library use stays quiet; the CLI enables logging explicitly
logger.disable("llm_code_review")
