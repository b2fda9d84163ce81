"""Prompt text for code review.

This package contains:
- system: The default reviewer system prompt
- examples: Usage examples appended to the help output
"""

from llm_code_review.prompts.system import DEFAULT_SYSTEM_PROMPT
from llm_code_review.prompts.examples import REVIEW_EXAMPLES


__all__ = [
    "DEFAULT_SYSTEM_PROMPT",
    "REVIEW_EXAMPLES",
]
