"""Review prompt assembly.

Contains:
- OutputFormat: Formats the review may be requested in
- build_review_prompt: Assemble system prompt, context and diff
- format_system_prompt_display: Text shown by --show-system-prompt
"""

from enum import Enum
from typing import Optional

from llm_code_review.prompts import DEFAULT_SYSTEM_PROMPT


class OutputFormat(Enum):
    """Markup formats the review can be requested in."""

    MARKDOWN = "markdown"
    ASCIIDOC = "asciidoc"
    MEDIAWIKI = "mediawiki"

    @property
    def display_name(self) -> str:
        return _FORMAT_DISPLAY_NAMES[self]


_FORMAT_DISPLAY_NAMES = {
    OutputFormat.MARKDOWN: "Markdown",
    OutputFormat.ASCIIDOC: "AsciiDoc",
    OutputFormat.MEDIAWIKI: "MediaWiki",
}

ADDITIONAL_CONTEXT_HEADING = "## Additional Context"
PR_CODE_HEADING = "# PR Code"


def build_review_prompt(
    diff_text: str,
    system_prompt: Optional[str] = None,
    additional_context: Optional[str] = None,
    output_format: Optional[OutputFormat] = None,
) -> str:
    """Assemble the final review prompt.

    The blocks are, in order: the system prompt (or the default one), an
    output format request, the "Additional Context" section and the diff
    under the "PR Code" heading. Optional blocks are left out entirely when
    not supplied.

    Args:
        diff_text: Diff to review, included verbatim.
        system_prompt: Replacement for the default system prompt.
        additional_context: Extra text for the reviewer.
        output_format: Requested markup for the review.

    Returns:
        The assembled prompt.
    """
    prompt = system_prompt if system_prompt else DEFAULT_SYSTEM_PROMPT

    if output_format is not None:
        prompt += f"\n\nOutput the review in {output_format.display_name} format."

    if additional_context:
        prompt += f"\n\n{ADDITIONAL_CONTEXT_HEADING}\n{additional_context}"

    return f"{prompt}\n\n{PR_CODE_HEADING}\n\n{diff_text}"


def format_system_prompt_display(system_prompt: str = DEFAULT_SYSTEM_PROMPT) -> str:
    """Render the system prompt with every line indented by two spaces."""
    indented = "\n".join(f"  {line}" for line in system_prompt.split("\n"))
    return f"Default System Prompt:\n\n{indented}"
