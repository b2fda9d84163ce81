"""Invocation options for a single review run."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from llm_code_review.config import DEFAULT_UNIFIED_CONTEXT
from llm_code_review.prompt import OutputFormat


class InvocationOptions(BaseModel):
    """Everything the command line asked for, built once and never mutated.

    Attributes:
        unified_context: Context lines requested from git diff.
        system_prompt: Replacement for the default system prompt.
        additional_context: Extra text appended under "Additional Context".
        output_format: Requested markup for the review.
        output_file: None to print, "" to generate a file name, else a file name.
        passthrough_args: Arguments forwarded verbatim to git diff.
        force_reduced: Always take the context reduction path.
        verbose: Log at INFO level.
        debug: Log at TRACE level.
    """

    model_config = ConfigDict(frozen=True)

    unified_context: int = Field(default=DEFAULT_UNIFIED_CONTEXT, ge=0)
    system_prompt: Optional[str] = None
    additional_context: Optional[str] = None
    output_format: Optional[OutputFormat] = None
    output_file: Optional[str] = None
    passthrough_args: tuple[str, ...] = ()
    force_reduced: bool = False
    verbose: bool = False
    debug: bool = False

    @property
    def writes_file(self) -> bool:
        return self.output_file is not None
