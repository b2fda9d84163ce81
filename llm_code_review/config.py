"""Fixed settings for llm_code_review.

There is no configuration file: everything a run can change is a flag.
"""

# Default number of unified context lines (git itself defaults to 3)
DEFAULT_UNIFIED_CONTEXT = 3

# Claude's limit is 100k, this keeps a safe margin
MAX_TOKENS = 50_000

# Rough approximation, there is no tokenizer involved
CHARS_PER_TOKEN = 4

# Branch assumed as review target when naming output files
DEFAULT_MAIN_BRANCH = "main"
