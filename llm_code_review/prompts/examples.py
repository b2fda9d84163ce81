"""Usage examples shown after the --help option list."""

# Each paragraph starts with \b so click prints it without rewrapping
REVIEW_EXAMPLES = """\b
Review Examples:
  # Review unstaged changes
  llm-code-review

\b
  # Review with additional context
  llm-code-review --context "Focus your review on possible authentication bypasses"

\b
  # Review with context from a file
  llm-code-review --context "$(cat PR_DESCRIPTION.md)"

\b
  # Set system prompt to be something other than the default
  llm-code-review --system-prompt "$(cat .github/copilot-instructions.md)"
  llm-code-review --system-prompt "Review this code. Talk like a pirate."

\b
  # Review staged changes
  llm-code-review --cached

\b
  # Review changes between HEAD and main
  llm-code-review main

\b
  # Review changes between two branches
  llm-code-review main feature-branch
  llm-code-review main..feature-branch

\b
  # Review only changes since branch diverged from main
  llm-code-review main...feature-branch

\b
  # Review a remote branch
  llm-code-review origin/main..origin/feature-branch

\b
  # Limit review to specific files
  llm-code-review main -- src/components/

\b
  # Adjust context lines
  llm-code-review -U5 main

\b
  # Write the prompt to a generated file name
  llm-code-review main..feature-branch -f

\b
Dot Notation:
  - Two dots (A..B): Direct comparison between A and B
  - Three dots (A...B): Compare common ancestor of A and B with B"""
