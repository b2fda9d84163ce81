"""Allow running as `python -m llm_code_review`."""

from llm_code_review.cli import app

if __name__ == "__main__":
    app()
