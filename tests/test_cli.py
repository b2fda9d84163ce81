"""Tests for llm_code_review.cli module."""

from pathlib import Path

from typer.testing import CliRunner

from llm_code_review.cli import app
from llm_code_review.cli.utils import normalize_options
from llm_code_review.git import DiffCommandError
from llm_code_review.prompts import DEFAULT_SYSTEM_PROMPT


runner = CliRunner()


def _use_source(mocker, source):
    mocker.patch("llm_code_review.cli.main.GitDiffSource", return_value=source)
    return source


class TestNormalizeFileFlag:
    """Tests for normalize_options function."""

    def test_bare_flag_at_end(self):
        """Test -f with nothing after it."""
        assert normalize_options(["main", "-f"]) == ["main", "--file="]

    def test_flag_followed_by_option(self):
        """Test -f followed by another flag."""
        assert normalize_options(["-f", "--cached"]) == ["--file=", "--cached"]

    def test_flag_with_name(self):
        """Test -f NAME."""
        assert normalize_options(["--file", "out.md"]) == ["--file", "out.md"]

    def test_value_of_other_flag_is_skipped(self):
        """Test that -f used as a context value is left alone."""
        assert normalize_options(["-c", "-f"]) == ["-c", "-f"]

    def test_equals_form_untouched(self):
        """Test --file=NAME."""
        assert normalize_options(["--file=x.md"]) == ["--file=x.md"]

    def test_unified_abbreviation_expanded(self):
        """Test that --unif=N and --unifie N are spelled out."""
        assert normalize_options(["--unif=5", "main"]) == ["--unified=5", "main"]
        assert normalize_options(["--unifie", "2"]) == ["--unified", "2"]

    def test_abbreviation_as_context_value_untouched(self):
        """Test that a flag value is never rewritten."""
        assert normalize_options(["-c", "--unif=5"]) == ["-c", "--unif=5"]

    def test_other_prefixes_untouched(self):
        """Test that --uni is left for git to judge."""
        assert normalize_options(["--uni=5"]) == ["--uni=5"]


class TestDiffArguments:
    """Tests for arguments forwarded to git diff."""

    def test_default_context_inserted(self, mocker, make_source):
        """Test that -U3 is used without a flag."""
        source = _use_source(mocker, make_source("diff"))

        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert source.calls == [["-U3"]]

    def test_attached_short_form(self, mocker, make_source):
        """Test -U5."""
        source = _use_source(mocker, make_source("diff"))

        result = runner.invoke(app, ["-U5", "main"])

        assert result.exit_code == 0
        assert source.calls == [["-U5", "main"]]

    def test_separate_short_form(self, mocker, make_source):
        """Test -U 7."""
        source = _use_source(mocker, make_source("diff"))

        result = runner.invoke(app, ["--cached", "-U", "7"])

        assert result.exit_code == 0
        assert source.calls == [["-U7", "--cached"]]

    def test_long_form(self, mocker, make_source):
        """Test --unified=0 yields exactly one flag."""
        source = _use_source(mocker, make_source("diff"))

        result = runner.invoke(app, ["--unified=0", "main"])

        assert result.exit_code == 0
        assert source.calls == [["-U0", "main"]]

    def test_abbreviated_long_form(self, mocker, make_source):
        """Test that --unif=5 sets the context instead of adding a second flag."""
        source = _use_source(mocker, make_source("diff"))

        result = runner.invoke(app, ["--unif=5", "main"])

        assert result.exit_code == 0
        assert source.calls == [["-U5", "main"]]

    def test_abbreviated_long_form_separate_value(self, mocker, make_source):
        """Test --unifi 4."""
        source = _use_source(mocker, make_source("diff"))

        result = runner.invoke(app, ["--unifi", "4", "main"])

        assert result.exit_code == 0
        assert source.calls == [["-U4", "main"]]

    def test_passthrough_order_and_separator(self, mocker, make_source):
        """Test that unknown arguments and paths reach git verbatim."""
        source = _use_source(mocker, make_source("diff"))

        result = runner.invoke(
            app, ["main...feature", "--stat", "-w", "--", "src/components/", "-v"]
        )

        assert result.exit_code == 0
        assert source.calls == [
            ["-U3", "main...feature", "--stat", "-w", "--", "src/components/", "-v"]
        ]

    def test_negative_context_is_usage_error(self, mocker, make_source):
        """Test that -U must be non-negative."""
        source = _use_source(mocker, make_source("diff"))

        result = runner.invoke(app, ["-U", "-1"])

        assert result.exit_code == 1
        assert source.calls == []


class TestPromptOutput:
    """Tests for the printed prompt."""

    def test_prints_prompt(self, mocker, make_source):
        """Test the default prompt with a small diff."""
        _use_source(mocker, make_source("0123456789"))

        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert DEFAULT_SYSTEM_PROMPT + "\n\n# PR Code\n\n0123456789" in result.output

    def test_context_and_system_prompt(self, mocker, make_source):
        """Test --context and --system-prompt."""
        _use_source(mocker, make_source("diff"))

        result = runner.invoke(
            app, ["-s", "Talk like a pirate.", "--context", "Focus on auth", "main"]
        )

        assert result.exit_code == 0
        assert (
            "Talk like a pirate.\n\n## Additional Context\nFocus on auth\n\n# PR Code\n\ndiff"
            in result.output
        )

    def test_output_format(self, mocker, make_source):
        """Test -F asciidoc."""
        _use_source(mocker, make_source("diff"))

        result = runner.invoke(app, ["-F", "asciidoc"])

        assert result.exit_code == 0
        assert "Output the review in AsciiDoc format." in result.output

    def test_invalid_output_format(self, mocker, make_source):
        """Test that unknown formats are rejected."""
        source = _use_source(mocker, make_source("diff"))

        result = runner.invoke(app, ["-F", "pdf"])

        assert result.exit_code == 1
        assert source.calls == []

    def test_reduced_context(self, mocker, make_source):
        """Test that an oversized diff is fetched again with less context."""
        source = _use_source(mocker, make_source("x" * 220_000, "small"))

        result = runner.invoke(app, ["main"])

        assert result.exit_code == 0
        assert source.calls[1] == ["-U2", "main"]
        assert result.output.rstrip().endswith("# PR Code\n\nsmall")

    def test_verbose_reports_reduction(self, mocker, make_source):
        """Test that --verbose logs the reduction."""
        _use_source(mocker, make_source("x" * 220_000, "small"))

        result = runner.invoke(app, ["-v", "main"])

        assert result.exit_code == 0
        assert "Reducing context to 2 lines" in result.output


class TestErrors:
    """Tests for fatal errors."""

    def test_missing_context_value(self, mocker, make_source):
        """Test that --context requires a value."""
        source = _use_source(mocker, make_source("diff"))

        result = runner.invoke(app, ["--context"])

        assert result.exit_code == 1
        assert "requires an argument" in result.output
        assert source.calls == []

    def test_missing_system_prompt_value(self, mocker, make_source):
        """Test that -s requires a value."""
        _use_source(mocker, make_source("diff"))

        result = runner.invoke(app, ["-s"])

        assert result.exit_code == 1

    def test_empty_diff(self, mocker, make_source):
        """Test that no changes is fatal."""
        _use_source(mocker, make_source(""))

        result = runner.invoke(app, ["--context", "anything"])

        assert result.exit_code == 1
        assert "No changes found to review." in result.output

    def test_git_failure(self, mocker, make_source):
        """Test that git errors exit with 1."""
        _use_source(mocker, make_source(DiffCommandError("Git diff command failed.")))

        result = runner.invoke(app, ["nope"])

        assert result.exit_code == 1
        assert "Git diff command failed" in result.output

    def test_still_too_large(self, mocker, make_source):
        """Test the size-limit error."""
        _use_source(mocker, make_source("x" * 220_000, "x" * 220_000))

        result = runner.invoke(app, [])

        assert result.exit_code == 1
        assert "too large" in result.output

class TestInformational:
    """Tests for --help and --show-system-prompt."""

    def test_help(self):
        """Test that help shows options and examples."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "--context" in result.output
        assert "Review Examples:" in result.output
        assert "Dot Notation:" in result.output

    def test_short_help(self):
        """Test -h."""
        result = runner.invoke(app, ["-h"])

        assert result.exit_code == 0
        assert "git diff" in result.output

    def test_show_system_prompt(self, mocker, make_source):
        """Test -S prints the indented default prompt without running git."""
        source = _use_source(mocker, make_source("diff"))

        result = runner.invoke(app, ["-S"])

        assert result.exit_code == 0
        assert result.output.startswith("Default System Prompt:\n\n  Please review this PR")
        assert source.calls == []


class TestFixedSettings:
    """Tests for settings that no file can change."""

    def test_config_file_is_ignored(self, mocker, make_source, monkeypatch, temp_dir):
        """Test that a stray YAML file does not move the budget or the default context."""
        config_file = temp_dir / "config.yaml"
        config_file.write_text("unified_context: 10\nmax_tokens: 10\n")
        monkeypatch.setenv("LLM_CODE_REVIEW_CONFIG", str(config_file))
        monkeypatch.setenv("HOME", str(temp_dir))
        source = _use_source(mocker, make_source("x" * 400))

        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert source.calls == [["-U3"]]


class TestFileOutput:
    """Tests for -f/--file."""

    def test_named_file(self, mocker, make_source):
        """Test -f NAME."""
        source = _use_source(mocker, make_source("diff"))

        with runner.isolated_filesystem() as fs:
            result = runner.invoke(app, ["-f", "review.md", "main"])

            assert result.exit_code == 0
            assert "Wrote: review.md" in result.output
            content = (Path(fs) / "review.md").read_text()

        assert content.endswith("# PR Code\n\ndiff\n")
        assert source.calls == [["-U3", "main"]]

    def test_generated_file(self, mocker, make_source):
        """Test bare -f generates a name from branches."""
        source = _use_source(mocker, make_source("diff"))
        mocker.patch("llm_code_review.output.get_branch", return_value="feature")

        with runner.isolated_filesystem():
            result = runner.invoke(app, ["main", "-f"])

        assert result.exit_code == 0
        assert "Wrote: PR Review, feature -> main, " in result.output
        assert source.calls == [["-U3", "main"]]
