"""Tests for the command-line entry point."""

from typer.testing import CliRunner

from claude_token_optimizer import cli
from claude_token_optimizer.cli import app
from claude_token_optimizer.version import PACKAGE_VERSION

runner = CliRunner()

NEXTJS_INPUT = "Next.js\nNext.js, Tailwind, Prisma\ne-commerce storefront\n"


def test_scaffolds_project_from_prompts(tmp_path, monkeypatch):
    """Answers typed at the prompts end up in the scaffolded files."""
    (tmp_path / "package.json").write_text("{}\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, [], input=NEXTJS_INPUT)

    assert result.exit_code == 0, result.output
    guide = (tmp_path / "CLAUDE.md").read_text(encoding="utf-8")
    assert "Next.js application for e-commerce storefront" in guide
    assert "Tech Stack: Next.js, Tailwind, Prisma" in guide
    assert ".claude/completions/**" in (tmp_path / ".claudeignore").read_text(encoding="utf-8").splitlines()
    assert "Setup Complete!" in result.output


def test_declining_confirmation_exits_nonzero(tmp_path, monkeypatch):
    """Answering no outside a project exits 1 and writes nothing."""
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, [], input="n\n")

    assert result.exit_code == 1
    assert "Setup cancelled" in result.output
    assert list(tmp_path.iterdir()) == []


def test_confirming_continues_outside_project(tmp_path, monkeypatch):
    """Answering yes outside a project goes on to scaffold."""
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, [], input="y\n" + NEXTJS_INPUT)

    assert result.exit_code == 0, result.output
    assert (tmp_path / "docs" / "INDEX.md").is_file()


def test_blank_answers_are_accepted(tmp_path, monkeypatch):
    """Pressing enter at every prompt is accepted."""
    (tmp_path / ".git").mkdir()
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, [], input="\n\n\n")

    assert result.exit_code == 0, result.output
    assert " application for \n" in (tmp_path / "CLAUDE.md").read_text(encoding="utf-8")


def test_filesystem_error_exits_nonzero(tmp_path, monkeypatch):
    """A filesystem error is reported and exits 1."""
    def failing_run_init(cwd, ask, confirm):
        raise PermissionError("Permission denied: 'CLAUDE.md'")

    monkeypatch.setattr(cli, "run_init", failing_run_init)
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, [])

    assert result.exit_code == 1
    assert "ERROR: Permission denied" in result.output


def test_version_flag(tmp_path, monkeypatch):
    """--version prints the version and writes nothing."""
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert PACKAGE_VERSION in result.output
    assert list(tmp_path.iterdir()) == []
