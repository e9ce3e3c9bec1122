"""Scaffold the token-optimized documentation tree into a project directory.

The whole run is linear: check the directory looks like a project root
(asking before continuing if it doesn't), collect three answers, create the
directory plan, write every file in FILE_PLAN, copy the optional templates
when they are available, then print a summary.

The working directory, the prompt functions and the date are passed in so
the run can be driven from tests without a terminal.
"""

import os
import shutil
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date

from claude_token_optimizer.config import (
    DIRECTORY_PLAN,
    DOCS_URL,
    NEXT_STEPS,
    OPTIONAL_TEMPLATE_COPIES,
    PROJECT_MARKER_DIRS,
    PROJECT_MARKER_FILES,
    PROMPT_CONTINUE,
    PROMPT_MAIN_FEATURES,
    PROMPT_PROJECT_TYPE,
    PROMPT_TECH_STACK,
    TEMPLATE_SOURCE_DIR,
    TOKEN_SAVINGS,
)
from claude_token_optimizer.templates import (
    ARCHITECTURE_MAP_TEMPLATE,
    ARCHIVE_README_TEMPLATE,
    CLAUDE_MD_TEMPLATE,
    CLAUDEIGNORE,
    COMMON_MISTAKES_TEMPLATE,
    COMPLETIONS_README_TEMPLATE,
    DOCS_INDEX_TEMPLATE,
    LEARNINGS_INDEX_TEMPLATE,
    QUICK_REFERENCE_TEMPLATE,
    QUICK_START_TEMPLATE,
    SESSIONS_README_TEMPLATE,
)
from claude_token_optimizer.utils import console, format_date, log, to_native_path, write_text_file


@dataclass(frozen=True)
class OperatorInput:
    """The three free-text answers collected at the start of a run."""

    project_type: str
    tech_stack: str
    main_features: str


@dataclass
class CopyResult:
    """Outcome of the best-effort template copy. Destinations are relative paths."""

    copied: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    source_missing: bool = False


RenderFunc = Callable[[OperatorInput, str], str]


# ============================================
# File plan
# ============================================


def _render_guide(inputs: OperatorInput, last_updated: str) -> str:
    return CLAUDE_MD_TEMPLATE.format(
        project_type=inputs.project_type,
        tech_stack=inputs.tech_stack,
        main_features=inputs.main_features,
        last_updated=last_updated,
        docs_url=DOCS_URL,
    )


def _static(content: str) -> RenderFunc:
    """Render function that ignores its arguments and returns content unchanged."""
    def render(inputs: OperatorInput, last_updated: str) -> str:
        return content
    return render


def _dated(template: str) -> RenderFunc:
    """Render function that only fills in the {last_updated} stamp."""
    def render(inputs: OperatorInput, last_updated: str) -> str:
        return template.format(last_updated=last_updated)
    return render


# Relative path -> render function. Written in this order.
FILE_PLAN: dict[str, RenderFunc] = {
    ".claudeignore": _static(CLAUDEIGNORE),
    "CLAUDE.md": _render_guide,
    ".claude/COMMON_MISTAKES.md": _dated(COMMON_MISTAKES_TEMPLATE),
    ".claude/QUICK_START.md": _dated(QUICK_START_TEMPLATE),
    ".claude/ARCHITECTURE_MAP.md": _dated(ARCHITECTURE_MAP_TEMPLATE),
    ".claude/LEARNINGS_INDEX.md": _dated(LEARNINGS_INDEX_TEMPLATE),
    "docs/INDEX.md": _dated(DOCS_INDEX_TEMPLATE),
    "docs/QUICK_REFERENCE.md": _dated(QUICK_REFERENCE_TEMPLATE),
    "docs/archive/README.md": _dated(ARCHIVE_README_TEMPLATE),
    ".claude/sessions/README.md": _dated(SESSIONS_README_TEMPLATE),
    ".claude/completions/README.md": _dated(COMPLETIONS_README_TEMPLATE),
}


def render_file_plan(inputs: OperatorInput, today: date) -> dict[str, str]:
    """Render every FILE_PLAN entry. Pure function: returns {relative path: content}."""
    last_updated = format_date(today)
    return {path: render(inputs, last_updated) for path, render in FILE_PLAN.items()}


# ============================================
# Steps
# ============================================


def is_project_root(cwd: str) -> bool:
    """Return True if cwd holds a VCS directory or a known package manifest."""
    for name in PROJECT_MARKER_DIRS:
        if os.path.exists(os.path.join(cwd, name)):
            return True
    return any(os.path.isfile(os.path.join(cwd, name)) for name in PROJECT_MARKER_FILES)


def collect_operator_input(ask: Callable[[str], str]) -> OperatorInput:
    """Ask the three project questions in order. Empty answers are allowed."""
    project_type = ask(PROMPT_PROJECT_TYPE).strip()
    tech_stack = ask(PROMPT_TECH_STACK).strip()
    main_features = ask(PROMPT_MAIN_FEATURES).strip()
    return OperatorInput(project_type, tech_stack, main_features)


def create_directories(cwd: str) -> list[str]:
    """Create every directory in DIRECTORY_PLAN under cwd. Existing directories are fine."""
    created = []
    for relative in DIRECTORY_PLAN:
        path = to_native_path(cwd, relative)
        os.makedirs(path, exist_ok=True)
        created.append(path)
    return created


def write_files(cwd: str, rendered: dict[str, str]) -> list[str]:
    """Write rendered files under cwd, overwriting anything already there.

    Returns the relative paths written, in order. Any OSError propagates;
    files written before the failure are left in place.
    """
    written = []
    for relative, content in rendered.items():
        write_text_file(to_native_path(cwd, relative), content)
        written.append(relative)
    return written


def resolve_template_source(cwd: str, template_source: str | None = None) -> str:
    """Return the absolute template source directory, relative paths taken from cwd."""
    source = template_source or TEMPLATE_SOURCE_DIR
    return os.path.normpath(os.path.join(cwd, source))


def copy_optional_templates(cwd: str, source_dir: str) -> CopyResult:
    """Copy the optional templates from source_dir. Never raises.

    A missing source directory sets source_missing; a file that can't be
    copied (absent or unreadable) is recorded in skipped.
    """
    result = CopyResult()
    if not os.path.isdir(source_dir):
        result.source_missing = True
        return result

    for source_name, destination in OPTIONAL_TEMPLATE_COPIES:
        source_path = os.path.join(source_dir, source_name)
        destination_path = to_native_path(cwd, destination)
        try:
            os.makedirs(os.path.dirname(destination_path), exist_ok=True)
            shutil.copyfile(source_path, destination_path)
        except OSError:
            result.skipped.append(destination)
            continue
        result.copied.append(destination)
    return result


# ============================================
# Output
# ============================================


def print_banner() -> None:
    console.print()
    console.print("╔════════════════════════════════════════════════╗", style="bold")
    console.print("║   Claude Token Optimizer - Project Setup       ║", style="bold")
    console.print("║   🚀 90% Token Savings in 5 Minutes            ║", style="bold")
    console.print("╚════════════════════════════════════════════════╝", style="bold")
    console.print()


def _report_copy_result(result: CopyResult) -> None:
    if result.source_missing:
        log("⚠️  Templates not found - download from repository", style="yellow")
        return
    log("📝 Copying templates...", style="green")
    for destination in result.copied:
        log(f"   ✓ Copied {destination}")
    for destination in result.skipped:
        log(f"   - Skipped {destination} (not available)", style="dim")


def print_summary() -> None:
    """Print the created structure, savings figures and next steps."""
    divider = "━" * 46
    console.print()
    log("✅ Setup Complete!", style="bold green")
    console.print()
    console.print(divider)
    console.print()
    console.print("📁 Created structure:")
    console.print("   ✓ .claude/ directory with documentation")
    console.print("   ✓ docs/ directory with navigation")
    console.print("   ✓ .claudeignore for token optimization")
    console.print("   ✓ CLAUDE.md main guide")
    console.print()
    console.print("📊 Token Optimization:")
    for line in TOKEN_SAVINGS:
        console.print(f"   • {line}")
    console.print()
    console.print("📝 Next Steps:")
    console.print()
    for number, (step, detail) in enumerate(NEXT_STEPS, start=1):
        console.print(f"   {number}. {step}")
        for detail_line in detail.splitlines():
            console.print(f"      {detail_line}")
        console.print()
    console.print(divider)
    console.print()
    console.print("📚 Documentation:", style="blue")
    console.print(f"   {DOCS_URL}")
    console.print()
    console.print("🎉 Ready to save 90% on tokens!", style="green")
    console.print()


# ============================================
# Run
# ============================================


def run_init(
    cwd: str,
    ask: Callable[[str], str],
    confirm: Callable[[str], bool],
    today: date | None = None,
    template_source: str | None = None,
) -> int:
    """Scaffold the documentation tree into cwd. Returns the process exit code.

    cwd: absolute path of the project root.
    ask / confirm: prompt functions returning the operator's answer.
    today: date stamped into generated files (defaults to today).
    template_source: optional template directory, relative to cwd or absolute.

    Returns 1 if the operator declines to continue outside a project root,
    before anything is written. Filesystem errors propagate.
    """
    print_banner()

    if not is_project_root(cwd):
        log("⚠️  Warning: This doesn't look like a project root directory", style="yellow")
        if not confirm(PROMPT_CONTINUE):
            log("❌ Setup cancelled", style="red")
            return 1

    log("📋 Project Information", style="blue")
    console.print()
    inputs = collect_operator_input(ask)
    console.print()

    log("📁 Creating directory structure...", style="green")
    create_directories(cwd)
    log("   ✓ Created .claude/ directories")
    log("   ✓ Created docs/ directories")

    log("📝 Writing documentation files...", style="green")
    rendered = render_file_plan(inputs, today or date.today())
    for relative in write_files(cwd, rendered):
        log(f"   ✓ Created {relative}")

    result = copy_optional_templates(cwd, resolve_template_source(cwd, template_source))
    _report_copy_result(result)

    print_summary()
    return 0
