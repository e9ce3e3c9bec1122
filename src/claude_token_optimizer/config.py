"""Configuration constants for the documentation scaffolder.

Everything the scaffolder creates is named here explicitly: the directory
tree, the project-root markers, the optional template copies, and the
static figures printed in the final summary.
"""

# ---------------------------------------------------------------------------
# Project root detection
# ---------------------------------------------------------------------------

# A directory counts as a project root when any of these exist.
PROJECT_MARKER_DIRS = (".git",)

PROJECT_MARKER_FILES = (
    "package.json",
    "requirements.txt",
    "Gemfile",
    "pyproject.toml",
    "setup.py",
    "go.mod",
    "Cargo.toml",
    "composer.json",
    "pom.xml",
)


# ---------------------------------------------------------------------------
# Directory plan (created in order, idempotent)
# ---------------------------------------------------------------------------

DIRECTORY_PLAN = (
    ".claude/completions",
    ".claude/sessions/active",
    ".claude/sessions/archive",
    ".claude/templates",
    "docs/learnings",
    "docs/archive",
)


# ---------------------------------------------------------------------------
# Optional template copies
# ---------------------------------------------------------------------------

# Relative to the directory the scaffolder runs in.
TEMPLATE_SOURCE_DIR = "../claude-token-optimizer/templates"

# (file name inside TEMPLATE_SOURCE_DIR, destination relative to the project root)
OPTIONAL_TEMPLATE_COPIES = (
    ("completion-template.md", ".claude/templates/completion-template.md"),
    ("maintenance-guide.md", ".claude/DOCUMENTATION_MAINTENANCE.md"),
)


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------

PROMPT_PROJECT_TYPE = "Project Type (e.g., Express, Next.js, Django)"
PROMPT_TECH_STACK = "Tech Stack (e.g., Express, PostgreSQL, Prisma)"
PROMPT_MAIN_FEATURES = "Main Features (brief description)"
PROMPT_CONTINUE = "Continue anyway? (y/n)"


# ---------------------------------------------------------------------------
# Summary output
# ---------------------------------------------------------------------------

DATE_FORMAT = "%Y-%m-%d"

DOCS_URL = "https://github.com/nadimtuhin/claude-token-optimizer"

# Static figures for the documentation convention, not measured per project.
TOKEN_SAVINGS = (
    "Session start: ~800 tokens (vs ~8,000 before)",
    "Overall: ~1,300 tokens (vs ~11,000 before)",
    "Savings: 88% reduction ⚡",
)

NEXT_STEPS = (
    ("Customize .claude/COMMON_MISTAKES.md", "Add your top 5 critical mistakes"),
    ("Update .claude/QUICK_START.md", "Add your common commands"),
    ("Fill in .claude/ARCHITECTURE_MAP.md", "Document your project structure"),
    ("Create topic files in docs/learnings/", "Split knowledge by topic (~500 tokens each)"),
    (
        "Start Claude Code and verify:",
        "- Loads only 4 files at start (~800 tokens)\n- Historical files cost 0 tokens",
    ),
)


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

# When set to an absolute (or ~) path, every progress line is also appended
# to that file. Relative paths are ignored.
LOG_FILE_ENV = "CLAUDE_TOKEN_OPTIMIZER_LOG"
