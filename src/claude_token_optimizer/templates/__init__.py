"""Document templates written by the scaffolder.

Each template constant is a format string. Use .format() to interpolate
values before writing. The ignore-list is static text and is written as-is.

Templates are organized by kind: the root guide, the ignore-list, and the
placeholder documents. This __init__ re-exports every constant so callers
can ``from claude_token_optimizer.templates import X``.
"""

from claude_token_optimizer.templates.guide import CLAUDE_MD_TEMPLATE
from claude_token_optimizer.templates.ignore import CLAUDEIGNORE, NEVER_AUTO_LOAD
from claude_token_optimizer.templates.placeholders import (
    ARCHITECTURE_MAP_TEMPLATE,
    ARCHIVE_README_TEMPLATE,
    COMMON_MISTAKES_TEMPLATE,
    COMPLETIONS_README_TEMPLATE,
    DOCS_INDEX_TEMPLATE,
    LEARNINGS_INDEX_TEMPLATE,
    QUICK_REFERENCE_TEMPLATE,
    QUICK_START_TEMPLATE,
    SESSIONS_README_TEMPLATE,
)

__all__ = [
    "ARCHITECTURE_MAP_TEMPLATE",
    "ARCHIVE_README_TEMPLATE",
    "CLAUDEIGNORE",
    "CLAUDE_MD_TEMPLATE",
    "COMMON_MISTAKES_TEMPLATE",
    "COMPLETIONS_README_TEMPLATE",
    "DOCS_INDEX_TEMPLATE",
    "LEARNINGS_INDEX_TEMPLATE",
    "NEVER_AUTO_LOAD",
    "QUICK_REFERENCE_TEMPLATE",
    "QUICK_START_TEMPLATE",
    "SESSIONS_README_TEMPLATE",
]
