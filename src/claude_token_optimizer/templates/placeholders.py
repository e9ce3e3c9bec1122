"""Placeholder documents written into .claude/ and docs/.

Each constant is a format string whose only placeholder is {last_updated}.
"""

COMMON_MISTAKES_TEMPLATE = """\
# Common Mistakes

**⚠️ CRITICAL - Read at session start (2 min saves 2 hours!)**

---

## Top 5 Critical Mistakes

### 1. [Add Your First Critical Mistake]

**Symptom**:
**Check**:
**Fix**:

### 2. [Add Second Mistake]

### 3. [Add Third Mistake]

### 4. [Add Fourth Mistake]

### 5. [Add Fifth Mistake]

---

**Update this file when:**
- Bug took >1 hour to debug
- Error could cause production issue
- Mistake repeated across sessions
- Pattern violates framework conventions

**Last Updated**: {last_updated}
"""

QUICK_START_TEMPLATE = """\
# Quick Start Commands

**Essential commands for this project**

---

## Development

```bash
# Start development server
# Add your commands

# Run tests
# Add your commands

# Build for production
# Add your commands
```

## Database (if applicable)

```bash
# Migrations
# Seed data
```

## Common Workflows

1. **Starting work**:
2. **Running tests**:
3. **Deploying**:

---

**Last Updated**: {last_updated}
"""

ARCHITECTURE_MAP_TEMPLATE = """\
# Architecture Map

**File locations and project structure**

---

## Directory Structure

```
project/
├── [Add your structure]
```

## Key File Locations

- **Configuration**:
- **Main entry**:
- **Tests**:

## Common Patterns

### Pattern 1
### Pattern 2

---

**Last Updated**: {last_updated}
"""

LEARNINGS_INDEX_TEMPLATE = """\
# Learnings Index

**Lightweight index - detailed content in docs/ directory (read as needed)**

---

## Quick References (Always Available - ~800 tokens)

- **Common Mistakes**: `.claude/COMMON_MISTAKES.md` ⚠️ **READ AT SESSION START**
- **Quick Start**: `.claude/QUICK_START.md`
- **Architecture**: `.claude/ARCHITECTURE_MAP.md`
- **Maintenance**: `.claude/DOCUMENTATION_MAINTENANCE.md`

## Learning Topics (Load As Needed)

- `docs/learnings/[topic-1].md`
- `docs/learnings/[topic-2].md`

---

**Last Updated**: {last_updated}
"""

DOCS_INDEX_TEMPLATE = """\
# Documentation Index

**Master navigation with token cost estimates**

---

## Session Start (Essential - ~800 tokens)

Load these files at every session start:
- `CLAUDE.md` (~450 tokens)
- `.claude/COMMON_MISTAKES.md` (~350 tokens)
- `.claude/QUICK_START.md` (~100 tokens)
- `.claude/ARCHITECTURE_MAP.md` (~150 tokens)

## Task-Specific Topics (Load As Needed)

Add your topic files in `docs/learnings/` and list them here with token estimates.

---

**Last Updated**: {last_updated}
"""

QUICK_REFERENCE_TEMPLATE = """\
# Quick Reference

**Fast lookups for common operations**

---

## Session Start Checklist

- [ ] Load COMMON_MISTAKES.md
- [ ] Load QUICK_START.md
- [ ] Load ARCHITECTURE_MAP.md
- [ ] Review current task

## Common Commands

Add your frequently used commands here.

---

**Last Updated**: {last_updated}
"""

ARCHIVE_README_TEMPLATE = """\
# Documentation Archive

This directory contains superseded documentation kept for historical reference.

## Archived Files

(Add archived files here with reason and date)

---

**Note**: These files are kept for reference only. Do not load them in active sessions.

**Last Updated**: {last_updated}
"""

SESSIONS_README_TEMPLATE = """\
# Session Files

Track work progress across sessions.

## Active Sessions

Current session files go in `active/` directory.

## Archive

Completed sessions move to `archive/` directory.

## Never Auto-Load

Session files cost 0 tokens (never auto-loaded via .claudeignore).
Available when explicitly requested.

---

**Last Updated**: {last_updated}
"""

COMPLETIONS_README_TEMPLATE = """\
# Task Completion Documentation

Document completed tasks with zero token cost.

## Usage

Create completion docs as:
`.claude/completions/YYYY-MM-DD-task-name.md`

Use template: `.claude/templates/completion-template.md`

## Never Auto-Load

Completion docs cost 0 tokens (never auto-loaded via .claudeignore).
Available when explicitly requested.

---

**Last Updated**: {last_updated}
"""
