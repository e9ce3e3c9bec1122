"""Static .claudeignore content."""

# Globs that must never be auto-loaded, each a standalone line in CLAUDEIGNORE.
NEVER_AUTO_LOAD = (
    ".claude/completions/**",
    ".claude/sessions/**",
    "docs/archive/**",
)

CLAUDEIGNORE = """\
# Task completion documents (load only when explicitly requested)
.claude/completions/**

# Session files (load only when explicitly requested)
.claude/sessions/**

# Archived documentation (load only when explicitly requested)
docs/archive/**

# Node modules and dependencies
node_modules/**
dist/**
build/**
.next/**

# Git
.git/**

# Environment
.env
.env.*
!.env.example

# Logs
*.log
logs/**

# IDE
.vscode/**
.idea/**

# OS
.DS_Store
"""
