"""
AI Commit

Conventional commit messages from staged git changes, written by Gemini.
"""

__version__ = "1.0.0"

# Commit types and the emoji each one is rendered with.
# Must stay in sync with the list in prompts/builder.py PROMPT_TEMPLATE
COMMIT_TYPES = {
    'feat': '✨',
    'fix': '🐛',
    'docs': '📚',
    'style': '💎',
    'refactor': '♻️',
    'perf': '⚡️',
    'test': '✅',
    'build': '📦',
    'ci': '⚙️',
    'chore': '🧹',
    'revert': '⏪',
}
