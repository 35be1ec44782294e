"""Git Operations Package"""

from ai_commit.git.analyzer import GitAnalyzer, GitError, NothingStagedError, DIFF_CONTEXT_LINES

__all__ = [
    "GitAnalyzer",
    "GitError",
    "NothingStagedError",
    "DIFF_CONTEXT_LINES",
]
