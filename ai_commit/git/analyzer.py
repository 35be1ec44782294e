"""Git Analyzer - Extract staged changes from git."""

import subprocess

# Lines of unchanged code shown around each hunk, so the model can infer intent
DIFF_CONTEXT_LINES = 5


class GitError(Exception):
    """Raised when git operations fail."""
    pass


class NothingStagedError(GitError):
    """Raised when there are no staged changes to describe."""
    pass


class GitAnalyzer:
    """Reads the staged diff of the current working tree."""

    def __init__(self):
        self._verify_in_work_tree()

    def _run_git(self, *args: str) -> str:
        """Run a git command and return stdout."""
        try:
            result = subprocess.run(
                ['git', *args],
                capture_output=True,
                text=True,
                check=True,
                encoding='utf-8',
                errors='replace'
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            raise GitError(f"Git command failed: git {' '.join(args)}\n{(e.stderr or '').strip()}")
        except FileNotFoundError:
            raise GitError("Git is not installed or not in PATH")

    def _verify_in_work_tree(self) -> None:
        """Fail fast if we're not inside a git working tree."""
        output = self._run_git('rev-parse', '--is-inside-work-tree')
        if output.strip() != 'true':
            raise GitError("Not inside a git work tree")

    def get_staged_diff(self) -> str:
        """Return the staged changes as a unified patch."""
        diff = self._run_git('diff', '--staged', '--patch', f'--unified={DIFF_CONTEXT_LINES}')
        if not diff:
            raise NothingStagedError("No staged changes to commit. Run 'git add' first.")
        return diff
