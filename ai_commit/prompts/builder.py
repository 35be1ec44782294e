"""Prompt Builder - Construct the Gemini prompt for commit message generation."""

from dataclasses import dataclass

# Fence placed on the line before and the line after the diff
DIFF_MARKER = r"\\\ diff"

# Wording is tuned against the model; edit with care.
# Two substitution points: {hint} (may be empty) and {diff}.
PROMPT_TEMPLATE = r"""You are an AI assistant specialized in generating concise, single-line Conventional Commit messages from git diffs.
Your **sole task** is to produce a commit message.
The **primary and strongly preferred output** is a single line adhering to this exact format:
<emoji> <type>(<scope>): <short description>
e.g., 🐛 fix(parser): Correct off-by-one error in tokenization

**Body and Footer (AVOID unless absolutely CRITICAL):**
*   Only include a body or footer if the changes are exceptionally complex AND a single subject line is **demonstrably insufficient** to convey a **vital aspect** (e.g., a significant BREAKING CHANGE that cannot be summarized or hinted at, or an essential issue link).
*   **Your default behavior must be to summarize everything into the single subject line.**
*   If unavoidable, separate the body/footer with blank lines as per the specification.

Available types and their emojis (choose one for the subject line):
- feat: ✨ (A new feature)
- fix: 🐛 (A bug fix)
- docs: 📚 (Documentation only changes)
- style: 💎 (Changes that do not affect the meaning of the code)
- refactor: ♻️ (Code change that neither fixes a bug nor adds a feature)
- perf: ⚡️ (Code change that improves performance)
- test: ✅ (Adding or correcting tests)
- build: 📦 (Changes to build system or external dependencies)
- ci: ⚙️ (Changes to CI configuration)
- chore: 🧹 (Other changes not modifying src or test files)
- revert: ⏪ (Reverts a previous commit)

Guidelines for the **single subject line**:
1.  **Summarize the Core Change**: Identify the primary purpose/goal of the entire diff.
2.  **Imperative Mood**: Start with a verb (e.g., 'Add', 'Fix', 'Update', 'Refactor').
3.  **Conciseness**: Aim for 50-72 characters. Be brief but informative.
4.  **No Period**: Do not end the subject line with a period.
5.  **Scope (Optional)**: If applicable, a noun describing the affected area (e.g., 'api', 'ui', 'auth').
6.  **Emoji & Type**: Select the most fitting type and its emoji.
7.  **Focus**: Prioritize the overall *intent* and *impact*, not granular file-by-file details. Distill the essence of the changes.{hint}
Here is the git diff of the changes:
\\\ diff
{diff}
\\\ diff
Based ONLY on the diff provided, generate the commit message.
**Your response should be ONLY the commit message itself, with NO additional text, explanation, or markdown formatting surrounding it.**
**Strive for a single line. Every time.**"""

HINT_TEMPLATE = """
User-provided hint/context for this commit: {hint}
Please take this hint into account when generating the commit message.
"""


@dataclass
class PromptConfig:
    """User-provided context that shapes the prompt."""
    hint: str | None = None


class PromptBuilder:
    """Fills PROMPT_TEMPLATE with the staged diff and an optional hint."""

    def build(self, diff: str, config: PromptConfig | None = None) -> str:
        config = config or PromptConfig()
        return PROMPT_TEMPLATE.format(
            hint=self._build_hint_section(config.hint),
            diff=diff,
        )

    def _build_hint_section(self, hint: str | None) -> str:
        if not hint:
            return ""
        return HINT_TEMPLATE.format(hint=hint)
