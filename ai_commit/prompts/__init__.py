"""Prompt Construction Package"""

from ai_commit.prompts.builder import PromptBuilder, PromptConfig, PROMPT_TEMPLATE, HINT_TEMPLATE, DIFF_MARKER

__all__ = ["PromptBuilder", "PromptConfig", "PROMPT_TEMPLATE", "HINT_TEMPLATE", "DIFF_MARKER"]
