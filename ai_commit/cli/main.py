"""CLI Main Entry Point"""

import sys

from ai_commit.config import Config, ConfigError, load_config, require_api_key
from ai_commit.git import GitAnalyzer, GitError
from ai_commit.llm import GeminiClient, LLMClient, LLMError, LLMResponse
from ai_commit.output import dim, print_error, Spinner
from ai_commit.prompts import PromptBuilder, PromptConfig

from ai_commit.cli.args import parse_args, join_hint


def _collect_staged_diff() -> str:
    """Confirm we're in a work tree, then read the staged patch."""
    analyzer = GitAnalyzer()
    return analyzer.get_staged_diff()


def _generate_message(client: LLMClient, prompt: str, config: Config) -> LLMResponse:
    """Run generation with the spinner on stderr and return response.

    The spinner has stopped and erased its line by the time this returns
    or raises.
    """
    if not config.spinner:
        return client.generate(prompt)
    with Spinner(f"🤖 {client.name}"):
        return client.generate(prompt)


def _generate_commit_flow(hint: str) -> str:
    """Validate, collect the diff, build the prompt and ask Gemini.

    Returns:
        str: The commit message exactly as the model returned it
    """
    # Credential first: nothing touches git without it
    api_key = require_api_key()
    config = load_config()

    diff = _collect_staged_diff()
    prompt = PromptBuilder().build(diff, PromptConfig(hint=hint))

    client = GeminiClient(api_key=api_key, timeout=config.timeout)
    response = _generate_message(client, prompt, config)
    return response.content


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)

    try:
        message = _generate_commit_flow(join_hint(args.hint))
    except (ConfigError, GitError, LLMError) as e:
        print_error(str(e))
        return 1
    except KeyboardInterrupt:
        print(dim("Cancelled."), file=sys.stderr)
        return 130

    # stdout carries the message only, so it can be piped into git commit
    print(message)
    return 0
