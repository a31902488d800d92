"""
Interactive command-line session.

One process hosts one session: a single ConversationState lives for as long
as the prompt loop runs. Missing credentials abort before the loop starts
with exit status 1.

Run locally:
    financial-assistant
    # or: python -m src.infrastructure.entrypoints.cli
"""

import asyncio
import logging
import sys
from typing import Callable

from src.application.agent.conversation import ConversationState
from src.application.agent.prompts import APOLOGY
from src.application.use_cases.run_agent import RunAgentUseCase
from src.infrastructure.config.settings import MissingCredentialError, Settings
from src.infrastructure.entrypoints.composition import build_run_use_case
from src.infrastructure.observability.logging_setup import configure_logging

logger = logging.getLogger(__name__)

PROMPT = "\nWhat would you like to know? "
BANNER = (
    "\n===== Financial Research Assistant =====\n"
    "Ask about stock prices, news, or company information.\n"
    "Type 'exit' to quit.\n"
    "======================================="
)
GOODBYE = "Thank you for using the Financial Research Assistant. Goodbye!"


async def run_session(
    use_case: RunAgentUseCase,
    conversation: ConversationState,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """Prompt for queries until 'exit' or end of input."""
    write(BANNER)
    while True:
        try:
            query = await asyncio.to_thread(read_line, PROMPT)
        except EOFError:
            write(GOODBYE)
            return

        if query.strip().lower() == "exit":
            write(GOODBYE)
            return

        write("\nResearching your question...")
        try:
            answer = await use_case.execute(query, conversation)
        except Exception:
            logger.exception("Error processing query")
            write(f"\n{APOLOGY}")
            continue
        write(f"\nAnswer: {answer}")


def main() -> None:
    try:
        settings = Settings.from_env()
    except MissingCredentialError as exc:
        for name in exc.missing:
            print(f"Error: {name} not found in environment variables", file=sys.stderr)
        sys.exit(1)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    configure_logging(settings.log_level)
    print("Initializing Financial Research Assistant...")

    use_case = build_run_use_case(settings)
    conversation = ConversationState(max_exchanges=settings.history_exchanges)
    try:
        asyncio.run(run_session(use_case, conversation))
    except KeyboardInterrupt:
        print(f"\n{GOODBYE}")
    finally:
        use_case.flush()


if __name__ == "__main__":
    main()
