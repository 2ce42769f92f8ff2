"""CLI entry point for the knowledge engine."""

import argparse
import json
import sys
from typing import List, Optional

from .engine import KnowledgeEngine, create_engine
from .models.context import ConversationContext
from .models.entry import Role
from .rag.corpus import CorpusError
from .utils.config import load_config
from .utils.logger import setup_logger, get_logger

ROLE_CHOICES = [role.value for role in Role]


def ask(engine: KnowledgeEngine, query: str, role: str, limit: int, show_matches: bool) -> int:
    """Answer a single query as a first turn."""
    context = ConversationContext(role=role)
    print(engine.generate_response(query, context))

    if show_matches:
        scored = engine.retriever.score_entries(query, role)[:limit]
        print("\nMatches:")
        if not scored:
            print("  (none)")
        for item in scored:
            print(f"  {item.score:6.3f}  {item.entry.id} [{item.entry.category}]")
    return 0


def chat(engine: KnowledgeEngine, role: str) -> int:
    """Interactive conversation that carries topics and history between turns."""
    print(f"Knowledge chat (role: {role})")
    print("Type 'quit' or 'exit' to stop")
    print("-" * 40)

    context = ConversationContext(role=role)

    while True:
        try:
            query = input("\nYou> ").strip()

            if query.lower() in ("quit", "exit", "q"):
                print("Goodbye!")
                break

            if not query:
                continue

            response = engine.compose(query, context)
            print(f"\n{response.text}")

            context.session_history.append(query)
            if response.topic:
                context.previous_topics.append(response.topic)

        except (KeyboardInterrupt, EOFError):
            print("\nGoodbye!")
            break

    return 0


def stats(engine: KnowledgeEngine) -> int:
    """Print knowledge base statistics as JSON."""
    print(json.dumps(engine.statistics().to_dict(), indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="edpsych-kb",
        description="Educational psychology knowledge retrieval engine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  edpsych-kb ask "behaviour management" --role teacher
  edpsych-kb ask "assessment" --role parent --show-matches
  edpsych-kb chat --role student
  edpsych-kb stats
        """
    )

    parser.add_argument(
        "-c", "--config",
        help="Path to config file"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override log level"
    )

    subparsers = parser.add_subparsers(dest="command")

    ask_parser = subparsers.add_parser("ask", help="Answer a single query")
    ask_parser.add_argument("query", help="Query text")
    ask_parser.add_argument("-r", "--role", default="student", help=f"Requester role ({', '.join(ROLE_CHOICES)})")
    ask_parser.add_argument("-n", "--limit", type=int, default=5, help="Matches to list with --show-matches")
    ask_parser.add_argument("--show-matches", action="store_true", help="List scored entries")

    chat_parser = subparsers.add_parser("chat", help="Interactive conversation")
    chat_parser.add_argument("-r", "--role", default="student", help=f"Requester role ({', '.join(ROLE_CHOICES)})")

    subparsers.add_parser("stats", help="Show knowledge base statistics")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    config = load_config(args.config)
    setup_logger(
        level=args.log_level or config.logging.level,
        log_file=config.logging.file,
        force=True
    )
    logger = get_logger(__name__)

    try:
        engine = create_engine(config)
    except CorpusError as e:
        logger.error(str(e))
        return 1

    if args.command == "ask":
        return ask(engine, args.query, args.role, args.limit, args.show_matches)
    if args.command == "chat":
        return chat(engine, args.role)
    return stats(engine)


if __name__ == "__main__":
    sys.exit(main())
