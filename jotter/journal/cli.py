"""
Jotter Journal CLI
"""
import argparse
import asyncio
import json
import sys
from typing import Any, Dict, List

from ..db import yield_connection_from_env_ctx
from . import handlers
from .data import JournalEntryResponse
from .errors import JournalError
from .store import DBEntryStore


def entries_as_json_dict(entries: List[JournalEntryResponse]) -> List[Dict[str, Any]]:
    """
    Returns a representation of the given entries as a JSON-serializable list.
    """
    return [entry.model_dump(mode="json", by_alias=True) for entry in entries]


def entries_list_handler(args: argparse.Namespace) -> None:
    """
    Handler for "entries list" subcommand.
    """
    with yield_connection_from_env_ctx() as db_session:
        store = DBEntryStore(db_session)
        response = asyncio.run(handlers.list_entries_handler(store, args.user))
        print(json.dumps(entries_as_json_dict(response.entries)))


def entries_create_handler(args: argparse.Namespace) -> None:
    """
    Handler for "entries create" subcommand.
    """
    with yield_connection_from_env_ctx() as db_session:
        store = DBEntryStore(db_session)
        payload = {"title": args.title, "content": args.content}
        try:
            entry = asyncio.run(
                handlers.create_entry_handler(store, args.user, payload)
            )
        except JournalError as e:
            print(e.message, file=sys.stderr)
            sys.exit(1)
        print(json.dumps(entries_as_json_dict([entry])[0]))


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Administrative actions for Jotter journal entries"
    )
    parser.set_defaults(func=lambda _: parser.print_help())
    subcommands = parser.add_subparsers(description="Jotter commands")

    # Entries module
    parser_entries = subcommands.add_parser("entries", description="Journal entries")
    parser_entries.set_defaults(func=lambda _: parser_entries.print_help())
    subcommands_entries = parser_entries.add_subparsers(
        description="Journal entries commands"
    )
    parser_entries_list = subcommands_entries.add_parser(
        "list", description="List entries of user, newest first"
    )
    parser_entries_list.add_argument("-u", "--user", required=True, help="User ID")
    parser_entries_list.set_defaults(func=entries_list_handler)

    parser_entries_create = subcommands_entries.add_parser(
        "create", description="Create entry on behalf of user"
    )
    parser_entries_create.add_argument("-u", "--user", required=True, help="User ID")
    parser_entries_create.add_argument("-t", "--title", default="", help="Entry title")
    parser_entries_create.add_argument(
        "-c", "--content", default="", help="Entry content"
    )
    parser_entries_create.set_defaults(func=entries_create_handler)

    args = parser.parse_args()
    args.func(args)


if __name__ == "__main__":
    main()
