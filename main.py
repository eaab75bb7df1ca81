"""CLI entry point -- a terminal rendering of the search screen."""

import argparse
import asyncio
import sys

from hacker_stories.state.controller import SearchController, SearchView
from hacker_stories.storage import get_storage
from hacker_stories.storage.factory import BACKENDS
from hacker_stories.utils.config import settings
from hacker_stories.utils.logger import get_logger, set_level

log = get_logger(__name__)

HELP = """Type text to edit the query, then:
  /submit       search for the current query
  /dismiss ID   remove a story from the list
  /show         print the list again
  /quit         exit"""


def render(view: SearchView) -> None:
    """Print the list (or the loading / error line) for *view*."""
    print("\nMy Hacker Stories")
    print(f"Search: {view.draft_query}")
    if view.is_error:
        print("Something went wrong ...")
    if view.is_loading:
        print("Loading ...")
        return
    if not view.visible_items:
        print("(no stories)")
        return
    for item in view.visible_items:
        print(f"- [{item.id}] {item.title}")
        print(f"    {item.url or '(no url)'}")
        print(f"    by {item.author} | {item.comment_count} comments | {item.score} points")
    print()


def _status_line(view: SearchView) -> None:
    if view.is_loading:
        print("Loading ...")
    elif view.is_error:
        print("Something went wrong ...")


def dismiss(controller: SearchController, item_id: str) -> bool:
    """Dismiss the visible story whose id renders as *item_id*."""
    for item in controller.current_view().visible_items:
        if str(item.id) == item_id:
            controller.on_dismiss(item)
            return True
    return False


async def run_query(query: str, controller: SearchController) -> None:
    """Search once for *query* and print the result list."""
    controller.on_draft_change(query)
    controller.on_submit()
    await controller.settle()
    render(controller.current_view())


async def interactive_mode(controller: SearchController) -> None:
    """REPL loop; fetches keep running while waiting for input."""
    print("My Hacker Stories  (type /quit to stop, /help for commands)\n")
    controller.subscribe(_status_line)
    await controller.settle()
    render(controller.current_view())
    while True:
        try:
            line = await asyncio.to_thread(input, "> ")
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye.")
            break
        line = line.strip()
        if line in ("/quit", "/exit", "/q"):
            print("Goodbye.")
            break
        if line == "/help":
            print(HELP)
        elif line == "/submit":
            if not controller.current_view().can_submit:
                print("Type a query first.")
                continue
            controller.on_submit()
            await controller.settle()
            render(controller.current_view())
        elif line.startswith("/dismiss"):
            _, _, item_id = line.partition(" ")
            if not dismiss(controller, item_id.strip()):
                print(f"No visible story with id {item_id.strip()!r}")
                continue
            render(controller.current_view())
        elif line == "/show":
            render(controller.current_view())
        elif line.startswith("/"):
            print(f"Unknown command {line!r}\n{HELP}")
        else:
            controller.on_draft_change(line)
            render(controller.current_view())


async def _amain(args: argparse.Namespace) -> None:
    storage = get_storage(settings, backend=args.storage)
    async with SearchController(storage) as controller:
        if args.interactive:
            await interactive_mode(controller)
        else:
            await controller.settle()
            await run_query(args.query, controller)


def main() -> None:
    parser = argparse.ArgumentParser(description="Search Hacker News stories")
    parser.add_argument("query", nargs="?", help="Single query to run")
    parser.add_argument("--interactive", "-i", action="store_true",
                        help="Start interactive REPL mode")
    parser.add_argument("--storage", choices=BACKENDS,
                        help="Where the last query is persisted")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable DEBUG logging")
    args = parser.parse_args()

    if args.verbose:
        set_level("DEBUG")

    if not args.interactive and not args.query:
        parser.print_help()
        sys.exit(1)

    asyncio.run(_amain(args))


if __name__ == "__main__":
    main()
