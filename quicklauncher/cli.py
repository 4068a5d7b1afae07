import argparse
import json
import logging
import sys
from typing import Any

from quicklauncher.config.settings import settings
from quicklauncher.container import container
from quicklauncher.exceptions import BaseAppError


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="quicklauncher",
        description="Classify and launch files, folders, URLs and shell commands.",
    )
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Pretty print output (tables/JSON) with colors",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log at DEBUG level to stderr"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_classify = sub.add_parser("classify", help="Print the kind of a target")
    p_classify.add_argument("raw", help="Path, URL or command")

    p_open = sub.add_parser("open", help="Open a path/URL or run a command now")
    p_open.add_argument("raw", help="Path, URL or command")

    p_items = sub.add_parser("items", help="Manage the stored item list")
    items_sub = p_items.add_subparsers(dest="items_command", required=True)
    items_sub.add_parser("list", help="List stored items")
    p_add = items_sub.add_parser("add", help="Register an item")
    p_add.add_argument("path", help="Path, URL or command")
    p_add.add_argument("--name", default=None, help="Display label")
    p_add.add_argument(
        "--type",
        default=None,
        choices=["file", "folder", "url", "command"],
        help="Explicit type (classified when omitted)",
    )
    for name, help_text in (
        ("remove", "Remove an item"),
        ("open", "Open or run an item"),
        ("reveal", "Show a file/folder item in the file manager"),
    ):
        p = items_sub.add_parser(name, help=help_text)
        p.add_argument("index", type=int, help="Item index (see 'items list')")
    items_sub.add_parser("clear", help="Remove every item")

    sub.add_parser("serve", help="Run the HTTP API (see quicklauncher-serve)")
    return parser


def _print(data: Any, pretty: bool) -> None:
    if pretty:
        from rich.console import Console

        Console().print_json(data=data)
        return
    print(json.dumps(data, ensure_ascii=False, indent=2))


def _print_items(items: list[dict[str, Any]], pretty: bool) -> None:
    if not pretty:
        _print(items, pretty=False)
        return
    from rich import box
    from rich.console import Console
    from rich.table import Table

    table = Table(box=box.ROUNDED, title=f"Items ({settings.items_file})")
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Name")
    table.add_column("Target", overflow="fold")
    for i, item in enumerate(items):
        table.add_row(str(i), item.get("type") or "?", item.get("name") or "", item["path"])
    Console().print(table)


def _run_items(args: argparse.Namespace) -> int:
    cmd = args.items_command
    if cmd == "list":
        items = container.get_list_items_use_case().execute()
        _print_items([i.to_dict() for i in items], args.pretty)
    elif cmd == "add":
        index, item = container.get_add_item_use_case().execute(
            args.path, type=args.type, name=args.name
        )
        _print({"index": index, **item.to_dict()}, args.pretty)
    elif cmd == "remove":
        item = container.get_remove_item_use_case().execute(args.index)
        _print(item.to_dict(), args.pretty)
    elif cmd == "open":
        result = container.get_open_item_use_case().execute(args.index)
        _print(result.get_details(), args.pretty)
        return 0 if result.ok else 1
    elif cmd == "reveal":
        item = container.get_reveal_item_use_case().execute(args.index)
        _print(item.to_dict(), args.pretty)
    elif cmd == "clear":
        container.get_clear_items_use_case().execute()
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.command == "serve":
        from quicklauncher.cli_serve import main as serve_main

        return serve_main([])

    try:
        if args.command == "classify":
            kind = container.get_classify_target_use_case().execute(args.raw)
            _print({"raw": args.raw, "kind": kind.value}, args.pretty)
            return 0 if kind.dispatchable else 1
        if args.command == "open":
            target = container.get_classify_target_use_case().to_target(args.raw)
            result = container.get_dispatch_target_use_case().execute(target)
            _print(result.get_details(), args.pretty)
            return 0 if result.ok else 1
        return _run_items(args)
    except BaseAppError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
