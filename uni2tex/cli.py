import argparse
import sys
from pathlib import Path

from . import api
from .config import load_config
from .errors import Uni2TexError


def _read_text(args: argparse.Namespace) -> str:
    """Return the TEXT argument, or stdin when it was omitted."""
    if args.text is not None:
        return args.text
    return sys.stdin.read()


def _run(args: argparse.Namespace) -> str:
    """Dispatch the parsed sub-command and return what to print."""
    if args.command == "styles":
        return "\n".join(api.list_style_names())
    if args.command == "lookup":
        return api.lookup_symbol_by_name(args.query)
    if args.command == "search":
        return "\n".join(api.search_symbols(args.query))
    if args.command == "sup":
        return api.superscript_of(_read_text(args))
    if args.command == "sub":
        return api.subscript_of(_read_text(args))

    if args.config is not None and not args.config.exists():
        raise FileNotFoundError(f"'{args.config}' not found.")
    config = load_config(args.config)

    if args.command == "to-tex":
        return api.to_tex_region(_read_text(args), config=config)
    if args.command == "from-tex":
        if args.no_italic:
            config.from_tex.italicize = False
        return api.from_tex_region(_read_text(args), config=config)
    # stylize
    return api.stylize_region(_read_text(args), args.style, config=config)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uni2tex",
        description="Convert between Unicode math characters and TeX commands",
    )
    parser.add_argument(
        "-c", "--config", type=Path, default=None, help="Path to config.yaml (optional)"
    )
    commands = parser.add_subparsers(dest="command", required=True)

    to_tex = commands.add_parser("to-tex", help="Rewrite Unicode math characters as TeX")
    to_tex.add_argument("text", nargs="?", default=None, help="Text to convert (default: stdin)")

    from_tex = commands.add_parser("from-tex", help="Rewrite TeX commands as Unicode")
    from_tex.add_argument("text", nargs="?", default=None, help="Text to convert (default: stdin)")
    from_tex.add_argument(
        "--no-italic",
        action="store_true",
        help="Leave plain letters upright instead of italicizing them",
    )

    stylize = commands.add_parser("stylize", help="Apply a math style to text")
    stylize.add_argument("text", nargs="?", default=None, help="Text to convert (default: stdin)")
    stylize.add_argument(
        "-s",
        "--style",
        type=str,
        default=None,
        help="Style name, see `uni2tex styles` (default: from config, else BOLD)",
    )

    sup = commands.add_parser("sup", help="Convert text to superscript characters")
    sup.add_argument("text", nargs="?", default=None, help="Text to convert (default: stdin)")
    sub = commands.add_parser("sub", help="Convert text to subscript characters")
    sub.add_argument("text", nargs="?", default=None, help="Text to convert (default: stdin)")

    lookup = commands.add_parser("lookup", help="Print the character for a TeX name")
    lookup.add_argument("query", help="Name such as 'alpha', '\\alpha' or 'alpha (α)'")
    search = commands.add_parser("search", help="List symbols whose name contains QUERY")
    search.add_argument("query", help="Part of a TeX name")

    commands.add_parser("styles", help="List the supported style names")
    return parser


def main() -> None:
    """CLI entry point: parse arguments, convert, and print the result."""
    args = _build_parser().parse_args()

    try:
        output = _run(args)
    except (Uni2TexError, FileNotFoundError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    sys.stdout.write(output)
    if not output.endswith("\n"):
        sys.stdout.write("\n")


if __name__ == "__main__":
    main()
