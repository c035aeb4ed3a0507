"""CLI entrypoint exposing a few of the helpers."""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from helper_toolbox import __version__
from helper_toolbox.config import ToolboxSettings
from helper_toolbox.logging import configure_logging
from helper_toolbox.utils.entities import decode_entities, encode_entities
from helper_toolbox.utils.files import detect_mime_by_filename, glob_files
from helper_toolbox.utils.hashing import hash_data
from helper_toolbox.utils.ids import uuid_str

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="helper-toolbox",
        description="Small file, hashing and encoding helpers",
    )
    parser.add_argument("--version", action="version", version=f"helper-toolbox {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    hash_cmd = subparsers.add_parser("hash", help="Print the hex digest of files")
    hash_cmd.add_argument("files", nargs="+", help="Files to hash")
    hash_cmd.add_argument(
        "--algorithm",
        default=None,
        help="hashlib algorithm name (default: TOOLBOX_HASH_ALGORITHM or sha256)",
    )

    mime = subparsers.add_parser("mime", help="Guess MIME types from file names")
    mime.add_argument("names", nargs="+", help="File names")

    glob_cmd = subparsers.add_parser("glob", help="List files matching glob patterns")
    glob_cmd.add_argument("patterns", nargs="+", help="Glob patterns ('**' is recursive)")
    glob_cmd.add_argument("--root", default=None, help="Directory the patterns are relative to")

    uuid_cmd = subparsers.add_parser("uuid", help="Print a new UUID")
    uuid_cmd.add_argument("--format", default="v4", help="v4 (default) or v1")

    for name, help_text in (
        ("encode", "Replace characters by entity references"),
        ("decode", "Resolve entity references"),
    ):
        entity = subparsers.add_parser(name, help=help_text)
        entity.add_argument("text", help="Text to convert")
        entity.add_argument(
            "--format",
            default=None,
            help="html, html4, html5 or xml (default: TOOLBOX_ENTITY_FORMAT or html)",
        )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = ToolboxSettings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your environment or .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    configure_logging(settings.log_level)

    try:
        if args.command == "hash":
            algorithm = args.algorithm or settings.hash_algorithm
            for file_name in args.files:
                with open(file_name, "rb") as f:
                    digest = hash_data(f, algorithm)
                print(f"{digest.hex()}  {file_name}")
            return 0

        if args.command == "mime":
            for name in args.names:
                print(f"{name}: {detect_mime_by_filename(name, settings.default_mime_type)}")
            return 0

        if args.command == "glob":
            matches = glob_files(args.patterns, root_dir=args.root)
            logger.info("Glob finished", extra={"patterns": args.patterns, "matches": len(matches)})
            for path in matches:
                print(path)
            return 0

        if args.command == "uuid":
            print(uuid_str(args.format))
            return 0

        if args.command in ("encode", "decode"):
            convert = encode_entities if args.command == "encode" else decode_entities
            print(convert(args.text, format=args.format or settings.entity_format))
            return 0

        parser.error(f"Unknown command: {args.command}")
        return 2

    except (ValueError, OSError) as e:
        logger.error("Command failed", extra={"command": args.command, "error": str(e)})
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
