"""Command line interface: `gdrivels`."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from gdrivels.auth import ENV_CLIENT_SECRETS, ENV_TOKEN_FILE, AuthInfo
from gdrivels.controller import GoogleDriveController
from gdrivels.errors import GDriveLsError
from gdrivels.lister import FileLister
from gdrivels.models import ListFilesArgs
from gdrivels.query import Selection

logger = logging.getLogger(__name__)

DEFAULT_QUERY: str = "trashed = false and 'me' in owners"
DEFAULT_MAX_FILES: int = 30
DEFAULT_NAME_WIDTH: int = 40


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gdrivels",
        description="List files on Google Drive.",
    )
    parser.add_argument(
        "-m", "--max", dest="max_files", type=int, default=DEFAULT_MAX_FILES,
        help=f"Max files to list, 0 for all (default: {DEFAULT_MAX_FILES})",
    )
    parser.add_argument(
        "-q", "--query", default=DEFAULT_QUERY,
        help=f'Drive search query (default: "{DEFAULT_QUERY}")',
    )
    parser.add_argument(
        "--order", dest="sort_order", default="",
        help='Sort order, e.g. "folder,modifiedTime desc,name"',
    )
    parser.add_argument(
        "--selection", type=int, default=int(Selection.QUERY),
        choices=[int(s) for s in Selection],
        help="1: shared files, 2: shared files and folders, "
        "3: shared starred files; overrides --query",
    )
    parser.add_argument(
        "--name-width", type=int, default=DEFAULT_NAME_WIDTH,
        help=f"Width of the name column, 0 for no limit (default: {DEFAULT_NAME_WIDTH})",
    )
    parser.add_argument("--absolute", dest="abs_path", action="store_true",
                        help="Show absolute paths instead of names")
    parser.add_argument("--no-header", dest="skip_header", action="store_true",
                        help="Don't print the header row")
    parser.add_argument("--bytes", dest="size_in_bytes", action="store_true",
                        help="Show sizes in bytes")
    parser.add_argument("--client-secrets",
                        help=f"OAuth client secrets JSON (env: {ENV_CLIENT_SECRETS})")
    parser.add_argument("--token-file",
                        help=f"OAuth token JSON (env: {ENV_TOKEN_FILE})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _auth_info(ns: argparse.Namespace) -> AuthInfo:
    """Command line paths win over the environment, one setting at a time."""
    env = {
        ENV_CLIENT_SECRETS: ns.client_secrets or os.environ.get(ENV_CLIENT_SECRETS, ""),
        ENV_TOKEN_FILE: ns.token_file or os.environ.get(ENV_TOKEN_FILE, ""),
    }
    return AuthInfo.from_env(env)


def main(argv: Optional[Sequence[str]] = None) -> int:
    ns = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        controller = GoogleDriveController.from_auth_info(_auth_info(ns))
        FileLister(controller).list(
            ListFilesArgs(
                out=sys.stdout,
                query=ns.query,
                sort_order=ns.sort_order,
                selection=ns.selection,
                max_files=ns.max_files,
                name_width=ns.name_width,
                skip_header=ns.skip_header,
                size_in_bytes=ns.size_in_bytes,
                abs_path=ns.abs_path,
            )
        )
    except GDriveLsError as exc:
        logger.debug("Listing failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
