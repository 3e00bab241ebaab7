"""Entry point composing fetch, path resolution and rendering."""

from __future__ import annotations

import logging
from typing import TextIO

from gdrivels.controller import GoogleDriveController
from gdrivels.fetcher import list_all_files
from gdrivels.models import ListFilesArgs
from gdrivels.pathfinder import Pathfinder
from gdrivels.query import Selection
from gdrivels.renderer import print_file_list

logger = logging.getLogger(__name__)


class FileLister:
    """List Drive files as a table through an injected controller."""

    def __init__(self, controller: GoogleDriveController) -> None:
        self._controller = controller

    def list(self, args: ListFilesArgs) -> None:
        """
        Fetch, optionally rewrite names to absolute paths, then print.

        Nothing is written to `args.out` unless fetching and path resolution
        both succeed.

        Raises:
            InvalidArgumentError: for an unknown selection code.
            FetchError: if listing fails.
            PathResolutionError: if an absolute path cannot be resolved.
        """
        files = list_all_files(
            self._controller,
            query=args.query,
            sort_order=args.sort_order,
            selection=args.selection,
            max_files=args.max_files,
        )
        logger.debug("Fetched %d files", len(files))

        if args.abs_path:
            pathfinder = Pathfinder(self._controller)
            for record in files:
                record.name = pathfinder.abs_path(record)

        print_file_list(
            args.out,
            files,
            name_width=args.name_width,
            skip_header=args.skip_header,
            size_in_bytes=args.size_in_bytes,
        )

    def list_files(
        self,
        out: TextIO,
        *,
        query: str = "",
        sort_order: str = "",
        selection: int = Selection.QUERY,
        max_files: int = 0,
        name_width: int = 0,
        skip_header: bool = False,
        size_in_bytes: bool = False,
        abs_path: bool = False,
    ) -> None:
        """Keyword form of list()."""
        self.list(
            ListFilesArgs(
                out=out,
                query=query,
                sort_order=sort_order,
                selection=selection,
                max_files=max_files,
                name_width=name_width,
                skip_header=skip_header,
                size_in_bytes=size_in_bytes,
                abs_path=abs_path,
            )
        )
