import os
import logging
from pathlib import Path
from typing import Iterator, Optional, Union

from .. import config
from ..exceptions import DimensionProbeError, FilenameEncodingError
from ..models import ImageRecord, Totals
from .probe import DimensionProbe


class DirectoryWalker:
    def __init__(self, probe: Optional[DimensionProbe] = None):
        self.probe = probe or DimensionProbe()

    def walk(self, root: Union[str, Path], totals: Totals) -> Iterator[ImageRecord]:
        """
        Generator that yields an ImageRecord for every image file under root.

        Side effects on `totals` (owned by the caller):
          - file_count:    every visible regular file, image or not
          - photo_count / total_pixels / failed_probes: every record yielded
          - skipped_dirs:  directories that could not be listed

        Nothing raised for a single entry stops the walk.
        """
        for entry in self._iter_files(root, totals):
            # Hidden files are invisible: not counted, never probed
            if entry.name.startswith(config.HIDDEN_PREFIX):
                continue

            try:
                display_name = self._display_name(entry)
            except FilenameEncodingError as e:
                logging.warning(f"Skipping unrepresentable filename: {e}")
                continue

            totals.file_count += 1

            if not self.is_image(entry.name):
                continue

            record = self._process_image(display_name)
            totals.add_image(record)
            yield record

    @staticmethod
    def is_image(name: str) -> bool:
        return Path(name).suffix.lower() in config.IMAGE_EXTS

    def _process_image(self, display_name: str) -> ImageRecord:
        """Probes one image. A failed probe yields the zero-dimension placeholder."""
        try:
            width, height = self.probe.read_dimensions(Path(display_name))
        except DimensionProbeError as e:
            logging.warning(f"Failed to read dimensions: {e}")
            return ImageRecord.failed(display_name)
        return ImageRecord(path=display_name, width=width, height=height)

    def _display_name(self, entry: os.DirEntry) -> str:
        # os.scandir smuggles undecodable bytes through as lone surrogates
        try:
            entry.path.encode("utf-8")
        except UnicodeEncodeError as e:
            raise FilenameEncodingError(repr(entry.path)) from e
        return entry.path

    def _iter_files(self, root: Union[str, Path], totals: Totals) -> Iterator[os.DirEntry]:
        """Depth-first walker using os.scandir and an explicit stack."""
        stack = [os.fspath(root)]
        while stack:
            current = stack.pop()

            try:
                with os.scandir(current) as it:
                    entries = list(it)
            except OSError as e:
                logging.warning(f"Cannot read directory {current}: {e}")
                totals.skipped_dirs += 1
                continue

            # Sort for stable traversal order
            entries.sort(key=lambda e: e.name.lower())

            dirs = []
            files = []
            for e in entries:
                try:
                    if e.is_file(follow_symlinks=False):
                        files.append(e)
                    elif e.is_dir(follow_symlinks=False):
                        dirs.append(e.path)
                    # symlinks, sockets, devices: neither counted nor followed
                except OSError as err:
                    logging.debug(f"Cannot stat {e.path}: {err}")

            # Push dirs to stack (reversed so we process A before Z)
            for d in reversed(dirs):
                stack.append(d)

            for f in files:
                yield f
