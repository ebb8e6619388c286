import os
import logging
from pathlib import Path
from typing import List, Union

from .. import config
from ..exceptions import InvalidExtensionError, PathNotFoundError


class PathResolver:
    def resolve(self, path: Union[str, Path]) -> List[Path]:
        """
        Turns a user supplied path into the list of .MOI files to decode.

        - Directory: every .MOI file directly inside it (not recursive),
          sorted by name so batch output is stable across filesystems.
        - File: the file itself, provided it has a .MOI extension.

        Raises:
            InvalidExtensionError: a file path without a .MOI extension.
            PathNotFoundError: the path is neither a file nor a directory.
        """
        path = Path(path)

        if path.is_dir():
            files = self._list_moi_files(path)
            logging.debug(f"Found {len(files)} MOI file(s) in {path}")
            return files

        if path.is_file():
            if not self.is_moi_file(path):
                raise InvalidExtensionError(path)
            return [path]

        raise PathNotFoundError(path)

    def is_moi_file(self, path: Path) -> bool:
        return path.name.lower().endswith(config.MOI_EXT)

    def _list_moi_files(self, directory: Path) -> List[Path]:
        with os.scandir(directory) as it:
            entries = list(it)

        # Sort for stable output order
        entries.sort(key=lambda e: e.name.lower())

        return [
            Path(e.path)
            for e in entries
            if e.is_file() and self.is_moi_file(Path(e.name))
        ]
