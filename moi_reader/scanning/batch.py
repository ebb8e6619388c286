import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from pathlib import Path
from typing import Optional, Union

from tqdm import tqdm

from .. import config
from ..models import BatchResult, DecodeError, DecodeResult, ErrorKind, FileRecord
from ..parsing.decoder import RecordDecoder
from .paths import PathResolver


class BatchDecoder:
    def __init__(self,
                 resolver: Optional[PathResolver] = None,
                 decoder: Optional[RecordDecoder] = None):
        self.resolver = resolver or PathResolver()
        self.decoder = decoder or RecordDecoder()

    def run(self,
            path: Union[str, Path],
            max_workers: int = config.DEFAULT_MAX_WORKERS,
            progress: bool = False) -> BatchResult:
        """
        Decodes every .MOI file found under `path`.

        A bad root path raises PathError before any file is read. After that
        nothing aborts the batch: each file ends up in exactly one of
        `records` or `errors`, in resolved path order.

        Args:
            max_workers: Threads used for reading and decoding. Results are
                         merged back in input order, so output is identical
                         to a sequential run.
            progress: Show a tqdm progress bar.
        """
        paths = self.resolver.resolve(path)
        result = BatchResult()

        if not paths:
            return result

        max_workers = max(1, min(max_workers, config.MAX_WORKERS_CAP))
        logging.info(f"Decoding {len(paths)} MOI file(s) with {max_workers} worker(s)")

        if max_workers == 1:
            outcomes = map(self.decode_path, paths)
            for path, outcome in tqdm(zip(paths, outcomes), total=len(paths), desc="Decoding", disable=not progress):
                result.add(path, outcome)
        else:
            with ThreadPoolExecutor(max_workers=max_workers) as pool:
                # map() yields in submission order regardless of completion order
                outcomes = pool.map(self.decode_path, paths)
                for path, outcome in tqdm(zip(paths, outcomes), total=len(paths), desc="Decoding", disable=not progress):
                    result.add(path, outcome)

        return result

    def decode_path(self, path: Path) -> DecodeResult:
        """Reads and decodes one file. Never raises."""
        try:
            data = self.read_file(path)
        except OSError as e:
            logging.debug(f"Failed to read {path}: {e}")
            return DecodeError(
                ErrorKind.UNKNOWN_ERROR,
                f"Could not read file: {e}",
                cause=e,
                file_path=path,
            )

        try:
            outcome = self.decoder.decode(data)
        except Exception as e:
            logging.error(f"Decoder raised for {path}: {e}")
            outcome = DecodeError(
                ErrorKind.UNKNOWN_ERROR,
                "Unexpected error occurred during parsing.",
                cause=e,
            )

        if isinstance(outcome, FileRecord):
            return replace(outcome, file_name=path.name)
        return replace(outcome, file_path=path)

    def read_file(self, path: Path) -> bytes:
        with open(path, 'rb') as f:
            return f.read()
