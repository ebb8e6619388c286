import logging
from pathlib import Path
from typing import Union

from .models import BatchResult
from .scanning.batch import BatchDecoder
from . import config


class MoiReaderApp:
    def __init__(self, batch_decoder: BatchDecoder = None):
        self.batch = batch_decoder or BatchDecoder()

    def read(self,
             path: Union[str, Path],
             max_workers: int = config.DEFAULT_MAX_WORKERS,
             progress: bool = False) -> BatchResult:
        """
        Decodes everything under `path` and logs how it went.

        PathError from the resolver is not caught here: a bad root path
        means there is nothing to report.
        """
        logging.info(f"Reading MOI data from {path}")
        result = self.batch.run(path, max_workers=max_workers, progress=progress)

        for error in result.errors:
            logging.warning(f"{error.file_path}: [{error.kind.value}] {error.message}")

        if result.is_empty:
            logging.info("No MOI files found.")
        elif result.success:
            logging.info(f"Decoded {len(result.records)} file(s) without errors.")
        else:
            logging.info(f"Decoded {len(result.records)} file(s), {len(result.errors)} failed.")

        return result
