import csv
import logging
import sys
from datetime import timedelta
from pathlib import Path
from typing import List, Optional, TextIO, Union

from .models import BatchResult, DecodeError, FileRecord
from . import config


def format_video_length(length: timedelta) -> str:
    """H:MM:SS.mmm, e.g. 0:09:24.480"""
    total_ms = length // timedelta(milliseconds=1)
    hours, rem = divmod(total_ms, 3_600_000)
    minutes, rem = divmod(rem, 60_000)
    seconds, millis = divmod(rem, 1000)
    return f"{hours}:{minutes:02d}:{seconds:02d}.{millis:03d}"


def record_row(record: FileRecord) -> List[str]:
    return [
        record.file_name or "",
        record.version,
        str(record.file_size_bytes),
        record.creation_date.isoformat(sep=" "),
        format_video_length(record.video_length),
        record.aspect_ratio.value,
        record.tv_system.value,
    ]


def error_row(error: DecodeError) -> List[str]:
    return [str(error.file_path or ""), error.kind.value, error.message]


class ReportGenerator:
    """
    Renders a BatchResult for humans (text tables) and for tools (CSV).
    """

    def __init__(self, result: BatchResult):
        self.result = result

    def format_records(self) -> str:
        return self._format_table(config.RECORD_HEADERS, [record_row(r) for r in self.result.records])

    def format_errors(self) -> str:
        return self._format_table(config.ERROR_HEADERS, [error_row(e) for e in self.result.errors])

    def print_report(self, stream: Optional[TextIO] = None):
        """Prints both tables. Empty tables are left out."""
        stream = stream or sys.stdout

        if self.result.is_empty:
            print("No MOI files found.", file=stream)
            return

        if self.result.records:
            print(f"Decoded files ({len(self.result.records)}):", file=stream)
            print(self.format_records(), file=stream)

        if self.result.errors:
            if self.result.records:
                print(file=stream)
            print(f"Errors ({len(self.result.errors)}):", file=stream)
            print(self.format_errors(), file=stream)

    def write_csv(self, output_csv: Union[str, Path]):
        """
        Writes one row per input file, successes and failures together,
        in the order the files were decoded.
        """
        blanks = [""] * (len(config.RECORD_HEADERS) - 1)
        rows = []
        for path, outcome in self.result.entries:
            if isinstance(outcome, FileRecord):
                rows.append([str(path), "OK"] + record_row(outcome)[1:] + [""])
            else:
                rows.append([str(path), outcome.kind.value] + blanks + [outcome.message])

        with open(output_csv, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(config.CSV_HEADERS)
            writer.writerows(rows)

        logging.info(f"Report written: {output_csv} ({len(rows)} rows)")

    def _format_table(self, headers: List[str], rows: List[List[str]]) -> str:
        widths = [len(h) for h in headers]
        for row in rows:
            for idx, cell in enumerate(row):
                widths[idx] = max(widths[idx], len(cell))

        def fmt(cells):
            return " | ".join(c.ljust(w) for c, w in zip(cells, widths)).rstrip()

        lines = [fmt(headers), "-+-".join("-" * w for w in widths)]
        lines.extend(fmt(row) for row in rows)
        return "\n".join(lines)
