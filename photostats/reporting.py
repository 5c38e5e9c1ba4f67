import csv
import logging
from pathlib import Path
from typing import Iterable, List, Union

from .models import ImageRecord, Totals
from . import config

NO_PHOTOS_MESSAGE = "No photos found, please run or point to a directory with photos."

# (threshold in seconds, divisor, suffix), largest unit first
_ELAPSED_UNITS = [
    (1.0, 1.0, "s"),
    (1e-3, 1e-3, "ms"),
    (1e-6, 1e-6, "µs"),
]


def format_elapsed(seconds: float) -> str:
    """Formats a duration with two decimals in the largest unit that fits."""
    for threshold, divisor, suffix in _ELAPSED_UNITS:
        if seconds >= threshold:
            return f"{seconds / divisor:.2f}{suffix}"
    return f"{seconds * 1e9:.2f}ns"


class ReportGenerator:
    def render_summary(self, totals: Totals) -> str:
        """
        Text block printed after a successful scan. Must only be called
        once extrema have been filled in.
        """
        ratios = totals.display_ratios()
        lines = [
            config.SEPARATOR_LINE,
            "",
            f"Total amount of files: {totals.file_count:,}",
            f"Total amount of photos: {totals.photo_count:,}",
            f"Total pixels: {totals.total_pixels:,}",
            "",
        ]
        for name, ratio in ratios.items():
            lines.append(f"How many {name} displays does your photo collection take up: {ratio!r}")
        lines.append("")

        lines += [
            f"Largest photo is: {totals.largest}",
            f"Smallest photo is: {totals.smallest}",
            f"Widest photo is: {totals.widest}",
            f"Tallest photo is: {totals.tallest}",
        ]
        if totals.failed_probes:
            lines.append(f"Photos with unreadable dimensions: {totals.failed_probes:,}")
        lines.append("")
        return "\n".join(lines)

    def render_timing(self, elapsed: float, photo_count: int) -> str:
        per_photo = elapsed / max(photo_count, 1)
        return "\n".join([
            f"Running photostats took {format_elapsed(elapsed)}",
            f"Time to process each photo {format_elapsed(per_photo)}",
        ])

    def export_csv(self, records: Iterable[ImageRecord], output_csv: Union[str, Path]) -> int:
        """Writes one row per image record. Returns the number of rows written."""
        logging.info(f"Writing image list -> {output_csv}")

        written = 0
        with open(output_csv, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(config.CSV_HEADERS)
            for rec in records:
                writer.writerow(self._row(rec))
                written += 1

        logging.info(f"Image list complete. Wrote {written} rows.")
        return written

    def _row(self, rec: ImageRecord) -> List:
        return [rec.path, rec.width, rec.height, rec.pixel_count, rec.status.value]
