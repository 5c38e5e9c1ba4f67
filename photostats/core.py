import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from tqdm import tqdm

from .analysis.extrema import StatsAggregator
from .exceptions import ScanRootError
from .models import ImageRecord, Totals
from .scanning.filesystem import DirectoryWalker


class PhotoStatsApp:
    def __init__(self, walker: Optional[DirectoryWalker] = None, show_progress: bool = False):
        self.walker = walker or DirectoryWalker()
        self.aggregator = StatsAggregator()
        self.show_progress = show_progress

    def collect(self, root: Union[str, Path], totals: Totals) -> List[ImageRecord]:
        """Walks root and returns every image record, updating `totals` as it goes."""
        root_path = Path(root)
        if not root_path.exists():
            raise ScanRootError(f"Scan root {root} does not exist.")
        if not root_path.is_dir():
            raise ScanRootError(f"Scan root {root} is not a directory.")

        records = []
        for record in tqdm(self.walker.walk(root, totals),
                           desc="Scanning", unit=" photos",
                           disable=not self.show_progress):
            records.append(record)

        logging.info(f"Scan complete. {totals.photo_count} photos in {totals.file_count} files.")
        if totals.failed_probes:
            logging.info(f"{totals.failed_probes} photos had unreadable dimensions.")
        if totals.skipped_dirs:
            logging.info(f"{totals.skipped_dirs} directories could not be read.")
        return records

    def analyse(self, root: Union[str, Path]) -> Tuple[Totals, List[ImageRecord]]:
        """
        Full pipeline: scan, then fill in extrema.

        With no photos found the extrema stay empty and aggregation is
        skipped entirely.
        """
        totals = Totals()
        records = self.collect(root, totals)

        if records:
            self.aggregator.aggregate(records, totals)
        else:
            logging.debug(f"No photos under {root}; skipping aggregation.")

        return totals, records
