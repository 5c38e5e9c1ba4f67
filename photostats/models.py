from dataclasses import dataclass, field
from enum import Enum
from typing import Dict

from . import config


class ProbeStatus(Enum):
    OK = "ok"
    FAILED = "failed"


@dataclass(frozen=True)
class ImageRecord:
    """
    One image found during a scan.
    """
    path: str               # display name, also the tie-break key
    width: int
    height: int
    status: ProbeStatus = ProbeStatus.OK

    pixel_count: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, 'pixel_count', self.width * self.height)

    @classmethod
    def failed(cls, path: str) -> "ImageRecord":
        """Placeholder for an image whose dimensions could not be read."""
        return cls(path=path, width=0, height=0, status=ProbeStatus.FAILED)

    @property
    def probe_failed(self) -> bool:
        return self.status is ProbeStatus.FAILED


@dataclass
class Totals:
    """
    Run-scoped accumulator. The walker fills in the counters, the
    aggregator fills in the extrema names.
    """
    total_pixels: int = 0
    file_count: int = 0
    photo_count: int = 0

    largest: str = ""
    smallest: str = ""
    widest: str = ""
    tallest: str = ""

    # Diagnostics
    failed_probes: int = 0
    skipped_dirs: int = 0

    def add_image(self, record: ImageRecord):
        self.photo_count += 1
        self.total_pixels += record.pixel_count
        if record.probe_failed:
            self.failed_probes += 1

    def display_ratios(self) -> Dict[str, float]:
        """How many of each reference display the collection would fill."""
        return {name: self.total_pixels / pixels
                for name, pixels in config.DISPLAY_RESOLUTIONS.items()}
