"""
Extrema selection over a finished scan.

Each extreme is read off the end of a sort over a composite key, so the
result depends only on the records and never on traversal order:

  smallest / largest   (pixel_count asc, path desc)  first / last
  widest               (width asc, path asc)         last
  tallest              (height asc, path asc)        last

The pixel-count ordering runs names the other way round from the
width/height orderings. On a tie, `largest` therefore picks the
alphabetically earliest name and `smallest` the alphabetically latest,
while `widest` and `tallest` both pick the latest.
"""
from operator import attrgetter
from typing import List, Sequence

from ..exceptions import EmptyCollectionError
from ..models import ImageRecord, Totals


def order_by_pixels(records: Sequence[ImageRecord]) -> List[ImageRecord]:
    # Two stable sorts: secondary key (path, descending) first, then primary
    ordered = sorted(records, key=attrgetter('path'), reverse=True)
    ordered.sort(key=attrgetter('pixel_count'))
    return ordered


def order_by_width(records: Sequence[ImageRecord]) -> List[ImageRecord]:
    return sorted(records, key=lambda r: (r.width, r.path))


def order_by_height(records: Sequence[ImageRecord]) -> List[ImageRecord]:
    return sorted(records, key=lambda r: (r.height, r.path))


class StatsAggregator:
    def aggregate(self, records: Sequence[ImageRecord], totals: Totals) -> Totals:
        """
        Writes smallest/largest/widest/tallest into `totals` and returns it.

        Raises EmptyCollectionError if `records` is empty; callers are
        expected to report "no photos" instead of getting here.
        """
        if not records:
            raise EmptyCollectionError("No images to aggregate")

        by_pixels = order_by_pixels(records)
        totals.smallest = by_pixels[0].path
        totals.largest = by_pixels[-1].path

        totals.widest = order_by_width(records)[-1].path
        totals.tallest = order_by_height(records)[-1].path

        return totals
