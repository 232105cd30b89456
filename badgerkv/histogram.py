"""Histograms of key and value sizes."""

from __future__ import annotations

import math
from bisect import bisect_right
from dataclasses import dataclass, field
from typing import Iterable, Sequence, Tuple, Union

_INT64_MAX = (1 << 63) - 1
_INT64_MIN = -(1 << 63)

Size = Union[int, bytes, bytearray, memoryview]


def create_histogram_bins(min_exponent: int, max_exponent: int) -> list[int]:
    """Bin bounds ``[2**min_exponent, ..., 2**max_exponent]``."""
    return [1 << exponent for exponent in range(min_exponent, max_exponent + 1)]


@dataclass
class HistogramData:
    """Counts of values falling into power-of-two bins, with min, max and sum.

    Bin ``i`` holds values below ``bins[i]`` (and at or above ``bins[i-1]``);
    the extra last bin holds everything from ``bins[-1]`` up.
    """

    bins: Sequence[int]
    count_per_bin: list[int] = field(init=False)
    total_count: int = 0
    min: int = _INT64_MAX
    max: int = _INT64_MIN
    sum: int = 0

    def __post_init__(self) -> None:
        self.bins = list(self.bins)
        self.count_per_bin = [0] * (len(self.bins) + 1)

    def update(self, value: int) -> None:
        """Record one value."""
        if value > self.max:
            self.max = value
        if value < self.min:
            self.min = value
        self.sum += value
        self.total_count += 1
        self.count_per_bin[bisect_right(self.bins, value)] += 1

    def format(self) -> str:
        """The histogram as human-readable text, one non-empty bin per line."""
        if self.total_count:
            mean = f"{self.sum / self.total_count:.2f}"
        else:
            mean = "NaN"
        lines = [
            f"Total count: {self.total_count}",
            f"Min value: {self.min}",
            f"Max value: {self.max}",
            f"Mean: {mean}",
            f"{'Range':>24} {'Count':>9}",
        ]
        last = len(self.count_per_bin) - 1
        for index, count in enumerate(self.count_per_bin):
            if count == 0:
                continue
            if index == last:
                # The last bin runs from the largest bound to infinity.
                lower = self.bins[-1]
                lines.append(f"[{lower:>10}, {'infinity':>10}) {count:>9}")
                continue
            upper = self.bins[index]
            lower = self.bins[index - 1] if index > 0 else 0
            lines.append(f"[{lower:>10}, {upper:>10}) {count:>9}")
        return "\n".join(lines) + "\n\n"


def _key_histogram() -> HistogramData:
    return HistogramData(create_histogram_bins(1, 16))


def _value_histogram() -> HistogramData:
    return HistogramData(create_histogram_bins(1, 30))


@dataclass
class SizeHistogram:
    """Histograms of key sizes and of value sizes."""

    key_size_histogram: HistogramData = field(default_factory=_key_histogram)
    value_size_histogram: HistogramData = field(default_factory=_value_histogram)

    def add(self, key_size: int, value_size: int) -> None:
        """Record the sizes of one key-value pair."""
        self.key_size_histogram.update(key_size)
        self.value_size_histogram.update(value_size)

    def format(self) -> str:
        """Both histograms as human-readable text."""
        return (
            "Histogram of key sizes (in bytes)\n"
            + self.key_size_histogram.format()
            + "Histogram of value sizes (in bytes)\n"
            + self.value_size_histogram.format()
        )


def _size(value: Size) -> int:
    if isinstance(value, int):
        return value
    return len(value)


def build_histogram(items: Iterable[Tuple[Size, Size]]) -> SizeHistogram:
    """Build a size histogram from ``(key, value)`` pairs.

    Each element of a pair is either a size in bytes or the bytes themselves.
    """
    histogram = SizeHistogram()
    for key, value in items:
        histogram.add(_size(key), _size(value))
    return histogram