"""Diatonic scale stream.

Filters a chromatic frequency stream down to the degrees of a 7-note diatonic
scale. Scale construction is expressed as "skip N chromatic steps", so the
same logic works over any compatible frequency iterator.

Key and mode are independent: the key is chosen by shifting the wrapped
stream before wrapping it (e.g. ``itertools.islice(tones, 5, None)``), the
mode by the rotation offset.
"""

from __future__ import annotations

from itertools import islice, tee
from typing import Iterator, Optional, Tuple, Union

import numpy as np

from tetcore.logging import get_logger

from .keys import Key, Mode
from .precision import DTypeLike
from .tone import ToneStream


logger = get_logger(__name__)

# Whole/half steps of the major (Ionian) scale, in semitones.
DIATONIC_INTERVALS: Tuple[int, ...] = (2, 2, 1, 2, 2, 2, 1)


def _dtype_name(dtype: Optional[type]) -> Optional[str]:
    return np.dtype(dtype).name if dtype is not None else None


class ScaleStream:
    """Stream of scale-degree frequencies.

    Wraps an iterator of chromatic frequencies. Each value produced is reached
    by skipping as many chromatic steps as the current interval of the
    (rotated) diatonic pattern. The first value is the second scale degree
    above the wrapped stream's seed.

    Modes only make musical sense over 12-TET streams; nothing enforces this.
    """

    def __init__(self, frequencies: Iterator, mode: Union[Mode, int] = Mode.IONIAN):
        """Create a scale stream.

        Args:
            frequencies: Chromatic frequency iterator, typically a ToneStream
            mode: Rotation of the interval pattern (Mode or int, taken modulo 7)
        """
        self._tones = iter(frequencies)
        self._cursor = int(mode) % len(DIATONIC_INTERVALS)
        logger.debug(
            "ScaleStream created with rotation %d",
            self._cursor,
            extra={"rotation": self._cursor, "dtype": _dtype_name(self.dtype)},
        )

    @classmethod
    def from_key(
        cls,
        key: Key = Key(),
        mode: Union[Mode, int] = Mode.IONIAN,
        tone_count: int = 12,
        dtype: DTypeLike = np.float64,
    ) -> "ScaleStream":
        """Build a scale rooted at the tonic of ``key``, starting in octave 0."""
        return cls(ToneStream(key.frequency(dtype=dtype), tone_count, dtype), mode)

    @property
    def cursor(self) -> int:
        """Index of the next interval in DIATONIC_INTERVALS."""
        return self._cursor

    @property
    def dtype(self) -> Optional[type]:
        """Precision of the wrapped stream, None if it does not expose one."""
        return getattr(self._tones, "dtype", None)

    def __iter__(self) -> "ScaleStream":
        return self

    def __next__(self):
        step = DIATONIC_INTERVALS[self._cursor]
        self._cursor = (self._cursor + 1) % len(DIATONIC_INTERVALS)
        # StopIteration from an exhausted wrapped stream propagates as is.
        for _ in range(step - 1):
            next(self._tones)
        return next(self._tones)

    def take(self, count: int) -> np.ndarray:
        """Return up to ``count`` next scale degrees as an array."""
        if count < 0:
            raise ValueError(f"Count must be non-negative: {count}")
        return np.array(list(islice(self, count)), dtype=self.dtype)

    def clone(self) -> "ScaleStream":
        """Independent stream with the same cursor and its own wrapped stream.

        Streams exposing ``clone`` (ToneStream, ScaleStream) are cloned. Any
        other iterator, such as an ``islice`` key shift, is split with
        ``itertools.tee`` and this stream keeps one of the branches.
        """
        other = ScaleStream.__new__(ScaleStream)
        if hasattr(self._tones, "clone"):
            other._tones = self._tones.clone()
        else:
            self._tones, other._tones = tee(self._tones)
        other._cursor = self._cursor
        return other

    __copy__ = clone


__all__ = ["DIATONIC_INTERVALS", "ScaleStream"]
