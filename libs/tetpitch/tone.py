"""Equal-tempered tone stream.

Produces successive frequencies of an N-tone equal temperament (N-TET) from a
starting frequency, one step at a time.
"""

from __future__ import annotations

import math
import numbers
from itertools import islice
from typing import Iterator, Optional

import numpy as np

from tetcore.config import Settings, get_settings
from tetcore.logging import get_logger

from .precision import DTypeLike, resolve_dtype


logger = get_logger(__name__)

# Frequency of the A at octave 0, the lowest A on a standard piano.
A0 = 27.5


class InvalidToneCount(ValueError):
    """Raised when a tone count cannot divide an octave."""


def _check_tone_count(tone_count: object) -> int:
    if isinstance(tone_count, bool) or not isinstance(tone_count, numbers.Real):
        raise InvalidToneCount(f"Tone count must be a number: {tone_count!r}")
    try:
        finite = math.isfinite(tone_count)
    except OverflowError:
        finite = False
    if not finite or tone_count <= 0 or int(tone_count) != tone_count:
        raise InvalidToneCount(f"Tone count must be a positive integer: {tone_count!r}")
    return int(tone_count)


class ToneStream:
    """Infinite stream of N-TET frequencies.

    Each step multiplies the current frequency by ``2 ** (1 / tone_count)``.
    The first value produced is one step above the seed, never the seed
    itself. The stream cannot be reset; use :meth:`clone` to branch off an
    independent copy of the current state.
    """

    def __init__(
        self,
        initial_frequency: float,
        tone_count: int = 12,
        dtype: DTypeLike = np.float64,
    ):
        """Create a tone stream.

        Args:
            initial_frequency: Seed frequency in Hz (not yielded)
            tone_count: Number of equal divisions of the octave
            dtype: Precision of the produced values ('single', 'double' or a
                numpy float type)
        """
        self._tone_count = _check_tone_count(tone_count)
        self._dtype = resolve_dtype(dtype)
        frequency = self._dtype(initial_frequency)
        if not np.isfinite(frequency) or frequency <= 0:
            raise ValueError(f"Initial frequency must be positive: {initial_frequency}")

        self._frequency = frequency
        # Computed in the stream precision, so float32 streams never see a
        # float64 ratio.
        self._ratio = self._dtype(2) ** (self._dtype(1) / self._dtype(self._tone_count))

        logger.debug(
            "ToneStream seeded at %s Hz, %d-TET, %s",
            frequency,
            self._tone_count,
            np.dtype(self._dtype).name,
            extra={
                "frequency": float(frequency),
                "tone_count": self._tone_count,
                "dtype": np.dtype(self._dtype).name,
            },
        )

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ToneStream":
        """Build a stream from the configured reference pitch, tone count and precision."""
        s = settings or get_settings()
        return cls(s.TET_REFERENCE_PITCH, s.TET_TONE_COUNT, s.TET_PRECISION)

    @property
    def frequency(self) -> np.floating:
        """Last produced frequency, or the seed before the first step."""
        return self._frequency

    @property
    def tone_count(self) -> int:
        return self._tone_count

    @property
    def dtype(self) -> type:
        return self._dtype

    @property
    def ratio(self) -> np.floating:
        """Frequency ratio between two consecutive steps."""
        return self._ratio

    def __iter__(self) -> Iterator[np.floating]:
        return self

    def __next__(self) -> np.floating:
        self._frequency = self._frequency * self._ratio
        return self._frequency

    def advance(self, steps: int) -> "ToneStream":
        """Consume ``steps`` values and return the stream itself.

        Used to shift the starting pitch (the key) before wrapping the stream
        in a :class:`~tetpitch.scale.ScaleStream`.
        """
        if steps < 0:
            raise ValueError(f"Cannot advance by a negative step count: {steps}")
        for _ in range(steps):
            next(self)
        return self

    def take(self, count: int) -> np.ndarray:
        """Return the next ``count`` frequencies as an array."""
        if count < 0:
            raise ValueError(f"Count must be non-negative: {count}")
        return np.fromiter(islice(self, count), dtype=self._dtype, count=count)

    def clone(self) -> "ToneStream":
        """Independent stream starting from the current state."""
        return ToneStream(self._frequency, self._tone_count, self._dtype)

    __copy__ = clone

    def __repr__(self) -> str:
        return (
            f"ToneStream(frequency={float(self._frequency)!r}, "
            f"tone_count={self._tone_count}, dtype={np.dtype(self._dtype).name})"
        )


__all__ = ["A0", "InvalidToneCount", "ToneStream"]
