"""Key and mode selection.

Tonics and modes are looked up in two separate tables:

- ``Tonic`` maps a letter to its semitone offset above the reference A.
- ``Mode`` maps a mode name to its rotation of the diatonic interval pattern.

A ``Key`` (tonic plus accidental) resolves to the tonic frequency a
``ToneStream`` is seeded with; a ``Mode`` resolves to the cursor start of a
``ScaleStream``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict

import numpy as np

from .precision import DTypeLike
from .tone import A0, ToneStream


class Tonic(Enum):
    """Tonic letter, valued by its semitone offset above A."""

    A = 0
    B = 2
    C = 3
    D = 5
    E = 7
    F = 8
    G = 10

    @property
    def semitones(self) -> int:
        return self.value


class Accidental(IntEnum):
    """Semitone adjustment applied to a tonic."""

    FLAT = -1
    NATURAL = 0
    SHARP = 1


class Mode(IntEnum):
    """Diatonic mode, valued by its rotation of the major interval pattern."""

    IONIAN = 0
    DORIAN = 1
    PHRYGIAN = 2
    LYDIAN = 3
    MIXOLYDIAN = 4
    AEOLIAN = 5
    LOCRIAN = 6

    @property
    def offset(self) -> int:
        return int(self.value)

    @classmethod
    def parse(cls, name: str) -> "Mode":
        """Look up a mode by name ('dorian', 'Lydian', 'major', 'minor', ...)."""
        key = name.strip().lower()
        if key in _MODE_ALIASES:
            return _MODE_ALIASES[key]
        try:
            return cls[key.upper()]
        except KeyError as e:
            raise ValueError(f"Unknown mode: {name}") from e


_MODE_ALIASES: Dict[str, Mode] = {
    "major": Mode.IONIAN,
    "minor": Mode.AEOLIAN,
}

_ACCIDENTAL_SIGNS: Dict[str, Accidental] = {
    "": Accidental.NATURAL,
    "#": Accidental.SHARP,
    "b": Accidental.FLAT,
}


@dataclass(frozen=True)
class Key:
    """A tonic letter and an accidental, e.g. ``Key(Tonic.F, Accidental.SHARP)``."""

    tonic: Tonic = Tonic.A
    accidental: Accidental = Accidental.NATURAL

    def __post_init__(self) -> None:
        if not isinstance(self.tonic, Tonic):
            raise TypeError(f"Expected a Tonic, got {self.tonic!r}")
        # Accept plain ints and bools (sharp flag) for the accidental.
        object.__setattr__(self, "accidental", Accidental(int(self.accidental)))

    @classmethod
    def parse(cls, name: str) -> "Key":
        """Parse a key name such as 'A', 'C#' or 'Bb'."""
        key = name.strip()
        if not key:
            raise ValueError("Empty key name")

        letter, sign = key[0].upper(), key[1:]
        if letter not in Tonic.__members__ or sign not in _ACCIDENTAL_SIGNS:
            raise ValueError(f"Invalid key: {name}")
        return cls(Tonic[letter], _ACCIDENTAL_SIGNS[sign])

    @property
    def semitones(self) -> int:
        """Semitone offset above the reference A, in 0..11."""
        return (self.tonic.semitones + int(self.accidental)) % 12

    def frequency(self, reference: float = A0, dtype: DTypeLike = np.float64) -> np.floating:
        """Frequency of the tonic in the octave starting at ``reference`` (an A)."""
        return ToneStream(reference, 12, dtype).advance(self.semitones).frequency

    def __str__(self) -> str:
        sign = {v: k for k, v in _ACCIDENTAL_SIGNS.items()}[self.accidental]
        return f"{self.tonic.name}{sign}"


__all__ = ["Tonic", "Accidental", "Mode", "Key"]
