"""Equal-tempered pitch streams

Lazy chromatic and diatonic frequency sequences with key and mode selection.
"""

__version__ = "0.1.0"

from .precision import PRECISIONS, resolve_dtype
from .tone import A0, InvalidToneCount, ToneStream
from .keys import Accidental, Key, Mode, Tonic
from .scale import DIATONIC_INTERVALS, ScaleStream

__all__ = [
    # Precision
    "PRECISIONS",
    "resolve_dtype",
    # Chromatic stream
    "A0",
    "InvalidToneCount",
    "ToneStream",
    # Key and mode selection
    "Accidental",
    "Key",
    "Mode",
    "Tonic",
    # Diatonic stream
    "DIATONIC_INTERVALS",
    "ScaleStream",
]
