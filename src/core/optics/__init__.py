"""
Optics — контракт total accessor (Iso).
"""

from src.core.optics.iso import Iso, IsoLike

__all__ = [
    "Iso",
    "IsoLike",
]
