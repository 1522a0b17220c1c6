"""Text cleaning applied before grid packing."""

from infospectra.cleaning.normalizer import is_blank, normalize

__all__ = ["is_blank", "normalize"]
