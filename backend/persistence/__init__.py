"""Plain-text save format for whole buildings."""

from persistence.codec import decode, encode, load_buildings, save_buildings

__all__ = [
    "decode",
    "encode",
    "load_buildings",
    "save_buildings",
]
