from .chunk import chunk_items, chunk_lengths

__all__ = [
    "chunk_items",
    "chunk_lengths",
]
