"""Catalog of card faces.

The engine only needs a stable, ordered pool of identifiers; how a face is
drawn is up to the frontend.
"""

from __future__ import annotations

DEFAULT_FACE_POOL: tuple[str, ...] = tuple(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ" "234567"
)
