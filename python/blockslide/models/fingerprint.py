"""Identity-free keys for deduplicating board configurations.

Two same-shaped pieces at the same spot are interchangeable, so a
configuration is keyed by the sorted ``(width, height, x, y)`` of its
pieces and never by which id sits where.
"""

from __future__ import annotations

from collections.abc import Iterable

from blockslide.models.piece import Piece

Fingerprint = tuple[tuple[int, int, int, int], ...]


def fingerprint(pieces: Iterable[Piece]) -> Fingerprint:
    return tuple(sorted(p.config for p in pieces))
