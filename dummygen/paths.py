"""Fake filesystem paths built from roots, segments and extensions."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from .primitives import IntType, fake_bool, fake_int
from .rng import RandomSource


def _choose(items: Sequence[str], rng: RandomSource) -> str:
    return items[fake_int(IntType.USIZE, range(len(items)), rng)]


@dataclass(frozen=True)
class PathFaker:
    """Generates ``root / up to max_level segments . extension`` paths.

    Each level adds a segment with even odds. With no extensions the path
    keeps whatever suffix it has.
    """

    root_dirs: Sequence[str]
    segments: Sequence[str]
    extensions: Sequence[str]
    max_level: int

    def __post_init__(self) -> None:
        for name in ("root_dirs", "segments", "extensions"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        if self.max_level < 0:
            raise ValueError("max_level must be non-negative")

    def fake(self, rng: RandomSource) -> Path:
        if not self.root_dirs:
            raise ValueError("no root directories to choose from")
        path = Path(_choose(self.root_dirs, rng))
        for _ in range(self.max_level):
            if fake_bool(rng):
                if not self.segments:
                    raise ValueError("no path segments to choose from")
                path = path / _choose(self.segments, rng)
        if self.extensions:
            extension = _choose(self.extensions, rng)
            if path.name:
                path = path.with_suffix(f".{extension}" if extension else "")
        return path