"""Fake semantic version numbers."""

from __future__ import annotations

from dataclasses import dataclass

from .optional import ratio_bool
from .primitives import IntType, fake_int
from .rng import RandomSource

UNSTABLE_SEMVER = ("alpha", "beta", "rc")
PRERELEASE_PERCENT = 10


@dataclass(frozen=True)
class Version:
    """A semantic version with optional pre-release and build labels."""

    major: int
    minor: int
    patch: int
    pre: str = ""
    build: str = ""

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre:
            text += f"-{self.pre}"
        if self.build:
            text += f"+{self.build}"
        return text


def fake_version(rng: RandomSource) -> Version:
    """A version below 9.20.20, a pre-release one time in ten."""
    if ratio_bool(PRERELEASE_PERCENT, rng):
        label = UNSTABLE_SEMVER[fake_int(IntType.USIZE, range(len(UNSTABLE_SEMVER)), rng)]
        number = fake_int(IntType.U8, range(0, 9), rng)
        pre = f"{label}.{number}"
    else:
        pre = ""
    major = fake_int(IntType.U64, range(0, 9), rng)
    minor = fake_int(IntType.U64, range(0, 20), rng)
    patch = fake_int(IntType.U64, range(0, 20), rng)
    return Version(major, minor, patch, pre)