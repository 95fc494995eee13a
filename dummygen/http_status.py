"""Fake HTTP status codes and protocol versions."""

from __future__ import annotations

from enum import Enum
from typing import Sequence

from .primitives import IntType, fake_int
from .rng import RandomSource

RFC_STATUS_CODES: tuple[int, ...] = (
    100, 101, 102, 200, 201, 202, 203, 204, 205, 206, 207, 208, 226, 300, 301, 302, 303, 304, 305,
    307, 308, 400, 401, 402, 403, 404, 405, 406, 407, 408, 409, 410, 411, 412, 413, 414, 415, 416,
    417, 418, 421, 422, 423, 424, 426, 428, 429, 431, 451, 500, 501, 502, 503, 504, 505, 506, 507,
    508, 510, 511,
)

_MIN_STATUS = 100
_MAX_STATUS = 999


class HttpVersion(Enum):
    """HTTP protocol versions."""

    HTTP_09 = "HTTP/0.9"
    HTTP_10 = "HTTP/1.0"
    HTTP_11 = "HTTP/1.1"
    HTTP_2 = "HTTP/2.0"

    def __str__(self) -> str:
        return self.value


def _choose(codes: Sequence[int], rng: RandomSource) -> int:
    return codes[fake_int(IntType.USIZE, range(len(codes)), rng)]


def fake_status_code(rng: RandomSource) -> int:
    """A status code registered in the HTTP RFCs."""
    return _choose(RFC_STATUS_CODES, rng)


def fake_status_code_from(codes: Sequence[int], rng: RandomSource) -> int:
    """A status code picked from ``codes``.

    Raises :class:`ValueError` when ``codes`` is empty or the picked code is
    outside 100 to 999.
    """
    choices = list(codes)
    if not choices:
        raise ValueError("no codes provided")
    code = _choose(choices, rng)
    if not _MIN_STATUS <= code <= _MAX_STATUS:
        raise ValueError(f"invalid status code: {code}")
    return code


def fake_http_version(rng: RandomSource) -> HttpVersion:
    """HTTP/2 and 1.0 and 0.9 each a quarter of the time, 1.1 the rest."""
    index = fake_int(IntType.U8, range(0, 4), rng)
    if index == 0:
        return HttpVersion.HTTP_2
    if index == 1:
        return HttpVersion.HTTP_10
    if index == 2:
        return HttpVersion.HTTP_09
    return HttpVersion.HTTP_11