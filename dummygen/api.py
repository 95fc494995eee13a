"""One entry point that fakes a value of a requested type.

``fake(target, config, rng)`` reads ``target`` (a Python type, a typing
construct such as ``list[int]`` or ``int | None``, or an
:class:`~dummygen.primitives.IntType`) and ``config``, which is ``None`` or a
:class:`Faker` for the default value, or a type-specific setting.
"""

from __future__ import annotations

import random as _random
import types
from collections import deque
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from http import HTTPStatus
from ipaddress import IPv4Address, IPv6Address
from pathlib import Path
from typing import Any, Callable, Union, get_args, get_origin
from uuid import UUID
from zoneinfo import ZoneInfo

from .collections import fake_deque, fake_dict, fake_list, fake_set
from .compound import fake_tuple
from .datetimes import fake_date, fake_datetime, fake_duration, fake_time, fake_timezone
from .decimals import DecimalKind, fake_decimal
from .http_status import HttpVersion, fake_http_version, fake_status_code, fake_status_code_from
from .identifiers import UuidVersion, fake_uuid, fake_uuid_string
from .net import SocketAddrV4, SocketAddrV6, fake_ip, fake_ipv4, fake_ipv6, fake_socket_v4, fake_socket_v6
from .optional import Err, Ok, Opt, ResultFaker, fake_option, fake_result
from .paths import PathFaker
from .primitives import IntType, fake_bool, fake_int
from .rng import RandomSource
from .strings import StringFaker, fake_string
from .versions import Version, fake_version

_NoneType = type(None)


class FakeError(TypeError):
    """The target cannot be faked, or not with the given config."""


class Faker:
    """Config asking for the default fake value of a target."""

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Faker)

    def __hash__(self) -> int:
        return hash(Faker)

    def __repr__(self) -> str:
        return "Faker()"


_SIMPLE: dict[Any, Callable[[RandomSource], Any]] = {
    date: fake_date,
    time: fake_time,
    datetime: fake_datetime,
    timedelta: fake_duration,
    ZoneInfo: fake_timezone,
    IPv4Address: fake_ipv4,
    IPv6Address: fake_ipv6,
    SocketAddrV4: fake_socket_v4,
    SocketAddrV6: fake_socket_v6,
    Version: fake_version,
    HttpVersion: fake_http_version,
}


def _is_default(config: Any) -> bool:
    return config is None or isinstance(config, Faker)


def _spec(config: Any) -> Any:
    return None if _is_default(config) else config


def _require_default(target: Any, config: Any) -> None:
    if not _is_default(config):
        raise FakeError(f"{target!r} takes no config, got {config!r}")


def _element(target: Any, config: Any) -> Callable[[RandomSource], Any]:
    return lambda rng: _make(target, config, rng)


def _split(target: Any, config: Any) -> tuple[Any, Any]:
    """Split a collection config into element config and length."""
    if _is_default(config):
        return None, None
    if isinstance(config, tuple) and len(config) == 2:
        return config
    raise FakeError(f"{target!r} takes an (element config, length) pair, got {config!r}")


def _single_arg(target: Any) -> Any:
    args = get_args(target)
    if len(args) != 1:
        raise FakeError(f"{target!r} needs exactly one type argument")
    return args[0]


def _make_union(target: Any, config: Any, rng: RandomSource) -> Any:
    args = get_args(target)
    if len(args) == 2 and _NoneType in args:
        inner = args[0] if args[1] is _NoneType else args[1]
        return fake_option(_element(inner, config), rng)
    if set(args) == {IPv4Address, IPv6Address}:
        _require_default(target, config)
        return fake_ip(rng)
    origins = [get_origin(arg) for arg in args]
    if len(args) == 2 and set(origins) == {Ok, Err}:
        _require_default(target, config)
        ok_type = get_args(args[origins.index(Ok)])[0]
        err_type = get_args(args[origins.index(Err)])[0]
        return fake_result(_element(ok_type, None), _element(err_type, None), rng)
    raise FakeError(f"cannot fake {target!r}")


def _make_generic(target: Any, origin: Any, config: Any, rng: RandomSource) -> Any:
    if origin in (list, deque):
        elem_config, length = _split(target, config)
        element = _element(_single_arg(target), elem_config)
        if origin is list:
            return fake_list(element, length, rng)
        return fake_deque(element, length, rng)
    if origin in (set, frozenset):
        _require_default(target, config)
        items = fake_set(_element(_single_arg(target), None), None, rng)
        return items if origin is set else frozenset(items)
    if origin is dict:
        _require_default(target, config)
        args = get_args(target)
        if len(args) != 2:
            raise FakeError(f"{target!r} needs key and value types")
        return fake_dict(_element(args[0], None), _element(args[1], None), None, rng)
    if origin is tuple:
        args = get_args(target)
        if Ellipsis in args:
            raise FakeError(f"cannot fake a tuple of unknown length: {target!r}")
        if _is_default(config):
            configs: tuple[Any, ...] = (None,) * len(args)
        elif isinstance(config, tuple) and len(config) == len(args):
            configs = config
        else:
            raise FakeError(f"{target!r} takes one config per element, got {config!r}")
        return fake_tuple([_element(t, c) for t, c in zip(args, configs)], rng)
    if origin in (Ok, Err):
        return origin(_make(_single_arg(target), config, rng))
    raise FakeError(f"cannot fake {target!r}")


def _make(target: Any, config: Any, rng: RandomSource) -> Any:
    if isinstance(config, (Opt, ResultFaker)):
        return config.fake(rng)
    if isinstance(config, StringFaker):
        if target is not str:
            raise FakeError(f"a StringFaker makes strings, not {target!r}")
        return config.fake(rng)
    if isinstance(config, PathFaker):
        if target is not Path:
            raise FakeError(f"a PathFaker makes paths, not {target!r}")
        return config.fake(rng)

    origin = get_origin(target)
    if origin is Union or origin is types.UnionType:
        return _make_union(target, config, rng)
    if origin is not None:
        return _make_generic(target, origin, config, rng)

    if isinstance(target, IntType):
        return fake_int(target, _spec(config), rng)
    if target is bool:
        if isinstance(config, bool):
            return config
        _require_default(target, config)
        return fake_bool(rng)
    if target is int:
        return fake_int(IntType.I64, _spec(config), rng)
    if target is str:
        if isinstance(config, UuidVersion):
            return fake_uuid_string(config, rng)
        return fake_string(_spec(config), rng)
    if target is None or target is _NoneType:
        _require_default(target, config)
        return None
    if target is UUID:
        if _is_default(config):
            return fake_uuid(None, rng)
        if isinstance(config, UuidVersion):
            return fake_uuid(config, rng)
        raise FakeError(f"UUID takes a UuidVersion config, got {config!r}")
    if target is Decimal:
        if _is_default(config):
            return fake_decimal(DecimalKind.ANY, rng)
        if isinstance(config, DecimalKind):
            return fake_decimal(config, rng)
        raise FakeError(f"Decimal takes a DecimalKind config, got {config!r}")
    if target is HTTPStatus:
        if _is_default(config):
            return HTTPStatus(fake_status_code(rng))
        return HTTPStatus(fake_status_code_from(config, rng))

    try:
        handler = _SIMPLE.get(target)
    except TypeError:
        handler = None
    if handler is None:
        raise FakeError(f"cannot fake {target!r}")
    _require_default(target, config)
    return handler(rng)


def fake(target: Any, config: Any = None, rng: RandomSource | None = None) -> Any:
    """Generate a value of ``target`` shaped by ``config``.

    Without ``rng`` the shared generator of :mod:`random` is used.
    """
    source: RandomSource = _random if rng is None else rng  # type: ignore[assignment]
    return _make(target, config, source)


def generator(target: Any, config: Any = None) -> Callable[[RandomSource], Any]:
    """Return an element generator: a callable taking ``rng`` and faking ``target``."""
    return _element(target, config)


def unique(target: Any, count: int, rng: RandomSource | None = None) -> list[Any]:
    """Generate ``count`` distinct default values of ``target``, in draw order."""
    if count < 0:
        raise ValueError("count must be non-negative")
    source: RandomSource = _random if rng is None else rng  # type: ignore[assignment]
    items: list[Any] = []
    while len(items) < count:
        item = _make(target, None, source)
        if item not in items:
            items.append(item)
    return items