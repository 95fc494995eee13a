# dummygen

Random dummy values for tests: integers within a fixed width's bounds,
booleans, characters, strings, collections, optional and result values,
paths, IP and socket addresses, dates and times, decimals, UUIDs, HTTP
status codes, semantic versions and JSON documents.

Every generator takes a random source: any object with a
`getrandbits(k)` method, such as a seeded `random.Random`, so the same seed
gives the same values on every run.

## Install

```
pip install dummygen
```

For the test suite:

```
pip install "dummygen[test]"
pytest
```

## Quick start

`dummygen.api.fake(target, config, rng)` fakes a value of `target`, which
may be a Python type, a typing construct such as `list[int]` or
`int | None`, or an `IntType`. A `config` of `None` or `Faker()` asks for
the default value; other configs are specific to the target. Without
`rng`, the shared generator of the `random` module is used.

```python
import random

from dummygen.api import Faker, fake, generator, unique
from dummygen.primitives import IntType

rng = random.Random(42)

fake(int, Faker(), rng)               # any signed 64-bit integer
fake(IntType.U8, range(1, 10), rng)   # an integer from 1 to 9
fake(str, None, rng)                  # 5 to 19 alphanumeric characters
fake(str, 10, rng)                    # exactly 10 characters
fake(str, range(8, 20), rng)          # length drawn from 8 to 19
fake(list[int], None, rng)            # 0 to 9 integers
fake(list[str], (4, range(2, 5)), rng)  # 2 to 4 strings of 4 characters
fake(int | None, None, rng)           # an integer or None, even odds
fake(tuple[bool, str], None, rng)

make_id = generator(int, None)        # a callable taking the rng
make_id(rng)

unique(int, 4, rng)                   # four distinct integers, in draw order
```

Targets `fake` understands besides those above: `bool`, `None`, `set`,
`frozenset`, `dict`, `collections.deque`, `Ok[...] | Err[...]`,
`datetime.date`, `datetime.time`, `datetime.datetime`,
`datetime.timedelta`, `zoneinfo.ZoneInfo`, `ipaddress.IPv4Address`,
`ipaddress.IPv6Address` and their union, `SocketAddrV4`, `SocketAddrV6`,
`uuid.UUID` (config: a `UuidVersion`), `str` with a `UuidVersion` config,
`decimal.Decimal` (config: a `DecimalKind`), `http.HTTPStatus` (config: a
sequence of codes to pick from), `HttpVersion` and `Version`. A
`StringFaker`, `PathFaker`, `Opt` or `ResultFaker` passed as the config
produces the value itself.

`fake` raises `FakeError`, a `TypeError`, when it cannot build a value for
the given target and config.

## Building blocks

The modules behind `fake` can be used directly:

- `dummygen.primitives`: `IntType`, `Span`, `Uniform`, `fake_int`,
  `fake_bool`, `fake_char`
- `dummygen.strings`: `alphanumeric`, `fake_string`, and `StringFaker` for
  strings over your own character set
- `dummygen.collections`: `fake_list`, `fake_deque`, `fake_heap`,
  `fake_set`, `fake_sorted_set`, `fake_dict`, `fake_sorted_dict`,
  `nested_list`, with `default_length` giving 0 to 9 items
- `dummygen.compound`: `fake_array` (0 to 32 elements), `fake_tuple`
  (1 to 12 elements), `fake_wrapped`
- `dummygen.optional`: `fake_option`, `fake_result` with `Ok` and `Err`,
  `Opt` for a chosen percent chance of a value, `ResultFaker` for a chosen
  error rate, and `ratio_bool`
- `dummygen.paths`: `PathFaker`
- `dummygen.net`: `fake_ipv4`, `fake_ipv6`, `fake_ip`, `fake_socket_v4`,
  `fake_socket_v6`
- `dummygen.datetimes`: `fake_date`, `fake_time`, `fake_datetime`,
  `fake_aware_datetime`, `fake_duration`, `fake_timezone`, `is_leap`
- `dummygen.decimals`: `DecimalKind`, `fake_decimal`, `from_parts`
- `dummygen.identifiers`: `UuidVersion`, `fake_uuid`, `fake_uuid_string`
- `dummygen.http_status`: `HttpVersion`, `fake_status_code`,
  `fake_status_code_from`, `fake_http_version`
- `dummygen.versions`: `Version`, `fake_version`
- `dummygen.json_values`: `fake_scalar`, `fake_json`, `fake_object`

Element generators passed to the collection, compound and optional helpers
are callables taking the rng; `dummygen.api.generator` makes one for any
target.

```python
import random

from dummygen.api import generator
from dummygen.optional import ResultFaker
from dummygen.primitives import IntType, fake_int
from dummygen.strings import StringFaker

rng = random.Random(7)

weak = StringFaker("0123456789abcdef", range(8, 12))
weak.fake(rng)                        # 8 to 11 hex characters

results = ResultFaker.with_(
    generator(str, None),
    lambda r: fake_int(IntType.U8, range(1, 10), r),
)
results.fake(rng)                     # Ok(...) or Err(...), half each
```

`fake_timezone` draws from the time zones installed on the system and
raises `LookupError` when there are none.

## A source whose booleans are always true

`dummygen.rng.AlwaysTrueRng` is a deterministic stepping source whose
every boolean draw comes out true while its integer draws still vary, so
`fake_option` and `Opt` with a non-zero ratio always produce a value:

```python
from dummygen.optional import fake_option
from dummygen.rng import AlwaysTrueRng, gen_bool

rng = AlwaysTrueRng()
gen_bool(rng)                         # True, every time
fake_option(lambda r: 1, rng)         # 1, never None
```

Collection lengths are drawn as integers, so collections can still come
out empty with this source.

## What it does not do

dummygen generates values of types only. It has no locale data and no
generators for realistic names, addresses, companies, phone numbers,
e-mail addresses or text, and it has no command-line tool.