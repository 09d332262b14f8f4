# flywheel-common

Small building blocks with no third-party dependencies: containers that track
changes, fixed-width wrapping counters, two- and three-element vectors, lists of
socket addresses, and helpers for cooperative asyncio tasks.

## Installation

```
pip install flywheel-common
```

## Modules

### `flywheel_common.dirty`

`Dirty` holds a value and a flag that records whether the value changed.

- `Dirty.new_clean(value)` and `Dirty.new_dirty(value)` create a container with
  the flag cleared or set. `Dirty(value, dirty=False)` does the same.
- `value` and `is_dirty` are read-only properties.
- `set(value)` replaces the value. It sets the flag only when the new value
  differs from the old one.
- `set_dirty(value)` replaces the value and always sets the flag.
- `set_silent(value)` replaces the value and leaves the flag alone.
- `mark_dirty()`, `mark_clean()` and `mark(dirty)` change only the flag.
- `take_dirty()` returns the flag and clears it.
- `modify()` is a context manager that yields a handle. Assign to
  `handle.value`, or call `handle.borrow()` to mutate the value in place. When
  the block ends, the container is marked dirty if the value was written or
  borrowed and no longer equals a deep copy taken before the first change.

### `flywheel_common.ordered`

`Ordered` is like `Dirty`, but updates carry a generation number.

- `set(value, generation)` applies the update only if `generation` is at least
  `min_gen`. `min_gen` starts at 0. An applied update sets the flag if the
  value changed, and raises `min_gen` to `generation + 1`. Updates with the same
  or an older generation than the last applied one are ignored.
- Generations must lie in the unsigned 128-bit range, or `ValueError` is raised.
  Applying the largest generation raises `OverflowError`.
- `set_nogen`, `set_dirty`, `set_silent`, `mark_dirty`, `mark_clean`, `mark` and
  `take_dirty` work as they do on `Dirty`.

### `flywheel_common.increment`

- `IntKind` lists fixed-width integer kinds: `U8`, `I8`, `U16`, `I16`, `U32`,
  `I32`, `U64`, `I64`, `U128`, `I128`, `USIZE` and `ISIZE`. The two size kinds
  are 64 bits wide.
  - The `bits`, `signed`, `min` and `max` properties describe a kind.
  - `contains(value)` tells whether a value fits the kind.
  - `wrap(value)` reduces a value with two's-complement wrapping.
- `wrapping_add(value, amount, kind)` adds two integers and wraps the result to
  `kind`.
- `Counter(value=0, kind=IntKind.I32)` is a counter.
  - Its `increment()` returns the old value and wraps at the bounds of the kind.
  - A starting value outside the kind raises `ValueError`.

### `flywheel_common.vector`

`Vec2(x, y)` and `Vec3(x, y, z)` are frozen, ordered and hashable value types.

- The operators `+ - * / // % & | ^ << >>` work element-wise. The other operand
  can be a vector of the same type or a scalar, on either side.
- Unary `-` negates each element. `~` applies logical not to booleans and
  bitwise not to everything else.
- `splat(value)` builds a vector with the same value in every element.
- `from_array(values)` builds a vector from exactly as many values as it has
  elements. Any other count raises `ValueError`.
- `map(func)` applies a function to each element. `to_array()` returns the
  elements as a tuple.
- `dot(other)` returns the dot product. It raises `TypeError` for a vector of
  another type.
- Each vector type has the class constants `FALSE`, `TRUE`, `ZERO`, `ONE`,
  `NEG_ONE`, `INFINITY` and `NEG_INFINITY`.

### `flywheel_common.socket_addrs`

- `SocketAddr(ip, port)` is an IP address with a port.
  - `ip` may be given as a string.
  - A port outside 0–65535 raises `ValueError`.
  - `str()` gives `1.2.3.4:80` or `[::1]:80`.
- `resolve(spec)` turns one `host:port` string into a list of `SocketAddr`.
  - Literal addresses are returned as they are.
  - Other host names are looked up with the system resolver.
  - Malformed text or a failed lookup raises `OSError`.
- `SocketAddrs` is an immutable sequence of `SocketAddr`.
  - `SocketAddrs.parse("host:port,host:port")` resolves each comma-separated
    entry in order.
  - `str()` joins the addresses back with commas.
  - `SocketAddrs.EMPTY` is the empty list.

### `flywheel_common.manually_poll`

`ManuallyPoll(awaitable)` advances an awaitable one step per call.

- `poll()` returns `Pending()` or `Ready(value)`.
- While the awaitable waits on a future, polls return `Pending()` until that
  future is done.
- Exceptions from the awaitable propagate.
- Polling after completion raises `RuntimeError`.
- `close()` abandons the awaitable. `finished` tells whether it has completed.

### `flywheel_common.tasks`

- `sleep(seconds)` and `yield_now()` suspend the current asyncio task.
- `poll_and_yield(awaitable)` polls an awaitable by hand and yields to the loop
  between polls until it finishes.
- `timeout(seconds, awaitable)` does the same, with a time limit. The awaitable
  is always polled at least once. It returns `None` and closes the awaitable
  when time runs out.
- `block_on(awaitable)` runs an awaitable on a fresh event loop. It raises
  `RuntimeError` if called while a loop is running.

## Example

```python
from flywheel_common.dirty import Dirty
from flywheel_common.ordered import Ordered
from flywheel_common.vector import Vec3
from flywheel_common.increment import Counter, IntKind

health = Dirty.new_clean(20)
health.set(18)
assert health.take_dirty()

name = Ordered("a")
name.set("b", 5)
name.set("c", 3)          # older generation: ignored
assert name.value == "b"

position = Vec3(1, 2, 3) + 1
assert position.to_array() == (2, 3, 4)

ids = Counter(255, IntKind.U8)
assert ids.increment() == 255
assert ids.value == 0
```

## What this package does not do

This is a library only. It has no command-line program, no logging facility and
no application runtime or scheduler. The task helpers run on Python's own
asyncio event loop.

## Running the tests

```
pip install -e .[test]
pytest
```