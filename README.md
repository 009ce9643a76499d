# strawberry

A collection of small building blocks for Python programs. It has no
dependencies outside the standard library.

## Modules

**Maths**

- `strawberry.mathutil`: `greatest_common_divisor`, `ceil_div`,
  `round_up_to_multiple`, `round_down_to_multiple` (integer division truncates
  toward zero) and `round_to_decimal_points` (halves round away from zero).
- `strawberry.units`: `Radians` and `Degrees`, with `to_degrees`,
  `Degrees.from_radians` and `to_radians`.
- `strawberry.vector`: `Vector`, a sequence of numbers with `+`, `-`,
  component-wise or scalar `*` and `/`, `dot`, `cross`, `magnitude`,
  `normalised`, `angle_between`, `project_onto_plane`, `as_size`, `as_type`,
  `offset`, `with_additional_values` and `map`. Mixing sizes raises `ValueError`.
- `strawberry.matrix`: `Matrix(height, width, *values)`; with no values it is
  the identity. `Matrix.zeroed`, `transposed`, `+`, `-` and `*`. `m[i]` is the
  `i`-th stored row; multiplication treats each stored row as a column.
- `strawberry.transformations`: `translate`, `scale` (from a `Vector` or its
  components) and `orthographic`, returning homogeneous matrices.
- `strawberry.aabb`: `AABB(position, extent)` with `mensuration`, `area`,
  `volume` and `intersects` (touching boxes count as intersecting).
- `strawberry.rational`: `Rational(numerator, denominator)`; arithmetic results
  are reduced, and `evaluate` gives a float.
- `strawberry.clamped`: `Clamped(minimum, maximum, value)` re-clamps after
  every operation; `static_clamped(minimum, maximum)` makes a subclass with
  fixed bounds.
- `strawberry.periodic`: `Periodic(maximum, value)` (integers modulo
  `maximum`) and `FloatPeriodic(maximum, value)` (reals wrapped into
  `[0, maximum)`).

**Collections**

- `strawberry.circular_buffer`: `CircularBuffer(capacity)` drops the oldest
  item when full; `DynamicCircularBuffer` starts at capacity 16 and doubles.
  `pop` returns `None` when empty.

**IO**

- `strawberry.buffers`: `DynamicByteBuffer` (growable, with `push`,
  `push_value`, `read`, `write`, `resize`, `into`, `as_vector`, `as_string`,
  `from_file`, `zeroes`) and the fixed-size `ByteBuffer`. Packing and unpacking
  use `struct` format strings.
- `strawberry.errors`: `ErrorKind` and `StreamError`; `DynamicByteBuffer.read`
  raises `StreamError(ErrorKind.END_OF_FILE)` when too few bytes remain.
- `strawberry.base64_codec`: `encode` and `decode`. Encoded text is padded with
  `=` to a multiple of three characters, not four; `decode` ignores trailing
  `=` and raises `ValueError` on characters outside the alphabet.
- `strawberry.endian`: `reverse_bytes`, `to_big_endian`, `to_little_endian`,
  `from_big_endian`, `from_little_endian`, each taking the value and its width
  in bytes.
- `strawberry.table`: `from_string` and `from_file` split delimiter-separated
  text (tab by default) into rows of fields; `from_file` returns `None` when the
  file cannot be read.
- `strawberry.log`: level-filtered logging (`Level`, `set_level`, `trace`,
  `debug`, `info`, `warning`, `error`) to standard output, errors to standard
  error, optionally copied to a file with `set_output_file`.
- `strawberry.checks`: `check`, `check_eq`, `check_neq`, `check_implication`
  (raise `AssertionError`) and `unreachable` (raises `UnreachableError`).

**Messaging**

- `strawberry.broadcaster`: subclasses of `Receiver` (or a `CallbackReceiver`)
  receive every value of their types sent by any `Broadcaster.broadcast`.
- `strawberry.channel`: `ChannelBroadcaster` sends only to the
  `ChannelReceiver`s registered with it, held weakly.

**Sync, timing and processes**

- `strawberry.mutex`: `Mutex` guards a value behind a re-entrant lock;
  `lock` and `try_lock` return a `MutexGuard` usable as a context manager.
  `SharedMutex` is a possibly empty handle to a shared `Mutex`.
- `strawberry.condition_variable`: `ConditionVariable` with `wait`,
  `wait_for`, `notify_one` and `notify_all`.
- `strawberry.clock`: `Clock`, a stopwatch (`start`, `stop`, `read`, `restart`).
- `strawberry.metronome`: `Metronome(frequency, preemption)` is true once a
  period has elapsed; `tick` carries lateness into the next period.
- `strawberry.scoped_timer`: `ScopedTimer(name)` logs its block's duration at
  trace level on exit.
- `strawberry.process`: `Process(executable, arguments)` starts a program;
  `wait` returns a `ProcessResult` with its `exit_code`.

## Installation

```
pip install .
```

## Examples

```python
from strawberry.vector import Vector
from strawberry.base64_codec import encode, decode
from strawberry.circular_buffer import CircularBuffer
from strawberry import log

v = Vector(1.0, 2.0, 2.0)
print(v.magnitude())            # 3.0

print(encode(b"Man"))           # "TWFu=="
print(bytes(decode("TWFu")))    # b"Man"

buf = CircularBuffer(2)
for item in (1, 2, 3):
    buf.push(item)
print(buf.pop(), buf.pop())     # 2 3

log.set_level(log.Level.INFO)
log.info("ready after {} seconds", 1.5)   # [INFO]	ready after 1.5 seconds
```

Timing a block of code:

```python
from strawberry.scoped_timer import ScopedTimer

with ScopedTimer("load"):
    ...  # elapsed seconds are logged at trace level on exit
```

## What it does not do

There is no command-line program. `DynamicByteBuffer` reads raw file bytes
only; it does not decode images.

## Running the tests

```
pip install .[test]
pytest
```