# bytecord

Bounds-checked, alignment-aware reading and building of binary data.
Use it for binary formats and network protocols. It is a library only. It
has no command-line tool.

## Installation

```
pip install bytecord
```

## Reading

`bytecord.cord.ByteCord` wraps a `bytes`, `bytearray` or `memoryview`.
Call `read()` to get a `bytecord.reader.ByteCordReader` with 1-byte
alignment, or `read_with_alignment(n)` to get one with another alignment.
Each read moves the position past the bytes it read and then up to the next
multiple of the alignment. A read that would run past the end returns `None`,
and the position stays where it was.

```python
from bytecord.cord import ByteCord

cord = ByteCord(bytes(100))
reader = cord.read_with_alignment(4)

header = reader.next_n(10)      # position 0 -> 10, aligned to 12
number = reader.next_le_u32()   # position 12 -> 16
print(reader.remaining())       # 84
```

Reader methods:

- `next_n(length)` and `next(size)` return the bytes as `bytes`, or `None`.
- `skip(length)` moves past the bytes and returns whether enough bytes
  remained.
- `remaining()` returns the number of unread bytes.
- Typed readers return an `int`, or `None`. They cover 8, 16, 32, 64 and
  128-bit integers, signed and unsigned, in big- and little-endian order:
  `next_u8`, `next_i8`, `next_be_u16`, `next_le_u16`, and so on up to
  `next_be_i128` and `next_le_i128`.

## Direct access

```python
cord.at_n(0, 16)   # 16 bytes from offset 0, or None if out of bounds
cord.at(4, 4)      # 4 bytes from offset 4
len(cord), cord.is_empty()
```

`at_n_mut(position, length)` and `at_mut(position, size)` return a writable
`memoryview` into the wrapped data. These two methods behave differently
from the others in three ways:

- They return `None` when the range reaches the end of the buffer, not only
  when it goes past it.
- They raise `TypeError` if the data is read-only, for example `bytes`.
- They need writable data, such as a `bytearray`.

A negative position or length raises `ValueError`.

## Building

`bytecord.builder.ByteCordBuilder` appends data and pads with zero bytes
after each append, so that the length stays a multiple of the alignment.

```python
from bytecord.builder import ByteCordBuilder

builder = ByteCordBuilder(1)   # alignment 1: no padding
builder.append_le_u32(1111)
builder.append_u8(1)
builder.append_le_i64(-3919)
data = builder.into_bytes()
```

Builder methods:

- `append(data)` and `append_from_slice(data)` append raw bytes.
- The typed appenders match the readers: `append_u8`, `append_i8`,
  `append_be_u16` and so on up to `append_le_i128`. A value that does not
  fit the type raises `OverflowError`.
- `ByteCordBuilder.with_capacity(capacity, alignment)` also makes a builder.
  `capacity` is only a size hint and must not be negative.

For the reader and the builder, an alignment that is not a power of two
raises `ValueError`. Alignment 1 counts as a power of two.

## Running the tests

```
pip install -e ".[test]"
pytest
```