# cursor_binary_parser

A small helper for parsing binary packed data without consuming it. A
`BinaryCursor` takes a bytes-like object (`bytes`, `bytearray` or
`memoryview`), reads little-endian integers and floats from its current
position, and keeps a stack of saved positions so you can jump elsewhere and
come back.

## Installation

```
pip install cursor_binary_parser
```

## Usage

```python
from cursor_binary_parser.binary_cursor import BinaryCursor, BinaryCursorJump

cursor = BinaryCursor(bytes([0x42, 0x24, 0x00, 0x01]))

assert cursor.parse_u8() == 0x42
assert cursor.position == 1

# Jump somewhere temporarily; the position is restored when the block ends.
with BinaryCursorJump(cursor) as jump:
    jump.jump(2)
    assert cursor.parse_u16_le() == 0x0100

assert cursor.position == 1
```

### Position

`position` is a property: read it for the current offset, assign to it to move
the cursor. Assigning a negative value raises `ValueError`. Positions past the
end of the data may be set; reading from there fails. `len(cursor)` gives the
length of the data.

### Reading values

`parse_u8`, `parse_i8`, `parse_u16_le`, `parse_i16_le`, `parse_u32_le`,
`parse_i32_le`, `parse_u64_le`, `parse_i64_le`, `parse_f32_le` and
`parse_f64_le` each read one value from the current position and advance it.
`parse_bytes(count)` returns exactly `count` bytes as `bytes`; a negative count
raises `ValueError`.

Reading past the end raises `BinaryCursorError` and leaves the cursor at the
end of the data.

`count(parser, n)` calls `parser(cursor)` `n` times and returns the results as
a list:

```python
cursor = BinaryCursor(b"\x01\x02\x03\x04")
assert cursor.count(BinaryCursor.parse_u8, 4) == [1, 2, 3, 4]
```

### Saved positions

- `push_location()` saves the current position.
- `restore_location()` pops the most recent saved position and moves back to
  it, returning `True`, or returns `False` if nothing was saved.
- `pop_location()` removes the most recent saved position without moving,
  returning it, or `None` if nothing was saved.

### Temporary jumps

`BinaryCursorJump(cursor)` offers:

- `jump(location)` saves the current position and moves to `location`.
- `jump_relative(offset)` saves the current position and moves by `offset`
  bytes (negative moves back). Moving before the start of the data raises
  `BinaryCursorError`; the position was still saved, so leaving the block
  puts the cursor back where it was.

Use it as a context manager, or call `close()` yourself. Closing restores the
most recent saved position once; later calls do nothing. The jumping object
is available as `jump.cursor`.

```python
cursor = BinaryCursor(b"\x01\x02\x03\x04\x05")
cursor.position = 2
with BinaryCursorJump(cursor) as jump:
    jump.jump_relative(-1)
    assert cursor.position == 1
assert cursor.position == 2
```

### Errors

`BinaryCursorError` is an `Exception`; its message begins with
`"Parse error: "` and the bare description is kept in its `reason` attribute.

## Running the tests

```
pip install -e ".[test]"
pytest
```