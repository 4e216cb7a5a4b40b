# pgarray

Multi-dimensional arrays where each dimension has its own lower bound, as
PostgreSQL arrays do. The package also reads and writes the PostgreSQL binary
array format.

## Installing

```
pip install pgarray
```

## Arrays

`pgarray.array.Array` stores its elements flat, in row-major order, alongside
a list of `Dimension` entries. A `Dimension` is a frozen dataclass with a
`len` and a `lower_bound`.

```python
from pgarray.array import Array

a = Array.from_vec([0, 1, 2, 3], 0)
assert a[2] == 2

a.wrap(0)                              # now [[0, 1, 2, 3]]
a.push(Array.from_vec([4, 5, 6, 7], 0))
assert a[1, 2] == 6

a[0, 0] = 10
print(a)                               # [0:1][0:3]={{10,1,2,3},{4,5,6,7}}
```

- `Array(data, dimensions)` builds an array from flat data and its
  dimensions. It raises `ValueError("size mismatch")` if the number of
  elements is not the product of the dimension lengths. An array with no data
  and no dimensions is allowed.
- `Array.from_vec(data, lower_bound)` builds a one-dimensional array.
- `wrap(lower_bound)` adds an outer dimension of length 1.
- `push(other)` appends an array along the outermost dimension. The
  dimensions of `other`, lower bounds included, must equal this array's
  dimensions without the first one; otherwise it raises `ValueError`.
- Indexing, for reading and for assignment, takes a single integer or a tuple
  of integers, one for each dimension. `IndexError` is raised when the number
  of indices does not match the number of dimensions, when an index is below
  its dimension's lower bound, or when the resulting position lies past the
  end of the data. Upper bounds of the individual dimensions are not checked
  on their own.
- `dimensions()` returns a tuple of `Dimension`, outermost first.
  `to_list()` returns a copy of the elements. Iteration, `reversed()` and
  `len()` work on the flat elements in row-major order. Two arrays are equal
  when their dimensions and elements are equal. Arrays are not hashable.
- `str()` gives PostgreSQL's text form, such as `{0,1,2}`. A bounds prefix
  such as `[-3:1]=` appears only when some lower bound is not 1. An array
  without dimensions prints as `{}`.

## Binary format

`pgarray.binary` converts between `Array` values and the wire format
PostgreSQL uses for array values in binary mode. `None` stands for a NULL
element.

```python
from pgarray.array import Array
from pgarray.binary import codec_for_oid, array_to_sql, array_from_sql

int4 = codec_for_oid(23)
raw = array_to_sql(Array.from_vec([1, None, 3], 1), int4)
assert array_from_sql(raw, int4) == Array.from_vec([1, None, 3], 1)
```

- `codec_for_oid(oid)` returns the `ElementCodec` for one of these element
  types: `bool` (16), `bytea` (17), `char` (18), `name` (19), `int8` (20),
  `int2` (21), `int4` (23), `text` (25), `float4` (700), `float8` (701),
  `bpchar` (1042) and `varchar` (1043). Any other OID raises `ValueError`.
- `ElementCodec(oid, name, encoder, decoder)` is a frozen dataclass; you can
  build one for another type by giving it an `encoder` callable that turns a
  value into `bytes` and a `decoder` callable that turns `bytes` into a value.
  Its `encode(value)` and `decode(raw)` pass `None` through unchanged.
- `array_to_sql(array, codec)` writes the header, the dimensions and each
  element, sets the has-nulls flag when some element is `None`, and stores
  `codec.oid` as the element type.
- `array_from_sql(raw, codec)` reads such a value back into an `Array`. The
  element OID stored in the data is not checked against the codec.

Malformed or truncated input, trailing bytes, negative dimension counts or
lengths, and values the built-in codecs cannot pack raise `ArrayFormatError`,
a subclass of `ValueError`.

## What it does not do

The package does not connect to a database or send queries. It only encodes
and decodes array values; passing the bytes to and from a server is left to
whatever client you use. It does not parse PostgreSQL's text form of arrays
either; `str()` only produces it.