"""Binary wire encoding of arrays as used by the PostgreSQL protocol."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Any, Callable

from pgarray.array import Array, Dimension

_I32_MAX = 2**31 - 1

_HEADER = struct.Struct(">iiI")
_DIMENSION = struct.Struct(">ii")
_LENGTH = struct.Struct(">i")


class ArrayFormatError(ValueError):
    """Raised when array data cannot be encoded or decoded."""


@dataclass(frozen=True)
class ElementCodec:
    """Encodes and decodes the elements of one PostgreSQL type."""

    oid: int
    name: str
    encoder: Callable[[Any], bytes]
    decoder: Callable[[bytes], Any]

    def encode(self, value: Any) -> bytes | None:
        """Encode ``value``; ``None`` stands for SQL NULL."""
        if value is None:
            return None
        try:
            return self.encoder(value)
        except (struct.error, UnicodeEncodeError, TypeError) as exc:
            raise ArrayFormatError(f"cannot encode {value!r} as {self.name}") from exc

    def decode(self, raw: bytes | None) -> Any:
        """Decode one element; ``None`` stands for SQL NULL."""
        if raw is None:
            return None
        try:
            return self.decoder(raw)
        except (struct.error, UnicodeDecodeError) as exc:
            raise ArrayFormatError(f"invalid {self.name} value") from exc


def _decode_bool(raw: bytes) -> bool:
    if len(raw) != 1:
        raise ArrayFormatError("invalid buffer size")
    return raw[0] != 0


def _fixed(fmt: str) -> tuple[Callable[[Any], bytes], Callable[[bytes], Any]]:
    packer = struct.Struct(fmt)
    return packer.pack, lambda raw: packer.unpack(raw)[0]


def _text_codec(oid: int, name: str) -> ElementCodec:
    return ElementCodec(oid, name, lambda v: v.encode("utf-8"), lambda r: bytes(r).decode("utf-8"))


def _fixed_codec(oid: int, name: str, fmt: str) -> ElementCodec:
    encoder, decoder = _fixed(fmt)
    return ElementCodec(oid, name, encoder, decoder)


_CODECS = {
    codec.oid: codec
    for codec in (
        ElementCodec(16, "bool", lambda v: b"\x01" if v else b"\x00", _decode_bool),
        ElementCodec(17, "bytea", bytes, bytes),
        _fixed_codec(18, "char", ">b"),
        _text_codec(19, "name"),
        _fixed_codec(20, "int8", ">q"),
        _fixed_codec(21, "int2", ">h"),
        _fixed_codec(23, "int4", ">i"),
        _text_codec(25, "text"),
        _fixed_codec(700, "float4", ">f"),
        _fixed_codec(701, "float8", ">d"),
        _text_codec(1042, "bpchar"),
        _text_codec(1043, "varchar"),
    )
}


def codec_for_oid(oid: int) -> ElementCodec:
    """Return the codec for the element type with the given OID."""
    try:
        return _CODECS[oid]
    except KeyError:
        raise ValueError(f"unsupported element type oid {oid}") from None


class _Reader:
    def __init__(self, raw: bytes) -> None:
        self._raw = bytes(raw)
        self._pos = 0

    def take(self, size: int) -> bytes:
        end = self._pos + size
        if end > len(self._raw):
            raise ArrayFormatError("unexpected end of data")
        chunk = self._raw[self._pos:end]
        self._pos = end
        return chunk

    def unpack(self, layout: struct.Struct) -> tuple[Any, ...]:
        return layout.unpack(self.take(layout.size))

    @property
    def exhausted(self) -> bool:
        return self._pos == len(self._raw)


def array_from_sql(raw: bytes, codec: ElementCodec) -> Array:
    """Decode a binary array value whose elements use ``codec``."""
    reader = _Reader(raw)
    ndim, _has_nulls, _element_oid = reader.unpack(_HEADER)
    if ndim < 0:
        raise ArrayFormatError("invalid dimension count")

    dimensions = []
    count = 1
    for _ in range(ndim):
        length, lower_bound = reader.unpack(_DIMENSION)
        if length < 0:
            raise ArrayFormatError("invalid dimension size")
        count *= length
        if count > _I32_MAX:
            raise ArrayFormatError("too many array elements")
        dimensions.append(Dimension(length, lower_bound))
    if ndim == 0:
        count = 0

    elements = []
    for _ in range(count):
        (length,) = reader.unpack(_LENGTH)
        value = None if length < 0 else reader.take(length)
        elements.append(codec.decode(value))
    if not reader.exhausted:
        raise ArrayFormatError("invalid message length: array not drained")

    return Array(elements, dimensions)


def array_to_sql(array: Array, codec: ElementCodec) -> bytes:
    """Encode ``array`` in binary form with elements written by ``codec``."""
    dimensions = array.dimensions()
    try:
        out = bytearray(_HEADER.pack(len(dimensions), 0, codec.oid))
        for dim in dimensions:
            out += _DIMENSION.pack(dim.len, dim.lower_bound)
    except struct.error as exc:
        raise ArrayFormatError("array dimensions out of range") from exc

    has_nulls = False
    for value in array:
        encoded = codec.encode(value)
        if encoded is None:
            has_nulls = True
            out += _LENGTH.pack(-1)
            continue
        if len(encoded) > _I32_MAX:
            raise ArrayFormatError("value too large to transmit")
        out += _LENGTH.pack(len(encoded))
        out += encoded

    if has_nulls:
        _LENGTH.pack_into(out, 4, 1)
    return bytes(out)