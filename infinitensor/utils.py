"""Broadcasting, offset and half-precision conversion helpers."""

from __future__ import annotations

import math
import struct
from collections.abc import Hashable, Sequence

from infinitensor.errors import ensure

Dim = Hashable
"""A dimension: a concrete int or a symbolic value such as a name."""

_F32_INF_BITS = 0x7F800000


def _is_one(dim: Dim) -> bool:
    return isinstance(dim, int) and not isinstance(dim, bool) and dim == 1


def broadcast_stride(input_shape: Sequence[Dim], input_stride: Sequence[Dim],
                     output_shape: Sequence[Dim]) -> list[Dim]:
    """Stride of the input seen through *output_shape*; broadcast dims get 0.

    Dimensions are aligned from the right, as in NumPy.
    """
    ensure(len(input_shape) == len(input_stride),
           "Input shape and stride must have the same rank")
    shift = len(output_shape) - len(input_shape)
    result: list[Dim] = []
    for out_idx in range(len(output_shape)):
        in_idx = out_idx - shift
        if in_idx < 0 or _is_one(input_shape[in_idx]):
            result.append(0)
        else:
            result.append(input_stride[in_idx])
    return result


def infer_broadcast(a: Sequence[Dim], b: Sequence[Dim]) -> list[Dim]:
    """Shape that *a* and *b* broadcast to; raises InfiniError if incompatible."""
    rank = max(len(a), len(b))
    padded_a = [1] * (rank - len(a)) + list(a)
    padded_b = [1] * (rank - len(b)) + list(b)
    result: list[Dim] = []
    for a_dim, b_dim in zip(padded_a, padded_b):
        ensure(a_dim == b_dim or _is_one(a_dim) or _is_one(b_dim),
               f"cannot broadcast {a_dim} with {b_dim}")
        result.append(b_dim if _is_one(a_dim) else a_dim)
    return result


def calculate_linear_offset(index: int, shape: Sequence[int],
                            stride: Sequence[int]) -> int:
    """Memory offset of the *index*-th element in row-major order."""
    if len(stride) < len(shape):
        raise IndexError("stride has fewer entries than shape")
    indices: list[int] = []
    remaining = index
    for dim in reversed(shape):
        remaining, position = divmod(remaining, dim)
        indices.append(position)
    indices.reverse()
    return sum(i * s for i, s in zip(indices, stride))


def _bits_to_f32(bits: int) -> float:
    return struct.unpack("<f", struct.pack("<I", bits & 0xFFFFFFFF))[0]


def _f32_to_bits(value: float) -> int:
    try:
        return struct.unpack("<I", struct.pack("<f", value))[0]
    except OverflowError:
        sign = 1 if math.copysign(1.0, value) < 0 else 0
        return (sign << 31) | _F32_INF_BITS


def fp16_to_fp32(bits: int) -> float:
    """Decode a 16-bit half-precision bit pattern to a float."""
    sign = (bits >> 15) & 0x1
    exponent = (bits >> 10) & 0x1F
    mantissa = bits & 0x3FF

    if exponent == 0:
        if mantissa == 0:
            return _bits_to_f32(sign << 31)
        while not mantissa & 0x400:
            mantissa <<= 1
            exponent -= 1
        exponent += 1
        mantissa &= 0x3FF
    elif exponent == 31:
        return _bits_to_f32((sign << 31) | _F32_INF_BITS | mantissa)

    return _bits_to_f32((sign << 31) | ((exponent + 112) << 23) | (mantissa << 13))


def fp32_to_fp16(value: float) -> int:
    """Encode *value* as a 16-bit half-precision bit pattern.

    Subnormal results flush to zero and overflow saturates to infinity.
    """
    bits = _f32_to_bits(value)
    sign = (bits >> 31) & 0x1
    exponent = (bits >> 23) & 0xFF
    mantissa = bits & 0x7FFFFF

    if exponent == 0:
        return sign << 15
    if exponent == 255:
        result = (sign << 15) | 0x7C00
        if mantissa:
            result |= mantissa >> 13
        return result

    new_exponent = exponent - 112
    if new_exponent >= 31:
        return (sign << 15) | 0x7C00
    if new_exponent <= 0:
        return sign << 15

    rounded = mantissa + 0x1000
    if rounded & 0x800000:
        rounded = 0
        new_exponent += 1
        if new_exponent >= 31:
            return (sign << 15) | 0x7C00

    return (sign << 15) | (new_exponent << 10) | (rounded >> 13)