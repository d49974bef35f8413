"""Element data types and their string forms."""

from __future__ import annotations

from enum import Enum, auto


class DType(Enum):
    """Element type of a tensor."""

    BYTE = auto()
    BOOL = auto()
    I8 = auto()
    I16 = auto()
    I32 = auto()
    I64 = auto()
    U8 = auto()
    U16 = auto()
    U32 = auto()
    U64 = auto()
    F8 = auto()
    F16 = auto()
    F32 = auto()
    F64 = auto()
    C16 = auto()
    C32 = auto()
    C64 = auto()
    C128 = auto()
    BF16 = auto()

    def size(self) -> int:
        """Size of one element in bytes."""
        return _SIZES[self]

    def __str__(self) -> str:
        return self.name


_SIZES = {
    DType.BYTE: 1,
    DType.BOOL: 1,
    DType.I8: 1,
    DType.I16: 2,
    DType.I32: 4,
    DType.I64: 8,
    DType.U8: 1,
    DType.U16: 2,
    DType.U32: 4,
    DType.U64: 8,
    DType.F8: 1,
    DType.F16: 2,
    DType.F32: 4,
    DType.F64: 8,
    DType.C16: 2,
    DType.C32: 4,
    DType.C64: 8,
    DType.C128: 16,
    DType.BF16: 2,
}

_FROM_STRING = {
    "byte": DType.BYTE,
    "bool": DType.BOOL,
    "torch.bool": DType.BOOL,
    "int8": DType.I8,
    "torch.int8": DType.I8,
    "int16": DType.I16,
    "torch.int16": DType.I16,
    "torch.short": DType.I16,
    "int32": DType.I32,
    "torch.int32": DType.I32,
    "torch.int": DType.I32,
    "int64": DType.I64,
    "torch.int64": DType.I64,
    "torch.long": DType.I64,
    "uint8": DType.U8,
    "torch.uint8": DType.U8,
    "uint16": DType.U16,
    "torch.uint16": DType.U16,
    "uint32": DType.U32,
    "torch.uint32": DType.U16,
    "uint64": DType.U64,
    "torch.uint64": DType.U64,
    "fp8": DType.F8,
    "float16": DType.F16,
    "torch.float16": DType.F16,
    "torch.half": DType.F16,
    "float32": DType.F32,
    "torch.float32": DType.F32,
    "torch.float": DType.F32,
    "double": DType.F64,
    "float64": DType.F64,
    "torch.float64": DType.F64,
    "torch.double": DType.F64,
    "complex32": DType.C32,
    "torch.complex32": DType.C32,
    "torch.chalf": DType.C64,
    "complex64": DType.C64,
    "torch.complex64": DType.C64,
    "torch.cfloat": DType.C64,
    "complex128": DType.C128,
    "torch.complex128": DType.C128,
    "torch.cdouble": DType.C128,
    "bfloat16": DType.BF16,
}

_TO_STRING = {
    DType.BYTE: "byte",
    DType.BOOL: "bool",
    DType.I8: "int8",
    DType.I16: "int16",
    DType.I32: "int32",
    DType.I64: "int64",
    DType.U8: "uint8",
    DType.U16: "uint16",
    DType.U32: "uint32",
    DType.U64: "uint64",
    DType.F8: "fp8",
    DType.F16: "float16",
    DType.F32: "float32",
    DType.F64: "float64",
    DType.C32: "complex32",
    DType.C64: "complex64",
    DType.C128: "complex128",
    DType.BF16: "bfloat16",
}


def dtype_from_string(name: str) -> DType:
    """Look up a DType by its plain or ``torch.``-prefixed name."""
    try:
        return _FROM_STRING[name]
    except KeyError:
        raise ValueError(f"Unknown data type: {name}") from None


def dtype_to_string(dtype: DType) -> str:
    """Return the canonical lower-case name of *dtype*."""
    try:
        return _TO_STRING[dtype]
    except KeyError:
        raise ValueError(f"Unknown data type: {dtype}") from None