"""Operator kinds known to the graph."""

from __future__ import annotations

from enum import IntEnum


class OpType(IntEnum):
    """Kind of an operator, with stable integer values."""

    Unknown = 0
    Add = 1
    Cast = 2
    Clip = 3
    Concat = 4
    Div = 5
    Gemm = 6
    Mul = 7
    MatMul = 8
    Relu = 9
    Sub = 10
    Transpose = 11
    Sigmoid = 12
    Silu = 13
    Gelu = 14
    Softplus = 15
    Tanh = 16

    def __str__(self) -> str:
        return self.name