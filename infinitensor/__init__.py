"""Error helpers, element data types, operator types, a kernel registry, and broadcasting and half-precision utilities."""

__version__ = "0.1.0"
__all__ = ["errors", "dtype", "op_type", "kernel", "utils"]