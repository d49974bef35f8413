# infinitensor

Building blocks for a tensor graph runtime, in plain Python with no
third-party dependencies.

## Modules

- `infinitensor.errors`
  - `InfiniError`, a `RuntimeError` raised when a check fails.
  - `ensure(condition, info)` raises `InfiniError("Assertion failed: <info>")`
    when `condition` is falsy.
  - `check_status(status, call)` raises
    `InfiniError("operators error (<call>): <status>")` when `status` is not 0.
  - `vec_to_string(values)` formats a sequence as `[a,b,c]`, with no spaces.
- `infinitensor.dtype`
  - `DType`, an enumeration of element types: `BYTE`, `BOOL`, `I8` to `I64`,
    `U8` to `U64`, `F8`, `F16`, `F32`, `F64`, `C16`, `C32`, `C64`, `C128` and
    `BF16`. `DType.size()` gives the element size in bytes, and `str(dtype)`
    gives the short name, for example `"F32"`.
  - `dtype_from_string(name)` accepts plain names (`"float32"`, `"int64"`,
    `"bfloat16"`, ...) and `torch.`-prefixed names (`"torch.half"`,
    `"torch.long"`, ...). It raises `ValueError` for an unknown name.
  - `dtype_to_string(dtype)` returns the canonical lower-case name. `C16` has
    no such name, so it raises `ValueError`.
- `infinitensor.op_type`
  - `OpType`, an `IntEnum` of operator kinds with fixed values, from
    `Unknown = 0` and `Add = 1` to `Tanh = 16`. `str(op)` gives its name.
- `infinitensor.kernel`
  - `DeviceType`: `CPU`, `CUDA`, `MLU`, `ASCEND`, `METAX`, `MOORE`,
    `ILUVATAR`, `KUNLUN` and `HYGON`.
  - `Kernel`, an abstract base class whose subclasses define
    `compute(op, context)`.
  - `KernelRecord`, a frozen record holding `kernel`, `name` and `id`. The id
    is the registration number, starting at 1.
  - `KernelRegistry` maps a `(device, op_type)` pair to one kernel.
    - `register(device, op_type, kernel, name)` raises `InfiniError` if the
      pair is already registered.
    - `get_kernel(device, op_type)` raises `InfiniError` if the pair is not
      registered.
    - `get_record(device, op_type)` raises `KeyError` if the pair is not
      registered.
    - `len(registry)` and `(device, op_type) in registry` also work.
  - `get_registry()` returns the registry shared by the whole process.
  - `register_all_devices(registry, op_type, kernel_factory)` registers a new
    kernel from the factory on every device except `HYGON`. Each kernel is
    named after the factory plus a device suffix, for example
    `AddKernel_NVIDIA`, `AddKernel_CPU` or `AddKernel_CAMBRICON`.
- `infinitensor.utils`
  - `fp16_to_fp32(bits)` decodes a half-precision bit pattern to a float.
  - `fp32_to_fp16(value)` encodes a float as a half-precision bit pattern.
    Results that would be subnormal become zero, and overflow gives infinity.
  - `infer_broadcast(a, b)` returns the NumPy-style broadcast of two shapes.
    It raises `InfiniError` if they are incompatible. A dimension may be an
    int or a symbolic value such as a string.
  - `broadcast_stride(input_shape, input_stride, output_shape)` returns the
    input's strides as seen through the output shape. Broadcast dimensions get
    stride 0.
  - `calculate_linear_offset(index, shape, stride)` returns the memory offset
    of the `index`-th element, counted in row-major order.

## Install

```
pip install .
```

## Example

```python
from infinitensor.dtype import dtype_from_string, dtype_to_string
from infinitensor.op_type import OpType
from infinitensor.kernel import DeviceType, Kernel, KernelRegistry
from infinitensor.utils import (
    calculate_linear_offset,
    fp16_to_fp32,
    fp32_to_fp16,
    infer_broadcast,
)

dt = dtype_from_string("torch.half")
print(str(dt), dt.size(), dtype_to_string(dt))     # F16 2 float16

print(fp16_to_fp32(0x3C00))                        # 1.0
print(hex(fp32_to_fp16(1.0)))                      # 0x3c00

print(infer_broadcast([2, 1, "n"], [3, "n"]))      # [2, 3, 'n']

# element 5 of a 2x3 tensor stored column-major
print(calculate_linear_offset(5, [2, 3], [1, 2]))  # 5


class AddKernel(Kernel):
    def compute(self, op, context):
        ...


registry = KernelRegistry()
registry.register(DeviceType.CPU, OpType.Add, AddKernel(), "AddKernel_CPU")
kernel = registry.get_kernel(DeviceType.CPU, OpType.Add)
print(registry.get_record(DeviceType.CPU, OpType.Add).id)  # 1
```

## What this package does not do

This package has no tensor or graph objects, no shape inference for
operators, no runtime and no memory allocation or device transfer. It also
provides no working kernels. `Kernel` is only an interface, and the registry
stores whatever kernels you register. There is no command-line program.

## Tests

```
pip install ".[test]"
pytest
```