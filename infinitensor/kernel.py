"""Devices, kernel interface and the registry that maps them to operators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from infinitensor.errors import InfiniError, ensure
from infinitensor.op_type import OpType


class DeviceType(Enum):
    """Kind of device a kernel runs on."""

    CPU = auto()
    CUDA = auto()
    MLU = auto()
    ASCEND = auto()
    METAX = auto()
    MOORE = auto()
    ILUVATAR = auto()
    KUNLUN = auto()
    HYGON = auto()


class Kernel(ABC):
    """A computation for one operator kind on one device."""

    @abstractmethod
    def compute(self, op: Any, context: Any) -> None:
        """Run *op* within the runtime *context*."""


@dataclass(frozen=True)
class KernelRecord:
    """A registered kernel with its name and registration number."""

    kernel: Kernel
    name: str
    id: int


class KernelRegistry:
    """Maps (device, operator type) pairs to kernels."""

    def __init__(self) -> None:
        self._kernels: dict[tuple[DeviceType, OpType], KernelRecord] = {}
        self._count = 0

    def register(self, device: DeviceType, op_type: OpType,
                 kernel: Kernel, name: str) -> bool:
        """Register *kernel*; a pair may only be registered once."""
        key = (device, op_type)
        ensure(key not in self._kernels, "Kernel already registered")
        self._count += 1
        self._kernels[key] = KernelRecord(kernel, name, self._count)
        return True

    def get_kernel(self, device: DeviceType, op_type: OpType) -> Kernel:
        """Return the kernel for the pair or raise InfiniError."""
        record = self._kernels.get((device, op_type))
        if record is None:
            raise InfiniError("Assertion failed: Kernel not found")
        return record.kernel

    def get_record(self, device: DeviceType, op_type: OpType) -> KernelRecord:
        """Return the full record for the pair; KeyError if absent."""
        return self._kernels[(device, op_type)]

    def __len__(self) -> int:
        return len(self._kernels)

    def __contains__(self, key: object) -> bool:
        return key in self._kernels


_registry = KernelRegistry()


def get_registry() -> KernelRegistry:
    """Return the process-wide registry."""
    return _registry


_ALL_DEVICES = (
    (DeviceType.CUDA, "NVIDIA"),
    (DeviceType.CPU, "CPU"),
    (DeviceType.MLU, "CAMBRICON"),
    (DeviceType.ASCEND, "ASCEND"),
    (DeviceType.METAX, "METAX"),
    (DeviceType.MOORE, "MOORE"),
    (DeviceType.ILUVATAR, "ILUVATAR"),
    (DeviceType.KUNLUN, "KUNLUN"),
)


def register_all_devices(registry: KernelRegistry, op_type: OpType,
                         kernel_factory: Callable[[], Kernel]) -> None:
    """Register a fresh kernel from *kernel_factory* on every supported device."""
    base = getattr(kernel_factory, "__name__", type(kernel_factory).__name__)
    for device, suffix in _ALL_DEVICES:
        registry.register(device, op_type, kernel_factory(), f"{base}_{suffix}")