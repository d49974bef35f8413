import pytest

from infinitensor.errors import InfiniError
from infinitensor.kernel import (
    DeviceType,
    Kernel,
    KernelRecord,
    KernelRegistry,
    get_registry,
    register_all_devices,
)
from infinitensor.op_type import OpType


class RecordingKernel(Kernel):
    def __init__(self):
        self.calls = []

    def compute(self, op, context):
        self.calls.append((op, context))


def test_kernel_is_abstract():
    with pytest.raises(TypeError):
        Kernel()


def test_register_and_get_kernel():
    registry = KernelRegistry()
    kernel = RecordingKernel()
    assert registry.register(DeviceType.CPU, OpType.Add, kernel, "AddCpu")
    found = registry.get_kernel(DeviceType.CPU, OpType.Add)
    assert found is kernel
    found.compute("op", "ctx")
    assert kernel.calls == [("op", "ctx")]


def test_record_ids_increase_in_registration_order():
    registry = KernelRegistry()
    registry.register(DeviceType.CPU, OpType.Add, RecordingKernel(), "a")
    registry.register(DeviceType.CPU, OpType.Mul, RecordingKernel(), "b")
    first = registry.get_record(DeviceType.CPU, OpType.Add)
    second = registry.get_record(DeviceType.CPU, OpType.Mul)
    assert isinstance(first, KernelRecord)
    assert first.name == "a"
    assert second.id == first.id + 1


def test_duplicate_registration_raises():
    registry = KernelRegistry()
    registry.register(DeviceType.CPU, OpType.Relu, RecordingKernel(), "r")
    with pytest.raises(InfiniError, match="Kernel already registered"):
        registry.register(DeviceType.CPU, OpType.Relu, RecordingKernel(), "r")
    assert len(registry) == 1


def test_missing_kernel_raises():
    registry = KernelRegistry()
    with pytest.raises(InfiniError, match="Kernel not found"):
        registry.get_kernel(DeviceType.CUDA, OpType.Gemm)


def test_missing_record_raises_key_error():
    registry = KernelRegistry()
    with pytest.raises(KeyError):
        registry.get_record(DeviceType.CPU, OpType.Gemm)


def test_get_registry_is_singleton():
    kernel = RecordingKernel()
    get_registry().register(DeviceType.HYGON, OpType.Unknown, kernel, "singleton")
    assert get_registry().get_kernel(DeviceType.HYGON, OpType.Unknown) is kernel
    assert get_registry().get_record(DeviceType.HYGON, OpType.Unknown).name == "singleton"


def test_register_all_devices_names_and_instances():
    registry = KernelRegistry()
    register_all_devices(registry, OpType.Tanh, RecordingKernel)
    assert (DeviceType.HYGON, OpType.Tanh) not in registry
    assert len(registry) == len(DeviceType) - 1
    cpu = registry.get_record(DeviceType.CPU, OpType.Tanh)
    cuda = registry.get_record(DeviceType.CUDA, OpType.Tanh)
    mlu = registry.get_record(DeviceType.MLU, OpType.Tanh)
    assert cpu.name == "RecordingKernel_CPU"
    assert cuda.name == "RecordingKernel_NVIDIA"
    assert mlu.name == "RecordingKernel_CAMBRICON"
    assert cpu.kernel is not cuda.kernel


def test_register_all_devices_twice_raises():
    registry = KernelRegistry()
    register_all_devices(registry, OpType.Silu, RecordingKernel)
    with pytest.raises(InfiniError):
        register_all_devices(registry, OpType.Silu, RecordingKernel)