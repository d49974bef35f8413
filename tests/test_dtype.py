import pytest

from infinitensor.dtype import DType, dtype_from_string, dtype_to_string


@pytest.mark.parametrize(
    "name, expected",
    [("float32", "F32"), ("bfloat16", "BF16"), ("int64", "I64"), ("byte", "BYTE")],
)
def test_str_matches_member_name(name, expected):
    assert str(dtype_from_string(name)) == expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("byte", 1),
        ("bool", 1),
        ("int8", 1),
        ("int16", 2),
        ("int32", 4),
        ("int64", 8),
        ("fp8", 1),
        ("float16", 2),
        ("float32", 4),
        ("float64", 8),
        ("complex32", 4),
        ("complex64", 8),
        ("complex128", 16),
        ("bfloat16", 2),
    ],
)
def test_every_dtype_has_expected_size(name, expected):
    assert dtype_from_string(name).size() == expected


def test_complex_size_is_twice_component_size():
    assert DType.C32.size() == 2 * DType.F16.size()
    assert DType.C64.size() == 2 * DType.F32.size()
    assert DType.C128.size() == 2 * DType.F64.size()


@pytest.mark.parametrize(
    "signed, unsigned, expected",
    [("int8", "uint8", 1), ("int16", "uint16", 2),
     ("int32", "uint32", 4), ("int64", "uint64", 8)],
)
def test_signed_and_unsigned_sizes_agree(signed, unsigned, expected):
    assert dtype_from_string(signed).size() == expected
    assert dtype_from_string(unsigned).size() == expected


def test_half_types_share_size():
    assert DType.F16.size() == DType.BF16.size()


def test_round_trip_for_named_types():
    for dtype in DType:
        if dtype is DType.C16:
            continue
        assert dtype_from_string(dtype_to_string(dtype)) is dtype


@pytest.mark.parametrize(
    "alias, expected",
    [
        ("torch.float", DType.F32),
        ("torch.half", DType.F16),
        ("torch.long", DType.I64),
        ("double", DType.F64),
        ("torch.cdouble", DType.C128),
        ("torch.chalf", DType.C64),
        ("torch.uint32", DType.U16),
    ],
)
def test_aliases(alias, expected):
    assert dtype_from_string(alias) is expected


def test_unknown_name_raises():
    with pytest.raises(ValueError, match="Unknown data type: float128"):
        dtype_from_string("float128")


def test_c16_has_no_string_name():
    with pytest.raises(ValueError, match="Unknown data type"):
        dtype_to_string(DType.C16)


def test_equality_follows_identity():
    assert dtype_from_string("float32") == DType.F32
    assert dtype_from_string("float32") != DType.F64