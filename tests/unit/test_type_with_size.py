# pylint: skip-file
import pytest
import numpy as np
from floatcmp.error import UnsupportedWidthError
from floatcmp.type_with_size import (
    type_with_size,
    float_type_with_size,
    supported_sizes,
)


@pytest.mark.parametrize('size,t_int,t_uint,t_float', [
    (1, np.int8, np.uint8, None),
    (2, np.int16, np.uint16, None),
    (4, np.int32, np.uint32, np.float32),
    (8, np.int64, np.uint64, np.float64),
])
def test_type_with_size(size, t_int, t_uint, t_float):
    types = type_with_size(size)
    assert types.t_int is t_int
    assert types.t_uint is t_uint
    assert types.t_float is t_float


@pytest.mark.parametrize('size', supported_sizes())
def test_integer_types_have_the_requested_width(size):
    types = type_with_size(size)
    assert np.dtype(types.t_int).itemsize == size
    assert np.dtype(types.t_uint).itemsize == size


@pytest.mark.parametrize('size', [0, 3, 5, 16, -4])
def test_unsupported_sizes_raise(size):
    with pytest.raises(UnsupportedWidthError):
        type_with_size(size)


def test_unsupported_width_error_is_a_type_error():
    assert issubclass(UnsupportedWidthError, TypeError)


class TestFloatTypeWithSize:
    def test_float32(self):
        assert float_type_with_size(np.float32).t_uint is np.uint32

    def test_float64(self):
        assert float_type_with_size(np.float64).t_uint is np.uint64

    def test_python_float_is_float64(self):
        assert float_type_with_size(float).t_float is np.float64

    def test_half_precision_is_not_supported(self):
        with pytest.raises(UnsupportedWidthError):
            float_type_with_size(np.float16)

    def test_integers_are_not_floats(self):
        with pytest.raises(UnsupportedWidthError):
            float_type_with_size(np.int32)
