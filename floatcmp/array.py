# Copyright 2020 Francesco Ceccon
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Element-wise almost equality of numpy arrays.

The functions in this module apply the same rules as `IEEE754.compare` to
every pair of elements, broadcasting `a` and `b` against each other.
"""
import numbers

import numpy as np

from floatcmp.error import MixedWidthError
from floatcmp.ieee754 import comparator_for
from floatcmp.type_with_size import type_with_size


def almost_equal(a, b):
    """Test element-wise if `a` and `b` are almost equal.

    Parameters
    ----------
    a : array_like
        float32 or float64 array
    b : array_like
        array with the same dtype as `a`. A Python `float` or `int` on
        either side is converted to the dtype of the other operand.

    Returns
    -------
    ndarray of bool

    Raises
    ------
    MixedWidthError
        if `a` and `b` have different dtypes
    UnsupportedWidthError
        if the dtype is not float32 or float64
    """
    cmp, a, b = _operands(a, b)
    a_bits = a.view(cmp.bit_data_type)
    b_bits = b.view(cmp.bit_data_type)

    nan = _is_nan(cmp, a_bits) | _is_nan(cmp, b_bits)
    with np.errstate(over='ignore', invalid='ignore'):
        close = np.abs(a - b) <= cmp.max_diff
    same_sign = (a_bits & cmp.sign_bit_mask) == (b_bits & cmp.sign_bit_mask)
    ulps_close = _ulp_distance(cmp, a_bits, b_bits) <= cmp.max_ulps_diff
    return ~nan & (close | (same_sign & ulps_close))


def ulp_distance(a, b):
    """Return the element-wise ULP distance between `a` and `b`.

    Returns
    -------
    ndarray of unsigned integers of the same width as the dtype
    """
    cmp, a, b = _operands(a, b)
    return _ulp_distance(
        cmp,
        a.view(cmp.bit_data_type),
        b.view(cmp.bit_data_type),
    )


def _operands(a, b):
    # Python scalars take the dtype of the other operand
    if _is_python_scalar(b) and not _is_python_scalar(a):
        a = np.asarray(a)
        b = _cast(b, a.dtype)
    elif _is_python_scalar(a) and not _is_python_scalar(b):
        b = np.asarray(b)
        a = _cast(a, b.dtype)
    a = np.asarray(a)
    b = np.asarray(b)
    if a.dtype != b.dtype:
        raise MixedWidthError(
            'Cannot compare {} with {}'.format(a.dtype.name, b.dtype.name)
        )
    return comparator_for(a.dtype), a, b


def _is_python_scalar(value):
    return isinstance(value, numbers.Real) and not isinstance(value, np.generic)


def _cast(value, dtype):
    with np.errstate(over='ignore'):
        return np.asarray(value, dtype=dtype)


def _is_nan(cmp, bits):
    exponent = bits & cmp.exponent_bit_mask
    significand = bits & cmp.significand_bit_mask
    return (exponent == cmp.exponent_bit_mask) & (significand != 0)


def _ordered_bits(cmp, bits):
    t_int = type_with_size(cmp.bit_count // 8).t_int
    magnitude = (bits & ~cmp.sign_bit_mask).astype(t_int)
    return np.where((bits & cmp.sign_bit_mask) != 0, -magnitude, magnitude)


def _ulp_distance(cmp, a_bits, b_bits):
    a_ordered = _ordered_bits(cmp, a_bits)
    b_ordered = _ordered_bits(cmp, b_bits)
    # Differences of opposite sign numbers do not fit in the signed type,
    # they wrap around to the right unsigned value.
    with np.errstate(over='ignore'):
        distance = np.where(
            a_ordered >= b_ordered,
            a_ordered - b_ordered,
            b_ordered - a_ordered,
        )
    return distance.astype(cmp.bit_data_type)
