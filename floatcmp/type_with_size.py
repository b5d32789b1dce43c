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
"""Map a byte width to the integer and floating point types of that width."""
from collections import namedtuple

import numpy as np

from floatcmp.error import UnsupportedWidthError


TypeWithSize = namedtuple('TypeWithSize', ['t_int', 't_uint', 't_float'])


# Sizes without a float type can still be used to view raw bits.
_TYPES_WITH_SIZE = {
    1: TypeWithSize(np.int8, np.uint8, None),
    2: TypeWithSize(np.int16, np.uint16, None),
    4: TypeWithSize(np.int32, np.uint32, np.float32),
    8: TypeWithSize(np.int64, np.uint64, np.float64),
}


def supported_sizes():
    """Return the supported byte widths, in increasing order."""
    return sorted(_TYPES_WITH_SIZE.keys())


def type_with_size(size):
    """Return the integer and floating point types `size` bytes wide.

    Parameters
    ----------
    size : int
        width in bytes

    Returns
    -------
    TypeWithSize
        signed integer, unsigned integer and floating point types. The
        floating point type is `None` for widths without one.

    Raises
    ------
    UnsupportedWidthError
        if no integer type is `size` bytes wide
    """
    types = _TYPES_WITH_SIZE.get(size)
    if types is None:
        raise UnsupportedWidthError(
            'Unsupported width {} bytes, expected one of {}'.format(
                size, supported_sizes())
        )
    return types


def float_type_with_size(float_type):
    """Return the `TypeWithSize` of a 4 or 8 bytes floating point type.

    Raises
    ------
    UnsupportedWidthError
        if `float_type` is not the floating point type of its width
    """
    dtype = np.dtype(float_type)
    types = type_with_size(dtype.itemsize)
    if types.t_float is None or np.dtype(types.t_float) != dtype:
        raise UnsupportedWidthError(
            'Unsupported floating point type {}'.format(dtype.name)
        )
    return types
