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
"""Bit level view of IEEE-754 floating point numbers and almost equality.

Two numbers are almost equal if they are within machine epsilon of each
other, or if they have the same sign and their bit patterns are at most
`max_ulps_diff` units in the last place apart. NaN is never almost equal
to anything, including NaN.
"""
import numbers
from enum import Enum

import numpy as np

from floatcmp.error import MixedWidthError
from floatcmp.logging import get_logger, DEBUG
from floatcmp.type_with_size import float_type_with_size


logger = get_logger(__name__)

_COMPARATORS = {}


class Comparison(Enum):
    """Decision reached by `IEEE754.compare`."""
    NAN = 0
    WITHIN_EPSILON = 1
    SIGN_MISMATCH = 2
    WITHIN_ULPS = 3
    ULPS_EXCEEDED = 4

    @property
    def is_equal(self):
        """Return `True` if the numbers compared are almost equal."""
        return self in (Comparison.WITHIN_EPSILON, Comparison.WITHIN_ULPS)


class IEEE754:
    """Immutable view over the bits of a floating point number.

    `IEEE754` is specialised for a floating point type with the `float_type`
    class keyword, which fixes the bit masks and tolerances of the subclass::

        class FloatCmp(IEEE754, float_type=np.float32):
            __slots__ = ()

    Specialising with a type other than a 4 or 8 bytes floating point type
    raises `UnsupportedWidthError` when the class is created.

    Parameters
    ----------
    value : float or IEEE754
        the number, converted to the comparator floating point type
    """
    __slots__ = ('_float', '_bits')

    # Makes numpy scalars return NotImplemented from `np.float32(x) == cmp`
    # so that Python falls back to `IEEE754.__eq__`.
    __array_ufunc__ = None

    # Almost equality is not transitive.
    __hash__ = None

    float_type = None
    bit_data_type = None
    bit_count = None
    significand_bit_count = None
    exponent_bit_count = None
    sign_bit_mask = None
    significand_bit_mask = None
    exponent_bit_mask = None
    max_diff = None
    max_ulps_diff = 4

    def __init_subclass__(cls, float_type=None, **kwargs):
        super().__init_subclass__(**kwargs)
        if float_type is None:
            return

        types = float_type_with_size(float_type)
        finfo = np.finfo(types.t_float)

        cls.float_type = types.t_float
        cls.bit_data_type = types.t_uint
        cls.bit_count = 8 * finfo.dtype.itemsize
        cls.significand_bit_count = finfo.nmant
        # The 1 is for the sign bit.
        cls.exponent_bit_count = cls.bit_count - 1 - cls.significand_bit_count

        all_bits = (1 << cls.bit_count) - 1
        sign = 1 << (cls.bit_count - 1)
        significand = all_bits >> (cls.exponent_bit_count + 1)
        exponent = all_bits & ~(sign | significand)
        cls.sign_bit_mask = types.t_uint(sign)
        cls.significand_bit_mask = types.t_uint(significand)
        cls.exponent_bit_mask = types.t_uint(exponent)

        cls.max_diff = finfo.eps

        _COMPARATORS.setdefault(finfo.dtype, cls)

    def __init__(self, value):
        if self.float_type is None:
            raise TypeError(
                '{} is not specialised for a floating point type'.format(
                    type(self).__name__)
            )
        if isinstance(value, IEEE754):
            self._check_same_width(value)
            value = value.float_data
        elif isinstance(value, np.floating) and value.dtype != self.float_type:
            raise MixedWidthError(
                'Cannot build {} from {}'.format(
                    type(self).__name__, value.dtype.name)
            )
        # values out of range round to infinity, as numpy casts do
        with np.errstate(over='ignore'):
            try:
                float_ = self.float_type(value)
            except OverflowError:
                float_ = self.float_type(np.inf if value > 0 else -np.inf)
        object.__setattr__(self, '_float', float_)
        object.__setattr__(self, '_bits', float_.view(self.bit_data_type))

    def __setattr__(self, name, value):
        raise AttributeError('{} is immutable'.format(type(self).__name__))

    @property
    def float_data(self):
        """The floating point number."""
        return self._float

    @property
    def bit_data(self):
        """The bits of the floating point number, as an unsigned integer."""
        return self._bits

    def sign_bit(self):
        """Return the sign bit of the number."""
        return self.sign_bit_mask & self._bits

    def exponent_bits(self):
        """Return the exponent bits of the number."""
        return self.exponent_bit_mask & self._bits

    def significand_bits(self):
        """Return the significand (fraction) bits of the number."""
        return self.significand_bit_mask & self._bits

    def is_nan(self):
        """Return `True` if the number is NaN.

        IEEE-754 defines NaN as a number with all ones in the exponent
        and a non zero significand.
        """
        return bool(
            self.exponent_bits() == self.exponent_bit_mask
            and self.significand_bits() != 0
        )

    def is_infinite(self):
        """Return `True` if the number is positive or negative infinity."""
        return bool(
            self.exponent_bits() == self.exponent_bit_mask
            and self.significand_bits() == 0
        )

    @classmethod
    def float_close(cls, lhs, rhs):
        """Return `True` if `lhs` and `rhs` are within machine epsilon."""
        # inf - inf is nan and max - (-max) overflows, both compare false
        with np.errstate(over='ignore', invalid='ignore'):
            difference = cls.float_type(lhs) - cls.float_type(rhs)
            return bool(np.abs(difference) <= cls.max_diff)

    def ulp_distance(self, other):
        """Return the number of representable numbers between self and `other`.

        Bit patterns are sign-magnitude, they are mapped to signed integers
        before taking the difference so that the distance is symmetric and
        does not wrap around. Positive and negative zero are 0 ULPs apart.

        Parameters
        ----------
        other : float or IEEE754
            the other number

        Returns
        -------
        int
        """
        other = self._coerce(other)
        return abs(self._ordered_bits() - other._ordered_bits())

    def ulp_close(self, other):
        """Return `True` if `other` is at most `max_ulps_diff` ULPs away."""
        return self.ulp_distance(other) <= self.max_ulps_diff

    def compare(self, other):
        """Compare self with `other` and return the deciding `Comparison`.

        Parameters
        ----------
        other : float or IEEE754
            the other number

        Returns
        -------
        Comparison
        """
        other = self._coerce(other)

        if self.is_nan() or other.is_nan():
            result = Comparison.NAN
        elif self.float_close(self._float, other._float):
            # needed when comparing numbers near zero
            result = Comparison.WITHIN_EPSILON
        elif self.sign_bit() != other.sign_bit():
            result = Comparison.SIGN_MISMATCH
        elif self.ulp_close(other):
            result = Comparison.WITHIN_ULPS
        else:
            result = Comparison.ULPS_EXCEEDED

        if logger.isEnabledFor(DEBUG):
            logger.debug('%r vs %r: %s', self, other, result.name)
        return result

    def almost_equal(self, other):
        """Return `True` if self and `other` are close enough to be equal."""
        return self.compare(other).is_equal

    def __eq__(self, other):
        if not isinstance(other, (IEEE754, numbers.Real)):
            return NotImplemented
        return self.almost_equal(other)

    def __ne__(self, other):
        if not isinstance(other, (IEEE754, numbers.Real)):
            return NotImplemented
        return not self.almost_equal(other)

    def __repr__(self):
        return '{}({})'.format(type(self).__name__, self._float)

    def _ordered_bits(self):
        bits = int(self._bits)
        sign = int(self.sign_bit_mask)
        if bits & sign:
            return -(bits & ~sign)
        return bits

    def _coerce(self, other):
        if isinstance(other, IEEE754):
            self._check_same_width(other)
            return other
        return type(self)(other)

    def _check_same_width(self, other):
        if other.float_type != self.float_type:
            raise MixedWidthError(
                'Cannot compare {} with {}'.format(
                    type(self).__name__, type(other).__name__)
            )


class FloatCmp(IEEE754, float_type=np.float32):
    """Almost equality of binary32 floating point numbers."""
    __slots__ = ()


class DoubleCmp(IEEE754, float_type=np.float64):
    """Almost equality of binary64 floating point numbers."""
    __slots__ = ()


# pylint: disable=invalid-name
float_cmp = FloatCmp
double_cmp = DoubleCmp


def comparator_for(float_type):
    """Return the comparator class for `float_type`.

    Raises
    ------
    UnsupportedWidthError
        if `float_type` is not a 4 or 8 bytes floating point type
    """
    types = float_type_with_size(float_type)
    return _COMPARATORS[np.dtype(types.t_float)]
