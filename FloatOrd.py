import math
import sys

import numpy as np


class InvalidValue(ValueError):

    def __init__(self, value):
        super(InvalidValue, self).__init__('Value must not be NaN!')
        self.value = value


class FloatType(object):
    '''
        Capability set shared by the supported precisions: coercion, NaN detection,
        a total order over the non-NaN values and an overflow-safe midpoint.
        Subclasses provide the scalar constructor and the precision constants.
    '''
    ZERO = None
    TWO = None
    HI = None # largest magnitude for which a + b cannot overflow
    LO = None # smallest magnitude that can be halved without losing bits

    @classmethod
    def coerce(cls, raw):
        raise NotImplementedError

    @classmethod
    def check_number(cls, raw):
        # float() and np.float32() would parse text, only numbers are taken
        if isinstance(raw, (str, bytes, bytearray)):
            raise TypeError('Value must be a real number, got %s' % type(raw).__name__)

    @classmethod
    def is_nan(cls, value):
        raise NotImplementedError

    @classmethod
    def cmp(cls, a, b):
        if cls.is_nan(a) or cls.is_nan(b):
            raise InvalidValue(b if cls.is_nan(b) else a)
        if a == b:
            return 0 # also covers -0.0 == 0.0
        return -1 if a < b else 1

    @classmethod
    def midpoint(cls, a, b):
        if cls.is_nan(a) or cls.is_nan(b):
            raise InvalidValue(b if cls.is_nan(b) else a)
        abs_a, abs_b = abs(a), abs(b)
        with np.errstate(invalid='ignore'):
            if abs_a <= cls.HI and abs_b <= cls.HI:
                value = (a + b) / cls.TWO
            elif abs_a < cls.LO:
                value = a + b / cls.TWO
            elif abs_b < cls.LO:
                value = a / cls.TWO + b
            else:
                value = a / cls.TWO + b / cls.TWO
        # inf - inf has no midpoint, settle it at zero
        if cls.is_nan(value):
            return cls.ZERO
        return value


class Float32(FloatType):
    MAX = np.finfo(np.float32).max
    MIN_POSITIVE = np.finfo(np.float32).tiny
    ZERO = np.float32(0.0)
    TWO = np.float32(2.0)
    HI = MAX / TWO
    LO = MIN_POSITIVE * TWO

    @classmethod
    def coerce(cls, raw):
        cls.check_number(raw)
        # out of range values round to the signed infinity
        with np.errstate(over='ignore'):
            return np.float32(raw)

    @classmethod
    def is_nan(cls, value):
        return bool(np.isnan(value))


class Float64(FloatType):
    MAX = sys.float_info.max
    MIN_POSITIVE = sys.float_info.min
    ZERO = 0.0
    TWO = 2.0
    HI = MAX / 2.0
    LO = MIN_POSITIVE * 2.0

    @classmethod
    def coerce(cls, raw):
        cls.check_number(raw)
        return float(raw)

    @classmethod
    def is_nan(cls, value):
        return math.isnan(value)


class FloatOrd(object):
    '''
        Immutable, totally ordered float. NaN is rejected when the value is built,
        so every instance can be compared, sorted and kept in a heap.
    '''
    __slots__ = ('_value', '_float_type')

    def __init__(self, raw, float_type=Float64):
        value = float_type.coerce(raw)
        if float_type.is_nan(value):
            raise InvalidValue(raw)
        self._value = value
        self._float_type = float_type

    @property
    def value(self):
        return self._value

    @property
    def float_type(self):
        return self._float_type

    def midpoint(self, other):
        return self._float_type.midpoint(self._value, other._value)

    def cmp(self, other):
        return self._float_type.cmp(self._value, other._value)

    def __eq__(self, other):
        if not isinstance(other, FloatOrd):
            return NotImplemented
        return self.cmp(other) == 0

    def __ne__(self, other):
        if not isinstance(other, FloatOrd):
            return NotImplemented
        return self.cmp(other) != 0

    def __lt__(self, other):
        if not isinstance(other, FloatOrd):
            return NotImplemented
        return self.cmp(other) < 0

    def __le__(self, other):
        if not isinstance(other, FloatOrd):
            return NotImplemented
        return self.cmp(other) <= 0

    def __gt__(self, other):
        if not isinstance(other, FloatOrd):
            return NotImplemented
        return self.cmp(other) > 0

    def __ge__(self, other):
        if not isinstance(other, FloatOrd):
            return NotImplemented
        return self.cmp(other) >= 0

    def __hash__(self):
        # hash(-0.0) == hash(0.0), so equal values hash alike
        return hash(self._value)

    def __neg__(self):
        return FloatOrd(-self._value, self._float_type)

    def __float__(self):
        return float(self._value)

    def __repr__(self):
        return 'FloatOrd(%r, %s)' % (float(self._value), self._float_type.__name__)


if __name__=="__main__":
    values = [FloatOrd(v) for v in [1.0, float('-inf'), -0.0, 0.0, float('inf'), -1.0]]
    print(sorted(values))

    print(FloatOrd(float('inf')).midpoint(FloatOrd(float('-inf'))))
    print(FloatOrd(Float32.MAX, Float32).midpoint(FloatOrd(-Float32.MAX, Float32)))

    try:
        FloatOrd(float('nan'))
    except InvalidValue as e:
        print(e)
