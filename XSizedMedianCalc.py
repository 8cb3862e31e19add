from collections import deque
import logging

from FloatOrd import Float64
from MedianCalc import MedianCalc

logger = logging.getLogger(__name__)


class XSizedMedianCalc(MedianCalc):
    '''
        Median over the `size` most recently pushed values. Older values are
        evicted from the heaps as new ones arrive.
    '''

    def __init__(self, size, list_of_data=(), float_type=Float64):
        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            raise ValueError('Window size must be a positive integer, got %r' % (size,))
        self.SIZE = size
        self.list_of_data = deque()
        super(XSizedMedianCalc, self).__init__(list_of_data, float_type)

    def push_data(self, data):
        super(XSizedMedianCalc, self).push_data(data)
        self.list_of_data.append(self.float_type.coerce(data))
        if len(self.list_of_data) > self.SIZE:
            oldest = self.list_of_data.popleft()
            logger.debug('{ type: EVICTED_FROM_WINDOW, value: %s, size: %d }', oldest, self.SIZE)
            super(XSizedMedianCalc, self).remove_data_from_heap(oldest)

    '''
        Removes the oldest occurrence of data from the window as well, so the
        window never holds a value the heaps have dropped.
    '''
    def remove_data_from_heap(self, data):
        super(XSizedMedianCalc, self).remove_data_from_heap(data)
        self.list_of_data.remove(self.float_type.coerce(data))

    def get_window(self):
        return tuple(self.list_of_data)

    def clear(self):
        super(XSizedMedianCalc, self).clear()
        self.list_of_data.clear()


if __name__=="__main__":
    m = XSizedMedianCalc(3)
    for data in [4, 7, 9, 9, 10, 3, 5]:
        m.push_data(data)
        print(m.get_window(), m.get_median())
