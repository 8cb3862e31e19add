import heapq
import logging

from FloatOrd import Float64, FloatOrd, InvalidValue

logger = logging.getLogger(__name__)


class MedianCalc(object):

    def __init__(self, list_of_data=(), float_type=Float64):
        self.float_type = float_type
        self.max_heap = [] # (-value, value) pairs, has smaller values
        self.min_heap = [] # has larger values
        for elem in list_of_data:
            self.push_data(elem)
        logger.debug('{ type: INIT_MEDIAN_CALC, float_type: %s, size: %d }', float_type.__name__, len(self))

    def __len__(self):
        return len(self.max_heap) + len(self.min_heap)

    def is_empty(self):
        return len(self) == 0

    '''
        Returns None until something has been pushed. For an even count the two
        middle values are averaged with the overflow-safe midpoint.
    '''
    def get_median(self):
        if not self.max_heap:
            return None
        if len(self.max_heap) > len(self.min_heap):
            return self.max_heap[0][1].value
        return self.max_heap[0][1].midpoint(self.min_heap[0])

    def push_data(self, data):
        value = self.wrap(data)
        if not self.max_heap or value <= self.max_heap[0][1]:
            heapq.heappush(self.max_heap, (-value, value))
        else:
            heapq.heappush(self.min_heap, value)
        self.rebalance()

    def remove_data_from_heap(self, data):
        value = self.wrap(data)
        # everything in min_heap is >= the top of max_heap, so a value at or
        # below that top can only be held by max_heap
        if self.max_heap and value <= self.max_heap[0][1]:
            heap, entry = self.max_heap, (-value, value)
        else:
            heap, entry = self.min_heap, value

        if entry not in heap:
            logger.warning('{ type: VALUE_NOT_IN_HEAP, value: %s }', data)
            raise ValueError('Value Does Not Exist in Heap: %r' % (data,))
        heap.remove(entry)
        heapq.heapify(heap)
        self.rebalance()

    def rebalance(self):
        if len(self.max_heap) > len(self.min_heap) + 1:
            heapq.heappush(self.min_heap, heapq.heappop(self.max_heap)[1])
        elif len(self.min_heap) > len(self.max_heap):
            val = heapq.heappop(self.min_heap)
            heapq.heappush(self.max_heap, (-val, val))

    def clear(self):
        logger.debug('{ type: CLEARED_MEDIAN_CALC, discarded: %d }', len(self))
        self.max_heap = []
        self.min_heap = []

    def wrap(self, data):
        try:
            return FloatOrd(data, self.float_type)
        except InvalidValue:
            logger.debug('{ type: REJECTED_NAN_VALUE, value: %s }', data)
            raise


if __name__=="__main__":
    m = MedianCalc()
    for price in [3.27, 4.60, 5.95, 9.93, 7.79, 4.73, 3.33, 6.35, 4.97, 4.06]:
        m.push_data(price)
        print(m.get_median())

    try:
        m.push_data(float('nan'))
    except InvalidValue as e:
        print(e)

    m.clear()
    print(m.get_median())
