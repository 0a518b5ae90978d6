################################################################################
#  Licensed to the Apache Software Foundation (ASF) under one
#  or more contributor license agreements.  See the NOTICE file
#  distributed with this work for additional information
#  regarding copyright ownership.  The ASF licenses this file
#  to you under the Apache License, Version 2.0 (the
#  "License"); you may not use this file except in compliance
#  with the License.  You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
#  Unless required by applicable law or agreed to in writing, software
#  distributed under the License is distributed on an "AS IS" BASIS,
#  WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#  See the License for the specific language governing permissions and
# limitations under the License.
################################################################################
from typing import Callable, Iterator

import cloudpickle

from pycounting.common.time import Instant
from pycounting.pipeline.pcollection import TimestampedValue
from pycounting.util.utils import check_argument, check_not_null, is_int

__all__ = [
    'LONG_MAX_VALUE',
    'NowTimestampFn',
    'CountingSource',
    'BoundedCountingSource',
    'UnboundedCountingSource'
]

# The largest value produced by an unbounded counting source.
LONG_MAX_VALUE = 2 ** 63 - 1


class NowTimestampFn(object):
    """
    A timestamp function that returns the processing time at which the element is generated.
    """

    def __call__(self, value: int) -> Instant:
        return Instant.now()

    def __eq__(self, other):
        return isinstance(other, NowTimestampFn)

    def __hash__(self):
        return hash(NowTimestampFn)

    def __repr__(self):
        return 'NowTimestampFn()'


class BoundedCountingSource(object):
    """
    A source that produces the numbers of the range [start, end) in order, each exactly once.
    """

    def __init__(self, start: int, end: int):
        self._start = start
        self._end = end

    def get_start(self) -> int:
        return self._start

    def get_end(self) -> int:
        return self._end

    def create_reader(self) -> Iterator[TimestampedValue]:
        for value in range(self._start, self._end):
            yield TimestampedValue(value)

    def __eq__(self, other):
        return (isinstance(other, BoundedCountingSource) and
                self._start == other._start and
                self._end == other._end)

    def __hash__(self):
        return hash((self._start, self._end))

    def __repr__(self):
        return 'BoundedCountingSource[{}, {})'.format(self._start, self._end)


class UnboundedCountingSource(object):
    """
    A source that produces the numbers from 0 up to :data:`LONG_MAX_VALUE`, each tagged with the
    timestamp returned by the timestamp function. After :data:`LONG_MAX_VALUE` no more output is
    produced (in practice this limit is never reached).

    The timestamp function is serialized when the source is created, so it must be picklable by
    cloudpickle. Lambdas and closures are supported.
    """

    def __init__(self, timestamp_fn: Callable[[int], Instant]):
        self._serialized_timestamp_fn = cloudpickle.dumps(timestamp_fn)

    def get_timestamp_fn(self) -> Callable[[int], Instant]:
        return cloudpickle.loads(self._serialized_timestamp_fn)

    def create_reader(self) -> Iterator[TimestampedValue]:
        timestamp_fn = self.get_timestamp_fn()
        value = 0
        while value <= LONG_MAX_VALUE:
            yield TimestampedValue(value, timestamp_fn(value))
            value += 1

    def __repr__(self):
        return 'UnboundedCountingSource'


class CountingSource(object):
    """
    Factory of the sources that count up from 0. Most users should use
    :class:`~pycounting.io.CountingInput` instead, which applies the source to a pipeline.
    """

    @staticmethod
    def up_to(num_elements: int) -> BoundedCountingSource:
        """
        Creates a source that produces the numbers from 0 to num_elements - 1.
        """
        check_argument(is_int(num_elements) and num_elements > 0,
                       "num_elements (%s) must be greater than 0", num_elements)
        return BoundedCountingSource(0, num_elements)

    @staticmethod
    def create_range(start: int, end: int) -> BoundedCountingSource:
        """
        Creates a source that produces the numbers of the range [start, end).
        """
        check_argument(is_int(start) and start >= 0,
                       "start (%s) must be greater than or equal to 0", start)
        check_argument(is_int(end) and end >= start,
                       "end (%s) must be greater than or equal to start (%s)", end, start)
        return BoundedCountingSource(start, end)

    @staticmethod
    def unbounded() -> UnboundedCountingSource:
        """
        Creates an unbounded source whose elements carry the processing time at which they are
        generated as timestamp.
        """
        return UnboundedCountingSource(NowTimestampFn())

    @staticmethod
    def unbounded_with_timestamp_fn(
            timestamp_fn: Callable[[int], Instant]) -> UnboundedCountingSource:
        """
        Creates an unbounded source whose elements carry the timestamp returned by timestamp_fn.
        The timestamps returned for increasing values must not decrease.
        """
        check_not_null(timestamp_fn, "timestamp_fn cannot be None")
        return UnboundedCountingSource(timestamp_fn)
