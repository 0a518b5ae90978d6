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
import itertools
from enum import Enum
from typing import Any, Iterator, List, Union, TYPE_CHECKING

from pycounting.util.utils import check_argument, is_int

if TYPE_CHECKING:
    from pycounting.pipeline.pipeline import Pipeline

__all__ = ['IsBounded', 'TimestampedValue', 'PCollection']


class IsBounded(Enum):
    """
    The boundedness of a :class:`PCollection`.

    :data:`BOUNDED`:

    The collection is known to be finite in advance, e.g. a range of numbers or a collection
    whose read stops after a maximum number of records or a maximum read time.

    :data:`UNBOUNDED`:

    The size of the collection is not known in advance. It is read continuously and may never
    end.
    """
    BOUNDED = 0
    UNBOUNDED = 1


class TimestampedValue(object):
    """
    An element of a :class:`PCollection` together with its event time timestamp. Elements of
    bounded range reads carry no timestamp, in which case the timestamp is None.
    """

    __slots__ = ('value', 'timestamp')

    def __init__(self, value: Any, timestamp=None):
        self.value = value
        self.timestamp = timestamp

    def __eq__(self, other):
        return (isinstance(other, TimestampedValue) and
                self.value == other.value and
                self.timestamp == other.timestamp)

    def __hash__(self):
        return hash((self.value, self.timestamp))

    def __repr__(self):
        return 'TimestampedValue({}, {})'.format(self.value, self.timestamp)


class PCollection(object):
    """
    A collection of elements produced by a transform applied to a :class:`Pipeline`. A
    PCollection is only a handle: nothing is read until :func:`read` or
    :func:`execute_and_collect` is called.
    """

    def __init__(self, pipeline: 'Pipeline', producer, is_bounded: IsBounded):
        """
        :param pipeline: The pipeline this collection belongs to.
        :param producer: The transform producing the elements. It must provide
                         `create_reader()` returning an iterator of :class:`TimestampedValue`.
        :param is_bounded: Whether the collection is bounded.
        """
        self._pipeline = pipeline
        self._producer = producer
        self._is_bounded = is_bounded

    @property
    def pipeline(self) -> 'Pipeline':
        return self._pipeline

    @property
    def producer(self):
        return self._producer

    def is_bounded(self) -> IsBounded:
        return self._is_bounded

    def read(self) -> Iterator[TimestampedValue]:
        """
        Reads the elements of this collection together with their timestamps. For an unbounded
        collection the returned iterator never ends.
        """
        return self._producer.create_reader()

    def execute_and_collect(self, limit: int = None) -> Union[Iterator[Any], List[Any]]:
        """
        Reads the values of this collection.

        Example:
        ::

            >>> numbers = pipeline.apply(CountingInput.up_to(10)).execute_and_collect()
            >>> first_five = pipeline.apply(CountingInput.unbounded()).execute_and_collect(5)

        :param limit: The maximum number of values to collect. If given, a list is returned.
        :return: An iterator of the values, or a list with at most `limit` values.
        """
        values = (timestamped.value for timestamped in self.read())
        if limit is None:
            return values
        check_argument(is_int(limit) and limit > 0, "limit (%s) must be greater than 0", limit)
        return list(itertools.islice(values, limit))

    def __repr__(self):
        return 'PCollection<{}, {}>'.format(self._producer, self._is_bounded.name)
