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
import logging
import time
from datetime import timedelta
from typing import Iterator, Optional, Union

from pycounting.common.time import Duration
from pycounting.pipeline.pcollection import IsBounded, PCollection, TimestampedValue
from pycounting.pipeline.pipeline import PBegin
from pycounting.util.utils import check_argument, check_not_null, is_int

__all__ = ['Read', 'BoundedRead', 'UnboundedRead', 'BoundedReadFromUnboundedSource']

logger = logging.getLogger(__name__)


class Read(object):
    """
    Entry point of the root transforms that read a source into a :class:`PCollection`.

    Example:
    ::

        >>> numbers = pipeline.apply(Read.from_bounded_source(CountingSource.up_to(10)))
        >>> limited = pipeline.apply(
        ...     Read.from_unbounded_source(CountingSource.unbounded()).with_max_num_records(10))
    """

    @staticmethod
    def from_bounded_source(source) -> 'BoundedRead':
        """
        Returns a transform that reads the given bounded source.
        """
        return BoundedRead(check_not_null(source, "source cannot be None"))

    @staticmethod
    def from_unbounded_source(source) -> 'UnboundedRead':
        """
        Returns a transform that reads the given unbounded source.
        """
        return UnboundedRead(check_not_null(source, "source cannot be None"))


class BoundedRead(object):
    """
    A transform that reads a bounded source, producing a bounded :class:`PCollection`.
    """

    def __init__(self, source):
        self._source = source

    def get_source(self):
        return self._source

    def create_reader(self) -> Iterator[TimestampedValue]:
        return self._source.create_reader()

    def materialize(self, begin: PBegin) -> PCollection:
        return PCollection(begin.pipeline, self, IsBounded.BOUNDED)

    def __repr__(self):
        return 'Read({})'.format(self._source)


class UnboundedRead(object):
    """
    A transform that reads an unbounded source, producing an unbounded :class:`PCollection`.
    The read can be limited with :func:`with_max_num_records` or :func:`with_max_read_time`,
    which turns it into a bounded read.
    """

    def __init__(self, source):
        self._source = source

    def get_source(self):
        return self._source

    def with_max_num_records(self, max_num_records: int) -> 'BoundedReadFromUnboundedSource':
        """
        Returns a bounded read of the same source that stops after max_num_records elements.
        """
        return BoundedReadFromUnboundedSource(self._source).with_max_num_records(max_num_records)

    def with_max_read_time(
            self, max_read_time: Union[Duration, timedelta]) -> 'BoundedReadFromUnboundedSource':
        """
        Returns a bounded read of the same source that stops once max_read_time has elapsed
        since the read started.
        """
        return BoundedReadFromUnboundedSource(self._source).with_max_read_time(max_read_time)

    def create_reader(self) -> Iterator[TimestampedValue]:
        return self._source.create_reader()

    def materialize(self, begin: PBegin) -> PCollection:
        return PCollection(begin.pipeline, self, IsBounded.UNBOUNDED)

    def __repr__(self):
        return 'Read({})'.format(self._source)


class BoundedReadFromUnboundedSource(object):
    """
    A transform that reads an unbounded source up to a maximum number of records and/or for a
    maximum amount of time, producing a bounded :class:`PCollection`. When both limits are set
    the read stops at whichever is reached first.

    Instances are immutable: the with_* methods return a new transform.
    """

    def __init__(self,
                 source,
                 max_num_records: Optional[int] = None,
                 max_read_time: Optional[Duration] = None):
        self._source = source
        self._max_num_records = max_num_records
        self._max_read_time = max_read_time

    def get_source(self):
        return self._source

    def get_max_num_records(self) -> Optional[int]:
        return self._max_num_records

    def get_max_read_time(self) -> Optional[Duration]:
        return self._max_read_time

    def with_max_num_records(self, max_num_records: int) -> 'BoundedReadFromUnboundedSource':
        """
        Returns a copy of this transform that reads at most max_num_records elements.
        """
        check_argument(is_int(max_num_records) and max_num_records > 0,
                       "max_num_records must be a positive (nonzero) value. Got %s",
                       max_num_records)
        return BoundedReadFromUnboundedSource(
            self._source, max_num_records, self._max_read_time)

    def with_max_read_time(
            self, max_read_time: Union[Duration, timedelta]) -> 'BoundedReadFromUnboundedSource':
        """
        Returns a copy of this transform that reads for at most max_read_time, a
        :class:`Duration` or a datetime.timedelta.
        """
        check_not_null(max_read_time, "read_time cannot be None")
        if isinstance(max_read_time, timedelta):
            max_read_time = Duration.of_timedelta(max_read_time)
        check_argument(isinstance(max_read_time, Duration),
                       "read_time must be a Duration, got %s", type(max_read_time).__name__)
        return BoundedReadFromUnboundedSource(
            self._source, self._max_num_records, max_read_time)

    def create_reader(self) -> Iterator[TimestampedValue]:
        deadline = None
        if self._max_read_time is not None:
            deadline = time.monotonic() + self._max_read_time.to_seconds()
        num_records = 0
        for element in self._source.create_reader():
            if deadline is not None and time.monotonic() >= deadline:
                logger.info("Stopped reading %s after max read time %s (%d records read)",
                            self._source, self._max_read_time, num_records)
                return
            yield element
            num_records += 1
            if self._max_num_records is not None and num_records >= self._max_num_records:
                logger.info("Stopped reading %s after max number of records %d",
                            self._source, self._max_num_records)
                return

    def materialize(self, begin: PBegin) -> PCollection:
        return PCollection(begin.pipeline, self, IsBounded.BOUNDED)

    def __repr__(self):
        return 'BoundedReadFromUnboundedSource({}, max_num_records={}, max_read_time={})'.format(
            self._source, self._max_num_records, self._max_read_time)
