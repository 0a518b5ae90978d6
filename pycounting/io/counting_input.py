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
import dataclasses
import logging
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Callable, Optional, Union

from pycounting.common.configuration import Configuration
from pycounting.common.time import Duration, Instant
from pycounting.io.counting_options import CountingInputOptions
from pycounting.io.counting_source import CountingSource, NowTimestampFn
from pycounting.io.read import Read
from pycounting.pipeline.pcollection import PCollection
from pycounting.pipeline.pipeline import PBegin
from pycounting.util.utils import check_argument, check_not_null, is_int

__all__ = ['CountingInput', 'BoundedCountingInput', 'UnboundedCountingInput']

logger = logging.getLogger(__name__)


class CountingInput(object):
    """
    Root transforms that produce integers. When used to produce a bounded :class:`PCollection`,
    the input starts at 0 and counts up to a specified maximum. When used to produce an unbounded
    :class:`PCollection`, it counts up to :data:`~pycounting.io.counting_source.LONG_MAX_VALUE`
    and then never produces more output. (In practice, this limit should never be reached.)

    To produce a bounded collection, use :func:`CountingInput.up_to`:
    ::

        >>> pipeline = Pipeline.create()
        >>> bounded = pipeline.apply(CountingInput.up_to(1000))

    To produce an unbounded collection, use :func:`CountingInput.unbounded`, calling
    :func:`UnboundedCountingInput.with_timestamp_fn` to provide values with timestamps other
    than :func:`Instant.now`:
    ::

        >>> # processing time as the element timestamp
        >>> unbounded = pipeline.apply(CountingInput.unbounded())
        >>> # a provided function sets the element timestamp
        >>> unbounded_with_timestamps = pipeline.apply(
        ...     CountingInput.unbounded().with_timestamp_fn(lambda i: Instant.of_epoch_milli(i)))
    """

    @staticmethod
    def up_to(num_elements: int) -> 'BoundedCountingInput':
        """
        Creates a :class:`BoundedCountingInput` that will produce the specified number of
        elements, from 0 to num_elements - 1.
        """
        return BoundedCountingInput(num_elements)

    @staticmethod
    def unbounded() -> 'UnboundedCountingInput':
        """
        Creates an :class:`UnboundedCountingInput` that will produce numbers starting from 0.

        Elements in the resulting collection will by default have timestamps corresponding to
        processing time at element generation, provided by :func:`Instant.now`. Use
        :func:`UnboundedCountingInput.with_timestamp_fn` to control the output timestamps.
        """
        return UnboundedCountingInput(NowTimestampFn(), None, None)

    @staticmethod
    def from_configuration(
            configuration: Configuration
    ) -> Union['BoundedCountingInput', 'UnboundedCountingInput']:
        """
        Creates a counting input from the options in :class:`CountingInputOptions`. A bounded
        input is created when `counting-input.num-elements` is set, otherwise an unbounded input
        with the configured read limits.

        :param configuration: The configuration to read the options from.
        """
        check_not_null(configuration, "configuration cannot be None")
        num_elements = configuration.get(CountingInputOptions.NUM_ELEMENTS)
        max_num_records = configuration.get(CountingInputOptions.MAX_NUM_RECORDS)
        max_read_time = configuration.get(CountingInputOptions.MAX_READ_TIME)

        if num_elements is not None:
            check_argument(
                max_num_records is None and max_read_time is None,
                "'%s' cannot be combined with '%s' or '%s'",
                CountingInputOptions.NUM_ELEMENTS.key(),
                CountingInputOptions.MAX_NUM_RECORDS.key(),
                CountingInputOptions.MAX_READ_TIME.key())
            return CountingInput.up_to(num_elements)

        counting_input = CountingInput.unbounded()
        if max_read_time is not None:
            counting_input = counting_input.with_max_read_time(max_read_time)
        if max_num_records is not None:
            counting_input = counting_input.with_max_num_records(max_num_records)
        return counting_input


@dataclass(frozen=True)
class BoundedCountingInput(object):
    """
    A transform that will produce a specified number of integers starting from 0.
    """

    num_elements: int

    def __post_init__(self):
        check_argument(is_int(self.num_elements) and self.num_elements > 0,
                       "num_elements (%s) must be greater than 0", self.num_elements)

    def materialize(self, begin: PBegin) -> PCollection:
        return begin.apply(Read.from_bounded_source(CountingSource.up_to(self.num_elements)))


@dataclass(frozen=True)
class UnboundedCountingInput(object):
    """
    A transform that will produce numbers starting from 0 up to
    :data:`~pycounting.io.counting_source.LONG_MAX_VALUE`.

    After that value, the transform never produces more output. (In practice, this limit should
    never be reached.)

    Elements in the resulting collection will by default have timestamps corresponding to
    processing time at element generation, provided by :func:`Instant.now`. Use the transform
    returned by :func:`with_timestamp_fn` to control the output timestamps.

    Instances are immutable. Each with_* method returns a new transform that differs from this
    one in exactly one field.
    """

    timestamp_fn: Callable[[int], Instant] = field(default_factory=NowTimestampFn)
    max_num_records: Optional[int] = None
    max_read_time: Optional[Duration] = None

    def __post_init__(self):
        check_argument(callable(self.timestamp_fn),
                       "timestamp_fn must be callable, got %s", self.timestamp_fn)
        if self.max_num_records is not None:
            check_argument(is_int(self.max_num_records) and self.max_num_records > 0,
                           "max_num_records must be a positive (nonzero) value. Got %s",
                           self.max_num_records)

    def with_timestamp_fn(
            self, timestamp_fn: Callable[[int], Instant]) -> 'UnboundedCountingInput':
        """
        Returns an :class:`UnboundedCountingInput` like this one, but where output elements have
        the timestamp specified by the timestamp_fn.

        Note that the timestamps produced by timestamp_fn may not decrease.
        """
        check_not_null(timestamp_fn, "timestamp_fn cannot be None")
        return dataclasses.replace(self, timestamp_fn=timestamp_fn)

    def with_max_num_records(self, max_num_records: int) -> 'UnboundedCountingInput':
        """
        Returns an :class:`UnboundedCountingInput` like this one, but that will read at most the
        specified number of elements.

        A bounded amount of elements will be produced by the result transform, and the result
        collection will be :data:`IsBounded.BOUNDED`.
        """
        check_argument(is_int(max_num_records) and max_num_records > 0,
                       "max_num_records must be a positive (nonzero) value. Got %s",
                       max_num_records)
        return dataclasses.replace(self, max_num_records=max_num_records)

    def with_max_read_time(
            self, read_time: Union[Duration, timedelta]) -> 'UnboundedCountingInput':
        """
        Returns an :class:`UnboundedCountingInput` like this one, but that will read for at most
        the specified amount of time.

        A bounded amount of elements will be produced by the result transform, and the result
        collection will be :data:`IsBounded.BOUNDED`.

        :param read_time: The maximum read time, a :class:`Duration` or a datetime.timedelta.
        """
        check_not_null(read_time, "read_time cannot be None")
        if isinstance(read_time, timedelta):
            read_time = Duration.of_timedelta(read_time)
        check_argument(isinstance(read_time, Duration),
                       "read_time must be a Duration, got %s", type(read_time).__name__)
        return dataclasses.replace(self, max_read_time=read_time)

    def materialize(self, begin: PBegin) -> PCollection:
        read = Read.from_unbounded_source(
            CountingSource.unbounded_with_timestamp_fn(self.timestamp_fn))
        if self.max_num_records is None and self.max_read_time is None:
            logger.debug("Reading counting input without limit")
            return begin.apply(read)
        elif self.max_num_records is not None and self.max_read_time is None:
            logger.debug("Reading counting input up to %d records", self.max_num_records)
            return begin.apply(read.with_max_num_records(self.max_num_records))
        elif self.max_num_records is None and self.max_read_time is not None:
            logger.debug("Reading counting input for at most %s", self.max_read_time)
            return begin.apply(read.with_max_read_time(self.max_read_time))
        else:
            logger.debug("Reading counting input for at most %s and up to %d records",
                         self.max_read_time, self.max_num_records)
            return begin.apply(
                read.with_max_read_time(self.max_read_time)
                    .with_max_num_records(self.max_num_records))
