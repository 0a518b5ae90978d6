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
from datetime import timedelta
from unittest.mock import patch

from pycounting.common import Duration, Instant
from pycounting.io import BoundedReadFromUnboundedSource, CountingSource, Read
from pycounting.pipeline import IsBounded
from pycounting.testing.test_case_utils import PyCountingPipelineTestCase
from pycounting.util.exceptions import IllegalArgumentException


def _unbounded_source():
    return CountingSource.unbounded_with_timestamp_fn(lambda i: Instant.of_epoch_milli(i))


class ReadTests(PyCountingPipelineTestCase):

    def test_bounded_read(self):
        collection = self.pipeline.apply(Read.from_bounded_source(CountingSource.up_to(4)))

        self.assertEqual(collection.is_bounded(), IsBounded.BOUNDED)
        self.assertEqual(list(collection.execute_and_collect()), [0, 1, 2, 3])

    def test_unbounded_read(self):
        collection = self.pipeline.apply(Read.from_unbounded_source(_unbounded_source()))

        self.assertEqual(collection.is_bounded(), IsBounded.UNBOUNDED)
        self.assertEqual(list(itertools.islice(collection.execute_and_collect(), 3)), [0, 1, 2])

    def test_null_source(self):
        with self.assertRaises(IllegalArgumentException):
            Read.from_bounded_source(None)
        with self.assertRaises(IllegalArgumentException):
            Read.from_unbounded_source(None)

    def test_with_max_num_records(self):
        source = _unbounded_source()
        read = Read.from_unbounded_source(source).with_max_num_records(3)

        self.assertIsInstance(read, BoundedReadFromUnboundedSource)
        self.assertIs(read.get_source(), source)
        self.assertEqual(read.get_max_num_records(), 3)
        self.assertIsNone(read.get_max_read_time())

        collection = self.pipeline.apply(read)

        self.assertEqual(collection.is_bounded(), IsBounded.BOUNDED)
        self.assertEqual(list(collection.execute_and_collect()), [0, 1, 2])

    def test_invalid_limits(self):
        read = Read.from_unbounded_source(_unbounded_source())

        with self.assertRaises(IllegalArgumentException):
            read.with_max_num_records(0)
        with self.assertRaises(IllegalArgumentException):
            read.with_max_num_records(-1)
        with self.assertRaises(IllegalArgumentException):
            read.with_max_read_time(None)
        with self.assertRaises(IllegalArgumentException):
            read.with_max_read_time(Duration.of_seconds(1)).with_max_num_records(0)
        with self.assertRaises(IllegalArgumentException):
            read.with_max_num_records(2.5)
        with self.assertRaises(IllegalArgumentException):
            read.with_max_num_records(True)
        with self.assertRaises(IllegalArgumentException):
            read.with_max_read_time("1 s")
        with self.assertRaises(IllegalArgumentException):
            read.with_max_read_time(1.5)

    def test_with_max_read_time(self):
        read = Read.from_unbounded_source(_unbounded_source()) \
            .with_max_read_time(Duration.of_seconds(1))

        self.assertIsNone(read.get_max_num_records())
        self.assertEqual(read.get_max_read_time(), Duration.of_seconds(1))

        # deadline computed at 0.0, then one clock reading per element
        with patch('pycounting.io.read.time.monotonic', side_effect=[0.0, 0.0, 0.5, 1.5]):
            values = list(self.pipeline.apply(read).execute_and_collect())

        self.assertEqual(values, [0, 1])

    def test_with_max_read_time_timedelta(self):
        read = Read.from_unbounded_source(_unbounded_source()) \
            .with_max_num_records(2) \
            .with_max_read_time(timedelta(milliseconds=1500))

        self.assertEqual(read.get_max_read_time(), Duration.of_millis(1500))

        with patch('pycounting.io.read.time.monotonic', side_effect=[0.0, 0.0, 1.0]):
            values = list(self.pipeline.apply(read).execute_and_collect())

        self.assertEqual(values, [0, 1])

    def test_both_limits_stop_at_record_limit(self):
        read = Read.from_unbounded_source(_unbounded_source()) \
            .with_max_read_time(Duration.of_minutes(10)) \
            .with_max_num_records(5)

        self.assertEqual(read.get_max_num_records(), 5)
        self.assertEqual(read.get_max_read_time(), Duration.of_minutes(10))
        self.assertEqual(list(self.pipeline.apply(read).execute_and_collect()), [0, 1, 2, 3, 4])

    def test_both_limits_stop_at_read_time(self):
        read = Read.from_unbounded_source(_unbounded_source()) \
            .with_max_read_time(Duration.of_seconds(2)) \
            .with_max_num_records(100)

        with patch('pycounting.io.read.time.monotonic', side_effect=[10.0, 10.0, 12.0]):
            values = list(self.pipeline.apply(read).execute_and_collect())

        self.assertEqual(values, [0])

    def test_bounded_read_is_immutable(self):
        read = Read.from_unbounded_source(_unbounded_source()).with_max_num_records(3)

        with_time = read.with_max_read_time(Duration.of_seconds(1))

        self.assertIsNot(with_time, read)
        self.assertIsNone(read.get_max_read_time())
        self.assertEqual(with_time.get_max_num_records(), 3)
