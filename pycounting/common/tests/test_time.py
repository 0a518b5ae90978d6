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
from datetime import datetime, timedelta

import pytz

from pycounting.common import Duration, Instant
from pycounting.testing.test_case_utils import PyCountingTestCase
from pycounting.util.exceptions import IllegalArgumentException


class DurationTests(PyCountingTestCase):

    def test_factories(self):
        self.assertEqual(Duration.of_millis(5000), Duration.of_seconds(5))
        self.assertEqual(Duration.of_seconds(120), Duration.of_minutes(2))
        self.assertEqual(Duration.of_minutes(60), Duration.of_hours(1))
        self.assertEqual(Duration.of_hours(48), Duration.of_days(2))
        self.assertEqual(Duration.of_nanos(1000_000), Duration.of_millis(1))
        self.assertEqual(Duration.of_timedelta(timedelta(seconds=1, microseconds=500)),
                         Duration.of_nanos(1000_500_000))

    def test_accessors(self):
        duration = Duration.of_millis(1500)
        self.assertEqual(duration.to_nanos(), 1500_000_000)
        self.assertEqual(duration.to_millis(), 1500)
        self.assertEqual(duration.to_seconds(), 1.5)
        self.assertEqual(duration.to_timedelta(), timedelta(milliseconds=1500))
        self.assertFalse(duration.is_negative())
        self.assertTrue(Duration.of_seconds(-1).is_negative())

    def test_ordering_and_hash(self):
        self.assertLess(Duration.of_millis(999), Duration.of_seconds(1))
        self.assertGreater(Duration.of_minutes(1), Duration.of_seconds(59))
        self.assertEqual(len({Duration.of_seconds(1), Duration.of_millis(1000)}), 1)
        self.assertNotEqual(Duration.of_seconds(1), 1)

    def test_parse(self):
        self.assertEqual(Duration.parse("10 s"), Duration.of_seconds(10))
        self.assertEqual(Duration.parse("500ms"), Duration.of_millis(500))
        self.assertEqual(Duration.parse("2 min"), Duration.of_minutes(2))
        self.assertEqual(Duration.parse("3 hours"), Duration.of_hours(3))
        self.assertEqual(Duration.parse("1d"), Duration.of_days(1))
        self.assertEqual(Duration.parse("250"), Duration.of_millis(250))
        self.assertEqual(Duration.parse(" 7 SECONDS "), Duration.of_seconds(7))

    def test_parse_invalid(self):
        with self.assertRaises(IllegalArgumentException):
            Duration.parse("ten seconds")
        with self.assertRaises(IllegalArgumentException):
            Duration.parse("5 weeks")
        with self.assertRaises(IllegalArgumentException):
            Duration.parse("-5 s")
        with self.assertRaises(IllegalArgumentException):
            Duration.parse(None)


class InstantTests(PyCountingTestCase):

    def test_epoch_milli(self):
        instant = Instant.of_epoch_milli(1500)
        self.assertEqual(instant, Instant(1, 500_000_000))
        self.assertEqual(instant.to_epoch_milli(), 1500)

        before_epoch = Instant.of_epoch_milli(-1)
        self.assertEqual(before_epoch, Instant(-1, 999_000_000))
        self.assertEqual(before_epoch.to_epoch_milli(), -1)

    def test_plus(self):
        instant = Instant.of_epoch_milli(900).plus(Duration.of_millis(200))
        self.assertEqual(instant, Instant(1, 100_000_000))

    def test_ordering(self):
        self.assertLess(Instant.of_epoch_milli(1), Instant.of_epoch_milli(2))
        self.assertLessEqual(Instant(5, 0), Instant(5, 0))

    def test_now(self):
        first = Instant.now()
        second = Instant.now()
        self.assertLessEqual(first, second)
        self.assertGreater(first.to_epoch_milli(), 0)

    def test_to_datetime(self):
        instant = Instant.of_epoch_milli(0)
        self.assertEqual(instant.to_datetime(), datetime(1970, 1, 1, tzinfo=pytz.utc))
        self.assertEqual(instant.to_datetime('Asia/Shanghai').hour, 8)
        self.assertEqual(Instant.of_epoch_milli(1500).to_datetime().microsecond, 500_000)
