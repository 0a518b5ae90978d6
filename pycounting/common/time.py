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
import re
import time
from datetime import datetime, timedelta
from functools import total_ordering

import pytz

from pycounting.util.exceptions import IllegalArgumentException

__all__ = ['Duration', 'Instant']

_NANOS_PER_MICRO = 1000
_NANOS_PER_MILLI = 1000_000
_NANOS_PER_SECOND = 1000_000_000

# unit label -> nanoseconds
_DURATION_UNITS = {
    'ns': 1,
    'nano': 1,
    'nanos': 1,
    'nanosecond': 1,
    'nanoseconds': 1,
    'us': _NANOS_PER_MICRO,
    'micro': _NANOS_PER_MICRO,
    'micros': _NANOS_PER_MICRO,
    'microsecond': _NANOS_PER_MICRO,
    'microseconds': _NANOS_PER_MICRO,
    'ms': _NANOS_PER_MILLI,
    'milli': _NANOS_PER_MILLI,
    'millis': _NANOS_PER_MILLI,
    'millisecond': _NANOS_PER_MILLI,
    'milliseconds': _NANOS_PER_MILLI,
    's': _NANOS_PER_SECOND,
    'sec': _NANOS_PER_SECOND,
    'secs': _NANOS_PER_SECOND,
    'second': _NANOS_PER_SECOND,
    'seconds': _NANOS_PER_SECOND,
    'm': 60 * _NANOS_PER_SECOND,
    'min': 60 * _NANOS_PER_SECOND,
    'minute': 60 * _NANOS_PER_SECOND,
    'minutes': 60 * _NANOS_PER_SECOND,
    'h': 3600 * _NANOS_PER_SECOND,
    'hour': 3600 * _NANOS_PER_SECOND,
    'hours': 3600 * _NANOS_PER_SECOND,
    'd': 86400 * _NANOS_PER_SECOND,
    'day': 86400 * _NANOS_PER_SECOND,
    'days': 86400 * _NANOS_PER_SECOND,
}

_DURATION_PATTERN = re.compile(r'^\s*(\d+)\s*([a-zA-Z]*)\s*$')


@total_ordering
class Duration(object):
    """
    A time-based amount of time, such as '34.5 seconds'. Durations are immutable and kept with
    nanosecond precision.
    """

    __slots__ = ('_nanos',)

    def __init__(self, nanos: int):
        self._nanos = int(nanos)

    @staticmethod
    def of_days(days: int) -> 'Duration':
        return Duration(days * 86400 * _NANOS_PER_SECOND)

    @staticmethod
    def of_hours(hours: int) -> 'Duration':
        return Duration(hours * 3600 * _NANOS_PER_SECOND)

    @staticmethod
    def of_minutes(minutes: int) -> 'Duration':
        return Duration(minutes * 60 * _NANOS_PER_SECOND)

    @staticmethod
    def of_seconds(seconds: int) -> 'Duration':
        return Duration(seconds * _NANOS_PER_SECOND)

    @staticmethod
    def of_millis(millis: int) -> 'Duration':
        return Duration(millis * _NANOS_PER_MILLI)

    @staticmethod
    def of_nanos(nanos: int) -> 'Duration':
        return Duration(nanos)

    @staticmethod
    def of_timedelta(delta: timedelta) -> 'Duration':
        micros = (delta.days * 86400 + delta.seconds) * 1000_000 + delta.microseconds
        return Duration(micros * _NANOS_PER_MICRO)

    @staticmethod
    def parse(text: str) -> 'Duration':
        """
        Parses a duration from its textual form, a number followed by an optional unit, for
        example "10 s", "500ms" or "2 min". Without a unit the number is read as milliseconds.

        :param text: The string to parse.
        :return: The parsed duration.
        """
        if text is None:
            raise IllegalArgumentException("Duration text cannot be None")
        matcher = _DURATION_PATTERN.match(text)
        if matcher is None:
            raise IllegalArgumentException(
                "Text '%s' is not a valid duration, expected '<number><unit>'" % text)
        value = int(matcher.group(1))
        unit = matcher.group(2).lower()
        if not unit:
            return Duration.of_millis(value)
        if unit not in _DURATION_UNITS:
            raise IllegalArgumentException(
                "Time interval unit label '%s' does not match any of the recognized units: %s"
                % (unit, ', '.join(sorted(_DURATION_UNITS.keys()))))
        return Duration(value * _DURATION_UNITS[unit])

    def to_nanos(self) -> int:
        return self._nanos

    def to_millis(self) -> int:
        return self._nanos // _NANOS_PER_MILLI

    def to_seconds(self) -> float:
        return self._nanos / _NANOS_PER_SECOND

    def to_timedelta(self) -> timedelta:
        return timedelta(microseconds=self._nanos // _NANOS_PER_MICRO)

    def is_negative(self) -> bool:
        return self._nanos < 0

    def __eq__(self, other):
        return isinstance(other, Duration) and self._nanos == other._nanos

    def __lt__(self, other):
        if not isinstance(other, Duration):
            return NotImplemented
        return self._nanos < other._nanos

    def __hash__(self):
        return hash(self._nanos)

    def __repr__(self):
        return 'Duration<{} ns>'.format(self._nanos)


@total_ordering
class Instant(object):
    """
    An instantaneous point on the time-line. Stored as seconds and nanoseconds since the epoch.
    """

    def __init__(self, seconds, nanos):
        self.seconds = seconds
        self.nanos = nanos

    @staticmethod
    def now() -> 'Instant':
        epoch_nanos = time.time_ns()
        return Instant(epoch_nanos // _NANOS_PER_SECOND, epoch_nanos % _NANOS_PER_SECOND)

    @staticmethod
    def of_epoch_milli(epoch_milli: int) -> 'Instant':
        secs = epoch_milli // 1000
        mos = epoch_milli % 1000
        return Instant(secs, mos * _NANOS_PER_MILLI)

    def to_epoch_milli(self) -> int:
        return self.seconds * 1000 + self.nanos // _NANOS_PER_MILLI

    def plus(self, duration: Duration) -> 'Instant':
        total = self._epoch_nanos() + duration.to_nanos()
        return Instant(total // _NANOS_PER_SECOND, total % _NANOS_PER_SECOND)

    def to_datetime(self, timezone: str = 'UTC') -> datetime:
        """
        Converts this instant to a time-zone aware datetime.

        :param timezone: The name of the time zone, e.g. 'UTC' or 'Asia/Shanghai'.
        """
        utc_dt = datetime.fromtimestamp(self.seconds, tz=pytz.utc) \
            + timedelta(microseconds=self.nanos // _NANOS_PER_MICRO)
        return utc_dt.astimezone(pytz.timezone(timezone))

    def _epoch_nanos(self) -> int:
        return self.seconds * _NANOS_PER_SECOND + self.nanos

    def __eq__(self, other):
        return (self.__class__ == other.__class__ and
                self.seconds == other.seconds and
                self.nanos == other.nanos)

    def __lt__(self, other):
        if not isinstance(other, Instant):
            return NotImplemented
        return self._epoch_nanos() < other._epoch_nanos()

    def __hash__(self):
        return hash((self.seconds, self.nanos))

    def __repr__(self):
        return 'Instant<{}, {}>'.format(self.seconds, self.nanos)
