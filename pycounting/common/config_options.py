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
from typing import TypeVar, Generic, Callable, Any

from pycounting.common.time import Duration
from pycounting.util.exceptions import IllegalArgumentException

T = TypeVar('T')

__all__ = ['ConfigOptions', 'ConfigOption']


def _to_int(value) -> int:
    if isinstance(value, (bool, float)):
        raise IllegalArgumentException("Could not parse value '%s' as an integer" % value)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise IllegalArgumentException("Could not parse value '%s' as an integer" % value)


def _to_duration(value) -> Duration:
    if isinstance(value, Duration):
        return value
    return Duration.parse(str(value))


class ConfigOptions(object):
    """
    {@code ConfigOptions} are used to build a :class:`~pycounting.common.ConfigOption`. The option
    is typically built in one of the following patterns:

    Example:
    ::

        # simple integer-valued option with a default value
        >>> ConfigOptions.key("application.parallelism").int_type().default_value(100)
        # duration-valued option with no default value
        >>> ConfigOptions.key("counting-input.max-read-time").duration_type().no_default_value()
    """

    @staticmethod
    def key(key: str) -> 'ConfigOptions.OptionBuilder':
        """
        Starts building a new ConfigOption.

        :param key: The key for the config option.
        :return: The builder for the config option with the given key.
        """
        if not key:
            raise IllegalArgumentException("The config option key must not be empty")
        return ConfigOptions.OptionBuilder(key)

    class OptionBuilder(object):
        def __init__(self, key: str):
            self._key = key

        def int_type(self) -> 'ConfigOptions.TypedConfigOptionBuilder[int]':
            """
            Defines that the value of the option should be of int type.
            """
            return ConfigOptions.TypedConfigOptionBuilder(self._key, _to_int)

        def duration_type(self) -> 'ConfigOptions.TypedConfigOptionBuilder[Duration]':
            """
            Defines that the value of the option should be of :class:`Duration` type. String
            values such as "10 s" are parsed with :func:`Duration.parse`.
            """
            return ConfigOptions.TypedConfigOptionBuilder(self._key, _to_duration)

    class TypedConfigOptionBuilder(Generic[T]):
        def __init__(self, key: str, converter: Callable[[Any], T]):
            self._key = key
            self._converter = converter

        def default_value(self, value: T) -> 'ConfigOption[T]':
            return ConfigOption(self._key, self._converter, value)

        def no_default_value(self) -> 'ConfigOption[T]':
            return ConfigOption(self._key, self._converter, None)


class ConfigOption(Generic[T]):
    """
    A {@code ConfigOption} describes a configuration parameter. It encapsulates the configuration
    key, the type conversion and an optional default value for the configuration parameter.

    {@code ConfigOptions} are built via the ConfigOptions class. Once created, a config
    option is immutable.
    """

    def __init__(self, key: str, converter: Callable[[Any], T], default_value: T = None):
        self._key = key
        self._converter = converter
        self._default_value = default_value

    def key(self) -> str:
        return self._key

    def default_value(self) -> T:
        return self._default_value

    def convert(self, value) -> T:
        """
        Converts a raw configured value into the type of this option.
        """
        return self._converter(value)

    def __eq__(self, other):
        return (isinstance(other, ConfigOption) and
                self._key == other._key and
                self._default_value == other._default_value)

    def __hash__(self):
        return hash(self._key)

    def __repr__(self):
        return 'ConfigOption<key={}, default={}>'.format(self._key, self._default_value)
