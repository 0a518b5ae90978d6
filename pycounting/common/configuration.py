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
from typing import Dict, Any, Optional

from pycounting.common.config_options import ConfigOption

__all__ = ['Configuration']


class Configuration:
    """
    Lightweight configuration object which stores key/value pairs.
    """

    def __init__(self, other: 'Configuration' = None, conf_data: Dict[str, Any] = None):
        """
        Creates a new configuration.

        :param other: Optional, if this parameter exists, creates a new configuration with a
                      copy of the given configuration.
        :param conf_data: Optional, initial key/value pairs of the configuration.
        """
        self._conf_data = {}  # type: Dict[str, Any]
        if other is not None:
            self._conf_data.update(other._conf_data)
        if conf_data is not None:
            self._conf_data.update(conf_data)

    def get(self, option: ConfigOption) -> Optional[Any]:
        """
        Returns the value of the given option converted to the option's type, or the option's
        default value (which may be None) if the option is not set.

        :param option: The config option to read.
        :return: The (default) value of the option.
        """
        if not self.contains_key(option.key()):
            return option.default_value()
        return option.convert(self._conf_data[option.key()])

    def set(self, option: ConfigOption, value) -> 'Configuration':
        """
        Sets the value of the given option. The value is converted eagerly so that an invalid
        value is reported here rather than when the option is read.
        """
        self._conf_data[option.key()] = option.convert(value)
        return self

    def contains_key(self, key: str) -> bool:
        """
        Checks whether there is an entry with the specified key.

        :param key: Key of entry.
        :return: True if the key is stored, false otherwise.
        """
        return key in self._conf_data

    def to_dict(self) -> Dict[str, str]:
        """
        Converts the configuration into a dict representation of string key-pair.

        :return: Dict representation of the configuration.
        """
        return {key: str(value) for key, value in self._conf_data.items()}

    def __deepcopy__(self, memodict=None):
        return Configuration(other=self)

    def __eq__(self, other):
        if isinstance(other, Configuration):
            return self._conf_data == other._conf_data
        else:
            return False

    def __hash__(self):
        return hash(frozenset(self.to_dict().items()))

    def __str__(self):
        return str(self.to_dict())
