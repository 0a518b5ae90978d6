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
from pycounting.common.config_options import ConfigOptions

__all__ = ['CountingInputOptions']


class CountingInputOptions(object):
    """
    Config options read by :func:`CountingInput.from_configuration`.
    """

    NUM_ELEMENTS = ConfigOptions.key("counting-input.num-elements") \
        .int_type() \
        .no_default_value()
    """
    The number of elements of a bounded counting input. When set, the input produces the numbers
    from 0 to num-elements - 1 and no read limit may be configured.
    """

    MAX_NUM_RECORDS = ConfigOptions.key("counting-input.max-num-records") \
        .int_type() \
        .no_default_value()
    """
    The maximum number of records read from an unbounded counting input.
    """

    MAX_READ_TIME = ConfigOptions.key("counting-input.max-read-time") \
        .duration_type() \
        .no_default_value()
    """
    The maximum time an unbounded counting input is read, e.g. "10 s" or "1 min".
    """
