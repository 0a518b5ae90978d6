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

"""
Common classes shared by the pipeline and the io modules:

    - :class:`Configuration`:
      Lightweight configuration object which stores key/value pairs.
    - :class:`ConfigOptions`:
      Builder of typed :class:`ConfigOption` s.
    - :class:`Duration`:
      A time-based amount of time, such as '34.5 seconds'.
    - :class:`Instant`:
      An instantaneous point on the time-line, used as element timestamp.
"""
from pycounting.common.config_options import ConfigOptions, ConfigOption
from pycounting.common.configuration import Configuration
from pycounting.common.time import Duration, Instant

__all__ = [
    'Configuration',
    'ConfigOptions',
    'ConfigOption',
    'Duration',
    'Instant',
]
