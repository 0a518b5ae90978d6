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
Root transforms and sources producing sequences of integers:

    - :class:`CountingInput`:
      Factory of :class:`BoundedCountingInput` (0 to n - 1) and :class:`UnboundedCountingInput`
      (0 upwards, optionally limited by a number of records or a read time).
    - :class:`CountingSource`:
      Factory of the bounded and unbounded counting sources read by :class:`CountingInput`.
    - :class:`Read`:
      Root transforms that read a source, optionally bounding an unbounded read.
    - :class:`CountingInputOptions`:
      Config options used by :func:`CountingInput.from_configuration`.
"""
from pycounting.io.counting_input import CountingInput, BoundedCountingInput, \
    UnboundedCountingInput
from pycounting.io.counting_options import CountingInputOptions
from pycounting.io.counting_source import CountingSource, NowTimestampFn
from pycounting.io.read import Read, BoundedRead, UnboundedRead, BoundedReadFromUnboundedSource

__all__ = [
    'BoundedCountingInput',
    'BoundedRead',
    'BoundedReadFromUnboundedSource',
    'CountingInput',
    'CountingInputOptions',
    'CountingSource',
    'NowTimestampFn',
    'Read',
    'UnboundedCountingInput',
    'UnboundedRead',
]
