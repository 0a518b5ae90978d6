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
Entry point classes for building pipelines:

    - :class:`Pipeline`:
      The context in which collections are constructed.
    - :class:`PBegin`:
      The input of a root transform.
    - :class:`PCollection`:
      A lazily read collection of elements, either bounded or unbounded.
    - :class:`IsBounded`:
      The boundedness of a :class:`PCollection`.
    - :class:`TimestampedValue`:
      An element together with its event time timestamp.
"""
from pycounting.pipeline.pcollection import IsBounded, PCollection, TimestampedValue
from pycounting.pipeline.pipeline import Pipeline, PBegin

__all__ = [
    'IsBounded',
    'PBegin',
    'PCollection',
    'Pipeline',
    'TimestampedValue',
]
