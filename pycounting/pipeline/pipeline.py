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
import logging

from pycounting.common.configuration import Configuration
from pycounting.pipeline.pcollection import PCollection

__all__ = ['Pipeline', 'PBegin']

logger = logging.getLogger(__name__)


class PBegin(object):
    """
    The input of a root transform, i.e. a transform that reads from a source rather than from
    another :class:`PCollection`.
    """

    def __init__(self, pipeline: 'Pipeline'):
        self._pipeline = pipeline

    @property
    def pipeline(self) -> 'Pipeline':
        return self._pipeline

    def apply(self, transform) -> PCollection:
        """
        Applies a root transform, which is any object providing `materialize(begin)`.

        :param transform: The transform to apply.
        :return: The collection produced by the transform.
        """
        logger.debug("Applying %s to the pipeline root", transform)
        return transform.materialize(self)


class Pipeline(object):
    """
    The context in which collections are constructed. Transforms are applied to the pipeline
    root to obtain :class:`PCollection` s, which read their elements lazily.

    Example:
    ::

        >>> pipeline = Pipeline.create()
        >>> numbers = pipeline.apply(CountingInput.up_to(100))
    """

    def __init__(self, configuration: Configuration):
        self._configuration = configuration

    @staticmethod
    def create(configuration: Configuration = None) -> 'Pipeline':
        """
        Creates a pipeline.

        :param configuration: Optional, the configuration of the pipeline.
        """
        if configuration is None:
            configuration = Configuration()
        return Pipeline(configuration)

    def get_configuration(self) -> Configuration:
        return self._configuration

    def begin(self) -> PBegin:
        return PBegin(self)

    def apply(self, transform) -> PCollection:
        """
        Applies the given root transform to this pipeline.
        """
        return self.begin().apply(transform)
