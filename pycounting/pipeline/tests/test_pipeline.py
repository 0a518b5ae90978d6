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

from pycounting.common import Configuration
from pycounting.pipeline import IsBounded, PBegin, PCollection, Pipeline, TimestampedValue
from pycounting.testing.test_case_utils import PyCountingPipelineTestCase
from pycounting.util.exceptions import IllegalArgumentException


class _ElementsTransform(object):

    def __init__(self, elements, is_bounded=IsBounded.BOUNDED):
        self.elements = elements
        self.is_bounded = is_bounded
        self.begins = []

    def create_reader(self):
        return iter(TimestampedValue(element, i) for i, element in enumerate(self.elements))

    def materialize(self, begin):
        self.begins.append(begin)
        return PCollection(begin.pipeline, self, self.is_bounded)


class _CountForeverTransform(_ElementsTransform):

    def __init__(self):
        super(_CountForeverTransform, self).__init__(None, IsBounded.UNBOUNDED)

    def create_reader(self):
        return (TimestampedValue(i) for i in itertools.count())


class PipelineTests(PyCountingPipelineTestCase):

    def test_create(self):
        conf = Configuration(conf_data={"k1": "v1"})

        self.assertIs(Pipeline.create(conf).get_configuration(), conf)
        self.assertEqual(Pipeline.create().get_configuration(), Configuration())

    def test_apply_materializes_transform_on_root(self):
        transform = _ElementsTransform(['a', 'b'])

        collection = self.pipeline.apply(transform)

        self.assertEqual(len(transform.begins), 1)
        self.assertIsInstance(transform.begins[0], PBegin)
        self.assertIs(transform.begins[0].pipeline, self.pipeline)
        self.assertIs(collection.pipeline, self.pipeline)
        self.assertIs(collection.producer, transform)
        self.assertEqual(collection.is_bounded(), IsBounded.BOUNDED)

    def test_begin_apply(self):
        transform = _ElementsTransform([1], IsBounded.UNBOUNDED)

        collection = self.pipeline.begin().apply(transform)

        self.assertEqual(collection.is_bounded(), IsBounded.UNBOUNDED)

    def test_read(self):
        collection = self.pipeline.apply(_ElementsTransform(['a', 'b', 'c']))

        self.assertEqual(list(collection.read()),
                         [TimestampedValue('a', 0),
                          TimestampedValue('b', 1),
                          TimestampedValue('c', 2)])

    def test_execute_and_collect(self):
        collection = self.pipeline.apply(_ElementsTransform([3, 1, 2]))

        self.assertEqual(list(collection.execute_and_collect()), [3, 1, 2])
        self.assertEqual(collection.execute_and_collect(2), [3, 1])
        self.assertEqual(collection.execute_and_collect(10), [3, 1, 2])

    def test_execute_and_collect_unbounded_with_limit(self):
        collection = self.pipeline.apply(_CountForeverTransform())

        self.assertEqual(collection.execute_and_collect(4), [0, 1, 2, 3])

    def test_execute_and_collect_invalid_limit(self):
        collection = self.pipeline.apply(_ElementsTransform([1]))

        with self.assertRaises(IllegalArgumentException):
            collection.execute_and_collect(0)
        with self.assertRaises(IllegalArgumentException):
            collection.execute_and_collect(1.5)


class TimestampedValueTests(PyCountingPipelineTestCase):

    def test_equality(self):
        self.assertEqual(TimestampedValue(1, 10), TimestampedValue(1, 10))
        self.assertNotEqual(TimestampedValue(1, 10), TimestampedValue(1, 11))
        self.assertEqual(TimestampedValue(1).timestamp, None)
        self.assertEqual(repr(TimestampedValue(1, 2)), 'TimestampedValue(1, 2)')
