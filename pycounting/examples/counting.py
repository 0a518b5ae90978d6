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
import argparse
import logging
import sys

from pycounting.common import Configuration, Instant
from pycounting.io import CountingInput, CountingInputOptions
from pycounting.pipeline import Pipeline


def counting(num_elements=None, max_num_records=None, max_read_time=None, timezone='UTC'):
    configuration = Configuration()
    if num_elements is not None:
        configuration.set(CountingInputOptions.NUM_ELEMENTS, num_elements)
    if max_num_records is not None:
        configuration.set(CountingInputOptions.MAX_NUM_RECORDS, max_num_records)
    if max_read_time is not None:
        configuration.set(CountingInputOptions.MAX_READ_TIME, max_read_time)

    pipeline = Pipeline.create(configuration)
    counting_input = CountingInput.from_configuration(configuration)
    if num_elements is None:
        # event time advances one second per element
        counting_input = counting_input.with_timestamp_fn(
            lambda i: Instant.of_epoch_milli(i * 1000))

    numbers = pipeline.apply(counting_input)
    logging.info("Reading %s collection", numbers.is_bounded().name.lower())
    for element in numbers.read():
        if element.timestamp is None:
            logging.info("%s", element.value)
        else:
            logging.info("%s at %s", element.value, element.timestamp.to_datetime(timezone))


if __name__ == '__main__':
    logging.basicConfig(stream=sys.stdout, level=logging.INFO, format="%(message)s")

    parser = argparse.ArgumentParser()
    parser.add_argument(
        '--num-elements',
        dest='num_elements',
        type=int,
        required=False,
        help='Produce the numbers from 0 to num-elements - 1.')
    parser.add_argument(
        '--max-num-records',
        dest='max_num_records',
        type=int,
        required=False,
        help='Stop an unbounded count after this many records.')
    parser.add_argument(
        '--max-read-time',
        dest='max_read_time',
        required=False,
        help='Stop an unbounded count after this amount of time, e.g. "2 s".')
    parser.add_argument(
        '--timezone',
        dest='timezone',
        default='UTC',
        help='Time zone used to print the element timestamps, e.g. "Asia/Shanghai".')

    argv = sys.argv[1:]
    known_args, _ = parser.parse_known_args(argv)

    counting(known_args.num_elements, known_args.max_num_records, known_args.max_read_time,
             known_args.timezone)
