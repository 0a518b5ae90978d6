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
from pycounting.util.exceptions import IllegalArgumentException


def _format_message(message, args):
    if message is None:
        return "Illegal argument"
    if args:
        return message % args
    return str(message)


def check_argument(condition: bool, message: str = None, *args):
    """
    Checks the given boolean condition, and raises an :class:`IllegalArgumentException` if the
    condition is not met (evaluates to False).

    :param condition: The condition to check.
    :param message: The message of the exception, may contain `%s` placeholders.
    :param args: The arguments substituted into the placeholders of the message.
    """
    if not condition:
        raise IllegalArgumentException(_format_message(message, args))


def check_not_null(value, message: str = None, *args):
    """
    Ensures that the given value is not None, and returns it.

    :param value: The value to check.
    :param message: The message of the exception, may contain `%s` placeholders.
    :param args: The arguments substituted into the placeholders of the message.
    :return: The value itself.
    """
    if value is None:
        raise IllegalArgumentException(_format_message(message, args))
    return value


def is_int(value) -> bool:
    """
    Returns whether the given value is an integer. Booleans are not counted as integers.
    """
    return isinstance(value, int) and not isinstance(value, bool)
