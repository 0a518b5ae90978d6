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

__all__ = ['PyCountingException', 'IllegalArgumentException']


class PyCountingException(Exception):
    """
    Base class of the exceptions raised by pycounting itself.
    """

    def __init__(self, msg):
        super(PyCountingException, self).__init__(msg)
        self.msg = msg

    def __str__(self):
        return self.msg


class IllegalArgumentException(PyCountingException, ValueError):
    """
    Exception for a method that has been passed an illegal or inappropriate argument. It is
    raised at the time the argument is passed, never later when the pipeline is built or run.
    """
