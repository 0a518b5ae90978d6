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
import io
import os
import sys

from setuptools import setup

if sys.version_info < (3, 8):
    print("Python versions prior to 3.8 are not supported for pycounting.",
          file=sys.stderr)
    sys.exit(-1)

this_directory = os.path.abspath(os.path.dirname(__file__))
version_file = os.path.join(this_directory, 'pycounting/version.py')

try:
    exec(open(version_file).read())
except IOError:
    print("Failed to load pycounting version file for packaging. " +
          "'%s' not found!" % version_file,
          file=sys.stderr)
    sys.exit(-1)
VERSION = __version__  # noqa

with io.open(os.path.join(this_directory, 'README.md'), 'r', encoding='utf-8') as f:
    long_description = f.read()

PACKAGES = ['pycounting',
            'pycounting.common',
            'pycounting.examples',
            'pycounting.io',
            'pycounting.pipeline',
            'pycounting.testing',
            'pycounting.util']

install_requires = ['cloudpickle>=2.2.0',
                    'pytz>=2018.3']

setup(
    name='pycounting',
    version=VERSION,
    packages=PACKAGES,
    python_requires='>=3.8',
    install_requires=install_requires,
    extras_require={
        'test': ['pytest>=7.0.0'],
    },
    license='https://www.apache.org/licenses/LICENSE-2.0',
    description='Bounded and unbounded counting inputs for data-processing pipelines',
    long_description=long_description,
    long_description_content_type='text/markdown',
    zip_safe=False,
    classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10']
)
