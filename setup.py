"""
    Copyright 2018 EPAM Systems, Inc.

    Licensed under the Apache License, Version 2.0 (the "License");
    you may not use this file except in compliance with the License.
    You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

    Unless required by applicable law or agreed to in writing, software
    distributed under the License is distributed on an "AS IS" BASIS,
    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
    See the License for the specific language governing permissions and
    limitations under the License.
"""
from setuptools import find_packages, setup
from os import path

BUILDER_DESCRIPTION = ('Conceptual-builder is a demonstration of the Builder '
                       'creational design pattern, in which a director '
                       'drives a builder through a fixed sequence of steps '
                       'to assemble a composite product.')

this_directory = path.abspath(path.dirname(__file__))
with open(path.join(this_directory, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='conceptual-builder',
    version='1.0.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    install_requires=[
        'click>=7.1.2',
        'configobj>=5.0.8',
        'tabulate>=0.9.0'
    ],
    extras_require={
        'test': ['pytest']
    },
    entry_points='''
        [console_scripts]
        builder=conceptual_builder.core.handlers:builder
    ''',
    long_description=long_description,
    long_description_content_type='text/markdown',
    description=BUILDER_DESCRIPTION,
    keywords=['DESIGN-PATTERNS', 'BUILDER', 'DIRECTOR'],
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Libraries',
        'Programming Language :: Python :: 3.10'
    ],
)
