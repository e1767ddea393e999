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


class BuilderBaseError(Exception):
    """
    The base exception class for conceptual builder exceptions.
    """
    pass


# =============================================================================
class InternalError(BuilderBaseError):
    """
    The conceptual builder internal error.
    """
    pass


class InvalidValueError(BuilderBaseError):
    """
    The value error.
    """
    pass


class InvalidTypeError(BuilderBaseError):
    """
    The type error.
    """
    pass


# =============================================================================
class ConfigurationError(BuilderBaseError):
    """
    The conceptual builder configuration error.
    """
    pass


class DirectorNotConfiguredError(ConfigurationError):
    """
    A director was asked to build before a builder has been assigned.
    """
    pass


# =============================================================================
