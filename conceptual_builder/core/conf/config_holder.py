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
import os

from configobj import ConfigObj
from validate import Validator

from conceptual_builder.commons.log_helper import get_logger, get_user_logger
from conceptual_builder.commons.oop.patterns import PartLabels
from conceptual_builder.commons.oop.patterns.builder.concrete import (
    DEFAULT_PART_A_LABEL, DEFAULT_PART_B_LABEL, DEFAULT_PART_C_LABEL
)
from conceptual_builder.commons.oop.patterns.builder.product import (
    DEFAULT_DESCRIPTION_PREFIX, DEFAULT_PARTS_SEPARATOR
)
from conceptual_builder.exceptions import ConfigurationError

CONFIG_FILE_NAME = 'builder.conf'

PART_A_LABEL_CFG = 'part_a_label'
PART_B_LABEL_CFG = 'part_b_label'
PART_C_LABEL_CFG = 'part_c_label'
DESCRIPTION_PREFIX_CFG = 'description_prefix'
PARTS_SEPARATOR_CFG = 'parts_separator'

CONFIG_SPEC = [
    f'{PART_A_LABEL_CFG} = string(min=1, default="{DEFAULT_PART_A_LABEL}")',
    f'{PART_B_LABEL_CFG} = string(min=1, default="{DEFAULT_PART_B_LABEL}")',
    f'{PART_C_LABEL_CFG} = string(min=1, default="{DEFAULT_PART_C_LABEL}")',
    f'{DESCRIPTION_PREFIX_CFG} = '
    f'string(default="{DEFAULT_DESCRIPTION_PREFIX}")',
    f'{PARTS_SEPARATOR_CFG} = '
    f'string(min=1, default="{DEFAULT_PARTS_SEPARATOR}")'
]

QUOTING_HINT = 'values containing commas must be quoted'
LABEL_ERROR_MESSAGE = 'must be a non-empty string, ' + QUOTING_HINT

ERROR_MESSAGE_MAPPING = {
    PART_A_LABEL_CFG: LABEL_ERROR_MESSAGE,
    PART_B_LABEL_CFG: LABEL_ERROR_MESSAGE,
    PART_C_LABEL_CFG: LABEL_ERROR_MESSAGE,
    DESCRIPTION_PREFIX_CFG: 'must be a single string, ' + QUOTING_HINT,
    PARTS_SEPARATOR_CFG: LABEL_ERROR_MESSAGE
}

UNKNOWN_PARAM_MESSAGE = 'Unknown parameter(s) in the configuration file: {}'

_LOG = get_logger(__name__)
USER_LOG = get_user_logger()


class ConfigHolder:
    """
    Holds the builder configuration, read from `builder.conf` inside
    the given folder. Missing parameters fall back to their defaults,
    given no folder is provided every parameter is a default one.
    """

    def __init__(self, dir_path=None):
        con_path = None
        if dir_path:
            con_path = os.path.join(dir_path, CONFIG_FILE_NAME)
            if not os.path.isfile(con_path):
                raise ConfigurationError(
                    f'{CONFIG_FILE_NAME} does not exist inside {dir_path} '
                    f'folder')
            _LOG.debug(f'Loading configuration from {con_path}')
        self._config_path = con_path
        self._config_dict = ConfigObj(con_path, configspec=CONFIG_SPEC)
        self._validate()

    def _validate(self):
        unknown = [key for key in self._config_dict
                   if key not in ERROR_MESSAGE_MAPPING]
        if unknown:
            USER_LOG.warning(UNKNOWN_PARAM_MESSAGE.format(', '.join(unknown)))

        param_valid_dict = self._config_dict.validate(Validator())

        if isinstance(param_valid_dict, dict):
            messages = ''
            for key, value in param_valid_dict.items():
                if not value:
                    messages += '\n{0} {1}'.format(key,
                                                   ERROR_MESSAGE_MAPPING[key])
            if messages:
                raise ConfigurationError(
                    'Configuration is invalid. ' + messages)

    def _resolve_variable(self, variable_name):
        return self._config_dict.get(variable_name)

    @property
    def config_path(self):
        return self._config_path

    @property
    def part_labels(self) -> PartLabels:
        return PartLabels(
            part_a=self._resolve_variable(PART_A_LABEL_CFG),
            part_b=self._resolve_variable(PART_B_LABEL_CFG),
            part_c=self._resolve_variable(PART_C_LABEL_CFG)
        )

    @property
    def description_prefix(self):
        return self._resolve_variable(DESCRIPTION_PREFIX_CFG)

    @property
    def parts_separator(self):
        return self._resolve_variable(PARTS_SEPARATOR_CFG)
