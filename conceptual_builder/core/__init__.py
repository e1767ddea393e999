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

from conceptual_builder.commons.log_helper import get_logger, get_user_logger
from conceptual_builder.core.conf.config_holder import ConfigHolder
from conceptual_builder.core.constants import CONF_PATH_ENV

_LOG = get_logger('core.__init__')
USER_LOG = get_user_logger()

# CONF VARS ===================================================================
CONF_PATH = os.environ.get(CONF_PATH_ENV)
CONFIG: ConfigHolder = None


def initialize_config():
    """
    Reads the configuration from the folder referenced by the
    BUILDER_CONF environment variable, given it is set.
    """
    global CONF_PATH
    global CONFIG
    CONF_PATH = os.environ.get(CONF_PATH_ENV)
    if CONF_PATH:
        USER_LOG.info(f'Configuration used: {CONF_PATH}')
    else:
        _LOG.debug(f'{CONF_PATH_ENV} is not set, default configuration '
                   f'is used')
    CONFIG = ConfigHolder(CONF_PATH)
    return CONFIG
