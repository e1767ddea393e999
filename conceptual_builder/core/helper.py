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
import logging
from functools import wraps

import click

from conceptual_builder.commons.log_helper import (get_logger, LOG_NAME,
                                                   USER_LOG_NAME)
from conceptual_builder.commons.oop.patterns import (
    ConcreteBuilder, ManifestBuilder, IBuilder
)
from conceptual_builder.core.conf.config_holder import ConfigHolder
from conceptual_builder.core.constants import (ALLOWED_BUILDERS,
                                               MANIFEST_BUILDER, PARTS_BUILDER,
                                               PART_A, PART_B, PART_C)
from conceptual_builder.exceptions import InvalidValueError

_LOG = get_logger(__name__)

PART_STEPS = {
    PART_A: 'build_part_a',
    PART_B: 'build_part_b',
    PART_C: 'build_part_c'
}


def create_builder(builder_name: str, config: ConfigHolder) -> IBuilder:
    """
    Creates a concrete builder, supplied with the configured part labels.
    :param builder_name: one of the ALLOWED_BUILDERS
    :param config: ConfigHolder
    """
    if builder_name == MANIFEST_BUILDER:
        return ManifestBuilder(labels=config.part_labels)
    return ConcreteBuilder(labels=config.part_labels,
                           prefix=config.description_prefix,
                           separator=config.parts_separator)


def build_parts(builder: IBuilder, parts):
    """
    Invokes the builder steps one by one, in the order of parts given.
    """
    for part in parts:
        step = PART_STEPS.get(part.lower())
        if not step:
            raise InvalidValueError(f'Unknown part `{part}`. Allowed parts: '
                                    f'{", ".join(PART_STEPS)}')
        _LOG.debug(f'Invoking `{step}` directly')
        getattr(builder, step)()


def set_debug_log_level(ctx, param, value):
    if value:
        loggers = [logging.getLogger(name) for name in
                   logging.root.manager.loggerDict if
                   name.startswith(LOG_NAME) or
                   name.startswith(USER_LOG_NAME)]

        console_handler = logging.getLogger(USER_LOG_NAME).handlers[0]

        for logger in loggers:
            if not logger.isEnabledFor(logging.DEBUG):
                logger.setLevel(logging.DEBUG)
                if logger.name == LOG_NAME:
                    logger.addHandler(console_handler)
        _LOG.debug('The logs level was set to DEBUG')


def verbose_option(func):
    @click.option('--verbose', '-v', is_flag=True,
                  callback=set_debug_log_level, expose_value=False,
                  is_eager=True, help="Enable logging verbose mode.")
    @wraps(func)
    def wrapper(*args, **kwargs):
        return func(*args, **kwargs)

    return wrapper


def builder_option(func):
    @click.option('--builder', 'builder_name', default=PARTS_BUILDER,
                  type=click.Choice(ALLOWED_BUILDERS,
                                    case_sensitive=False),
                  help='Concrete builder to assemble the product with. '
                       'Possible options: parts, manifest. '
                       'Default value: parts')
    @wraps(func)
    def wrapper(*args, **kwargs):
        return func(*args, **kwargs)

    return wrapper
