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
import click

from conceptual_builder import __version__
from conceptual_builder.commons.log_helper import get_logger, get_user_logger
from conceptual_builder.commons.oop.patterns import Director
from conceptual_builder.core import initialize_config
from conceptual_builder.core.constants import (
    BUILDER_COMMAND_NAME, MINIMAL_ACTION, FULL_ACTION, CUSTOM_ACTION,
    DEMO_ACTION, ALLOWED_PARTS, PART_A, PART_C, MINIMAL_PRODUCT_HEADING,
    FULL_PRODUCT_HEADING, CUSTOM_PRODUCT_HEADING, OK_RETURN_CODE
)
from conceptual_builder.core.decorators import return_code_manager
from conceptual_builder.core.helper import (create_builder, build_parts,
                                            verbose_option, builder_option)

_LOG = get_logger(__name__)
USER_LOG = get_user_logger()


def _create_builder(builder_name):
    from conceptual_builder.core import CONFIG
    return create_builder(builder_name, CONFIG)


def _direct(builder_name, variant):
    builder_instance = _create_builder(builder_name)
    director = Director()
    director.set_builder(builder_instance)
    _LOG.debug(f"Directing the `{builder_name}` builder")
    director.build(variant)
    return builder_instance.get_product()


@click.group(name=BUILDER_COMMAND_NAME)
@return_code_manager
@click.version_option(version=__version__)
def builder():
    """Assembles products with the Builder design pattern"""
    initialize_config()


@builder.command(name=MINIMAL_ACTION)
@return_code_manager
@builder_option
@verbose_option
def minimal(builder_name):
    """Builds the minimal viable product through the director"""
    product = _direct(builder_name, MINIMAL_ACTION)
    click.echo(product.describe())
    return OK_RETURN_CODE


@builder.command(name=FULL_ACTION)
@return_code_manager
@builder_option
@verbose_option
def full(builder_name):
    """Builds the full featured product through the director"""
    product = _direct(builder_name, FULL_ACTION)
    click.echo(product.describe())
    return OK_RETURN_CODE


@builder.command(name=CUSTOM_ACTION)
@return_code_manager
@click.option('--part', '-p', 'parts', multiple=True,
              type=click.Choice(ALLOWED_PARTS, case_sensitive=False),
              help='Part to add, in the order given. Multiple parameters '
                   'are allowed, the same part may be repeated.')
@builder_option
@verbose_option
def custom(parts, builder_name):
    """
    Builds a product by invoking the builder steps directly,
    bypassing the director
    """
    builder_instance = _create_builder(builder_name)
    build_parts(builder_instance, parts)
    if not parts:
        USER_LOG.warning('No parts specified, the product is empty')
    click.echo(builder_instance.get_product().describe())
    return OK_RETURN_CODE


@builder.command(name=DEMO_ACTION)
@return_code_manager
@builder_option
@verbose_option
def demo(builder_name):
    """
    Walks through the pattern: a minimal and a full featured product
    built by the director, then a custom one built without it
    """
    builder_instance = _create_builder(builder_name)
    director = Director()
    director.builder = builder_instance

    click.echo(MINIMAL_PRODUCT_HEADING)
    director.build_minimal_viable_product()
    click.echo(builder_instance.get_product().describe())

    click.echo(FULL_PRODUCT_HEADING)
    director.build_full_featured_product()
    click.echo(builder_instance.get_product().describe())

    click.echo(CUSTOM_PRODUCT_HEADING)
    build_parts(builder_instance, (PART_A, PART_C))
    click.echo(builder_instance.get_product().describe())
    return OK_RETURN_CODE
