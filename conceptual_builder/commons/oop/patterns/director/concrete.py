from . import IDirector
from ..builder import IBuilder

from typing import Union, Type

from conceptual_builder.commons.log_helper import get_logger
from conceptual_builder.exceptions import (
    DirectorNotConfiguredError, InvalidTypeError, InvalidValueError
)

_LOG = get_logger(__name__)

MINIMAL_VARIANT = 'minimal'
FULL_VARIANT = 'full'


class Director(IDirector):
    """
    Runs the construction steps of an assigned builder in a
    predetermined order. The director only references the builder, the
    lifetime of the builder and of its products remains with the client.

    Public methods:
        - set_builder(self, builder:IBuilder): Assigns a builder to drive.
        - build_minimal_viable_product(self): Runs the part A step.
        - build_full_featured_product(self): Runs the part A, B and C steps.
        - build(self, variant:str): Runs the steps of a named variant.
    Properties:
        - builder:Union[IBuilder, Type[None]]: the builder being driven.
    """

    def __init__(self, builder: Union[IBuilder, Type[None]] = None):
        self._builder = None
        if builder is not None:
            self.builder = builder
        self._variants = {
            MINIMAL_VARIANT: self.build_minimal_viable_product,
            FULL_VARIANT: self.build_full_featured_product
        }

    @property
    def builder(self) -> Union[IBuilder, Type[None]]:
        """
        Returns an assigned builder:IBuilder instance or None.
        :returns:Union[None, IBuilder]
        """
        return self._builder

    @builder.setter
    def builder(self, other: IBuilder):
        """
        Sets up the builder to drive, replacing a previous one.
        :other:IBuilder
        :returns:None
        """
        if not isinstance(other, IBuilder):
            raise InvalidTypeError(
                f'A builder must be of IBuilder class, got '
                f'`{other.__class__.__name__}`.')
        self._builder = other

    def set_builder(self, builder: IBuilder):
        self.builder = builder

    @property
    def variants(self) -> tuple:
        return tuple(self._variants)

    def build_minimal_viable_product(self):
        builder = self._configured_builder()
        builder.build_part_a()

    def build_full_featured_product(self):
        builder = self._configured_builder()
        builder.build_part_a()
        builder.build_part_b()
        builder.build_part_c()

    def build(self, variant: str):
        """
        Runs the construction steps of the named product variant.
        :variant:str
        :raises: InvalidValueError, given the variant is unknown
        :returns:None
        """
        action = self._variants.get(variant)
        if action is None:
            raise InvalidValueError(
                f'Unknown product variant `{variant}`. Available variants: '
                f'{", ".join(self._variants)}.')
        _LOG.debug(f'Building the `{variant}` product variant')
        action()

    def _configured_builder(self) -> IBuilder:
        if self._builder is None:
            raise DirectorNotConfiguredError(
                'No builder configured: assign a builder to the director '
                'before building a product.')
        return self._builder
