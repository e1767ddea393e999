from . import IBuilder
from abc import abstractmethod

from conceptual_builder.commons.log_helper import get_logger

_LOG = get_logger(__name__)


class AbstractBuilder(IBuilder):
    """
    Provides the reset-on-retrieve behaviour shared by concrete builders.
    A concrete builder only declares how a blank product is created and
    how each step mutates it.
    """

    def __init__(self):
        self._product = None
        self.reset()

    @abstractmethod
    def _blank_product(self):
        """
        Returns a new, empty product instance.
        """
        ...

    def reset(self):
        self._product = self._blank_product()

    def get_product(self):
        """
        Hands the current product over to the caller and starts
        a new one.
        :returns:Any
        """
        product = self._product
        self.reset()
        _LOG.debug(f'{self.__class__.__name__} released a product of '
                   f'{len(product)} part(s)')
        return product
