from abc import ABC, abstractmethod


class IBuilder(ABC):
    """
    The Builder capability: stepwise operations assembling a product.
    A builder owns exactly one product under construction at a time.
    """

    @abstractmethod
    def reset(self):
        """
        Replaces the product under construction with a blank one.
        """
        ...

    @abstractmethod
    def build_part_a(self):
        ...

    @abstractmethod
    def build_part_b(self):
        ...

    @abstractmethod
    def build_part_c(self):
        ...

    @abstractmethod
    def get_product(self):
        """
        Returns the assembled product and resets the builder.
        The caller becomes the sole owner of the returned product, the
        builder keeps no reference to it and is ready for a new assembly.
        """
        ...
