from . import AbstractBuilder, Product, Manifest
from .product import DEFAULT_DESCRIPTION_PREFIX, DEFAULT_PARTS_SEPARATOR

from typing import NamedTuple, Union, Type

DEFAULT_PART_A_LABEL = 'Dough'
DEFAULT_PART_B_LABEL = 'Sauce'
DEFAULT_PART_C_LABEL = 'Cheese'

PART_A_STEP = 'build_part_a'
PART_B_STEP = 'build_part_b'
PART_C_STEP = 'build_part_c'


class PartLabels(NamedTuple):
    part_a: str = DEFAULT_PART_A_LABEL
    part_b: str = DEFAULT_PART_B_LABEL
    part_c: str = DEFAULT_PART_C_LABEL


class ConcreteBuilder(AbstractBuilder):
    """
    A concrete Builder class, which assembles a Product out of
    fixed part labels, one label per step.

    Public methods:
        - reset(self): Starts a new blank product.
        - build_part_a(self): Adds the `part_a` label.
        - build_part_b(self): Adds the `part_b` label.
        - build_part_c(self): Adds the `part_c` label.
        - get_product(self): Returns the product and resets the builder.
    """

    def __init__(self, labels: Union[PartLabels, Type[None]] = None,
                 prefix: str = DEFAULT_DESCRIPTION_PREFIX,
                 separator: str = DEFAULT_PARTS_SEPARATOR):
        self._labels = labels or PartLabels()
        self._prefix = prefix
        self._separator = separator
        super().__init__()

    @property
    def labels(self) -> PartLabels:
        return self._labels

    def _blank_product(self) -> Product:
        return Product(prefix=self._prefix, separator=self._separator)

    def build_part_a(self):
        self._product.add_part(self._labels.part_a)

    def build_part_b(self):
        self._product.add_part(self._labels.part_b)

    def build_part_c(self):
        self._product.add_part(self._labels.part_c)


class ManifestBuilder(AbstractBuilder):
    """
    A concrete Builder class, which produces a Manifest, noting the step
    each part has been contributed by. Follows the same construction
    steps as the ConcreteBuilder, while its product is unrelated to
    the Product class.
    """

    def __init__(self, labels: Union[PartLabels, Type[None]] = None,
                 tablefmt: str = 'simple'):
        self._labels = labels or PartLabels()
        self._tablefmt = tablefmt
        super().__init__()

    def _blank_product(self) -> Manifest:
        return Manifest(tablefmt=self._tablefmt)

    def build_part_a(self):
        self._product.add_entry(PART_A_STEP, self._labels.part_a)

    def build_part_b(self):
        self._product.add_entry(PART_B_STEP, self._labels.part_b)

    def build_part_c(self):
        self._product.add_entry(PART_C_STEP, self._labels.part_c)
