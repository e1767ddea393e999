from .builder import (
    IBuilder, AbstractBuilder, ConcreteBuilder, ManifestBuilder, PartLabels,
    Product, Manifest
)
from .director import IDirector, Director
