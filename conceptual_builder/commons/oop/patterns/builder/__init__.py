from .product import Product, Manifest
from .interface import IBuilder
from .abstract import AbstractBuilder
from .concrete import ConcreteBuilder, ManifestBuilder, PartLabels
