from abc import ABC, abstractmethod


class IDirector(ABC):

    @property
    @abstractmethod
    def builder(self):
        ...

    @abstractmethod
    def build_minimal_viable_product(self):
        ...

    @abstractmethod
    def build_full_featured_product(self):
        ...
