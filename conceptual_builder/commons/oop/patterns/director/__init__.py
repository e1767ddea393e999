from .interface import IDirector
from .concrete import Director
