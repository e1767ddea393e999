from typing import Iterator, List, Tuple

from tabulate import tabulate

DEFAULT_DESCRIPTION_PREFIX = 'Product parts: '
DEFAULT_PARTS_SEPARATOR = ', '
NO_PARTS_PLACEHOLDER = '(none)'
EMPTY_MANIFEST_MESSAGE = 'Manifest is empty'
MANIFEST_HEADERS = ('#', 'step', 'part')


class Product:
    """
    A composite product, accumulating part labels in the order they
    have been added. Parts are neither deduplicated nor reordered.

    Public methods:
        - add_part(self, label:str): Appends a part label.
        - describe(self): Renders the parts as a human-readable summary.
    Properties:
        - parts:Tuple[str, ...]: a snapshot of the labels added so far.
    """

    def __init__(self, prefix: str = DEFAULT_DESCRIPTION_PREFIX,
                 separator: str = DEFAULT_PARTS_SEPARATOR):
        self._parts: List[str] = []
        self._prefix = prefix
        self._separator = separator

    def add_part(self, label: str):
        """
        Appends a part label to the product.
        :label:str
        :returns:None
        """
        self._parts.append(label)

    @property
    def parts(self) -> Tuple[str, ...]:
        return tuple(self._parts)

    def describe(self) -> str:
        """
        Returns a comma-separated summary of the parts, given any have
        been added, otherwise a summary stating there are none.
        :returns:str
        """
        if not self._parts:
            return self._prefix + NO_PARTS_PLACEHOLDER
        return self._prefix + self._separator.join(self._parts)

    def __len__(self):
        return len(self._parts)

    def __iter__(self) -> Iterator[str]:
        return iter(self._parts)

    def __repr__(self):
        return f'{self.__class__.__name__}(parts={self._parts!r})'


class Manifest:
    """
    A product recording which construction step contributed each part.
    """

    def __init__(self, tablefmt: str = 'simple'):
        self._entries: List[Tuple[str, str]] = []
        self._tablefmt = tablefmt

    def add_entry(self, step: str, label: str):
        self._entries.append((step, label))

    @property
    def entries(self) -> Tuple[Tuple[str, str], ...]:
        return tuple(self._entries)

    @property
    def parts(self) -> Tuple[str, ...]:
        return tuple(label for _, label in self._entries)

    def describe(self) -> str:
        if not self._entries:
            return EMPTY_MANIFEST_MESSAGE
        rows = [(index, step, label) for index, (step, label)
                in enumerate(self._entries, start=1)]
        return tabulate(tabular_data=rows, headers=MANIFEST_HEADERS,
                        tablefmt=self._tablefmt, missingval='-',
                        disable_numparse=True)

    def __len__(self):
        return len(self._entries)

    def __repr__(self):
        return f'{self.__class__.__name__}(entries={self._entries!r})'
