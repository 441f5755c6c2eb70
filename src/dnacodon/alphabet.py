"""
Nucleotide symbols, used to check codons when a table is built and to list every possible codon.
"""
from itertools import product
from typing import Generator


# Classes --------------------------------------------------------------------------------------------------------------
class AlphabetError(Exception):
    pass


class Alphabet:
    """
    Set of unique single-letter symbols; ``word in alphabet`` is true when every letter of the word is a symbol.
    """
    def __init__(self, symbols: str):
        if len(set(symbols)) != len(symbols):
            raise AlphabetError(f'Repeated symbol in "{symbols}"')
        self.symbols: str = symbols
        self._lookup: frozenset[str] = frozenset(symbols)

    def __len__(self):
        return len(self.symbols)

    def __contains__(self, word: str):
        return self._lookup.issuperset(word)

    def words(self, k: int, order: str = None) -> Generator[str, None, None]:
        """
        Yields every word of length ``k``.

        :param k: Word length
        :param order: Symbol order to enumerate in, defaults to ``symbols``
        """
        order = self.symbols if order is None else order
        if len(order) != len(self) or frozenset(order) != self._lookup:
            raise AlphabetError(f'{order=} is not a reordering of "{self.symbols}"')
        yield from map(''.join, product(order, repeat=k))


class _DNA(Alphabet):
    def __init__(self):
        super().__init__('ACGT')

    def triplets(self) -> Generator[str, None, None]:
        """Yields all 64 codons, TTT first and GGG last."""
        yield from self.words(3, 'TCAG')


# Constants ------------------------------------------------------------------------------------------------------------
DNA = _DNA()
