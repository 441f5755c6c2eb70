"""
Copyright 2025 The dnacodon developers

This file is part of dnacodon. dnacodon is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by the Free Software Foundation,
either version 3 of the License, or (at your option) any later version. dnacodon is distributed
in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License for more
details. You should have received a copy of the GNU General Public License along with dnacodon.
If not, see <https://www.gnu.org/licenses/>.
"""
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Union
from warnings import warn

from dnacodon import DnaCodonWarning
from dnacodon.alphabet import DNA

# Constants ------------------------------------------------------------------------------------------------------------
_STOP = 'stop'
_STANDARD_TABLE = (  # https://en.wikipedia.org/wiki/DNA_codon_table
    ('ala', ('GCT', 'GCC', 'GCA', 'GCG')),
    ('arg', ('CGT', 'CGC', 'CGA', 'CGG', 'AGA', 'AGG')),
    ('asn', ('AAT', 'AAC')),
    ('asp', ('GAT', 'GAC')),  # Codons ambiguous between asp and asn are left out
    ('cys', ('TGT', 'TGC')),
    ('gln', ('CAA', 'CAG')),
    ('glu', ('GAA', 'GAG')),
    ('gly', ('GGT', 'GGC', 'GGA', 'GGG')),
    ('his', ('CAT', 'CAC')),
    ('lle', ('ATT', 'ATC', 'ATA')),
    ('leu', ('CTT', 'CTC', 'CTA', 'CTG', 'TTA', 'TTG')),
    ('lys', ('AAA', 'AAG')),
    ('met', ('ATG',)),  # Also the start codon, so there is no separate 'start' entry
    ('phe', ('TTT', 'TTC')),
    ('pro', ('CCT', 'CCC', 'CCA', 'CCG')),
    ('ser', ('TCT', 'TCC', 'TCA', 'TCG', 'AGT', 'AGC')),
    ('thr', ('ACT', 'ACC', 'ACA', 'ACG')),
    ('trp', ('TGG',)),
    ('tyr', ('TAT', 'TAC')),
    ('val', ('GTT', 'GTC', 'GTA', 'GTG')),
    (_STOP, ('TAA', 'TGA', 'TAG')),
)


# Classes --------------------------------------------------------------------------------------------------------------
class CodonTableError(Exception):
    pass


class InvalidArgument(CodonTableError, ValueError):
    """Raised when a codon or amino acid does not have a valid length."""
    pass


class NotFound(CodonTableError, LookupError):
    """Raised when a codon or amino acid of valid length is not in the table."""
    pass


class CodonTableWarning(DnaCodonWarning):
    pass


class CodonTable:
    """
    Bidirectional lookup between amino acids and the codons that encode them.

    Both directions are built from one table of amino acids and their codons and never change afterwards;
    no codon may encode more than one amino acid.

    :param table: Mapping or iterable of (amino acid, codons) pairs, amino acids are stored in lowercase and
                  codons in uppercase
    """
    def __init__(self, table: Union[Mapping[str, Iterable[str]], Iterable[tuple[str, Iterable[str]]]]):
        if isinstance(table, Mapping):
            table = table.items()
        amino_acids, codons = {}, {}
        for acid, acid_codons in table:
            acid = acid.lower()
            if acid in amino_acids:
                raise CodonTableError(f'Amino acid "{acid}" is defined more than once')
            if not (acid_codons := tuple(i.upper() for i in acid_codons)):
                raise CodonTableError(f'Amino acid "{acid}" has no codons')
            for codon in acid_codons:
                if (other := codons.get(codon)) is not None:
                    raise CodonTableError(f'Codon "{codon}" cannot encode both "{other}" and "{acid}"')
                if len(codon) != 3 or codon not in DNA:
                    warn(f'Codon "{codon}" of "{acid}" is not a DNA triplet', CodonTableWarning)
                codons[codon] = acid
            amino_acids[acid] = acid_codons
        self._amino_acids: Mapping[str, tuple[str, ...]] = MappingProxyType(amino_acids)
        self._codons: Mapping[str, str] = MappingProxyType(codons)

    def __repr__(self):
        return f'{self.__class__.__name__}({len(self)} amino acids, {len(self._codons)} codons)'

    def __len__(self):
        return len(self._amino_acids)

    def __iter__(self) -> Iterator[str]:
        return iter(self._amino_acids)

    def __contains__(self, item: str):
        if not isinstance(item, str):
            return False
        return item.lower() in self._amino_acids or item.upper() in self._codons

    @property
    def amino_acids(self) -> Mapping[str, tuple[str, ...]]:
        """Read-only view of amino acid -> codons"""
        return self._amino_acids

    @property
    def codons(self) -> Mapping[str, str]:
        """Read-only view of codon -> amino acid"""
        return self._codons

    def codons_for(self, amino_acid: str) -> tuple[str, ...]:
        """
        Returns the codons for a given amino acid.

        :param amino_acid: Three letter amino acid code, or "stop"
        :return: Tuple of codons in table order
        :raises InvalidArgument: If the amino acid is not three letters long and is not "stop"
        :raises NotFound: If the amino acid has no codons in the table
        """
        if not isinstance(amino_acid, str):
            raise TypeError(amino_acid)
        if len(amino_acid) != 3 and amino_acid.lower() != _STOP:
            raise InvalidArgument(f'Incorrect amino acid "{amino_acid}", must be three letters or "{_STOP}"')
        amino_acid = amino_acid.lower()
        if (codons := self._amino_acids.get(amino_acid)) is None:
            raise NotFound(f'This amino acid has no codons: "{amino_acid}"')
        return codons

    def acid_for(self, codon: str) -> str:
        """
        Returns the amino acid encoded by a codon.

        :param codon: Three letter codon
        :return: Three letter amino acid code, or "stop"
        :raises InvalidArgument: If the codon is not three letters long
        :raises NotFound: If the codon does not encode an amino acid in the table
        """
        if not isinstance(codon, str):
            raise TypeError(codon)
        if len(codon) != 3:
            raise InvalidArgument(f'Incorrect codon "{codon}", must be three letters')
        if (acid := self._codons.get(codon := codon.upper())) is None:
            raise NotFound(f'This codon does not encode an amino acid: "{codon}"')
        return acid

    def synonymous_codons(self, codon: str, include_self: bool = True) -> tuple[str, ...]:
        """
        Returns the codons encoding the same amino acid as ``codon``.

        :param codon: Three letter codon
        :param include_self: Whether to include ``codon`` itself
        """
        synonyms = self._amino_acids[self.acid_for(codon)]
        if include_self:
            return synonyms
        return tuple(i for i in synonyms if i != codon.upper())

    def is_stop(self, codon: str) -> bool:
        return self.acid_for(codon) == _STOP


class _Standard(CodonTable):
    def __init__(self):
        super().__init__(_STANDARD_TABLE)


# Constants ------------------------------------------------------------------------------------------------------------
STANDARD = _Standard()


# Functions ------------------------------------------------------------------------------------------------------------
def codons_for(amino_acid: str) -> tuple[str, ...]:
    """Returns the codons for an amino acid in the standard table, see :meth:`CodonTable.codons_for`"""
    return STANDARD.codons_for(amino_acid)


def acid_for(codon: str) -> str:
    """Returns the amino acid for a codon in the standard table, see :meth:`CodonTable.acid_for`"""
    return STANDARD.acid_for(codon)
