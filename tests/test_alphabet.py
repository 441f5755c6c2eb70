import pytest

from dnacodon.alphabet import DNA, Alphabet, AlphabetError


class TestAlphabet:
    def test_unique_symbols(self):
        with pytest.raises(AlphabetError):
            Alphabet("AACGT")

    @pytest.mark.parametrize("item,expected", [("ACGT", True), ("GATTACA", True), ("ACGU", False), ("", True)])
    def test_contains(self, item, expected):
        assert (item in DNA) is expected

    def test_words(self):
        assert list(Alphabet("AB").words(2)) == ["AA", "AB", "BA", "BB"]

    @pytest.mark.parametrize("order", ["TCA", "TCAA", "TCAGU"])
    def test_words_bad_order(self, order):
        with pytest.raises(AlphabetError):
            list(DNA.words(3, order))


class TestDNA:
    def test_triplets(self):
        triplets = list(DNA.triplets())
        assert len(triplets) == len(set(triplets)) == 64
        assert triplets[0] == "TTT"
        assert triplets[-1] == "GGG"
        assert all(len(i) == 3 and i in DNA for i in triplets)

    def test_symbols(self):
        assert DNA.symbols == "ACGT"
        assert len(DNA) == 4
