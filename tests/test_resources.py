import dnacodon
from dnacodon import RESOURCES, DnaCodonWarning
from dnacodon.codon import CodonTableWarning


def test_package_name():
    assert RESOURCES.package == "dnacodon"


def test_version():
    assert isinstance(dnacodon.__version__, str)
    assert dnacodon.__version__


def test_warning_hierarchy():
    assert issubclass(CodonTableWarning, DnaCodonWarning)
    assert issubclass(DnaCodonWarning, Warning)
