"""
Top-level module, including package resources and the warning hierarchy.
"""
from importlib.metadata import metadata, PackageNotFoundError
from pathlib import Path


# Constants ------------------------------------------------------------------------------------------------------------
__all__ = [
    "alphabet",
    "codon",
]

# Classes --------------------------------------------------------------------------------------------------------------
class Resources:
    """
    Holds global resources for dnacodon.

    Attributes:
        package: Name of the package
        metadata: Package metadata
        version: Installed version of the package
    """
    def __init__(self):
        self.package: str = Path(__file__).parent.name
        self._metadata: 'PackageMetadata' = None  # Generated on demand

    @property
    def metadata(self) -> 'PackageMetadata':
        if self._metadata is None:
            self._metadata = metadata(self.package)
        return self._metadata

    @property
    def version(self) -> str:
        try:
            return self.metadata['Version']
        except PackageNotFoundError:  # Running from a source checkout
            return 'unknown'


class DnaCodonWarning(Warning):
    """
    A warning class for this package, making it easy to silence all our warning messages should you wish to.
    Consult the `python.warnings` module documentation for more details.

    Examples:
        >>> import warnings
        >>> from dnacodon import DnaCodonWarning
        >>> warnings.simplefilter('ignore', DnaCodonWarning)
    """

    pass


# Constants ------------------------------------------------------------------------------------------------------------
RESOURCES = Resources()
__version__ = RESOURCES.version
