"""Variable blocked record files, EBCDIC code pages, bounded strings and command-line tools."""

__version__ = "2.0.0"
__all__ = ["__version__"]