"""Neural regions stored as text files, a structure generator and a console."""

__version__ = "0.1.0"
__all__ = ["__version__"]