"""Star, number and letter console patterns, with a command to print them."""

__version__ = "0.1.0"
__all__ = ["__version__"]