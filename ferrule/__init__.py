"""Run, verify and track progress through a directory of small exercises."""

__version__ = "0.1.0"
__all__ = ["__version__"]