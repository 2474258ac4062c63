"""Loading, projecting and displaying FdF height maps as wireframes."""

__version__ = "0.1.0"
__all__ = ["__version__"]