"""safelist — list operations whose partial cases are guarded by types."""

__version__ = "0.1.0"

__all__: list[str] = ["__version__"]
