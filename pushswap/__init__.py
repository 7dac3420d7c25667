"""Two-stack integer sorting that reports the operations used."""

__version__ = "1.0.0"
__all__ = ["cli", "parsing", "sorting", "stack"]