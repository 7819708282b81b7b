"""Classic algorithms and data structures for study and experiment."""

__version__ = "0.1.0"