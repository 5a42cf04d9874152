"""Include/exclude sets, processing errors, processors and chains of processing nodes."""

__version__ = "0.1.0"