"""photo4k: content-aware 16:9 4K photo converter."""

__version__ = "1.0.0"
