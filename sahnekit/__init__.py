"""Readers and writers for common file formats, plus simulated block devices and filesystem bookkeeping."""

__version__ = "0.1.0"