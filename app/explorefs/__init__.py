"""explorefs - one filesystem view over local disk and attached Android devices."""

__version__ = "0.1.0"
