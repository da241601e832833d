"""schemalint: lint SQL schema directories against a live workspace."""

__version__ = "0.1.0"
