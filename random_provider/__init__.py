"""Random context provider: a mock NGSI v1 data source for context broker tests."""

__version__ = "0.1.0"
