"""returntyper - plan explicit return-type annotations for TypeScript functions."""

__version__ = "0.1.0"
