"""qagate: test metrics aggregation and quality gates."""

__version__ = "0.1.0"
