"""Tank arena: map ingestion and match initialization."""

__version__ = "0.1.0"
