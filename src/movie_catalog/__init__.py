"""Movie catalog ingestion: TMDb lookups reconciled into a JSON catalog."""

__version__ = "0.1.0"
