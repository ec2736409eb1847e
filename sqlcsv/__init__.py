"""Stream SQL Server query results to CSV, one GO-delimited batch at a time."""

__version__ = "0.1.0"
