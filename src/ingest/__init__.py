"""Dataset ingestion.

This package reads the region's CSV datasets, coerces their fields,
and maps rows into immutable typed records for aggregation.
"""
