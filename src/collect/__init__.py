"""Offline conversion of humanitarian exports.

This package rewrites foreign CSV exports into the upstream dataset
formats the loaders consume, placing rows with the region gazetteer.
"""
