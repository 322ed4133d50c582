"""Aggregation over loaded records.

This package computes map extents, unique locations, and displacement
event statistics from immutable records.
"""
