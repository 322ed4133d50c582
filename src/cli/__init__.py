"""Command line interface for ReliefMap."""
