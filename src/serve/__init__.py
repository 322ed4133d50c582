"""Response builders for the map front end.

This package turns load results and aggregates into JSON-ready
payloads with the status code an HTTP layer should return.
"""
