"""
Domain layer: pure types and helpers with no third-party or outer-layer imports.
"""
