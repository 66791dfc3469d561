"""Service layer — the type registry and the built-in type tables.

Services may import from domain and infrastructure layers.
They must never import from commands or output.
"""
