"""Storage layer.

This package holds keyed entity repositories, derived indexes,
and JSON snapshot persistence used by the domain managers.
"""
