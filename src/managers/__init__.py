"""Domain managers.

This package composes repositories, derived indexes, and snapshot files
into warehouse, healthcare, inventory, and ledger verbs.
"""
