"""
models/ - Domain Models
=======================
Immutable value records for the catalog entities.
"""
