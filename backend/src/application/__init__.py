"""
Application Layer - Catalog services.

This layer orchestrates domain entities through repository interfaces.
It depends on the domain layer only.
"""
