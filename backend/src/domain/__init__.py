"""
Domain Layer - Catalog entities, value objects and repository contracts.

This layer has no dependencies on frameworks or infrastructure.
"""
