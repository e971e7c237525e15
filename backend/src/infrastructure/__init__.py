"""
Infrastructure Layer - Configuration, logging and persistence.

This layer contains concrete implementations of domain interfaces
(the SQLAlchemy product repository) and the settings and logging setup.
"""
