"""Core services and cross-cutting concerns.

Import from the subpackages directly (``sharehub.core.errors``,
``sharehub.core.database`` ...); this package does not re-export them so
that ``sharehub.config`` can import constants without pulling in the
database engine.
"""
