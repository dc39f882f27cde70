"""Core layer - shared primitives.

Result types, error values, enums, settings and the dependency container.
Nothing in here knows about tokens or roles beyond error codes.
"""
