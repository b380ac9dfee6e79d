"""Domain layer — the linked list type, refinements, and safe operations.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
