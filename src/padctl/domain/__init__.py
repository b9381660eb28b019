"""Domain layer — macro grammar, key names, scopes, and layouts.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
