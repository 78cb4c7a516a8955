"""Domain layer — type descriptors, layouts, and the schema container.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, emit, commands, or config.
"""
