"""Infrastructure layer — container file loading, templates, filesystem.

This layer depends on stdlib and third-party libs (Jinja2, ruamel.yaml).
It may import domain models but never services, commands, or output.
"""
