"""Service layer — generation workflows returning ServiceResult.

Services may import from domain, emit, infrastructure, and config.
They must never import from commands or output.
"""
