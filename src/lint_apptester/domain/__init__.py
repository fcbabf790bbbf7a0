"""Domain layer — directory roles, rules, and the built-in catalog.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
