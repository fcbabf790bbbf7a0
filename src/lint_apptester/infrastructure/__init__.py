"""Infrastructure layer — git, filesystem layout, and directory scanning.

May import from domain and config models; never from services or commands.
"""
