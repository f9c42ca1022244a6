"""Domain layer — optional values, minimum capabilities, reduction, parsing.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""
