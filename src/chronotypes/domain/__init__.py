"""Domain layer — type names, input shapes, rules, and errors.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
