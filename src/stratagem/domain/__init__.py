"""Domain layer — extension point catalog, operation shapes, and contexts.

This layer depends only on stdlib.
It must never import from strategy, plugins, or config.
"""
