"""Strategy layer — the strategy protocol, ordered composition, and the graph-side holder.

Strategies may import from domain. They must never import from plugins or config.
"""
