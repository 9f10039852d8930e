"""Extension layer — strategy plugins via pluggy.

Discovery: entry_points (pip-installed) plus single-file local plugins.
INVARIANT: Plugin failures are warnings, never errors.
"""

from stratagem.plugins.hookspecs import hookimpl
from stratagem.plugins.manager import PluginManager

__all__ = ["PluginManager", "hookimpl"]
