"""Extension layer — plugin system via pluggy.

Discovery: entry_points (pip-installed) in the ``padctl.plugins`` group,
plus single-file plugins in ``.padctl/plugins/``.
INVARIANT: Plugin failures are warnings, never errors.
"""

from padctl.plugins.hookspecs import hookimpl
from padctl.plugins.manager import PluginManager

__all__ = ["PluginManager", "hookimpl"]
