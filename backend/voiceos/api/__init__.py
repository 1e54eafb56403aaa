"""
API Routes Module

Exposes all route modules for registration in main app.
"""
from . import routes_proxy
from . import routes_keys
from . import routes_usage
from . import routes_stats

__all__ = ["routes_proxy", "routes_keys", "routes_usage", "routes_stats"]
