"""
xbmcapi - asyncio client for the XBMC / Kodi JSON-RPC API
"""

__version__ = "0.1.0"
__logo__ = "📺"

from xbmcapi.client import XBMC
from xbmcapi.config.schema import ClientConfig
from xbmcapi.handlers import DefaultHandlers
from xbmcapi.methods.schema import UNSET

__all__ = ["XBMC", "ClientConfig", "DefaultHandlers", "UNSET", "__version__"]
