from . import logger
from .settings import Settings, apply_settings, get_settings

__all__ = ["logger", "Settings", "apply_settings", "get_settings"]
