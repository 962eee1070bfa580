from .logger import setup_logger
from .config_manager import ConfigManager, config_manager

__all__ = [
    'setup_logger',
    'ConfigManager',
    'config_manager',
]
