"""
配置模块
"""

from .settings import StoreSettings, DriverConfig
from .validator import ConfigValidator

__all__ = ['StoreSettings', 'DriverConfig', 'ConfigValidator']
