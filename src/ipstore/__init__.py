"""
IP成员存储 - 基于地址集合和网段集合的内存准入判断
"""

__version__ = "1.0.0"

from .system import IPStoreSystem
from .data.storage import open_store, create_store, register_driver

__all__ = ['IPStoreSystem', 'open_store', 'create_store', 'register_driver']
