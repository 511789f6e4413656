"""
核心模块
包含地址规范键、网段解析与同步原语
"""

from .ip import key, NetworkEntry
from .sync import ReadWriteLock

__all__ = [
    'key',
    'NetworkEntry',
    'ReadWriteLock'
]
