"""
数据模块
包含存储后端与驱动注册
"""

from .storage import (
    MemoryIPStore,
    MemoryIPStoreDriver,
    register_driver,
    open_store,
    create_store
)

__all__ = [
    'MemoryIPStore',
    'MemoryIPStoreDriver',
    'register_driver',
    'open_store',
    'create_store'
]
