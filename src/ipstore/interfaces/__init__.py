"""
接口定义包
"""

from .iipstore import IIPStore, IIPStoreDriver

__all__ = [
    'IIPStore',
    'IIPStoreDriver'
]
