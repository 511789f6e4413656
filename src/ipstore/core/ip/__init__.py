"""
IP模块 - 地址规范键与网段
"""

from .key import key, key_to_int, key_to_address, is_v4_mapped, AddressLike
from .network import NetworkEntry, normalize_identifier

__all__ = [
    'key',
    'key_to_int',
    'key_to_address',
    'is_v4_mapped',
    'AddressLike',
    'NetworkEntry',
    'normalize_identifier'
]
