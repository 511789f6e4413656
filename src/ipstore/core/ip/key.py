"""
IP地址规范化编码 - 把任意形式的地址转换为16字节规范键
"""
import ipaddress
from typing import Union

from ...exceptions import InvalidIPFormatError

AddressLike = Union[bytes, bytearray, str, ipaddress.IPv4Address, ipaddress.IPv6Address]

KEY_LENGTH = 16

# IPv4映射到IPv6的前缀 ::ffff:0:0/96
V4_IN_V6_PREFIX = bytes(10) + b'\xff\xff'


def key(address: AddressLike) -> bytes:
    """
    计算地址的规范键

    4字节的IPv4地址会嵌入IPv4映射前缀（10个0字节 + 2个0xFF字节），
    16字节地址原样返回，所以同一个IPv4地址的两种形式得到相同的键。

    Args:
        address: 4/16字节的bytes、ipaddress地址对象或地址字符串

    Returns:
        16字节规范键

    Raises:
        InvalidIPFormatError: 地址格式无效
    """
    packed = _packed(address)

    if len(packed) == 4:
        return V4_IN_V6_PREFIX + packed
    if len(packed) == KEY_LENGTH:
        return packed

    raise InvalidIPFormatError(
        ip_address=address,
        reason=f"字节长度必须是4或16: {len(packed)}"
    )


def _packed(address: AddressLike) -> bytes:
    """取得地址的原始字节形式"""
    if isinstance(address, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        return address.packed

    if isinstance(address, (bytes, bytearray)):
        return bytes(address)

    if isinstance(address, str):
        text = address.strip()
        if not text:
            raise InvalidIPFormatError(ip_address=address, reason="IP地址不能为空")
        try:
            return ipaddress.ip_address(text).packed
        except ValueError as e:
            raise InvalidIPFormatError(ip_address=address, reason=str(e))

    raise InvalidIPFormatError(
        ip_address=address,
        reason=f"不支持的地址类型: {type(address).__name__}"
    )


def key_to_int(address_key: bytes) -> int:
    """规范键转换为128位整数（用于网段掩码比较）"""
    return int.from_bytes(address_key, byteorder="big", signed=False)


def is_v4_mapped(address_key: bytes) -> bool:
    """判断规范键是否表示IPv4地址"""
    return address_key[:12] == V4_IN_V6_PREFIX


def key_to_address(address_key: bytes) -> Union[ipaddress.IPv4Address, ipaddress.IPv6Address]:
    """
    规范键还原为地址对象

    IPv4映射的键还原为IPv4Address，其余还原为IPv6Address
    """
    if len(address_key) != KEY_LENGTH:
        raise InvalidIPFormatError(
            ip_address=address_key,
            reason=f"规范键必须是{KEY_LENGTH}字节"
        )

    if is_v4_mapped(address_key):
        return ipaddress.IPv4Address(address_key[12:])
    return ipaddress.IPv6Address(address_key)
