"""
网段条目 - CIDR网段的解析与包含判断
"""
import ipaddress
from dataclasses import dataclass
from typing import Union

from ...exceptions import InvalidNetworkFormatError
from .key import V4_IN_V6_PREFIX, KEY_LENGTH, key_to_int

_KEY_BITS = KEY_LENGTH * 8
_FULL_MASK = (1 << _KEY_BITS) - 1
_V4_MAPPED_BASE = key_to_int(V4_IN_V6_PREFIX + bytes(4))
_V4_MAPPED_PREFIXLEN = 96


@dataclass(frozen=True)
class NetworkEntry:
    """
    已注册的网段

    identifier 是注册时使用的字符串（去掉首尾空白），也是删除时唯一有效的键；
    base/mask 是网段在规范键空间中的128位表示，IPv4网段被映射到 ::ffff:0:0/96 之内。
    """
    identifier: str
    network: Union[ipaddress.IPv4Network, ipaddress.IPv6Network]
    base: int
    mask: int

    @classmethod
    def parse(cls, network_spec: str) -> 'NetworkEntry':
        """
        解析CIDR字符串

        Args:
            network_spec: 形如 "192.168.22.255/24" 的字符串，基地址可带主机位

        Returns:
            网段条目

        Raises:
            InvalidNetworkFormatError: 字符串为空或无法解析
        """
        identifier = normalize_identifier(network_spec)

        if '/' not in identifier:
            raise InvalidNetworkFormatError(
                network=network_spec,
                reason="缺少前缀长度，格式应为 地址/前缀长度"
            )

        # 只接受数字前缀长度，不接受掩码形式
        prefix = identifier.split('/', 1)[1]
        if not (prefix.isascii() and prefix.isdigit()):
            raise InvalidNetworkFormatError(
                network=network_spec,
                reason=f"前缀长度必须是十进制数字: {prefix}"
            )

        try:
            network = ipaddress.ip_network(identifier, strict=False)
        except ValueError as e:
            raise InvalidNetworkFormatError(network=network_spec, reason=str(e))

        if network.version == 4:
            prefixlen = network.prefixlen + _V4_MAPPED_PREFIXLEN
            base = _V4_MAPPED_BASE | int(network.network_address)
        else:
            prefixlen = network.prefixlen
            base = int(network.network_address)

        mask = _FULL_MASK ^ ((1 << (_KEY_BITS - prefixlen)) - 1)
        return cls(identifier=identifier, network=network, base=base & mask, mask=mask)

    def contains_key(self, address_key: bytes) -> bool:
        """判断规范键是否落在网段内"""
        return (key_to_int(address_key) & self.mask) == self.base

    def __str__(self) -> str:
        return self.identifier


def normalize_identifier(network_spec: str) -> str:
    """
    规范化网段标识：只去掉首尾空白，不做语义上的CIDR等价转换

    Raises:
        InvalidNetworkFormatError: 非字符串或空字符串
    """
    if not isinstance(network_spec, str):
        raise InvalidNetworkFormatError(
            network=repr(network_spec),
            reason=f"网段必须是字符串: {type(network_spec).__name__}"
        )

    identifier = network_spec.strip()
    if not identifier:
        raise InvalidNetworkFormatError(network=network_spec, reason="网段不能为空")

    return identifier
