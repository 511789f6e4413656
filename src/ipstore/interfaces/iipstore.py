"""
IP存储接口
"""
from abc import ABC, abstractmethod
from concurrent.futures import Future
from typing import Iterable, Optional

from ..config.settings import DriverConfig
from ..core.ip import AddressLike


class IIPStore(ABC):
    """IP成员存储接口 - 任何实现这组操作的后端都可以互相替换"""

    @abstractmethod
    def add_ip(self, address: AddressLike) -> None:
        """
        添加单个IP地址，重复添加不报错

        Args:
            address: 4/16字节形式或字符串形式的地址
        """
        pass

    @abstractmethod
    def remove_ip(self, address: AddressLike) -> None:
        """
        删除单个IP地址

        Args:
            address: 要删除的地址

        Raises:
            IPNotFoundError: 地址不存在
        """
        pass

    @abstractmethod
    def has_ip(self, address: AddressLike) -> bool:
        """
        检查地址是否在存储中（单个地址集合或任意网段）

        Args:
            address: 要检查的地址

        Returns:
            是否命中
        """
        pass

    @abstractmethod
    def has_any_ip(self, addresses: Optional[Iterable[AddressLike]]) -> bool:
        """
        至少一个地址命中时返回True，空序列返回False

        Args:
            addresses: 地址序列

        Returns:
            是否有任意一个命中
        """
        pass

    @abstractmethod
    def has_all_ips(self, addresses: Optional[Iterable[AddressLike]]) -> bool:
        """
        所有地址都命中时返回True，空序列返回True

        Args:
            addresses: 地址序列

        Returns:
            是否全部命中
        """
        pass

    @abstractmethod
    def add_network(self, network: str) -> None:
        """
        添加网段

        Args:
            network: CIDR字符串，如 "192.168.22.0/24"

        Raises:
            InvalidNetworkFormatError: 字符串为空或无法解析
        """
        pass

    @abstractmethod
    def remove_network(self, network: str) -> None:
        """
        删除网段，必须使用添加时的同一字符串

        Args:
            network: 添加时使用的CIDR字符串

        Raises:
            InvalidNetworkFormatError: 字符串为空
            NetworkNotFoundError: 未以该字符串注册过网段
        """
        pass

    @abstractmethod
    def stop(self) -> Future:
        """
        异步关闭存储，调用本身不阻塞

        Returns:
            完成时结果为None的Future；关闭失败时Future携带ShutdownError
        """
        pass


class IIPStoreDriver(ABC):
    """IP存储驱动接口 - 按配置创建存储实例"""

    @abstractmethod
    def new(self, config: DriverConfig) -> IIPStore:
        """
        创建存储实例

        Args:
            config: 驱动配置

        Returns:
            可以直接使用的存储实例
        """
        pass
