"""
内存IP存储实现
数据保存在内存中，程序结束即消失
"""
import logging
import threading
from concurrent.futures import Future
from enum import Enum
from typing import Dict, Iterable, List, Optional, Set, Any

from ...config.settings import DriverConfig
from ...core.ip import AddressLike, NetworkEntry, key, key_to_address, normalize_identifier
from ...core.sync import ReadWriteLock
from ...exceptions import (
    IPNotFoundError, NetworkNotFoundError, ShutdownError, StoreStoppedError
)
from ...interfaces import IIPStore, IIPStoreDriver

logger = logging.getLogger(__name__)


class StoreState(Enum):
    RUNNING = "running"
    STOPPING = "stopping"
    STOPPED = "stopped"


class MemoryIPStore(IIPStore):
    """
    内存IP存储实现

    单个地址集合和网段集合由同一把读写锁保护，
    查询持有共享锁，修改持有独占锁，所以查询总能看到两个集合的一致状态
    """

    STORE_TYPE = "memory"

    def __init__(self, capacity_hint: Optional[int] = None):
        """
        初始化内存存储

        Args:
            capacity_hint: 预计条目数，仅用于日志
        """
        self._lock = ReadWriteLock()

        # 内存数据结构
        self._ips: Set[bytes] = set()  # 规范键
        self._networks: Dict[str, NetworkEntry] = {}  # 注册字符串 -> 网段条目

        # 生命周期
        self._state = StoreState.RUNNING
        self._stop_future: Optional[Future] = None
        self._lifecycle_lock = threading.Lock()

        self.capacity_hint = capacity_hint

    # ========== 单个地址 ==========

    def add_ip(self, address: AddressLike) -> None:
        """添加单个地址（重复添加无副作用）"""
        address_key = key(address)
        with self._lock.write_locked():
            self._ensure_running("add_ip")
            self._ips.add(address_key)

    def remove_ip(self, address: AddressLike) -> None:
        """删除单个地址"""
        address_key = key(address)
        with self._lock.write_locked():
            self._ensure_running("remove_ip")
            if address_key not in self._ips:
                raise IPNotFoundError(str(key_to_address(address_key)))
            self._ips.discard(address_key)

    def has_ip(self, address: AddressLike) -> bool:
        """检查地址是否命中单个地址集合或任意网段"""
        address_key = key(address)
        with self._lock.read_locked():
            self._ensure_running("has_ip")
            return self._contains(address_key)

    def has_any_ip(self, addresses: Optional[Iterable[AddressLike]]) -> bool:
        """任意一个地址命中即返回True"""
        keys = self._keys(addresses)
        with self._lock.read_locked():
            self._ensure_running("has_any_ip")
            return any(self._contains(address_key) for address_key in keys)

    def has_all_ips(self, addresses: Optional[Iterable[AddressLike]]) -> bool:
        """所有地址都命中才返回True，空序列视为全部命中"""
        keys = self._keys(addresses)
        with self._lock.read_locked():
            self._ensure_running("has_all_ips")
            return all(self._contains(address_key) for address_key in keys)

    # ========== 网段 ==========

    def add_network(self, network: str) -> None:
        """添加网段，以去掉首尾空白后的字符串作为键"""
        entry = NetworkEntry.parse(network)
        with self._lock.write_locked():
            self._ensure_running("add_network")
            self._networks[entry.identifier] = entry

    def remove_network(self, network: str) -> None:
        """删除网段，只按注册字符串精确匹配"""
        identifier = normalize_identifier(network)
        with self._lock.write_locked():
            self._ensure_running("remove_network")
            if identifier not in self._networks:
                raise NetworkNotFoundError(identifier)
            del self._networks[identifier]

    @staticmethod
    def _keys(addresses: Optional[Iterable[AddressLike]]) -> List[bytes]:
        """
        把地址序列转换为规范键列表

        Raises:
            TypeError: 传入的是单个字符串或字节串而不是地址序列
        """
        if addresses is None:
            return []

        if isinstance(addresses, (str, bytes, bytearray)):
            raise TypeError(
                f"需要地址序列，而不是单个{type(addresses).__name__}: {addresses!r}"
            )

        return [key(address) for address in addresses]

    def _contains(self, address_key: bytes) -> bool:
        """调用方需持有锁"""
        if address_key in self._ips:
            return True

        # 线性扫描
        for entry in self._networks.values():
            if entry.contains_key(address_key):
                return True

        return False

    # ========== 查询与统计 ==========

    def list_ips(self) -> List[str]:
        """列出所有单个地址（按规范键排序）"""
        with self._lock.read_locked():
            self._ensure_running("list_ips")
            return [str(key_to_address(k)) for k in sorted(self._ips)]

    def list_networks(self) -> List[str]:
        """列出所有网段的注册字符串"""
        with self._lock.read_locked():
            self._ensure_running("list_networks")
            return sorted(self._networks)

    def get_stats(self) -> Dict[str, Any]:
        """获取统计信息"""
        with self._lock.read_locked():
            return {
                'store_type': self.STORE_TYPE,
                'ip_count': len(self._ips),
                'network_count': len(self._networks),
                'state': self._state.value
            }

    @property
    def state(self) -> StoreState:
        return self._state

    # ========== 生命周期 ==========

    def stop(self) -> Future:
        """
        异步关闭存储

        清理在后台线程中进行，先等待正在执行的操作释放锁。
        重复调用返回同一个Future。

        Returns:
            Future，成功时结果为None，失败时携带ShutdownError
        """
        with self._lifecycle_lock:
            if self._stop_future is not None:
                return self._stop_future

            future = Future()
            future.set_running_or_notify_cancel()
            self._stop_future = future
            self._state = StoreState.STOPPING

        logger.debug("开始关闭内存IP存储")
        worker = threading.Thread(
            target=self._shutdown,
            args=(future,),
            name="ipstore-memory-stop",
            daemon=True
        )
        worker.start()
        return future

    def _shutdown(self, future: Future):
        """后台关闭任务，结果只投递一次"""
        try:
            with self._lock.write_locked():
                try:
                    self._teardown()
                finally:
                    self._state = StoreState.STOPPED
        except Exception as e:
            logger.warning(f"内存IP存储关闭失败: {e}")
            future.set_exception(ShutdownError(reason=str(e), store_type=self.STORE_TYPE))
            return

        logger.info("内存IP存储已关闭")
        future.set_result(None)

    def _teardown(self):
        """释放内部集合（调用方需持有独占锁）"""
        self._ips.clear()
        self._networks.clear()

    def _ensure_running(self, operation: str):
        if self._state is not StoreState.RUNNING:
            raise StoreStoppedError(operation=operation, state=self._state.value)

    def __str__(self):
        """字符串表示"""
        return (f"MemoryIPStore(ips={len(self._ips)}, "
                f"networks={len(self._networks)}, state={self._state.value})")


class MemoryIPStoreDriver(IIPStoreDriver):
    """内存IP存储驱动"""

    def new(self, config: DriverConfig) -> MemoryIPStore:
        """创建内存存储，配置中的未知选项被忽略"""
        options = (config.config if config else None) or {}
        capacity_hint = options.get('capacity_hint')

        store = MemoryIPStore(capacity_hint=capacity_hint)
        logger.debug(f"创建内存IP存储: capacity_hint={capacity_hint}")
        return store
