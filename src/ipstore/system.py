"""
IP成员存储系统主入口
集成配置、日志、驱动注册和存储，供上层服务在启动时选择一次后端
"""

import logging
from concurrent.futures import TimeoutError as FutureTimeoutError
from datetime import datetime
from typing import Dict, Any, Iterable, Optional

from .config.settings import StoreSettings
from .config.validator import ConfigValidator
from .core.ip import AddressLike
from .data.storage import open_store
from .exceptions import ShutdownError
from .interfaces import IIPStore


class IPStoreSystem:
    """
    IP成员存储系统
    按配置打开存储驱动，提供批量加载、查询转发和受控关闭
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        初始化系统

        Args:
            config: 系统配置字典
        """
        # 加载配置
        self.settings = StoreSettings.from_dict(config) if config else StoreSettings()
        self.validator = ConfigValidator()

        # 初始化日志
        self._setup_logging()
        self.logger = logging.getLogger(__name__)

        self._store: Optional[IIPStore] = None
        self._initialized = False
        self._stopped = False
        self._start_time = datetime.now()

    def _setup_logging(self):
        """配置日志系统"""
        handlers = [logging.StreamHandler()]
        if self.settings.log_file:
            handlers.append(logging.FileHandler(self.settings.log_file, encoding='utf-8'))

        logging.basicConfig(
            level=getattr(logging, self.settings.log_level),
            format=self.settings.log_format,
            handlers=handlers
        )

    def initialize(self) -> 'IPStoreSystem':
        """打开配置的存储驱动"""
        if self._initialized:
            return self

        driver_config = self.settings.to_driver_config()
        self.validator.validate_driver_config(driver_config.to_dict())

        try:
            self._store = open_store(driver_config)
        except Exception as e:
            self.logger.error(f"存储初始化失败: {e}")
            raise

        self._initialized = True
        self.logger.info(f"使用存储驱动: {driver_config.name} ({self._store.__class__.__name__})")
        return self

    @property
    def store(self) -> IIPStore:
        """当前存储实例"""
        if not self._initialized:
            self.initialize()
        return self._store

    # ========== 数据加载 ==========

    def load_entries(
            self,
            addresses: Optional[Iterable[AddressLike]] = None,
            networks: Optional[Iterable[str]] = None
    ) -> Dict[str, int]:
        """
        批量加载地址和网段

        地址和网段先整体验证，有任何无效项时不写入任何条目

        Args:
            addresses: 单个地址列表
            networks: CIDR字符串列表

        Returns:
            加载数量统计

        Raises:
            ValidationError: 存在无效地址或网段
        """
        store = self.store
        address_list = list(addresses or [])
        for address in address_list:
            self.validator.validate_address(address)
        valid_networks = self.validator.validate_network_list(networks or [])

        for address in address_list:
            store.add_ip(address)

        for network in valid_networks:
            store.add_network(network)

        self.logger.info(f"加载完成: {len(address_list)}个地址, {len(valid_networks)}个网段")
        return {"addresses": len(address_list), "networks": len(valid_networks)}

    def contains(self, address: AddressLike) -> bool:
        """检查地址是否被存储覆盖"""
        return self.store.has_ip(address)

    # ========== 生命周期 ==========

    def shutdown(self, timeout: Optional[float] = None) -> None:
        """
        关闭存储并等待完成

        Args:
            timeout: 等待秒数，默认使用配置中的stop_timeout

        Raises:
            ShutdownError: 关闭失败或超时
        """
        if not self._initialized or self._stopped:
            return

        wait = timeout if timeout is not None else self.settings.stop_timeout
        future = self._store.stop()

        try:
            future.result(timeout=wait)
        except FutureTimeoutError:
            self.logger.error(f"存储关闭超时: {wait}s")
            raise ShutdownError(reason=f"等待超时 {wait}s")

        self._stopped = True
        self.logger.info("存储已关闭")

    # ========== 系统状态 ==========

    def get_system_info(self) -> Dict[str, Any]:
        """获取系统信息"""
        info = {
            "system_name": self.settings.system_name,
            "version": self.settings.version,
            "start_time": self._start_time.isoformat(),
            "uptime": str(datetime.now() - self._start_time),
            "initialized": self._initialized,
            "stopped": self._stopped,
            "storage_driver": self.settings.storage_driver,
            "settings": {
                "log_level": self.settings.log_level,
                "stop_timeout": self.settings.stop_timeout
            }
        }

        if self._store is not None and hasattr(self._store, 'get_stats'):
            info["storage"] = self._store.get_stats()

        return info

    def __enter__(self) -> 'IPStoreSystem':
        return self.initialize()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.shutdown()

    def __repr__(self) -> str:
        return (f"IPStoreSystem(driver={self.settings.storage_driver}, "
                f"initialized={self._initialized}, stopped={self._stopped})")
