"""
存储模块
提供可互相替换的IP存储后端，按名称注册和打开
"""
import threading
from typing import Dict, List, Optional

from ...config.settings import DriverConfig
from ...exceptions import DriverNotFoundError, DriverRegistrationError
from ...interfaces import IIPStore, IIPStoreDriver
from .memory_store import MemoryIPStore, MemoryIPStoreDriver, StoreState

# 驱动名称映射
STORAGE_TYPES: Dict[str, IIPStoreDriver] = {}
_registry_lock = threading.Lock()


def register_driver(name: str, driver: IIPStoreDriver) -> None:
    """
    注册存储驱动

    Args:
        name: 驱动名称
        driver: 驱动实例

    Raises:
        DriverRegistrationError: 名称为空、驱动为None、类型不符或名称重复
    """
    if not isinstance(name, str) or not name.strip():
        raise DriverRegistrationError(driver_name=name, reason="驱动名称不能为空")

    if driver is None:
        raise DriverRegistrationError(driver_name=name, reason="驱动不能为None")

    if not isinstance(driver, IIPStoreDriver):
        raise DriverRegistrationError(driver_name=name, reason="必须实现IIPStoreDriver接口")

    name = name.strip().lower()
    with _registry_lock:
        if name in STORAGE_TYPES:
            raise DriverRegistrationError(driver_name=name, reason="驱动名称已存在")
        STORAGE_TYPES[name] = driver


def unregister_driver(name: str) -> bool:
    """注销存储驱动，返回是否存在"""
    with _registry_lock:
        return STORAGE_TYPES.pop(name.strip().lower(), None) is not None


def list_drivers() -> List[str]:
    """列出已注册的驱动名称"""
    with _registry_lock:
        return sorted(STORAGE_TYPES)


def open_store(config: Optional[DriverConfig] = None) -> IIPStore:
    """
    按配置打开存储

    Args:
        config: 驱动配置，默认使用内存驱动

    Returns:
        存储实例

    Raises:
        DriverNotFoundError: 驱动未注册
    """
    config = config or DriverConfig()
    name = (config.name or "").strip().lower()

    with _registry_lock:
        driver = STORAGE_TYPES.get(name)

    if driver is None:
        raise DriverNotFoundError(config.name)

    return driver.new(config)


def create_store(store_type: str = 'memory', **kwargs) -> IIPStore:
    """
    创建存储实例

    Args:
        store_type: 驱动名称
        **kwargs: 传递给驱动的配置项

    Returns:
        存储实例
    """
    return open_store(DriverConfig(name=store_type, config=kwargs))


register_driver('memory', MemoryIPStoreDriver())


__all__ = [
    'MemoryIPStore',
    'MemoryIPStoreDriver',
    'StoreState',
    'STORAGE_TYPES',
    'register_driver',
    'unregister_driver',
    'list_drivers',
    'open_store',
    'create_store'
]
