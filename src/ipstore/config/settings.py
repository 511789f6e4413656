"""
系统配置设置
"""
from typing import Dict, Any, Optional
from dataclasses import dataclass, field, asdict

from ..exceptions import ConfigError

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class DriverConfig:
    """
    存储驱动配置

    name 选择已注册的驱动；config 留给具体后端的调优参数（如 capacity_hint），
    内存驱动目前不强制任何选项
    """
    name: str = "memory"
    config: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'DriverConfig':
        """从字典创建驱动配置"""
        return cls(
            name=config_dict.get('name', 'memory'),
            config=dict(config_dict.get('config') or {})
        )

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return asdict(self)


@dataclass
class StoreSettings:
    """
    系统配置类
    使用dataclass确保配置的类型安全
    """

    # 系统基本配置
    system_name: str = "IP成员存储"
    version: str = "1.0.0"

    # 日志配置
    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # 存储配置
    storage_driver: str = "memory"
    driver_config: Dict[str, Any] = field(default_factory=dict)

    # 关闭时等待的秒数
    stop_timeout: float = 5.0

    def __post_init__(self):
        """初始化后处理，验证配置"""
        self._validate_settings()
        self.log_level = self.log_level.upper()

    def _validate_settings(self):
        """验证配置值"""
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ConfigError(
                message=f"无效的日志级别: {self.log_level}",
                config_key="log_level"
            )

        if not isinstance(self.storage_driver, str) or not self.storage_driver.strip():
            raise ConfigError(
                message="存储驱动名称不能为空",
                config_key="storage_driver"
            )

        if not isinstance(self.driver_config, dict):
            raise ConfigError(
                message=f"驱动配置必须是字典: {type(self.driver_config).__name__}",
                config_key="driver_config"
            )

        if self.stop_timeout is not None and self.stop_timeout <= 0:
            raise ConfigError(
                message=f"关闭等待时间必须大于0: {self.stop_timeout}",
                config_key="stop_timeout"
            )

    def to_driver_config(self) -> DriverConfig:
        """生成驱动配置"""
        return DriverConfig(name=self.storage_driver.strip(), config=dict(self.driver_config))

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'StoreSettings':
        """从字典创建配置"""
        # 过滤无效的配置键
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_config = {k: v for k, v in config_dict.items() if k in valid_keys}

        return cls(**filtered_config)
