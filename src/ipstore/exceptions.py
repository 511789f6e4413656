"""
IP成员存储异常体系
"""
from datetime import datetime
from typing import Dict, Any, Optional


class BaseError(Exception):
    """所有异常的基类"""
    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        self.context = context or {}
        self.timestamp = datetime.now()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典，便于序列化"""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
            "context": self.context,
            "timestamp": self.timestamp.isoformat()
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


# ==================== 配置和验证异常 ====================
class ConfigError(BaseError):
    """配置错误"""
    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        details = {"config_key": config_key} if config_key else {}
        super().__init__(message, code="CONFIG_ERROR", details=details, **kwargs)


class ValidationError(BaseError):
    """数据验证错误"""
    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        reason: Optional[str] = None,
        **kwargs
    ):
        details = {
            "field": field,
            "value": value,
            "reason": reason
        }
        super().__init__(message, code="VALIDATION_ERROR", details=details, **kwargs)


# ==================== 存储操作异常 ====================
class IPStoreError(BaseError):
    """IP存储错误基类"""
    pass


class NotFoundError(IPStoreError):
    """要删除的条目不存在"""
    pass


class IPNotFoundError(NotFoundError):
    """IP地址不存在"""
    def __init__(self, ip_address: str, **kwargs):
        super().__init__(
            message=f"IP地址不存在: {ip_address}",
            code="IP_NOT_FOUND",
            details={"ip_address": ip_address},
            **kwargs
        )


class NetworkNotFoundError(NotFoundError):
    """网段不存在"""
    def __init__(self, network: str, **kwargs):
        super().__init__(
            message=f"网段不存在: {network}",
            code="NETWORK_NOT_FOUND",
            details={"network": network},
            **kwargs
        )


class InvalidFormatError(IPStoreError):
    """输入格式无效"""
    pass


class InvalidIPFormatError(InvalidFormatError):
    """IP格式无效"""
    def __init__(self, ip_address: Any, reason: Optional[str] = None, **kwargs):
        details = {"ip_address": repr(ip_address), "reason": reason}
        message = f"无效的IP格式: {ip_address!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message, code="INVALID_IP_FORMAT", details=details, **kwargs)


class InvalidNetworkFormatError(InvalidFormatError):
    """网段格式无效"""
    def __init__(self, network: Any, reason: Optional[str] = None, **kwargs):
        details = {"network": network, "reason": reason}
        message = f"无效的网段格式: {network!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message, code="INVALID_NETWORK_FORMAT", details=details, **kwargs)


class ShutdownError(IPStoreError):
    """存储关闭失败"""
    def __init__(self, reason: str = "", store_type: Optional[str] = None, **kwargs):
        details = {"reason": reason, "store_type": store_type}
        super().__init__(
            message=f"存储关闭失败: {reason}" if reason else "存储关闭失败",
            code="SHUTDOWN_ERROR",
            details=details,
            **kwargs
        )


class StoreStoppedError(IPStoreError):
    """存储已停止，不再接受操作"""
    def __init__(self, operation: Optional[str] = None, state: Optional[str] = None, **kwargs):
        details = {"operation": operation, "state": state}
        message = "存储已停止"
        if operation:
            message = f"存储已停止，拒绝操作: {operation}"
        super().__init__(message, code="STORE_STOPPED", details=details, **kwargs)


# ==================== 驱动相关异常 ====================
class DriverError(BaseError):
    """存储驱动错误"""
    pass


class DriverNotFoundError(DriverError):
    """存储驱动未注册"""
    def __init__(self, driver_name: str, **kwargs):
        super().__init__(
            message=f"存储驱动不存在: {driver_name}",
            code="DRIVER_NOT_FOUND",
            details={"driver_name": driver_name},
            **kwargs
        )


class DriverRegistrationError(DriverError):
    """存储驱动注册失败"""
    def __init__(self, driver_name: Optional[str], reason: str, **kwargs):
        super().__init__(
            message=f"存储驱动注册失败[{driver_name}]: {reason}",
            code="DRIVER_REGISTRATION_ERROR",
            details={"driver_name": driver_name, "reason": reason},
            **kwargs
        )
