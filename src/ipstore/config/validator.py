"""
配置验证器
"""
from typing import Dict, Any, Iterable, List

from ..exceptions import ValidationError, InvalidFormatError
from ..core.ip import key, NetworkEntry


class ConfigValidator:
    """配置验证器"""

    def validate_driver_config(self, config: Dict[str, Any]) -> bool:
        """验证驱动配置字典"""
        if 'name' not in config:
            raise ValidationError(
                message="缺少必需配置项: name",
                field="name",
                reason="required_field_missing"
            )

        name = config['name']
        if not isinstance(name, str) or not name.strip():
            raise ValidationError(
                message=f"无效的驱动名称: {name!r}",
                field="name",
                value=name,
                reason="invalid_name"
            )

        options = config.get('config')
        if options is not None and not isinstance(options, dict):
            raise ValidationError(
                message="驱动选项必须是字典",
                field="config",
                value=options,
                reason="invalid_type"
            )

        capacity_hint = (options or {}).get('capacity_hint')
        if capacity_hint is not None and (not isinstance(capacity_hint, int) or capacity_hint < 0):
            raise ValidationError(
                message=f"容量提示必须是非负整数: {capacity_hint!r}",
                field="config.capacity_hint",
                value=capacity_hint,
                reason="invalid_value"
            )

        return True

    def validate_address(self, address: Any) -> bool:
        """
        验证单个地址

        Raises:
            ValidationError: 地址无效
        """
        try:
            key(address)
        except InvalidFormatError as e:
            raise ValidationError(
                message=e.message,
                field="address",
                value=repr(address),
                reason="invalid_address"
            )
        return True

    def validate_network_list(self, networks: Iterable[str]) -> List[str]:
        """
        验证网段列表

        Args:
            networks: CIDR字符串列表

        Returns:
            去掉首尾空白后的网段列表

        Raises:
            ValidationError: 存在无法解析的网段，details中列出全部无效项
        """
        valid = []
        invalid = []

        for network in networks:
            try:
                valid.append(NetworkEntry.parse(network).identifier)
            except InvalidFormatError:
                invalid.append(network)

        if invalid:
            raise ValidationError(
                message=f"存在{len(invalid)}个无效网段",
                field="networks",
                value=invalid,
                reason="invalid_network"
            )

        return valid
