"""
pytest配置文件
用于设置测试环境和共享fixtures
"""
import sys
import os

import pytest

# 将src目录添加到Python路径
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from ipstore.config.settings import DriverConfig
from ipstore.data.storage import MemoryIPStoreDriver


@pytest.fixture
def store():
    """新建内存存储，测试结束时关闭"""
    s = MemoryIPStoreDriver().new(DriverConfig())
    yield s
    s.stop().result(timeout=5)
