"""
测试存储驱动注册
"""
import pytest

from ipstore import open_store, create_store, register_driver
from ipstore.config.settings import DriverConfig
from ipstore.data.storage import (
    MemoryIPStore, STORAGE_TYPES, list_drivers, unregister_driver
)
from ipstore.exceptions import DriverNotFoundError, DriverRegistrationError, DriverError
from ipstore.interfaces import IIPStore, IIPStoreDriver


class RecordingDriver(IIPStoreDriver):
    """记录收到的配置，返回内存存储"""

    def __init__(self):
        self.configs = []

    def new(self, config):
        self.configs.append(config)
        return MemoryIPStore()


@pytest.fixture
def recording_driver():
    driver = RecordingDriver()
    register_driver("recording", driver)
    yield driver
    unregister_driver("recording")


class TestDriverRegistry:

    def test_memory_driver_registered(self):
        assert "memory" in STORAGE_TYPES
        assert "memory" in list_drivers()

    def test_open_default(self):
        s = open_store()

        assert isinstance(s, IIPStore)
        assert isinstance(s, MemoryIPStore)
        s.stop().result(timeout=5)

    def test_open_by_name_ignores_unknown_options(self):
        s = open_store(DriverConfig(name="memory", config={"capacity_hint": 1000, "unused": True}))

        assert s.capacity_hint == 1000
        s.stop().result(timeout=5)

    def test_create_store(self):
        s = create_store("MEMORY", capacity_hint=10)

        assert isinstance(s, MemoryIPStore)
        s.stop().result(timeout=5)

    def test_unknown_driver(self):
        with pytest.raises(DriverNotFoundError) as exc_info:
            open_store(DriverConfig(name="redis"))

        assert exc_info.value.details["driver_name"] == "redis"
        assert isinstance(exc_info.value, DriverError)

    def test_custom_driver_receives_config(self, recording_driver):
        config = DriverConfig(name="recording", config={"a": 1})
        s = open_store(config)

        assert recording_driver.configs == [config]
        s.stop().result(timeout=5)

    def test_duplicate_registration(self, recording_driver):
        with pytest.raises(DriverRegistrationError):
            register_driver("recording", RecordingDriver())

        with pytest.raises(DriverRegistrationError):
            register_driver("memory", RecordingDriver())

    @pytest.mark.parametrize("name, driver", [
        ("", RecordingDriver()),
        ("   ", RecordingDriver()),
        (None, RecordingDriver()),
        ("nil", None),
        ("plain", object()),
    ])
    def test_invalid_registration(self, name, driver):
        with pytest.raises(DriverRegistrationError):
            register_driver(name, driver)

    def test_unregister(self):
        register_driver("temporary", RecordingDriver())

        assert unregister_driver("temporary") is True
        assert unregister_driver("temporary") is False
        assert "temporary" not in list_drivers()
