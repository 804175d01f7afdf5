"""Unit tests for settings singleton"""

from touchcal.common.settings import Settings, settings
from touchcal.common.types import ScreenGeometry


class TestSettingsSingleton:
    """Test Settings singleton pattern"""

    def test_singleton_same_instance(self):
        """Test that Settings() returns same instance"""
        s1 = Settings()
        s2 = Settings()
        assert s1 is s2

    def test_global_settings_is_singleton(self):
        """Test that global 'settings' is the singleton"""
        assert settings is Settings()


class TestSettingsConstants:
    """Test that all constants are accessible"""

    def test_screen_constants(self):
        """Presets and fallback screen"""
        assert settings.SCREEN_PRESETS["1"] == ScreenGeometry(1920, 1080)
        assert settings.SCREEN_PRESETS["2"] == ScreenGeometry(1280, 800)
        assert settings.DEFAULT_SCREEN == ScreenGeometry(1920, 1080)

    def test_touchscreen_constants(self):
        """Descriptor limits"""
        assert settings.TOUCHSCREEN_REQUIRED_TOKENS == 6
        assert settings.MAX_DEVICE_ID == 0xFFFF

    def test_logging_constants(self):
        """Warnings reach stderr by default"""
        assert settings.DEFAULT_LOG_LEVEL == "WARNING"
