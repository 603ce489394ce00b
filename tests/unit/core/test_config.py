"""Tests for settings loading."""
import pytest

from placenotes.core.config import API_KEY_ENV, Settings, load_settings
from placenotes.core.exceptions import ConfigError


@pytest.fixture(autouse=True)
def no_env_key(monkeypatch):
    monkeypatch.delenv(API_KEY_ENV, raising=False)


class TestLoadSettings:
    """Tests for load_settings()."""

    def test_missing_file_gives_defaults(self, tmp_path):
        settings = load_settings(tmp_path / "absent.yaml")
        assert settings == Settings()
        assert settings.location_query_limit == 40
        assert settings.search_radius_metres == 5000

    def test_none_path_gives_defaults(self):
        assert load_settings(None) == Settings()

    def test_values_override_defaults(self, tmp_path):
        path = tmp_path / "placenotes.yaml"
        path.write_text(
            "geoapify_api_key: abc\n"
            "city_query_limit: 3\n"
            "home_latitude: 48\n"
            "request_timeout: 5\n"
        )

        settings = load_settings(path)

        assert settings.geoapify_api_key == "abc"
        assert settings.city_query_limit == 3
        assert settings.home_latitude == 48.0
        assert isinstance(settings.home_latitude, float)
        assert settings.request_timeout == 5.0

    def test_unknown_keys_ignored(self, tmp_path):
        path = tmp_path / "placenotes.yaml"
        path.write_text("theme: dark\n")

        assert load_settings(path) == Settings()

    def test_empty_file(self, tmp_path):
        path = tmp_path / "placenotes.yaml"
        path.write_text("")

        assert load_settings(path) == Settings()

    def test_api_key_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv(API_KEY_ENV, "from-env")

        assert load_settings(tmp_path / "absent.yaml").geoapify_api_key == "from-env"

    def test_file_key_wins_over_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv(API_KEY_ENV, "from-env")
        path = tmp_path / "placenotes.yaml"
        path.write_text("geoapify_api_key: from-file\n")

        assert load_settings(path).geoapify_api_key == "from-file"


class TestInvalidSettings:
    """Malformed files raise ConfigError."""

    def test_bad_yaml(self, tmp_path):
        path = tmp_path / "placenotes.yaml"
        path.write_text("limit: [unclosed\n")

        with pytest.raises(ConfigError):
            load_settings(path)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "placenotes.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigError):
            load_settings(path)

    def test_wrong_type(self, tmp_path):
        path = tmp_path / "placenotes.yaml"
        path.write_text("location_query_limit: many\n")

        with pytest.raises(ConfigError) as exc_info:
            load_settings(path)
        assert "location_query_limit" in str(exc_info.value)

    def test_bool_rejected_for_numbers(self, tmp_path):
        path = tmp_path / "placenotes.yaml"
        path.write_text("city_query_limit: true\n")

        with pytest.raises(ConfigError):
            load_settings(path)
