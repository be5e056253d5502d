from core.config.settings import AppSettings


class TestAppSettings:
    def test_token_optional(self, monkeypatch):
        monkeypatch.delenv("GITHUB_PERSONAL_ACCESS_TOKEN", raising=False)
        assert AppSettings().GITHUB_PERSONAL_ACCESS_TOKEN is None

    def test_token_from_env(self, monkeypatch):
        monkeypatch.setenv("GITHUB_PERSONAL_ACCESS_TOKEN", "ghp_test")
        monkeypatch.setenv("GITHUB_TIMEOUT", "30")
        settings = AppSettings()
        assert settings.GITHUB_PERSONAL_ACCESS_TOKEN == "ghp_test"
        assert settings.GITHUB_TIMEOUT == 30
