# tests\shared\test_config.py
from app.shared.config import AppEnv, Settings

class TestSettings:

    def test_defaults(self):
        cfg = Settings(_env_file=None)
        assert cfg.PORT == 3000
        assert cfg.APP_ENV == AppEnv.DEVELOPMENT
        assert cfg.SEED_DEMO_DATA is True
        assert cfg.api_root == "/api"
        assert cfg.cors_origin_list == ["*"]

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("SEED_DEMO_DATA", "false")
        monkeypatch.setenv("APP_ENV", "production")

        cfg = Settings(_env_file=None)

        assert cfg.PORT == 8080
        assert cfg.SEED_DEMO_DATA is False
        assert cfg.APP_ENV == AppEnv.PRODUCTION

    def test_cors_origins_are_split(self):
        cfg = Settings(_env_file=None, CORS_ORIGINS="http://a.test, http://b.test,,")
        assert cfg.cors_origin_list == ["http://a.test", "http://b.test"]

    def test_api_prefix_is_normalized(self):
        assert Settings(_env_file=None, API_PREFIX="api/v1/").api_root == "/api/v1"
        assert Settings(_env_file=None, API_PREFIX="/").api_root == ""
