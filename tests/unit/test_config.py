"""Unit tests for configuration loading."""

import pytest

from maib_checkout import (
    DEFAULT_BASE_URL,
    SANDBOX_BASE_URL,
    CheckoutConfig,
    ConfigError,
    build_environment,
    load_checkout_config,
    load_env_file,
)


pytestmark = pytest.mark.unit


class TestFromMapping:
    """Tests for CheckoutConfig.from_mapping()."""

    def test_defaults(self):
        config = CheckoutConfig.from_mapping({})
        assert config == CheckoutConfig()
        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout_seconds == 30
        assert config.client_id is None
        assert not config.is_sandbox

    @pytest.mark.parametrize("flag", ["1", "true", "YES", "on"])
    def test_sandbox_flag(self, flag):
        config = CheckoutConfig.from_mapping({"MAIB_CHECKOUT_SANDBOX": flag})
        assert config.base_url == SANDBOX_BASE_URL
        assert config.is_sandbox

    def test_explicit_base_url_wins_over_sandbox_flag(self):
        config = CheckoutConfig.from_mapping(
            {"MAIB_CHECKOUT_SANDBOX": "true", "MAIB_CHECKOUT_BASE_URL": "http://localhost:8080/v2/"}
        )
        assert config.base_url == "http://localhost:8080/v2/"

    def test_credentials_are_stripped(self):
        config = CheckoutConfig.from_mapping(
            {
                "MAIB_CHECKOUT_CLIENT_ID": " id ",
                "MAIB_CHECKOUT_CLIENT_SECRET": "secret",
                "MAIB_CHECKOUT_SIGNATURE_KEY": "",
            }
        )
        assert config.client_id == "id"
        assert config.client_secret == "secret"
        assert config.signature_key is None

    def test_secrets_hidden_from_repr(self):
        config = CheckoutConfig(client_secret="top-secret", signature_key="sig-key")
        assert "top-secret" not in repr(config)
        assert "sig-key" not in repr(config)

    @pytest.mark.parametrize(
        "values, message",
        [
            ({"MAIB_CHECKOUT_TIMEOUT_SECONDS": "soon"}, "must be a number"),
            ({"MAIB_CHECKOUT_TIMEOUT_SECONDS": "0"}, "greater than zero"),
            ({"MAIB_CHECKOUT_SANDBOX": "maybe"}, "must be a boolean"),
            ({"MAIB_CHECKOUT_BASE_URL": "api.maibmerchants.md"}, "http"),
        ],
    )
    def test_invalid_values(self, values, message):
        with pytest.raises(ConfigError, match=message):
            CheckoutConfig.from_mapping(values)


class TestFromEnv:
    """Tests for layered loading."""

    def test_env_file_fills_gaps_but_does_not_override_base(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text(
            "# credentials\n"
            "export MAIB_CHECKOUT_CLIENT_ID='file-id'\n"
            'MAIB_CHECKOUT_CLIENT_SECRET="file-secret"\n'
            "MAIB_CHECKOUT_TIMEOUT_SECONDS=12\n"
            "\n"
            "not a setting\n",
            encoding="utf-8",
        )
        config = load_checkout_config(
            env_file=str(env_file),
            base={"MAIB_CHECKOUT_TIMEOUT_SECONDS": "5"},
        )
        assert config.client_id == "file-id"
        assert config.client_secret == "file-secret"
        assert config.timeout_seconds == 5

    def test_keyword_parameters_win(self, tmp_path):
        config = load_checkout_config(
            env_file=None,
            base={"MAIB_CHECKOUT_CLIENT_ID": "env-id"},
            overrides={"MAIB_CHECKOUT_CLIENT_ID": "override-id"},
            client_id="kwarg-id",
            sandbox=True,
            timeout_seconds=7,
        )
        assert config.client_id == "kwarg-id"
        assert config.base_url == SANDBOX_BASE_URL
        assert config.timeout_seconds == 7

    def test_reads_os_environ_by_default(self, monkeypatch):
        monkeypatch.setenv("MAIB_CHECKOUT_SIGNATURE_KEY", "from-environ")
        config = load_checkout_config(env_file=None)
        assert config.signature_key == "from-environ"

    def test_missing_env_file_is_ignored(self, tmp_path):
        environment = build_environment(env_file=str(tmp_path / "absent.env"), base={})
        assert dict(environment.variables) == {}


class TestLoadEnvFile:
    """Tests for load_env_file()."""

    def test_does_not_override_existing_keys(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("A=from-file\nB=from-file\n", encoding="utf-8")
        environ = {"A": "existing"}

        merged = load_env_file(str(env_file), environ=environ)

        assert merged == {"A": "existing", "B": "from-file"}
        assert environ == merged
