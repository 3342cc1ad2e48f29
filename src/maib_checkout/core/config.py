"""
Configuration of the checkout client.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from .constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, SANDBOX_BASE_URL
from .environment import build_environment
from .errors import ConfigError

__all__ = [
    "CheckoutConfig",
    "load_checkout_config",
]

_PARAMETER_TO_ENV_KEY = {
    "base_url": "MAIB_CHECKOUT_BASE_URL",
    "sandbox": "MAIB_CHECKOUT_SANDBOX",
    "timeout_seconds": "MAIB_CHECKOUT_TIMEOUT_SECONDS",
    "client_id": "MAIB_CHECKOUT_CLIENT_ID",
    "client_secret": "MAIB_CHECKOUT_CLIENT_SECRET",
    "signature_key": "MAIB_CHECKOUT_SIGNATURE_KEY",
}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"", "0", "false", "no", "off"}


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _collect_parameter_overrides(explicit: Mapping[str, Any]) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    for key, value in explicit.items():
        if value is None:
            continue
        overrides[_PARAMETER_TO_ENV_KEY[key]] = _stringify(value)
    return overrides


def _parse_bool(raw: str, field_name: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"{field_name} must be a boolean, got '{raw}'")


def _parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError as exc:
        raise ConfigError(
            f"MAIB_CHECKOUT_TIMEOUT_SECONDS must be a number, got '{raw}'"
        ) from exc
    if timeout <= 0:
        raise ConfigError("MAIB_CHECKOUT_TIMEOUT_SECONDS must be greater than zero")
    return timeout


def _optional(values: Mapping[str, str], key: str) -> Optional[str]:
    value = values.get(key)
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class CheckoutConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT
    client_id: Optional[str] = None
    client_secret: Optional[str] = field(default=None, repr=False)
    signature_key: Optional[str] = field(default=None, repr=False)

    @property
    def is_sandbox(self) -> bool:
        return self.base_url.rstrip("/") == SANDBOX_BASE_URL.rstrip("/")

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "CheckoutConfig":
        sandbox = _parse_bool(values.get("MAIB_CHECKOUT_SANDBOX", ""), "MAIB_CHECKOUT_SANDBOX")

        base_url = _optional(values, "MAIB_CHECKOUT_BASE_URL")
        if base_url is None:
            base_url = SANDBOX_BASE_URL if sandbox else DEFAULT_BASE_URL
        if not base_url.startswith(("https://", "http://")):
            raise ConfigError(f"MAIB_CHECKOUT_BASE_URL must be an http(s) URL, got '{base_url}'")

        timeout_seconds = _parse_timeout(
            values.get("MAIB_CHECKOUT_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT))
        )

        return cls(
            base_url=base_url,
            timeout_seconds=timeout_seconds,
            client_id=_optional(values, "MAIB_CHECKOUT_CLIENT_ID"),
            client_secret=_optional(values, "MAIB_CHECKOUT_CLIENT_SECRET"),
            signature_key=_optional(values, "MAIB_CHECKOUT_SIGNATURE_KEY"),
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        base_url: Optional[str] = None,
        sandbox: Optional[bool] = None,
        timeout_seconds: Optional[float | int | str] = None,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        signature_key: Optional[str] = None,
    ) -> "CheckoutConfig":
        parameter_overrides = _collect_parameter_overrides(
            {
                "base_url": base_url,
                "sandbox": sandbox,
                "timeout_seconds": timeout_seconds,
                "client_id": client_id,
                "client_secret": client_secret,
                "signature_key": signature_key,
            }
        )
        merged_overrides = dict(overrides or {})
        merged_overrides.update(parameter_overrides)

        environment = build_environment(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_mapping(environment.variables)


def load_checkout_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    base_url: Optional[str] = None,
    sandbox: Optional[bool] = None,
    timeout_seconds: Optional[float | int | str] = None,
    client_id: Optional[str] = None,
    client_secret: Optional[str] = None,
    signature_key: Optional[str] = None,
) -> CheckoutConfig:
    """
    Convenience wrapper that mirrors :meth:`CheckoutConfig.from_env`.

    Settings can come from environment variables, a ``.env`` file, keyword
    arguments, or any combination of the three.
    """
    return CheckoutConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        base_url=base_url,
        sandbox=sandbox,
        timeout_seconds=timeout_seconds,
        client_id=client_id,
        client_secret=client_secret,
        signature_key=signature_key,
    )
