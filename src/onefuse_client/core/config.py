from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Union

from dotenv import load_dotenv

from .errors import ConfigError

SUPPORTED_SCHEMES = ("http", "https")


def _get_bool_env(name: str, default: bool) -> bool:
    """Parse a boolean environment variable with a safe default."""
    raw = os.getenv(name)
    if raw is None:
        return default
    val = raw.strip().lower()
    if val in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if val in {"0", "false", "f", "no", "n", "off"}:
        return False
    return default


@dataclass(frozen=True)
class Config:
    """Connection settings for one OneFuse instance."""

    scheme: str
    address: str
    port: Union[str, int]
    user: str
    password: str = field(default="", repr=False)
    verify_ssl: bool = True

    def __post_init__(self) -> None:
        if self.scheme not in SUPPORTED_SCHEMES:
            raise ConfigError(
                f"scheme must be one of {', '.join(SUPPORTED_SCHEMES)}, "
                f"got {self.scheme!r}"
            )
        if not self.address:
            raise ConfigError("address must be provided.")
        object.__setattr__(self, "port", str(self.port))

    @property
    def host_header(self) -> str:
        return f"{self.address}:{self.port}"

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.host_header}"


def load_env_config(*, use_dotenv: bool = True) -> Config:
    """Load OneFuse connection settings from environment (optional .env)."""
    if use_dotenv:
        load_dotenv()
    address = os.getenv("ONEFUSE_ADDRESS", "").strip()
    user = os.getenv("ONEFUSE_USER", "").strip()
    if not address or not user:
        raise ConfigError("Missing ONEFUSE_ADDRESS or ONEFUSE_USER in environment.")
    return Config(
        scheme=os.getenv("ONEFUSE_SCHEME", "https").strip().lower(),
        address=address,
        port=os.getenv("ONEFUSE_PORT", "443").strip(),
        user=user,
        password=os.getenv("ONEFUSE_PASSWORD", ""),
        verify_ssl=_get_bool_env("ONEFUSE_VERIFY_SSL", True),
    )


__all__ = ["Config", "load_env_config", "SUPPORTED_SCHEMES"]
