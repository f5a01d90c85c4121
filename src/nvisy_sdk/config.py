"""Configuration for the Nvisy API client."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import httpx
import yaml
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError

DEFAULT_BASE_URL = "https://api.nvisy.com"
DEFAULT_TIMEOUT = 30.0
MAX_TIMEOUT = 300.0
DEFAULT_CONFIG_PATH = "conf/nvisy.yml"

MASK = "****"
_VISIBLE_KEY_CHARS = 4


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[2]


def _resolve_config_location(path: Path | str) -> Path:
    raw = Path(path).expanduser()
    candidates = (raw,) if raw.is_absolute() else (Path.cwd() / raw, _repo_root() / raw)
    for candidate in candidates:
        if candidate.exists():
            return candidate.resolve()
    checked = "\n".join(str(candidate) for candidate in candidates)
    raise FileNotFoundError(f"Nvisy config file not found: {raw}\nChecked:\n{checked}")


def _load_normalized(location: Path) -> dict[str, Any]:
    try:
        container = OmegaConf.to_container(OmegaConf.load(location), resolve=True)
    except (OmegaConfBaseException, yaml.YAMLError) as exc:
        raise ConfigError(
            f"Cannot load Nvisy config from {location}: {exc}",
            context={"path": str(location)},
        ) from exc
    if not isinstance(container, dict):
        raise ConfigError(f"Config file must contain a mapping: {location}")
    return {str(key).upper(): value for key, value in container.items()}


class NvisyConfig(BaseModel):
    """Validated, immutable connection parameters for :class:`NvisyClient`.

    Build instances through :meth:`build`, :meth:`from_env` or
    :meth:`from_file`; all three raise :class:`ConfigError` on invalid input.
    The API key never appears in ``repr()`` or ``str()`` output, only its
    masked form does.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    api_key: str = Field(description="Bearer token used to authenticate every request")
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL of the Nvisy API",
        examples=["https://api.nvisy.com"],
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        allow_inf_nan=False,
        description="Per-request timeout in seconds",
    )
    http_client: httpx.AsyncClient | None = Field(
        default=None,
        exclude=True,
        description="Pre-built transport used instead of creating one",
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("API key cannot be empty")
        return v

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("Base URL must start with http:// or https://")
        return v

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if not v > 0:
            raise ValueError("Timeout must be greater than 0")
        if v > MAX_TIMEOUT:
            raise ValueError(f"Timeout cannot exceed {MAX_TIMEOUT:g} seconds (5 minutes)")
        return v

    @classmethod
    def build(
        cls,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.AsyncClient | None = None,
    ) -> NvisyConfig:
        """Validate every field and return a config, or raise :class:`ConfigError`."""
        try:
            return cls(
                api_key=api_key,
                base_url=base_url,
                timeout=timeout,
                http_client=http_client,
            )
        except ValidationError as exc:
            problems = "; ".join(str(error["msg"]) for error in exc.errors())
            raise ConfigError(
                f"Invalid Nvisy configuration: {problems}",
                context={
                    "errors": exc.errors(
                        include_url=False, include_context=False, include_input=False
                    )
                },
            ) from exc

    @classmethod
    def from_env(cls, *, http_client: httpx.AsyncClient | None = None) -> NvisyConfig:
        """Create a config from ``NVISY_API_KEY``, ``NVISY_BASE_URL`` and ``NVISY_TIMEOUT``."""
        api_key = os.environ.get("NVISY_API_KEY")
        if not api_key:
            raise ConfigError("NVISY_API_KEY environment variable not set")

        timeout_raw = os.environ.get("NVISY_TIMEOUT")
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT
        except ValueError as exc:
            raise ConfigError(f"NVISY_TIMEOUT must be a number, got {timeout_raw!r}") from exc

        return cls.build(
            api_key,
            base_url=os.environ.get("NVISY_BASE_URL") or DEFAULT_BASE_URL,
            timeout=timeout,
            http_client=http_client,
        )

    @classmethod
    def from_file(
        cls,
        path: Path | str | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> NvisyConfig:
        """Create a config from a YAML file, ``conf/nvisy.yml`` by default.

        ``NVISY_CONFIG_PATH`` takes precedence over ``path``. Keys are
        case-insensitive (``api_key`` and ``NVISY_API_KEY`` style both work)
        and OmegaConf interpolations such as ``${oc.env:NVISY_API_KEY}`` are
        resolved.
        """
        env_path = os.environ.get("NVISY_CONFIG_PATH")
        location = _resolve_config_location(env_path or path or DEFAULT_CONFIG_PATH)
        normalized = _load_normalized(location)

        def lookup(name: str) -> Any:
            return normalized.get(f"NVISY_{name}", normalized.get(name))

        api_key = lookup("API_KEY")
        if not api_key:
            raise ConfigError(f"Missing Nvisy API key in {location}")

        kwargs: dict[str, Any] = {}
        if base_url := lookup("BASE_URL"):
            kwargs["base_url"] = str(base_url)
        if (timeout := lookup("TIMEOUT")) is not None:
            kwargs["timeout"] = timeout

        return cls.build(str(api_key), http_client=http_client, **kwargs)

    @property
    def masked_api_key(self) -> str:
        """Return the API key reduced to its first four characters plus a mask."""
        if len(self.api_key) > _VISIBLE_KEY_CHARS:
            return f"{self.api_key[:_VISIBLE_KEY_CHARS]}{MASK}"
        return MASK

    def __repr_args__(self) -> Iterator[tuple[str | None, Any]]:
        yield "api_key", self.masked_api_key
        yield "base_url", self.base_url
        yield "timeout", self.timeout
