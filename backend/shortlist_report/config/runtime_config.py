"""
Runtime configuration - reads config/runtime.yaml

Responsibilities:
- Load page geometry / API / output / logging parameters
- Allow environment variable overrides (SHORTLIST_*)
- Type-safe configuration access
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings


class PageConfig(BaseModel):
    """Page geometry in points (8 x 13 inch sheet)"""

    width: float = 576.0
    height: float = 936.0
    margin: float = 50.0
    font_family: str = "helvetica"


class ApiConfig(BaseModel):
    """Upstream REST API"""

    base_url: str = "http://localhost:5000/api"
    token: str | None = None
    timeout_sec: float = 30.0


class OutputConfig(BaseModel):
    """Artifact output"""

    output_dir: Path = Path("reports")


class LoggingConfig(BaseModel):
    """Logging configuration"""

    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class RuntimeConfig(BaseSettings):
    """Runtime configuration (environment variables override defaults)"""

    page: PageConfig = Field(default_factory=PageConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "SHORTLIST_",
        "env_nested_delimiter": "__",
        "arbitrary_types_allowed": True,
    }

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> RuntimeConfig:
        """Load configuration from a YAML file; defaults when it is missing"""
        path = Path(yaml_path)
        if not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        runtime_opts = data.get("runtime_options", {})
        output_opts = cls._extract(runtime_opts, "output")

        config = cls(
            page=PageConfig(**cls._extract(runtime_opts, "page")),
            api=ApiConfig(**cls._extract(runtime_opts, "api")),
            output=OutputConfig(**output_opts),
            logging=LoggingConfig(**cls._extract(runtime_opts, "logging")),
        )

        if "output_dir" in output_opts:
            config._resolve_paths(base_dir=path.parent)
        return config

    @staticmethod
    def _extract(data: dict[str, Any], key: str) -> dict[str, Any]:
        """Extract and flatten one section ({"default": v} entries become v)"""
        section = data.get(key) or {}
        result = {}
        for k, v in section.items():
            if isinstance(v, dict) and "default" in v:
                result[k] = v["default"]
            elif not isinstance(v, dict):
                result[k] = v
        return result

    def _resolve_paths(self, base_dir: Path) -> None:
        """Resolve a relative output dir against the config file's directory"""
        if not self.output.output_dir.is_absolute():
            self.output.output_dir = (base_dir / self.output.output_dir).resolve()

    def ensure_dirs(self) -> None:
        """Make sure the output directory exists"""
        self.output.output_dir.mkdir(parents=True, exist_ok=True)


DEFAULT_CONFIG_PATH = Path("config/runtime.yaml")

# Global configuration instance
_config: RuntimeConfig | None = None


def get_config() -> RuntimeConfig:
    """Global configuration (lazy)"""
    global _config
    if _config is None:
        _config = RuntimeConfig.from_yaml(DEFAULT_CONFIG_PATH)
    return _config


def reload_config(yaml_path: str | Path | None = None) -> RuntimeConfig:
    """Reload configuration"""
    global _config
    path = yaml_path or DEFAULT_CONFIG_PATH
    _config = RuntimeConfig.from_yaml(path)
    return _config
