"""
Configuration layer - runtime configuration and report wording

Responsibilities:
- Load config/runtime.yaml (runtime parameters, env overrides)
- Load the packaged report_spec.yaml (report wording and lookup tables)
- Provide type-safe configuration access
"""

from .runtime_config import RuntimeConfig, get_config, reload_config
from .spec_loader import ReportSpec, SpecLoader, load_spec

__all__ = [
    "SpecLoader",
    "ReportSpec",
    "load_spec",
    "RuntimeConfig",
    "get_config",
    "reload_config",
]
