import os
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional

from arbitrage_engine.app.exceptions import ConfigurationError


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    """Read an integer setting, keeping the default when the value is not a number."""
    try:
        return int(os.getenv(name, str(default)))
    except ValueError:
        return default


@dataclass(frozen=True)
class EngineConfig:
    """Per-engine settings, fixed once the engine is built."""

    verbose: bool = False
    # Stored only; nothing enforces a deadline or retries a failed run.
    timeout: int = 30000
    max_retries: int = 3

    @classmethod
    def create(cls, overrides: Optional[Mapping[str, Any]] = None) -> "EngineConfig":
        """Merge caller-supplied fields over the defaults, one field at a time.

        A field given as ``None`` keeps its default. Values are not validated.
        """
        return cls().with_overrides(overrides)

    def with_overrides(self, overrides: Optional[Mapping[str, Any]] = None) -> "EngineConfig":
        if not overrides:
            return self

        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ConfigurationError(f"Unknown engine config fields: {', '.join(unknown)}")

        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class Config:
    """Application configuration."""

    # Engine defaults used by the command line
    verbose: bool = _env_flag("ENGINE_VERBOSE")
    timeout: int = _env_int("ENGINE_TIMEOUT_MS", 30000)
    max_retries: int = _env_int("ENGINE_MAX_RETRIES", 3)

    # Monitoring
    prometheus_port: int = _env_int("PROMETHEUS_PORT", 9000)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    def engine_defaults(self) -> EngineConfig:
        return EngineConfig(
            verbose=self.verbose,
            timeout=self.timeout,
            max_retries=self.max_retries,
        )


# Global config instance
config = Config()
