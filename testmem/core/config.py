"""Configuration management for testmem."""

import json

import yaml
from pydantic import Field  # type: ignore
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Any, Dict, List, Optional
from pathlib import Path

from .errors import ConfigError
from .sizes import parse_size


def _is_yaml(path: Path) -> bool:
    return path.suffix.lower() in (".yaml", ".yml")


class ScanConfig(BaseSettings):
    """Configuration for a memory scan.

    Loads from environment variables (and a ``.env`` file in the working
    directory) with the ``TESTMEM_`` prefix, e.g. ``TESTMEM_LIMIT=64MB``.
    Values passed directly or read with ``from_file`` take precedence.
    """

    # Traversal
    root: str = Field(default=".", description="Directory to scan")
    test_suffix: str = Field(default="_test.go", description="Suffix marking test source files")
    excluded_dirs: List[str] = Field(
        default_factory=lambda: ["vendor"],
        description="Directory names whose subtrees are never measured",
    )

    # Test execution
    go_binary: str = Field(default="go", description="Go toolchain executable")
    count: int = Field(default=5, ge=1, description="Times each suite is run (-count)")
    race: bool = Field(default=True, description="Enable the race detector (-race)")
    timeout_seconds: Optional[float] = Field(
        default=None, gt=0, description="Kill a child process after this many seconds"
    )
    profile_path: Optional[str] = Field(
        default=None,
        description="Fixed memory profile file; a per-directory temp file is used when unset",
    )

    # Reporting
    limit: str = Field(default="", description="Flag suites above this size, e.g. '64MB'")
    debug: bool = Field(default=False, description="Print raw child process output")
    strict: bool = Field(default=False, description="Exit non-zero on errors or flagged suites")

    model_config = SettingsConfigDict(
        env_prefix="TESTMEM_",
        env_file=".env",
        extra="ignore",
    )

    @classmethod
    def from_file(cls, config_path: str, **overrides: Any) -> "ScanConfig":
        """Load configuration from a YAML or JSON file; keyword overrides win."""
        path = Path(config_path)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ConfigError(f"Configuration file not found: {config_path}") from e

        try:
            data = (yaml.safe_load(text) if _is_yaml(path) else json.loads(text)) or {}
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigError(f"Cannot parse {config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration file must contain a mapping: {config_path}")

        return cls(**{**data, **overrides})

    def save(self, config_path: str) -> None:
        """Write every setting to a YAML or JSON file, in declaration order."""
        path = Path(config_path)
        data = self.model_dump()
        if _is_yaml(path):
            text = yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
        else:
            text = json.dumps(data, indent=2) + "\n"
        path.write_text(text, encoding="utf-8")

    @property
    def limit_bytes(self) -> int:
        """Limit in bytes; 0 means no limit. Raises SizeParseError."""
        return parse_size(self.limit)

    def test_command(self, path: str, profile_path: str) -> List[str]:
        """Build the argv that runs the suite in ``path`` under the memory profiler."""
        command = [self.go_binary, "test"]
        if self.race:
            command.append("-race")
        command.extend([f"-count={self.count}", "-memprofile", profile_path, f"./{path}"])
        return command

    def profile_command(self, path: str, profile_path: str) -> List[str]:
        """Build the argv that renders a source-annotated listing of a profile."""
        return [self.go_binary, "tool", "pprof", "-list", f"{path}.test", profile_path]

    def overrides(self, **values: Any) -> "ScanConfig":
        """Return a copy with the given non-None values applied."""
        update: Dict[str, Any] = {k: v for k, v in values.items() if v is not None}
        return self.model_copy(update=update)
