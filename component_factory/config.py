"""React Component Factory configuration.

The tool is configured per project by an ``rcf.config.json`` file sitting in
the project root (the nearest directory containing ``package.json``)::

    {
      "componentRoot": "src/components",
      "extension": ".tsx"
    }

``componentRoot`` is resolved against the directory holding the config file,
never against the caller's working directory.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .renderer import TSX_EXTENSION

CONFIG_FILENAME = "rcf.config.json"
PROJECT_MARKER = "package.json"
PROJECT_ROOT_ENV = "RCF_PROJECT_ROOT"


class ConfigurationError(Exception):
    """Raised when the configuration file cannot be used."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(message)


class ConfigurationMissingError(ConfigurationError):
    """Raised when no configuration file exists in the project root."""

    def __init__(self, path: Path) -> None:
        super().__init__(
            path,
            f"Could not find the component factory configuration file "
            f"({CONFIG_FILENAME}) at \"{path}\"",
        )


class FactoryConfig(BaseModel):
    """Validated contents of ``rcf.config.json``.

    Instances are created once by the CLI entry point and are read-only for
    the rest of the run.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    component_root: str = Field(..., alias="componentRoot", min_length=1)
    extension: str = Field(default=TSX_EXTENSION, description="Extension of generated files")
    project_root: Path = Field(default=Path("."), exclude=True)

    @field_validator("extension")
    @classmethod
    def _extension_has_dot(cls, value: str) -> str:
        if not value.startswith(".") or len(value) < 2:
            raise ValueError(f"extension must look like '.tsx', got {value!r}")
        return value

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    @property
    def config_path(self) -> Path:
        """Path of the file this configuration was read from."""
        return self.project_root / CONFIG_FILENAME

    @property
    def component_root_path(self) -> Path:
        """Absolute component root, resolved against the project root."""
        return (self.project_root / self.component_root).resolve()

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, project_root: str | Path) -> "FactoryConfig":
        """Read and validate ``rcf.config.json`` from *project_root*.

        Raises:
            ConfigurationMissingError: If the file does not exist.
            ConfigurationError: If the file is not valid JSON or misses
                required settings.
        """
        root = Path(project_root).resolve()
        path = root / CONFIG_FILENAME
        if not path.is_file():
            raise ConfigurationMissingError(path)

        try:
            raw = path.read_text(encoding="utf-8")
            config = cls.model_validate_json(raw)
        except OSError as exc:
            raise ConfigurationError(path, f"Could not read {path}: {exc}") from exc
        except ValidationError as exc:
            raise ConfigurationError(path, f"Invalid configuration in {path}:\n{exc}") from exc

        return config.model_copy(update={"project_root": root})


def find_project_root(start: str | Path | None = None) -> Path | None:
    """Locate the project root for *start* (default: the working directory).

    ``$RCF_PROJECT_ROOT`` wins when set.  Otherwise the nearest directory at
    or above *start* that contains a ``package.json`` is returned, or
    ``None`` when there is none.
    """
    override = os.environ.get(PROJECT_ROOT_ENV)
    if override:
        return Path(override).resolve()

    here = Path(start or Path.cwd()).resolve()
    for candidate in (here, *here.parents):
        if (candidate / PROJECT_MARKER).is_file():
            return candidate
    return None
