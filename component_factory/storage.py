"""File-system access for the component tree.

``ComponentStore`` owns every read and write below the configured component
root: listing candidate locations, creating folders, detecting name
collisions and writing the rendered component.  Locations are always
forward-slash paths relative to the root and may never escape it.
"""

from __future__ import annotations

from pathlib import Path

from .recipe import Recipe
from .renderer import TSX_EXTENSION
from .utils import folder_name


class LocationError(ValueError):
    """Raised when a location is empty or resolves outside the component root."""


class ComponentWriteError(Exception):
    """Raised when the rendered component cannot be written to disk."""

    def __init__(self, destination: Path, reason: str) -> None:
        self.destination = destination
        super().__init__(f"Could not write destination file {destination}: {reason}")


class ComponentStore:
    """Component tree rooted at an absolute directory."""

    def __init__(self, root: str | Path, extension: str = TSX_EXTENSION) -> None:
        self.root = Path(root).resolve()
        self.extension = extension

    # -- Root --------------------------------------------------------------

    def exists(self) -> bool:
        return self.root.is_dir()

    def create_root(self) -> Path:
        """Create the component root (and parents) if it does not exist."""
        self.root.mkdir(parents=True, exist_ok=True)
        return self.root

    # -- Locations -----------------------------------------------------------

    def list_locations(self) -> list[str]:
        """Return every subdirectory of the root, recursively.

        Paths are relative to the root, use forward slashes and are sorted so
        that each parent directly precedes its children.  Symlinked
        directories that lead outside the root are skipped.
        """
        locations: list[str] = []
        for path in self.root.rglob("*"):
            if not path.is_dir():
                continue
            location = path.relative_to(self.root).as_posix()
            try:
                self.resolve(location)
            except LocationError:
                continue
            locations.append(location)
        return sorted(locations)

    def resolve(self, location: str) -> Path:
        """Absolute path of *location*, guaranteed to lie inside the root.

        Raises:
            LocationError: If the location points outside the component root.
        """
        path = (self.root / location.replace("\\", "/")).resolve()
        if path != self.root and self.root not in path.parents:
            raise LocationError(f"Location {location!r} is outside {self.root}")
        return path

    def create_location(self, raw_name: str) -> str:
        """Normalise *raw_name*, create that folder under the root and return it.

        Raises:
            LocationError: If the normalised name is empty or escapes the root.
        """
        name = folder_name(raw_name)
        if not name:
            raise LocationError("Directory name must not be empty")
        path = self.resolve(name)
        if path == self.root:
            raise LocationError(f"Directory name {raw_name!r} does not name a subdirectory")
        path.mkdir(parents=True, exist_ok=True)
        return path.relative_to(self.root).as_posix()

    # -- Components ----------------------------------------------------------

    def destination(self, location: str, name: str) -> Path:
        """Target file for component *name* placed in *location*."""
        return self.resolve(location) / f"{name}{self.extension}"

    def component_exists(self, location: str, name: str) -> bool:
        return self.destination(location, name).exists()

    def write_component(self, recipe: Recipe, content: str) -> Path:
        """Write *content* as UTF-8 (no BOM) to the recipe's destination.

        Raises:
            ComponentWriteError: If the file cannot be written.
        """
        dest = self.destination(recipe.location, recipe.name)
        try:
            dest.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise ComponentWriteError(dest, exc.strerror or str(exc)) from exc
        return dest
