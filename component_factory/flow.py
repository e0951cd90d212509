"""Recipe collection flow.

Drives the fixed prompt sequence that turns user answers into a ``Recipe``:

1. type  2. location (optionally a new folder)  3. name (collision handling)
4. properties  5. props options  6. confirmation  7. render and write.

Each stage returns its answer to ``run`` which threads the values forward;
the immutable ``Recipe`` is only constructed once every answer is known.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel

from .prompts import Choice, PromptService
from .recipe import (
    PROP_OPTION_CHOICES,
    PROPERTY_CHOICES,
    TYPE_LABELS,
    ComponentProperty,
    ComponentType,
    PropOption,
    Recipe,
)
from .renderer import render_component
from .storage import ComponentStore, ComponentWriteError, LocationError
from .utils import console, pascal_case, print_content, print_error, print_success

CREATE_DIRECTORY_LABEL = "Create Directory"


# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------

class OverwriteDecision(str, Enum):
    """Answer to a name collision."""
    OVERWRITE = "overwrite"
    RENAME = "rename"
    ABORT = "abort"


class BuildOutcome(str, Enum):
    """Terminal state of one generation cycle."""
    ABORTED = "aborted"
    REJECTED = "rejected"
    BUILT = "built"
    BUILD_ERROR = "build_error"


class BuildResult(BaseModel):
    """What a generation cycle ended with."""

    outcome: BuildOutcome
    recipe: Recipe | None = None
    destination: Path | None = None
    content: str | None = None
    error: str | None = None


# ---------------------------------------------------------------------------
# Flow
# ---------------------------------------------------------------------------

class ComponentFactory:
    """Interactive component generator for one component tree.

    Attributes:
        store: File-system access below the component root.
        prompts: Source of user answers.
    """

    def __init__(self, store: ComponentStore, prompts: PromptService) -> None:
        self.store = store
        self.prompts = prompts

    def run(self) -> BuildResult:
        """Collect a recipe, confirm it and write the component.

        Returns:
            A ``BuildResult``.  Nothing is written unless the outcome is
            ``BUILT``.
        """
        component_type = self.choose_type()
        location = self.choose_location()

        name = self.choose_name(location)
        if name is None:
            print_error("Aborted")
            return BuildResult(outcome=BuildOutcome.ABORTED)

        properties = self.choose_properties(component_type)
        if ComponentProperty.HAS_PROPS in properties:
            prop_options = self.choose_prop_options()
        else:
            prop_options = frozenset()

        recipe = Recipe(
            type=component_type,
            location=location,
            name=name,
            properties=properties,
            prop_options=prop_options,
        )

        if not self.confirm_recipe(recipe):
            print_error("Rejected build...")
            return BuildResult(outcome=BuildOutcome.REJECTED, recipe=recipe)

        try:
            destination, content = self.build(recipe)
        except ComponentWriteError as exc:
            print_error(f"Build Error: {exc}")
            return BuildResult(outcome=BuildOutcome.BUILD_ERROR, recipe=recipe, error=str(exc))

        console.print()
        print_success(f"Built component {destination}:")
        console.print()
        print_content(content)
        console.print()
        return BuildResult(
            outcome=BuildOutcome.BUILT,
            recipe=recipe,
            destination=destination,
            content=content,
        )

    # -- Stages --------------------------------------------------------------

    def choose_type(self) -> ComponentType:
        choices = [Choice(value=t, label=label) for t, label in TYPE_LABELS.items()]
        return ComponentType(self.prompts.select("Choose component type", choices))

    def choose_location(self) -> str:
        """Pick an existing subdirectory or create a new one."""
        choices = [Choice(value=None, label=CREATE_DIRECTORY_LABEL)]
        choices.extend(Choice(value=loc, label=loc) for loc in self.store.list_locations())
        location = self.prompts.select("Choose component location", choices)
        if location is None:
            return self.create_folder()
        return location

    def create_folder(self) -> str:
        """Prompt for a folder name until one can be created."""
        while True:
            raw = self.prompts.text("Choose new directory name")
            try:
                return self.store.create_location(raw)
            except LocationError as exc:
                print_error(str(exc))

    def choose_name(self, location: str) -> str | None:
        """Prompt for the component name, resolving collisions.

        Returns:
            The upper-camel-case name, or ``None`` when the user aborts.
        """
        while True:
            name = pascal_case(self.prompts.text("Choose component name (PascalCase)"))
            if not name:
                print_error("Component name must contain letters or digits")
                continue
            if not self.store.component_exists(location, name):
                return name

            decision = self.choose_overwrite_decision(location, name)
            if decision is OverwriteDecision.OVERWRITE:
                return name
            if decision is OverwriteDecision.ABORT:
                return None

    def choose_overwrite_decision(self, location: str, name: str) -> OverwriteDecision:
        """Ask what to do about an existing component file.

        Any answer other than overwrite or rename counts as abort.
        """
        destination = self.store.destination(location, name)
        answer = self.prompts.expand(
            f"{name} component already exists in {destination.parent}. "
            f"What would you like to do? Type 'h' for options...",
            [
                Choice(value=OverwriteDecision.OVERWRITE, label=f"Overwrite {destination}", key="o"),
                Choice(value=OverwriteDecision.RENAME, label="Choose new name", key="r"),
                Choice(value=OverwriteDecision.ABORT, label="Abort", key="x"),
            ],
        )
        try:
            return OverwriteDecision(answer)
        except ValueError:
            return OverwriteDecision.ABORT

    def choose_properties(self, component_type: ComponentType) -> frozenset[ComponentProperty]:
        choices = [
            Choice(value=prop, label=label, checked=checked)
            for prop, label, checked in PROPERTY_CHOICES[component_type]
        ]
        picked = self.prompts.checkbox("Select component properties", choices)
        return frozenset(ComponentProperty(p) for p in picked)

    def choose_prop_options(self) -> frozenset[PropOption]:
        choices = [
            Choice(value=option, label=label, checked=checked)
            for option, label, checked in PROP_OPTION_CHOICES
        ]
        picked = self.prompts.checkbox("Choose React Props options", choices)
        return frozenset(PropOption(p) for p in picked)

    def confirm_recipe(self, recipe: Recipe) -> bool:
        """Show where the component will be written and ask for approval."""
        destination = self.store.destination(recipe.location, recipe.name)
        console.print()
        print_success("Building a component:")
        print_success(f"Build '{recipe.name}' at {destination}")
        console.print()
        return self.prompts.confirm("Accept and build?")

    def build(self, recipe: Recipe) -> tuple[Path, str]:
        """Render *recipe* and write it.

        Raises:
            ComponentWriteError: If the destination cannot be written.
        """
        content = render_component(recipe)
        destination = self.store.write_component(recipe, content)
        return destination, content
