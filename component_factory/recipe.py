"""Pydantic v2 models describing the component to generate.

A ``Recipe`` is the complete, validated answer set collected by the prompt
flow.  It is immutable: the flow only constructs it once every answer is
known, and the renderer consumes it exactly once.
"""

from __future__ import annotations

from enum import Enum
from pathlib import PurePosixPath

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ComponentType(str, Enum):
    """Kind of React component to generate."""
    FUNCTIONAL = "functional"
    CLASS = "class"


class ComponentProperty(str, Enum):
    """Optional features of the generated component."""
    HAS_PROPS = "props"
    IS_OBSERVER = "observer"
    HAS_OBSERVABLES = "observables"
    HAS_CONSTRUCTOR = "constructor"


class PropOption(str, Enum):
    """Refinements of the props interface, only valid with ``HAS_PROPS``."""
    HAS_CHILDREN = "hasChildren"
    HAS_DEFAULT_PROPS = "hasDefault"


# ---------------------------------------------------------------------------
# Prompt choice tables
# ---------------------------------------------------------------------------

TYPE_LABELS: dict[ComponentType, str] = {
    ComponentType.FUNCTIONAL: "Functional Component",
    ComponentType.CLASS: "Class component",
}

# (property, label, checked by default) offered for each component type.
PROPERTY_CHOICES: dict[ComponentType, list[tuple[ComponentProperty, str, bool]]] = {
    ComponentType.FUNCTIONAL: [
        (ComponentProperty.HAS_PROPS, "With React Props", True),
        (ComponentProperty.IS_OBSERVER, "Wrap as mobx observer", False),
    ],
    ComponentType.CLASS: [
        (ComponentProperty.HAS_PROPS, "With React Props", True),
        (ComponentProperty.HAS_OBSERVABLES, "Use mobx observables", False),
        (ComponentProperty.HAS_CONSTRUCTOR, "Create constructor", False),
    ],
}

PROP_OPTION_CHOICES: list[tuple[PropOption, str, bool]] = [
    (PropOption.HAS_CHILDREN, "Props contain children", False),
    (PropOption.HAS_DEFAULT_PROPS, "Include default props", False),
]


# ---------------------------------------------------------------------------
# Recipe
# ---------------------------------------------------------------------------

class Recipe(BaseModel):
    """Everything needed to render and place one component file."""

    model_config = ConfigDict(frozen=True)

    type: ComponentType
    location: str = Field(..., description="Forward-slash path relative to the component root")
    name: str = Field(..., min_length=1, description="Upper-camel-case component name")
    properties: frozenset[ComponentProperty] = Field(default_factory=frozenset)
    prop_options: frozenset[PropOption] = Field(default_factory=frozenset)

    @field_validator("location")
    @classmethod
    def _location_is_relative(cls, value: str) -> str:
        path = PurePosixPath(value.replace("\\", "/"))
        if path.is_absolute() or ".." in path.parts:
            raise ValueError(f"location must stay inside the component root: {value!r}")
        return path.as_posix()

    @model_validator(mode="after")
    def _prop_options_need_props(self) -> "Recipe":
        if self.prop_options and ComponentProperty.HAS_PROPS not in self.properties:
            raise ValueError("prop_options require the 'props' property")
        return self

    # -- Convenience accessors ------------------------------------------------

    def has(self, flag: ComponentProperty | PropOption) -> bool:
        """Return ``True`` if *flag* is selected in either flag set."""
        if isinstance(flag, PropOption):
            return flag in self.prop_options
        return flag in self.properties

    @property
    def props_interface(self) -> str:
        """Name of the exported props interface."""
        return f"{self.name}Props"

    @property
    def props_type(self) -> str:
        """Props type argument: the interface, or ``{}`` without props."""
        return self.props_interface if self.has(ComponentProperty.HAS_PROPS) else "{}"

    @property
    def param_type(self) -> str:
        """Type of the ``props`` parameter, wrapped for children when requested."""
        if self.has(PropOption.HAS_CHILDREN):
            return f"React.PropsWithChildren<{self.props_type}>"
        return self.props_type
