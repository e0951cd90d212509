"""React Component Factory -- interactive scaffolding for React components.

Prompts for a component recipe (type, location, name, features) and renders
it into a TypeScript/React source file below the project's component root.

Quick usage::

    from component_factory import ComponentFactory, ComponentStore, RichPromptService

    store = ComponentStore("/path/to/web/src/components")
    result = ComponentFactory(store, RichPromptService()).run()
"""

__version__ = "1.0.0"

from component_factory.config import FactoryConfig
from component_factory.flow import BuildOutcome, BuildResult, ComponentFactory
from component_factory.prompts import Choice, PromptService, RichPromptService
from component_factory.recipe import ComponentProperty, ComponentType, PropOption, Recipe
from component_factory.renderer import render_component
from component_factory.storage import ComponentStore

__all__ = [
    "BuildOutcome",
    "BuildResult",
    "Choice",
    "ComponentFactory",
    "ComponentProperty",
    "ComponentStore",
    "ComponentType",
    "FactoryConfig",
    "PromptService",
    "PropOption",
    "Recipe",
    "RichPromptService",
    "render_component",
]
