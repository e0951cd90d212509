"""Render a ``Recipe`` into TypeScript/React source.

The output is assembled line by line.  Shared sections (imports, the props
interface) are emitted first, then the declaration is produced by the
builder registered for the recipe's ``ComponentType``.  Rendering is a pure
function of the recipe: identical recipes always yield identical text.
"""

from __future__ import annotations

from typing import Callable

from .recipe import ComponentProperty, ComponentType, PropOption, Recipe

TSX_EXTENSION = ".tsx"

_OBSERVER_SOURCES: dict[ComponentType, str] = {
    ComponentType.CLASS: "mobx-react",
    ComponentType.FUNCTIONAL: "mobx-react-lite",
}

_FRAGMENT = "<React.Fragment />"


def render_component(recipe: Recipe) -> str:
    """Return the complete file content for *recipe*.

    The content starts with a blank line and ends with a trailing newline.
    """
    lines = ["", "import React from 'react'"]
    lines.extend(_render_imports(recipe))

    if recipe.has(ComponentProperty.HAS_PROPS):
        lines.extend([
            "",
            f"export interface {recipe.props_interface} {{",
            "",
            "}",
        ])

    lines.append("")
    lines.extend(_DECLARATION_BUILDERS[recipe.type](recipe))
    lines.append("")

    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Shared sections
# ---------------------------------------------------------------------------

def _render_imports(recipe: Recipe) -> list[str]:
    imports: list[str] = []
    if recipe.has(ComponentProperty.HAS_OBSERVABLES):
        imports.append("import { observable } from 'mobx'")
    if recipe.has(ComponentProperty.IS_OBSERVER):
        imports.append(f"import {{ observer }} from '{_OBSERVER_SOURCES[recipe.type]}'")
    return imports


# ---------------------------------------------------------------------------
# Declaration builders
# ---------------------------------------------------------------------------

def _render_class(recipe: Recipe) -> list[str]:
    """``React.Component`` subclass with an optional constructor."""
    lines: list[str] = []

    if recipe.has(ComponentProperty.IS_OBSERVER):
        lines.append("@observer")

    lines.append(
        f"export class {recipe.name} extends React.Component<{recipe.param_type}> {{"
    )
    lines.append("")

    if recipe.has(PropOption.HAS_DEFAULT_PROPS):
        lines.extend([
            f"  static defaultProps: Partial<{recipe.props_interface}> = {{}}",
            "",
        ])

    if recipe.has(ComponentProperty.HAS_CONSTRUCTOR):
        lines.extend([
            f"  constructor(props: {recipe.param_type}) {{",
            "    super(props)",
            "  }",
            "",
        ])

    lines.extend([
        "  render() {",
        "    return (",
        f"      {_FRAGMENT}",
        "    )",
        "  }",
        "}",
    ])
    return lines


def _render_functional(recipe: Recipe) -> list[str]:
    """Arrow-function component typed as ``React.FC``, optionally observer-wrapped."""
    wrapped = recipe.has(ComponentProperty.IS_OBSERVER)

    if recipe.has(ComponentProperty.HAS_PROPS):
        params = f"(props: {recipe.param_type})"
    else:
        params = "()"

    head = f"export const {recipe.name}: React.FC<{recipe.props_type}> = "
    if wrapped:
        head += "observer("
    head += f"{params}: React.ReactElement => {{"

    lines = [
        head,
        "",
        "  return (",
        f"    {_FRAGMENT}",
        "  )",
        "})" if wrapped else "}",
    ]

    if recipe.has(PropOption.HAS_DEFAULT_PROPS):
        lines.extend(["", f"{recipe.name}.defaultProps = {{ }}"])

    return lines


_DECLARATION_BUILDERS: dict[ComponentType, Callable[[Recipe], list[str]]] = {
    ComponentType.CLASS: _render_class,
    ComponentType.FUNCTIONAL: _render_functional,
}
