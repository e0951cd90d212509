"""Command-line entry point.

Usage::

    rcf
    rcf --root ./web
    python -m component_factory

Exit codes: ``0`` when the run ends normally (built, aborted, rejected, or
the user declined to create the component root), ``1`` when the project or
its configuration cannot be found or the component could not be written.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from . import __version__
from .config import CONFIG_FILENAME, ConfigurationError, FactoryConfig, find_project_root
from .flow import BuildOutcome, ComponentFactory
from .prompts import PromptService, RichPromptService
from .storage import ComponentStore
from .utils import console, print_error, print_heading, print_info

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rcf",
        description="React Component Factory -- interactive component scaffolding",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            f"The project root must contain {CONFIG_FILENAME}, e.g.:\n"
            '  {"componentRoot": "src/components"}\n'
        ),
    )
    parser.add_argument(
        "--root", "-r",
        default=None,
        help="Project root holding the configuration (default: nearest "
             "directory with a package.json)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def ensure_component_root(store: ComponentStore, prompts: PromptService) -> bool:
    """Make sure the component root exists, offering to create it.

    Returns:
        ``True`` if the root exists afterwards, ``False`` if the user
        declined to create it.
    """
    if store.exists():
        return True

    print_error(f"Specified component root '{store.root}' not found.")
    if not prompts.confirm(f'Create directory "{store.root}"?'):
        print_info("Component directory not created. Exiting...")
        return False

    store.create_root()
    print_info("Component directory created...")
    return True


def run(root: Path | None, prompts: PromptService) -> int:
    """Run one generation cycle and return the process exit code."""
    cwd = Path.cwd()
    project_root = root.resolve() if root else find_project_root(cwd)
    if project_root is None:
        print_error(f"Could not find a package.json file in the current working directory ({cwd})")
        print_info("Navigate to the proper project directory and run me again...")
        return EXIT_FAILURE

    try:
        config = FactoryConfig.load(project_root)
    except ConfigurationError as exc:
        print_error(str(exc))
        console.print()
        return EXIT_FAILURE

    print_heading("React Component Factory")
    console.print(f"Working directory: {project_root}", markup=False)
    console.print()

    store = ComponentStore(config.component_root_path, config.extension)
    if not ensure_component_root(store, prompts):
        return EXIT_OK

    result = ComponentFactory(store, prompts).run()
    if result.outcome is BuildOutcome.BUILD_ERROR:
        return EXIT_FAILURE
    return EXIT_OK


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``rcf`` and ``python -m component_factory``."""
    args = build_parser().parse_args(argv)
    root = Path(args.root) if args.root else None

    try:
        code = run(root, RichPromptService())
    except (KeyboardInterrupt, EOFError):
        console.print()
        print_error("Aborted")
        code = EXIT_INTERRUPTED

    sys.exit(code)


if __name__ == "__main__":
    main()
