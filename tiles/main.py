#!/usr/bin/env python3
"""
Main CLI entry point for tiles
"""

from typing import Callable, List, Optional, Tuple

import typer
from rich.console import Console

from tiles import __version__
from tiles.config import ui_config
from tiles.exceptions import ConfigurationError
from tiles.layout import Axis, LayoutManager, LeafView, SplitView, ViewNode, create_layout
from tiles.ui.formatting import render_layout_tree

app = typer.Typer(help="A binary tiling panel layout for the terminal")
console = Console()

REPRESENTATION_HELP = "Layout representation: registry or tree"
LAYOUT_HELP = "Start-up shape: single or pair"
AXIS_HELP = "Axis of the initial split: h(orizontal) or v(ertical)"


def _build_manager(
    representation: Optional[str],
    layout: Optional[str],
    axis: Optional[str] = None,
    reseed_when_empty: Optional[bool] = None,
) -> LayoutManager:
    """Create a LayoutManager from flags, falling back to saved preferences."""
    try:
        representation = representation or ui_config.get_representation()
        initial_layout = layout or ui_config.get_initial_layout()
        split_axis = Axis.from_string(axis) if axis else Axis.HORIZONTAL
        if reseed_when_empty is None:
            reseed_when_empty = ui_config.get_reseed_when_empty()
        return LayoutManager(
            create_layout(representation, initial_layout, split_axis),
            reseed_when_empty=reseed_when_empty,
        )
    except (ConfigurationError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from e


@app.command()
def run(
    representation: Optional[str] = typer.Option(
        None, "--representation", "-r", help=REPRESENTATION_HELP
    ),
    layout: Optional[str] = typer.Option(None, "--layout", "-l", help=LAYOUT_HELP),
    axis: Optional[str] = typer.Option(None, "--axis", "-a", help=AXIS_HELP),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every layout change"),
):
    """Launch the tiling TUI"""
    from tiles.ui.app import TilesApp
    from tiles.utils.logging_utils import setup_tui_logging

    setup_tui_logging(verbose=verbose)
    manager = _build_manager(representation, layout, axis)
    tiles_app = TilesApp(manager, theme_name=ui_config.get_theme())
    tiles_app.run()


@app.command()
def show(
    representation: Optional[str] = typer.Option(
        None, "--representation", "-r", help=REPRESENTATION_HELP
    ),
    layout: Optional[str] = typer.Option(None, "--layout", "-l", help=LAYOUT_HELP),
    axis: Optional[str] = typer.Option(None, "--axis", "-a", help=AXIS_HELP),
):
    """Print the start-up layout as a tree"""
    manager = _build_manager(representation, layout, axis)
    title = f"{manager.representation} layout"
    console.print(render_layout_tree(manager.view(), title=title))


def _demo_steps() -> List[Tuple[str, Callable[[ViewNode], Callable[[], None]]]]:
    """Scripted clicks: each step picks the button to press on the current view."""

    def rhs_close(view: ViewNode) -> Callable[[], None]:
        assert isinstance(view, SplitView) and isinstance(view.rhs, LeafView)
        return view.rhs.on_close

    def root_split_vertical(view: ViewNode) -> Callable[[], None]:
        assert isinstance(view, LeafView)
        return view.on_split_vertical

    def lhs_close(view: ViewNode) -> Callable[[], None]:
        assert isinstance(view, SplitView) and isinstance(view.lhs, LeafView)
        return view.lhs.on_close

    def root_close(view: ViewNode) -> Callable[[], None]:
        assert isinstance(view, LeafView)
        return view.on_close

    return [
        ("Close the right-hand panel", rhs_close),
        ("Split the remaining panel vertically", root_split_vertical),
        ("Close the top panel", lhs_close),
        ("Close the last panel", root_close),
    ]


@app.command()
def demo(
    representation: Optional[str] = typer.Option(
        None, "--representation", "-r", help=REPRESENTATION_HELP
    ),
):
    """Walk through split and close-with-collapse step by step"""
    manager = _build_manager(representation, "pair", reseed_when_empty=False)
    view = manager.view()
    console.print(render_layout_tree(view, title="Start"))

    for number, (description, pick_button) in enumerate(_demo_steps(), start=1):
        if view is None:
            break
        pick_button(view)()
        manager.flush()
        view = manager.view()
        console.print(render_layout_tree(view, title=f"{number}. {description}"))


@app.command()
def version():
    """Show tiles version"""
    typer.echo(f"tiles version {__version__}")


def run_cli():
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    run_cli()
