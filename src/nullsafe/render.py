"""
Rich rendering for validation reports and pipelines.

::: This is-in-layer Presentation-Layer.
::: This depends-on rich.
"""

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from .transform.pipeline import NullSafeTransformer
from .validation.result import ValidationResult

PASS_STYLE = "bold green"
FAIL_STYLE = "bold red"


def _label(result: ValidationResult) -> Text:
    # plain Text: messages may contain brackets, e.g. "[0-9]"
    label = Text()
    label.append(result.rule_name, style="cyan")
    label.append(": ")
    if result.valid:
        label.append("PASS", style=PASS_STYLE)
    else:
        label.append("FAIL", style=FAIL_STYLE)
    if result.message:
        label.append(f" - {result.message}", style="dim")
    return label


def _add_children(node: Tree, result: ValidationResult) -> None:
    for sub in result.sub_results:
        child = node.add(_label(sub))
        _add_children(child, sub)


def validation_tree(result: ValidationResult) -> Tree:
    """Build a rich Tree mirroring the ValidationResult hierarchy."""
    tree = Tree(_label(result), guide_style=PASS_STYLE if result.valid else FAIL_STYLE)
    _add_children(tree, result)
    return tree


def pipeline_table(transformer: NullSafeTransformer) -> Table:
    """One row per step: position, name and null handling."""
    table = Table(title=Text(f"Pipeline on {transformer.input!r}"), show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Step", style="cyan")
    table.add_column("Accepts None")
    table.add_column("Allows None")

    for index, step in enumerate(transformer.steps):
        table.add_row(
            str(index),
            step.name,
            "yes" if step.accepts_none else "no",
            "yes" if step.allows_null else "no",
        )
    return table


def print_validation(result: ValidationResult, console: Optional[Console] = None) -> None:
    (console or Console()).print(validation_tree(result))


def print_pipeline(transformer: NullSafeTransformer, console: Optional[Console] = None) -> None:
    (console or Console()).print(pipeline_table(transformer))


__all__ = [
    "validation_tree",
    "pipeline_table",
    "print_validation",
    "print_pipeline",
]
