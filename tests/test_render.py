"""
Tests for the rich rendering helpers.
"""

import io

from rich.console import Console

from nullsafe import NullSafe, NullSafeTransformer
from nullsafe.render import pipeline_table, print_pipeline, print_validation, validation_tree


def _console():
    return Console(file=io.StringIO(), width=120, color_system=None)


class TestValidationTree:

    def test_tree_mirrors_result(self, password_validator):
        result = password_validator(NullSafe.of("short")).validate()
        tree = validation_tree(result)

        assert len(tree.children) == 2
        assert tree.label.plain.startswith("overall: FAIL")

    def test_print_validation(self, password_validator):
        console = _console()
        print_validation(password_validator(NullSafe.of("password123")).validate(), console)

        output = console.file.getvalue()
        assert "overall: PASS" in output
        assert "min_length: PASS" in output
        # brackets in the pattern are printed verbatim
        assert "[0-9]" in output


class TestPipelineTable:

    def test_rows(self):
        transformer = (
            NullSafeTransformer.from_(NullSafe.of(30))
            .map(lambda x: x * 2)
            .map_safe(str)
        )
        table = pipeline_table(transformer)
        assert table.row_count == 2
        assert [c.header for c in table.columns] == ["#", "Step", "Accepts None", "Allows None"]

    def test_print_pipeline(self):
        console = _console()
        print_pipeline(NullSafeTransformer.from_(NullSafe.of(30)).map(abs), console)

        output = console.file.getvalue()
        assert "Pipeline on NullSafe[30]" in output
        assert "map" in output
