"""Formatter, FormatterStep and line-ending behavior."""
from __future__ import annotations

import unittest
from pathlib import Path
from typing import List, Optional

from pipestep import Formatter, FormatterStep, LineEnding, Lint


class _Closable:
    def __init__(self) -> None:
        self.closed = 0

    def __call__(self, text: str, file: Optional[Path]) -> str:
        return text + "!"

    def lint(self, text: str, file: Optional[Path]) -> List[Lint]:
        return [Lint.create("bang", "missing bang", 1)] if not text.endswith("!") else []

    def close(self) -> None:
        self.closed += 1


class LineEndingTests(unittest.TestCase):
    def test_to_unix(self) -> None:
        self.assertEqual(LineEnding.to_unix("a\r\nb\rc\n"), "a\nb\nc\n")

    def test_apply_windows(self) -> None:
        self.assertEqual(LineEnding.WINDOWS.apply("a\nb\r\nc"), "a\r\nb\r\nc")


class FormatterStepTests(unittest.TestCase):
    def test_create_wraps_text_function(self) -> None:
        step = FormatterStep.create("rev", lambda s: s[::-1])
        self.assertEqual(step.format("abc", None), "cba")
        self.assertEqual(step.lint("abc", None), [])

    def test_create_needs_file_receives_file(self) -> None:
        step = FormatterStep.create_needs_file("name", lambda s, f: f"{f.name}:{s}")
        self.assertEqual(step.format("x", Path("/tmp/a.txt")), "a.txt:x")

    def test_name_required(self) -> None:
        with self.assertRaises(ValueError):
            FormatterStep.create("", str.upper)

    def test_base_format_not_implemented(self) -> None:
        with self.assertRaises(NotImplementedError):
            FormatterStep("base").format("x", None)

    def test_lazy_builds_once(self) -> None:
        calls = {"state": 0, "func": 0}

        def supplier() -> str:
            calls["state"] += 1
            return "-"

        def builder(state: str):
            calls["func"] += 1
            return lambda text, file: text + state

        step = FormatterStep.create_lazy("lazy", supplier, builder)
        self.assertEqual(calls, {"state": 0, "func": 0})
        self.assertEqual(step.format("a", None), "a-")
        self.assertEqual(step.format("b", None), "b-")
        self.assertEqual(calls, {"state": 1, "func": 1})

    def test_lazy_forwards_lint_and_close(self) -> None:
        func = _Closable()
        step = FormatterStep.create_lazy("lazy", lambda: "state", lambda state: func)
        self.assertEqual(len(step.lint("x", None)), 1)
        step.close()
        self.assertEqual(func.closed, 1)
        step.close()
        self.assertEqual(func.closed, 1)


class FormatterTests(unittest.TestCase):
    def test_compute_runs_steps_in_order(self) -> None:
        steps = [
            FormatterStep.create("a", lambda s: s + "a"),
            FormatterStep.create("b", lambda s: s + "b"),
        ]
        self.assertEqual(Formatter(steps).compute("", None), "ab")

    def test_compute_normalizes_line_endings(self) -> None:
        crlf = FormatterStep.create("crlf", lambda s: s.replace("\n", "\r\n"))
        self.assertEqual(Formatter([crlf]).compute("a\r\nb", None), "a\nb")

    def test_none_leaves_text_unchanged(self) -> None:
        self.assertEqual(Formatter([FormatterStep.create("noop", lambda s: None)]).compute("x", None), "x")

    def test_render_applies_line_ending(self) -> None:
        formatter = Formatter([], line_ending=LineEnding.WINDOWS)
        self.assertEqual(formatter.render("a\nb", None), "a\r\nb")

    def test_lint_sees_upstream_output(self) -> None:
        func = _Closable()
        formatter = Formatter([
            FormatterStep.create_needs_file("bang", func),
            FormatterStep.create_needs_file("check", func),
        ])
        # The second step receives "x!" and finds nothing.
        lints = formatter.lint("x", None)
        self.assertEqual(len(lints), 1)
        self.assertEqual(lints[0].code, "bang")

    def test_steps_are_immutable(self) -> None:
        steps = [FormatterStep.create("a", str.upper)]
        formatter = Formatter(steps)
        steps.clear()
        self.assertEqual(len(formatter.steps), 1)

    def test_relative_path(self) -> None:
        formatter = Formatter([], root_dir=Path("/repo"))
        self.assertEqual(formatter.relative_path(Path("/repo/src/x.py")), "src/x.py")
        self.assertEqual(formatter.relative_path(Path("/other/y.py")), "/other/y.py")
        self.assertIsNone(formatter.relative_path(None))

    def test_context_manager_closes_steps(self) -> None:
        func = _Closable()
        with Formatter([FormatterStep.create_needs_file("c", func)]) as formatter:
            formatter.compute("x", None)
        self.assertEqual(func.closed, 1)


class LintTests(unittest.TestCase):
    def test_single_line_default(self) -> None:
        lint = Lint.create("code", "detail", 4)
        self.assertEqual((lint.line_start, lint.line_end), (4, 4))
        self.assertEqual(str(lint), "L4 code: detail")

    def test_span_rendering(self) -> None:
        self.assertEqual(str(Lint.create("code", "detail", 1, 5)), "L1-5 code: detail")

    def test_inverted_span_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Lint.create("code", "detail", 3, 2)

    def test_zero_line_rejected(self) -> None:
        with self.assertRaises(ValueError):
            Lint.create("code", "detail", 0)


if __name__ == "__main__":
    unittest.main()
