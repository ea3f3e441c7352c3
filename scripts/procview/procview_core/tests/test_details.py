from __future__ import annotations

import unittest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from procview_core.details import DetailsPaneController, details_lines, fold_args  # noqa: E402
from procview_core.models import ProcessRecord  # noqa: E402


def _process(args: str = "", **overrides) -> ProcessRecord:
    fields = {
        "pid": 4242,
        "parent_pid": 1,
        "user_name": "alice",
        "start_time": "09:15:00",
        "run_time": "00:10:05",
        "cmd": "python3",
        "cmd_path": "/usr/bin/python3",
        "args": args,
        "ports": None,
        "memory": 64 * 1024 * 1024,
    }
    fields.update(overrides)
    return ProcessRecord(**fields)


class DetailsLinesTests(unittest.TestCase):
    def test_no_selection_placeholder(self):
        self.assertEqual(details_lines(None, 40), ["No process selected"])

    def test_summary_command_and_args(self):
        lines = details_lines(_process("-m http.server 8000", ports="8000"), 120)
        self.assertEqual(
            lines[0],
            "USER: alice PID: 4242 PARENT: 1 START_TIME: 09:15:00, RUN_TIME: 00:10:05 MEMORY: 64MB PORTS: 8000",
        )
        self.assertEqual(lines[1], "CMD: /usr/bin/python3")
        self.assertEqual(lines[2:], ["-m http.server 8000"])

    def test_optional_fields_are_omitted(self):
        lines = details_lines(_process(parent_pid=None, cmd_path=None), 40)
        self.assertNotIn("PARENT", lines[0])
        self.assertNotIn("PORTS", lines[0])
        self.assertEqual(lines[1], "CMD: python3")

    def test_args_fold_to_exact_width(self):
        self.assertEqual(fold_args("abcdefghij", 4), ["abcd", "efgh", "ij"])
        self.assertEqual(fold_args("", 4), [""])
        self.assertEqual(fold_args("one two", 0), list("one two"))

    def test_row_count_matches_line_count(self):
        pane = DetailsPaneController()
        for args in ("", "x", "--flag " + "y" * 290 + " END_OF_ARGS", "a b " * 50):
            for width in (1, 7, 40, 78):
                process = _process(args)
                self.assertEqual(len(details_lines(process, width)), pane.recompute(process, width))
        self.assertEqual(len(details_lines(None, 40)), pane.recompute(None, 40))


class DetailsPaneControllerTests(unittest.TestCase):
    def test_no_selection_is_one_line(self):
        pane = DetailsPaneController()
        self.assertEqual(pane.recompute(None, 40), 1)

    def test_line_count_uses_wrapped_args(self):
        pane = DetailsPaneController()
        self.assertEqual(pane.recompute(_process("x" * 100), 40), 5)
        self.assertEqual(pane.recompute(_process("x" * 80), 40), 4)

    def test_empty_args_still_take_a_line(self):
        pane = DetailsPaneController()
        self.assertEqual(pane.recompute(_process(""), 40), 3)

    def test_zero_width_does_not_fail(self):
        pane = DetailsPaneController()
        self.assertEqual(pane.recompute(_process("abc"), 0), 5)

    def test_recompute_keeps_offset(self):
        pane = DetailsPaneController()
        pane.scroll_offset = 2
        pane.recompute(_process("x" * 300), 40)
        self.assertEqual(pane.scroll_offset, 2)

    def test_backward_saturates(self):
        pane = DetailsPaneController()
        pane.scroll_backward()
        self.assertEqual(pane.scroll_offset, 0)

    def test_forward_is_bounded_at_render_time(self):
        pane = DetailsPaneController()
        pane.recompute(_process("x" * 200), 40)
        for _ in range(10):
            pane.scroll_forward()
        self.assertEqual(pane.scroll_offset, 10)
        self.assertEqual(pane.clamp(5), 2)
        self.assertEqual(pane.scroll_offset, 2)

    def test_clamp_when_content_fits(self):
        pane = DetailsPaneController()
        pane.recompute(None, 40)
        pane.scroll_forward()
        self.assertEqual(pane.clamp(5), 0)


if __name__ == "__main__":
    unittest.main()
