from __future__ import annotations

import random
import unittest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from procview_core.scroll import ScrollPosition, ScrollType, compute_follow_top  # noqa: E402


def _position(top: int, max_top: int) -> ScrollPosition:
    scroll = ScrollPosition()
    scroll.max_top = max_top
    scroll.top = top
    return scroll


class FollowTopTests(unittest.TestCase):
    def test_zero_height_never_scrolls(self):
        self.assertEqual(compute_follow_top(7, 0, 40, 100), 0)

    def test_content_that_fits_stays_at_top(self):
        self.assertEqual(compute_follow_top(3, 10, 9, 10), 0)

    def test_selection_below_window_becomes_last_line(self):
        # content 100, height 10, selection jumps to 45
        self.assertEqual(compute_follow_top(0, 10, 45, 100), 36)

    def test_selection_above_window_becomes_first_line(self):
        self.assertEqual(compute_follow_top(36, 10, 5, 100), 5)

    def test_selection_inside_window_keeps_top(self):
        for current_top in range(0, 90):
            for selection in range(current_top, current_top + 10):
                self.assertEqual(compute_follow_top(current_top, 10, selection, 100), current_top)

    def test_selection_on_first_hidden_row_moves_by_one(self):
        self.assertEqual(compute_follow_top(20, 10, 30, 100), 21)


class ScrollPositionTests(unittest.TestCase):
    def test_move_reports_change(self):
        scroll = _position(0, 5)
        self.assertTrue(scroll.move(ScrollType.DOWN))
        self.assertEqual(scroll.top, 1)
        self.assertTrue(scroll.move(ScrollType.UP))
        self.assertEqual(scroll.top, 0)

    def test_move_is_noop_at_bounds(self):
        scroll = _position(0, 5)
        self.assertFalse(scroll.move(ScrollType.UP))
        scroll.top = 5
        self.assertFalse(scroll.move(ScrollType.DOWN))
        self.assertEqual(scroll.top, 5)

    def test_home_and_end_are_idempotent(self):
        scroll = _position(3, 8)
        self.assertTrue(scroll.move(ScrollType.END))
        self.assertFalse(scroll.move(ScrollType.END))
        self.assertEqual(scroll.top, 8)
        self.assertTrue(scroll.move(ScrollType.HOME))
        self.assertFalse(scroll.move(ScrollType.HOME))
        self.assertEqual(scroll.top, 0)

    def test_page_moves_clamp(self):
        scroll = _position(2, 12)
        self.assertTrue(scroll.move(ScrollType.PAGE_DOWN, 5))
        self.assertEqual(scroll.top, 7)
        self.assertTrue(scroll.move(ScrollType.PAGE_DOWN, 5))
        self.assertEqual(scroll.top, 12)
        self.assertTrue(scroll.move(ScrollType.PAGE_UP, 20))
        self.assertEqual(scroll.top, 0)

    def test_page_move_without_page_size_is_noop(self):
        scroll = _position(2, 12)
        self.assertFalse(scroll.move(ScrollType.PAGE_DOWN))
        self.assertEqual(scroll.top, 2)

    def test_recompute_bounds_clamps_top(self):
        scroll = _position(40, 90)
        scroll.recompute_bounds(30, 10)
        self.assertEqual(scroll.max_top, 20)
        self.assertEqual(scroll.top, 20)

    def test_recompute_bounds_zero_height(self):
        scroll = _position(4, 10)
        scroll.recompute_bounds(50, 0)
        self.assertEqual(scroll.max_top, 0)
        self.assertEqual(scroll.top, 0)

    def test_reset(self):
        scroll = _position(4, 10)
        scroll.reset()
        self.assertEqual(scroll.top, 0)

    def test_bounds_hold_for_random_operations(self):
        rng = random.Random(1234)
        scroll = ScrollPosition()
        directions = list(ScrollType)
        for _ in range(2000):
            if rng.random() < 0.3:
                scroll.recompute_bounds(rng.randint(0, 60), rng.randint(0, 20))
            else:
                scroll.move(rng.choice(directions), rng.randint(0, 15))
            self.assertGreaterEqual(scroll.top, 0)
            self.assertLessEqual(scroll.top, scroll.max_top)


class EnsureRangeVisibleTests(unittest.TestCase):
    def test_range_taller_than_window_starting_at_top_does_not_move(self):
        scroll = _position(0, 20)
        scroll.ensure_range_visible(5, 2, 9)
        self.assertEqual(scroll.top, 0)

    def test_hidden_start_snaps_to_start(self):
        scroll = _position(10, 20)
        scroll.ensure_range_visible(5, 4, 6)
        self.assertEqual(scroll.top, 4)

    def test_hidden_end_scrolls_just_enough(self):
        scroll = _position(0, 20)
        scroll.ensure_range_visible(5, 3, 7)
        self.assertEqual(scroll.top, 2)

    def test_advance_is_limited_by_start(self):
        scroll = _position(0, 20)
        scroll.ensure_range_visible(5, 2, 12)
        self.assertEqual(scroll.top, 2)

    def test_advance_is_capped_at_max_top(self):
        scroll = _position(0, 1)
        scroll.ensure_range_visible(5, 3, 8)
        self.assertEqual(scroll.top, 1)

    def test_visible_range_untouched(self):
        scroll = _position(3, 20)
        scroll.ensure_range_visible(5, 4, 7)
        self.assertEqual(scroll.top, 3)


class FollowTests(unittest.TestCase):
    def test_follow_tracks_selection_and_bounds(self):
        scroll = ScrollPosition()
        self.assertEqual(scroll.follow(45, 100, 10), 36)
        self.assertEqual(scroll.max_top, 90)
        self.assertEqual(scroll.follow(5, 100, 10), 5)

    def test_follow_after_list_shrinks(self):
        scroll = ScrollPosition()
        scroll.follow(80, 100, 10)
        self.assertEqual(scroll.follow(3, 8, 10), 0)
        self.assertEqual(scroll.max_top, 0)

    def test_follow_content_clamps_after_resize(self):
        scroll = ScrollPosition()
        scroll.follow_content(40, 10)
        scroll.move(ScrollType.END)
        self.assertEqual(scroll.top, 30)
        self.assertEqual(scroll.follow_content(40, 25), 15)

    def test_visible_range(self):
        scroll = _position(5, 10)
        self.assertEqual(list(scroll.visible_range(12, 4)), [5, 6, 7, 8])
        self.assertEqual(list(scroll.visible_range(7, 4)), [5, 6])


if __name__ == "__main__":
    unittest.main()
