from __future__ import annotations

import unittest

from lazyshell.cursor import CommandLine, OutputPane


class CursorModelTests(unittest.TestCase):
    def test_left_saturates_at_zero(self) -> None:
        self.assertEqual(CommandLine(0).left(), CommandLine(0))
        self.assertEqual(OutputPane(0, 4).left(), OutputPane(0, 4))
        self.assertEqual(CommandLine(3).left(), CommandLine(2))

    def test_right_preserves_variant_and_row(self) -> None:
        self.assertEqual(CommandLine(1).right(), CommandLine(2))
        self.assertEqual(OutputPane(1, 7).right(), OutputPane(2, 7))

    def test_right_capped_never_exceeds_max(self) -> None:
        self.assertEqual(CommandLine(2).right_capped(3), CommandLine(3))
        self.assertEqual(CommandLine(3).right_capped(3), CommandLine(3))
        self.assertEqual(OutputPane(0, 2).right_capped(0), OutputPane(0, 2))

    def test_right_capped_pulls_back_out_of_range_column(self) -> None:
        self.assertEqual(CommandLine(9).right_capped(4), CommandLine(4))

    def test_cursors_are_immutable_values(self) -> None:
        cursor = CommandLine(1)
        moved = cursor.right()

        self.assertEqual(cursor, CommandLine(1))
        self.assertNotEqual(cursor, moved)
        self.assertNotEqual(CommandLine(0), OutputPane(0, 0))


if __name__ == "__main__":
    unittest.main()
