import unittest

import numpy as np

from stridetensor.infrastructure.tensor._tensor import Tensor
from stridetensor.infrastructure.tensor._tensor_printer import render_tensor


class TestTensorPrinter(unittest.TestCase):
    def test_scalar(self):
        self.assertEqual(str(Tensor(5)), "Tensor { 5 }")
        self.assertEqual(str(Tensor(2.5)), "Tensor { 2.5 }")

    def test_vector(self):
        self.assertEqual(str(Tensor([1, 2, 3])), "Tensor {\n  [1,2,3]\n}")

    def test_matrix(self):
        t = Tensor([1, 2, 3, 4], shape=(2, 2))
        self.assertEqual(str(t), "Tensor {\n  [[1,2],\n   [3,4]]\n}")
        # two bracketed rows separated by a comma and a newline
        body = str(t).split("\n")[1:3]
        self.assertTrue(body[0].endswith("],"))
        self.assertTrue(body[1].strip().startswith("[3,4]"))

    def test_three_dimensional_blocks_are_blank_line_separated(self):
        t = Tensor(list(range(8)), shape=(2, 2, 2))
        expected = (
            "Tensor {\n"
            "  [[[0,1],\n"
            "    [2,3]],\n"
            "\n"
            "   [[4,5],\n"
            "    [6,7]]]\n"
            "}"
        )
        self.assertEqual(str(t), expected)

    def test_four_dimensional_uses_two_blank_lines_between_outer_blocks(self):
        t = Tensor(list(range(16)), shape=(2, 2, 2, 2))
        expected = (
            "Tensor {\n"
            "  [[[[0,1],\n"
            "     [2,3]],\n"
            "\n"
            "    [[4,5],\n"
            "     [6,7]]],\n"
            "\n"
            "\n"
            "   [[[8,9],\n"
            "     [10,11]],\n"
            "\n"
            "    [[12,13],\n"
            "     [14,15]]]]\n"
            "}"
        )
        self.assertEqual(str(t), expected)

    def test_transposed_view_renders_logical_order(self):
        t = Tensor([1, 2, 3, 4, 5, 6], shape=(2, 3)).transpose()
        self.assertEqual(
            str(t), "Tensor {\n  [[1,4],\n   [2,5],\n   [3,6]]\n}"
        )

    def test_leading_unit_dimensions(self):
        t = Tensor([1, 2, 3], shape=(1, 1, 3))
        self.assertEqual(str(t), "Tensor {\n  [[[1,2,3]]]\n}")

    def test_empty(self):
        self.assertEqual(str(Tensor([1], shape=(2, 0))), "Tensor { [] }")

    def test_float_values(self):
        t = Tensor([1.5, 2.0], dtype=np.float64)
        self.assertEqual(render_tensor(t), "Tensor {\n  [1.5,2.0]\n}")

    def test_row_count_matches_shape(self):
        t = Tensor(list(range(24)), shape=(2, 3, 4))
        rows = [line for line in str(t).split("\n") if "[" in line]
        self.assertEqual(len(rows), 6)
        for line in rows:
            row = line[line.rindex("[") : line.index("]") + 1]
            self.assertEqual(row.count(","), 3)


if __name__ == "__main__":
    unittest.main()
