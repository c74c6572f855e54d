import unittest

import numpy as np

from stridetensor.domain._errors import DimensionOutOfRangeError, EmptyReductionError
from stridetensor.infrastructure.tensor._tensor import Tensor


class TestFullReductions(unittest.TestCase):
    def setUp(self) -> None:
        self.a = Tensor([1, 2, 3, 4, 5, 6], shape=(2, 3))

    def test_sum(self):
        self.assertEqual(self.a.sum(), 21)
        self.assertIsInstance(self.a.sum(), int)

    def test_mean(self):
        self.assertAlmostEqual(self.a.mean(), 3.5)
        f = Tensor([1.0, 2.0, 4.0], dtype=np.float64)
        self.assertAlmostEqual(f.mean(), 7.0 / 3.0)

    def test_max_min(self):
        t = Tensor([3, -1, 7, 7, 0])
        self.assertEqual(t.max(), 7)
        self.assertEqual(t.min(), -1)

    def test_argmax_argmin_return_first_logical_index(self):
        t = Tensor([3, -1, 7, 7, -1])
        self.assertEqual(t.argmax(), 2)
        self.assertEqual(t.argmin(), 1)

    def test_full_reduction_follows_logical_order_on_views(self):
        # a.T is [[1, 4], [2, 5], [3, 6]]: logical index 1 holds the 4
        v = self.a.transpose()
        self.assertEqual(v.sum(), 21)
        self.assertEqual(v.argmax(), 5)
        w = Tensor([9, 1, 5, 2], shape=(2, 2)).transpose()  # [[9, 5], [1, 2]]
        self.assertEqual(w.argmin(), 2)

    def test_full_reduction_ignores_unreachable_buffer_elements(self):
        t = Tensor([1, 2, 3, 4, 100], shape=(2, 2))
        self.assertEqual(t.sum(), 10)
        self.assertEqual(t.max(), 4)
        self.assertAlmostEqual(t.mean(), 2.5)

    def test_scalar_tensor(self):
        s = Tensor(4)
        self.assertEqual(s.sum(), 4)
        self.assertEqual(s.argmax(), 0)

    def test_empty_tensor(self):
        e = Tensor([1], shape=(0,))
        for op in ("sum", "mean", "max", "min", "argmax", "argmin"):
            with self.subTest(op=op):
                with self.assertRaises(EmptyReductionError):
                    getattr(e, op)()


class TestAxisReductions(unittest.TestCase):
    def setUp(self) -> None:
        self.a = Tensor([1, 2, 3, 4, 5, 6], shape=(2, 3))

    def test_sum_along_last_axis(self):
        out = self.a.sum(1)
        self.assertEqual(out.shape, (2, 1))
        self.assertEqual(out.stride, (1, 1))
        self.assertEqual(out.tolist(), [[6], [15]])

    def test_sum_along_first_axis(self):
        out = self.a.sum(0)
        self.assertEqual(out.shape, (1, 3))
        self.assertEqual(out.stride, (3, 1))
        self.assertEqual(out.tolist(), [[5, 7, 9]])

    def test_negative_dim(self):
        self.assertEqual(self.a.sum(-1).tolist(), self.a.sum(1).tolist())
        self.assertEqual(self.a.max(-2).tolist(), [[4, 5, 6]])

    def test_invalid_dim(self):
        for dim in (2, -3):
            with self.subTest(dim=dim):
                with self.assertRaises(DimensionOutOfRangeError):
                    self.a.sum(dim)
        with self.assertRaises(DimensionOutOfRangeError):
            Tensor(1).sum(0)

    def test_output_dtypes(self):
        self.assertEqual(self.a.sum(0).dtype, np.int64)
        self.assertEqual(self.a.mean(0).dtype, np.float64)
        self.assertEqual(self.a.max(0).dtype, np.int64)
        self.assertEqual(self.a.argmax(0).dtype, np.int64)
        f = Tensor([1.0, 2.0])
        self.assertEqual(f.mean(0).dtype, np.float32)
        self.assertEqual(f.sum(0).dtype, np.float32)

    def test_mean_along_axis(self):
        np.testing.assert_allclose(self.a.mean(1).to_numpy(), [[2.0], [5.0]])

    def test_min_max_along_axis(self):
        t = Tensor([4, 9, 2, 8, 1, 7], shape=(2, 3))
        self.assertEqual(t.max(1).tolist(), [[9], [8]])
        self.assertEqual(t.min(0).tolist(), [[4, 1, 2]])

    def test_argmax_stores_position_along_dim(self):
        t = Tensor([4, 9, 2, 8, 1, 7], shape=(2, 3))
        self.assertEqual(t.argmax(1).tolist(), [[1], [0]])
        self.assertEqual(t.argmin(0).tolist(), [[0, 1, 0]])

    def test_axis_reduction_on_transposed_view(self):
        v = self.a.transpose()  # [[1, 4], [2, 5], [3, 6]]
        self.assertEqual(v.sum(1).tolist(), [[5], [7], [9]])
        self.assertEqual(v.argmax(0).tolist(), [[2, 2]])
        self.assertEqual(v.max(1).tolist(), [[4], [5], [6]])

    def test_matches_numpy_on_3d_permuted(self):
        ref = np.array(
            [[[3, 1, 4, 1], [5, 9, 2, 6], [5, 3, 5, 8]],
             [[9, 7, 9, 3], [2, 3, 8, 4], [6, 2, 6, 4]]],
            dtype=np.int64,
        )
        t = Tensor.from_numpy(ref).permute(1, 2, 0)
        r = ref.transpose(1, 2, 0)
        for dim in range(3):
            with self.subTest(dim=dim):
                np.testing.assert_array_equal(
                    t.sum(dim).to_numpy(), r.sum(axis=dim, keepdims=True)
                )
                np.testing.assert_array_equal(
                    t.max(dim).to_numpy(), r.max(axis=dim, keepdims=True)
                )
                np.testing.assert_array_equal(
                    t.argmin(dim).to_numpy(), r.argmin(axis=dim, keepdims=True)
                )

    def test_empty_axis(self):
        e = Tensor([1], shape=(2, 0))
        with self.assertRaises(EmptyReductionError):
            e.max(1)
        # reducing a non-empty axis of an empty tensor yields an empty result
        out = e.sum(0)
        self.assertEqual(out.shape, (1, 0))


class TestReductionsWithNaN(unittest.TestCase):
    def setUp(self) -> None:
        self.nan = float("nan")

    def test_nan_inside_lane_is_skipped_by_full_extrema(self):
        t = Tensor([1.0, self.nan, 3.0, -2.0], dtype=np.float64)
        self.assertEqual(t.max(), 3.0)
        self.assertEqual(t.min(), -2.0)
        self.assertEqual(t.argmax(), 2)
        self.assertEqual(t.argmin(), 3)

    def test_nan_inside_lane_is_skipped_by_axis_extrema(self):
        t = Tensor(
            [4.0, self.nan, 1.0, 2.0, 5.0, self.nan], shape=(2, 3), dtype=np.float64
        )
        self.assertEqual(t.max(1).tolist(), [[4.0], [5.0]])
        self.assertEqual(t.min(1).tolist(), [[1.0], [2.0]])
        self.assertEqual(t.argmax(1).tolist(), [[0], [1]])
        self.assertEqual(t.argmin(1).tolist(), [[2], [0]])

    def test_nan_seed_is_never_replaced(self):
        t = Tensor([self.nan, 7.0, -1.0], dtype=np.float64)
        self.assertTrue(np.isnan(t.max()))
        self.assertTrue(np.isnan(t.min()))
        self.assertEqual(t.argmax(), 0)
        self.assertEqual(t.argmin(), 0)

        col = Tensor([self.nan, 1.0, 2.0, 3.0], shape=(2, 2), dtype=np.float64)
        out = col.max(0).to_numpy()
        self.assertTrue(np.isnan(out[0, 0]))
        self.assertEqual(out[0, 1], 3.0)
        self.assertEqual(col.argmax(0).tolist(), [[0, 1]])

    def test_nan_from_zero_over_zero(self):
        num = Tensor([6.0, 0.0, 2.0], dtype=np.float64)
        q = num / Tensor([2.0, 0.0, 1.0], dtype=np.float64)
        self.assertEqual(q.max(), 3.0)
        self.assertEqual(q.argmin(), 2)


class TestReductionProperties(unittest.TestCase):
    def setUp(self) -> None:
        self.t = Tensor.from_numpy(
            np.arange(1, 25, dtype=np.int64).reshape(2, 3, 4)
        ).permute(2, 0, 1)

    def test_full_sum_equals_reduced_axis_sums(self):
        total = self.t.sum()
        for dim in range(self.t.ndim):
            with self.subTest(dim=dim):
                self.assertEqual(self.t.sum(dim).sum(), total)

    def test_argmax_indexes_back_to_max(self):
        t = Tensor.from_numpy(
            np.array([[5, 1, 5], [0, 7, 2], [3, 3, 9], [8, 8, 1]], dtype=np.int64)
        )
        for dim in range(t.ndim):
            idx = t.argmax(dim)
            mx = t.max(dim)
            out_shape = idx.shape.to_tuple()
            with self.subTest(dim=dim):
                for pos in np.ndindex(*out_shape):
                    src = list(pos)
                    src[dim] = idx[pos]
                    self.assertEqual(t[tuple(src)], mx[pos])


if __name__ == "__main__":
    unittest.main()
