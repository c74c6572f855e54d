from unittest import TestCase
import unittest

import numpy as np

from stridetensor.domain.types._element_kind import ElementKind
from stridetensor.infrastructure._config import manual_seed
from stridetensor.infrastructure.tensor._tensor import Tensor
from stridetensor.infrastructure.tensor.mixins.memory import ElementSampler


class TestTensorConstant(TestCase):
    def test_constant_infers_dtype_from_value(self):
        t = Tensor.constant(3, (2, 3))
        self.assertEqual(t.shape, (2, 3))
        self.assertEqual(t.stride, (3, 1))
        self.assertEqual(t.dtype, np.int64)
        self.assertEqual(t.tolist(), [[3, 3, 3], [3, 3, 3]])

        f = Tensor.constant(1.25, (2,))
        self.assertEqual(f.dtype, np.float32)
        np.testing.assert_allclose(f.to_numpy(), [1.25, 1.25])

    def test_constant_scalar_shape(self):
        t = Tensor.constant(7, ())
        self.assertEqual(t.shape, ())
        self.assertEqual(t.item(), 7)

    def test_zeros_ones(self):
        z = Tensor.zeros((2, 3))
        o = Tensor.ones((2, 3), dtype=np.int32)
        self.assertEqual(z.dtype, np.float32)
        self.assertEqual(o.dtype, np.int32)
        np.testing.assert_array_equal(z.to_numpy(), np.zeros((2, 3), dtype=np.float32))
        np.testing.assert_array_equal(o.to_numpy(), np.ones((2, 3), dtype=np.int32))

    def test_zeros_accepts_dtype_instance(self):
        self.assertEqual(Tensor.zeros(4, dtype=np.dtype("int16")).dtype, np.int16)


class TestTensorRandom(TestCase):
    def setUp(self) -> None:
        manual_seed(7)

    def test_random_default_float_range(self):
        t = Tensor.random((5, 7))
        self.assertEqual(t.shape, (5, 7))
        arr = t.to_numpy()
        self.assertEqual(arr.dtype, np.float32)
        # Uniform[0, 1)
        self.assertTrue(np.all(arr >= 0.0))
        self.assertTrue(np.all(arr < 1.0))

    def test_random_float_bounds(self):
        arr = Tensor.random((200,), -2.0, 3.0, dtype=np.float64).to_numpy()
        self.assertTrue(np.all(arr >= -2.0))
        self.assertTrue(np.all(arr < 3.0))
        # weak sanity check: values are not all equal
        self.assertGreater(np.unique(arr).size, 1)

    def test_random_integer_bounds_are_inclusive(self):
        arr = Tensor.random((500,), 0, 2, dtype=np.int64).to_numpy()
        self.assertEqual(arr.dtype, np.int64)
        self.assertEqual(set(np.unique(arr).tolist()), {0, 1, 2})

    def test_random_integer_default_covers_dtype_range(self):
        arr = Tensor.random((200,), dtype=np.int8).to_numpy()
        self.assertEqual(arr.dtype, np.int8)
        self.assertLess(arr.min(), -64)
        self.assertGreater(arr.max(), 64)

    def test_normal_float(self):
        arr = Tensor.normal((4000,), 5.0, 2.0, dtype=np.float64).to_numpy()
        self.assertAlmostEqual(float(arr.mean()), 5.0, delta=0.2)
        self.assertAlmostEqual(float(arr.std()), 2.0, delta=0.2)

    def test_normal_integer_is_rounded(self):
        t = Tensor.normal((100,), 0.0, 10.0, dtype=np.int32)
        self.assertEqual(t.dtype, np.int32)
        self.assertIs(t.kind, ElementKind.INTEGER)

    def test_seed_reproducibility(self):
        manual_seed(99)
        a = Tensor.normal((3, 3)).tolist()
        manual_seed(99)
        b = Tensor.normal((3, 3)).tolist()
        self.assertEqual(a, b)


class TestElementSampler(TestCase):
    def test_scalar_draws(self):
        manual_seed(3)
        x = ElementSampler(np.int16).uniform(-5, 5)
        self.assertIsInstance(x, np.int16)
        self.assertTrue(-5 <= x <= 5)

        y = ElementSampler(np.float64).normal()
        self.assertIsInstance(y, np.float64)

        z = ElementSampler(np.float32).uniform()
        self.assertIsInstance(z, np.float32)
        self.assertTrue(0.0 <= z < 1.0)

    def test_kind_follows_dtype(self):
        self.assertIs(ElementSampler(np.uint8).kind, ElementKind.INTEGER)
        self.assertIs(ElementSampler(np.float16).kind, ElementKind.FLOATING)
        with self.assertRaises(TypeError):
            ElementSampler(np.bool_)

    def test_explicit_generator(self):
        a = ElementSampler(np.float64, np.random.default_rng(5)).uniform(size=4)
        b = ElementSampler(np.float64, np.random.default_rng(5)).uniform(size=4)
        np.testing.assert_array_equal(a, b)

    def test_half_precision_uniform(self):
        arr = ElementSampler(np.float16, np.random.default_rng(0)).uniform(size=10)
        self.assertEqual(arr.dtype, np.float16)
        self.assertEqual(arr.shape, (10,))


if __name__ == "__main__":
    unittest.main()
