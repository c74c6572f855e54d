import unittest

import numpy as np

from stridetensor.infrastructure._config import (
    get_default_float_dtype,
    get_generator,
    manual_seed,
    set_default_float_dtype,
)
from stridetensor.infrastructure.tensor._tensor import Tensor


class TestManualSeed(unittest.TestCase):
    def test_returns_installed_generator(self):
        g = manual_seed(0)
        self.assertIsInstance(g, np.random.Generator)
        self.assertIs(get_generator(), g)

    def test_same_seed_same_draws(self):
        manual_seed(1234)
        a = Tensor.random((4, 3)).to_numpy()
        manual_seed(1234)
        b = Tensor.random((4, 3)).to_numpy()
        np.testing.assert_array_equal(a, b)


class TestDefaultFloatDtype(unittest.TestCase):
    def setUp(self) -> None:
        self._saved = get_default_float_dtype()

    def tearDown(self) -> None:
        set_default_float_dtype(self._saved)

    def test_default_is_float32(self):
        self.assertEqual(get_default_float_dtype(), np.float32)
        self.assertEqual(Tensor([1.5, 2.5]).dtype, np.float32)

    def test_changing_default_affects_inference_and_factories(self):
        set_default_float_dtype(np.float64)
        self.assertEqual(Tensor([1.5]).dtype, np.float64)
        self.assertEqual(Tensor.zeros((2,)).dtype, np.float64)
        self.assertEqual(Tensor.random((2,)).dtype, np.float64)
        # integer data is unaffected
        self.assertEqual(Tensor([1, 2]).dtype, np.int64)

    def test_rejects_non_floating(self):
        with self.assertRaises(TypeError):
            set_default_float_dtype(np.int32)
        self.assertEqual(get_default_float_dtype(), self._saved)


if __name__ == "__main__":
    unittest.main()
