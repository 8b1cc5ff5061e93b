import math

import mpmath
import pytest
import torch

from torchhermite._constants import AIRY_ROOTS
from torchhermite.special_functions import airy_ai, airy_ai_prime


def _constants():
    # Ai(0) = 1 / (3^{2/3} Gamma(2/3)), Ai'(0) = -1 / (3^{1/3} Gamma(1/3))
    ai0 = 1.0 / (3.0 ** (2.0 / 3.0) * math.gamma(2.0 / 3.0))
    aip0 = -1.0 / (3.0 ** (1.0 / 3.0) * math.gamma(1.0 / 3.0))
    return ai0, aip0


class TestAiry:
    def test_values_at_zero(self):
        ai0, aip0 = _constants()
        x = torch.tensor([0.0], dtype=torch.float64)

        assert airy_ai(x).item() == pytest.approx(ai0, rel=1e-14)
        assert airy_ai_prime(x).item() == pytest.approx(aip0, rel=1e-14)

    @pytest.mark.parametrize("x", [-250.0, -60.5, -10.0, -1.0, 0.5, 3.0, 12.0])
    def test_matches_mpmath(self, x):
        t = torch.tensor(x, dtype=torch.float64)

        expected_ai = float(mpmath.airyai(x))
        expected_aip = float(mpmath.airyai(x, derivative=1))

        assert airy_ai(t).item() == pytest.approx(expected_ai, rel=1e-9, abs=1e-12)
        assert airy_ai_prime(t).item() == pytest.approx(
            expected_aip, rel=1e-9, abs=1e-12
        )

    def test_vanishes_at_tabulated_roots(self):
        x = torch.tensor(AIRY_ROOTS, dtype=torch.float64)

        assert torch.all(torch.abs(airy_ai(x)) < 1e-13)

    def test_airy_equation(self):
        """Ai'' = x Ai, checked by central differences of Ai'."""
        x = torch.linspace(-5.0, 2.0, 15, dtype=torch.float64)
        h = 1e-5

        second = (airy_ai_prime(x + h) - airy_ai_prime(x - h)) / (2 * h)

        torch.testing.assert_close(second, x * airy_ai(x), rtol=1e-6, atol=1e-8)

    @pytest.mark.parametrize("dtype", [torch.float32, torch.float64])
    def test_preserves_dtype(self, dtype):
        x = torch.linspace(-3.0, 3.0, 5, dtype=dtype)

        assert airy_ai(x).dtype == dtype
        assert airy_ai_prime(x).dtype == dtype

    def test_integer_input_promoted(self):
        x = torch.tensor([0, 1, 2])

        assert airy_ai(x).dtype == torch.float64

    def test_preserves_shape(self):
        x = torch.zeros(2, 3, dtype=torch.float64)

        assert airy_ai(x).shape == (2, 3)
        assert airy_ai_prime(x).shape == (2, 3)

    def test_rejects_non_tensor(self):
        with pytest.raises(TypeError, match="torch.Tensor"):
            airy_ai(1.0)

    def test_rejects_complex(self):
        with pytest.raises(TypeError, match="real"):
            airy_ai_prime(torch.tensor([1.0 + 1.0j]))
