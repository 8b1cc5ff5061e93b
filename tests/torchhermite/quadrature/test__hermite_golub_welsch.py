import math

import numpy as np
import pytest
import torch

from torchhermite.quadrature._hermite_golub_welsch import (
    _hermite_golub_welsch,
)


class TestHermiteGolubWelsch:
    @pytest.mark.parametrize("n", range(2, 21))
    def test_half_length(self, n):
        nodes, weights = _hermite_golub_welsch(n)

        assert nodes.shape == ((n + 1) // 2,)
        assert weights.shape == ((n + 1) // 2,)

    @pytest.mark.parametrize("n", range(2, 21))
    def test_non_negative_nodes(self, n):
        nodes, _ = _hermite_golub_welsch(n)

        assert torch.all(nodes > -1e-14)
        assert torch.all(nodes[1:] > nodes[:-1])

    @pytest.mark.parametrize("n", [2, 5, 10, 17, 20])
    def test_matches_numpy(self, n):
        nodes, weights = _hermite_golub_welsch(n)

        expected_nodes, expected_weights = np.polynomial.hermite.hermgauss(n)
        positive = expected_nodes >= -1e-14

        torch.testing.assert_close(
            nodes,
            torch.from_numpy(expected_nodes[positive].copy()),
            rtol=0.0,
            atol=1e-12,
        )
        torch.testing.assert_close(
            weights,
            torch.from_numpy(
                (expected_weights * np.exp(expected_nodes**2))[positive].copy()
            ),
            rtol=1e-8,
            atol=0.0,
        )

    def test_n_2(self):
        nodes, weights = _hermite_golub_welsch(2)

        assert nodes.item() == pytest.approx(1 / math.sqrt(2), rel=1e-14)
        assert weights.item() == pytest.approx(
            math.sqrt(math.pi) / 2 * math.exp(0.5), rel=1e-14
        )
