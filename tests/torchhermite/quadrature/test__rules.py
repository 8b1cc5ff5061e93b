import math

import pytest
import torch

from torchhermite.quadrature import DomainError, GaussHermite, gauss_hermite


class TestGaussHermite:
    def test_nodes_and_weights_match_function(self):
        rule = GaussHermite(30)

        nodes, weights = rule.nodes_and_weights()
        expected_nodes, expected_weights = gauss_hermite(30)

        assert torch.equal(nodes, expected_nodes)
        assert torch.equal(weights, expected_weights)

    def test_cached(self):
        rule = GaussHermite(250)

        first = rule.nodes_and_weights()
        second = rule.nodes_and_weights()

        assert first[0] is second[0]
        assert first[1] is second[1]

    def test_cache_per_dtype(self):
        rule = GaussHermite(10)

        nodes32, _ = rule.nodes_and_weights(dtype=torch.float32)
        nodes64, _ = rule.nodes_and_weights(dtype=torch.float64)

        assert nodes32.dtype == torch.float32
        assert nodes64.dtype == torch.float64

    def test_integrate_polynomial(self):
        rule = GaussHermite(5)

        # int x^4 exp(-x^2) dx = 3 sqrt(pi) / 4
        result = rule.integrate(lambda x: x**4)

        assert result.item() == pytest.approx(3 * math.sqrt(math.pi) / 4, rel=1e-13)

    def test_integrate_batched(self):
        rule = GaussHermite(40)
        a = torch.tensor([0.0, 0.5, 1.0], dtype=torch.float64)

        # int cos(a x) exp(-x^2) dx = sqrt(pi) exp(-a^2 / 4)
        result = rule.integrate(lambda x: torch.cos(a.unsqueeze(-1) * x))

        torch.testing.assert_close(
            result, math.sqrt(math.pi) * torch.exp(-(a**2) / 4)
        )

    def test_expectation_standard_normal(self):
        rule = GaussHermite(20)

        # E[X^2] = 1, E[exp(X)] = exp(1/2)
        assert rule.expectation(lambda x: x**2).item() == pytest.approx(1.0, rel=1e-13)
        assert rule.expectation(torch.exp).item() == pytest.approx(
            math.exp(0.5), rel=1e-12
        )

    def test_expectation_batched(self):
        rule = GaussHermite(20)
        mean = torch.tensor([0.0, 1.0, -2.0], dtype=torch.float64)
        std = torch.tensor([1.0, 0.5, 2.0], dtype=torch.float64)

        # E[X^2] = mean^2 + std^2
        result = rule.expectation(lambda x: x**2, mean=mean, std=std)

        torch.testing.assert_close(result, mean**2 + std**2)

    def test_expectation_dtype_from_mean(self):
        rule = GaussHermite(8)
        mean = torch.tensor(0.0, dtype=torch.float32)

        result = rule.expectation(lambda x: x**2, mean=mean)

        assert result.dtype == torch.float32

    def test_negative_n(self):
        with pytest.raises(DomainError):
            GaussHermite(-3)

    def test_zero_n(self):
        with pytest.raises(ValueError, match="at least 1"):
            GaussHermite(0)
