import numpy as np
import pytest
import torch

from torchhermite.quadrature import hermite_initial_guesses


def _positive_hermite_zeros(n):
    nodes, _ = np.polynomial.hermite.hermgauss(n)
    return torch.from_numpy(nodes[nodes >= -1e-14].copy())


class TestHermiteInitialGuesses:
    @pytest.mark.parametrize("n", [20, 21, 50, 51, 200, 201, 1000, 1001])
    def test_length(self, n):
        guesses = hermite_initial_guesses(n)

        assert guesses.shape == ((n + 1) // 2,)

    @pytest.mark.parametrize("n", [21, 51, 201, 1001])
    def test_odd_starts_at_zero(self, n):
        guesses = hermite_initial_guesses(n)

        assert guesses[0].item() == 0.0

    @pytest.mark.parametrize("n", [20, 21, 64, 199, 500, 1001])
    def test_ascending(self, n):
        guesses = hermite_initial_guesses(n)

        assert torch.all(guesses[1:] > guesses[:-1])

    @pytest.mark.parametrize("n", [20, 21, 50, 100, 200, 201])
    def test_close_to_zeros(self, n):
        guesses = hermite_initial_guesses(n)
        zeros = _positive_hermite_zeros(n)

        assert torch.max(torch.abs(guesses - zeros)).item() < 5e-2

    @pytest.mark.parametrize("n", [20, 100, 201])
    def test_largest_guess_below_turning_point(self, n):
        guesses = hermite_initial_guesses(n)

        assert guesses[-1].item() < (2 * n + 1) ** 0.5

    @pytest.mark.parametrize("n", [0, 1, 5, 19])
    def test_small_n_rejected(self, n):
        with pytest.raises(ValueError, match="at least 20"):
            hermite_initial_guesses(n)

    def test_dtype(self):
        assert hermite_initial_guesses(40).dtype == torch.float64
