"""Tests for distribution parameters."""

import dataclasses

import pytest
from fastdiscrete.params import BinomialParams, CategoricalParams, MultinomialParams


class TestBinomialParams:
    """Tests for BinomialParams."""

    def test_defaults(self):
        params = BinomialParams()
        assert params.t == 1
        assert params.p == 0.5

    def test_p_stored_as_float(self):
        params = BinomialParams(t=3, p=1)
        assert params.p == 1.0
        assert isinstance(params.p, float)

    def test_frozen(self):
        """Parameters cannot be changed after construction."""
        params = BinomialParams(t=3, p=0.5)
        with pytest.raises(dataclasses.FrozenInstanceError):
            params.t = 4

    def test_invalid(self):
        with pytest.raises(ValueError):
            BinomialParams(t=-2, p=0.5)
        with pytest.raises(TypeError):
            BinomialParams(t="3", p=0.5)
        with pytest.raises(ValueError):
            BinomialParams(t=3, p=2.0)

    def test_bool_probability(self):
        """bool is rejected for p just as for t."""
        with pytest.raises(TypeError):
            BinomialParams(t=3, p=True)
        with pytest.raises(TypeError):
            BinomialParams(t=3, p=False)


class TestCategoricalParams:
    """Tests for CategoricalParams."""

    def test_weights_normalised_to_tuple(self):
        """Weights are stored as a tuple of floats."""
        params = CategoricalParams(weights=[1, 2, 3])
        assert params.weights == (1.0, 2.0, 3.0)
        assert params.num_categories == 3

    def test_accepts_generator_input(self):
        params = CategoricalParams(weights=(w for w in [0.5, 0.5]))
        assert params.weights == (0.5, 0.5)

    def test_zero_weights_allowed_if_some_positive(self):
        params = CategoricalParams(weights=[0, 0, 1])
        assert params.weights == (0.0, 0.0, 1.0)

    def test_invalid(self):
        with pytest.raises(ValueError):
            CategoricalParams(weights=[])
        with pytest.raises(ValueError):
            CategoricalParams(weights=[1, -0.5])
        with pytest.raises(ValueError):
            CategoricalParams(weights=[0.0, 0.0])
        with pytest.raises(ValueError):
            CategoricalParams(weights=[float("nan")])

    def test_total_mass_overflow(self):
        """Finite weights whose total overflows should raise error."""
        with pytest.raises(ValueError):
            CategoricalParams(weights=[1e308, 1e308])

    def test_large_finite_total_allowed(self):
        params = CategoricalParams(weights=[1e307, 1e307])
        assert params.weights == (1e307, 1e307)


class TestMultinomialParams:
    """Tests for MultinomialParams."""

    def test_basic(self):
        params = MultinomialParams(t=10, weights=[1, 1])
        assert params.t == 10
        assert params.weights == (1.0, 1.0)
        assert params.num_categories == 2

    def test_equality(self):
        assert MultinomialParams(t=2, weights=[1, 2]) == MultinomialParams(t=2, weights=(1.0, 2.0))

    def test_invalid(self):
        with pytest.raises(ValueError):
            MultinomialParams(t=-1, weights=[1])
        with pytest.raises(TypeError):
            MultinomialParams(t=1.0, weights=[1])
        with pytest.raises(ValueError):
            MultinomialParams(t=1, weights=[])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
