"""Tests for the TIO locator and polar motion matrix."""

import jax
import jax.numpy as jnp
import pytest

from celestjax.constants import DJ00, DJM0
from celestjax.frames import pom00, sp00

_XP = 2.55060238e-7
_YP = 1.860359247e-6


class TestSp00:
    def test_reference_value(self):
        assert sp00(2400000.5, 52541.0) == pytest.approx(-0.6216698469981019309e-11, abs=1e-12)

    def test_zero_at_j2000(self):
        assert float(sp00(DJ00, 0.0)) == 0.0

    def test_secular_drift(self):
        # -47 uas per century
        assert sp00(DJ00, 36525.0) == pytest.approx(-47e-6 / 206264.80624709636, rel=1e-12)


class TestPom00:
    def test_reference_matrix(self):
        sp = -0.1367174580728891460e-10
        rpom = pom00(_XP, _YP, sp)
        assert rpom[0, 0] == pytest.approx(0.9999999999999674721, abs=1e-12)
        assert rpom[0, 1] == pytest.approx(-0.1367174580728846989e-10, abs=1e-16)
        assert rpom[0, 2] == pytest.approx(0.2550602379999972345e-6, abs=1e-16)
        assert rpom[1, 0] == pytest.approx(0.1414624947957029801e-10, abs=1e-16)
        assert rpom[1, 1] == pytest.approx(0.9999999999982695317, abs=1e-12)
        assert rpom[1, 2] == pytest.approx(-0.1860359246998866389e-5, abs=1e-16)
        assert rpom[2, 0] == pytest.approx(-0.2550602379741215021e-6, abs=1e-16)
        assert rpom[2, 1] == pytest.approx(0.1860359247002414021e-5, abs=1e-16)
        assert rpom[2, 2] == pytest.approx(0.9999999999982370039, abs=1e-12)

    def test_orthogonal(self):
        rpom = pom00(_XP, _YP, sp00(DJM0, 60000.0))
        assert jnp.allclose(rpom @ rpom.T, jnp.eye(3), atol=1e-12)

    def test_identity_without_polar_motion(self):
        assert jnp.allclose(pom00(0.0, 0.0, 0.0), jnp.eye(3), atol=0.0)

    def test_jit(self):
        rpom = jax.jit(pom00)(_XP, _YP, 0.0)
        assert jnp.allclose(rpom, pom00(_XP, _YP, 0.0), atol=1e-16)
