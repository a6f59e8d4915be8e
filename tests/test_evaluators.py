"""Tests for the ERFA-backed precession-nutation evaluators."""

import logging

import erfa
import jax
import jax.numpy as jnp
import numpy as np
import pytest

from celestjax.config import set_dtype
from celestjax.evaluators import (
    bpn_matrix,
    eect00,
    nut00a,
    nut00b,
    nut06a,
    obl80,
    pn00,
    pnm00a,
    pnm00b,
    pnm06a,
    pr00,
    s00,
    s06,
)
from celestjax.models import PrecessionNutationModel

_TT = (2400000.5, 53736.0)


class TestNutation:
    def test_nut00a_reference(self):
        dpsi, deps = nut00a(*_TT)
        assert dpsi == pytest.approx(-0.9630909107115518431e-5, abs=1e-13)
        assert deps == pytest.approx(0.4063239174001678710e-4, abs=1e-13)

    def test_nut00b_reference(self):
        dpsi, deps = nut00b(*_TT)
        assert dpsi == pytest.approx(-0.9632552291148362783e-5, abs=1e-13)
        assert deps == pytest.approx(0.4063197106621159367e-4, abs=1e-13)

    @pytest.mark.parametrize(
        "ours, reference",
        [(nut00a, erfa.nut00a), (nut00b, erfa.nut00b), (nut06a, erfa.nut06a), (pr00, erfa.pr00)],
    )
    def test_pairs_match_erfa(self, ours, reference):
        dpsi, deps = ours(*_TT)
        ref_dpsi, ref_deps = reference(*_TT)
        assert dpsi == ref_dpsi
        assert deps == ref_deps

    @pytest.mark.parametrize("ours, reference", [(obl80, erfa.obl80), (eect00, erfa.eect00)])
    def test_scalars_match_erfa(self, ours, reference):
        assert ours(*_TT) == reference(*_TT)

    def test_split_date_is_passed_through(self):
        # Same instant, different split
        a = nut00a(2451545.0, 4191.0)
        b = nut00a(2400000.5, 55735.5)
        assert a[0] == pytest.approx(float(b[0]), abs=1e-15)


class TestMatrices:
    @pytest.mark.parametrize(
        "ours, reference",
        [(pnm00a, erfa.pnm00a), (pnm00b, erfa.pnm00b), (pnm06a, erfa.pnm06a)],
    )
    def test_matches_erfa(self, ours, reference):
        r = ours(*_TT)
        assert r.shape == (3, 3)
        assert np.array_equal(np.asarray(r), reference(*_TT))

    def test_pn00(self):
        dpsi, deps = -0.9632552291149335877e-5, 0.4063197106621141414e-4
        epsa, rbpn = pn00(*_TT, dpsi, deps)
        assert epsa == pytest.approx(0.4090791789404229916, abs=1e-12)
        assert rbpn.shape == (3, 3)
        assert np.allclose(rbpn, erfa.pn00(*_TT, dpsi, deps)[5], atol=0.0, rtol=0.0)

    @pytest.mark.parametrize(
        "model, fn",
        [
            (PrecessionNutationModel.IAU2000A, pnm00a),
            (PrecessionNutationModel.IAU2000B, pnm00b),
            (PrecessionNutationModel.IAU2006A, pnm06a),
            ("iau2000b", pnm00b),
        ],
    )
    def test_bpn_matrix_dispatch(self, model, fn):
        assert jnp.array_equal(bpn_matrix(*_TT, model), fn(*_TT))

    def test_bpn_matrix_default_model(self):
        assert jnp.array_equal(bpn_matrix(*_TT), pnm06a(*_TT))

    def test_bpn_matrix_logs_model(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="celestjax.evaluators"):
            bpn_matrix(*_TT, PrecessionNutationModel.IAU2000A)
        assert "IAU2000A" in caplog.text


class TestCioLocator:
    def test_s00_reference(self):
        s = s00(*_TT, 0.5791308486706011000e-3, 0.4020579816732961219e-4)
        assert s == pytest.approx(-0.1220036263270905693e-7, abs=1e-18)

    def test_s06_reference(self):
        s = s06(*_TT, 0.5791308486706011000e-3, 0.4020579816732961219e-4)
        assert s == pytest.approx(-0.1220032213076463117e-7, abs=1e-18)


class TestTransforms:
    def test_jit(self):
        dpsi, deps = jax.jit(nut00a)(*_TT)
        ref = erfa.nut00a(*_TT)
        assert dpsi == ref[0]
        assert deps == ref[1]

    def test_vmap(self):
        ttb = jnp.array([51544.5, 53736.0, 60000.25])
        r = jax.vmap(pnm06a, in_axes=(None, 0))(2400000.5, ttb)
        assert r.shape == (3, 3, 3)
        for i in range(3):
            assert np.array_equal(np.asarray(r[i]), erfa.pnm06a(2400000.5, float(ttb[i])))

    def test_float32_output(self):
        set_dtype(jnp.float32)
        assert pnm00b(*_TT).dtype == jnp.float32
        assert obl80(*_TT).dtype == jnp.float32

    def test_float32_keeps_double_precision_dates(self):
        # 53736.001 is not representable in float32 (spacing ~0.004 d)
        set_dtype(jnp.float32)
        dpsi, _deps = nut00a(2400000.5, 53736.001)
        expected = np.float32(erfa.nut00a(2400000.5, 53736.001)[0])
        rounded = np.float32(erfa.nut00a(2400000.5, float(np.float32(53736.001)))[0])
        assert expected != rounded
        assert dpsi == expected
