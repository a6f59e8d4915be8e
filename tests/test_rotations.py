"""Tests for the rotation-matrix primitives."""

import jax
import jax.numpy as jnp
import pytest

from celestjax.errors import InvalidShapeError
from celestjax.rotations import (
    Rx,
    Ry,
    Rz,
    identity,
    is_rotation_matrix,
    multiply,
    rotate_vector,
    rotate_vector_transpose,
    rotate_x,
    rotate_y,
    rotate_z,
    transpose,
)

_TOL = 1e-15

# Reference matrix used by the SOFA/ERFA rotation tests
_R = jnp.array([[2.0, 3.0, 2.0],
                [3.0, 2.0, 3.0],
                [3.0, 4.0, 5.0]])


class TestElementaryRotations:
    def test_rx_zero(self):
        assert jnp.allclose(Rx(0.0), jnp.eye(3), atol=_TOL)

    def test_rz_sign_convention(self):
        # Rotating the frame by +90 deg about z moves the x-axis onto -y
        v = Rz(jnp.pi / 2) @ jnp.array([1.0, 0.0, 0.0])
        assert jnp.allclose(v, jnp.array([0.0, -1.0, 0.0]), atol=_TOL)

    def test_ry_sign_convention(self):
        v = Ry(jnp.pi / 2) @ jnp.array([0.0, 0.0, 1.0])
        assert jnp.allclose(v, jnp.array([-1.0, 0.0, 0.0]), atol=_TOL)

    def test_rx_sign_convention(self):
        v = Rx(jnp.pi / 2) @ jnp.array([0.0, 1.0, 0.0])
        assert jnp.allclose(v, jnp.array([0.0, 0.0, -1.0]), atol=_TOL)

    def test_degrees(self):
        assert jnp.allclose(Rz(90.0, use_degrees=True), Rz(jnp.pi / 2), atol=_TOL)

    @pytest.mark.parametrize("rot", [Rx, Ry, Rz])
    def test_orthogonal(self, rot):
        r = rot(0.7)
        assert jnp.allclose(r @ r.T, jnp.eye(3), atol=_TOL)
        assert jnp.linalg.det(r) == pytest.approx(1.0, abs=_TOL)

    def test_nan_propagates(self):
        assert jnp.all(jnp.isnan(Rz(jnp.nan)[:2, :2]))


class TestRotateAxis:
    def test_rotate_x(self):
        r = rotate_x(_R, 0.3456789)
        assert r[0, 0] == pytest.approx(2.0, abs=0.0)
        assert r[0, 1] == pytest.approx(3.0, abs=0.0)
        assert r[0, 2] == pytest.approx(2.0, abs=0.0)
        assert r[1, 0] == pytest.approx(3.839043388235612460, abs=1e-12)
        assert r[1, 1] == pytest.approx(3.237033249594111899, abs=1e-12)
        assert r[1, 2] == pytest.approx(4.516714379005982719, abs=1e-12)
        assert r[2, 0] == pytest.approx(1.806030415924501684, abs=1e-12)
        assert r[2, 1] == pytest.approx(3.085711545336372503, abs=1e-12)
        assert r[2, 2] == pytest.approx(3.687721683977873065, abs=1e-12)

    def test_rotate_y(self):
        r = rotate_y(_R, 0.3456789)
        assert r[0, 0] == pytest.approx(0.8651847818978159930, abs=1e-12)
        assert r[0, 1] == pytest.approx(1.467194920539316554, abs=1e-12)
        assert r[0, 2] == pytest.approx(0.1875137911274457342, abs=1e-12)
        assert r[1, 0] == pytest.approx(3.0, abs=1e-12)
        assert r[2, 0] == pytest.approx(3.500207892850427330, abs=1e-12)
        assert r[2, 2] == pytest.approx(5.381899160903798712, abs=1e-12)

    def test_rotate_z(self):
        r = rotate_z(_R, 0.3456789)
        assert r[0, 0] == pytest.approx(2.898197754208926769, abs=1e-12)
        assert r[0, 1] == pytest.approx(3.500207892850427330, abs=1e-12)
        assert r[0, 2] == pytest.approx(2.898197754208926769, abs=1e-12)
        assert r[1, 0] == pytest.approx(2.144865911309686813, abs=1e-12)
        assert r[1, 1] == pytest.approx(0.865184781897815993, abs=1e-12)
        assert r[1, 2] == pytest.approx(2.144865911309686813, abs=1e-12)
        assert r[2, 0] == pytest.approx(3.0, abs=1e-12)

    def test_rotate_matches_left_multiplication(self):
        assert jnp.array_equal(rotate_z(_R, 0.25), Rz(0.25) @ _R)

    def test_input_not_mutated(self):
        r = jnp.eye(3)
        rotate_x(r, 0.5)
        assert jnp.array_equal(r, jnp.eye(3))

    def test_rejects_bad_shape(self):
        with pytest.raises(InvalidShapeError):
            rotate_x(jnp.eye(2), 0.1)


class TestMatrixOperations:
    def test_identity(self):
        assert jnp.array_equal(identity(), jnp.eye(3))

    def test_multiply_order(self):
        a = Rz(0.1)
        b = Rx(0.2)
        assert jnp.array_equal(multiply(a, b), a @ b)
        assert not jnp.allclose(multiply(a, b), multiply(b, a))

    def test_multiply_rejects_bad_shape(self):
        with pytest.raises(InvalidShapeError, match=r"b must have shape \(3, 3\)"):
            multiply(jnp.eye(3), jnp.ones((3,)))

    def test_transpose_is_inverse(self):
        r = Rz(0.3) @ Ry(-0.2) @ Rx(0.1)
        assert jnp.allclose(multiply(transpose(r), r), jnp.eye(3), atol=_TOL)

    def test_rotate_vector_roundtrip(self):
        r = Rz(1.1) @ Ry(0.4)
        p = jnp.array([1.0, -2.0, 0.5])
        back = rotate_vector_transpose(r, rotate_vector(r, p))
        assert jnp.allclose(back, p, atol=_TOL)

    def test_rotate_vector_rejects_bad_vector(self):
        with pytest.raises(InvalidShapeError):
            rotate_vector(jnp.eye(3), jnp.ones((4,)))

    def test_jit(self):
        r = jax.jit(rotate_z)(jnp.eye(3), 0.5)
        assert jnp.allclose(r, Rz(0.5), atol=_TOL)


class TestIsRotationMatrix:
    def test_composed_rotation(self):
        assert is_rotation_matrix(Rz(0.3) @ Ry(-1.1) @ Rx(2.4))

    def test_identity(self):
        assert is_rotation_matrix(identity())

    def test_reflection_rejected(self):
        assert not is_rotation_matrix(jnp.diag(jnp.array([1.0, 1.0, -1.0])))

    def test_scaled_rejected(self):
        assert not is_rotation_matrix(2.0 * identity())

    def test_rejects_bad_shape(self):
        with pytest.raises(InvalidShapeError):
            is_rotation_matrix(jnp.eye(2))
