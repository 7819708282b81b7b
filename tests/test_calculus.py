import math

import pytest

from algoritma.calculus import (
    bisection,
    chain_derivative,
    cone_volume,
    cosine,
    cube_volume,
    cuboid_volume,
    cylinder_volume,
    degree_to_radian,
    derivative,
    equation,
    factorial,
    poly_derivative,
    product_derivative,
    quadratic_roots,
    radian_to_degree,
    radian_to_gradian,
    relu,
    sigmoid,
    sphere_volume,
    sum_derivative,
)


def square(x):
    return x * x


def cube(x):
    return x * x * x


def test_equation_at_zero():
    assert equation(0) == 10


@pytest.mark.parametrize("a,b", [(-2, 5), (0, 6)])
def test_bisection_finds_root(a, b):
    root = bisection(a, b)
    assert abs(root - math.sqrt(10)) <= 0.01
    assert abs(equation(root)) < 0.1


def test_bisection_custom_function():
    root = bisection(0, 2, lambda x: x * x - 2)
    assert abs(root - math.sqrt(2)) <= 0.01


def test_bisection_same_sign_raises():
    with pytest.raises(ValueError):
        bisection(0, 1)


@pytest.mark.parametrize("n", range(0, 15))
def test_factorial_matches_math(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-1)


def test_cosine_at_zero():
    assert cosine(0) == 1.0


@pytest.mark.parametrize("angle", [0.1, 0.5, -0.7, 1.0, math.pi / 4])
def test_cosine_close_to_math(angle):
    assert cosine(angle, 10) == pytest.approx(math.cos(angle), abs=1e-9)


def test_cosine_more_terms_is_better():
    angle = math.pi
    assert abs(cosine(angle, 12) - math.cos(angle)) < abs(
        cosine(angle, 4) - math.cos(angle)
    )


@pytest.mark.parametrize("x", [0.5, 1.0, 2.0, 3.0])
def test_derivative_of_square(x):
    assert derivative(square, x) == pytest.approx(poly_derivative(x, 2), rel=1e-3)


def test_sum_derivative():
    x = 2.0
    expected = poly_derivative(x, 2) + poly_derivative(x, 3)
    assert sum_derivative(square, cube, x) == pytest.approx(expected, rel=1e-3)


def test_product_derivative():
    x = 2.0
    assert product_derivative(square, cube, x) == pytest.approx(
        poly_derivative(x, 5), rel=1e-3
    )


def test_chain_derivative():
    x = 1.5
    assert chain_derivative(square, cube, x) == pytest.approx(
        poly_derivative(x, 6), rel=1e-3
    )


def test_angle_constants():
    assert radian_to_degree(math.pi) == pytest.approx(180)
    assert radian_to_gradian(math.pi) == pytest.approx(200)


@pytest.mark.parametrize("value", [20.1, 12.0, 122.12, -3.0])
def test_angle_round_trip(value):
    assert degree_to_radian(radian_to_degree(value)) == pytest.approx(value)


def test_relu_source_cases():
    assert relu(12.12) == 12.12
    assert relu(-1.12) == 0.0
    assert relu(0.0) == 0.0


def test_sigmoid_midpoint_and_symmetry():
    assert sigmoid(0) == 0.5
    for x in (0.3, 1.0, 4.0, 10.0):
        assert sigmoid(x) + sigmoid(-x) == pytest.approx(1.0)
        assert 0.5 < sigmoid(x) < 1.0


def test_volume_relations():
    assert cube_volume(3) == cuboid_volume(3, 3, 3)
    assert cone_volume(6, 5) * 3 == pytest.approx(cuboid_volume(6, 5, 1))
    assert cylinder_volume(1, 1) == pytest.approx(math.pi)
    assert sphere_volume(2) == pytest.approx(8 * sphere_volume(1))
    assert sphere_volume(1) * 3 == pytest.approx(cylinder_volume(1, 4))


@pytest.mark.parametrize("a,b,c", [(1, 2, 6), (1, 3, 6)])
def test_quadratic_imaginary_source_cases(a, b, c):
    assert quadratic_roots(a, b, c) == ()


@pytest.mark.parametrize("a,b,c", [(1, -3, 2), (2, 5, -3), (-1, 4, 1)])
def test_quadratic_roots_satisfy_equation(a, b, c):
    roots = quadratic_roots(a, b, c)
    assert len(roots) == 2
    for x in roots:
        assert a * x * x + b * x + c == pytest.approx(0, abs=1e-9)


def test_quadratic_double_root():
    (root,) = quadratic_roots(1, 2, 1)
    assert 1 * root * root + 2 * root + 1 == pytest.approx(0)


def test_quadratic_not_quadratic():
    with pytest.raises(ValueError):
        quadratic_roots(0, 2, 1)