# tests/test_public_api.py
import pyautomatica


def test_version():
    assert pyautomatica.__version__ == "0.1.0"


def test_exports():
    for name in pyautomatica.__all__:
        assert hasattr(pyautomatica, name), name


def test_polynomial_methods_match_functions():
    p = pyautomatica.poly(6., 5., 1.)
    assert p.real_roots() == pyautomatica.real_roots(p)
    assert p.complex_roots() == pyautomatica.complex_roots(p)
    assert p.iterative_roots() == pyautomatica.iterative_roots(p)
