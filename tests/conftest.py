"""Global test configuration and shared fixtures.

Loads a hypothesis settings profile (derandomized by default, so runs are
reproducible) and auto-marks everything under tests/property with the
'property' marker.
"""

import os
from pathlib import Path

import pytest
from hypothesis import settings

from riemann import Complex


settings.register_profile("ci", derandomize=True, deadline=None)
settings.register_profile("explore", max_examples=1000, deadline=None)


def pytest_sessionstart(session: pytest.Session) -> None:
    """Select the hypothesis profile (RIEMANN_HYPOTHESIS_PROFILE, default 'ci')."""
    settings.load_profile(os.environ.get("RIEMANN_HYPOTHESIS_PROFILE", "ci"))


def pytest_collection_modifyitems(session: pytest.Session, config: pytest.Config, items: list) -> None:
    """Auto-mark tests under tests/property with the 'property' marker.

    CI selects property tests via `-m property`.
    """
    for item in items:
        p = Path(str(item.fspath))
        if "property" in p.parts and "tests" in p.parts:
            item.add_marker(pytest.mark.property)


def assert_complex_close(z: Complex, expected: Complex, abs_tol: float = 1e-14, rel_tol: float = 1e-14) -> None:
    """Assert both components of z are within tolerance of expected."""
    assert z.re == pytest.approx(expected.re, rel=rel_tol, abs=abs_tol), f"re: {z!r} vs {expected!r}"
    assert z.im == pytest.approx(expected.im, rel=rel_tol, abs=abs_tol), f"im: {z!r} vs {expected!r}"


@pytest.fixture
def close():
    """Component-wise closeness assertion for Complex values."""
    return assert_complex_close
