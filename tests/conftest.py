"""
Root conftest.py for the kraft-testkit test suite.

Registers the TRA (Test Responsibility Architecture) and Tier markers and
checks them at collection time.
- Every test declares one @pytest.mark.tra anchor and one @pytest.mark.tier level
- Tier levels map to timeouts (needs pytest-timeout)
- Violations are printed as warnings unless TRA_ENFORCE=1 or TIER_ENFORCE=1

Usage:
    @pytest.mark.tier(1)
    @pytest.mark.tra("Adapter.MockController")
    def test_something():
        ...
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from _pytest.config import Config
    from _pytest.nodes import Item


VALID_TRA_PREFIXES = frozenset(
    [
        "Domain.Invariant.",
        "Domain.Policy.",
        "UseCase.",
        "Port.",
        "Adapter.",
        "Contract.",
    ]
)

# Tier timeout limits in seconds (0 = no limit)
TIER_TIMEOUTS: dict[int, float] = {
    0: 0.1,
    1: 2.0,
    2: 30.0,
    3: 300.0,
    4: 0,
}


def pytest_configure(config: Config) -> None:
    """Register custom markers for TRA and Tier enforcement."""
    config.addinivalue_line(
        "markers",
        "tra(anchor): Test Responsibility Anchor. Must start with one of: "
        "Domain.Invariant, Domain.Policy, UseCase, Port, Adapter, Contract",
    )
    config.addinivalue_line(
        "markers",
        "tier(level): Test tier (0=instant, 1=fast, 2=standard, 3=slow, 4=manual).",
    )


def _get_tier(item: Item) -> int | None:
    """Extract tier level from item's markers."""
    for marker in item.iter_markers(name="tier"):
        if marker.args:
            tier = marker.args[0]
            if isinstance(tier, int) and 0 <= tier <= 4:
                return tier
    return None


def _check_tra(item: Item) -> str | None:
    markers = list(item.iter_markers(name="tra"))
    if not markers:
        return f"{item.nodeid}: Missing @pytest.mark.tra('...')"
    if len(markers) > 1:
        return f"{item.nodeid}: Multiple @tra markers found"
    anchor = markers[0].args[0] if markers[0].args else None
    if not isinstance(anchor, str) or not anchor.strip():
        return f"{item.nodeid}: @tra anchor must be a non-empty string"
    if not any(anchor.startswith(prefix) for prefix in VALID_TRA_PREFIXES):
        return f"{item.nodeid}: Invalid TRA anchor '{anchor}'"
    return None


def _check_tier(item: Item) -> str | None:
    markers = list(item.iter_markers(name="tier"))
    if not markers:
        return f"{item.nodeid}: Missing @pytest.mark.tier()"
    if len(markers) > 1:
        return f"{item.nodeid}: Multiple tier markers"
    if _get_tier(item) is None:
        return f"{item.nodeid}: Invalid tier value"
    return None


def _apply_tier_timeouts(items: list[Item]) -> None:
    """Add a timeout marker per tier unless one is set explicitly."""
    try:
        import pytest_timeout as _  # type: ignore[import-untyped]  # noqa: F401
    except ImportError:
        return

    multiplier = float(os.environ.get("TIER_TIMEOUT_MULTIPLIER", "1.0"))

    for item in items:
        tier = _get_tier(item)
        if tier is None or any(item.iter_markers(name="timeout")):
            continue
        timeout = TIER_TIMEOUTS.get(tier, 0)
        if timeout > 0:
            item.add_marker(pytest.mark.timeout(timeout * multiplier))


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(config: Config, items: list[Item]) -> None:
    """Check TRA and Tier markers, then apply tier timeouts."""
    strict = os.environ.get("TRA_ENFORCE") == "1" or os.environ.get("TIER_ENFORCE") == "1"

    errors = []
    for item in items:
        for check in (_check_tra, _check_tier):
            error = check(item)
            if error:
                errors.append(error)

    if errors:
        if strict:
            pytest.fail(
                "TRA/Tier Enforcement Errors:\n" + "\n".join(f"  - {e}" for e in errors),
                pytrace=False,
            )
        print("\nTRA/Tier Enforcement Warnings:")
        for error in errors:
            print(f"  {error}")

    _apply_tier_timeouts(items)


@pytest.hookimpl(trylast=True)
def pytest_report_header(config: Config) -> str:
    """Add enforcement info to pytest header."""
    tra_enforce = os.environ.get("TRA_ENFORCE", "warn")
    tier_enforce = os.environ.get("TIER_ENFORCE", "warn")
    return f"TRA enforcement: {tra_enforce} | Tier enforcement: {tier_enforce}"
