"""Site Selection — tests for RandomSiteSelector.

Tests cover:
    - Picks are always members of the given sites
    - Same seed → same sequence
    - Every site is reachable
    - Empty site list is rejected
"""

import pytest

from company_api.core.domain_types import DEFAULT_SITES
from company_api.core.site_selection import RandomSiteSelector


def test_pick_returns_member_of_sites():
    selector = RandomSiteSelector()
    for _ in range(100):
        assert selector.pick(DEFAULT_SITES) in DEFAULT_SITES


def test_same_seed_same_sequence():
    a = RandomSiteSelector(seed=42)
    b = RandomSiteSelector(seed=42)
    assert [a.pick(DEFAULT_SITES) for _ in range(20)] == [
        b.pick(DEFAULT_SITES) for _ in range(20)
    ]


def test_all_sites_reachable():
    selector = RandomSiteSelector(seed=7)
    picked = {selector.pick(DEFAULT_SITES) for _ in range(200)}
    assert picked == set(DEFAULT_SITES)


def test_single_site_always_picked():
    assert RandomSiteSelector().pick(["Lima"]) == "Lima"


def test_empty_sites_raises():
    with pytest.raises(ValueError):
        RandomSiteSelector().pick([])
