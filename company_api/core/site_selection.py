"""Site Selection — picks the shard a company record is stored on.

Invariants:
    - pick() always returns a member of the given sites
    - Empty site sequence raises ValueError (configuration error, not a save outcome)

Design Decisions:
    - Own random.Random per selector: seedable for reproducible runs,
      no shared global RNG state between selectors
    - Uniform choice is a stand-in; a smarter strategy only has to satisfy SiteSelector
"""

import random
from collections.abc import Sequence

from company_api.core.domain_types import SiteId


class RandomSiteSelector:
    """Uniformly random SiteSelector."""

    def __init__(self, seed: int | None = None):
        self._rng = random.Random(seed)

    def pick(self, sites: Sequence[SiteId]) -> SiteId:
        if not sites:
            raise ValueError("Cannot pick a site from an empty site list")
        return self._rng.choice(sites)
