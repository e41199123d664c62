"""Panchayat - bookkeeping for small village elections.

The central object is the :class:`election.Election` store created by
:func:`election.create_election`. It registers voters, records their votes
(reporting the outcome through success and error callbacks) and reports the
results and the winner.

Some standalone helpers come along:

-   :func:`validate.create_vote_validator` builds voter record validators
    from rules such as a minimum age or required fields.
-   :func:`region.count_votes_in_regions` sums votes over a tree of nested
    regions.
-   :func:`util.tally_pure` adds a vote to a tally without modifying it.
"""

from panchayat.election import Election, create_election    # noqa: F401
from panchayat.region import count_votes_in_regions    # noqa: F401
from panchayat.util import tally_pure    # noqa: F401
from panchayat.validate import create_vote_validator    # noqa: F401
