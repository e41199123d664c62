'''Tally helpers for the other modules of the package.

A tally is a dictionary mapping candidate identifiers to their vote counts.
'''

import collections.abc
from typing import Any, Dict, Hashable
from numbers import Number


def total_votes(tally: Dict[Any, Number]) -> Number:
    return sum(tally.values())


def tally_pure(current_tally: Dict[Hashable, int],
               candidate_id: Hashable,
               ) -> Dict[Hashable, int]:
    '''Return a new tally with one more vote for the given candidate.

    The input tally is left untouched; the returned dictionary is always a new
    object, even for an empty input. A candidate not yet present in the tally,
    or present with a non-numeric count, gets a single vote. A tally that is
    not a mapping is treated as empty.

    :param current_tally: Mapping of candidate identifiers to vote counts.
    :param candidate_id: Candidate to add the vote to.
    :returns: The incremented copy of the tally.
    '''
    if isinstance(current_tally, collections.abc.Mapping):
        tally = dict(current_tally)
    else:
        tally = {}
    if isinstance(tally.get(candidate_id), Number):
        tally[candidate_id] += 1
    else:
        tally[candidate_id] = 1
    return tally
