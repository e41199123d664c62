'''Vote totals over nested regions.

A region tree is a mapping with a ``name``, the ``votes`` counted directly in
the region and a list of ``sub_regions`` of the same shape, e.g. a district
made up of blocks made up of villages. The trees must be acyclic.
'''

import collections.abc
from numbers import Number
from typing import Any


def count_votes_in_regions(region_tree: Any) -> int:
    '''Sum the votes of the region and all its subregions, recursively.

    A missing, zero, boolean or non-numeric ``votes`` value counts as zero;
    a ``sub_regions`` value that is not a list or tuple is ignored.

    :param region_tree: Root of the region tree.
    :returns: Total votes in the tree, 0 if the tree is None or not
        a mapping.
    '''
    if not isinstance(region_tree, collections.abc.Mapping):
        return 0
    votes = region_tree.get('votes')
    total = (
        votes
        if isinstance(votes, Number) and not isinstance(votes, bool) and votes
        else 0
    )
    sub_regions = region_tree.get('sub_regions')
    if isinstance(sub_regions, (list, tuple)):
        for sub_region in sub_regions:
            total += count_votes_in_regions(sub_region)
    return total
