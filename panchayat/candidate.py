'''Candidate records and their nomination check.

Candidates are plain mappings with the keys ``id``, ``name`` and ``party``.
Only the ``id`` is required by the election machinery; it must be hashable
since it keys the vote counts. The name and party are carried through to the
results unchanged and may be absent (they then show up as None).
'''

import collections.abc
from typing import Any, Dict, Hashable, Mapping


CandidateRecord = Mapping[str, Any]


class CandidateError(Exception):
    '''A candidate record is invalid.

    :param candidate: Candidate that was found to be invalid.
    :param expected: Description of what was expected instead.
    '''
    def __init__(self, candidate: Any, expected: Any = None):
        self.candidate = candidate
        self.expected = expected
        message = f'invalid candidate: {candidate!r}'
        if expected:
            message += f', must be {expected}'
        super().__init__(message)


class CandidateNominator:
    '''Validate that candidates are usable election records.

    Does not do any logical checks (such as party eligibility); only that
    the candidate is a mapping with a hashable identifier.
    '''
    def validate(self, candidate: CandidateRecord) -> None:
        '''Check whether a candidate is valid.

        :param candidate: Candidate to be checked.
        :raises CandidateError: If the candidate is not a mapping or has no
            hashable ``id``.
        '''
        if not isinstance(candidate, collections.abc.Mapping):
            raise CandidateError(candidate, 'a mapping')
        if 'id' not in candidate:
            raise CandidateError(candidate, 'a record with an id')
        if not isinstance(candidate['id'], collections.abc.Hashable):
            raise CandidateError(candidate, 'a record with a hashable id')


def candidate_id(candidate: CandidateRecord) -> Hashable:
    return candidate['id']


def result_entry(candidate: CandidateRecord, n_votes: int) -> Dict[str, Any]:
    '''Return a fresh result record for the candidate with its vote count.'''
    return {
        'id': candidate['id'],
        'name': candidate.get('name'),
        'party': candidate.get('party'),
        'votes': n_votes,
    }
