'''The election store: voter registration, vote casting and results.

An :class:`Election` keeps its state (vote counts, registered voters, voters
who already voted and the candidate lookup) private and exposes it only
through its operations. None of the operations raise for bad input; failures
are reported by return values or through the error callback of
:meth:`Election.cast_vote`.

.. code-block:: python

    election = create_election([
        {'id': 'C1', 'name': 'Sarpanch Ram', 'party': 'Janata'},
        {'id': 'C2', 'name': 'Pradhan Sita', 'party': 'Lok'},
    ])
    election.register_voter({'id': 'V1', 'name': 'Mohan', 'age': 25})
    election.cast_vote('V1', 'C1', lambda r: 'voted!', lambda e: 'error: ' + e)
    # => 'voted!'
'''

import collections.abc
import functools
import logging
import operator
from numbers import Real
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional

import panchayat.candidate
import panchayat.util
import panchayat.validate
from panchayat.candidate import CandidateNominator, CandidateRecord, result_entry


logger = logging.getLogger(__name__)

VOTING_AGE: int = 18

NOT_REGISTERED = 'Voter not registered'
ALREADY_VOTED = 'Voter already voted'
INVALID_CANDIDATE = 'Invalid candidate'

DEFAULT_NOMINATOR = CandidateNominator()

Comparator = Callable[[Dict[str, Any], Dict[str, Any]], Real]


class Election:
    '''A single election with a fixed list of candidates.

    Every candidate starts with zero votes. A candidate appearing twice
    (by ``id``) replaces the earlier record and its count, keeping the
    position of the first occurrence.

    :param candidates: Candidate records (mappings with at least an ``id``).
    :param nominator: Checker for the candidate records.
    :raises CandidateError: If any of the candidates is malformed.
    '''
    def __init__(self,
                 candidates: Iterable[CandidateRecord],
                 nominator: CandidateNominator = DEFAULT_NOMINATOR,
                 ):
        self._votes = {}
        self._registered = set()
        self._voted = set()
        self._candidates = {}
        for cand in candidates:
            nominator.validate(cand)
            cand_id = panchayat.candidate.candidate_id(cand)
            self._candidates[cand_id] = cand
            self._votes[cand_id] = 0
        logger.debug('election created with %d candidates',
                     len(self._candidates))

    @property
    def n_registered(self) -> int:
        return len(self._registered)

    @property
    def n_voted(self) -> int:
        return len(self._voted)

    @property
    def candidates(self) -> List[CandidateRecord]:
        return list(self._candidates.values())

    @property
    def tally(self) -> Dict[Hashable, int]:
        '''A copy of the current vote counts, keyed by candidate id.'''
        return dict(self._votes)

    def register_voter(self, voter: Any) -> bool:
        '''Register a voter as eligible to vote.

        Only the voter's id is retained. The voter must be a mapping with
        a non-empty ``id`` and ``name`` and a numeric ``age`` of at least
        :data:`VOTING_AGE`.

        :param voter: Voter record to register.
        :returns: True if the voter was registered, False if the record is
            invalid, the voter is underage or already registered.
        '''
        if not _is_well_formed_voter(voter):
            logger.debug('rejecting malformed voter record %r', voter)
            return False
        if voter['age'] < VOTING_AGE:
            logger.debug('rejecting underage voter %s', voter['id'])
            return False
        if voter['id'] in self._registered:
            logger.debug('voter %s already registered', voter['id'])
            return False
        self._registered.add(voter['id'])
        logger.info('voter %s registered', voter['id'])
        return True

    def cast_vote(self,
                  voter_id: Hashable,
                  candidate_id: Hashable,
                  on_success: Callable[[Dict[str, Hashable]], Any],
                  on_error: Callable[[str], Any],
                  ) -> Any:
        '''Record a vote and report the outcome through a callback.

        The checks go in order: the voter must be registered, must not have
        voted yet, and the candidate must stand in the election. The first
        failing check calls ``on_error`` with its reason
        (:data:`NOT_REGISTERED`, :data:`ALREADY_VOTED` or
        :data:`INVALID_CANDIDATE`) and leaves the state intact. Otherwise
        the vote is counted and ``on_success`` is called with a
        ``{'voter_id': ..., 'candidate_id': ...}`` record.

        :param voter_id: Identifier of the voting voter.
        :param candidate_id: Identifier of the candidate voted for.
        :param on_success: Called with the vote record on success.
        :param on_error: Called with the reason string on failure.
        :returns: The return value of the invoked callback; None without
            doing anything if either callback is not callable.
        '''
        if not callable(on_success) or not callable(on_error):
            return None
        if (not isinstance(voter_id, collections.abc.Hashable)
                or voter_id not in self._registered):
            reason = NOT_REGISTERED
        elif voter_id in self._voted:
            reason = ALREADY_VOTED
        elif (not isinstance(candidate_id, collections.abc.Hashable)
                or candidate_id not in self._candidates):
            reason = INVALID_CANDIDATE
        else:
            self._votes[candidate_id] += 1
            self._voted.add(voter_id)
            logger.info('vote by %s recorded for %s', voter_id, candidate_id)
            return on_success({
                'voter_id': voter_id,
                'candidate_id': candidate_id,
            })
        logger.debug('vote by %s for %s refused: %s',
                     voter_id, candidate_id, reason)
        return on_error(reason)

    def get_results(self,
                    comparator: Optional[Comparator] = None,
                    ) -> List[Dict[str, Any]]:
        '''Return the current results, one record per candidate.

        Each record holds the candidate's ``id``, ``name``, ``party`` and
        current ``votes``; the records are built anew on every call.

        :param comparator: A two-argument ordering function returning
            a negative number, zero or a positive number. If not given (or not
            callable), the results are ordered by votes in descending order,
            keeping the candidate order among equals.
        '''
        results = [
            result_entry(cand, self._votes[cand_id])
            for cand_id, cand in self._candidates.items()
        ]
        if callable(comparator):
            return sorted(results, key=functools.cmp_to_key(comparator))
        else:
            return sorted(
                results, key=operator.itemgetter('votes'), reverse=True
            )

    def get_winner(self) -> Optional[CandidateRecord]:
        '''Return the candidate with the most votes.

        Ties go to the candidate listed first. If no votes have been cast yet,
        there is no winner and None is returned.
        '''
        if panchayat.util.total_votes(self._votes) == 0:
            return None
        max_votes = -1
        winner = None
        for cand_id, cand in self._candidates.items():
            if self._votes[cand_id] > max_votes:
                max_votes = self._votes[cand_id]
                winner = cand
        return winner


def create_election(candidates: Iterable[CandidateRecord]) -> Election:
    '''Create an election for the given candidates.

    This is the only place the election machinery raises: a candidate record
    that is not a mapping or lacks a hashable ``id`` cannot key the vote
    counts. Once created, the election reports every failure through return
    values and callbacks.

    :param candidates: Candidate records with ``id``, ``name`` and
        ``party`` keys.
    :raises CandidateError: If any of the candidates is malformed.
    '''
    return Election(candidates)


def _is_well_formed_voter(voter: Any) -> bool:
    return (
        isinstance(voter, collections.abc.Mapping)
        and bool(voter.get('id'))
        and isinstance(voter['id'], collections.abc.Hashable)
        and bool(voter.get('name'))
        and panchayat.validate.is_numeric_age(voter.get('age'))
        and not isinstance(voter.get('age'), bool)
    )
