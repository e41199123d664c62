'''Voter record validators built from a set of rules.

The validators here check single voter records against rules such as
a minimum age or a list of fields the record must contain. They do not touch
any election; use them to screen voters before
:meth:`panchayat.election.Election.register_voter`.

Calling a validator returns a ``{'valid': ..., 'reason': ...}`` record; the
:meth:`VoterValidator.validate` method raises a :class:`VoterError` instead.
'''

import collections.abc
from decimal import Decimal
from numbers import Real
from typing import Any, Dict, Mapping, Optional, Sequence, Union


INVALID_VOTER = 'Invalid voter object'

AGE_TYPES = (Real, Decimal)


class VoterError(Exception):
    '''A voter record is invalid given the validation rules.

    :param voter: Voter record found to be invalid.
    :param reason: Description of the failed rule.
    '''
    def __init__(self, voter: Any, reason: str):
        self.voter = voter
        self.reason = reason
        super().__init__(f'invalid voter {voter!r}: {reason}')


class VoterValidator:
    '''Validate a voter record against fixed rules.

    :param min_age: Minimum age the voter must have. Not checked if empty
        (None or zero). Voters with no numeric age pass this check.
    :param required_fields: Keys the voter record must contain, checked in
        the given order.
    '''
    def __init__(self,
                 min_age: Optional[Real] = None,
                 required_fields: Optional[Sequence[str]] = None,
                 ):
        self.min_age = min_age
        self.required_fields = (
            None if required_fields is None else list(required_fields)
        )

    def __call__(self, voter: Any) -> Dict[str, Union[bool, str]]:
        reason = self.failure_reason(voter)
        return {'valid': reason is None, 'reason': reason or ''}

    def failure_reason(self, voter: Any) -> Optional[str]:
        '''Return the reason the voter fails the rules, None if it passes.'''
        if not isinstance(voter, collections.abc.Mapping):
            return INVALID_VOTER
        if self.required_fields:
            for field in self.required_fields:
                if field not in voter:
                    return f'Missing field: {field}'
        if self.min_age:
            age = voter.get('age')
            if is_numeric_age(age) and age < self.min_age:
                return f'Age must be at least {self.min_age}'
        return None

    def validate(self, voter: Any) -> None:
        '''Check if the voter satisfies the rules.

        :param voter: Voter record to be checked.
        :raises VoterError: If the voter fails any of the rules.
        '''
        reason = self.failure_reason(voter)
        if reason is not None:
            raise VoterError(voter, reason)

    def __repr__(self) -> str:
        return (
            f'<VoterValidator(min_age={self.min_age!r},'
            f'required_fields={self.required_fields!r})>'
        )


def create_vote_validator(rules: Mapping[str, Any]) -> VoterValidator:
    '''Create a voter validator function from a rules mapping.

    :param rules: A mapping with the optional keys ``min_age`` (minimum
        voter age) and ``required_fields`` (keys every voter record must
        contain). The mapping is not modified and later changes to it do not
        affect the validator.
    :returns: A callable taking a voter record and returning
        a ``{'valid': bool, 'reason': str}`` record, with an empty reason for
        valid voters.
    '''
    return VoterValidator(
        min_age=rules.get('min_age'),
        required_fields=rules.get('required_fields'),
    )


def is_numeric_age(age: Any) -> bool:
    '''Return True if the age is a number that can be compared to a bound.

    Decimal NaNs refuse ordering comparisons and do not count.
    '''
    if not isinstance(age, AGE_TYPES):
        return False
    return not (isinstance(age, Decimal) and age.is_nan())
