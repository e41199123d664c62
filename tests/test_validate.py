import sys
import os
import collections
from decimal import Decimal

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import panchayat.validate

FULL_RULES = {'min_age': 18, 'required_fields': ['id', 'name', 'age']}

VALID = {'valid': True, 'reason': ''}


@pytest.mark.parametrize(('rules', 'voter', 'expected'), [
    (FULL_RULES, {'id': 'V1', 'name': 'Mohan', 'age': 25}, VALID),
    (FULL_RULES, {'id': 'V1', 'name': 'Mohan', 'age': 18}, VALID),
    (FULL_RULES, None, {'valid': False, 'reason': 'Invalid voter object'}),
    (FULL_RULES, 'V1', {'valid': False, 'reason': 'Invalid voter object'}),
    (FULL_RULES, 25, {'valid': False, 'reason': 'Invalid voter object'}),
    (FULL_RULES, {'name': 'Mohan', 'age': 25},
        {'valid': False, 'reason': 'Missing field: id'}),
    (FULL_RULES, {'id': 'V1', 'age': 25},
        {'valid': False, 'reason': 'Missing field: name'}),
    (FULL_RULES, {}, {'valid': False, 'reason': 'Missing field: id'}),
    (FULL_RULES, {'id': 'V1', 'name': 'Mohan'},
        {'valid': False, 'reason': 'Missing field: age'}),
    (FULL_RULES, {'id': 'V1', 'name': 'Bal', 'age': 12},
        {'valid': False, 'reason': 'Age must be at least 18'}),
    (FULL_RULES, {'id': None, 'name': None, 'age': 30}, VALID),
    ({}, {}, VALID),
    ({}, {'id': 'V1', 'age': 3}, VALID),
    ({'min_age': 21}, {'id': 'V1', 'age': 20},
        {'valid': False, 'reason': 'Age must be at least 21'}),
    ({'min_age': 21}, {'id': 'V1'}, VALID),
    ({'min_age': 21}, {'id': 'V1', 'age': 'old'}, VALID),
    ({'min_age': 0}, {'id': 'V1', 'age': -5}, VALID),
    ({'min_age': None}, {'id': 'V1', 'age': 5}, VALID),
    ({'required_fields': ['age', 'id']}, {'name': 'Mohan'},
        {'valid': False, 'reason': 'Missing field: age'}),
    ({'required_fields': []}, {}, VALID),
])
def test_validator(rules, voter, expected):
    validate = panchayat.validate.create_vote_validator(rules)
    assert validate(voter) == expected


def test_validator_any_mapping():
    validate = panchayat.validate.create_vote_validator(FULL_RULES)
    voter = collections.OrderedDict(id='V1', name='Mohan', age=25)
    assert validate(voter) == VALID


def test_rules_untouched():
    rules = {'min_age': 18, 'required_fields': ['id', 'name']}
    validate = panchayat.validate.create_vote_validator(rules)
    validate({'id': 'V1', 'name': 'Mohan', 'age': 25})
    validate({'age': 3})
    assert rules == {'min_age': 18, 'required_fields': ['id', 'name']}
    rules['required_fields'].append('age')
    rules['min_age'] = 50
    assert validate({'id': 'V1', 'name': 'Mohan', 'age': 25}) == VALID


def test_validator_independent():
    adult = panchayat.validate.create_vote_validator({'min_age': 18})
    senior = panchayat.validate.create_vote_validator({'min_age': 60})
    voter = {'id': 'V1', 'name': 'Mohan', 'age': 40}
    assert adult(voter)['valid']
    assert not senior(voter)['valid']


def test_validate_raises():
    validator = panchayat.validate.VoterValidator(min_age=18)
    validator.validate({'id': 'V1', 'age': 30})
    with pytest.raises(panchayat.validate.VoterError) as excinfo:
        validator.validate({'id': 'V2', 'age': 10})
    assert excinfo.value.reason == 'Age must be at least 18'
    assert excinfo.value.voter == {'id': 'V2', 'age': 10}


def test_validate_raises_invalid_object():
    validator = panchayat.validate.VoterValidator()
    with pytest.raises(panchayat.validate.VoterError):
        validator.validate(None)


@pytest.mark.parametrize(('age', 'is_valid'), [
    (Decimal('10'), False),
    (Decimal('17.5'), False),
    (Decimal('18'), True),
    (Decimal('30'), True),
    (Decimal('NaN'), True),
    (True, False),
])
def test_validator_numeric_age_types(age, is_valid):
    validate = panchayat.validate.create_vote_validator({'min_age': 18})
    result = validate({'id': 'V1', 'age': age})
    assert result['valid'] is is_valid
    if not is_valid:
        assert result['reason'] == 'Age must be at least 18'
