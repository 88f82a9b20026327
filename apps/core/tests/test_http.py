import json

import pytest
from django.contrib.auth.models import AnonymousUser
from django.http import HttpResponse

from apps.core.decorators import login_required_json
from apps.core.http import BadJSON, json_error, merged_form_data, parse_body
from apps.properties.forms import PropertyForm


class TestParseBody:
    def test_json_object(self, rf):
        request = rf.post('/', data=json.dumps({'a': 1}), content_type='application/json')
        assert parse_body(request) == {'a': 1}

    def test_empty_json_body(self, rf):
        request = rf.post('/', data='', content_type='application/json')
        assert parse_body(request) == {}

    def test_json_array_rejected(self, rf):
        request = rf.post('/', data='[1, 2]', content_type='application/json')
        with pytest.raises(BadJSON):
            parse_body(request)

    def test_malformed_json(self, rf):
        request = rf.post('/', data='{oops', content_type='application/json')
        with pytest.raises(BadJSON):
            parse_body(request)

    def test_form_encoded(self, rf):
        request = rf.post('/', data={'name': 'x'})
        assert parse_body(request) == {'name': 'x'}


def test_json_error_body():
    response = json_error('Nope', status=409, errors={'field': ['bad']})
    assert response.status_code == 409
    assert json.loads(response.content) == {'message': 'Nope', 'errors': {'field': ['bad']}}


def test_json_error_without_errors():
    assert json.loads(json_error('Nope').content) == {'message': 'Nope'}


@pytest.mark.django_db
def test_merged_form_data(prop):
    data = merged_form_data(PropertyForm, prop, {'city': 'Chicago', 'user': 99, 'bogus': 1})
    assert data['city'] == 'Chicago'
    assert data['street'] == '12 Maple St'
    assert 'user' not in data
    assert 'bogus' not in data
    assert 'year_built' not in data


@pytest.mark.django_db
def test_login_required_json(rf, test_user):
    view = login_required_json(lambda request: HttpResponse('ok'))

    request = rf.get('/')
    request.user = AnonymousUser()
    response = view(request)
    assert response.status_code == 401

    request.user = test_user
    assert view(request).content == b'ok'
