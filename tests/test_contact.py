"""Tests for POST /api/contact."""

from concurrent.futures import ThreadPoolExecutor
from unittest import mock

import pytest
from bson.errors import InvalidDocument
from pymongo.errors import ServerSelectionTimeoutError

URL = '/api/contact'


class TestValidSubmissions:
    """Valid submissions are stored and acknowledged."""

    def test_scenario_submission_is_saved(self, client, collection):
        response = client.post(URL, json={'name': 'Jane', 'email': 'jane@example.com', 'message': 'Hello'})

        assert response.status_code == 201
        assert response.get_data(as_text=True) == 'Message saved'
        assert response.mimetype == 'text/plain'
        assert collection.count_documents({}) == 1
        document = collection.find_one()
        assert document['name'] == 'Jane'
        assert document['email'] == 'jane@example.com'
        assert document['message'] == 'Hello'
        assert 'created_at' in document

    @pytest.mark.parametrize('payload', [
        {'name': 'A', 'email': 'a@x.com'},
        {'name': 'A', 'email': 'a@x.com', 'message': ''},
        {'name': 'A', 'email': 'a@x.com', 'message': None},
        {'name': 'A', 'email': 'a@x.com', 'message': 'multi\nline ✓'},
    ])
    def test_any_message_is_accepted(self, client, collection, payload):
        response = client.post(URL, json=payload)

        assert response.status_code == 201
        assert collection.count_documents({'name': 'A', 'email': 'a@x.com'}) == 1

    def test_duplicate_requests_create_duplicate_records(self, client, collection):
        payload = {'name': 'Jane', 'email': 'jane@example.com', 'message': 'Hello'}

        client.post(URL, json=payload)
        client.post(URL, json=payload)

        assert collection.count_documents({}) == 2

    def test_concurrent_submissions_are_independent(self, app, collection):
        payloads = [
            {'name': 'Jane', 'email': 'jane@example.com', 'message': 'first'},
            {'name': 'John', 'email': 'john@example.com', 'message': 'second'},
        ]

        def submit(payload):
            return app.test_client().post(URL, json=payload).status_code

        with ThreadPoolExecutor(max_workers=2) as executor:
            statuses = list(executor.map(submit, payloads))

        assert statuses == [201, 201]
        assert sorted(d['name'] for d in collection.find()) == ['Jane', 'John']

    def test_cors_allows_any_origin(self, client):
        response = client.post(
            URL,
            json={'name': 'Jane', 'email': 'jane@example.com'},
            headers={'Origin': 'https://portfolio.example.com'},
        )

        assert response.headers['Access-Control-Allow-Origin'] == '*'

    def test_cors_preflight(self, client):
        response = client.options(URL, headers={
            'Origin': 'https://portfolio.example.com',
            'Access-Control-Request-Method': 'POST',
            'Access-Control-Request-Headers': 'Content-Type',
        })

        assert response.status_code == 200
        assert response.headers['Access-Control-Allow-Origin'] == '*'


class TestRejectedSubmissions:
    """Invalid submissions never reach the store."""

    @pytest.mark.parametrize('payload', [
        {'email': 'jane@example.com'},
        {'name': 'Jane'},
        {'name': '', 'email': 'jane@example.com'},
        {'name': 'Jane', 'email': '   '},
        {},
    ])
    def test_missing_required_field(self, client, collection, payload):
        response = client.post(URL, json=payload)

        assert response.status_code == 500
        assert response.get_data(as_text=True) == 'Name and email are required'
        assert collection.count_documents({}) == 0

    def test_malformed_json(self, client, collection):
        response = client.post(URL, data='{"name": ', content_type='application/json')

        assert response.status_code == 500
        assert collection.count_documents({}) == 0

    def test_non_json_body(self, client, collection):
        response = client.post(URL, data={'name': 'Jane', 'email': 'jane@example.com'})

        assert response.status_code == 500
        assert collection.count_documents({}) == 0

    def test_lone_surrogate_is_rejected(self, client, collection):
        response = client.post(URL, data='{"name": "\\ud800", "email": "a@x.com"}',
                               content_type='application/json')

        assert response.status_code == 500
        assert response.get_data(as_text=True) == 'Name and email are required'
        assert collection.count_documents({}) == 0

    def test_validation_status_is_configurable(self, app, client, collection):
        app.config['VALIDATION_ERROR_STATUS'] = 400

        response = client.post(URL, json={'email': 'jane@example.com'})

        assert response.status_code == 400
        assert collection.count_documents({}) == 0

    def test_validation_does_not_touch_the_store(self, app, client, store):
        with mock.patch.object(store, 'save') as save:
            client.post(URL, json={'email': 'jane@example.com'})

        save.assert_not_called()


class TestStorageFailures:
    """Storage errors are answered with a generic 500."""

    def test_store_down(self, client, collection):
        with mock.patch.object(collection, 'insert_one',
                               side_effect=ServerSelectionTimeoutError('connection refused')):
            response = client.post(URL, json={'name': 'Jane', 'email': 'jane@example.com', 'message': 'Hello'})

        assert response.status_code == 500
        assert response.get_data(as_text=True) == 'Error saving message'
        assert collection.count_documents({}) == 0

    def test_cause_is_logged_not_returned(self, app, client, collection):
        with mock.patch.object(collection, 'insert_one',
                               side_effect=ServerSelectionTimeoutError('secret-host:27017 refused')), \
                mock.patch.object(app.logger, 'error') as log_error:
            response = client.post(URL, json={'name': 'Jane', 'email': 'jane@example.com'})

        assert 'secret-host' not in response.get_data(as_text=True)
        log_error.assert_called_once()
        assert 'secret-host' in log_error.call_args[0][0]

    def test_unencodable_document_is_a_storage_failure(self, client, collection):
        with mock.patch.object(collection, 'insert_one',
                               side_effect=InvalidDocument('document too large')):
            response = client.post(URL, json={'name': 'Jane', 'email': 'jane@example.com'})

        assert response.status_code == 500
        assert response.get_data(as_text=True) == 'Error saving message'
        assert collection.count_documents({}) == 0

    def test_exactly_one_attempt(self, client, collection):
        with mock.patch.object(collection, 'insert_one',
                               side_effect=ServerSelectionTimeoutError('down')) as insert_one:
            client.post(URL, json={'name': 'Jane', 'email': 'jane@example.com'})

        assert insert_one.call_count == 1

    def test_no_notification_on_failure(self, client, collection):
        with mock.patch.object(collection, 'insert_one', side_effect=ServerSelectionTimeoutError('down')), \
                mock.patch('blueprints.contact.routes.notify_new_submission') as notify:
            client.post(URL, json={'name': 'Jane', 'email': 'jane@example.com'})

        notify.assert_not_called()


class TestOtherMethods:
    """No read path is exposed."""

    def test_get_is_not_allowed(self, client):
        response = client.get(URL)

        assert response.status_code == 405

    def test_delete_is_not_allowed(self, client):
        response = client.delete(URL)

        assert response.status_code == 405
