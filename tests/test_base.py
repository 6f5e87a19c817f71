#!/usr/bin/env python
# -*- coding: utf-8 -*-
# Copyright 2015 Red Hat, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
#     Unless required by applicable law or agreed to in writing, software
#     distributed under the License is distributed on an "AS IS" BASIS,
#     WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#     See the License for the specific language governing permissions and
#     limitations under the License.

"""
test_base
----------------------------------

Tests the authenticated request executor.
"""
import unittest

import mock
import requests

from storage_client import base
from storage_client import result


URL = 'https://storage.googleapis.com/storage/v1/b/name'


def response(status_code=200, content=b'', json_value=None):
    return mock.Mock(status_code=status_code, content=content,
                     **{'json.return_value': json_value})


class TestGCS(unittest.TestCase):
    """Test Google Cloud Service base class."""

    def setUp(self):
        self.creds = mock.Mock(authorization='Bearer token')
        self.gcs = base.GCS(self.creds, 'project')

    def test_init(self):
        """Test init stores credentials and project."""
        self.assertIs(self.creds, self.gcs.credentials)
        self.assertEqual('project', self.gcs.project_id)

    def test_url(self):
        """Odd segments are quoted, literals are not."""
        self.assertEqual(
            base.GCS.URL + '/b/my%20bucket/o/dir%2Ffile?alt=json',
            self.gcs._url('/b/', 'my bucket', '/o/', 'dir/file',
                          params={'alt': 'json'}))

    def test_url_base(self):
        """Alternative base url."""
        self.assertEqual(base.GCS.UPLOAD_URL + '/b',
                         self.gcs._url('/b', base=base.GCS.UPLOAD_URL))

    @mock.patch('requests.request')
    def test_request_default_ok(self, request_mock):
        """Test _request method with default values and JSON body."""
        request_mock.return_value = response(content=b'{"a": 1}',
                                             json_value={'a': 1})
        res = self.gcs._request(URL)
        self.assertEqual(result.Success({'a': 1}), res)
        request_mock.assert_called_once_with(
            'GET', URL, headers={'Authorization': 'Bearer token'}, data=None)

    @mock.patch('requests.request')
    def test_request_headers_merged(self, request_mock):
        """Headers are merged with the authorization header."""
        request_mock.return_value = response()
        self.gcs._request(URL, 'PATCH',
                          headers={'Content-Type': 'application/json'},
                          payload='{}')
        request_mock.assert_called_once_with(
            'PATCH', URL,
            headers={'Authorization': 'Bearer token',
                     'Content-Type': 'application/json'},
            data='{}')

    @mock.patch('requests.request')
    def test_request_payload_passed_as_is(self, request_mock):
        """Byte payloads are not modified."""
        request_mock.return_value = response()
        self.gcs._request(URL, 'POST', payload=b'\x00\x01')
        self.assertEqual(b'\x00\x01', request_mock.call_args[1]['data'])

    @mock.patch('requests.request')
    def test_request_empty_body(self, request_mock):
        """An empty body returns Success without value."""
        request_mock.return_value = response(content=b'')
        res = self.gcs._request(URL)
        self.assertTrue(res.ok)
        self.assertIsNone(res.value)
        self.assertFalse(request_mock.return_value.json.called)

    @mock.patch('requests.request')
    def test_request_json_null(self, request_mock):
        """A JSON null body returns Success without value."""
        request_mock.return_value = response(content=b'null')
        res = self.gcs._request(URL)
        self.assertEqual(result.Success(None), res)

    @mock.patch('requests.request')
    def test_request_no_parse(self, request_mock):
        """Without parsing the raw body is returned."""
        request_mock.return_value = response(content=b'raw data')
        res = self.gcs._request(URL, parse=False)
        self.assertEqual(result.Success(b'raw data'), res)
        self.assertFalse(request_mock.return_value.json.called)

    @mock.patch('requests.request')
    def test_request_not_found(self, request_mock):
        """Non OK status returns the raw response without raising."""
        request_mock.return_value = response(status_code=404,
                                             content=b'Not Found')
        with mock.patch.object(base.LOG, 'warning') as log_mock:
            res = self.gcs._request(URL)
        self.assertIsInstance(res, result.HttpError)
        self.assertFalse(res.ok)
        self.assertIsNone(res.value)
        self.assertIs(request_mock.return_value, res.response)
        self.assertEqual(404, res.response.status_code)
        log_mock.assert_called_once_with('%s Status: %s', URL, 404)

    @mock.patch('requests.request')
    def test_request_no_content_not_ok_by_default(self, request_mock):
        """Only 200 is OK unless told otherwise."""
        request_mock.return_value = response(status_code=204)
        res = self.gcs._request(URL, 'DELETE')
        self.assertIsInstance(res, result.HttpError)

    @mock.patch('requests.request')
    def test_request_custom_ok(self, request_mock):
        """Custom OK status codes."""
        request_mock.return_value = response(status_code=204)
        res = self.gcs._request(URL, 'DELETE', ok=(200, 204))
        self.assertEqual(result.Success(), res)

    @mock.patch('requests.request')
    def test_request_network_error(self, request_mock):
        """Network exceptions are logged and returned, not raised."""
        exc = requests.ConnectionError('boom')
        request_mock.side_effect = exc
        with mock.patch.object(base.LOG, 'error') as log_mock:
            res = self.gcs._request(URL)
        self.assertIsInstance(res, result.TransportError)
        self.assertIs(exc, res.cause)
        self.assertIsNone(res.value)
        log_mock.assert_called_once_with('Cloud Storage Error: %s', exc)

    @mock.patch('requests.request')
    def test_request_json_error(self, request_mock):
        """Invalid JSON bodies are transport errors."""
        request_mock.return_value = response(content=b'<html>')
        request_mock.return_value.json.side_effect = ValueError()
        res = self.gcs._request(URL)
        self.assertIsInstance(res, result.TransportError)

    @mock.patch('requests.request')
    def test_request_token_error(self, request_mock):
        """Failing to get a token is a transport error."""
        type(self.creds).authorization = mock.PropertyMock(
            side_effect=IOError('no network'))
        res = self.gcs._request(URL)
        self.assertIsInstance(res, result.TransportError)
        self.assertFalse(request_mock.called)
