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
test_result
----------------------------------

Tests operation outcomes.
"""

import unittest

import mock

from storage_client import errors
from storage_client import result


class TestResult(unittest.TestCase):

    def test_success(self):
        """Success carries the value."""
        res = result.Success(mock.sentinel.value)
        self.assertTrue(res.ok)
        self.assertTrue(res)
        self.assertEqual(mock.sentinel.value, res.value)
        self.assertEqual(mock.sentinel.value, res.unwrap())

    def test_success_empty(self):
        """Success may have no value."""
        res = result.Success()
        self.assertTrue(res)
        self.assertIsNone(res.unwrap())

    def test_success_equality(self):
        """Successes with the same value are equal."""
        self.assertEqual(result.Success(1), result.Success(1))
        self.assertNotEqual(result.Success(1), result.Success(2))
        self.assertNotEqual(result.Success(1), 1)

    def test_http_error(self):
        """HttpError exposes the raw response."""
        resp = mock.Mock(status_code=404, content=b'Not Found')
        res = result.HttpError(resp)
        self.assertFalse(res.ok)
        self.assertFalse(res)
        self.assertIsNone(res.value)
        self.assertIs(resp, res.response)
        self.assertEqual(404, res.status_code)
        self.assertEqual(b'Not Found', res.body)
        self.assertEqual('HttpError(404)', repr(res))

    def test_http_error_unwrap(self):
        """Unwrapping an HttpError raises the specific exception."""
        res = result.HttpError(mock.Mock(status_code=404, content=b'nf'))
        with self.assertRaises(errors.NotFound) as cm:
            res.unwrap()
        self.assertEqual(b'nf', cm.exception.message)

    def test_http_error_unwrap_generic(self):
        """Unwrapping an HttpError with unknown status raises Http."""
        res = result.HttpError(mock.Mock(status_code=418, content=b''))
        with self.assertRaises(errors.Http) as cm:
            res.unwrap()
        self.assertEqual(418, cm.exception.code)

    def test_transport_error(self):
        """TransportError carries the cause and no value."""
        cause = IOError('boom')
        res = result.TransportError(cause)
        self.assertFalse(res)
        self.assertIsNone(res.value)
        self.assertIs(cause, res.cause)

    def test_transport_error_unwrap(self):
        """Unwrapping a TransportError raises Transport chained to cause."""
        cause = IOError('boom')
        with self.assertRaises(errors.Transport) as cm:
            result.TransportError(cause).unwrap()
        self.assertIs(cause, cm.exception.__cause__)

    def test_authorization_error(self):
        """AuthorizationError formats as service:error."""
        res = result.AuthorizationError('storage-client:a@b', 'invalid_grant')
        self.assertFalse(res)
        self.assertIsNone(res.value)
        self.assertEqual('storage-client:a@b:invalid_grant', str(res))
        with self.assertRaises(errors.Authorization) as cm:
            res.unwrap()
        self.assertEqual('storage-client:a@b', cm.exception.service_name)

    def test_result_is_abstract(self):
        """Only concrete outcomes can be created."""
        self.assertRaises(TypeError, result.Result)
