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

"""Outcomes returned by every storage operation.

Operations never raise on HTTP or transport failures, they return one of the
classes below instead.  Callers can branch on the type, on the ok attribute,
or call unwrap() to get the value or the matching storage_client.errors
exception.
"""

import abc

from storage_client import errors


class Result(abc.ABC):
    """Base class of all outcomes."""
    ok = False
    value = None

    def __bool__(self):
        return self.ok

    @abc.abstractmethod
    def unwrap(self):
        """Return the value or raise the matching storage_client error."""


class Success(Result):
    """Request succeeded, value holds the decoded body (None if empty)."""
    ok = True

    def __init__(self, value=None):
        self.value = value

    def unwrap(self):
        return self.value

    def __eq__(self, other):
        return isinstance(other, Success) and self.value == other.value

    def __ne__(self, other):
        return not self == other

    def __repr__(self):
        return 'Success(%r)' % (self.value,)


class HttpError(Result):
    """Server answered with a non OK status code.

    :ivar response: Raw response as returned by requests.
    :vartype response: requests.Response
    """

    def __init__(self, response):
        self.response = response

    @property
    def status_code(self):
        return self.response.status_code

    @property
    def body(self):
        return self.response.content

    def unwrap(self):
        raise errors.create_http_exception(self.status_code, self.body)

    def __repr__(self):
        return 'HttpError(%s)' % self.status_code


class TransportError(Result):
    """Request could not be completed or its response could not be decoded.

    :ivar cause: Exception that aborted the request.
    :vartype cause: Exception
    """

    def __init__(self, cause):
        self.cause = cause

    def unwrap(self):
        raise errors.Transport(str(self.cause)) from self.cause

    def __repr__(self):
        return 'TransportError(%r)' % (self.cause,)


class AuthorizationError(Result):
    """Service session could not be authorized during initialization."""

    def __init__(self, service_name, message):
        self.service_name = service_name
        self.message = message

    def unwrap(self):
        raise errors.Authorization(self.message, self.service_name)

    def __str__(self):
        return '%s:%s' % (self.service_name, self.message)

    def __repr__(self):
        return 'AuthorizationError(%r, %r)' % (self.service_name,
                                               self.message)
