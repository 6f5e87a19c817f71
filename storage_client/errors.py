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

from http import client as httplib
import sys


class Error(Exception):
    """Base error for all storage_client operations."""
    pass


class Configuration(Error):
    """A required property is missing from the property store."""
    pass


class Authorization(Error):
    """The service session could not obtain an access token."""

    def __init__(self, message=None, service_name=None):
        super(Authorization, self).__init__(message)
        self.message = message
        self.service_name = service_name

    def __str__(self):
        if self.service_name:
            return '%s:%s' % (self.service_name, self.message)
        return str(self.message)


class Transport(Error):
    """Network or decoding failure while talking to Cloud Storage."""
    pass


class Http(Error):
    """HTTP specific errors."""
    code = None

    def __init__(self, message=None, code=None):
        if code:
            self.code = code
        self.message = message

    def __str__(self):
        msg = 'HTTP Error %s' % self.code
        if self.message:
            msg += ': %s' % self.message
        return msg


http_errors = {
    httplib.REQUEST_TIMEOUT: 'RequestTimeout',
    httplib.INTERNAL_SERVER_ERROR: 'InternalServer',
    httplib.BAD_GATEWAY: 'BadGateway',
    httplib.SERVICE_UNAVAILABLE: 'ServiceUnavailable',
    httplib.GATEWAY_TIMEOUT: 'GatewayTimeout',
    httplib.NOT_FOUND: 'NotFound',
    httplib.BAD_REQUEST: 'BadRequest',
    httplib.FORBIDDEN: 'Forbidden',
    httplib.UNAUTHORIZED: 'Unauthorized',
    httplib.CONFLICT: 'Conflict',
    httplib.PRECONDITION_FAILED: 'PreconditionFailed',
    httplib.REQUESTED_RANGE_NOT_SATISFIABLE: 'InvalidRange',
    429: 'TooManyRequests',
}


def create_http_exception(status_code, message=None):
    """Create an http exception.

    Create an Http exception instance as specific as possible.

    For status codes that have specific exceptions, like with 404
    (NotFound class), those will be returned, but for those that we don't
    have one we will return a generic Http error with the right status code.

    :param status_code: Status code of the http error
    :type status_code: int or string
    :param message: Detailed message for the error
    :type message: str
    :returns: Http exception instance as specific as possible
    :rtype: Http or subclass
    """
    if not isinstance(status_code, int):
        try:
            status_code = int(status_code)
        except ValueError:
            pass

    cls_name = http_errors.get(status_code)
    if cls_name:
        return globals()[cls_name](message)

    return Http(message, status_code)


# Dynamically create all HTTP error classes from http_errors dictionary
for status_code, name in http_errors.items():
    new_class = type(name, (Http,),
                     {'__module__': __name__, 'code': status_code})
    sys.modules[__name__ + '.' + name] = new_class
    globals()[new_class.__name__] = new_class
