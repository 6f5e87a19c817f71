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

import logging

import requests

from storage_client import constants
from storage_client import credentials as gcs_credentials
from storage_client import result
from storage_client import utils


LOG = logging.getLogger(__name__)

#: Failures that end a request without an HTTP status to report.
REQUEST_ERRORS = ((requests.RequestException, ValueError) +
                  gcs_credentials.TOKEN_ERRORS)


class GCS(object):
    URL = constants.BASE_URL
    UPLOAD_URL = constants.UPLOAD_URL

    def __init__(self, credentials, project_id=None):
        """Base GCS initialization.

        :param credentials: credentials to use for accessing GCS
        :type credentials: storage_client.credentials.Credentials
        :param project_id: Project that owns the buckets.
        :type project_id: String
        """
        self.credentials = credentials
        self.project_id = project_id

    def _url(self, *segments, **kwargs):
        """Build a request URL from quoted path segments and query params.

        :param segments: Literal path parts, odd positions get quoted.
        :param base: Alternative base url, defaults to URL.
        :param params: Query params to append.
        """
        base = kwargs.get('base') or self.URL
        path = ''.join(utils.quote(s) if i % 2 else s
                       for i, s in enumerate(segments))
        return base + path + utils.build_query_params(kwargs.get('params'))

    def _request(self, url, op='GET', headers=None, payload=None, parse=True,
                 ok=(requests.codes.ok,)):
        """Request actions on a GCS resource.

        Nothing is raised from here, failures are logged and returned as
        result.HttpError or result.TransportError.

        :param url: Full url of the resource, including query string.
        :type url: String
        :param op: Operation to perform (GET, POST, PATCH, DELETE).
        :type op: String
        :param headers: Headers to send in the request.  Authorization will be
                        added.
        :type headers: dict
        :param payload: Body to send in the request, sent as is.
        :type payload: String or bytes
        :param parse: If response body should be decoded as JSON.
        :type parse: bool
        :param ok: Response status codes to consider as OK.
        :type ok: Iterable of integer numbers
        :returns: Outcome of the request.
        :rtype: storage_client.result.Result
        """
        try:
            request_headers = {
                'Authorization': self.credentials.authorization,
            }
            if headers:
                request_headers.update(headers)

            LOG.debug('%s %s', op, url)
            r = requests.request(op, url, headers=request_headers,
                                 data=payload)

            if r.status_code not in ok:
                LOG.warning('%s Status: %s', url, r.status_code)
                return result.HttpError(r)

            if not r.content:
                return result.Success()
            if not parse:
                return result.Success(r.content)
            return result.Success(r.json())

        except REQUEST_ERRORS as exc:
            LOG.error('Cloud Storage Error: %s', exc)
            return result.TransportError(exc)
