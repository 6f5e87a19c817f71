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

import requests

from storage_client import base
from storage_client import constants
from storage_client import headers
from storage_client import utils


class BucketOperations(base.GCS):
    """Bucket resource operations.

    Every method accepts a params dictionary with any of the query parameters
    documented for the matching JSON API method at
    https://cloud.google.com/storage/docs/json_api/v1/buckets and returns a
    storage_client.result.Result.
    """

    def _has_project_id(f):
        return utils.has_attributes('project_id', 'credentials')(f)

    @_has_project_id
    def create_bucket(self, name, payload=None, params=None):
        """Create a new bucket in the project.

        The bucket gets the project id appended to its name, and is created in
        constants.DEFAULT_LOCATION with constants.DEFAULT_STORAGE_CLASS unless
        payload says otherwise.

        :param name: Name of the bucket, without the project suffix.
        :type name: String
        :param payload: Bucket resource fields overriding the defaults.
        :type payload: dict
        :param params: Extra query parameters.
        :type params: dict
        :returns: Created bucket resource on success.
        :rtype: storage_client.result.Result
        """
        params = utils.merge_params(params, project=self.project_id,
                                    alt=constants.ALT_JSON)
        body = {
            'name': name + '_' + self.project_id,
            'location': constants.DEFAULT_LOCATION,
            'storageClass': constants.DEFAULT_STORAGE_CLASS,
        }
        if payload:
            body.update(payload)

        return self._request(self._url('/b', params=params), 'POST',
                             headers=headers.content_type('json'),
                             payload=utils.to_json(body))

    def get_bucket(self, name, params=None):
        """Get bucket metadata."""
        return self._request(self._url('/b/', name, params=params), 'GET')

    @_has_project_id
    def list_buckets(self, params=None):
        """List buckets of the project.

        Only the page requested by params (pageToken, maxResults) is
        returned, following nextPageToken is up to the caller.
        """
        params = utils.merge_params(params, project=self.project_id)
        return self._request(self._url('/b', params=params), 'GET')

    def update_bucket(self, name, payload=None, params=None):
        """Patch bucket metadata.

        :param name: Name of the bucket.
        :type name: String
        :param payload: Bucket resource fields to change.  Nothing is sent if
                        it's empty.
        :type payload: dict
        :param params: Extra query parameters.
        :type params: dict
        """
        body = utils.to_json(payload) if payload else None
        return self._request(self._url('/b/', name, params=params), 'PATCH',
                             headers=headers.content_type('json'),
                             payload=body)

    def delete_bucket(self, name):
        """Permanently delete an empty bucket."""
        return self._request(self._url('/b/', name), 'DELETE',
                             ok=(requests.codes.ok, requests.codes.no_content))

    del _has_project_id
