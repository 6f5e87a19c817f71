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

__all__ = ('Blob', 'ObjectOperations')


import mimetypes
import os

import requests

from storage_client import base
from storage_client import constants
from storage_client import headers
from storage_client import utils


class Blob(object):
    """Named piece of data to upload as an object.

    :ivar name: Name the object will have in the bucket.
    :vartype name: string

    :ivar content_type: Full MIME type of the data, like 'image/png'.
    :vartype content_type: string

    :ivar data: Contents of the object.
    :vartype data: bytes or string
    """

    def __init__(self, name, data, content_type=None):
        self.name = name
        self.data = data
        self.content_type = content_type

    @classmethod
    def from_path(cls, path, content_type=None, name=None):
        """Create a Blob with the contents of a local file.

        :param path: File to read.
        :type path: String
        :param content_type: MIME type of the file, guessed from the file
                             extension if not provided.
        :type content_type: String
        :param name: Object name, defaults to the file's base name.
        :type name: String
        """
        if not content_type:
            content_type = mimetypes.guess_type(path)[0]
        with open(path, 'rb') as f:
            data = f.read()
        return cls(name or os.path.basename(path), data, content_type)

    def get_bytes(self):
        if isinstance(self.data, str):
            return self.data.encode('utf-8')
        return self.data

    def __repr__(self):
        return "%s.%s('%s') #content_type: %s" % (
            self.__module__, self.__class__.__name__, self.name,
            self.content_type)


class ObjectOperations(base.GCS):
    """Object resource operations.

    Every method accepts a params dictionary with any of the query parameters
    documented for the matching JSON API method at
    https://cloud.google.com/storage/docs/json_api/v1/objects and returns a
    storage_client.result.Result.
    """

    def create_object(self, blob, bucket, params=None):
        """Upload a blob as a new object.

        The Content-Type header is resolved from the subtype of the blob's
        content type, so 'image/png' is sent as 'image/png' but unknown types
        are sent as 'text/plain'.

        :param blob: Data to upload.
        :type blob: Blob
        :param bucket: Name of the destination bucket.
        :type bucket: String
        :param params: Extra query parameters.
        :type params: dict
        :returns: Created object resource on success.
        :rtype: storage_client.result.Result
        """
        params = utils.merge_params(params, name=blob.name,
                                    uploadType=constants.UPLOAD_MULTIPART)
        url = self._url('/b/', bucket, '/o', base=self.UPLOAD_URL,
                        params=params)
        return self._request(
            url, 'POST',
            headers=headers.content_type(headers.subtype(blob.content_type)),
            payload=blob.get_bytes())

    def get_object(self, name, bucket, params=None, get_media=False):
        """Get object metadata or its contents.

        :param name: Name of the object.
        :type name: String
        :param bucket: Name of the bucket holding the object.
        :type bucket: String
        :param params: Extra query parameters.
        :type params: dict
        :param get_media: Return the object's data instead of its metadata.
        :type get_media: bool
        :returns: Metadata dictionary, or raw bytes if get_media is True.
        :rtype: storage_client.result.Result
        """
        alt = constants.ALT_MEDIA if get_media else constants.ALT_JSON
        params = utils.merge_params(params, alt=alt)
        url = self._url('/b/', bucket, '/o/', name, params=params)
        return self._request(url, 'GET', parse=not get_media)

    def list_objects(self, bucket, params=None):
        """List one page of objects in a bucket."""
        return self._request(self._url('/b/', bucket, '/o', params=params),
                             'GET')

    def update_object(self, name, bucket, payload=None, params=None):
        """Patch object metadata, nothing is sent if payload is empty."""
        body = utils.to_json(payload) if payload else None
        url = self._url('/b/', bucket, '/o/', name, params=params)
        return self._request(url, 'PATCH',
                             headers=headers.content_type('json'),
                             payload=body)

    def delete_object(self, name, bucket):
        return self._request(self._url('/b/', bucket, '/o/', name), 'DELETE',
                             ok=(requests.codes.ok, requests.codes.no_content))
