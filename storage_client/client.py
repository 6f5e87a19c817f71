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

from storage_client import bucket
from storage_client import config as gcs_config
from storage_client import credentials as gcs_credentials
from storage_client import gcs_object
from storage_client import result


__all__ = ('Client', 'init', 'OPERATIONS')


LOG = logging.getLogger(__name__)

#: Operation table names and the Client methods they map to.
OPERATIONS = (
    ('createBucket', 'create_bucket'),
    ('getBucket', 'get_bucket'),
    ('listBuckets', 'list_buckets'),
    ('updateBucket', 'update_bucket'),
    ('deleteBucket', 'delete_bucket'),
    ('createObject', 'create_object'),
    ('getObject', 'get_object'),
    ('listObjects', 'list_objects'),
    ('updateObject', 'update_object'),
    ('deleteObject', 'delete_object'),
)


class Client(bucket.BucketOperations, gcs_object.ObjectOperations):
    """Cloud Storage client bound to one service session and project."""

    def __init__(self, config, credentials):
        """Initialize a Client.

        :param config: Configuration loaded from the property store.
        :type config: storage_client.config.Config
        :param credentials: Service session used to authorize requests.
        :type credentials: storage_client.credentials.Credentials
        """
        super(Client, self).__init__(credentials, config.project_id)
        self.config = config

    @classmethod
    def from_properties(cls, store):
        """Create a Client from the secrets in a property store.

        No token is requested, use init() to also check access.
        """
        config = gcs_config.load_config(store)
        return cls(config, gcs_credentials.Credentials(config, store))

    @property
    def service_name(self):
        return self.config.service_name

    @property
    def operations(self):
        """Dictionary with the ten storage operations by their table name."""
        return {name: getattr(self, method) for name, method in OPERATIONS}

    def __repr__(self):
        return ("%s.%s('%s') #project: %s" %
                (self.__module__, self.__class__.__name__, self.service_name,
                 self.project_id))


def init(store):
    """Create a Client and make sure its service session is authorized.

    :param store: Property store with the service account secrets, also used
                  to persist tokens.
    :type store: storage_client.properties.PropertyStore
    :returns: Success with the Client as value, or AuthorizationError if no
              token could be obtained.
    :rtype: storage_client.result.Result
    :raises storage_client.errors.Configuration: If a secret is missing.
    """
    config = gcs_config.load_config(store)

    # The private key is parsed when the session is built
    try:
        credentials = gcs_credentials.Credentials(config, store)
    except gcs_credentials.TOKEN_ERRORS as exc:
        message = str(exc) or exc.__class__.__name__
        LOG.error('%s:%s', config.service_name, message)
        store.delete_property(config.token_property)
        return result.AuthorizationError(config.service_name, message)

    if not credentials.has_access():
        LOG.error('%s:%s', config.service_name, credentials.last_error)
        credentials.reset()
        return result.AuthorizationError(config.service_name,
                                         credentials.last_error)

    return result.Success(Client(config, credentials))
