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
import threading

import httplib2
from oauth2client import client as oauth2_client
from oauth2client import service_account

from storage_client import constants


LOG = logging.getLogger(__name__)

# oauth2client logs every token refresh at INFO level
logging.getLogger('oauth2client').setLevel(logging.WARNING)

#: Errors that mean we could not get a token from the OAuth 2.0 endpoint.
TOKEN_ERRORS = (oauth2_client.Error, httplib2.HttpLib2Error, EnvironmentError,
                ValueError)


class PropertyStorage(oauth2_client.Storage):
    """oauth2client Storage that persists tokens in a property store."""

    def __init__(self, store, key):
        super(PropertyStorage, self).__init__(lock=threading.Lock())
        self._store = store
        self._key = key

    @property
    def key(self):
        return self._key

    def locked_get(self):
        content = self._store.get_property(self._key)
        if not content:
            return None

        try:
            credentials = oauth2_client.Credentials.new_from_json(content)
        except (ValueError, KeyError, ImportError, AttributeError):
            LOG.warning('Discarding unreadable token stored in %s', self._key)
            return None

        credentials.set_store(self)
        LOG.debug('Loaded persisted token from %s', self._key)
        return credentials

    def locked_put(self, credentials):
        self._store.set_property(self._key, credentials.to_json())
        LOG.debug('Persisted token in %s', self._key)

    def locked_delete(self):
        self._store.delete_property(self._key)


class Credentials(object):
    """Service session used to authorize every Cloud Storage request."""

    def __init__(self, config, store, token_uri=constants.TOKEN_URI):
        """Initialize the service account session.

        Tokens are minted with a JWT bearer grant signed with the configured
        private key, on behalf of config.user_email, and persisted in the
        property store so other processes can reuse them until they expire.

        :param config: Service account configuration.
        :type config: storage_client.config.Config
        :param store: Property store where tokens will be persisted.
        :type store: storage_client.properties.PropertyStore
        :param token_uri: OAuth 2.0 token endpoint.
        :type token_uri: String
        """
        self.service_name = config.service_name
        self.last_error = None

        keyfile_dict = {
            'type': oauth2_client.SERVICE_ACCOUNT,
            'client_email': config.client_email,
            'client_id': config.client_id,
            'private_key': config.private_key,
            'private_key_id': None,
            'token_uri': token_uri,
        }
        service_credentials = service_account.ServiceAccountCredentials
        credentials = service_credentials.from_json_keyfile_dict(
            keyfile_dict, scopes=config.scopes, token_uri=token_uri)
        credentials = credentials.create_delegated(config.user_email)

        self._storage = PropertyStorage(store, config.token_property)
        credentials.set_store(self._storage)
        self._credentials = credentials

    @property
    def storage(self):
        return self._storage

    @property
    def access_token(self):
        """Return a valid access token, refreshing it if needed."""
        return self._credentials.get_access_token().access_token

    @property
    def authorization(self):
        """Authorization header value for GCS requests."""
        return 'Bearer ' + self.access_token

    def has_access(self):
        """Check that we can get an access token.

        On failure the error message is available in last_error.
        """
        try:
            self._credentials.get_access_token()
        except TOKEN_ERRORS as exc:
            self.last_error = str(exc) or exc.__class__.__name__
            return False

        self.last_error = None
        return True

    def reset(self):
        """Forget the current token and any token persisted for it."""
        self._credentials.access_token = None
        self._credentials.token_expiry = None
        self._storage.delete()
