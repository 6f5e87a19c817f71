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

import collections

from storage_client import constants
from storage_client import errors


REQUIRED_PROPERTIES = (
    constants.PROPERTY_PRIVATE_KEY,
    constants.PROPERTY_CLIENT_EMAIL,
    constants.PROPERTY_CLIENT_ID,
    constants.PROPERTY_USER_EMAIL,
    constants.PROPERTY_PROJECT_ID,
    constants.PROPERTY_API_KEY,
)


_Config = collections.namedtuple('Config', ('private_key', 'client_email',
                                            'client_id', 'user_email',
                                            'project_id', 'api_key'))


class Config(_Config):
    """Service account configuration read from the property store.

    :ivar private_key: PEM encoded private key of the service account.
    :ivar client_email: Service account email, used as the JWT issuer.
    :ivar client_id: Service account client id.
    :ivar user_email: User the service account acts on behalf of.
    :ivar project_id: Project that owns the buckets.
    :ivar api_key: API key of the project.
    """

    __slots__ = ()

    @property
    def service_name(self):
        return constants.SERVICE_NAME_PREFIX + self.user_email

    @property
    def scopes(self):
        return list(constants.SERVICE_SCOPES)

    @property
    def token_property(self):
        """Property store key where the session token is persisted."""
        return constants.TOKEN_PROPERTY_PREFIX + self.service_name


def normalize_private_key(private_key):
    """Turn escaped newline sequences into real newlines."""
    return private_key.replace('\\n', '\n')


def load_config(store):
    """Read the service account configuration from a property store.

    :param store: Store holding the secrets.
    :type store: storage_client.properties.PropertyStore
    :returns: Immutable configuration.
    :rtype: Config
    :raises errors.Configuration: If any required property is missing.
    """
    values = {}
    for key in REQUIRED_PROPERTIES:
        value = store.get_property(key)
        if not value:
            raise errors.Configuration('Missing required property %s' % key)
        values[key.lower()] = value

    values['private_key'] = normalize_private_key(values['private_key'])
    return Config(**values)
