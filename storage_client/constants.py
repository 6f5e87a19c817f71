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

# ENDPOINTS

#: Cloud Storage JSON API base for bucket and object metadata requests.
BASE_URL = 'https://storage.googleapis.com/storage/v1'

#: Cloud Storage JSON API base for media uploads.
UPLOAD_URL = 'https://storage.googleapis.com/upload/storage/v1'

#: OAuth 2.0 endpoint used for the JWT bearer token exchange.
TOKEN_URI = 'https://oauth2.googleapis.com/token'


# CREDENTIAL SCOPES

SCOPE_BASE_URL = 'https://www.googleapis.com/auth/'

#: Cloud permissions: full access to all Google Cloud resources.
SCOPE_CLOUD = SCOPE_BASE_URL + 'cloud-platform'

#: Writer permissions: For buckets lets a user list, create, overwrite, and
#: delete objects in a bucket.  You cannot apply this permission to objects.
SCOPE_WRITER = SCOPE_BASE_URL + 'devstorage.read_write'

#: Owner permissions: For buckets gives a user READER and WRITER permissions on
#: the bucket.  It also lets a user read and write bucket metadata, including
#: ACLs.  For objects, gives a user READER access.  It also lets a
#: user read and write object metadata, including ACLs.
SCOPE_OWNER = SCOPE_BASE_URL + 'devstorage.full_control'

#: Scopes requested by every service session.
SERVICE_SCOPES = (SCOPE_CLOUD, SCOPE_WRITER, SCOPE_OWNER)

#: Prefix of the service name, the user email is appended to it.
SERVICE_NAME_PREFIX = 'storage-client:'


# PROPERTY STORE KEYS

PROPERTY_PRIVATE_KEY = 'PRIVATE_KEY'
PROPERTY_CLIENT_EMAIL = 'CLIENT_EMAIL'
PROPERTY_CLIENT_ID = 'CLIENT_ID'
PROPERTY_USER_EMAIL = 'USER_EMAIL'
PROPERTY_PROJECT_ID = 'PROJECT_ID'
PROPERTY_API_KEY = 'API_KEY'

#: Prefix of the property holding the persisted token of a service session.
TOKEN_PROPERTY_PREFIX = 'oauth2.'


# STORAGE CLASSES

#: Standard Storage class:  High availability, low latency (time to first byte
#: is typically tens of milliseconds).  Use cases: Storing data that requires
#: low latency access or data that is frequently accessed ("hot" objects), such
#: as serving website content, interactive workloads, or gaming and mobile
#: applications.
STORAGE_STANDARD = 'STANDARD'

#: Cloud Storage Nearline class: Slightly lower availability and slightly
#: higher latency than Standard Storage but with a lower cost.  Use cases: Data
#: you do not expect to access frequently (i.e., no more than once per month).
STORAGE_NEARLINE = 'NEARLINE'

#: Coldline class: Very low cost storage for data accessed less than once a
#: quarter.
STORAGE_COLDLINE = 'COLDLINE'

#: Archive class: Lowest cost storage for data accessed less than once a year.
STORAGE_ARCHIVE = 'ARCHIVE'


# BUCKET DEFAULTS

#: Location used for new buckets unless the caller provides one.
DEFAULT_LOCATION = 'US-WEST1'

#: Storage class used for new buckets unless the caller provides one.
DEFAULT_STORAGE_CLASS = STORAGE_STANDARD


# REQUEST PARAMETERS

ALT_JSON = 'json'
ALT_MEDIA = 'media'
UPLOAD_MULTIPART = 'multipart'
