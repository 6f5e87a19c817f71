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

"""Content-Type resolution for request payloads."""

APPLICATION_TYPES = frozenset(('javascript', 'json', 'octet-stream', 'ogg',
                               'pdf', 'x-www-form-urlencoded', 'xml',
                               'x-gzip', 'zip'))

IMAGE_TYPES = frozenset(('gif', 'jpeg', 'png', 'svg+xml', 'tiff', 'x-icon'))

TEXT_TYPES = frozenset(('css', 'csv', 'html', 'plain', 'xml'))

DEFAULT_CONTENT_TYPE = 'text/plain'

# Order matters: 'xml' is in both application and text sets and the first
# match wins.
_SUPERTYPES = (
    ('application', APPLICATION_TYPES),
    ('image', IMAGE_TYPES),
    ('text', TEXT_TYPES),
)


def resolve(mime_type):
    """Return the full MIME type for a subtype token.

    :param mime_type: Subtype half of a MIME type, like 'json' or 'png'.
    :type mime_type: String
    :returns: Full MIME type, 'text/plain' for unknown tokens.
    :rtype: String
    """
    for supertype, subtypes in _SUPERTYPES:
        if mime_type in subtypes:
            return supertype + '/' + mime_type
    return DEFAULT_CONTENT_TYPE


def content_type(mime_type):
    """Build the Content-Type header mapping for a subtype token."""
    return {'Content-Type': resolve(mime_type)}


def subtype(full_mime_type):
    """Extract the subtype token from a full MIME type like 'image/png'."""
    if not full_mime_type:
        return None
    return full_mime_type.partition(';')[0].partition('/')[2].strip() or None
