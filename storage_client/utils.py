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

from functools import wraps
import json
from urllib import parse

import requests

from storage_client import errors


def has_attributes(*attributes):
    """Decorator that ensures instance attributes are set before a call."""
    def _has_attributes(f):
        @wraps(f)
        def wrapped(self, *args, **kwargs):
            for attribute in attributes:
                if not getattr(self, attribute, None):
                    raise errors.Configuration(
                        '%(func_name)s needs %(attr)s to be set.' %
                        {'func_name': f.__name__, 'attr': attribute})

            return f(self, *args, **kwargs)
        return wrapped
    return _has_attributes


def quote(segment):
    """Percent-encode a single URL path segment, slashes included."""
    return requests.utils.quote(segment, safe='')


def build_query_params(params):
    """Serialize a flat mapping into a URL query string.

    Keys keep their insertion order, None values are skipped and booleans are
    sent the way the JSON API expects them.

    :returns: '?' followed by the encoded params, or '' if there are none.
    """
    if not params:
        return ''

    query = []
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = 'true' if value else 'false'
        query.append((key, value))

    if not query:
        return ''
    return '?' + parse.urlencode(query)


def merge_params(params, **forced):
    """Return caller params with forced values taking precedence."""
    merged = dict(params or {})
    merged.update(forced)
    return merged


def to_json(data):
    """Compact JSON serialization used for request bodies."""
    return json.dumps(data, separators=(',', ':'))
