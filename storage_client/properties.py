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

"""Host managed key-value stores for secrets and persisted tokens."""

import abc
import json
import logging
import os
import threading


LOG = logging.getLogger(__name__)


class PropertyStore(abc.ABC):
    """String key-value store owned by the hosting application."""

    @abc.abstractmethod
    def get_property(self, key):
        """Return the value stored for key or None if it's not there."""

    @abc.abstractmethod
    def set_property(self, key, value):
        """Store value under key."""

    @abc.abstractmethod
    def delete_property(self, key):
        """Remove key, missing keys are ignored."""


class DictPropertyStore(PropertyStore):
    """Property store backed by any mutable mapping.

    Useful to read secrets from os.environ or to keep everything in memory.
    """

    def __init__(self, data=None):
        self._data = {} if data is None else data

    def get_property(self, key):
        return self._data.get(key)

    def set_property(self, key, value):
        self._data[key] = value

    def delete_property(self, key):
        self._data.pop(key, None)


class JsonFilePropertyStore(PropertyStore):
    """Property store persisted as a JSON document on disk.

    Every operation reads the file again so tokens written by other processes
    are seen.
    """

    def __init__(self, filename):
        self._filename = filename
        self._lock = threading.Lock()

    @property
    def filename(self):
        return self._filename

    def _read(self):
        try:
            with open(self._filename, 'r') as f:
                content = f.read()
        except IOError:
            return {}

        if not content:
            return {}
        return json.loads(content)

    def _write(self, data):
        tmp_name = self._filename + '.tmp'
        with open(tmp_name, 'w') as f:
            json.dump(data, f)
        os.replace(tmp_name, self._filename)

    def get_property(self, key):
        with self._lock:
            return self._read().get(key)

    def set_property(self, key, value):
        with self._lock:
            data = self._read()
            data[key] = value
            self._write(data)
        LOG.debug('Stored property %s in %s', key, self._filename)

    def delete_property(self, key):
        with self._lock:
            data = self._read()
            if key not in data:
                return
            del data[key]
            self._write(data)
        LOG.debug('Deleted property %s from %s', key, self._filename)
