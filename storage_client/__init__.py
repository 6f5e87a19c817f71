# -*- coding: utf-8 -*-

"""Client Library for the Google Cloud Storage JSON API."""

from storage_client.client import Client, init  # noqa
from storage_client.config import Config, load_config  # noqa
from storage_client.credentials import Credentials  # noqa
from storage_client.gcs_object import Blob  # noqa
from storage_client.headers import content_type  # noqa
from storage_client.properties import DictPropertyStore  # noqa
from storage_client.properties import JsonFilePropertyStore  # noqa
from storage_client.properties import PropertyStore  # noqa
from storage_client.result import AuthorizationError  # noqa
from storage_client.result import HttpError  # noqa
from storage_client.result import Success  # noqa
from storage_client.result import TransportError  # noqa


__author__ = 'Gorka Eguileor'
__email__ = 'gorka@eguileor.com'
__version__ = '0.1.0'
