# -*- coding: utf-8 -*-

"""Configuration data model for the Aliyun OSS client."""

from oss_client.bucket import BucketLogging  # noqa
from oss_client.bucket import BucketReferer  # noqa
from oss_client.bucket import BucketWebsite  # noqa
from oss_client.bucket import CORSRule  # noqa
from oss_client.common import UNSET  # noqa
from oss_client.constants import acl  # noqa
from oss_client.constants import key_encoding  # noqa
from oss_client.constants import meta_directive  # noqa
from oss_client.errors import ClientError  # noqa
from oss_client.errors import InvalidFields  # noqa
from oss_client.lifecycle import ExpiryDate  # noqa
from oss_client.lifecycle import ExpiryDays  # noqa
from oss_client.lifecycle import LifeCycleRule  # noqa


__author__ = 'Gorka Eguileor'
__email__ = 'gorka@eguileor.com'
__version__ = '0.1.0'
