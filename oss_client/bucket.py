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

from oss_client import common


@common.attrs('enable', 'target_bucket', 'target_prefix')
class BucketLogging(common.Struct):
    """Bucket access logging configuration.

    :ivar enable: Whether access logging is enabled for the bucket.
    :vartype enable: bool

    :ivar target_bucket: Name of the bucket where access logs are stored.
    :vartype target_bucket: string

    :ivar target_prefix: Prefix for the access log objects.
    :vartype target_prefix: string

    Enable logging:
        BucketLogging(enable=True, target_bucket='logs',
                      target_prefix='my-log')

    Disable logging:
        BucketLogging(enable=False)
    """

    def is_enabled(self):
        """Return True only if enable is exactly True."""
        return self.enable is True


@common.attrs('enable', 'index', 'error')
class BucketWebsite(common.Struct):
    """Static website hosting configuration of a bucket.

    :ivar enable: Whether website hosting is enabled for the bucket.
    :vartype enable: bool

    :ivar index: Key of the object served as index page.
    :vartype index: string

    :ivar error: Key of the object served as error page.
    :vartype error: string
    """

    def is_enabled(self):
        """Return True only if enable is exactly True."""
        return self.enable is True


@common.attrs('allow_empty', 'whitelist')
class BucketReferer(common.Struct):
    """Referer policy of a bucket.

    :ivar allow_empty: Whether requests without a Referer header are allowed.
    :vartype allow_empty: bool

    :ivar whitelist: Allowed referers, in order.
    :vartype whitelist: list of strings
    """

    def allows_empty_referer(self):
        """Return True only if allow_empty is exactly True."""
        return self.allow_empty is True


@common.attrs('allowed_origins', 'allowed_methods', 'allowed_headers',
              'expose_headers', 'max_age_seconds')
class CORSRule(common.Struct):
    """Cross-origin resource sharing rule of a bucket.

    :ivar allowed_origins: Origins allowed to make cross-origin requests.
    :vartype allowed_origins: list of strings

    :ivar allowed_methods: HTTP methods allowed for cross-origin requests.
    :vartype allowed_methods: list of strings

    :ivar allowed_headers: Headers allowed in preflight requests.
    :vartype allowed_headers: list of strings

    :ivar expose_headers: Response headers that browsers can access.
    :vartype expose_headers: list of strings

    :ivar max_age_seconds: Seconds a browser can cache a preflight response.
    :vartype max_age_seconds: int
    """
