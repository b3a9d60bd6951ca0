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

import datetime

from oss_client import common


class ExpiryDate(datetime.date):
    """Objects expire on this date (UTC)."""

    @classmethod
    def from_date(cls, value):
        return cls(value.year, value.month, value.day)

    def __repr__(self):
        return '%s(%d, %d, %d)' % (self.__class__.__name__, self.year,
                                   self.month, self.day)


class ExpiryDays(int):
    """Objects expire this many days after their last modification."""

    @property
    def days(self):
        return int(self)

    def __str__(self):
        return str(int(self))

    def __repr__(self):
        return '%s(%d)' % (self.__class__.__name__, self)


def make_expiry(value):
    """Tag an expiry value as ExpiryDate or ExpiryDays.

    Plain dates become ExpiryDate and plain integers become ExpiryDays.  Any
    other value, including already tagged ones, is returned as is.
    """
    if isinstance(value, (ExpiryDate, ExpiryDays)):
        return value
    if type(value) is datetime.date:
        return ExpiryDate.from_date(value)
    if isinstance(value, int) and not isinstance(value, bool):
        return ExpiryDays(value)
    return value


@common.attrs('id', 'enable', 'prefix', 'expiry')
class LifeCycleRule(common.Struct):
    """Lifecycle rule of a bucket.

    :ivar id: Unique id of the rule.
    :vartype id: string

    :ivar enable: Whether the rule is enabled.
    :vartype enable: bool

    :ivar prefix: Prefix of the objects the rule applies to.
    :vartype prefix: string

    :ivar expiry: When objects expire.  An ExpiryDate for an absolute date or
                  an ExpiryDays for a number of days after the last
                  modification of each object.  Plain dates and integers are
                  tagged on construction.
    :vartype expiry: ExpiryDate or ExpiryDays

    Expire on a date:
        LifeCycleRule(id='rule1', enable=True, prefix='foo/',
                      expiry=datetime.date(2016, 1, 1))

    Expire after 15 days:
        LifeCycleRule(id='rule1', enable=True, prefix='foo/', expiry=15)
    """

    def _wrap_value(self, name, value):
        if name == 'expiry':
            return make_expiry(value)
        return value

    def is_enabled(self):
        """Return True only if enable is exactly True."""
        return self.enable is True
