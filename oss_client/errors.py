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


class Error(Exception):
    """Base error for all oss_client operations."""
    pass


class ClientError(Error):
    """Errors caused by invalid input detected on the client side."""
    pass


class InvalidFields(ClientError):
    """A record was constructed with fields it doesn't declare."""

    def __init__(self, fields):
        self.fields = list(fields)
        self.message = 'Unexpected extra keys: %s' % ', '.join(
            str(f) for f in self.fields)
        super(InvalidFields, self).__init__(self.fields)

    def __str__(self):
        return self.message
