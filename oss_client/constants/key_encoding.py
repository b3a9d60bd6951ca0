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

#: Object keys in request and response bodies are url-encoded, so keys with
#: characters that can't be represented in XML can be used.
URL = 'url'

#: All encodings supported for object keys.
ALL = (URL,)


def is_supported(encoding):
    """Check if an encoding type is supported for object keys."""
    return encoding in ALL
