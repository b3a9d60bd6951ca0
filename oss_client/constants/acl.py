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

#: Anonymous users can read and write the bucket or object.
PUBLIC_READ_WRITE = 'public-read-write'

#: Anonymous users can read the bucket or object, writing requires a signed
#: request.
PUBLIC_READ = 'public-read'

#: Every access must be done with a signed request.
PRIVATE = 'private'
