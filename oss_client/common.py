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

import logging

from oss_client import errors


LOG = logging.getLogger(__name__)


class _Unset(object):
    """Marker for fields that were not provided on construction."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(_Unset, cls).__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __str__(self):
        return ''

    def __repr__(self):
        return 'UNSET'

    def __reduce__(self):
        return (_Unset, ())


#: Value of any declared field that was not provided on construction.
UNSET = _Unset()

# Instance attributes used by Struct itself
_RESERVED = frozenset(['_values'])


def _field_getter(name):
    def getter(self):
        # Subclasses that redeclare their fields still inherit the parent's
        # properties.
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError("'%s' object has no field '%s'" %
                                 (self.__class__.__name__, name))
    getter.__name__ = name
    return property(getter, doc='Value of the %s field.' % name)


def attrs(*names):
    """Declare the fields of a Struct subclass.

    Class decorator that stores the ordered field names in the class and
    creates a read-only property for each of them.

    @attrs('enable', 'target_bucket')
    class Logging(Struct):
        pass

    Logging(enable=True).enable  -> True
    Logging(enable=True).target_bucket  -> UNSET

    Fields can only be declared once per class, must be unique and can't
    reuse the name of a Struct or class attribute.
    """
    def _attrs(cls):
        if '_attrs' in cls.__dict__:
            raise TypeError('Fields of %s are already declared.' %
                            cls.__name__)
        if not names:
            raise TypeError('%s must declare at least one field.' %
                            cls.__name__)
        if len(set(names)) != len(names):
            raise TypeError('%s declares duplicated fields: %s' %
                            (cls.__name__, ', '.join(names)))

        inherited = cls._attrs or ()
        clashes = [name for name in names
                   if name in _RESERVED or hasattr(Struct, name) or
                   (hasattr(cls, name) and name not in inherited)]
        if clashes:
            raise TypeError('%s declares reserved fields: %s' %
                            (cls.__name__, ', '.join(clashes)))

        cls._attrs = tuple(names)
        for name in names:
            setattr(cls, name, _field_getter(name))
        return cls
    return _attrs


class Struct(object):
    """Base class for configuration records.

    Subclasses declare their fields with the `attrs` decorator and get a
    constructor that only accepts those fields, read-only accessors and a
    string representation listing all fields in declaration order.

    Fields that are not provided on construction are set to UNSET.
    """

    _attrs = None

    def __init__(self, opts=None, /, **kwargs):
        """Initialize the record.

        :param opts: Field values keyed by field name.  Positional only, so a
                     field may be named opts.
        :type opts: dict
        :param kwargs: Field values, they take precedence over opts.
        :raises InvalidFields: If any key is not a declared field.
        """
        if not self._attrs:
            raise TypeError('%s has no declared fields.' %
                            self.__class__.__name__)

        values = dict(opts or {})
        values.update(kwargs)

        extra_keys = [key for key in values if key not in self._attrs]
        if extra_keys:
            LOG.debug('Rejecting %s with unexpected keys: %s',
                      self.__class__.__name__, extra_keys)
            raise errors.InvalidFields(extra_keys)

        super(Struct, self).__setattr__(
            '_values',
            {name: self._wrap_value(name, values.get(name, UNSET))
             for name in self._attrs})

    def _wrap_value(self, name, value):
        """Hook for subclasses to tag the value stored for a field."""
        return value

    @classmethod
    def fields(cls):
        """Return the declared field names in declaration order."""
        return cls._attrs

    def describe(self):
        """Return a human readable description of all fields.

        Only meant for diagnostics, values are not escaped.
        """
        return ', '.join('%s: %s' % (name, self._values[name])
                         for name in self._attrs)

    def __setattr__(self, name, value):
        raise AttributeError("'%s' object is read-only" %
                             self.__class__.__name__)

    def __delattr__(self, name):
        raise AttributeError("'%s' object is read-only" %
                             self.__class__.__name__)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._values == other._values

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __str__(self):
        return self.describe()

    def __repr__(self):
        return '%s.%s(%s)' % (self.__module__, self.__class__.__name__,
                              ', '.join('%s=%r' % (name, self._values[name])
                                        for name in self._attrs))
