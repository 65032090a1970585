# encoding: utf-8
#
# Copyright (C) 2008-2009 Alec Thomas <alec@swapoff.org
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

"""Utility classes and functions."""


__all__ = ['IdentityCache', 'is_dunder', 'join_path']


class IdentityCache(object):
    """Memoize constructed objects by key.

    Each mock host owns exactly one cache, so repeated access to the same
    attribute returns the very same object.

    >>> cache = IdentityCache()
    >>> 'save' in cache
    False
    >>> first = cache.fetch('save', lambda key: [key])
    >>> first
    ['save']
    >>> cache.fetch('save', lambda key: [key]) is first
    True

    Absent keys yield the default:

    >>> cache.get('load') is None
    True

    Values can also be stored explicitly:

    >>> cache.put('load', 'value')
    >>> list(cache)
    ['save', 'load']
    """

    def __init__(self):
        self._values = {}

    def get(self, key, default=None):
        return self._values.get(key, default)

    def put(self, key, value):
        self._values[key] = value

    def fetch(self, key, factory):
        """Return the value cached under key, building it on first use.

        :param key: Cache key.
        :param factory: Called as factory(key) at most once per key.
        :returns: The cached value.
        """
        try:
            return self._values[key]
        except KeyError:
            value = self._values[key] = factory(key)
            return value

    def __contains__(self, key):
        return key in self._values

    def __iter__(self):
        return iter(self._values)

    def __len__(self):
        return len(self._values)

    def __repr__(self):
        return 'IdentityCache(%r)' % list(self._values)


def is_dunder(name):
    """Is name a special "__name__" attribute?

    >>> is_dunder('__await__')
    True
    >>> is_dunder('_private')
    False
    """
    return len(name) > 4 and name.startswith('__') and name.endswith('__')


def join_path(parent, name):
    """Join a dotted mock path.

    >>> join_path('UserRepository', 'save')
    'UserRepository.save'
    >>> join_path(None, 'save')
    'save'
    """
    if parent:
        return parent + '.' + name
    return name


if __name__ == '__main__':
    import doctest
    doctest.testmod()
