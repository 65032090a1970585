# encoding: utf-8
#
# Copyright (C) 2008-2009 Alec Thomas <alec@swapoff.org
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

"""Shallow mocks: every attribute is an independent recording stub.

>>> class UserRepository(object):
...   def save(self, user):
...     pass
...   def find_by_id(self, id):
...     pass

>>> repository = shallow_mock(UserRepository)
>>> _ = repository.save.mock_return_value('saved')
>>> repository.save({'name': 'John'})
'saved'

The same attribute is always the same stub:

>>> repository.save is repository.save
True
>>> repository.save.spy().call_count
1

Attributes nobody configured still work, returning None:

>>> repository.find_by_id('1') is None
True
>>> dir(repository)
['find_by_id', 'save']
"""

from mocktree.core import ReadOnlyMockError
from mocktree.logging import log
from mocktree.stub import Stub
from mocktree.util import IdentityCache, is_dunder, join_path


__all__ = ['ShallowMock', 'shallow_mock']


class ShallowMock(object):
    """Hosts one lazily created :class:`Stub` per accessed attribute.

    Its own state is kept under mangled names, so every ordinary attribute
    name, private ones included, is free for mocking.
    """

    def __init__(self, name=None):
        object.__setattr__(self, '_ShallowMock__name', name)
        object.__setattr__(self, '_ShallowMock__stubs', IdentityCache())

    def __getattr__(self, name):
        if is_dunder(name):
            raise AttributeError(name)
        return fetch_stub(self, name)

    def __setattr__(self, name, value):
        raise ReadOnlyMockError(name, repr(self))

    def __delattr__(self, name):
        raise ReadOnlyMockError(name, repr(self))

    def __dir__(self):
        return sorted(self.__stubs)

    def __repr__(self):
        return '<ShallowMock %s>' % (self.__name or hex(id(self)))


def fetch_stub(host, name):
    """Return the stub for attribute name of a :class:`ShallowMock`."""
    parent = object.__getattribute__(host, '_ShallowMock__name')
    stubs = object.__getattribute__(host, '_ShallowMock__stubs')

    def create_stub(name):
        path = join_path(parent, name)
        log.debug('creating stub %s', path)
        return Stub(name=path)

    return stubs.fetch(name, create_stub)


def shallow_mock(spec=None, name=None):
    """Create a mock whose attributes are plain, non-navigable stubs.

    :param spec: Optional class or interface being mocked. Only used to name
                 the mock; attributes are not checked against it.
    :param name: Name for the mock, defaulting to the name of spec.
    :returns: A :class:`ShallowMock`.
    """
    if name is None and spec is not None:
        name = getattr(spec, '__name__', None)
    return ShallowMock(name)


if __name__ == '__main__':
    import doctest
    doctest.testmod()
