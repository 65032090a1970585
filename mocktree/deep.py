# encoding: utf-8
#
# Copyright (C) 2008-2009 Alec Thomas <alec@swapoff.org
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

"""Deep mocks: mock trees of unbounded depth.

Every attribute of a deep mock is a :class:`Node`, which is at the same
time a stub that can be called and configured, and a deep mock that can be
navigated further. Nothing has to be declared up front:

>>> service = deep_mock(name='service')
>>> _ = service.auth.session.token.mock_return_value('t0k3n')
>>> service.auth.session.token()
't0k3n'

Navigating a node does not touch its stub, and calling it does not touch
its children:

>>> _ = service.auth('admin')
>>> service.auth.spy().call_count
1
>>> service.auth.session.spy().call_count
0

spy() returns the stub a node forwards calls to, for assertions:

>>> service.auth.spy().assert_called_once_with('admin')

A node forwards the stub's own attributes (return_value, call_count,
mock_return_value, assert_called_with, ...) to the stub, and ``spy`` is
reserved. A domain attribute with one of those names is still reachable with
:func:`get_child`:

>>> get_child(service.auth, 'called') is service.auth.called
False
>>> service.auth.called
True
"""

from mocktree.core import ReadOnlyMockError
from mocktree.logging import log
from mocktree.shallow import ShallowMock, fetch_stub
from mocktree.stub import SPY, STUB_ATTRIBUTES, Stub
from mocktree.util import IdentityCache, is_dunder, join_path


__all__ = ['Node', 'DeepMock', 'deep_mock', 'get_stub', 'get_child']


class DeepMock(object):
    """Hosts one lazily created :class:`Node` per accessed attribute.

    Its own state is kept under mangled names, so every ordinary attribute
    name, private ones included, is free for mocking.
    """

    def __init__(self, name=None):
        object.__setattr__(self, '_DeepMock__name', name)
        object.__setattr__(self, '_DeepMock__nodes', IdentityCache())

    def __getattr__(self, name):
        if is_dunder(name):
            raise AttributeError(name)
        return _fetch_node(self, name)

    def __setattr__(self, name, value):
        raise ReadOnlyMockError(name, repr(self))

    def __delattr__(self, name):
        raise ReadOnlyMockError(name, repr(self))

    def __dir__(self):
        return sorted(self.__nodes)

    def __repr__(self):
        return '<DeepMock %s>' % (self.__name or hex(id(self)))


class Node(object):
    """A mock that is both a callable stub and a navigable deep mock.

    Attribute lookup is resolved in this order:

    1. ``spy`` returns a function giving the owned :class:`Stub`.
    2. Names on the stub's own surface (:data:`STUB_ATTRIBUTES`) are
       forwarded to the stub.
    3. Anything else resolves to a child node of the nested
       :class:`DeepMock`, created on first access.

    Calling the node always forwards to the owned stub.
    """

    def __init__(self, name=None):
        object.__setattr__(self, '_Node__name', name)
        object.__setattr__(self, '_Node__stub', Stub(name=name))
        object.__setattr__(self, '_Node__children', None)

    def spy(self):
        """Return the stub this node forwards calls to."""
        return self.__stub

    def __call__(self, /, *args, **kwargs):
        return self.__stub(*args, **kwargs)

    def __getattr__(self, name):
        if name in STUB_ATTRIBUTES:
            return getattr(self.__stub, name)
        if is_dunder(name):
            raise AttributeError(name)
        return _fetch_node(_namespace(self), name)

    def __setattr__(self, name, value):
        if name in STUB_ATTRIBUTES and name != SPY:
            setattr(self.__stub, name, value)
        else:
            raise ReadOnlyMockError(name, repr(self))

    def __delattr__(self, name):
        raise ReadOnlyMockError(name, repr(self))

    def __dir__(self):
        names = set(STUB_ATTRIBUTES)
        if self.__children is not None:
            names.update(dir(self.__children))
        return sorted(names)

    def __repr__(self):
        return '<Node %s>' % (self.__name or hex(id(self)))


def _fetch_node(host, name):
    parent = object.__getattribute__(host, '_DeepMock__name')
    nodes = object.__getattribute__(host, '_DeepMock__nodes')

    def create_node(name):
        path = join_path(parent, name)
        log.debug('creating node %s', path)
        return Node(path)

    return nodes.fetch(name, create_node)


def _namespace(node):
    children = object.__getattribute__(node, '_Node__children')
    if children is None:
        children = DeepMock(object.__getattribute__(node, '_Node__name'))
        object.__setattr__(node, '_Node__children', children)
    return children


def deep_mock(spec=None, name=None):
    """Create a mock whose attributes are :class:`Node` objects, recursively.

    :param spec: Optional class or interface being mocked. Only used to name
                 the mock; attributes are not checked against it.
    :param name: Name for the mock, defaulting to the name of spec.
    :returns: A :class:`DeepMock`.
    """
    if name is None and spec is not None:
        name = getattr(spec, '__name__', None)
    return DeepMock(name)


def get_stub(obj):
    """Return the stub behind a node, or the stub itself.

    Unlike ``node.spy()`` this cannot collide with a mocked attribute.

    :raises TypeError: If obj is neither a :class:`Node` nor a :class:`Stub`.
    """
    if isinstance(obj, Node):
        return object.__getattribute__(obj, '_Node__stub')
    if isinstance(obj, Stub):
        return obj
    raise TypeError('%r is not a mock node or stub' % (obj,))


def get_child(obj, name):
    """Return the child called name of a node or mock host.

    The reserved ``spy`` name and the stub's own attribute names are not
    special here, so this reaches domain attributes that share those names.

    :raises TypeError: If obj is not a :class:`Node` or a mock host.
    """
    if isinstance(obj, Node):
        return _fetch_node(_namespace(obj), name)
    if isinstance(obj, DeepMock):
        return _fetch_node(obj, name)
    if isinstance(obj, ShallowMock):
        return fetch_stub(obj, name)
    raise TypeError('%r is not a mock node or host' % (obj,))


if __name__ == '__main__':
    import doctest
    doctest.testmod()
