# encoding: utf-8
#
# Copyright (C) 2008-2009 Alec Thomas <alec@swapoff.org
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

"""The recording stub every mocked path resolves to.

A Stub is a :class:`mock.Mock` with a small configuration vocabulary on top.
Recording (call_args_list, call_count, assert_called_with, ...) is entirely
Mock's own:

>>> stub = Stub(name='save')
>>> stub('user') is None
True
>>> stub.call_args_list
[call('user')]

Return values are configured persistently, or queued for a single call:

>>> _ = stub.mock_return_value('saved').mock_return_value('first', once=True)
>>> stub(), stub()
('first', 'saved')

Every call's outcome is recorded in order:

>>> [result.kind for result in stub.mock_results]
['return', 'return', 'return']
>>> stub.assert_returned_with('first')

spy() is the escape hatch shared with hybrid nodes. On a plain stub it is
the stub itself:

>>> stub.spy() is stub
True

Stubs are leaves; they cannot be navigated:

>>> stub.anything
Traceback (most recent call last):
  ...
AttributeError: Stub object has no attribute 'anything'
"""

import collections

import mock

from mocktree.config import settings
from mocktree.logging import log


__all__ = ['Stub', 'Result', 'SPY', 'STUB_ATTRIBUTES']


SPY = 'spy'

Result = collections.namedtuple('Result', 'kind value')
Result.__doc__ = """Outcome of one call: kind is "return" or "raise"."""


def _returning(value):
    def behaviour(*args, **kwargs):
        return value
    return behaviour


def _raising(error):
    def behaviour(*args, **kwargs):
        raise error
    return behaviour


def _resolving(value):
    async def resolved():
        return value

    def behaviour(*args, **kwargs):
        return resolved()
    return behaviour


def _rejecting(error):
    async def rejected():
        raise error

    def behaviour(*args, **kwargs):
        return rejected()
    return behaviour


class Stub(mock.Mock):
    """A call recording stand-in for a single function.

    Behaviours configured with once=True are consumed first, one per call, in
    the order they were configured. After that the last persistent behaviour
    applies. Without either, Mock's own return_value and side_effect are used,
    so ``stub.return_value = 1`` still works.

    Unconfigured stubs return None, unless the ``default_return`` setting is
    "mock".

    Unlike a plain Mock, a stub has no automatic child attributes: names
    outside its own surface raise AttributeError, so a misspelt assertion
    fails loudly.
    """

    def __init__(self, *args, **kwargs):
        if settings.default_return == 'none':
            kwargs.setdefault('return_value', None)
        super(Stub, self).__init__(*args, **kwargs)
        self._stub_once = collections.deque()
        self._stub_behaviour = None
        self._stub_results = []
        if self.side_effect is None:
            self.side_effect = self._dispatch

    def __call__(self, /, *args, **kwargs):
        try:
            result = super(Stub, self).__call__(*args, **kwargs)
        except Exception as error:
            self._stub_results.append(Result('raise', error))
            raise
        self._stub_results.append(Result('return', result))
        return result

    def __getattr__(self, name):
        # Only reached for names missing from the instance and the class, ie.
        # Mock's automatic children. A stub mocks one function, so there are
        # none.
        raise AttributeError('Stub object has no attribute %r' % name)

    def spy(self):
        """Return the object recording calls, ie. this stub."""
        return self

    # Configuration
    def mock_return_value(self, value, once=False):
        """Return value when called."""
        return self._configure(_returning(value), once, 'return %r' % (value,))

    def mock_resolved_value(self, value, once=False):
        """Return an awaitable resolving to value when called."""
        return self._configure(_resolving(value), once,
                               'resolve %r' % (value,))

    def mock_rejected_value(self, error, once=False):
        """Return an awaitable raising error when called."""
        return self._configure(_rejecting(error), once, 'reject %r' % (error,))

    def mock_raise(self, error, once=False):
        """Raise error when called."""
        return self._configure(_raising(error), once, 'raise %r' % (error,))

    def mock_implementation(self, function, once=False):
        """Delegate calls, and their arguments, to function."""
        return self._configure(function, once, 'call %r' % (function,))

    # Inspection
    @property
    def mock_results(self):
        """Outcome of every call so far, as :class:`Result` tuples."""
        return list(self._stub_results)

    def assert_returned(self):
        """Assert the stub returned at least once without raising."""
        if not self._returned():
            raise AssertionError('Expected %r to have returned.'
                                 % self._extract_mock_name())

    def assert_returned_times(self, count):
        """Assert the stub returned exactly count times without raising."""
        returned = len(self._returned())
        if returned != count:
            raise AssertionError(
                'Expected %r to have returned %d times. Returned %d times.'
                % (self._extract_mock_name(), count, returned))

    def assert_returned_with(self, value):
        """Assert that some call returned value."""
        returned = self._returned()
        if value not in returned:
            raise AssertionError(
                'Expected %r to have returned %r. Returned: %r'
                % (self._extract_mock_name(), value, returned))

    def reset_mock(self, *args, **kwargs):
        super(Stub, self).reset_mock(*args, **kwargs)
        del self._stub_results[:]
        if kwargs.get('return_value') and settings.default_return == 'none':
            self.return_value = None
        if kwargs.get('side_effect'):
            self._stub_once.clear()
            self._stub_behaviour = None
            self.side_effect = self._dispatch

    # Internal methods
    def _configure(self, behaviour, once, description):
        if once:
            self._stub_once.append(behaviour)
        else:
            self._stub_behaviour = behaviour
        log.debug('%s: %s%s', self._extract_mock_name(), description,
                  ' once' if once else '')
        return self

    def _dispatch(self, *args, **kwargs):
        if self._stub_once:
            behaviour = self._stub_once.popleft()
        else:
            behaviour = self._stub_behaviour
        if behaviour is None:
            return mock.DEFAULT
        return behaviour(*args, **kwargs)

    def _returned(self):
        return [result.value for result in self._stub_results
                if result.kind == 'return']


# The inspection and configuration surface hybrid nodes forward to their stub.
# method_calls is set per instance by Mock, so it is not visible on the class.
STUB_ATTRIBUTES = frozenset(
    [name for name in dir(Stub) if not name.startswith('_')] +
    ['method_calls'])


if __name__ == '__main__':
    import doctest
    doctest.testmod()
