# encoding: utf-8
#
# Copyright (C) 2008-2009 Alec Thomas <alec@swapoff.org
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

"""mocktree - test doubles of any shape, on demand.

Ask for a mock of a class or interface and use it. Attributes, however deeply
nested, are created the first time they are touched:

>>> from mocktree import deep_mock, shallow_mock
>>> repository = shallow_mock()
>>> _ = repository.save.mock_return_value('saved')
>>> repository.save('user')
'saved'

>>> client = deep_mock()
>>> _ = client.auth.service.sign_up.mock_return_value('welcome')
>>> client.auth.service.sign_up('user')
'welcome'
>>> client.auth.service.sign_up.spy().call_args_list
[call('user')]
"""

from importlib.metadata import PackageNotFoundError, version

from mocktree.config import configure, reset, settings
from mocktree.core import ConfigurationError, Error, ReadOnlyMockError
from mocktree.deep import DeepMock, Node, deep_mock, get_child, get_stub
from mocktree.shallow import ShallowMock, shallow_mock
from mocktree.stub import SPY, Result, Stub


__author__ = 'Alec Thomas <alec@swapoff.org>'

__all__ = [
    'Error', 'ReadOnlyMockError', 'ConfigurationError', 'configure', 'reset',
    'settings', 'shallow_mock', 'deep_mock', 'get_stub', 'get_child',
    'ShallowMock', 'DeepMock', 'Node', 'Stub', 'Result', 'SPY',
    ]

# Try and determine the version of mocktree from the installed distribution.
try:
    __version__ = version('mocktree')
except PackageNotFoundError:
    __version__ = None  # unknown
