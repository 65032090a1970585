# encoding: utf-8
#
# Copyright (C) 2008-2009 Alec Thomas <alec@swapoff.org
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

"""Exceptions shared by all mocktree modules."""


__all__ = ['Error', 'ReadOnlyMockError', 'ConfigurationError']


class Error(Exception):
    """Base mocktree exception."""


class ReadOnlyMockError(Error, AttributeError):
    """An attempt was made to assign to a mocked attribute path.

    The kind of a path is fixed when it is first accessed. Configure the
    underlying stub instead, eg. ``mock.name.mock_return_value('A')``.
    """

    def __str__(self):
        return 'Cannot assign %r on %s; configure its stub instead.' \
            % self.args[:2]


class ConfigurationError(Error):
    """Invalid configuration value or line."""
