# -*- coding: utf-8 -*-
#
# Copyright (C) 2003-2005 Edgewall Software
# Copyright (C) 2003-2004 Jonas Borgström <jonas@edgewall.com>
# Copyright (C) 2004-2005 Christopher Lenz <cmlenz@gmx.de>
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution. The terms
# are also available at http://trac.edgewall.org/wiki/TracLicense.
#
# This software consists of voluntary contributions made by many
# individuals. For the exact contribution history, see the revision
# history and logs, available at http://trac.edgewall.org/log/.
#
# Author: Jonas Borgström <jonas@edgewall.com>
#     Christopher Lenz <cmlenz@gmx.de>

"""Package wide settings.

Settings are read from a simple "key = value" file, or passed as keyword
arguments to :func:`configure`:

>>> configure(default_return='mock')
>>> settings.default_return
'mock'

Unset options fall back to their defaults:

>>> settings.log_level
'warning'
>>> reset()
>>> settings.default_return
'none'
"""

import os

from mocktree.core import ConfigurationError
from mocktree.signal import Signal


__all__ = """
Configuration
Option
ChoiceOption
Settings
settings
configure
reset
set_global_config
on_config_change
""".split()


on_config_change = Signal()

_config = None


def set_global_config(config):
    """Set default global config and notify receivers."""
    global _config
    _config = config
    on_config_change(config)


class Configuration(dict):
    """Abstraction layer for a basic key/value configuration file format."""

    def __init__(self, filename=None):
        super(Configuration, self).__init__()
        self.filename = filename
        if filename and os.path.exists(filename):
            self.load(filename)

    def load(self, filename):
        with open(filename) as fd:
            for lineno, line in enumerate(fd, 1):
                line = line.split('#', 1)[0].strip()
                if not line:
                    continue
                if '=' not in line:
                    raise ConfigurationError(
                        '%s:%d: expected "key = value", got %r'
                        % (filename, lineno, line))
                key, value = line.split('=', 1)
                self.set(key.strip(), value.strip())

    # Public API
    def options(self):
        return sorted(self.items())

    def get(self, name, default=None):
        if name in self:
            return super(Configuration, self).get(name)
        option = Option.registry.get(name)
        if option is not None and option.default is not None:
            return option.default
        return default

    def set(self, name, value):
        """Set a configuration option, validating it if it is registered."""
        option = Option.registry.get(name)
        if option is not None:
            value = option.cast(value)
        self[name] = value


class Option(object):
    """A convenience property for accessing configuration entries."""

    registry = {}

    def __init__(self, name, default=None, help=''):
        """Create a new Option.

        Args:
            name: Name of the option.
            default: Default value.
            help: Documentation string.
        """
        self.name = name
        if default is not None:
            self.default = self.cast(default)
        else:
            self.default = default
        self.__doc__ = help
        self.registry[name] = self

    def __get__(self, instance, owner):
        if instance is None:
            return self
        config = getattr(instance, '_config', None)
        if config is None:
            config = _config
        if config is not None:
            return self.accessor(config, self.name, self.default)
        return self.default

    def __set__(self, instance, value):
        config = getattr(instance, '_config', None)
        if config is not None:
            config.set(self.name, value)
            return
        config = _config if _config is not None else Configuration()
        config.set(self.name, value)
        set_global_config(config)

    def accessor(self, config, name, default):
        return self.cast(config.get(name, default))

    def cast(self, value):
        return str(value)


class ChoiceOption(Option):
    """An option restricted to a fixed set of (lower case) values."""

    def __init__(self, name, choices, default=None, help=''):
        self.choices = tuple(choices)
        Option.__init__(self, name, default, help)

    def cast(self, value):
        value = str(value).strip().lower()
        if value not in self.choices:
            raise ConfigurationError(
                'Invalid value %r for option %r, expected one of: %s'
                % (value, self.name, ', '.join(self.choices)))
        return value


class Settings(object):
    """mocktree settings."""

    log_level = ChoiceOption(
        'log_level', ('debug', 'info', 'warning', 'error', 'critical'),
        default='warning', help='Level of the "mocktree" logger.')
    default_return = ChoiceOption(
        'default_return', ('none', 'mock'), default='none',
        help='What an unconfigured stub returns when called: None, or a '
             'child mock as a plain mock.Mock would.')


settings = Settings()


def configure(filename=None, **options):
    """Install a new global configuration.

    :param filename: Optional "key = value" file to load first.
    :param options: Option values, overriding those from the file.
    """
    if filename and not os.path.exists(filename):
        raise ConfigurationError('No such configuration file %r' % filename)
    config = Configuration(filename)
    for name, value in options.items():
        config.set(name, value)
    set_global_config(config)


def reset():
    """Restore default settings."""
    set_global_config(None)


if __name__ == '__main__':
    import doctest
    doctest.testmod()
