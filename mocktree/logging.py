# encoding: utf-8
#
# Copyright (C) 2008-2009 Alec Thomas <alec@swapoff.org
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

"""The "mocktree" logger.

Its level follows the ``log_level`` setting of :mod:`mocktree.config`.
"""

import logging

from mocktree.config import on_config_change, settings


__all__ = ['log']


@on_config_change.connect
def _set_logger_level(config):
    """Update the logger when the global configuration changes."""
    log.setLevel(getattr(logging, settings.log_level.upper(), logging.WARN))


formatter = logging.Formatter(
    '%(asctime)s %(name)-12s %(levelname)-8s %(message)s',
    '%Y-%m-%d %H:%M:%S',
    )
console = logging.StreamHandler()
console.setLevel(logging.DEBUG)
console.setFormatter(formatter)

log = logging.getLogger('mocktree')
log.setLevel(logging.WARN)
log.addHandler(console)
