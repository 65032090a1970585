# encoding: utf-8
#
# Copyright (C) 2009 Alec Thomas <alec@swapoff.org>
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

"""Minimal observer hook.

A Signal relays an event to every connected receiver. mocktree uses it to
tell interested modules (eg. :mod:`mocktree.logging`) that the global
configuration changed.
"""


__all__ = ['Signal']


class Signal(object):
    """A Signal tracks a set of receivers and delivers events to them.

    Create a new Signal:

    >>> on_reset = Signal()

    Connect receivers, optionally with the decorator form:

    >>> @on_reset.connect
    ... def forget_stubs(reason):
    ...   return 'stubs forgotten: %s' % reason

    >>> @on_reset.connect
    ... def forget_nodes(reason):
    ...   return 'nodes forgotten: %s' % reason

    Call the signal to deliver an event. The return values of all receivers
    are collected, in connection order:

    >>> on_reset('teardown')
    ['stubs forgotten: teardown', 'nodes forgotten: teardown']

    Receivers can be disconnected again:

    >>> on_reset.disconnect(forget_nodes)
    >>> on_reset('teardown')
    ['stubs forgotten: teardown']
    """

    def __init__(self):
        self._receivers = []

    def connect(self, receiver):
        self._receivers.append(receiver)
        return receiver

    def disconnect(self, receiver):
        self._receivers.remove(receiver)

    def __call__(self, *args, **kwargs):
        return [receiver(*args, **kwargs) for receiver in self._receivers]

    def __iter__(self):
        return iter(self._receivers)

    def __len__(self):
        return len(self._receivers)


if __name__ == '__main__':
    import doctest
    doctest.testmod()
