# encoding: utf-8
#
# Copyright (C) 2008-2009 Alec Thomas <alec@swapoff.org
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

"""Small domain used to exercise the mocks."""

import itertools


class UserNotFound(Exception):
    pass


class User(object):
    def __init__(self, name, email, id=None):
        self.id = id
        self.name = name
        self.email = email

    def __eq__(self, other):
        return isinstance(other, User) and vars(self) == vars(other)

    def __repr__(self):
        return 'User(%r, %r, id=%r)' % (self.name, self.email, self.id)


class UserRepository(object):
    _ids = itertools.count(1)

    def __init__(self):
        self.users = {}

    def find_by_id(self, id):
        try:
            return self.users[id]
        except KeyError:
            return UserNotFound(id)

    def save(self, user):
        if user.id is not None and user.id in self.users:
            return ValueError('User already exists')
        if user.id is None:
            user.id = str(next(self._ids))
        self.users[user.id] = user
        return user


class AuthService(object):
    async def sign_up(self, user):
        return user


class Auth(object):
    def __init__(self):
        self.service = AuthService()


class ComplexService(object):
    """Only reachable as complex_service.auth.service.sign_up()."""

    def __init__(self):
        self.auth = Auth()


class UserAction(object):
    def __init__(self, user_repository, complex_service):
        self.user_repository = user_repository
        self.complex_service = complex_service

    async def sign_up(self, data):
        result = self.user_repository.save(User(**data))
        if isinstance(result, Exception):
            raise result
        auth_result = await self.complex_service.auth.service.sign_up(result)
        if isinstance(auth_result, Exception):
            raise auth_result
        return result

    async def get_user(self, id):
        user = self.user_repository.find_by_id(id)
        if isinstance(user, Exception):
            raise user
        return user


class Scheduler(object):
    def next_run(self):
        return lambda: 1

    async def run(self, error=False):
        if error:
            raise RuntimeError('run failed')
        return 1


class Account(object):
    def __init__(self, scheduler=None):
        self.scheduler = scheduler or Scheduler()

    def close(self):
        pass

    async def refresh(self, error=False):
        if error:
            raise RuntimeError('refresh failed')


class Person(object):
    def __init__(self, name, last_name, account=None):
        self.name = name
        self.last_name = last_name
        self.account = account or Account()

    def full_name(self):
        return self.name + ' ' + self.last_name

    def nick_name(self):
        return 'Johnny Bravo'

    async def fetch_status(self, error=False):
        if error:
            raise RuntimeError('fetch failed')
        return 'active'
