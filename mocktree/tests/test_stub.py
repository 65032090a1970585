# encoding: utf-8
#
# Copyright (C) 2009 Alec Thomas <alec@swapoff.org>
# All rights reserved.
#
# This software is licensed as described in the file COPYING, which
# you should have received as part of this distribution.
#
# Author: Alec Thomas <alec@swapoff.org>

import asyncio

import mock
import pytest

from mocktree.stub import STUB_ATTRIBUTES, Result, Stub


def test_unconfigured_stub_records_calls():
    stub = Stub()
    assert stub(1, 2, key='value') is None
    assert stub.call_count == 1
    assert stub.call_args_list == [mock.call(1, 2, key='value')]


def test_return_value():
    stub = Stub()
    assert stub.mock_return_value(42) is stub
    assert stub() == 42
    assert stub() == 42


def test_plain_mock_return_value_still_works():
    stub = Stub()
    stub.return_value = 'plain'
    assert stub() == 'plain'


def test_once_values_are_consumed_in_order():
    stub = Stub()
    stub.mock_return_value('default')
    stub.mock_return_value('first', once=True)
    stub.mock_return_value('second', once=True)
    assert [stub(), stub(), stub()] == ['first', 'second', 'default']


def test_once_values_fall_back_to_unconfigured():
    stub = Stub()
    stub.mock_return_value('only', once=True)
    assert stub() == 'only'
    assert stub() is None


def test_resolved_value():
    stub = Stub().mock_resolved_value({'id': '1'})
    assert asyncio.run(stub()) == {'id': '1'}
    assert asyncio.run(stub()) == {'id': '1'}


def test_rejected_value():
    stub = Stub().mock_rejected_value(Exception('x'))
    pending = stub()
    with pytest.raises(Exception) as error:
        asyncio.run(pending)
    assert str(error.value) == 'x'


def test_resolved_then_rejected_once():
    stub = Stub()
    stub.mock_resolved_value('ok', once=True)
    stub.mock_rejected_value(RuntimeError('failed'), once=True)

    async def run():
        first = await stub('first')
        with pytest.raises(RuntimeError):
            await stub('second')
        return first

    assert asyncio.run(run()) == 'ok'
    assert stub.call_args_list == [mock.call('first'), mock.call('second')]


def test_raise_is_synchronous_and_recorded():
    error = ValueError('boom')
    stub = Stub().mock_raise(error)
    with pytest.raises(ValueError):
        stub('arg')
    assert stub.call_count == 1
    assert stub.mock_results == [Result('raise', error)]


def test_implementation_receives_arguments():
    stub = Stub().mock_implementation(lambda a, b=0: a + b)
    assert stub(1, b=2) == 3
    stub.assert_called_once_with(1, b=2)


def test_mock_results_in_order():
    stub = Stub()
    stub.mock_return_value('a', once=True)
    stub.mock_raise(KeyError('b'), once=True)
    stub()
    with pytest.raises(KeyError):
        stub()
    assert [result.kind for result in stub.mock_results] == ['return', 'raise']
    assert stub.mock_results[0].value == 'a'


def test_assert_returned():
    stub = Stub().mock_return_value('value')
    with pytest.raises(AssertionError):
        stub.assert_returned()
    stub()
    stub()
    stub.assert_returned()
    stub.assert_returned_times(2)
    stub.assert_returned_with('value')
    with pytest.raises(AssertionError):
        stub.assert_returned_times(1)
    with pytest.raises(AssertionError):
        stub.assert_returned_with('other')


def test_raised_calls_do_not_count_as_returned():
    stub = Stub().mock_raise(KeyError('k'))
    with pytest.raises(KeyError):
        stub()
    stub.assert_called_once()
    stub.assert_returned_times(0)


def test_spy_is_self():
    stub = Stub()
    assert stub.spy() is stub


def test_reset_mock_clears_history_but_keeps_behaviour():
    stub = Stub().mock_return_value(1)
    stub()
    stub.reset_mock()
    assert stub.call_count == 0
    assert stub.mock_results == []
    assert stub() == 1


def test_reset_mock_side_effect_drops_behaviour():
    stub = Stub().mock_return_value(1)
    stub.mock_return_value(2, once=True)
    stub.reset_mock(return_value=True, side_effect=True)
    assert stub() is None
    stub.mock_return_value(3)
    assert stub() == 3


def test_explicit_side_effect_wins():
    stub = Stub().mock_return_value(1)
    stub.side_effect = [10, 20]
    assert stub() == 10
    assert stub() == 20


def test_stub_attributes():
    for name in ('mock_return_value', 'mock_resolved_value',
                 'mock_rejected_value', 'mock_raise', 'mock_implementation',
                 'mock_results', 'return_value', 'side_effect', 'call_count',
                 'call_args_list', 'called', 'method_calls',
                 'assert_called_with', 'reset_mock', 'spy'):
        assert name in STUB_ATTRIBUTES, name
    assert not any(name.startswith('_') for name in STUB_ATTRIBUTES)


def test_stub_has_no_automatic_children():
    stub = Stub(name='save')
    with pytest.raises(AttributeError):
        stub.anything
    with pytest.raises(AttributeError):
        stub.assert_caled_with()
    assert not hasattr(stub, 'child')
    assert stub.mock_calls == []
