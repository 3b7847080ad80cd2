"""
Tests for source adaptation and the pair sources.
"""

import dataclasses
from collections.abc import Mapping
from types import SimpleNamespace

import pytest

from aiterate import MalformedSourceError, Pair, adapt
from aiterate.source import (
    AsyncIterableSource,
    KeyedSource,
    ScalarSource,
    SequenceSource,
)
from tests.helpers import error_of, explode, later


async def drain(source):
    """Pull every pair until the end marker."""
    pairs = []
    while True:
        result = await source.pull()
        pair = result.unwrap()
        if pair is None:
            return pairs
        pairs.append(pair)


@dataclasses.dataclass
class Point:
    y: int
    x: int


class BrokenMapping(Mapping):
    """Mapping whose key enumeration fails."""

    def __getitem__(self, key):
        return key

    def __iter__(self):
        raise RuntimeError("keys unavailable")

    def __len__(self):
        return 3


class Config:
    """Plain object: attributes set in __init__."""

    def __init__(self):
        self.host = "db"
        self.port = 5432


class BrokenIterable:

    def __iter__(self):
        raise TypeError("not today")


class TestAdapt:
    """The capability probe picks one variant per shape."""

    @pytest.mark.parametrize(
        "value, expected",
        [
            ([1, 2], SequenceSource),
            ((1, 2), SequenceSource),
            (range(3), SequenceSource),
            ({1, 2}, SequenceSource),
            ({"a": 1}, KeyedSource),
            (SimpleNamespace(a=1), KeyedSource),
            (Point(1, 2), KeyedSource),
            ("text", ScalarSource),
            (b"bytes", ScalarSource),
            (5, ScalarSource),
            (None, ScalarSource),
            (Point, ScalarSource),
        ],
    )
    def test_variant_selection(self, value, expected):
        assert isinstance(adapt(value), expected)

    def test_async_iterable(self):
        async def gen():
            yield 1

        assert isinstance(adapt(gen()), AsyncIterableSource)

    @pytest.mark.asyncio
    async def test_awaitable_is_a_single_value(self):
        source = adapt(later(9))
        assert isinstance(source, ScalarSource)
        assert await drain(source) == [Pair(None, 9)]


class TestSequenceSource:

    @pytest.mark.asyncio
    async def test_index_keyed_pairs(self):
        pairs = await drain(adapt(["a", "b", "c"]))
        assert pairs == [Pair(0, "a"), Pair(1, "b"), Pair(2, "c")]

    @pytest.mark.asyncio
    async def test_empty_sequence_ends_immediately(self):
        source = adapt([])
        assert (await source.pull()).unwrap() is None

    @pytest.mark.asyncio
    async def test_generator_source(self):
        pairs = await drain(adapt(n * n for n in range(3)))
        assert pairs == [Pair(0, 0), Pair(1, 1), Pair(2, 4)]

    @pytest.mark.asyncio
    async def test_resolves_deferred_items(self):
        pairs = await drain(adapt([later(1, delay=0.01), later(2)]))
        assert pairs == [Pair(0, 1), Pair(1, 2)]

    @pytest.mark.asyncio
    async def test_rejected_item(self):
        boom = ValueError("bad item")
        source = adapt([explode(boom)])
        assert error_of(await source.pull()) is boom

    @pytest.mark.asyncio
    async def test_end_marker_repeats(self):
        source = adapt([1])
        await drain(source)
        assert (await source.pull()).unwrap() is None

    @pytest.mark.asyncio
    async def test_unenumerable_source(self):
        error = error_of(await adapt(BrokenIterable()).pull())
        assert isinstance(error, MalformedSourceError)
        assert error.source_type is BrokenIterable
        assert isinstance(error.__cause__, TypeError)


class TestAsyncIterableSource:

    @pytest.mark.asyncio
    async def test_index_keyed_pairs(self):
        async def letters():
            for letter in "xy":
                yield letter

        assert await drain(adapt(letters())) == [Pair(0, "x"), Pair(1, "y")]

    @pytest.mark.asyncio
    async def test_failing_iterator(self):
        async def failing():
            yield 1
            raise OSError("stream closed")

        source = adapt(failing())
        assert (await source.pull()).unwrap() == Pair(0, 1)
        error = error_of(await source.pull())
        assert isinstance(error, MalformedSourceError)
        assert isinstance(error.__cause__, OSError)


class TestKeyedSource:

    @pytest.mark.asyncio
    async def test_mapping_insertion_order(self):
        pairs = await drain(adapt({"b": 1, "a": 2, 3: "three"}))
        assert pairs == [Pair("b", 1), Pair("a", 2), Pair(3, "three")]

    @pytest.mark.asyncio
    async def test_empty_mapping_ends_immediately(self):
        assert await drain(adapt({})) == []

    @pytest.mark.asyncio
    async def test_resolves_deferred_values(self):
        source = adapt({"first": later(1), "second": later(2, delay=0.01)})
        assert await drain(source) == [Pair("first", 1), Pair("second", 2)]

    @pytest.mark.asyncio
    async def test_dataclass_fields_in_declaration_order(self):
        assert await drain(adapt(Point(y=1, x=2))) == [Pair("y", 1), Pair("x", 2)]

    @pytest.mark.asyncio
    async def test_plain_object_attributes(self):
        source = adapt(Config())
        assert isinstance(source, KeyedSource)
        assert await drain(source) == [Pair("host", "db"), Pair("port", 5432)]

    def test_classes_functions_and_modules_stay_scalar(self):
        assert isinstance(adapt(Config), ScalarSource)
        assert isinstance(adapt(drain), ScalarSource)
        assert isinstance(adapt(pytest), ScalarSource)

    @pytest.mark.asyncio
    async def test_namespace_attributes(self):
        pairs = await drain(adapt(SimpleNamespace(z=0, a=1)))
        assert pairs == [Pair("z", 0), Pair("a", 1)]

    @pytest.mark.asyncio
    async def test_key_set_fixed_at_start(self):
        data = {"a": 1, "b": 2}
        source = adapt(data)
        assert (await source.pull()).unwrap() == Pair("a", 1)

        # Added keys are not seen by an iteration already in progress
        data["c"] = 3
        assert (await source.pull()).unwrap() == Pair("b", 2)
        assert (await source.pull()).unwrap() is None

    @pytest.mark.asyncio
    async def test_unenumerable_mapping(self):
        error = error_of(await adapt(BrokenMapping()).pull())
        assert isinstance(error, MalformedSourceError)
        assert isinstance(error.__cause__, RuntimeError)


class TestClose:
    """aclose() releases generators left mid-iteration."""

    @pytest.mark.asyncio
    async def test_closes_sync_generator(self):
        cleaned = []

        def numbers():
            try:
                yield from range(10)
            finally:
                cleaned.append(True)

        source = adapt(numbers())
        assert (await source.pull()).unwrap() == Pair(0, 0)
        await source.aclose()
        assert cleaned == [True]

    @pytest.mark.asyncio
    async def test_closes_async_generator(self):
        cleaned = []

        async def numbers():
            try:
                for n in range(10):
                    yield n
            finally:
                cleaned.append(True)

        source = adapt(numbers())
        assert (await source.pull()).unwrap() == Pair(0, 0)
        await source.aclose()
        assert cleaned == [True]

    @pytest.mark.asyncio
    async def test_close_before_first_pull(self):
        for value in ([1], {"a": 1}, 5):
            await adapt(value).aclose()


class TestScalarSource:

    @pytest.mark.asyncio
    async def test_single_unkeyed_pair(self):
        source = adapt(5)
        assert (await source.pull()).unwrap() == Pair(None, 5)
        assert (await source.pull()).unwrap() is None
        assert (await source.pull()).unwrap() is None

    @pytest.mark.asyncio
    async def test_none_is_not_empty(self):
        assert await drain(adapt(None)) == [Pair(None, None)]

    @pytest.mark.asyncio
    async def test_text_is_one_value(self):
        assert await drain(adapt("abc")) == [Pair(None, "abc")]
