"""Tests for dispatch_lookups() fan-out, ordering and per-term failure policy."""

import asyncio
import unittest
from unittest.mock import patch

from adapter.fake.dictionary import FakeDictionaryAdapter, record
from domain.model.errors import BatchLookupError
from services.lookup_dispatch import dispatch_lookups


class TestDispatchLookups(unittest.IsolatedAsyncioTestCase):

    async def test_empty_terms_make_no_calls(self):
        dictionary = FakeDictionaryAdapter()

        results = await dispatch_lookups([], dictionary)

        self.assertEqual(results, [])
        self.assertEqual(dictionary.calls, [])

    async def test_one_result_per_term_in_input_order(self):
        dictionary = FakeDictionaryAdapter(
            records={
                "食べた": [record("食べる", "たべる", ["to eat"])],
                "食べる": [record("食べる", "たべる", ["to eat"]), record("食べる", "たべる", ["to eat"])],
            },
            # First term answers last; order must still follow input
            delays={"食べた": 0.05},
        )

        results = await dispatch_lookups(["食べた", "食べる"], dictionary)

        self.assertEqual([r.term for r in results], ["食べた", "食べる"])
        self.assertEqual(len(results[0].entries), 1)
        self.assertEqual(len(results[1].entries), 2)
        self.assertEqual(results[0].entries[0].headword, "食べる【たべる】")

    async def test_lookups_run_concurrently(self):
        """All lookups are in flight before any of them completes."""
        class CountingDictionary:
            def __init__(self):
                self.in_flight = 0
                self.max_in_flight = 0

            async def lookup(self, term):
                self.in_flight += 1
                self.max_in_flight = max(self.max_in_flight, self.in_flight)
                await asyncio.sleep(0.01)
                self.in_flight -= 1
                return {"ok": True, "data": {"data": []}}

        dictionary = CountingDictionary()

        await dispatch_lookups(["a", "b", "c"], dictionary)

        self.assertEqual(dictionary.max_in_flight, 3)
        self.assertEqual(dictionary.in_flight, 0)

    async def test_not_ok_contributes_empty(self):
        dictionary = FakeDictionaryAdapter(
            records={"猫": [record("猫", "ねこ", ["cat"])]},
            failures={"犬"},
        )

        results = await dispatch_lookups(["犬", "猫"], dictionary)

        self.assertEqual(results[0].entries, ())
        self.assertEqual(len(results[1].entries), 1)

    async def test_raising_lookup_does_not_abort_batch(self):
        dictionary = FakeDictionaryAdapter(
            records={"猫": [record("猫", "ねこ", ["cat"])]},
            errors={"犬": ConnectionError("offline")},
        )

        results = await dispatch_lookups(["犬", "猫"], dictionary)

        self.assertEqual([r.term for r in results], ["犬", "猫"])
        self.assertEqual(results[0].entries, ())
        self.assertEqual(results[1].entries[0].word, "猫")

    async def test_missing_ok_or_malformed_envelope_is_empty(self):
        class OddDictionary:
            async def lookup(self, term):
                return {
                    "none": None,
                    "no_ok": {"data": {"data": [record("猫", "ねこ", ["cat"])]}},
                    "not_list": {"ok": True, "data": {"data": "oops"}},
                    "no_data": {"ok": True},
                }[term]

        results = await dispatch_lookups(["none", "no_ok", "not_list", "no_data"], OddDictionary())

        self.assertTrue(all(r.entries == () for r in results))

    @patch('services.lookup_dispatch._lookup_term')
    async def test_batch_failure_raises_batch_lookup_error(self, mock_lookup):
        mock_lookup.side_effect = RuntimeError("scheduler broke")

        with self.assertRaises(BatchLookupError) as ctx:
            await dispatch_lookups(["猫"], FakeDictionaryAdapter())

        self.assertEqual(str(ctx.exception), "Lookup failed: scheduler broke")
        self.assertIsInstance(ctx.exception.cause, RuntimeError)


if __name__ == '__main__':
    unittest.main()
