"""Tests for headword deduplication and active-term tracking."""

import unittest

from adapter.fake.dictionary import record
from domain.model.dictionary import TermResults
from services.deduplication import dedupe_by_headword, deduplicate
from services.normalization import normalize_record


def _entries(*records):
    return tuple(normalize_record(r) for r in records)


class TestDeduplicate(unittest.TestCase):

    def setUp(self):
        self.taberu = record("食べる", "たべる", ["to eat"])
        self.ringo = record("林檎", "りんご", ["apple"])
        self.results = [
            TermResults(term="食べるりんご", entries=()),
            TermResults(term="食べる", entries=_entries(self.taberu, self.ringo)),
            TermResults(term="りんご", entries=_entries(self.ringo, record("りんご", None, ["apple (kana)"]))),
        ]

    def test_first_occurrence_wins_in_term_order(self):
        dedup = deduplicate(self.results)
        self.assertEqual(
            [e.headword for e in dedup.entries],
            ["食べる【たべる】", "林檎【りんご】", "りんご"],
        )

    def test_only_terms_with_results_are_active(self):
        dedup = deduplicate(self.results)
        self.assertEqual(dedup.active_words, frozenset({"食べる", "りんご"}))
        self.assertEqual(set(dedup.word_to_results), {"食べる", "りんご"})
        self.assertEqual(len(dedup.word_to_results["りんご"]), 2)

    def test_headwords_unique(self):
        headwords = [e.headword for e in deduplicate(self.results).entries]
        self.assertEqual(len(headwords), len(set(headwords)))

    def test_idempotent(self):
        once = list(deduplicate(self.results).entries)
        self.assertEqual(dedupe_by_headword(once), once)
        self.assertEqual(dedupe_by_headword(dedupe_by_headword(once)), once)

    def test_empty_input(self):
        dedup = deduplicate([])
        self.assertEqual(dedup.entries, ())
        self.assertEqual(dedup.active_words, frozenset())


if __name__ == '__main__':
    unittest.main()
