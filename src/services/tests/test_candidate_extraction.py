"""Tests for candidate extraction: Step 1 of the resolution pipeline."""

import unittest

from adapter.fake.tokenizer import FakeTokenizerAdapter
from domain.model.errors import TokenizationError
from domain.model.token import Token
from services.candidate_extraction import build_candidates, extract_candidates


class TestBuildCandidates(unittest.TestCase):
    """Test build_candidates() filtering, lemma mapping and dedup."""

    def test_full_text_comes_first(self):
        tokens = [Token("食べ", "食べる", "動詞"), Token("た", "た", "助動詞")]
        self.assertEqual(build_candidates("食べた", tokens), ["食べた", "食べる"])

    def test_keeps_only_nouns_verbs_adjectives(self):
        tokens = [
            Token("赤い", "赤い", "形容詞"),
            Token("りんご", "りんご", "名詞"),
            Token("を", "を", "助詞"),
            Token("食べ", "食べる", "動詞"),
            Token("とても", "とても", "副詞"),
        ]
        self.assertEqual(
            build_candidates("赤いりんごを食べ", tokens),
            ["赤いりんごを食べ", "赤い", "りんご", "食べる"],
        )

    def test_unknown_basic_form_falls_back_to_surface(self):
        tokens = [Token("ググっ", "*", "動詞"), Token("スマホ", "", "名詞")]
        self.assertEqual(build_candidates("ググったスマホ", tokens), ["ググったスマホ", "ググっ", "スマホ"])

    def test_duplicates_removed_keeping_first(self):
        tokens = [Token("猫", "猫", "名詞"), Token("猫", "猫", "名詞")]
        self.assertEqual(build_candidates("猫", tokens), ["猫"])

    def test_no_empty_strings(self):
        tokens = [Token("", "", "名詞")]
        self.assertEqual(build_candidates("猫", tokens), ["猫"])

    def test_blank_text_yields_nothing(self):
        self.assertEqual(build_candidates("   ", [Token("猫", "猫", "名詞")]), [])

    def test_raw_text_is_kept_untrimmed(self):
        """The first candidate is the selection as given."""
        self.assertEqual(build_candidates(" 猫 ", []), [" 猫 "])


class TestExtractCandidates(unittest.IsolatedAsyncioTestCase):
    """Test extract_candidates() tokenizer interaction."""

    async def test_blank_text_skips_tokenizer(self):
        tokenizer = FakeTokenizerAdapter()

        result = await extract_candidates("  \n", tokenizer)

        self.assertEqual(result.candidates, ())
        self.assertEqual(result.tokens, ())
        self.assertEqual(tokenizer.calls, [])

    async def test_returns_tokens_and_candidates(self):
        tokens = [Token("走っ", "走る", "動詞"), Token("た", "た", "助動詞")]
        tokenizer = FakeTokenizerAdapter(tokens=tokens)

        result = await extract_candidates("走った", tokenizer)

        self.assertEqual(result.tokens, tuple(tokens))
        self.assertEqual(result.candidates, ("走った", "走る"))
        self.assertEqual(tokenizer.calls, ["走った"])

    async def test_tokenizer_failure_raises_tokenization_error(self):
        tokenizer = FakeTokenizerAdapter(error=RuntimeError("dictionary missing"))

        with self.assertRaises(TokenizationError) as ctx:
            await extract_candidates("走った", tokenizer)

        self.assertEqual(str(ctx.exception), "Tokenization failed: dictionary missing")
        self.assertIsInstance(ctx.exception.__cause__, RuntimeError)


if __name__ == '__main__':
    unittest.main()
