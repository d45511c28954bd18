"""Tests for JanomeAdapter token conversion and lazy loading.

The Janome tokenizer is replaced by a MagicMock, so no dictionary load.
"""

import unittest
from types import SimpleNamespace
from unittest.mock import MagicMock

from adapter.nlp.janome import JanomeAdapter
from domain.model.token import Token


def _janome_token(surface, base_form, part_of_speech):
    return SimpleNamespace(surface=surface, base_form=base_form, part_of_speech=part_of_speech)


class TestJanomeAdapter(unittest.IsolatedAsyncioTestCase):

    def setUp(self):
        self.adapter = JanomeAdapter()
        self.tokenizer = MagicMock()
        self.adapter._tokenizer = self.tokenizer

    async def test_converts_tokens(self):
        self.tokenizer.tokenize.return_value = iter([
            _janome_token("食べ", "食べる", "動詞,自立,*,*"),
            _janome_token("た", "た", "助動詞,*,*,*"),
        ])

        tokens = await self.adapter.tokenize("食べた")

        self.assertEqual(tokens, [
            Token(surface_form="食べ", basic_form="食べる", pos="動詞"),
            Token(surface_form="た", basic_form="た", pos="助動詞"),
        ])
        self.tokenizer.tokenize.assert_called_once_with("食べた")

    async def test_unknown_base_form_kept_as_marker(self):
        self.tokenizer.tokenize.return_value = iter([_janome_token("ググっ", "*", "名詞,固有名詞,*,*")])

        tokens = await self.adapter.tokenize("ググっ")

        self.assertEqual(tokens[0].basic_form, "*")
        self.assertEqual(tokens[0].lemma, "ググっ")

    async def test_tokenizer_errors_propagate(self):
        self.tokenizer.tokenize.side_effect = RuntimeError("broken dictionary")

        with self.assertRaises(RuntimeError):
            await self.adapter.tokenize("食べた")

    def test_loaded_reflects_singleton(self):
        self.assertTrue(self.adapter.loaded)
        self.assertFalse(JanomeAdapter().loaded)


if __name__ == '__main__':
    unittest.main()
