"""Token Value Object produced by the tokenizer port."""

from dataclasses import dataclass

# IPADIC marker for "no base form known"
UNKNOWN_BASIC_FORM = "*"


@dataclass(frozen=True)
class Token:
    """One morpheme of the selected text.

    ``pos`` is the top-level part-of-speech tag (e.g. 名詞, 動詞, 形容詞).
    """
    surface_form: str
    basic_form: str = ""
    pos: str = ""

    @property
    def lemma(self) -> str:
        """Dictionary form, falling back to the surface form when unknown."""
        if self.basic_form and self.basic_form != UNKNOWN_BASIC_FORM:
            return self.basic_form
        return self.surface_form
