"""
Typing Business Rules Engine.
Pure logic, no Database access.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from wordstack_app.core.error_handlers import InvalidArgumentError, PreconditionNotMetError
from wordstack_app.modules.corpus.schemas import Entry

from ..kana_typing.tokenizer import LanguageMode, tokenize
from ..kana_typing.validator import validate
from .base_engine import SessionEngine


class TypingEngine(SessionEngine):
    """
    Keystroke-level typing practice.

    Each selected item is tokenized once: the English example sentence
    (one token per character) and the kana reading (romaji units). The
    tokens stay fixed while the learner works on that item.
    """

    def __init__(self):
        super().__init__()
        self.current_tokens: Dict[LanguageMode, List[str]] = {}

    def get_mode_id(self) -> str:
        return 'typing'

    def _on_init(self) -> None:
        self.current_tokens = {}

    def _after_select(self, entry: Optional[Entry]) -> None:
        if entry is None:
            self.current_tokens = {}
            return
        self.current_tokens = {
            LanguageMode.ENGLISH: tokenize(entry.example_en),
            LanguageMode.JAPANESE: tokenize(entry.kana),
        }

    def item_at(self, index: int) -> Optional[Entry]:
        """
        Select the item at ``index`` of the active set, clamping out-of-range
        values to the first/last item. Returns ``None`` for an empty set.
        """
        self._require_ready('item_at')
        if not self.active_set:
            self.current = None
            self._after_select(None)
            return None

        index = max(0, min(index, len(self.active_set) - 1))
        self.current = self.active_set[index]
        self._after_select(self.current)
        return self.current

    def tokens_for(self, language_mode) -> List[str]:
        mode = self._parse_mode(language_mode)
        if self.current is None:
            raise PreconditionNotMetError('No typing item selected', operation='tokens_for')
        return list(self.current_tokens[mode])

    def on_keystroke(self, user_input: str, index: int, language_mode) -> int:
        """Validate the learner's accumulated input; returns the new token index."""
        mode = self._parse_mode(language_mode)
        if self.current is None:
            raise PreconditionNotMetError('No typing item selected', operation='on_keystroke')
        return validate(self.current_tokens[mode], index, user_input, mode)

    @staticmethod
    def _parse_mode(language_mode) -> LanguageMode:
        mode = LanguageMode.parse(language_mode)
        if mode is None:
            raise InvalidArgumentError(
                'language_mode must be 1 (English) or 2 (Japanese)',
                errors={'language_mode': language_mode},
            )
        return mode
