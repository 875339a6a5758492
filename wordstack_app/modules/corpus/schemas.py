from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


def _parse_int(text: str) -> int:
    """Lenient integer parse: malformed input becomes 0."""
    try:
        return int(text.strip())
    except (TypeError, ValueError, AttributeError):
        return 0


@dataclass(frozen=True)
class Entry:
    """One learnable word or phrase of the corpus."""
    id: int
    word: str = ''
    definition_en: str = ''
    definition_ja: str = ''
    example_en: str = ''
    example_ja: str = ''
    kana: str = ''
    level: int = 0
    related_ids: Tuple[int, ...] = field(default_factory=tuple)

    @classmethod
    def from_fields(
        cls,
        id_text: str,
        word: str,
        definition_en: str,
        definition_ja: str,
        example_en: str,
        example_ja: str,
        kana: str,
        level_text: str,
        related_text: str,
    ) -> 'Entry':
        """
        Build an entry from raw text columns.

        Every field is trimmed. ``id`` and ``level`` fall back to 0 when they
        are not integers; ``related_text`` is a comma separated id list where
        empty pieces are skipped and malformed pieces become 0.
        """
        related = []
        for piece in (related_text or '').split(','):
            piece = piece.strip()
            if not piece:
                continue
            related.append(_parse_int(piece))

        return cls(
            id=_parse_int(id_text or ''),
            word=(word or '').strip(),
            definition_en=(definition_en or '').strip(),
            definition_ja=(definition_ja or '').strip(),
            example_en=(example_en or '').strip(),
            example_ja=(example_ja or '').strip(),
            kana=(kana or '').strip(),
            level=_parse_int(level_text or ''),
            related_ids=tuple(related),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Host-facing shape (``en``/``jp`` keys match the UI's naming)."""
        return {
            'id': self.id,
            'en': self.word,
            'jp': self.definition_ja,
            'en2': self.example_en,
            'jp2': self.example_ja,
            'definition_en': self.definition_en,
            'kana': self.kana,
            'level': self.level,
            'related_ids': list(self.related_ids),
        }


@dataclass
class MasteryImportResult:
    """Outcome of replacing the mastery set from external data."""
    added: int
    skipped: int
    total: int

    def to_dict(self) -> Dict[str, int]:
        return {'added': self.added, 'skipped': self.skipped, 'total': self.total}
