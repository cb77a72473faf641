"""
Raw input symbols that are interpreted lazily as nucleotide or amino acid.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable, Optional

from .alphabet import AminoAcidCode, NucleicAcidCode
from .models import CodeAndPosition


@dataclass(frozen=True)
class TranslatableCode:
    """
    A raw character with its position in the input.

    ``invalid_translation_handler`` is called with this object whenever the
    character cannot be interpreted in the requested alphabet.
    """
    raw: str
    position: int
    invalid_translation_handler: Optional[Callable[[TranslatableCode], None]] = None

    def with_invalid_translation_handler(
        self, handler: Callable[[TranslatableCode], None]
    ) -> TranslatableCode:
        return replace(self, invalid_translation_handler=handler)

    def _report_invalid(self, raw: str) -> None:
        if self.invalid_translation_handler is not None:
            self.invalid_translation_handler(self)

    def as_nucleic_acid_code(self) -> Optional[NucleicAcidCode]:
        return NucleicAcidCode.from_raw(self.raw, self._report_invalid)

    def as_amino_acid_code(self) -> Optional[AminoAcidCode]:
        return AminoAcidCode.from_raw(self.raw, self._report_invalid)

    def as_nucleic_acid_code_and_position(self) -> CodeAndPosition[NucleicAcidCode]:
        return CodeAndPosition(self.as_nucleic_acid_code(), self.position)

    def as_amino_acid_code_and_position(self) -> CodeAndPosition[AminoAcidCode]:
        return CodeAndPosition(self.as_amino_acid_code(), self.position)


def translatable_codes(raw: str) -> list[TranslatableCode]:
    """Wrap every character of ``raw`` with its 0-based position."""
    return [TranslatableCode(char, position) for position, char in enumerate(raw)]
