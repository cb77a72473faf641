"""
Translation of a single reading frame.

The translator walks an ordered nucleotide stream once. It skips the first
``frame`` symbols, cuts the rest into non-overlapping windows of three and
looks every window up in the codon table. Each translated window becomes a
``CodeAndPositionWithSource`` record carrying the amino acid, its position
among the amino acids produced by this pass, and the three source records.

Windows that do not translate (unknown symbols, unlisted ambiguity codons)
and a trailing partial window produce no record. They are dropped, not
replaced by a placeholder, and do not advance the output position.

Reverse frames are translated on the antisense strand: the input is
reversed, complemented, translated forward, and the resulting records are
reversed again so that they follow the order of the input. The positions
assigned during the antisense pass are kept.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional, Union

from ..core.alphabet import AminoAcidCode, NucleicAcidCode
from ..core.codon_table import CODON_LENGTH, STANDARD_CODON_TABLE, CodonTable
from ..core.complement import ComplementationType
from ..core.models import CodeAndPosition, CodeAndPositionWithSource, Strand
from ..core.sequence import (
    AminoAcidSequence,
    AminoAcidWithSourceSequence,
    CodeAndPositionSequence,
    NucleicAcidSequence,
)

logger = logging.getLogger(__name__)

# Reading frame offsets
FRAMES = (0, 1, 2)

NucleotideInput = Union[
    str,
    NucleicAcidSequence,
    CodeAndPositionSequence,
    Iterable[Union[CodeAndPosition, NucleicAcidCode, None]],
]


class TranslationError(Exception):
    """Base exception for translation errors."""
    pass


class InvalidFrameError(TranslationError, ValueError):
    """Raised for reading frame offsets other than 0, 1 or 2."""
    pass


def check_frame(frame: int) -> int:
    if frame not in FRAMES:
        raise InvalidFrameError(f"Reading frame must be one of {FRAMES}, got {frame!r}")
    return frame


def as_nucleotide_records(sequence: NucleotideInput) -> Iterator[CodeAndPosition[NucleicAcidCode]]:
    """
    Normalize any accepted input into positioned nucleotide records.

    Plain codes are numbered by their index in the input.
    """
    if isinstance(sequence, str):
        sequence = NucleicAcidSequence.from_string(sequence)
    if isinstance(sequence, NucleicAcidSequence):
        return iter(sequence.as_code_and_position_sequence())
    if isinstance(sequence, CodeAndPositionSequence):
        return iter(sequence)
    return (
        item if isinstance(item, CodeAndPosition) else CodeAndPosition(item, index)
        for index, item in enumerate(sequence)
    )


def as_nucleic_acid_sequence(sequence: NucleotideInput) -> NucleicAcidSequence:
    """Normalize any accepted input into a NucleicAcidSequence."""
    if isinstance(sequence, str):
        return NucleicAcidSequence.from_string(sequence)
    if isinstance(sequence, NucleicAcidSequence):
        return sequence
    if isinstance(sequence, CodeAndPositionSequence):
        return NucleicAcidSequence(sequence.codes())
    return NucleicAcidSequence(
        item.code if isinstance(item, CodeAndPosition) else item for item in sequence
    )


def _reusable(sequence: NucleotideInput) -> NucleotideInput:
    """Materialize one-shot iterables so the input can be read repeatedly."""
    if isinstance(sequence, (str, NucleicAcidSequence, CodeAndPositionSequence)):
        return sequence
    return tuple(sequence)


class _FrameState:
    """Window buffer and output counter of one reading frame."""

    __slots__ = ("frame", "codon_table", "window", "produced")

    def __init__(self, frame: int, codon_table: CodonTable):
        self.frame = frame
        self.codon_table = codon_table
        self.window: list[CodeAndPosition[NucleicAcidCode]] = []
        self.produced = 0

    def feed(self, record: CodeAndPosition[NucleicAcidCode]) -> Optional[CodeAndPositionWithSource]:
        """
        Add one nucleotide record to the window.

        Returns:
            The translated record when the window completes a translatable
            codon, otherwise None
        """
        self.window.append(record)
        if len(self.window) < CODON_LENGTH:
            return None

        sources = tuple(self.window)
        self.window.clear()

        amino_acid = self.codon_table.translate([source.code for source in sources])
        if amino_acid is None:
            logger.debug(
                f"Frame {self.frame}: no translation for codon at position {sources[0].position}"
            )
            return None

        retval = CodeAndPositionWithSource(amino_acid, self.produced, sources)
        self.produced += 1
        return retval

    @property
    def pending(self) -> int:
        """Symbols read into the current, incomplete window."""
        return len(self.window)


class SequenceTranslation:
    """
    Lazy translation of one reading frame.

    The records are produced on first iteration. A translation can be
    consumed only once; materialize it with ``records()`` or ``as_sequence()``
    to use the result repeatedly.
    """

    def __init__(
        self,
        records: Iterable[CodeAndPositionWithSource],
        frame: int,
        strand: Strand = Strand.FORWARD,
    ):
        self._records = records
        self._consumed = False
        self.frame = frame
        self.strand = strand

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(frame={self.label}, consumed={self._consumed})"

    def __iter__(self) -> Iterator[CodeAndPositionWithSource]:
        if self._consumed:
            raise TranslationError(f"Translation of frame {self.label} was already consumed")
        self._consumed = True
        return iter(self._records)

    @property
    def label(self) -> str:
        sign = "+" if self.strand is Strand.FORWARD else "-"
        return f"{sign}{self.frame + 1}"

    @property
    def consumed(self) -> bool:
        return self._consumed

    def records(self) -> list[CodeAndPositionWithSource]:
        return list(self)

    def codes(self) -> Iterator[AminoAcidCode]:
        return (record.code for record in self)

    def as_amino_acid_sequence(self) -> AminoAcidSequence:
        return AminoAcidSequence(self.codes())

    def as_sequence(self) -> AminoAcidWithSourceSequence:
        """Records together with their provenance."""
        return AminoAcidWithSourceSequence(self)


class FrameTranslator:
    """
    Translates reading frames with a given codon table.

    Args:
        codon_table: Codon lookup, the standard genetic code by default

    Example:
        >>> translator = FrameTranslator()
        >>> str(translator.translate(0, "ATGCCACCC").as_amino_acid_sequence())
        'MPP'
    """

    def __init__(self, codon_table: CodonTable = STANDARD_CODON_TABLE):
        self.codon_table = codon_table

    def _translate_records(
        self,
        records: Iterable[CodeAndPosition[NucleicAcidCode]],
        frame: int,
    ) -> Iterator[CodeAndPositionWithSource]:
        state = _FrameState(frame, self.codon_table)
        for index, record in enumerate(records):
            if index < frame:
                continue
            produced = state.feed(record)
            if produced is not None:
                yield produced

    def translate(self, frame: int, sequence: NucleotideInput) -> SequenceTranslation:
        """
        Translate one forward reading frame.

        Args:
            frame: Offset of the first codon (0, 1 or 2)
            sequence: Nucleotides as string, container or records

        Raises:
            InvalidFrameError: If frame is not 0, 1 or 2
        """
        check_frame(frame)
        records = self._translate_records(as_nucleotide_records(sequence), frame)
        return SequenceTranslation(records, frame, Strand.FORWARD)

    def translate_reverse(
        self,
        frame: int,
        sequence: NucleotideInput,
        complementation_type: ComplementationType = ComplementationType.DNA,
    ) -> SequenceTranslation:
        """
        Translate one reverse (antisense) reading frame.

        The frame offset counts from the 3' end of the input. The returned
        records follow the input order, so the protein reads C- to N-terminal.

        Raises:
            InvalidFrameError: If frame is not 0, 1 or 2
            ComplementError: On consumption, if the input holds symbols
                without a complement
        """
        check_frame(frame)
        logger.debug(f"Reverse translation of frame {frame} ({complementation_type.name})")

        def records() -> Iterator[CodeAndPositionWithSource]:
            antisense = as_nucleic_acid_sequence(sequence).inverse().as_reverse_strand(complementation_type)
            translated = list(self._translate_records(antisense.as_code_and_position_sequence(), frame))
            yield from reversed(translated)

        return SequenceTranslation(records(), frame, Strand.REVERSE)

    def translate_all_frames(self, sequence: NucleotideInput) -> list[SequenceTranslation]:
        sequence = _reusable(sequence)
        return [self.translate(frame, sequence) for frame in FRAMES]

    def translate_all_reverse_frames(
        self,
        sequence: NucleotideInput,
        complementation_type: ComplementationType = ComplementationType.DNA,
    ) -> list[SequenceTranslation]:
        sequence = _reusable(sequence)
        return [self.translate_reverse(frame, sequence, complementation_type) for frame in FRAMES]


_DEFAULT_TRANSLATOR = FrameTranslator()


def translate(frame: int, sequence: NucleotideInput) -> SequenceTranslation:
    """Translate one forward frame with the standard codon table."""
    return _DEFAULT_TRANSLATOR.translate(frame, sequence)


def translate_reverse(
    frame: int,
    sequence: NucleotideInput,
    complementation_type: ComplementationType = ComplementationType.DNA,
) -> SequenceTranslation:
    """Translate one reverse frame with the standard codon table."""
    return _DEFAULT_TRANSLATOR.translate_reverse(frame, sequence, complementation_type)


def translate_all_frames(sequence: NucleotideInput) -> list[SequenceTranslation]:
    return _DEFAULT_TRANSLATOR.translate_all_frames(sequence)


def translate_all_reverse_frames(
    sequence: NucleotideInput,
    complementation_type: ComplementationType = ComplementationType.DNA,
) -> list[SequenceTranslation]:
    return _DEFAULT_TRANSLATOR.translate_all_reverse_frames(sequence, complementation_type)


def translate_all_frames_and_reverse_frames(
    sequence: NucleotideInput,
    complementation_type: ComplementationType = ComplementationType.DNA,
) -> list[SequenceTranslation]:
    """Forward frames 0-2 followed by reverse frames 0-2."""
    sequence = _reusable(sequence)
    return translate_all_frames(sequence) + translate_all_reverse_frames(sequence, complementation_type)
