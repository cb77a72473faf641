"""
Multi-frame translation.

``MultiFrameTranslator`` reads the input once and drives the three forward
frames side by side. Frame ``k`` starts consuming symbols once ``k`` symbols
were read. After every third symbol an ``AminoAcidCodeByFrames`` bundle is
emitted with the records each frame completed since the previous bundle. If
the input ends while completed records are still pending (frames 1 and 2
finish their last codon one or two symbols after a bundle boundary), a final
bundle is flushed, so the per-frame records of a scan always equal those of
an independent single-frame translation.

``TranslationBuilder`` is the configuration surface for callers who want an
arbitrary subset of forward and reverse frames.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

from ..core.alphabet import AminoAcidCode
from ..core.codon_table import CODON_LENGTH, STANDARD_CODON_TABLE, CodonTable
from ..core.complement import ComplementationType
from ..core.models import CodeAndPosition, CodeAndPositionWithSource
from .frame import (
    FRAMES,
    FrameTranslator,
    NucleotideInput,
    SequenceTranslation,
    _FrameState,
    _reusable,
    as_nucleotide_records,
    check_frame,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AminoAcidCodeByFrames:
    """
    Records completed by each of the three frames within one scan step.

    ``read_count`` is the number of input symbols consumed when the bundle
    was emitted.
    """
    frames: tuple[tuple[CodeAndPositionWithSource, ...], ...]
    read_count: int

    def records_of_frame(self, frame: int) -> tuple[CodeAndPositionWithSource, ...]:
        return self.frames[check_frame(frame)]

    def code_of_frame(self, frame: int) -> Optional[AminoAcidCode]:
        """Amino acid completed by the frame in this step, if any."""
        records = self.records_of_frame(frame)
        return records[-1].code if records else None

    def sources_of_frame(self, frame: int) -> tuple[CodeAndPosition, ...]:
        records = self.records_of_frame(frame)
        return records[-1].sources if records else ()

    @property
    def is_empty(self) -> bool:
        return not any(self.frames)


class MultiFrameTranslator:
    """Translates all three forward frames in a single pass."""

    def __init__(self, codon_table: CodonTable = STANDARD_CODON_TABLE):
        self.codon_table = codon_table

    def scan(self, sequence: NucleotideInput) -> Iterator[AminoAcidCodeByFrames]:
        """
        Read the input once and yield a bundle every three symbols.

        Args:
            sequence: Nucleotides as string, container or records

        Yields:
            AminoAcidCodeByFrames bundles in input order
        """
        states = [_FrameState(frame, self.codon_table) for frame in FRAMES]
        pending: list[list[CodeAndPositionWithSource]] = [[] for _ in FRAMES]
        read_count = 0

        for record in as_nucleotide_records(sequence):
            for state, completed in zip(states, pending):
                if read_count >= state.frame:
                    produced = state.feed(record)
                    if produced is not None:
                        completed.append(produced)
            read_count += 1

            if read_count % CODON_LENGTH == 0:
                yield AminoAcidCodeByFrames(tuple(tuple(c) for c in pending), read_count)
                for completed in pending:
                    completed.clear()

        if any(pending):
            yield AminoAcidCodeByFrames(tuple(tuple(c) for c in pending), read_count)


class MultiFrameTranslation:
    """
    Translation of all three forward frames backed by one cached scan.

    The scan runs on first access to any frame.
    """

    def __init__(self, sequence: NucleotideInput, translator: Optional[MultiFrameTranslator] = None):
        self._sequence = sequence
        self._translator = translator or MultiFrameTranslator()
        self._bundles: Optional[list[AminoAcidCodeByFrames]] = None

    def bundles(self) -> list[AminoAcidCodeByFrames]:
        if self._bundles is None:
            self._bundles = list(self._translator.scan(self._sequence))
            logger.debug(f"Multi-frame scan produced {len(self._bundles)} bundles")
        return self._bundles

    def _records_of_frame(self, frame: int) -> Iterator[CodeAndPositionWithSource]:
        for bundle in self.bundles():
            yield from bundle.records_of_frame(frame)

    def for_frame(self, frame: int) -> SequenceTranslation:
        """A fresh lazy translation of one frame, served from the scan."""
        check_frame(frame)
        return SequenceTranslation(self._records_of_frame(frame), frame)

    def __iter__(self) -> Iterator[SequenceTranslation]:
        return (self.for_frame(frame) for frame in FRAMES)


def multi_translate(sequence: NucleotideInput) -> MultiFrameTranslation:
    """Translate the three forward frames with a single scan."""
    return MultiFrameTranslation(sequence)


class TranslationBuilder:
    """
    Fluent selection of forward and reverse frames.

    Frames are kept in insertion order; repeated frames are ignored.

    Example:
        >>> translations = (
        ...     translate_frames("ATGCCACCCGTT")
        ...     .frames(0)
        ...     .all_reverse_frames()
        ...     .get()
        ... )
    """

    def __init__(self, sequence: NucleotideInput, translator: Optional[FrameTranslator] = None):
        self._sequence = _reusable(sequence)
        self._translator = translator or FrameTranslator()
        self._frames: dict[int, None] = {}
        self._reverse_frames: dict[int, None] = {}
        self._complementation_type = ComplementationType.DNA

    def frames(self, *frames: int) -> TranslationBuilder:
        for frame in frames:
            self._frames[check_frame(frame)] = None
        return self

    def all_frames(self) -> TranslationBuilder:
        return self.frames(*FRAMES)

    def reverse_frames(self, *frames: int) -> TranslationBuilder:
        for frame in frames:
            self._reverse_frames[check_frame(frame)] = None
        return self

    def all_reverse_frames(self) -> TranslationBuilder:
        return self.reverse_frames(*FRAMES)

    def complementation(self, complementation_type: ComplementationType) -> TranslationBuilder:
        """Base pairing rules used for the reverse frames."""
        self._complementation_type = ComplementationType(complementation_type)
        return self

    @property
    def selected_frames(self) -> tuple[int, ...]:
        return tuple(self._frames)

    @property
    def selected_reverse_frames(self) -> tuple[int, ...]:
        return tuple(self._reverse_frames)

    def get(self) -> Iterator[SequenceTranslation]:
        """
        One translation per requested frame, forward frames first.

        Each translation is computed only when it is consumed.
        """
        for frame in tuple(self._frames):
            yield self._translator.translate(frame, self._sequence)
        for frame in tuple(self._reverse_frames):
            yield self._translator.translate_reverse(
                frame, self._sequence, self._complementation_type
            )


def translate_frames(sequence: NucleotideInput) -> TranslationBuilder:
    """Start a frame selection for the given sequence."""
    return TranslationBuilder(sequence)
