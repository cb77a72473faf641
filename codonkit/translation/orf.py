"""
Open reading frame extraction.

``ORFExtractor`` is a two-state machine over a stream of translated amino
acids:

- A start residue (methionine) resets the buffer to that residue and arms
  the extractor. A later start before any stop discards the earlier one.
- A stop emits the buffered residues if the extractor is armed, then
  disarms it.
- Any other residue is buffered while armed and ignored otherwise.
- Absent codes and gaps are skipped.

Emitted ORFs carry the position of their start residue. The stop residue is
not part of the ORF.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, Iterator, Optional, Sequence, Union

from ..core.alphabet import AminoAcidCode
from ..core.codon_table import STANDARD_CODON_TABLE, CodonTable
from ..core.complement import ComplementationType
from ..core.models import (
    AminoAcidSequenceAndPosition,
    CodeAndPosition,
    OpenReadingFrame,
    Strand,
)
from ..core.sequence import AminoAcidSequence
from .frame import FRAMES, FrameTranslator, NucleotideInput, as_nucleic_acid_sequence, check_frame

logger = logging.getLogger(__name__)

AminoAcidItem = Union[CodeAndPosition[AminoAcidCode], AminoAcidCode, None]


class ORFState(str, Enum):
    """States of the ORF extractor."""
    SEEKING_START = "seeking_start"
    IN_SEQUENCE = "in_sequence"


class ORFExtractor:
    """
    Delimits valid protein sequences between start and stop residues.

    Items may be positioned records (including translation records with
    provenance) or bare codes, which are numbered by their index in the
    stream.
    """

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self._buffer: list[CodeAndPosition[AminoAcidCode]] = []
        self._state = ORFState.SEEKING_START
        self._index = 0

    @property
    def state(self) -> ORFState:
        return self._state

    def feed(self, item: AminoAcidItem) -> Optional[AminoAcidSequenceAndPosition]:
        """
        Process one stream item.

        Returns:
            The completed ORF when ``item`` is a stop ending an armed
            sequence, otherwise None
        """
        index = self._index
        self._index += 1

        if item is None:
            return None
        record = item if isinstance(item, CodeAndPosition) else CodeAndPosition(item, index)
        code = record.code
        if code is None or code.is_gap:
            return None

        if code.is_start:
            self._buffer = [record]
            self._state = ORFState.IN_SEQUENCE
            return None

        if code.is_stop:
            retval = None
            if self._state is ORFState.IN_SEQUENCE and self._buffer:
                members = tuple(self._buffer)
                retval = AminoAcidSequenceAndPosition(
                    sequence=AminoAcidSequence(member.code for member in members),
                    position=members[0].position,
                    members=members,
                )
                logger.debug(f"ORF of {len(members)} residues at position {retval.position}")
            self._buffer = []
            self._state = ORFState.SEEKING_START
            return retval

        if self._state is ORFState.IN_SEQUENCE:
            self._buffer.append(record)
        return None

    def extract(self, stream: Iterable[AminoAcidItem]) -> Iterator[AminoAcidSequenceAndPosition]:
        """Run a fresh extraction over a whole stream."""
        self.reset()
        for item in stream:
            found = self.feed(item)
            if found is not None:
                yield found


def filter_valid_protein_sequences(
    stream: Iterable[AminoAcidItem],
) -> Iterator[AminoAcidSequenceAndPosition]:
    """ORFs of an amino acid stream, see ORFExtractor."""
    return ORFExtractor().extract(stream)


def find_orfs(
    sequence: NucleotideInput,
    frames: Sequence[int] = FRAMES,
    reverse_frames: Sequence[int] = FRAMES,
    complementation_type: ComplementationType = ComplementationType.DNA,
    min_length: int = 1,
    sequence_id: Optional[str] = None,
    codon_table: CodonTable = STANDARD_CODON_TABLE,
) -> list[OpenReadingFrame]:
    """
    Find ORFs in the selected forward and reverse frames of a sequence.

    Reverse-frame ORFs are read on the antisense strand from N- to
    C-terminus. All nucleotide spans refer to the input (sense) strand and
    cover the start codon through the last residue.

    Args:
        sequence: Nucleotides as string, container or records
        frames: Forward frames to search
        reverse_frames: Reverse frames to search
        complementation_type: Base pairing used for the reverse frames
        min_length: Minimum ORF length in residues
        sequence_id: Identifier copied into the reports
        codon_table: Codon lookup

    Returns:
        OpenReadingFrame reports, forward frames first
    """
    for frame in (*frames, *reverse_frames):
        check_frame(frame)

    nucleotides = as_nucleic_acid_sequence(sequence)
    total = len(nucleotides)
    translator = FrameTranslator(codon_table)
    orfs = []

    for frame in frames:
        translation = translator.translate(frame, nucleotides)
        for found in filter_valid_protein_sequences(translation):
            if len(found) < min_length:
                continue
            orfs.append(OpenReadingFrame(
                sequence=str(found),
                position=found.position,
                frame=frame,
                strand=Strand.FORWARD,
                nucleotide_start=found.members[0].source_start,
                nucleotide_end=found.members[-1].source_end,
                sequence_id=sequence_id,
            ))

    for frame in reverse_frames:
        translation = translator.translate_reverse(frame, nucleotides, complementation_type)
        antisense = list(translation)[::-1]
        for found in filter_valid_protein_sequences(antisense):
            if len(found) < min_length:
                continue
            orfs.append(OpenReadingFrame(
                sequence=str(found),
                position=found.position,
                frame=frame,
                strand=Strand.REVERSE,
                nucleotide_start=total - found.members[-1].source_end,
                nucleotide_end=total - found.members[0].source_start,
                sequence_id=sequence_id,
            ))

    logger.debug(f"Found {len(orfs)} ORFs (min length {min_length})")
    return orfs
