"""
Sequence containers and sequence handling utilities for codonkit.

The containers are ordered, index-addressable and immutable: every derived
sequence (reversal, sub-sequence, complement, translation) is a new instance.
Positions attached to ``CodeAndPosition`` records always refer to the
coordinate system the records were created in; reordering records never
renumbers them.

Symbols are held by a storage backend. The default keeps a tuple of codes;
``CompactStorage`` keeps one byte per symbol in a numpy array, which matters
for genome-sized inputs and changes nothing else.

The module also carries the thin input edge used by the command line:
validation of raw nucleotide strings and FASTA parsing.
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import (
    Callable,
    Generic,
    Iterable,
    Iterator,
    Optional,
    TypeVar,
    Union,
)

import numpy as np
from Bio import SeqIO

from .alphabet import AminoAcidCode, NucleicAcidCode
from .models import (
    CodeAndPosition,
    CodeAndPositionWithSource,
    NucleotideRecord,
)

logger = logging.getLogger(__name__)

C = TypeVar("C", NucleicAcidCode, AminoAcidCode)

# Concrete nucleotides and IUPAC ambiguity codes as raw characters
STANDARD_NUCLEOTIDES = set("ACGTU")
AMBIGUOUS_NUCLEOTIDES = set("RYKMSWBDHVN")


class SequenceError(Exception):
    """Exception raised for sequence-related errors."""
    pass


# =============================================================================
# Storage backends
# =============================================================================

class TupleStorage:
    """Plain storage of codes in a tuple."""

    compact = False

    def __init__(self, codes: Iterable, code_type: type):
        self._codes = tuple(codes)

    def __len__(self) -> int:
        return len(self._codes)

    def __getitem__(self, index: int):
        return self._codes[index]

    def __iter__(self) -> Iterator:
        return iter(self._codes)


class CompactStorage:
    """
    Storage of codes as enumeration ordinals in a ``uint8`` numpy array.

    Absent codes (None) are stored as the ``ABSENT`` sentinel.
    """

    compact = True
    ABSENT = np.iinfo(np.uint8).max

    def __init__(self, codes: Iterable, code_type: type):
        self._members = list(code_type)
        ordinals = {code: index for index, code in enumerate(self._members)}
        self._data = np.fromiter(
            (self.ABSENT if code is None else ordinals[code] for code in codes),
            dtype=np.uint8,
        )

    def __len__(self) -> int:
        return len(self._data)

    def _decode(self, value: int):
        return None if value == self.ABSENT else self._members[value]

    def __getitem__(self, index: int):
        return self._decode(int(self._data[index]))

    def __iter__(self) -> Iterator:
        return (self._decode(value) for value in self._data.tolist())

    @property
    def nbytes(self) -> int:
        return int(self._data.nbytes)


# =============================================================================
# Code sequences
# =============================================================================

class _CodeSequence(Generic[C]):
    """Shared behaviour of the nucleotide and amino acid containers."""

    code_type: type = None

    def __init__(self, codes: Iterable[Optional[C]] = (), compact: bool = False):
        storage_class = CompactStorage if compact else TupleStorage
        self._storage = storage_class(codes, self.code_type)

    def _derive(self, codes: Iterable[Optional[C]]):
        """New instance of the same type and storage backend."""
        return self.__class__(codes, compact=self._storage.compact)

    def __len__(self) -> int:
        return len(self._storage)

    def __iter__(self) -> Iterator[Optional[C]]:
        return iter(self._storage)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._derive(self.to_list()[index])
        return self._storage[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, self.__class__):
            return NotImplemented
        return len(self) == len(other) and tuple(self) == tuple(other)

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, tuple(self)))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self)!r})"

    @property
    def is_compact(self) -> bool:
        return self._storage.compact

    def using_compact_storage(self, active: bool = True):
        """Same sequence backed by CompactStorage (or the plain tuple)."""
        return self.__class__(self, compact=active)

    def to_list(self) -> list[Optional[C]]:
        return list(self._storage)

    def inverse(self):
        """The sequence in reverse order."""
        return self._derive(reversed(self.to_list()))

    def sub_sequence(self, start: int, length: int):
        """
        Sub-sequence of ``length`` codes beginning at ``start``.

        Raises:
            SequenceError: If the range exceeds the sequence
        """
        if start < 0 or length < 0 or start + length > len(self):
            raise SequenceError(
                f"Sub-sequence [{start}, {start + length}) out of range for length {len(self)}"
            )
        return self._derive(self.to_list()[start:start + length])

    def appended_with(self, other):
        """New sequence with the codes of ``other`` appended."""
        return self._derive(self.to_list() + list(other))


class NucleicAcidSequence(_CodeSequence[NucleicAcidCode]):
    """
    Ordered sequence of nucleotide codes (DNA or RNA).

    Unknown raw characters are kept as None entries and rendered as a space,
    so positions stay aligned with the raw input.
    """

    code_type = NucleicAcidCode

    @classmethod
    def from_string(
        cls,
        codes: str,
        on_invalid: Optional[Callable[[str], None]] = None,
        compact: bool = False,
    ) -> NucleicAcidSequence:
        """
        Parse raw nucleotide characters (case-insensitive).

        Args:
            codes: Raw sequence such as ``"ACGT"``
            on_invalid: Called with every raw character without a code
            compact: Use CompactStorage
        """
        return cls(
            (NucleicAcidCode.from_raw(char, on_invalid) for char in codes),
            compact=compact,
        )

    @classmethod
    def from_codes(cls, codes: Iterable[Optional[NucleicAcidCode]]) -> NucleicAcidSequence:
        return cls(codes)

    @classmethod
    def empty(cls) -> NucleicAcidSequence:
        return cls(())

    def __str__(self) -> str:
        return "".join(" " if code is None else code.raw_code for code in self)

    def as_code_and_position_sequence(self) -> CodeAndPositionSequence[NucleicAcidCode]:
        """Codes with positions 0, 1, 2, ..."""
        return CodeAndPositionSequence(
            CodeAndPosition(code, position) for position, code in enumerate(self)
        )

    def as_reverse_strand(self, complementation_type=None) -> NucleicAcidSequence:
        """
        Complementary strand, symbol by symbol and in the same order.

        Args:
            complementation_type: ComplementationType.DNA (default) or RNA
        """
        from .complement import ComplementationType, reverse_complement_strand

        return reverse_complement_strand(self, complementation_type or ComplementationType.DNA)

    def to_rna(self) -> NucleicAcidSequence:
        from .complement import dna_to_rna

        return dna_to_rna(self)

    def to_dna(self) -> NucleicAcidSequence:
        from .complement import rna_to_dna

        return rna_to_dna(self)

    def translate(self, frame: int = 0):
        """Translation of the given reading frame, see FrameTranslator."""
        from ..translation.frame import translate

        return translate(frame, self)

    def as_amino_acid_sequence(self, frame: int = 0) -> AminoAcidSequence:
        """Amino acids of the given reading frame."""
        return self.translate(frame).as_amino_acid_sequence()


class AminoAcidSequence(_CodeSequence[AminoAcidCode]):
    """Ordered sequence of amino acid codes."""

    code_type = AminoAcidCode

    @classmethod
    def from_string(
        cls,
        codes: str,
        on_invalid: Optional[Callable[[str], None]] = None,
        compact: bool = False,
    ) -> AminoAcidSequence:
        return cls(
            (AminoAcidCode.from_raw(char, on_invalid) for char in codes),
            compact=compact,
        )

    @classmethod
    def from_codes(cls, codes: Iterable[Optional[AminoAcidCode]]) -> AminoAcidSequence:
        return cls(codes)

    @classmethod
    def builder(cls) -> AminoAcidSequenceBuilder:
        return AminoAcidSequenceBuilder()

    def __str__(self) -> str:
        # absent codes carry no residue information
        return "".join(code.raw_code for code in self if code is not None)

    def contains(self, other: AminoAcidSequence) -> bool:
        """Check whether ``other`` occurs as a contiguous run of codes."""
        needle = other.to_list()
        haystack = self.to_list()
        if not needle:
            return True
        width = len(needle)
        return any(
            haystack[start:start + width] == needle
            for start in range(len(haystack) - width + 1)
        )


class AminoAcidSequenceBuilder:
    """Collects amino acid codes and builds an AminoAcidSequence."""

    def __init__(self):
        self._codes: list[AminoAcidCode] = []

    def append(self, *items: Union[AminoAcidCode, Iterable[AminoAcidCode]]) -> AminoAcidSequenceBuilder:
        """Append codes, sequences or any iterable of codes."""
        for item in items:
            if isinstance(item, AminoAcidCode):
                self._codes.append(item)
            else:
                self._codes.extend(item)
        return self

    def build(self) -> AminoAcidSequence:
        return AminoAcidSequence(self._codes)


# =============================================================================
# Positioned sequences
# =============================================================================

class CodeAndPositionSequence(Generic[C]):
    """
    Ordered records of codes and their positions.

    ``inverse`` reorders the records but keeps the positions of each one.
    """

    def __init__(self, records: Iterable[CodeAndPosition[C]] = ()):
        self._records = tuple(records)

    def __iter__(self) -> Iterator[CodeAndPosition[C]]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self.__class__(self._records[index])
        return self._records[index]

    def __eq__(self, other) -> bool:
        if not isinstance(other, CodeAndPositionSequence):
            return NotImplemented
        return self._records == other._records

    def __hash__(self) -> int:
        return hash(self._records)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({len(self._records)} records)"

    def to_list(self) -> list[CodeAndPosition[C]]:
        return list(self._records)

    def codes(self) -> Iterator[Optional[C]]:
        return (record.code for record in self._records)

    def positions(self) -> list[int]:
        return [record.position for record in self._records]

    def inverse(self) -> CodeAndPositionSequence[C]:
        return self.__class__(reversed(self._records))

    def as_(self, factory: Callable[[Iterator[Optional[C]]], object]):
        """
        Build another representation from the plain codes.

        Example:
            >>> records.as_(NucleicAcidSequence.from_codes)
        """
        return factory(self.codes())


class AminoAcidWithSourceSequence(CodeAndPositionSequence[AminoAcidCode]):
    """
    Translated amino acids together with their source codons.

    ``reverse`` keeps the position information of the translation it came from.
    """

    def __init__(self, records: Iterable[CodeAndPositionWithSource] = ()):
        super().__init__(records)

    def __str__(self) -> str:
        return str(self.as_amino_acid_sequence())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({str(self)!r})"

    def as_amino_acid_sequence(self) -> AminoAcidSequence:
        return AminoAcidSequence(self.codes())

    def as_nucleic_acid_sequence(self) -> NucleicAcidSequence:
        """The source nucleotides of all records, concatenated."""
        return NucleicAcidSequence(
            source.code for record in self._records for source in record.sources
        )

    def sub_sequence(self, start: int, length: int) -> AminoAcidWithSourceSequence:
        if start < 0 or length < 0 or start + length > len(self):
            raise SequenceError(
                f"Sub-sequence [{start}, {start + length}) out of range for length {len(self)}"
            )
        return self.__class__(self._records[start:start + length])

    def reverse(self) -> AminoAcidWithSourceSequence:
        return self.__class__(reversed(self._records))


# =============================================================================
# Validation and FASTA input
# =============================================================================

class SequenceValidator:
    """
    Validates raw nucleotide sequences before translation.

    Translation itself tolerates unknown characters (they simply produce no
    amino acid), so validation is a separate, optional step for callers that
    want to reject bad input early.
    """

    MIN_LENGTH = 3  # One codon
    MAX_LENGTH = 250_000_000  # Longer than any human chromosome

    def __init__(
        self,
        allow_ambiguous: bool = True,
        allow_gaps: bool = False,
        min_length: int = MIN_LENGTH,
        max_length: int = MAX_LENGTH,
    ):
        """
        Initialize validator with specific constraints.

        Args:
            allow_ambiguous: Allow IUPAC ambiguity codes (R, Y, N, ...)
            allow_gaps: Allow the gap character (-)
            min_length: Minimum sequence length
            max_length: Maximum sequence length
        """
        self.allow_ambiguous = allow_ambiguous
        self.allow_gaps = allow_gaps
        self.min_length = min_length
        self.max_length = max_length

        self.allowed_chars = set(STANDARD_NUCLEOTIDES)
        if allow_ambiguous:
            self.allowed_chars |= AMBIGUOUS_NUCLEOTIDES
        if allow_gaps:
            self.allowed_chars |= {"-"}

    def validate(self, sequence: str) -> tuple[bool, list[str]]:
        """
        Validate a sequence and return status with error messages.

        Args:
            sequence: Nucleotide sequence to validate

        Returns:
            Tuple of (is_valid, list_of_error_messages)
        """
        errors = []

        seq = "".join(sequence.split()).upper()

        if len(seq) < self.min_length:
            errors.append(f"Sequence too short: {len(seq)} < {self.min_length}")

        if len(seq) > self.max_length:
            errors.append(f"Sequence too long: {len(seq)} > {self.max_length}")

        invalid_chars = set(seq) - self.allowed_chars
        if invalid_chars:
            errors.append(f"Invalid characters: {sorted(invalid_chars)}")

        if "T" in seq and "U" in seq:
            errors.append("Mixed DNA and RNA bases (T and U)")

        if seq.count("N") / max(len(seq), 1) > 0.1:
            errors.append("More than 10% unknown bases (N)")

        return len(errors) == 0, errors

    def clean(self, sequence: str, replacement: str = "") -> str:
        """
        Clean a sequence by removing or replacing invalid characters.

        Args:
            sequence: Input sequence
            replacement: Character to replace invalid chars (empty to remove)

        Returns:
            Cleaned sequence
        """
        seq = "".join(sequence.split()).upper()

        cleaned = []
        for char in seq:
            if char in self.allowed_chars:
                cleaned.append(char)
            elif replacement:
                cleaned.append(replacement)

        return "".join(cleaned)


def read_fasta(source: Union[str, Path, StringIO]) -> Iterator[tuple[str, Optional[str], str]]:
    """
    Read raw FASTA entries without any validation.

    Args:
        source: File path, FASTA string, or StringIO object

    Yields:
        (id, description, sequence) for each entry
    """
    close_handle = False
    if isinstance(source, Path):
        handle = open(source, "r")
        close_handle = True
    elif isinstance(source, str):
        if source.lstrip().startswith(">"):
            handle = StringIO(source)
        else:
            handle = open(source, "r")
            close_handle = True
    else:
        handle = source

    try:
        for record in SeqIO.parse(handle, "fasta"):
            yield record.id, record.description or None, str(record.seq)
    finally:
        if close_handle:
            handle.close()


def parse_fasta(
    source: Union[str, Path, StringIO],
    validate: bool = True,
    validator: Optional[SequenceValidator] = None,
) -> Iterator[NucleotideRecord]:
    """
    Parse nucleotide sequences from FASTA format.

    Args:
        source: File path, FASTA string, or StringIO object
        validate: Whether to validate sequences
        validator: Custom validator (uses default if None)

    Yields:
        NucleotideRecord objects for each sequence

    Raises:
        SequenceError: If validation fails and validate=True, or if a
            sequence holds characters that are no nucleotide codes
    """
    if validator is None:
        validator = SequenceValidator(allow_ambiguous=True, allow_gaps=True)

    for seq_id, description, seq_str in read_fasta(source):
        if validate:
            is_valid, errors = validator.validate(seq_str)
            if not is_valid:
                raise SequenceError(
                    f"Sequence '{seq_id}' failed validation: {'; '.join(errors)}"
                )
            seq_str = validator.clean(seq_str)

        try:
            record = NucleotideRecord(id=seq_id, description=description, sequence=seq_str)
        except ValueError as e:
            raise SequenceError(f"Sequence '{seq_id}' is not a nucleotide sequence: {e}") from e

        logger.info(f"Loaded {record.id} ({record.sequence_length} nt)")
        yield record


def to_fasta(
    entries: Iterable[tuple[str, str]],
    line_length: int = 60,
) -> str:
    """
    Render (header, sequence) pairs in FASTA format.

    Args:
        entries: Header without the leading '>' and the sequence
        line_length: Characters per line for sequence

    Returns:
        FASTA-formatted string
    """
    lines = []
    for header, sequence in entries:
        lines.append(f">{header}")
        for i in range(0, len(sequence), line_length):
            lines.append(sequence[i:i + line_length])

    return "\n".join(lines)
