"""
Core data models for codonkit.

Two kinds of records live here. The per-symbol value objects produced and
consumed by the translation engine (``CodeAndPosition`` and friends) are
frozen dataclasses, since millions of them may be created for a single
chromosome-sized input. The report-level records handed to callers and
serializers (input records, ORF reports, translated frames) are Pydantic
models with validation and JSON serialization.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .alphabet import AminoAcidCode, NucleicAcidCode

if TYPE_CHECKING:
    from .sequence import AminoAcidSequence, NucleicAcidSequence

C = TypeVar("C")


class Strand(str, Enum):
    """Strand a reading frame is read from."""
    FORWARD = "forward"
    REVERSE = "reverse"


@dataclass(frozen=True)
class CodeAndPosition(Generic[C]):
    """
    A symbol together with its 0-based position.

    The code may be None where the raw input had no matching symbol.
    """
    code: Optional[C]
    position: int

    def __post_init__(self):
        if self.position < 0:
            raise ValueError(f"position must be non-negative, got {self.position}")


@dataclass(frozen=True)
class CodeAndPositionWithSource(CodeAndPosition[AminoAcidCode]):
    """
    A translated amino acid with the nucleotide records it was read from.

    ``position`` counts the amino acids produced by one translation pass;
    ``sources`` holds the codon's three nucleotide records with their
    positions in the translated input.
    """
    sources: tuple[CodeAndPosition[NucleicAcidCode], ...] = ()

    @property
    def codon(self) -> tuple[Optional[NucleicAcidCode], ...]:
        """The source codon as plain codes."""
        return tuple(source.code for source in self.sources)

    @property
    def source_start(self) -> Optional[int]:
        """Position of the first source nucleotide."""
        return self.sources[0].position if self.sources else None

    @property
    def source_end(self) -> Optional[int]:
        """Position after the last source nucleotide."""
        return self.sources[-1].position + 1 if self.sources else None


@dataclass(frozen=True)
class AminoAcidSequenceAndPosition:
    """
    A delimited protein sequence and the position of its first residue.

    ``members`` keeps the records the sequence was assembled from, so that
    provenance of translated residues stays reachable.
    """
    sequence: AminoAcidSequence
    position: int
    members: tuple[CodeAndPosition[AminoAcidCode], ...] = field(default=(), repr=False)

    def __str__(self) -> str:
        return str(self.sequence)

    def __len__(self) -> int:
        return len(self.sequence)


class NucleotideRecord(BaseModel):
    """
    Nucleotide sequence record as loaded from FASTA or the command line.

    This is the primary input object for translation from the outside.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Record identifier (FASTA id)")
    description: Optional[str] = Field(None, description="Full FASTA header line")
    sequence: str = Field(..., min_length=1)

    @property
    def sequence_length(self) -> int:
        return len(self.sequence)

    @field_validator("sequence")
    @classmethod
    def validate_sequence(cls, v: str) -> str:
        """Validate that sequence contains only nucleotide codes."""
        allowed = {code.raw_code for code in NucleicAcidCode}

        v = "".join(v.split()).upper()
        invalid = set(v) - allowed

        if invalid:
            raise ValueError(f"Invalid nucleotide characters: {sorted(invalid)}")

        return v

    def to_sequence(self) -> NucleicAcidSequence:
        """Convert into a NucleicAcidSequence container."""
        from .sequence import NucleicAcidSequence

        return NucleicAcidSequence.from_string(self.sequence)


class OpenReadingFrame(BaseModel):
    """
    An open reading frame found in one of the six reading frames.

    ``position`` is the index of the start residue within the frame's
    translation. The nucleotide span refers to the sense strand as given by
    the caller and covers the start codon through the last residue; the
    stop codon is not included.
    """
    model_config = ConfigDict(frozen=True)

    sequence: str = Field(..., min_length=1, description="Amino acid sequence, start residue first")
    position: int = Field(..., ge=0, description="Position of the start residue in the frame translation")
    frame: int = Field(..., ge=0, le=2)
    strand: Strand = Strand.FORWARD
    nucleotide_start: Optional[int] = Field(None, ge=0, description="0-indexed, inclusive")
    nucleotide_end: Optional[int] = Field(None, ge=0, description="0-indexed, exclusive")
    sequence_id: Optional[str] = None

    @field_validator("sequence")
    @classmethod
    def validate_residues(cls, v: str) -> str:
        allowed = {code.raw_code for code in AminoAcidCode}
        invalid = set(v) - allowed
        if invalid:
            raise ValueError(f"Invalid amino acid characters: {sorted(invalid)}")
        return v

    @field_validator("nucleotide_end")
    @classmethod
    def end_after_start(cls, v: Optional[int], info) -> Optional[int]:
        start = info.data.get("nucleotide_start")
        if v is not None and start is not None and v <= start:
            raise ValueError("nucleotide_end must be greater than nucleotide_start")
        return v

    @property
    def length(self) -> int:
        """Length in residues."""
        return len(self.sequence)

    @property
    def label(self) -> str:
        """Frame label such as ``+1`` or ``-3``."""
        sign = "+" if self.strand is Strand.FORWARD else "-"
        return f"{sign}{self.frame + 1}"


class FrameTranslationResult(BaseModel):
    """Translation of one record in one reading frame."""
    model_config = ConfigDict(frozen=True)

    sequence_id: str
    frame: int = Field(..., ge=0, le=2)
    strand: Strand = Strand.FORWARD
    protein: str = Field("", description="Translated amino acid sequence")
    orfs: list[OpenReadingFrame] = Field(default_factory=list)

    @property
    def label(self) -> str:
        sign = "+" if self.strand is Strand.FORWARD else "-"
        return f"{sign}{self.frame + 1}"
