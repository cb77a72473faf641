"""
Core data structures and utilities for codonkit.

This module provides the alphabets, the codon table and the sequence
containers that the translation engine reads from and writes to. Data
representation is kept separate from the translation algorithms in
``codonkit.translation``.

Modules:
    alphabet: Nucleotide and amino acid enumerations with ambiguity matching
    codon_table: DNA/RNA codon lookup of the standard genetic code
    complement: Base pairing and DNA/RNA conversion
    models: Positioned value records and Pydantic report models
    sequence: Sequence containers, validation and FASTA input
    translatable: Lazily interpreted raw input symbols
"""

from .alphabet import (
    CONCRETE_AMINO_ACIDS,
    DNA_BASES,
    RNA_BASES,
    AminoAcidCode,
    NucleicAcidCode,
)
from .codon_table import (
    CODON_LENGTH,
    STANDARD_CODON_TABLE,
    STANDARD_DNA_CODONS,
    CodonTable,
    translate_codon,
)
from .complement import (
    ComplementationType,
    ComplementError,
    complement,
    dna_to_rna,
    reverse_complement_strand,
    rna_to_dna,
)
from .models import (
    AminoAcidSequenceAndPosition,
    CodeAndPosition,
    CodeAndPositionWithSource,
    FrameTranslationResult,
    NucleotideRecord,
    OpenReadingFrame,
    Strand,
)
from .sequence import (
    AminoAcidSequence,
    AminoAcidSequenceBuilder,
    AminoAcidWithSourceSequence,
    CodeAndPositionSequence,
    CompactStorage,
    NucleicAcidSequence,
    SequenceError,
    SequenceValidator,
    TupleStorage,
    parse_fasta,
    read_fasta,
    to_fasta,
)
from .translatable import TranslatableCode, translatable_codes

__all__ = [
    # Alphabets
    "NucleicAcidCode",
    "AminoAcidCode",
    "CONCRETE_AMINO_ACIDS",
    "DNA_BASES",
    "RNA_BASES",
    "TranslatableCode",
    "translatable_codes",
    # Codon table
    "CodonTable",
    "STANDARD_CODON_TABLE",
    "STANDARD_DNA_CODONS",
    "CODON_LENGTH",
    "translate_codon",
    # Complement
    "ComplementationType",
    "ComplementError",
    "complement",
    "reverse_complement_strand",
    "dna_to_rna",
    "rna_to_dna",
    # Models
    "CodeAndPosition",
    "CodeAndPositionWithSource",
    "AminoAcidSequenceAndPosition",
    "NucleotideRecord",
    "OpenReadingFrame",
    "FrameTranslationResult",
    "Strand",
    # Sequences
    "NucleicAcidSequence",
    "AminoAcidSequence",
    "AminoAcidSequenceBuilder",
    "CodeAndPositionSequence",
    "AminoAcidWithSourceSequence",
    "TupleStorage",
    "CompactStorage",
    "SequenceError",
    "SequenceValidator",
    "parse_fasta",
    "read_fasta",
    "to_fasta",
]
