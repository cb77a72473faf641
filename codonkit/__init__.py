"""
codonkit: Codon-level translation of nucleic acid sequences.

This package translates DNA and RNA sequences into protein sequences
following the standard genetic code, in any of the three forward and three
reverse (antisense) reading frames, and extracts open reading frames bounded
by start and stop codons.

Translation works on positioned records: every amino acid keeps its position
in the translated frame and the three nucleotide records it was read from,
so results can always be traced back to the input. Codons containing
unknown symbols are dropped from the output rather than replaced.

Key components:
    - core: Alphabets, codon table, complement rules and sequence containers
    - translation: Frame translation, multi-frame scanning and ORF extraction
    - cli: Command-line interface

Basic usage:
    >>> from codonkit import translate, find_orfs
    >>>
    >>> protein = translate(0, "ATGCCACCCGTTGGGGGCAAAAAGGCCAAGAAG")
    >>> print(protein.as_amino_acid_sequence())
    MPPVGGKKAKK
    >>> for orf in find_orfs("ATGCCACCCGTTTAAAAAAAG", reverse_frames=()):
    ...     print(f"  ORF {orf.label}: {orf.nucleotide_start}-{orf.nucleotide_end} ({orf.sequence})")
      ORF +1: 0-12 (MPPV)
"""

__version__ = "0.1.0"

from .core.alphabet import AminoAcidCode, NucleicAcidCode
from .core.codon_table import STANDARD_CODON_TABLE, CodonTable, translate_codon
from .core.complement import (
    ComplementationType,
    ComplementError,
    complement,
    dna_to_rna,
    reverse_complement_strand,
    rna_to_dna,
)
from .core.models import (
    AminoAcidSequenceAndPosition,
    CodeAndPosition,
    CodeAndPositionWithSource,
    FrameTranslationResult,
    NucleotideRecord,
    OpenReadingFrame,
    Strand,
)
from .core.sequence import (
    AminoAcidSequence,
    NucleicAcidSequence,
    SequenceError,
    parse_fasta,
)
from .translation import (
    FrameTranslator,
    InvalidFrameError,
    MultiFrameTranslator,
    ORFExtractor,
    SequenceTranslation,
    TranslationError,
    filter_valid_protein_sequences,
    find_orfs,
    multi_translate,
    translate,
    translate_all_frames,
    translate_all_frames_and_reverse_frames,
    translate_all_reverse_frames,
    translate_frames,
    translate_reverse,
)

__all__ = [
    # Version
    "__version__",
    # Alphabets and codon table
    "NucleicAcidCode",
    "AminoAcidCode",
    "CodonTable",
    "STANDARD_CODON_TABLE",
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
    "SequenceError",
    "parse_fasta",
    # Translation
    "FrameTranslator",
    "MultiFrameTranslator",
    "SequenceTranslation",
    "TranslationError",
    "InvalidFrameError",
    "translate",
    "translate_reverse",
    "translate_all_frames",
    "translate_all_reverse_frames",
    "translate_all_frames_and_reverse_frames",
    "multi_translate",
    "translate_frames",
    # ORFs
    "ORFExtractor",
    "filter_valid_protein_sequences",
    "find_orfs",
]
