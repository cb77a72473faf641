"""
Codon translation engine.

Modules:
    frame: Single-frame translation, forward and reverse
    multiframe: Single-pass translation of all frames and frame selection
    orf: Open reading frame extraction
"""

from .frame import (
    FRAMES,
    FrameTranslator,
    InvalidFrameError,
    SequenceTranslation,
    TranslationError,
    translate,
    translate_all_frames,
    translate_all_frames_and_reverse_frames,
    translate_all_reverse_frames,
    translate_reverse,
)
from .multiframe import (
    AminoAcidCodeByFrames,
    MultiFrameTranslation,
    MultiFrameTranslator,
    TranslationBuilder,
    multi_translate,
    translate_frames,
)
from .orf import (
    ORFExtractor,
    ORFState,
    filter_valid_protein_sequences,
    find_orfs,
)

__all__ = [
    "FRAMES",
    "FrameTranslator",
    "SequenceTranslation",
    "TranslationError",
    "InvalidFrameError",
    "translate",
    "translate_reverse",
    "translate_all_frames",
    "translate_all_reverse_frames",
    "translate_all_frames_and_reverse_frames",
    "AminoAcidCodeByFrames",
    "MultiFrameTranslator",
    "MultiFrameTranslation",
    "TranslationBuilder",
    "multi_translate",
    "translate_frames",
    "ORFExtractor",
    "ORFState",
    "filter_valid_protein_sequences",
    "find_orfs",
]
