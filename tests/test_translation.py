"""
Unit tests for single-frame translation.

Forward frames are read from the first, second or third nucleotide; reverse
frames are read on the antisense strand and returned in input order.
"""

import pytest

from codonkit.core.alphabet import AminoAcidCode, NucleicAcidCode
from codonkit.core.codon_table import CodonTable
from codonkit.core.complement import ComplementationType, ComplementError
from codonkit.core.models import CodeAndPosition, Strand
from codonkit.core.sequence import CodeAndPositionSequence, NucleicAcidSequence
from codonkit.translation import (
    FrameTranslator,
    InvalidFrameError,
    TranslationError,
    translate,
    translate_all_frames,
    translate_all_frames_and_reverse_frames,
    translate_all_reverse_frames,
    translate_reverse,
)

SAMPLE_GENE = "ATGCCACCCGTTGGGGGCAAAAAGGCCAAGAAG"


def protein(translation) -> str:
    return str(translation.as_amino_acid_sequence())


class TestForwardFrames:
    """Tests for forward translation."""

    @pytest.mark.parametrize("frame, expected", [
        (0, "MPPVGGKKAKK"),
        (1, "CHPLGAKRPR"),
        (2, "ATRWGQKGQE"),
    ])
    def test_sample_gene(self, frame, expected):
        assert protein(translate(frame, SAMPLE_GENE)) == expected

    @pytest.mark.parametrize("frame, expected", [(0, "SPS"), (1, "RRP"), (2, "AVR")])
    def test_short_sequence(self, frame, expected):
        assert protein(translate(frame, "TCGCCGTCCGC")) == expected

    def test_longer_gene(self):
        assert protein(translate(0, "ATGCTCCGTCCCGGCGCGCAGCTGCTGCGGG")) == "MLRPGAQLLR"

    def test_rna_input(self):
        assert protein(translate(0, "AUGCCACCC")) == "MPP"

    @pytest.mark.parametrize("length", range(0, 14))
    @pytest.mark.parametrize("frame", [0, 1, 2])
    def test_record_count(self, frame, length):
        """A frame yields floor((n - frame) / 3) records for translatable input."""
        records = translate(frame, SAMPLE_GENE[:length]).records()
        assert len(records) == max(0, (length - frame) // 3)

    def test_positions_count_amino_acids(self):
        records = translate(1, SAMPLE_GENE).records()
        assert [r.position for r in records] == list(range(len(records)))

    def test_sources_are_kept(self):
        """Each amino acid carries its three source nucleotides."""
        first = translate(1, SAMPLE_GENE).records()[0]

        assert first.code is AminoAcidCode.C
        assert [s.position for s in first.sources] == [1, 2, 3]
        assert first.codon == (NucleicAcidCode.T, NucleicAcidCode.G, NucleicAcidCode.C)

    def test_untranslatable_codon_dropped(self):
        """Unknown codons produce no record and do not advance the position."""
        records = translate(0, "ATGNNNCCC").records()

        assert "".join(r.code.raw_code for r in records) == "MP"
        assert [r.position for r in records] == [0, 1]
        assert [s.position for s in records[1].sources] == [6, 7, 8]

    def test_unknown_character_dropped(self):
        assert protein(translate(0, "ATG?CACCC")) == "MP"

    def test_degenerate_codon(self):
        assert protein(translate(0, "GCNATG")) == "AM"

    def test_stop_is_translated(self):
        assert protein(translate(0, "ATGTAA")) == "M*"

    @pytest.mark.parametrize("frame", [-1, 3, 7])
    def test_invalid_frame(self, frame):
        with pytest.raises(InvalidFrameError):
            translate(frame, SAMPLE_GENE)

    def test_invalid_frame_is_value_error(self):
        with pytest.raises(ValueError):
            translate(3, SAMPLE_GENE)


class TestInputTypes:
    """The translator accepts strings, containers and record streams."""

    def test_nucleic_acid_sequence(self):
        sequence = NucleicAcidSequence.from_string(SAMPLE_GENE)
        assert protein(translate(0, sequence)) == "MPPVGGKKAKK"
        assert protein(sequence.translate(2)) == "ATRWGQKGQE"

    def test_code_and_position_sequence_keeps_positions(self):
        records = CodeAndPositionSequence(
            CodeAndPosition(code, 100 + index)
            for index, code in enumerate(NucleicAcidSequence.from_string("ATGCCC"))
        )
        translated = translate(0, records).records()

        assert [s.position for s in translated[0].sources] == [100, 101, 102]
        assert [r.position for r in translated] == [0, 1]

    def test_plain_codes(self):
        codes = [NucleicAcidCode.A, NucleicAcidCode.T, NucleicAcidCode.G]
        assert protein(translate(0, codes)) == "M"

    def test_one_shot_iterable(self):
        codes = iter(NucleicAcidSequence.from_string(SAMPLE_GENE))
        assert [protein(t) for t in translate_all_frames(codes)] == [
            "MPPVGGKKAKK", "CHPLGAKRPR", "ATRWGQKGQE",
        ]

    def test_custom_codon_table(self):
        translator = FrameTranslator(CodonTable.from_assignments({AminoAcidCode.M: ("ATG",)}))
        assert protein(translator.translate(0, "ATGCCCATG")) == "MM"


class TestSequenceTranslation:
    """Tests for the lazy translation result."""

    def test_metadata(self):
        translation = translate(2, SAMPLE_GENE)
        assert translation.frame == 2
        assert translation.strand is Strand.FORWARD
        assert translation.label == "+3"

    def test_lazy_until_consumed(self):
        translation = translate(0, SAMPLE_GENE)
        assert not translation.consumed
        translation.records()
        assert translation.consumed

    def test_not_restartable(self):
        translation = translate(0, SAMPLE_GENE)
        list(translation)

        with pytest.raises(TranslationError, match="already consumed"):
            list(translation)

    def test_as_sequence_is_reusable(self):
        sequence = translate(0, SAMPLE_GENE).as_sequence()
        assert str(sequence) == str(sequence) == "MPPVGGKKAKK"

    def test_codes(self):
        assert list(translate(0, "ATGTAA").codes()) == [AminoAcidCode.M, AminoAcidCode.STOP]


class TestReverseFrames:
    """Tests for antisense translation."""

    @pytest.mark.parametrize("frame, expected", [(0, "SIAF"), (1, "RYRL"), (2, "IDC")])
    def test_reverse_frames(self, frame, expected):
        assert protein(translate_reverse(frame, "GCGATATCGCAAA")) == expected

    def test_positions_of_antisense_pass_kept(self):
        """Records follow the input order but keep their antisense positions."""
        records = translate_reverse(0, "GCGATATCGCAAA").records()
        assert [r.position for r in records] == [3, 2, 1, 0]

    def test_strand_metadata(self):
        translation = translate_reverse(1, "GCGATATCGCAAA")
        assert translation.strand is Strand.REVERSE
        assert translation.label == "-2"

    def test_rna_complementation(self):
        translation = translate_reverse(0, "GCGAUAUCGCAAA", ComplementationType.RNA)
        assert protein(translation) == "SIAF"

    def test_antisense_gene(self):
        """The reverse complement of a gene translates back to its protein."""
        antisense = str(
            NucleicAcidSequence.from_string(SAMPLE_GENE).inverse().as_reverse_strand()
        )
        records = translate_reverse(0, antisense).records()
        assert "".join(r.code.raw_code for r in reversed(records)) == "MPPVGGKKAKK"

    def test_complement_error_raised_on_consumption(self):
        """Requesting a reverse frame is cheap; failure shows up when reading it."""
        translation = translate_reverse(0, "ATGNCC")
        with pytest.raises(ComplementError):
            translation.records()

    def test_invalid_frame(self):
        with pytest.raises(InvalidFrameError):
            translate_reverse(3, SAMPLE_GENE)


class TestAllFrames:
    """Tests for the all-frame convenience functions."""

    def test_all_reverse_frames(self):
        translations = translate_all_reverse_frames("GCGATATCGCAAA")
        assert [protein(t) for t in translations] == ["SIAF", "RYRL", "IDC"]

    def test_all_six_frames(self):
        translations = translate_all_frames_and_reverse_frames("GCGATATCGCAAA")

        assert [t.label for t in translations] == ["+1", "+2", "+3", "-1", "-2", "-3"]
        assert protein(translations[3]) == "SIAF"
