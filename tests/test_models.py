"""
Unit tests for codonkit data models.

These tests validate the positioned value records used by the translation
engine and the Pydantic report models handed to callers and serializers.
"""

from dataclasses import FrozenInstanceError

import pytest
from pydantic import ValidationError

from codonkit.core.alphabet import AminoAcidCode, NucleicAcidCode
from codonkit.core.models import (
    AminoAcidSequenceAndPosition,
    CodeAndPosition,
    CodeAndPositionWithSource,
    FrameTranslationResult,
    NucleotideRecord,
    OpenReadingFrame,
    Strand,
)
from codonkit.core.sequence import AminoAcidSequence


class TestCodeAndPosition:
    """Tests for positioned symbols."""

    def test_creation(self):
        record = CodeAndPosition(NucleicAcidCode.A, 5)
        assert record.code is NucleicAcidCode.A
        assert record.position == 5

    def test_absent_code_allowed(self):
        assert CodeAndPosition(None, 0).code is None

    def test_negative_position_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            CodeAndPosition(NucleicAcidCode.A, -1)

    def test_immutable(self):
        record = CodeAndPosition(NucleicAcidCode.A, 0)
        with pytest.raises(FrozenInstanceError):
            record.position = 3

    def test_value_equality(self):
        assert CodeAndPosition(NucleicAcidCode.G, 2) == CodeAndPosition(NucleicAcidCode.G, 2)
        assert CodeAndPosition(NucleicAcidCode.G, 2) != CodeAndPosition(NucleicAcidCode.G, 3)


class TestCodeAndPositionWithSource:
    """Tests for translated records with provenance."""

    @pytest.fixture
    def methionine(self):
        sources = tuple(
            CodeAndPosition(code, 4 + index)
            for index, code in enumerate((NucleicAcidCode.A, NucleicAcidCode.T, NucleicAcidCode.G))
        )
        return CodeAndPositionWithSource(AminoAcidCode.M, 0, sources)

    def test_codon(self, methionine):
        assert methionine.codon == (NucleicAcidCode.A, NucleicAcidCode.T, NucleicAcidCode.G)

    def test_source_span(self, methionine):
        assert methionine.source_start == 4
        assert methionine.source_end == 7

    def test_is_code_and_position(self, methionine):
        assert isinstance(methionine, CodeAndPosition)

    def test_without_sources(self):
        record = CodeAndPositionWithSource(AminoAcidCode.K, 1)
        assert record.source_start is None
        assert record.codon == ()


class TestAminoAcidSequenceAndPosition:
    """Tests for delimited protein sequences."""

    def test_rendering(self):
        found = AminoAcidSequenceAndPosition(AminoAcidSequence.from_string("MPPV"), 12)
        assert str(found) == "MPPV"
        assert len(found) == 4
        assert found.position == 12


class TestNucleotideRecord:
    """Tests for the input record model."""

    def test_sequence_normalized(self):
        record = NucleotideRecord(id="test", sequence="atg cca\nccc")
        assert record.sequence == "ATGCCACCC"
        assert record.sequence_length == 9

    def test_ambiguity_codes_accepted(self):
        assert NucleotideRecord(id="test", sequence="ATGNRY-").sequence == "ATGNRY-"

    def test_invalid_characters_rejected(self):
        with pytest.raises(ValidationError, match="Invalid nucleotide characters"):
            NucleotideRecord(id="test", sequence="ATGXCC")

    def test_empty_sequence_rejected(self):
        with pytest.raises(ValidationError):
            NucleotideRecord(id="test", sequence="")

    def test_to_sequence(self):
        sequence = NucleotideRecord(id="test", sequence="AUGCCC").to_sequence()
        assert str(sequence.as_amino_acid_sequence()) == "MP"


class TestOpenReadingFrame:
    """Tests for the ORF report model."""

    def test_creation(self):
        orf = OpenReadingFrame(
            sequence="MPPV",
            position=0,
            frame=0,
            nucleotide_start=0,
            nucleotide_end=12,
        )
        assert orf.length == 4
        assert orf.strand is Strand.FORWARD
        assert orf.label == "+1"

    def test_reverse_label(self):
        orf = OpenReadingFrame(sequence="M", position=0, frame=2, strand=Strand.REVERSE)
        assert orf.label == "-3"

    def test_frame_range(self):
        with pytest.raises(ValidationError):
            OpenReadingFrame(sequence="M", position=0, frame=3)

    def test_end_must_exceed_start(self):
        with pytest.raises(ValidationError, match="greater than nucleotide_start"):
            OpenReadingFrame(sequence="M", position=0, frame=0, nucleotide_start=9, nucleotide_end=9)

    def test_invalid_residues(self):
        with pytest.raises(ValidationError, match="Invalid amino acid characters"):
            OpenReadingFrame(sequence="MP1", position=0, frame=0)

    def test_json_serialization(self):
        orf = OpenReadingFrame(sequence="MPPV", position=0, frame=0, strand=Strand.REVERSE)
        data = orf.model_dump(mode="json")

        assert data["strand"] == "reverse"
        assert data["sequence"] == "MPPV"


class TestFrameTranslationResult:
    """Tests for translated frame reports."""

    def test_defaults(self):
        result = FrameTranslationResult(sequence_id="gene1", frame=1)
        assert result.protein == ""
        assert result.orfs == []
        assert result.label == "+2"
