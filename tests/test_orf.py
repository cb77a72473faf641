"""
Unit tests for open reading frame extraction.

An ORF runs from a methionine to the next stop. A later methionine before
the stop restarts the ORF, and a stop without a preceding methionine emits
nothing.
"""

import pytest

from codonkit.core.alphabet import AminoAcidCode
from codonkit.core.models import CodeAndPosition, Strand
from codonkit.translation import (
    InvalidFrameError,
    ORFExtractor,
    ORFState,
    filter_valid_protein_sequences,
    find_orfs,
    translate,
)

AA = AminoAcidCode


def codes(raw: str) -> list:
    return [AA.from_raw(char) for char in raw]


def extract(stream) -> list:
    return [(str(found), found.position) for found in filter_valid_protein_sequences(stream)]


class TestORFExtractor:
    """Tests for the start/stop state machine."""

    def test_single_orf(self):
        """M,P,P,V,STOP,K,K gives exactly MPPV at the start position."""
        assert extract(codes("MPPV*KK")) == [("MPPV", 0)]

    def test_leading_residues_ignored(self):
        assert extract(codes("KKMP*")) == [("MP", 2)]

    def test_latest_start_wins(self):
        assert extract(codes("MPMQ*")) == [("MQ", 2)]

    def test_stop_without_start(self):
        assert extract(codes("*KK*")) == []

    def test_repeated_stop_emits_once(self):
        assert extract(codes("MK**")) == [("MK", 0)]

    def test_start_directly_before_stop(self):
        assert extract(codes("M*")) == [("M", 0)]

    def test_unterminated_orf(self):
        extractor = ORFExtractor()
        assert list(extractor.extract(codes("MPPV"))) == []
        assert extractor.state is ORFState.IN_SEQUENCE

    def test_several_orfs(self):
        assert extract(codes("MA*KMC*")) == [("MA", 0), ("MC", 4)]

    def test_absent_and_gap_are_skipped(self):
        """Gaps do not terminate an ORF."""
        stream = [AA.M, None, AA.GAP, AA.P, AA.STOP]
        assert extract(stream) == [("MP", 0)]

    def test_positioned_records(self):
        stream = [
            CodeAndPosition(code, 10 + index)
            for index, code in enumerate(codes("MPV*"))
        ]
        found = list(filter_valid_protein_sequences(stream))

        assert found[0].position == 10
        assert [m.position for m in found[0].members] == [10, 11, 12]

    def test_feed(self):
        extractor = ORFExtractor()
        assert extractor.state is ORFState.SEEKING_START

        assert extractor.feed(AA.M) is None
        assert extractor.state is ORFState.IN_SEQUENCE
        assert extractor.feed(AA.K) is None

        found = extractor.feed(AA.STOP)
        assert str(found) == "MK"
        assert extractor.state is ORFState.SEEKING_START

    def test_reset(self):
        extractor = ORFExtractor()
        extractor.feed(AA.M)
        extractor.reset()

        assert extractor.state is ORFState.SEEKING_START
        assert extractor.feed(AA.STOP) is None

    def test_translated_stream_keeps_provenance(self):
        found = list(filter_valid_protein_sequences(translate(0, "ATGCCACCCGTTTAAAAAAAG")))

        assert [str(f) for f in found] == ["MPPV"]
        assert found[0].members[0].source_start == 0
        assert found[0].members[-1].source_end == 12


class TestFindOrfs:
    """Tests for ORF reports over forward and reverse frames."""

    def test_forward_orf(self):
        orfs = find_orfs("ATGCCACCCGTTTAAAAAAAG")

        assert len(orfs) == 1
        orf = orfs[0]
        assert orf.sequence == "MPPV"
        assert orf.frame == 0
        assert orf.strand is Strand.FORWARD
        assert (orf.nucleotide_start, orf.nucleotide_end) == (0, 12)
        assert orf.label == "+1"

    def test_reverse_orf(self):
        """Reverse ORFs read N- to C-terminal with sense-strand coordinates."""
        orfs = find_orfs("TTAAACGGGTGGCAT")

        assert len(orfs) == 1
        orf = orfs[0]
        assert orf.sequence == "MPPV"
        assert orf.strand is Strand.REVERSE
        assert orf.frame == 0
        assert orf.position == 0
        assert (orf.nucleotide_start, orf.nucleotide_end) == (3, 15)

    def test_frame_selection(self):
        assert find_orfs("TTAAACGGGTGGCAT", reverse_frames=()) == []
        assert find_orfs("ATGCCACCCGTTTAAAAAAAG", frames=(1, 2), reverse_frames=()) == []

    def test_min_length(self):
        assert find_orfs("ATGCCACCCGTTTAAAAAAAG", min_length=5) == []
        assert len(find_orfs("ATGCCACCCGTTTAAAAAAAG", min_length=4)) == 1

    def test_sequence_id(self):
        orfs = find_orfs("ATGCCACCCGTTTAAAAAAAG", sequence_id="gene1")
        assert orfs[0].sequence_id == "gene1"

    def test_shifted_frame(self):
        orfs = find_orfs("CATGAAATAGC", reverse_frames=())

        assert [(o.sequence, o.frame) for o in orfs] == [("MK", 1)]
        assert (orfs[0].nucleotide_start, orfs[0].nucleotide_end) == (1, 7)

    def test_invalid_frame(self):
        with pytest.raises(InvalidFrameError):
            find_orfs("ATG", frames=(3,))
