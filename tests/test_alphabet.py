"""
Unit tests for the nucleotide and amino acid alphabets.

Ambiguity matching follows the IUPAC conventions: an ambiguity code
matches every code whose concrete symbols it covers, so ``N`` matches any
nucleotide code and ``X`` any residue code, but neither matches the gap.
"""

import pytest

from codonkit.core.alphabet import (
    CONCRETE_AMINO_ACIDS,
    AminoAcidCode,
    NucleicAcidCode,
)
from codonkit.core.translatable import TranslatableCode, translatable_codes

NA = NucleicAcidCode
AA = AminoAcidCode


class TestNucleicAcidCode:
    """Tests for IUPAC nucleotide codes."""

    def test_enumeration_order(self):
        """Codes keep the conventional IUPAC order."""
        assert "".join(code.raw_code for code in NA) == "ACGTURYKMSWBDHVN-"

    def test_from_raw_is_case_insensitive(self):
        assert NA.from_raw("a") is NA.A
        assert NA.from_raw("N") is NA.N
        assert NA.from_raw("-") is NA.GAP

    def test_unknown_raw_gives_none(self):
        """Unknown characters are absent, not an error."""
        assert NA.from_raw("X") is None
        assert NA.from_raw("") is None

    def test_invalid_handler_called(self):
        seen = []
        assert NA.from_raw("?", seen.append) is None
        assert NA.from_raw("G", seen.append) is NA.G
        assert seen == ["?"]

    def test_concrete_bases_match_themselves(self):
        for code in (NA.A, NA.C, NA.G, NA.T, NA.U):
            assert code.matches(code)
            assert not code.is_ambiguous

    def test_matching_codes_of_adenine(self):
        """A is covered by every ambiguity code that includes it."""
        assert NA.A.matching_codes() == (
            NA.A, NA.R, NA.M, NA.W, NA.D, NA.H, NA.V, NA.N,
        )

    def test_ambiguity_closure(self):
        """Matching is set inclusion, including ambiguity-to-ambiguity."""
        assert NA.N.matches(NA.R)
        assert NA.B.matches(NA.S)
        assert not NA.R.matches(NA.N)
        assert not NA.V.matches(NA.T)

    def test_gap_matches_only_itself(self):
        assert NA.GAP.matches(NA.GAP)
        assert not NA.N.matches(NA.GAP)
        assert NA.GAP.matching_codes() == (NA.GAP,)

    def test_full_name(self):
        assert NA.A.full_name == "Adenine"
        assert NA.U.full_name == "Uracil"


class TestAminoAcidCode:
    """Tests for amino acid codes including STOP and gap."""

    def test_enumeration_order(self):
        assert "".join(code.raw_code for code in AA) == "ACDEFGHIKLJMNBOPQRSTUVWYZ*-X"

    def test_from_raw(self):
        assert AA.from_raw("m") is AA.M
        assert AA.from_raw("*") is AA.STOP
        assert AA.from_raw("1") is None

    def test_start_and_stop_flags(self):
        """Only methionine opens a reading frame."""
        assert [code for code in AA if code.is_start] == [AA.M]
        assert AA.STOP.is_stop
        assert AA.GAP.is_gap
        assert not AA.M.is_stop

    def test_leucine_matching_codes(self):
        """L is covered by J (L or I) and X (any)."""
        assert AA.L.matching_codes() == (AA.L, AA.J, AA.X)

    def test_x_matches_all_residues(self):
        assert AA.X.matches(AA.J)
        assert AA.X.matches(AA.B)
        for raw in CONCRETE_AMINO_ACIDS:
            assert AA.X.matches(AA.from_raw(raw))

    def test_x_excludes_stop_and_gap(self):
        assert not AA.X.matches(AA.STOP)
        assert not AA.X.matches(AA.GAP)

    def test_ambiguity_codes(self):
        assert AA.B.represents == frozenset("DN")
        assert AA.Z.matches(AA.Q)
        assert not AA.Z.matches(AA.D)
        assert AA.X.is_ambiguous
        assert not AA.STOP.is_ambiguous


class TestTranslatableCode:
    """Tests for lazily interpreted raw input symbols."""

    def test_interpret_in_both_alphabets(self):
        code = TranslatableCode("C", 4)
        assert code.as_nucleic_acid_code() is NA.C
        assert code.as_amino_acid_code() is AA.C

    def test_code_and_position(self):
        record = TranslatableCode("g", 7).as_nucleic_acid_code_and_position()
        assert record.code is NA.G
        assert record.position == 7

    def test_handler_receives_wrapper(self):
        """The handler is told which input symbol failed."""
        failed = []
        code = TranslatableCode("E", 2).with_invalid_translation_handler(failed.append)

        assert code.as_amino_acid_code() is AA.E
        assert code.as_nucleic_acid_code() is None
        assert failed == [code]
        assert failed[0].position == 2

    def test_with_handler_returns_new_instance(self):
        code = TranslatableCode("A", 0)
        with_handler = code.with_invalid_translation_handler(lambda c: None)
        assert with_handler is not code
        assert code.invalid_translation_handler is None

    def test_translatable_codes(self):
        codes = translatable_codes("AT?")
        assert [c.position for c in codes] == [0, 1, 2]
        assert codes[2].as_nucleic_acid_code() is None


@pytest.mark.parametrize("code", list(NucleicAcidCode) + list(AminoAcidCode))
def test_every_code_matches_itself(code):
    assert code.matches(code)
    assert code in code.matching_codes()
