"""
Nucleotide and amino acid alphabets for codonkit.

Both alphabets are closed enumerations of single-character symbols following
the IUPAC conventions. Ambiguity symbols (e.g. nucleotide ``N`` or amino acid
``X``) stand for a set of concrete symbols; whether one symbol matches another
is decided by set inclusion over the concrete symbols they represent. The
resulting match relation is evaluated once for every pair of symbols when this
module is imported and looked up afterwards.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

logger = logging.getLogger(__name__)

InvalidCodeHandler = Callable[[str], None]


class NucleicAcidCode(str, Enum):
    """
    IUPAC nucleotide codes for DNA and RNA.

    The concrete bases are A, C, G, T and U. All other codes except the gap
    are ambiguity codes standing for two or more concrete bases.
    """
    A = "A"
    C = "C"
    G = "G"
    T = "T"
    U = "U"
    R = "R"
    Y = "Y"
    K = "K"
    M = "M"
    S = "S"
    W = "W"
    B = "B"
    D = "D"
    H = "H"
    V = "V"
    N = "N"
    GAP = "-"

    @property
    def raw_code(self) -> str:
        """The single-character code."""
        return self.value

    @property
    def full_name(self) -> str:
        return _NUCLEIC_ACID_NAMES[self.value]

    @property
    def represents(self) -> frozenset[str]:
        """Raw codes of the concrete bases this code stands for."""
        return _NUCLEIC_ACID_BASES[self.value]

    @property
    def is_ambiguous(self) -> bool:
        return len(self.represents) > 1

    def matches(self, other: NucleicAcidCode) -> bool:
        """Check whether ``other`` is covered by this code."""
        return other in _NUCLEIC_ACID_MATCHES[self]

    def matching_codes(self) -> tuple[NucleicAcidCode, ...]:
        """
        All codes which match this code, in enumeration order.

        For a concrete base this is the base itself plus every ambiguity
        code including it, e.g. ``A`` -> ``A R M W D H V N``.
        """
        return tuple(code for code in NucleicAcidCode if code.matches(self))

    @classmethod
    def from_raw(
        cls,
        code: str,
        on_invalid: Optional[InvalidCodeHandler] = None,
    ) -> Optional[NucleicAcidCode]:
        """
        Look up the code for a raw character (case-insensitive).

        Args:
            code: Single raw character
            on_invalid: Called with the raw input if no code matches

        Returns:
            The matching code, or None for unknown characters
        """
        retval = _NUCLEIC_ACID_BY_RAW.get(code.upper()) if code else None
        if retval is None:
            logger.debug(f"No nucleic acid code for raw input {code!r}")
            if on_invalid is not None:
                on_invalid(code)
        return retval


class AminoAcidCode(str, Enum):
    """
    IUPAC amino acid codes including the translation STOP and the gap.

    J, B, Z and X are ambiguity codes. X stands for any residue, i.e.
    everything except STOP and the gap.
    """
    A = "A"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"
    H = "H"
    I = "I"
    K = "K"
    L = "L"
    J = "J"
    M = "M"
    N = "N"
    B = "B"
    O = "O"
    P = "P"
    Q = "Q"
    R = "R"
    S = "S"
    T = "T"
    U = "U"
    V = "V"
    W = "W"
    Y = "Y"
    Z = "Z"
    STOP = "*"
    GAP = "-"
    X = "X"

    @property
    def raw_code(self) -> str:
        return self.value

    @property
    def full_name(self) -> str:
        return _AMINO_ACID_NAMES[self.value]

    @property
    def represents(self) -> frozenset[str]:
        """Raw codes of the concrete residues this code stands for."""
        return _AMINO_ACID_RESIDUES[self.value]

    @property
    def is_ambiguous(self) -> bool:
        return len(self.represents) > 1

    @property
    def is_start(self) -> bool:
        """Methionine opens a reading frame."""
        return self is AminoAcidCode.M

    @property
    def is_stop(self) -> bool:
        return self is AminoAcidCode.STOP

    @property
    def is_gap(self) -> bool:
        return self is AminoAcidCode.GAP

    def matches(self, other: AminoAcidCode) -> bool:
        """Check whether ``other`` is covered by this code."""
        return other in _AMINO_ACID_MATCHES[self]

    def matching_codes(self) -> tuple[AminoAcidCode, ...]:
        """
        All codes which match this code, including the unspecific ones.

        E.g. ``L`` -> ``L J X``.
        """
        return tuple(code for code in AminoAcidCode if code.matches(self))

    @classmethod
    def from_raw(
        cls,
        code: str,
        on_invalid: Optional[InvalidCodeHandler] = None,
    ) -> Optional[AminoAcidCode]:
        """
        Look up the code for a raw character (case-insensitive).

        Args:
            code: Single raw character
            on_invalid: Called with the raw input if no code matches

        Returns:
            The matching code, or None for unknown characters
        """
        retval = _AMINO_ACID_BY_RAW.get(code.upper()) if code else None
        if retval is None:
            logger.debug(f"No amino acid code for raw input {code!r}")
            if on_invalid is not None:
                on_invalid(code)
        return retval


_NUCLEIC_ACID_NAMES = {
    "A": "Adenine",
    "C": "Cytosine",
    "G": "Guanine",
    "T": "Thymine",
    "U": "Uracil",
    "R": "A or G; puRine",
    "Y": "C, T or U; pYrimidines",
    "K": "G, T or U; bases which are Ketones",
    "M": "A or C; bases with aMino groups",
    "S": "C or G; Strong interaction",
    "W": "A, T or U; Weak interaction",
    "B": "not A (i.e. C, G, T or U); B comes after A",
    "D": "not C (i.e. A, G, T or U); D comes after C",
    "H": "not G (i.e. A, C, T or U); H comes after G",
    "V": "neither T nor U (i.e. A, C or G); V comes after U",
    "N": "A, C, G, T or U; Nucleic acid",
    "-": "Gap of indeterminate length",
}

_NUCLEIC_ACID_BASES = {
    "A": frozenset("A"),
    "C": frozenset("C"),
    "G": frozenset("G"),
    "T": frozenset("T"),
    "U": frozenset("U"),
    "R": frozenset("AG"),
    "Y": frozenset("CTU"),
    "K": frozenset("GTU"),
    "M": frozenset("AC"),
    "S": frozenset("CG"),
    "W": frozenset("ATU"),
    "B": frozenset("CGTU"),
    "D": frozenset("AGTU"),
    "H": frozenset("ACTU"),
    "V": frozenset("ACG"),
    "N": frozenset("ACGTU"),
    "-": frozenset("-"),
}

_AMINO_ACID_NAMES = {
    "A": "Alanine",
    "C": "Cysteine",
    "D": "Aspartic acid",
    "E": "Glutamic acid",
    "F": "Phenylalanine",
    "G": "Glycine",
    "H": "Histidine",
    "I": "Isoleucine",
    "K": "Lysine",
    "L": "Leucine",
    "J": "Leucine (L) or Isoleucine (I)",
    "M": "Methionine",
    "N": "Asparagine",
    "B": "Aspartic acid (D) or Asparagine (N)",
    "O": "Pyrrolysine",
    "P": "Proline",
    "Q": "Glutamine",
    "R": "Arginine",
    "S": "Serine",
    "T": "Threonine",
    "U": "Selenocysteine",
    "V": "Valine",
    "W": "Tryptophan",
    "Y": "Tyrosine",
    "Z": "Glutamic acid (E) or Glutamine (Q)",
    "*": "Translation STOP",
    "-": "Gap of indeterminate length",
    "X": "Any amino acid",
}

CONCRETE_AMINO_ACIDS = frozenset("ACDEFGHIKLMNOPQRSTUVWY")

_AMINO_ACID_RESIDUES = {
    **{code: frozenset(code) for code in CONCRETE_AMINO_ACIDS},
    "J": frozenset("LI"),
    "B": frozenset("DN"),
    "Z": frozenset("EQ"),
    "*": frozenset("*"),
    "-": frozenset("-"),
    "X": CONCRETE_AMINO_ACIDS,
}


def _build_match_table(codes) -> dict:
    """Evaluate the match relation for every pair of codes."""
    return {
        code: frozenset(other for other in codes if other.represents <= code.represents)
        for code in codes
    }


_NUCLEIC_ACID_BY_RAW = {code.value: code for code in NucleicAcidCode}
_AMINO_ACID_BY_RAW = {code.value: code for code in AminoAcidCode}

_NUCLEIC_ACID_MATCHES = _build_match_table(list(NucleicAcidCode))
_AMINO_ACID_MATCHES = _build_match_table(list(AminoAcidCode))

# Concrete bases of DNA and RNA respectively
DNA_BASES = frozenset("ACGT")
RNA_BASES = frozenset("ACGU")
