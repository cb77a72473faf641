"""
Codon table of the standard genetic code.

The table maps nucleotide triplets to amino acids. It is populated from the
canonical DNA codon assignments, including the degenerate codons that are
conventionally written with IUPAC ambiguity codes (e.g. ``GCN`` for alanine).
The RNA table is derived from the DNA table by replacing T with U in every
key, so both alphabets are accepted by a single lookup.

Lookups are exact: an ambiguity codon translates only if it is literally
listed. ``GCR`` is not translated even though every codon it stands for
encodes alanine.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Sequence, Union

from .alphabet import AminoAcidCode, NucleicAcidCode

logger = logging.getLogger(__name__)

CODON_LENGTH = 3

Codon = tuple[NucleicAcidCode, NucleicAcidCode, NucleicAcidCode]

# Canonical DNA codon assignments, concrete codons first, then the degenerate
# forms used in codon tables (Ala: GCT, GCC, GCA, GCG / GCN).
STANDARD_DNA_CODONS: dict[AminoAcidCode, tuple[str, ...]] = {
    AminoAcidCode.A: ("GCT", "GCC", "GCA", "GCG", "GCN"),
    AminoAcidCode.L: ("TTA", "TTG", "CTT", "CTC", "CTA", "CTG", "YTR", "CTN"),
    AminoAcidCode.R: ("CGT", "CGC", "CGA", "CGG", "AGA", "AGG", "CGN", "MGR"),
    AminoAcidCode.K: ("AAA", "AAG", "AAR"),
    AminoAcidCode.N: ("AAT", "AAC", "AAY"),
    AminoAcidCode.M: ("ATG",),
    AminoAcidCode.D: ("GAT", "GAC", "GAY"),
    AminoAcidCode.F: ("TTT", "TTC", "TTY"),
    AminoAcidCode.C: ("TGT", "TGC", "TGY"),
    AminoAcidCode.P: ("CCT", "CCC", "CCA", "CCG", "CCN"),
    AminoAcidCode.Q: ("CAA", "CAG", "CAR"),
    AminoAcidCode.S: ("TCT", "TCC", "TCA", "TCG", "AGT", "AGC", "TCN", "AGY"),
    AminoAcidCode.E: ("GAA", "GAG", "GAR"),
    AminoAcidCode.T: ("ACT", "ACC", "ACA", "ACG", "ACN"),
    AminoAcidCode.G: ("GGT", "GGC", "GGA", "GGG", "GGN"),
    AminoAcidCode.W: ("TGG",),
    AminoAcidCode.H: ("CAT", "CAC", "CAY"),
    AminoAcidCode.Y: ("TAT", "TAC", "TAY"),
    AminoAcidCode.I: ("ATT", "ATC", "ATA", "ATH"),
    AminoAcidCode.V: ("GTT", "GTC", "GTA", "GTG", "GTN"),
    AminoAcidCode.STOP: ("TAA", "TGA", "TAG", "TAR", "TRA"),
}

CodonLike = Union[str, Sequence[Optional[NucleicAcidCode]]]


def to_codon(codon: CodonLike) -> Optional[tuple[Optional[NucleicAcidCode], ...]]:
    """
    Normalize a raw string or a code sequence into a tuple of codes.

    Returns None for a missing codon; unknown raw characters become None
    entries.
    """
    if codon is None:
        return None
    if isinstance(codon, str):
        return tuple(NucleicAcidCode.from_raw(char) for char in codon)
    return tuple(codon)


def _dna_to_rna_codon(codon: Codon) -> Codon:
    return tuple(NucleicAcidCode.U if code is NucleicAcidCode.T else code for code in codon)


class CodonTable:
    """
    Immutable DNA and RNA codon lookup.

    Args:
        dna_codons: Mapping of DNA codons to amino acids. The RNA table is
            derived from it once the DNA table is complete.
    """

    def __init__(self, dna_codons: Mapping[Codon, AminoAcidCode]):
        dna_table = {}
        for codon, amino_acid in dna_codons.items():
            if len(codon) != CODON_LENGTH:
                raise ValueError(f"Codon must have {CODON_LENGTH} nucleotides: {codon}")
            dna_table[tuple(codon)] = amino_acid

        self._dna = MappingProxyType(dna_table)
        self._rna = MappingProxyType(
            {_dna_to_rna_codon(codon): amino_acid for codon, amino_acid in dna_table.items()}
        )
        logger.debug(f"Codon table built: {len(self._dna)} DNA / {len(self._rna)} RNA codons")

    @classmethod
    def from_assignments(
        cls,
        assignments: Mapping[AminoAcidCode, Iterable[str]],
    ) -> CodonTable:
        """Build a table from amino acid -> DNA codon strings."""
        dna_codons = {}
        for amino_acid, codons in assignments.items():
            for raw_codon in codons:
                codon = to_codon(raw_codon)
                if None in codon:
                    raise ValueError(f"Invalid codon {raw_codon!r} for {amino_acid.name}")
                dna_codons[codon] = amino_acid
        return cls(dna_codons)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(codons={len(self._dna)})"

    def __len__(self) -> int:
        return len(self._dna)

    def __contains__(self, codon: CodonLike) -> bool:
        return self.translate(codon) is not None

    @property
    def dna_table(self) -> Mapping[Codon, AminoAcidCode]:
        return self._dna

    @property
    def rna_table(self) -> Mapping[Codon, AminoAcidCode]:
        return self._rna

    def translate(self, codon: Optional[CodonLike]) -> Optional[AminoAcidCode]:
        """
        Translate a triplet into its amino acid.

        The DNA table is tried first, then the RNA table.

        Args:
            codon: Three nucleotide codes or a three-character string

        Returns:
            The amino acid (STOP for stop codons), or None if the codon is
            not exactly three symbols long or not listed in either table
        """
        key = to_codon(codon)
        if key is None or len(key) != CODON_LENGTH:
            return None

        retval = self._dna.get(key)
        if retval is None:
            retval = self._rna.get(key)
        return retval

    def codons_for(self, amino_acid: AminoAcidCode) -> list[str]:
        """DNA codons encoding the given amino acid, as strings."""
        return [
            "".join(code.raw_code for code in codon)
            for codon, value in self._dna.items()
            if value is amino_acid
        ]

    @property
    def start_codons(self) -> list[str]:
        return self.codons_for(AminoAcidCode.M)

    @property
    def stop_codons(self) -> list[str]:
        return self.codons_for(AminoAcidCode.STOP)


STANDARD_CODON_TABLE = CodonTable.from_assignments(STANDARD_DNA_CODONS)


def translate_codon(codon: Optional[CodonLike]) -> Optional[AminoAcidCode]:
    """Translate a single codon with the standard table."""
    return STANDARD_CODON_TABLE.translate(codon)
