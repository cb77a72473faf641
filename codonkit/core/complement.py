"""
Complementary base pairing and DNA/RNA conversion.

Only the concrete bases have a complement. Ambiguity codes, the gap and
absent symbols raise ComplementError rather than being mapped to an
arbitrary base.
"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Union

from .alphabet import NucleicAcidCode
from .sequence import NucleicAcidSequence, SequenceError

A, C, G, T, U = (
    NucleicAcidCode.A,
    NucleicAcidCode.C,
    NucleicAcidCode.G,
    NucleicAcidCode.T,
    NucleicAcidCode.U,
)

_DNA_COMPLEMENTS = MappingProxyType({A: T, T: A, G: C, C: G})
_RNA_COMPLEMENTS = MappingProxyType({A: U, U: A, G: C, C: G})


class ComplementError(SequenceError):
    """Raised when a symbol has no defined complement."""
    pass


class ComplementationType(str, Enum):
    """Base pairing rules of double-stranded DNA or RNA."""
    DNA = "dna"
    RNA = "rna"

    @property
    def mapping(self) -> Mapping[NucleicAcidCode, NucleicAcidCode]:
        return _DNA_COMPLEMENTS if self is ComplementationType.DNA else _RNA_COMPLEMENTS


def complement(
    code: Optional[NucleicAcidCode],
    complementation_type: ComplementationType = ComplementationType.DNA,
) -> NucleicAcidCode:
    """
    Complementary base of a single code.

    Raises:
        ComplementError: If the code has no complement under the given rules
    """
    retval = complementation_type.mapping.get(code)
    if retval is None:
        raw = code.raw_code if code is not None else None
        raise ComplementError(
            f"No {complementation_type.name} complement defined for {raw!r}"
        )
    return retval


def reverse_complement_strand(
    sequence: Union[NucleicAcidSequence, Iterable[Optional[NucleicAcidCode]]],
    complementation_type: ComplementationType = ComplementationType.DNA,
) -> NucleicAcidSequence:
    """
    Complement every symbol of a strand, keeping the order.

    Reversing the result yields the antisense strand read 5' to 3'.
    """
    return NucleicAcidSequence(
        (complement(code, complementation_type) for code in sequence),
        compact=getattr(sequence, "is_compact", False),
    )


def _swap_thymine_uracil(code: Optional[NucleicAcidCode]) -> Optional[NucleicAcidCode]:
    if code is T:
        return U
    if code is U:
        return T
    return code


def dna_to_rna(sequence: Iterable[Optional[NucleicAcidCode]]) -> NucleicAcidSequence:
    """Swap T and U symbol by symbol; every other symbol is kept."""
    return NucleicAcidSequence(
        (_swap_thymine_uracil(code) for code in sequence),
        compact=getattr(sequence, "is_compact", False),
    )


def rna_to_dna(sequence: Iterable[Optional[NucleicAcidCode]]) -> NucleicAcidSequence:
    """Swap U and T symbol by symbol; every other symbol is kept."""
    return dna_to_rna(sequence)
