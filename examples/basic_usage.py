#!/usr/bin/env python3
"""
codonkit Example: Translating a Gene in All Six Frames

This script demonstrates the core functionality of codonkit on short
synthetic genes: single-frame translation with provenance, reverse-frame
translation, the single-pass multi-frame scan and ORF detection.

Run with: python examples/basic_usage.py
"""

from codonkit import (
    ComplementationType,
    NucleicAcidSequence,
    find_orfs,
    multi_translate,
    translate,
    translate_frames,
    translate_reverse,
)
from codonkit.core.codon_table import STANDARD_CODON_TABLE


def print_header(title: str):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def forward_frames():
    """
    Translate the three forward frames of a short gene.

    Every amino acid remembers the codon it came from, so the protein can be
    mapped back onto the gene.
    """
    print_header("Forward Frames")

    gene = "ATGCCACCCGTTGGGGGCAAAAAGGCCAAGAAG"
    print(f"\nGene: {gene} ({len(gene)} nt)")

    for frame in (0, 1, 2):
        protein = translate(frame, gene).as_amino_acid_sequence()
        print(f"  Frame +{frame + 1}: {protein}")

    print("\nProvenance of frame +1:")
    for record in translate(0, gene).records()[:4]:
        codon = "".join(code.raw_code for code in record.codon)
        print(f"  {record.position:3d} {record.code.raw_code}  <- {codon} at {record.source_start}-{record.source_end}")


def reverse_frames():
    """
    Translate the antisense strand.

    Reverse-frame records come back in the order of the input, so the
    protein reads from its C-terminus.
    """
    print_header("Reverse Frames")

    gene = "GCGATATCGCAAA"
    sequence = NucleicAcidSequence.from_string(gene)
    print(f"\nSense:      {sequence}")
    print(f"Complement: {sequence.as_reverse_strand()}")
    print(f"Antisense:  {sequence.as_reverse_strand().inverse()}")

    for frame in (0, 1, 2):
        protein = translate_reverse(frame, gene).as_amino_acid_sequence()
        print(f"  Frame -{frame + 1}: {protein}")

    rna = sequence.to_rna()
    rna_protein = translate_reverse(0, rna, ComplementationType.RNA).as_amino_acid_sequence()
    print(f"\nRNA {rna}, frame -1: {rna_protein}")


def single_pass_scan():
    """Read the sequence once and serve all three frames from the scan."""
    print_header("Multi-Frame Scan")

    translation = multi_translate("ACGTTGCATG")
    for bundle in translation.bundles():
        codes = [bundle.code_of_frame(k) for k in (0, 1, 2)]
        rendered = " ".join(code.raw_code if code else "." for code in codes)
        print(f"  after {bundle.read_count:2d} nt: {rendered}")

    for frame_translation in translation:
        print(f"  Frame {frame_translation.label}: {frame_translation.as_amino_acid_sequence()}")

    print("\nSelected frames:")
    builder = translate_frames("ACGTTGCATG").frames(0).reverse_frames(2, 0)
    for selected in builder.get():
        print(f"  {selected.label}: {selected.as_amino_acid_sequence()}")


def open_reading_frames():
    """Find start-to-stop reading frames on both strands."""
    print_header("Open Reading Frames")

    gene = "ATGCCACCCGTTTAAAAAAAGATGCCACCCGTTTGCCACCCGTTTAAAC"
    print(f"\nGene: {gene}")

    for orf in find_orfs(gene, sequence_id="example"):
        print(
            f"  {orf.label}: {orf.sequence:12s} "
            f"nt {orf.nucleotide_start}-{orf.nucleotide_end} ({orf.length} aa)"
        )


def codon_table():
    """Show the degenerate codons of the standard table."""
    print_header("Codon Table")

    print(f"\nCodons: {len(STANDARD_CODON_TABLE)}")
    print(f"Start: {', '.join(STANDARD_CODON_TABLE.start_codons)}")
    print(f"Stop:  {', '.join(STANDARD_CODON_TABLE.stop_codons)}")
    for raw in ("GCN", "GCR", "AUG", "UAR"):
        amino_acid = STANDARD_CODON_TABLE.translate(raw)
        print(f"  {raw} -> {amino_acid.full_name if amino_acid else 'no translation'}")


if __name__ == "__main__":
    forward_frames()
    reverse_frames()
    single_pass_scan()
    open_reading_frames()
    codon_table()
