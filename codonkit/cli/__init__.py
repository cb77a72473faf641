"""
Command-line interface for codonkit.

The CLI exposes translation without requiring Python programming
knowledge. It's designed for:

1. **Translation**: Translate FASTA files in any of the six reading frames
2. **ORF detection**: List start-to-stop reading frames with coordinates
3. **Exploration**: Inspect complements and the codon table

Usage patterns:
    codonkit translate -f genes.fasta --all-frames
    codonkit orfs -f genes.fasta --min-length 30
    codonkit codon-table --rna
"""

from .main import cli, main

__all__ = ["cli", "main"]
