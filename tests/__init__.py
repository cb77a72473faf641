"""
codonkit test suite.

Tests are organized by module:
- test_alphabet: Nucleotide/amino acid codes and ambiguity matching
- test_codon_table: Codon lookup of the standard genetic code
- test_complement: Base pairing and DNA/RNA conversion
- test_sequence: Sequence containers, validation and FASTA input
- test_models: Positioned records and report models
- test_translation: Single-frame forward and reverse translation
- test_multiframe: Single-pass multi-frame scan and frame selection
- test_orf: Open reading frame extraction
- test_cli: Command-line interface
"""
