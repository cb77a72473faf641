"""
codonkit Command Line Interface.

This module provides a CLI for translating nucleotide sequences, listing
open reading frames and inspecting the codon table. Built with Click for
proper help documentation and Rich for terminal output.

Usage:
    codonkit translate ATGCCACCCGTTGGGGGC --all-frames
    codonkit translate -f genes.fasta --frame 0 --format fasta -o proteins.fasta
    codonkit orfs -f genes.fasta --min-length 30
    codonkit complement GCGATATCGCAAA --reverse
    codonkit codon-table
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

logger = logging.getLogger(__name__)

# Results go to stdout, banner and status messages to stderr
console = Console()
err_console = Console(stderr=True)

OUTPUT_FORMATS = ["table", "json", "fasta"]


def print_banner():
    """Print the codonkit banner."""
    banner = """
    ╔═══════════════════════════════════════════════════════════════╗
    ║                        codonkit v0.1.0                        ║
    ║        Codon Translation of DNA and RNA in All Six Frames     ║
    ╚═══════════════════════════════════════════════════════════════╝
    """
    err_console.print(banner, style="bold blue")


def _load_records(sequence: Optional[str], file: Optional[str]) -> list:
    """Collect input records from the command line argument and/or a FASTA file."""
    from ..core.models import NucleotideRecord
    from ..core.sequence import parse_fasta

    records = []

    if sequence:
        try:
            records.append(NucleotideRecord(id="command_line", sequence=sequence))
        except ValueError as e:
            err_console.print(f"[red]✗ Invalid sequence:[/red] {e}")
            sys.exit(1)

    if file:
        try:
            records.extend(parse_fasta(Path(file)))
        except Exception as e:
            err_console.print(f"[red]✗ Error loading sequences:[/red] {e}")
            sys.exit(1)

    if not records:
        err_console.print("[yellow]No sequence provided. Use --help for usage.[/yellow]")
        sys.exit(1)

    return records


def _write_output(text: str, output: Optional[str]):
    """Write machine-readable output to a file or stdout."""
    if output:
        Path(output).write_text(text + "\n")
        err_console.print(f"[green]✓[/green] Results saved to {output}")
    else:
        click.echo(text)


def _complementation_type(rna: bool):
    from ..core.complement import ComplementationType

    return ComplementationType.RNA if rna else ComplementationType.DNA


@click.group()
@click.version_option(version="0.1.0", prog_name="codonkit")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output")
@click.pass_context
def cli(ctx, verbose: bool, quiet: bool):
    """
    codonkit: Codon-level translation of nucleic acid sequences.

    This tool provides:

    \b
    • Translation in any of the three forward and three reverse frames
    • Open reading frame detection with nucleotide coordinates
    • Complement strands and DNA/RNA conversion
    • The standard codon table including degenerate codons

    Run 'codonkit COMMAND --help' for command-specific help.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not quiet:
        print_banner()


@cli.command("translate")
@click.argument("sequence", required=False)
@click.option("--file", "-f", type=click.Path(exists=True), help="FASTA file with nucleotide sequences")
@click.option(
    "--frame",
    "frames",
    type=click.IntRange(0, 2),
    multiple=True,
    help="Forward frame(s) to translate (default: 0)"
)
@click.option(
    "--reverse-frame",
    "reverse_frames",
    type=click.IntRange(0, 2),
    multiple=True,
    help="Reverse (antisense) frame(s) to translate"
)
@click.option("--all-frames", is_flag=True, help="Translate all six frames")
@click.option("--rna", is_flag=True, help="Use RNA base pairing for reverse frames")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default="table",
    help="Output format"
)
@click.option("--output", "-o", type=click.Path(), help="Write json/fasta output to this file")
@click.pass_context
def translate_cmd(
    ctx,
    sequence: Optional[str],
    file: Optional[str],
    frames: tuple,
    reverse_frames: tuple,
    all_frames: bool,
    rna: bool,
    output_format: str,
    output: Optional[str],
):
    """
    Translate nucleotide sequences into protein sequences.

    SEQUENCE is a DNA or RNA sequence; use --file for FASTA input.
    Reverse-frame proteins are listed in input order (C- to N-terminal).

    \b
    Examples:
        codonkit translate ATGCCACCCGTTGGGGGCAAAAAGGCCAAGAAG
        codonkit translate -f genes.fasta --frame 0 --frame 1
        codonkit translate -f genes.fasta --all-frames --format json
    """
    from ..core.complement import ComplementError
    from ..core.models import FrameTranslationResult, Strand
    from ..core.sequence import to_fasta
    from ..translation import find_orfs, translate_frames

    records = _load_records(sequence, file)
    complementation = _complementation_type(rna)

    if all_frames:
        frames, reverse_frames = (0, 1, 2), (0, 1, 2)
    elif not frames and not reverse_frames:
        frames = (0,)

    results = []
    try:
        for record in records:
            nucleotides = record.to_sequence()
            builder = (
                translate_frames(nucleotides)
                .frames(*frames)
                .reverse_frames(*reverse_frames)
                .complementation(complementation)
            )
            for translation in builder.get():
                forward = translation.strand is Strand.FORWARD
                orfs = find_orfs(
                    nucleotides,
                    frames=(translation.frame,) if forward else (),
                    reverse_frames=() if forward else (translation.frame,),
                    complementation_type=complementation,
                    sequence_id=record.id,
                )
                results.append(FrameTranslationResult(
                    sequence_id=record.id,
                    frame=translation.frame,
                    strand=translation.strand,
                    protein=str(translation.as_amino_acid_sequence()),
                    orfs=orfs,
                ))
    except ComplementError as e:
        err_console.print(f"[red]✗ Reverse translation failed:[/red] {e}")
        sys.exit(1)

    if output_format == "json":
        _write_output(json.dumps([r.model_dump(mode="json") for r in results], indent=2), output)
        return

    if output_format == "fasta":
        entries = [(f"{r.sequence_id} frame={r.label}", r.protein) for r in results]
        _write_output(to_fasta(entries), output)
        return

    table = Table(title="Translations", show_header=True, header_style="bold cyan")
    table.add_column("Sequence", style="bold")
    table.add_column("Frame", justify="center")
    table.add_column("Length", justify="right")
    table.add_column("ORFs", justify="right")
    table.add_column("Protein")

    for r in results:
        protein = r.protein if len(r.protein) <= 60 else r.protein[:57] + "..."
        table.add_row(r.sequence_id, r.label, str(len(r.protein)), str(len(r.orfs)), protein)

    console.print(table)


@cli.command("orfs")
@click.argument("sequence", required=False)
@click.option("--file", "-f", type=click.Path(exists=True), help="FASTA file with nucleotide sequences")
@click.option(
    "--frame",
    "frames",
    type=click.IntRange(0, 2),
    multiple=True,
    help="Forward frame(s) to search (default: all six frames)"
)
@click.option(
    "--reverse-frame",
    "reverse_frames",
    type=click.IntRange(0, 2),
    multiple=True,
    help="Reverse frame(s) to search"
)
@click.option("--rna", is_flag=True, help="Use RNA base pairing for reverse frames")
@click.option(
    "--min-length",
    type=click.IntRange(min=1),
    default=1,
    help="Minimum ORF length in residues (default: 1)"
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default="table",
    help="Output format"
)
@click.option("--output", "-o", type=click.Path(), help="Write json/fasta output to this file")
@click.pass_context
def orfs_cmd(
    ctx,
    sequence: Optional[str],
    file: Optional[str],
    frames: tuple,
    reverse_frames: tuple,
    rna: bool,
    min_length: int,
    output_format: str,
    output: Optional[str],
):
    """
    List open reading frames (start to stop codon).

    Nucleotide coordinates are 0-based, end-exclusive and refer to the
    given strand; the stop codon is not included.

    \b
    Examples:
        codonkit orfs ATGCCACCCGTTTAAAAAAAG
        codonkit orfs -f genes.fasta --min-length 100 --format json
    """
    from ..core.complement import ComplementError
    from ..core.sequence import to_fasta
    from ..translation import find_orfs

    records = _load_records(sequence, file)

    if not frames and not reverse_frames:
        frames, reverse_frames = (0, 1, 2), (0, 1, 2)

    orfs = []
    for record in records:
        nucleotides = record.to_sequence()
        orfs.extend(find_orfs(
            nucleotides,
            frames=frames,
            reverse_frames=(),
            min_length=min_length,
            sequence_id=record.id,
        ))

        if not reverse_frames:
            continue

        # Ambiguous bases have no complement; keep the forward results
        try:
            orfs.extend(find_orfs(
                nucleotides,
                frames=(),
                reverse_frames=reverse_frames,
                complementation_type=_complementation_type(rna),
                min_length=min_length,
                sequence_id=record.id,
            ))
        except ComplementError as e:
            logger.warning(f"Skipping reverse frames of {record.id}: {e}")

    if output_format == "json":
        _write_output(json.dumps([o.model_dump(mode="json") for o in orfs], indent=2), output)
        return

    if output_format == "fasta":
        entries = [
            (f"{o.sequence_id} frame={o.label} {o.nucleotide_start}-{o.nucleotide_end}", o.sequence)
            for o in orfs
        ]
        _write_output(to_fasta(entries), output)
        return

    if not orfs:
        console.print("[yellow]No ORFs found.[/yellow]")
        return

    table = Table(title="Open Reading Frames", show_header=True, header_style="bold cyan")
    table.add_column("Sequence", style="bold")
    table.add_column("Frame", justify="center")
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    table.add_column("Length", justify="right")
    table.add_column("Protein")

    for o in orfs:
        protein = o.sequence if len(o.sequence) <= 50 else o.sequence[:47] + "..."
        table.add_row(
            o.sequence_id,
            o.label,
            str(o.nucleotide_start),
            str(o.nucleotide_end),
            str(o.length),
            protein,
        )

    console.print(table)
    console.print(f"\n[bold]Total ORFs:[/bold] {len(orfs)}")


@cli.command("complement")
@click.argument("sequence")
@click.option("--reverse", "-r", is_flag=True, help="Reverse the complement (antisense strand 5'->3')")
@click.option("--rna", is_flag=True, help="Use RNA base pairing (A-U, G-C)")
@click.option("--to-rna", is_flag=True, help="Convert the result from DNA to RNA")
def complement_cmd(sequence: str, reverse: bool, rna: bool, to_rna: bool):
    """
    Print the complementary strand of a sequence.

    Only the concrete bases A, C, G, T and U have a complement.

    \b
    Examples:
        codonkit complement GCGATATCGCAAA
        codonkit complement GCGATATCGCAAA --reverse --to-rna
        codonkit complement GCGAUAUCGCAAA --rna
    """
    from ..core.complement import ComplementError
    from ..core.sequence import NucleicAcidSequence

    strand = NucleicAcidSequence.from_string(sequence.strip())

    try:
        result = strand.as_reverse_strand(_complementation_type(rna))
    except ComplementError as e:
        err_console.print(f"[red]✗ {e}[/red]")
        sys.exit(1)

    if reverse:
        result = result.inverse()
    if to_rna:
        result = result.to_rna()

    click.echo(str(result))


@cli.command("codon-table")
@click.option("--rna", is_flag=True, help="Show RNA codons (U instead of T)")
def codon_table_cmd(rna: bool):
    """
    Show the standard codon table grouped by amino acid.

    Degenerate codons written with IUPAC ambiguity codes (e.g. GCN) are
    listed after the concrete codons they stand for.
    """
    from ..core.codon_table import STANDARD_CODON_TABLE, STANDARD_DNA_CODONS

    table = Table(
        title="Standard Codon Table",
        show_header=True,
        header_style="bold cyan",
    )

    table.add_column("Code", style="bold", justify="center")
    table.add_column("Amino acid")
    table.add_column("Codons")

    for amino_acid in STANDARD_DNA_CODONS:
        codons = STANDARD_CODON_TABLE.codons_for(amino_acid)
        if rna:
            codons = [codon.replace("T", "U") for codon in codons]
        table.add_row(amino_acid.raw_code, amino_acid.full_name, ", ".join(codons))

    console.print(table)
    console.print(
        f"\n[bold]Start codons:[/bold] {', '.join(STANDARD_CODON_TABLE.start_codons)}"
        f"  [bold]Stop codons:[/bold] {', '.join(STANDARD_CODON_TABLE.stop_codons)}"
    )


@cli.command("validate-sequence")
@click.argument("sequence", required=False)
@click.option("--file", "-f", type=click.Path(exists=True), help="FASTA file to validate")
@click.option("--strict", is_flag=True, help="Reject IUPAC ambiguity codes")
def validate_sequence(sequence: Optional[str], file: Optional[str], strict: bool):
    """
    Validate nucleotide sequence(s) before translation.

    Checks for valid nucleotide characters, appropriate length,
    mixed DNA/RNA bases and a high share of unknown bases.

    \b
    Examples:
        codonkit validate-sequence ATGCCACCCGTTGGGGGC
        codonkit validate-sequence -f genes.fasta --strict
    """
    from ..core.sequence import SequenceValidator, read_fasta

    validator = SequenceValidator(allow_ambiguous=not strict)

    sequences_to_check = []

    if sequence:
        sequences_to_check.append(("command_line", sequence))

    if file:
        try:
            for seq_id, _, seq in read_fasta(Path(file)):
                sequences_to_check.append((seq_id, seq))
        except Exception as e:
            err_console.print(f"[red]Error reading file:[/red] {e}")
            sys.exit(1)

    if not sequences_to_check:
        err_console.print("[yellow]No sequence provided. Use --help for usage.[/yellow]")
        sys.exit(1)

    all_valid = True

    for seq_id, seq in sequences_to_check:
        is_valid, errors = validator.validate(seq)

        if is_valid:
            console.print(f"[green]✓[/green] {seq_id}: Valid ({len(seq)} nt)")
        else:
            all_valid = False
            console.print(f"[red]✗[/red] {seq_id}: Invalid")
            for error in errors:
                console.print(f"    - {error}")

    sys.exit(0 if all_valid else 1)


def main():
    """Main entry point for CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
