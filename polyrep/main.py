from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

import click

from .config import AMBIGUOUS_SYMBOL, LOGGER_NAME, VERSION, ScanOptions
from .models.data_schemas import ChromosomeSummary
from .modules.output_generator import RepeatWriter
from .modules.scanner_factory import make_scanner
from .modules.sequence_reader import iter_chromosomes, iter_symbols
from .utils.exceptions import PolyRepError
from .utils.logging_utils import setup_logger


logger = logging.getLogger(LOGGER_NAME)


def run_pipeline(
    fasta_handle: TextIO,
    out_handle: TextIO,
    unit_length: int,
    min_length: int,
    ambiguous_symbol: str = AMBIGUOUS_SYMBOL,
    fold_case: bool = False,
) -> dict:
    options = ScanOptions(
        unit_length=unit_length,
        min_length=min_length,
        ambiguous_symbol=ambiguous_symbol,
        fold_case=fold_case,
    )
    if options.is_homopolymer:
        logger.info("Finding homopolymers >=%dbp", options.min_length)
    else:
        logger.info(
            "Finding polynuc repeats >=%dbp with unit size %dbp",
            options.min_length,
            options.unit_length,
        )

    writer = RepeatWriter(out_handle)
    writer.write_header(options)

    summaries: list[ChromosomeSummary] = []
    for chrom, feed in iter_chromosomes(fasta_handle):
        logger.info("Parsing chromosome %s", chrom)
        scanner = make_scanner(chrom, options)
        summary = ChromosomeSummary(chrom=chrom)
        for record in scanner.scan(iter_symbols(feed, fold_case=options.fold_case)):
            logger.debug("%s:%d-%d unit=%s length=%d", chrom, record.start, record.end, record.unit, record.length)
            writer.write(record)
            summary.n_repeats += 1
        summary.n_symbols = scanner.position
        summaries.append(summary)

    logger.info("Scanned %d chromosome(s), reported %d repeat(s)", len(summaries), writer.n_written)
    return {
        "repeat_length": options.unit_length,
        "total_length": options.min_length,
        "n_chromosomes": len(summaries),
        "n_repeats": writer.n_written,
        "chromosomes": [summary.model_dump() for summary in summaries],
    }


@click.command()
@click.version_option(version=VERSION, prog_name="polyrep")
@click.argument("reps", type=int)
@click.argument("length", type=int)
@click.argument("infile", type=click.File("r"))
@click.option("-o", "--output", "out_handle", default="-", type=click.File("w"), help="output file (default: stdout)")
@click.option("--ambiguous", default=AMBIGUOUS_SYMBOL, show_default=True, help="symbol that breaks every run")
@click.option("--fold-case", is_flag=True, default=False, help="upper-case soft-masked sequence before scanning")
@click.option("--log-file", default=None, type=click.Path(dir_okay=False, path_type=Path), help="also write log to this file")
@click.option("--debug", is_flag=True, default=False)
@click.option("--quiet", is_flag=True, default=False)
def cli(
    reps: int,
    length: int,
    infile: TextIO,
    out_handle: TextIO,
    ambiguous: str,
    fold_case: bool,
    log_file: Path | None,
    debug: bool,
    quiet: bool,
):
    """Report homopolymers (REPS=1) or tandem repeats with a REPS-long unit
    (REPS=2..4) spanning at least LENGTH bases in the FASTA file INFILE."""
    level = logging.DEBUG if debug else logging.WARNING if quiet else logging.INFO
    setup_logger(LOGGER_NAME, log_file=log_file, level=level)
    try:
        run_pipeline(
            fasta_handle=infile,
            out_handle=out_handle,
            unit_length=reps,
            min_length=length,
            ambiguous_symbol=ambiguous,
            fold_case=fold_case,
        )
    except PolyRepError as exc:
        raise click.ClickException(str(exc)) from exc


if __name__ == "__main__":
    cli()
