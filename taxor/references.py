"""Reference genomes: reading, cleaning and spreading species over filters."""

from __future__ import annotations

import gzip
import io
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

ELEMENTS_PER_BIN = 100_000
MAX_BINS_PER_FILTER = 4300
GENOME_DIRECTORY = "gtdb_genomes_reps_r202"

_GZIP_MAGIC = b"\x1f\x8b"
_NON_N_RUN = re.compile(r"[^N]+")
_DNA5 = str.maketrans({"U": "T"})


@dataclass
class RefSeq:
    """A reference sequence with its identifier."""

    seqid: str
    seq: str


@dataclass
class BinAssignment:
    """Filter and inclusive bin range assigned to one species."""

    species_index: int
    filter_index: int
    first_bin: int
    last_bin: int


@dataclass
class FilterRange:
    """Bins of one filter and the species positions it holds (end exclusive)."""

    bin_count: int
    first_species: int
    end_species: int


def get_seqid(header: str) -> str:
    """The identifier of a sequence header: everything before the first space."""
    return header.split(" ", 1)[0]


def cut_out_nnns(seq: str, seqlen: int) -> list[str]:
    """Split the first ``seqlen`` characters of ``seq`` at stretches of N."""
    return _NON_N_RUN.findall(seq[:seqlen])


def _open_text(path: Path) -> io.TextIOBase:
    with open(path, "rb") as probe:
        magic = probe.read(2)
    if magic == _GZIP_MAGIC:
        return gzip.open(path, "rt")
    return open(path, "r")


def read_fasta(path: str | Path) -> Iterator[tuple[str, str]]:
    """Yield (header, sequence) records from a FASTA or FASTQ file, gzipped or not."""
    with _open_text(Path(path)) as handle:
        lines = (line.rstrip("\r\n") for line in handle)
        header: str | None = None
        parts: list[str] = []
        fastq = False
        for line in lines:
            if not line and not fastq:
                continue
            if header is None:
                if line.startswith(">"):
                    header = line[1:]
                elif line.startswith("@"):
                    fastq = True
                    header = line[1:]
                elif line.strip():
                    raise ValueError(f"{path}: sequence data before the first header")
                continue
            if fastq:
                seq = line.strip()
                plus = next(lines, None)
                quality = next(lines, None)
                if plus is None or not plus.startswith("+") or quality is None:
                    raise ValueError(f"{path}: truncated FASTQ record {header!r}")
                yield header, seq
                header = None
                fastq = False
                continue
            if line.startswith(">"):
                yield header, "".join(parts)
                header = line[1:]
                parts = []
            else:
                parts.append(line.strip())
        if header is not None:
            if fastq:
                raise ValueError(f"{path}: truncated FASTQ record {header!r}")
            yield header, "".join(parts)


def _to_dna5(seq: str) -> str:
    upper = seq.upper().translate(_DNA5)
    return "".join(c if c in "ACGT" else "N" for c in upper)


def parse_ref_seqs(reference_file: str | Path) -> list[RefSeq]:
    """Read the sequences of a reference file with all N bases removed."""
    refs = []
    for header, raw in read_fasta(reference_file):
        seq = _to_dna5(raw)
        refs.append(RefSeq(get_seqid(header), "".join(cut_out_nnns(seq, len(seq)))))
    return refs


def genome_path(gtdb_root: str | Path, accession_id: str) -> Path:
    """Location of a genome's FASTA file below the genome collection root."""
    if len(accession_id) < 13:
        raise ValueError(f"accession id too short: {accession_id!r}")
    kind = "GCA" if accession_id[:3] == "GCA" else "GCF"
    return (
        Path(gtdb_root)
        / GENOME_DIRECTORY
        / kind
        / accession_id[4:7]
        / accession_id[7:10]
        / accession_id[10:13]
        / f"{accession_id}_genomic.fna.gz"
    )


def bins_for_count(element_count: int) -> int:
    """Number of filter bins needed for ``element_count`` hashes."""
    if element_count < 0:
        raise ValueError(f"element count must not be negative, got {element_count}")
    return element_count // ELEMENTS_PER_BIN + 1


def partition_filters(
    species_bins: Iterable[tuple[int, int]],
    max_bins_per_filter: int = MAX_BINS_PER_FILTER,
) -> tuple[list[FilterRange], list[BinAssignment]]:
    """Spread species over filters of at most ``max_bins_per_filter`` bins.

    ``species_bins`` holds (species index, bin count) pairs in order. A new
    filter starts when the next species would overflow the current one.
    Species positions in the returned ranges refer to that order.
    """
    filters: list[FilterRange] = []
    assignments: list[BinAssignment] = []
    bin_nr = 0
    filter_index = 0
    first_species = 0
    position = -1
    for position, (species_index, bins) in enumerate(species_bins):
        if bins < 1:
            raise ValueError(f"species {species_index} needs at least one bin")
        if bin_nr > 0 and bin_nr + bins > max_bins_per_filter:
            filters.append(FilterRange(bin_nr, first_species, position))
            filter_index += 1
            first_species = position
            bin_nr = 0
        assignments.append(
            BinAssignment(species_index, filter_index, bin_nr, bin_nr + bins - 1)
        )
        bin_nr += bins
    if bin_nr > 0:
        filters.append(FilterRange(bin_nr, first_species, position + 1))
    return filters, assignments


def expected_filter_size_mb(total_bins: int) -> float:
    """Expected size in megabytes of filters with ``total_bins`` bins in total."""
    return total_bins * ELEMENTS_PER_BIN * 1.23 * 8 / 8388608