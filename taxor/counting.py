"""Grouping of genome files by accession and counting of their syncmer sketches.

Count files hold one line per cluster. Each line has three tab-separated
fields: the cluster's file names joined by ``;``, the number of hashes in
its sketch, and the cluster name.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from pathlib import Path

from taxor.build_input import InputError, file_list, keep_hash, t_syncmer_for
from taxor.references import read_fasta
from taxor.syncmer import seq_to_syncmers


def filename_clusters(
    input_folders: Iterable[str | Path], accession_ids: Iterable[str]
) -> dict[str, list[str]]:
    """Map every accession id to the genome file found for it.

    Only the top level of each folder is searched. Raises InputError when
    an accession has no file.
    """
    files = file_list(input_folders, recursive=False)
    clusters: dict[str, list[str]] = {}
    for accession in accession_ids:
        path = files.get(accession)
        if path is None:
            raise InputError(f"Could not find a genome file for {accession}")
        clusters.setdefault(accession, []).append(str(path))
    return clusters


def syncmer_sketch(
    filenames: Iterable[str | Path], kmer_size: int, syncmer_size: int, scaling: int
) -> set[int]:
    """Hashes of the open syncmers of all sequences in ``filenames``.

    With ``scaling`` above 1 only hashes that survive down-scaling are kept.
    """
    t_syncmer = t_syncmer_for(kmer_size, syncmer_size)
    sketch: set[int] = set()
    for filename in filenames:
        for _header, seq in read_fasta(filename):
            sketch.update(
                hash_value
                for hash_value in seq_to_syncmers(kmer_size, seq, syncmer_size, t_syncmer)
                if keep_hash(hash_value, scaling)
            )
    return sketch


def write_count_file(
    clusters: Mapping[str, Iterable[str | Path]],
    kmer_size: int,
    syncmer_size: int,
    scaling: int,
    count_file: str | Path,
) -> dict[str, int]:
    """Write the sketch size of every cluster to ``count_file``.

    Returns the written counts by cluster name.
    """
    counts: dict[str, int] = {}
    with open(count_file, "w", encoding="utf-8") as out:
        for name, filenames in clusters.items():
            names = [str(f) for f in filenames]
            weight = len(syncmer_sketch(names, kmer_size, syncmer_size, scaling))
            counts[name] = weight
            out.write(f"{';'.join(names)}\t{weight}\t{name}\n")
    return counts