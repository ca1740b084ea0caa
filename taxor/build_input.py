"""Command-line options and input checks of an index build."""

from __future__ import annotations

import argparse
import dataclasses
import math
from collections.abc import Iterable, Sequence
from pathlib import Path

from taxor.config import BuildConfiguration
from taxor.syncmer import wyhash

_UINT64_MAX = (1 << 64) - 1
_MAX_SYNCMER_KMER = 30


class InputError(Exception):
    """Raised when the options or input paths of a build are unusable."""


def str_split(text: str, delimiter: str) -> list[str]:
    """Split ``text`` at ``delimiter``; a trailing delimiter adds no empty field."""
    if not text:
        return []
    parts = text.split(delimiter)
    if text.endswith(delimiter):
        parts.pop()
    return parts


def file_list(input_folders: Iterable[str | Path], recursive: bool = False) -> dict[str, Path]:
    """Map accession ids to the files in ``input_folders``.

    The accession is the first two ``_``-separated fields of a file's stem;
    files with fewer fields are skipped. The first file found for an
    accession wins.
    """
    result: dict[str, Path] = {}
    for folder in input_folders:
        root = Path(folder)
        entries = root.rglob("*") if recursive else root.iterdir()
        for entry in sorted(entries):
            if not entry.is_file():
                continue
            parts = str_split(entry.stem, "_")
            if len(parts) > 1:
                result.setdefault(f"{parts[0]}_{parts[1]}", entry)
    return result


def t_syncmer_for(kmer_size: int, syncmer_size: int) -> int:
    """Position of the smallest s-mer that makes a k-mer an open syncmer."""
    return (kmer_size - syncmer_size + 1) // 2


def keep_hash(hash_value: int, scaling: int) -> bool:
    """Whether a hash survives down-scaling of a sketch by ``scaling``."""
    if scaling <= 1:
        return True
    return float(wyhash(hash_value)) <= float(_UINT64_MAX) / float(scaling)


def check_inputs(config: BuildConfiguration) -> BuildConfiguration:
    """Validate a build configuration and return it with file and folder lists filled."""
    if config.use_syncmer and config.kmer_size > _MAX_SYNCMER_KMER:
        raise InputError(
            "The chosen k-mer size is too large for the syncmer scheme. "
            "Please choose a k-mer size <= 30 or use the minimizer scheme"
        )
    input_files = str_split(config.input_file_name, ",")
    for name in input_files:
        if not Path(name).exists():
            raise InputError(
                "Please check the given input file(s). \n"
                f"The following input file does not exist: {name}"
            )
    input_folders = str_split(config.input_sequence_folder, ",")
    for name in input_folders:
        if not Path(name).exists():
            raise InputError(
                "Please check the given input folder(s). \n"
                f"The following input folder does not exist: {name}"
            )
    return dataclasses.replace(
        config, input_files=input_files, input_folders=input_folders
    )


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> None:  # type: ignore[override]
        raise InputError(message)


def _int_in_range(low: int, high: int):
    def convert(text: str) -> int:
        try:
            value = int(text)
        except ValueError:
            raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
        if not low <= value <= high:
            raise argparse.ArgumentTypeError(
                f"value {value} is not in range [{low},{high}]"
            )
        return value

    return convert


def parse_build_args(argv: Sequence[str] | None = None) -> BuildConfiguration:
    """Parse build options into a configuration; raise InputError on bad options."""
    defaults = BuildConfiguration()
    parser = _Parser(
        prog="taxor-build",
        description="Creates an HIXF index using either k-mers or syncmers",
    )
    parser.add_argument(
        "--input-file",
        dest="input_file_name",
        required=True,
        help="tab-separated-value file containing taxonomy information and reference file names",
    )
    parser.add_argument(
        "--input-sequence-dir",
        dest="input_sequence_folder",
        default=defaults.input_sequence_folder,
        help="directory containing the fasta reference files",
    )
    parser.add_argument(
        "--output-filename",
        dest="output_file_name",
        default=defaults.output_file_name,
        help="A file name for the resulting index.",
    )
    parser.add_argument("--kmer-size", type=_int_in_range(1, 64), default=defaults.kmer_size)
    parser.add_argument("--syncmer-size", type=_int_in_range(1, 26), default=defaults.syncmer_size)
    parser.add_argument("--window-size", type=_int_in_range(1, 96), default=defaults.window_size)
    parser.add_argument("--scaling", type=_int_in_range(10, 1000), default=defaults.scaling)
    parser.add_argument("--threads", type=_int_in_range(1, 32), default=defaults.threads)
    parser.add_argument("--use-syncmer", action="store_true")
    parser.add_argument("--output-verbose-statistics", action="store_true", help=argparse.SUPPRESS)
    parser.add_argument("--debug", action="store_true", help=argparse.SUPPRESS)
    args = parser.parse_args(argv)
    return BuildConfiguration(
        input_file_name=args.input_file_name,
        input_sequence_folder=args.input_sequence_folder,
        output_file_name=args.output_file_name,
        threads=args.threads,
        kmer_size=args.kmer_size,
        window_size=args.window_size,
        syncmer_size=args.syncmer_size,
        scaling=args.scaling,
        output_verbose_statistics=args.output_verbose_statistics,
        debug=args.debug,
        use_syncmer=args.use_syncmer,
    )


def _unused() -> None:  # pragma: no cover
    math.ceil(0)