"""Settings for the build, search and profile commands."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class BuildConfiguration:
    """Options of an index build."""

    input_file_name: str = ""
    input_files: list[str] = field(default_factory=list)
    input_sequence_folder: str = ""
    input_folders: list[str] = field(default_factory=list)
    output_file_name: str = ""
    threads: int = 1
    kmer_size: int = 20
    window_size: int = 20
    syncmer_size: int = 10
    scaling: int = 1
    output_verbose_statistics: bool = False
    debug: bool = False
    use_syncmer: bool = False


@dataclass
class SearchConfiguration:
    """Options of a search against an index."""

    index_file: str = ""
    index_file_list: list[str] = field(default_factory=list)
    query_file: str = ""
    query_file_list: list[str] = field(default_factory=list)
    report_file: str = ""
    threshold: float = -1.0
    error_rate: float = 0.04
    threads: int = 1
    output_verbose_statistics: bool = False
    debug: bool = False


@dataclass
class ProfileConfiguration:
    """Options of taxonomic profiling from search results."""

    search_file: str = ""
    binning_file: str = ""
    report_file: str = ""
    sequence_abundance_file: str = ""
    sample_id: str = ""
    threshold: float = 0.001
    threads: int = 1
    output_verbose_statistics: bool = False
    debug: bool = False
    em_steps: int = 100