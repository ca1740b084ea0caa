"""Minimum match thresholds for classifying query sequences."""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path

from taxor.fracminhash_model import containment_index_ci
from taxor.kmer_model import nmut_kmer_ci
from taxor.syncmer_model import min_syncmer_match_ratio

_log = logging.getLogger(__name__)

_FP_CORRECTION_RATE = 0.0039
_CONFIDENCE = 0.95


@dataclass
class ThresholdParameters:
    """Settings that decide which threshold model applies and how."""

    window_size: int = 0
    kmer_size: int = 0
    pattern_size: int = 0
    errors: int = 0
    percentage: float = -1.0
    p_max: float = 0.0
    fpr: float = 0.0
    tau: float = 0.0
    seq_error_rate: float = 0.0
    fracminhash: bool = False
    use_syncmer: bool = False
    cache_thresholds: bool = False
    output_directory: Path = field(default_factory=Path)


@dataclass
class SearchArguments:
    """Options of a search run."""

    window_size: int = 20
    kmer_size: int = 20
    shape_weight: int = 20
    threads: int = 1
    parts: int = 1
    compute_syncmer: bool = True
    scaling: int = 1

    tau: float = 0.9999
    threshold: float = -1.0
    p_max: float = 0.15
    fpr: float = 0.05
    seq_error_rate: float = 0.04
    pattern_size: int = 0
    errors: int = 0

    index_file: Path = field(default_factory=Path)
    compressed: bool = False

    bin_path: list[list[str]] = field(default_factory=list)
    query_file: Path = field(default_factory=Path)
    out_file: Path = field(default_factory=lambda: Path("search.out"))
    write_time: bool = False
    is_socks: bool = False
    is_hixf: bool = True
    cache_thresholds: bool = False

    def threshold_parameters(self) -> ThresholdParameters:
        """Build the threshold settings that follow from these arguments."""
        return ThresholdParameters(
            window_size=self.window_size,
            kmer_size=self.kmer_size,
            pattern_size=self.pattern_size,
            errors=self.errors,
            percentage=self.threshold,
            p_max=self.p_max,
            fpr=self.fpr,
            tau=self.tau,
            seq_error_rate=self.seq_error_rate,
            fracminhash=False,
            use_syncmer=self.compute_syncmer,
            cache_thresholds=self.cache_thresholds,
            output_directory=Path(self.index_file).parent,
        )


class ThresholdKind(enum.Enum):
    """The model used to derive a threshold."""

    FRACMINHASH = "fracminhash"
    PERCENTAGE = "percentage"
    KMER_MODEL = "kmer_model"
    SYNCMER_MODEL = "syncmer_model"


class Threshold:
    """Computes the minimal number of matching hashes for a query."""

    def __init__(self, parameters: ThresholdParameters) -> None:
        self.kmer_size = parameters.kmer_size
        self.error_rate = parameters.seq_error_rate
        self.percentage = 0.0
        kmers_per_window = parameters.window_size - self.kmer_size + 1

        if 0.0 < parameters.percentage <= 1.0:
            self.kind = ThresholdKind.PERCENTAGE
            self.percentage = parameters.percentage
        elif parameters.use_syncmer:
            self.kind = ThresholdKind.SYNCMER_MODEL
        elif kmers_per_window == 1 and not parameters.fracminhash:
            self.kind = ThresholdKind.KMER_MODEL
        else:
            self.kind = ThresholdKind.FRACMINHASH
        _log.debug("using %s threshold model", self.kind.value)

    def get(self, minimiser_count: int, scaling_factor: float) -> int:
        """Return the threshold for a query with ``minimiser_count`` hashes.

        Results that would be negative are reported as zero.
        """
        if minimiser_count <= 0:
            return 0
        fp_correction = int(minimiser_count * _FP_CORRECTION_RATE)

        if self.kind is ThresholdKind.SYNCMER_MODEL:
            ratio = min_syncmer_match_ratio(self.kmer_size, self.error_rate)
            return int(minimiser_count * ratio)

        if self.kind is ThresholdKind.KMER_MODEL:
            _, high = nmut_kmer_ci(
                self.error_rate, self.kmer_size, minimiser_count, _CONFIDENCE
            )
            return max(0, minimiser_count - high - fp_correction)

        if self.kind is ThresholdKind.FRACMINHASH:
            low, _ = containment_index_ci(
                self.error_rate,
                self.kmer_size,
                minimiser_count,
                scaling_factor,
                _CONFIDENCE,
            )
            if math.isnan(low) or low <= 0.0:
                return 0
            return max(0, int(low * minimiser_count) - fp_correction)

        return int(minimiser_count * self.percentage)