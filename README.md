# taxor

Building blocks for taxonomic profiling of sequencing reads against a
collection of reference genomes: sketching DNA with syncmers, statistical
models of read errors, match thresholds, xor filters, and the handling of
reference genome files. Only the Python standard library is needed.

## Modules

- `taxor.syncmer`: `seq_to_syncmers(k, seq, s, t)` returns the set of
  hashes of the canonical open syncmers of a sequence. A k-mer is kept when
  its smallest canonical s-mer starts at position `t` inside it; any
  character other than A, C, G, T or U (either case) restarts the scan.
  `wyhash(value)` is the 64-bit mixing function used for the hashes.
  `k` and `s` must satisfy `1 <= s <= k <= 32`, otherwise `ValueError`.
- `taxor.gaussian`: `normal_cdf_inverse(p)` approximates the inverse
  standard normal CDF (Abramowitz and Stegun 26.2.23) and raises
  `ValueError` unless `0 < p < 1`; `rational_approximation(t)` is the
  underlying formula.
- `taxor.kmer_model`: `expected_nmut_kmer`, `variance_nmut_kmer`,
  `expected_nmut_kmer_squared` and `nmut_kmer_ci` for the number of mutated
  k-mers at error rate `r`. The interval is a pair of integers with the
  lower bound clipped at zero.
- `taxor.fracminhash_model`: `expected_containment_index`,
  `variance_containment_index` and `containment_index_ci` for the
  containment index of a FracMinHash sketch with a given scaling factor.
  The interval bounds are NaN when the variance comes out negative.
- `taxor.syncmer_model`: `min_syncmer_match_ratio(kmer_size, error_rate)`
  looks up an empirical minimum ratio of matching syncmers from
  `MATCHING_RATIOS`. `kmer_size` must be even and in 12..30, `error_rate`
  in 0..0.2; otherwise `ValueError`.
- `taxor.threshold`: `Threshold(parameters)` picks a `ThresholdKind` from
  `ThresholdParameters` — a percentage if `percentage` is in (0, 1], the
  syncmer model if `use_syncmer`, the k-mer model if the window holds one
  k-mer and `fracminhash` is off, FracMinHash otherwise.
  `Threshold.get(minimiser_count, scaling_factor)` returns the minimum
  number of hits a query needs, never negative. `SearchArguments` holds
  search options, and its `threshold_parameters()` builds the matching
  `ThresholdParameters`.
- `taxor.xor_filter`: `XorFilter(size, fingerprint_bits=8)` is a static
  approximate-membership filter over distinct 64-bit keys (8, 16 or 32-bit
  fingerprints). `add_all(keys)` needs exactly `size` distinct keys
  (`ValueError` for a wrong count, `XorFilterError` for duplicates or when
  construction fails); `contains(key)` or `key in xf` queries it;
  `info()` and `size_in_bytes()` describe it. The module also exposes
  `murmur64`, `SimpleMixSplit`, `rotl64`, `reduce` and `hash_from_hash`.
- `taxor.references`: `read_fasta(path)` yields `(header, sequence)` from
  FASTA or FASTQ files, gzipped or not; `parse_ref_seqs(path)` returns
  `RefSeq` records with N bases removed (`get_seqid`, `cut_out_nnns`);
  `genome_path(root, accession_id)` gives the location of a genome file
  below a genome collection root; `bins_for_count` gives the number of
  100,000-element bins a species needs; `partition_filters` groups species
  into filters of at most `MAX_BINS_PER_FILTER` bins, returning
  `FilterRange` and `BinAssignment` records; `expected_filter_size_mb`
  estimates their size.
- `taxor.build_input`: `parse_build_args(argv)` turns build options
  (`--input-file`, `--input-sequence-dir`, `--output-filename`,
  `--kmer-size`, `--syncmer-size`, `--window-size`, `--scaling`,
  `--threads`, `--use-syncmer`) into a `BuildConfiguration`;
  `check_inputs(config)` checks that the comma-separated input files and
  folders exist and that k ≤ 30 with syncmers. Both raise `InputError`.
  Helpers: `str_split`, `file_list` (accession id to file),
  `t_syncmer_for`, `keep_hash` (sketch down-scaling).
- `taxor.counting`: `filename_clusters(folders, accession_ids)` maps each
  accession to its genome file (`InputError` if missing);
  `syncmer_sketch(filenames, kmer_size, syncmer_size, scaling)` collects
  the syncmer hashes of those files; `write_count_file(...)` writes one
  tab-separated line per cluster — file names joined by `;`, sketch size,
  cluster name — and returns the counts.
- `taxor.config`: `BuildConfiguration`, `SearchConfiguration` and
  `ProfileConfiguration` dataclasses with their defaults.
- `taxor.stopclock`: `StopClock` accumulates wall-clock time over
  `start()`/`stop()` rounds (`elapsed`, `begin`, `end`, `runtime`);
  `TimeMeasures`, `Durations` and `now_nanos()`.

## Examples

```python
from taxor.syncmer import seq_to_syncmers

hashes = seq_to_syncmers(20, "ACGTTGCATGCATGCAAGTCCGATGCAGTACGTAGCTAGCTAGGATC", 10, 5)
```

```python
from taxor.threshold import SearchArguments, Threshold

args = SearchArguments(kmer_size=20, window_size=20, compute_syncmer=True)
needed = Threshold(args.threshold_parameters()).get(500, 1.0)
```

```python
from taxor.xor_filter import XorFilter

keys = list(range(1, 10_001))
xf = XorFilter(len(keys))
xf.add_all(keys)
assert all(key in xf for key in keys)
```

## What this package does not do

There is no command-line program: `parse_build_args` parses build options,
but nothing here builds, stores or loads a complete index, searches reads
against one, or produces a taxonomic profile. The xor filter holds one set
of keys; there is no interleaved or hierarchical multi-bin filter and no
on-disk index format. Taxonomy files are not parsed.

## Tests

The test suite uses pytest and hypothesis, available through the `test`
extra.