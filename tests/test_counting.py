import gzip

import pytest

from taxor.build_input import InputError, keep_hash, t_syncmer_for
from taxor.counting import filename_clusters, syncmer_sketch, write_count_file
from taxor.syncmer import seq_to_syncmers

SEQ_A = "ACGTTGCATGCATGACCGTAGCTAGCTAGGATCCGATCGATTACGGCTAGCATCGACTGACTAGC"
SEQ_B = "TTGACCGATGCAGTCAGTCGATCGTAGCTAGCATCGGGCTAGCTACGATCAGCTAGCTAGCATG"


@pytest.fixture
def genome_dir(tmp_path):
    folder = tmp_path / "genomes"
    folder.mkdir()
    (folder / "GCF_000001.1_genomic.fna").write_text(f">one first\n{SEQ_A}\n>two\n{SEQ_B}\n")
    with gzip.open(folder / "GCA_000002.1_genomic.fna.gz", "wt") as handle:
        handle.write(f">three\n{SEQ_B}\n")
    (folder / "README").write_text("not a genome\n")
    return folder


def test_filename_clusters_maps_accessions(genome_dir):
    clusters = filename_clusters([genome_dir], ["GCF_000001.1", "GCA_000002.1"])
    assert list(clusters) == ["GCF_000001.1", "GCA_000002.1"]
    assert clusters["GCF_000001.1"] == [str(genome_dir / "GCF_000001.1_genomic.fna")]
    assert clusters["GCA_000002.1"] == [str(genome_dir / "GCA_000002.1_genomic.fna.gz")]


def test_filename_clusters_missing_accession(genome_dir):
    with pytest.raises(InputError, match="GCF_999999.1"):
        filename_clusters([genome_dir], ["GCF_999999.1"])


def test_sketch_is_union_of_record_syncmers(genome_dir):
    t = t_syncmer_for(15, 5)
    expected = seq_to_syncmers(15, SEQ_A, 5, t) | seq_to_syncmers(15, SEQ_B, 5, t)
    sketch = syncmer_sketch([genome_dir / "GCF_000001.1_genomic.fna"], 15, 5, 1)
    assert sketch == expected
    assert len(sketch) > 0


def test_sketch_reads_gzip(genome_dir):
    t = t_syncmer_for(15, 5)
    sketch = syncmer_sketch([genome_dir / "GCA_000002.1_genomic.fna.gz"], 15, 5, 1)
    assert sketch == seq_to_syncmers(15, SEQ_B, 5, t)


def test_scaling_keeps_subset(genome_dir):
    path = genome_dir / "GCF_000001.1_genomic.fna"
    full = syncmer_sketch([path], 15, 5, 1)
    scaled = syncmer_sketch([path], 15, 5, 10)
    assert scaled <= full
    assert scaled == {h for h in full if keep_hash(h, 10)}


def test_empty_file_gives_empty_sketch(tmp_path):
    path = tmp_path / "GCF_1_empty.fna"
    path.write_text("")
    assert syncmer_sketch([path], 15, 5, 1) == set()


def test_write_count_file_round_trip(genome_dir, tmp_path):
    clusters = filename_clusters([genome_dir], ["GCF_000001.1", "GCA_000002.1"])
    out = tmp_path / "counts.txt"
    counts = write_count_file(clusters, 15, 5, 1, out)
    lines = out.read_text().splitlines()
    assert len(lines) == 2
    for line, (name, files) in zip(lines, clusters.items()):
        file_field, weight, cluster_name = line.split("\t")
        assert file_field.split(";") == files
        assert cluster_name == name
        assert int(weight) == counts[name]
        assert counts[name] == len(syncmer_sketch(files, 15, 5, 1))


def test_write_count_file_bad_location(genome_dir, tmp_path):
    clusters = filename_clusters([genome_dir], ["GCF_000001.1"])
    with pytest.raises(OSError):
        write_count_file(clusters, 15, 5, 1, tmp_path / "missing" / "counts.txt")