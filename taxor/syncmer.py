"""Canonical open syncmers of nucleotide sequences."""

from __future__ import annotations

from collections import deque

_MASK64 = (1 << 64) - 1
_WYHASH_CONSTANT = 0x9E3779B97F4A7C15
_NO_HASH = _MASK64

_NUCLEOTIDE_CODES = {
    "A": 0, "a": 0,
    "C": 1, "c": 1,
    "G": 2, "g": 2,
    "T": 3, "t": 3,
    "U": 3, "u": 3,
}


def wyhash(value: int) -> int:
    """Mix a 64-bit integer: xor of the halves of its 128-bit product."""
    product = (value & _MASK64) * _WYHASH_CONSTANT
    return (product & _MASK64) ^ (product >> 64)


def seq_to_syncmers(k: int, seq: str, s: int, t: int) -> set[int]:
    """Return the hashes of canonical open syncmers in ``seq``.

    A k-mer is kept when its smallest canonical s-mer starts at position
    ``t`` (counted from 1) inside it. Any character other than A, C, G, T
    or U restarts the scan.
    """
    if not 1 <= s <= k <= 32:
        raise ValueError(f"need 1 <= s <= k <= 32, got k={k}, s={s}")

    kmask = (1 << (2 * k)) - 1
    smask = (1 << (2 * s)) - 1
    kshift = (k - 1) * 2
    sshift = (s - 1) * 2
    window = k - s + 1

    hashes: set[int] = set()
    queue: deque[int] = deque()
    min_val = _NO_HASH
    min_pos = -1
    length = 0
    fwd_k = rev_k = fwd_s = rev_s = 0

    for i, char in enumerate(seq):
        code = _NUCLEOTIDE_CODES.get(char)
        if code is None:
            min_val = _NO_HASH
            min_pos = -1
            length = fwd_k = rev_k = fwd_s = rev_s = 0
            queue.clear()
            continue

        fwd_k = ((fwd_k << 2) | code) & kmask
        rev_k = (rev_k >> 2) | ((3 - code) << kshift)
        fwd_s = ((fwd_s << 2) | code) & smask
        rev_s = (rev_s >> 2) | ((3 - code) << sshift)
        length += 1
        if length < s:
            continue

        smer_hash = min(fwd_s, rev_s)
        queue.append(smer_hash)
        if len(queue) < window:
            continue

        if len(queue) == window:
            for j, value in enumerate(queue):
                if value < min_val:
                    min_val = value
                    min_pos = i - k + j + 1
        else:
            queue.popleft()
            if min_pos == i - k:
                # The minimum left the window; rescan, preferring the rightmost.
                min_val = _NO_HASH
                min_pos = i - s + 1
                for j in range(len(queue) - 1, -1, -1):
                    if queue[j] < min_val:
                        min_val = queue[j]
                        min_pos = i - k + j + 1
            elif smer_hash < min_val:
                min_val = smer_hash
                min_pos = i - s + 1

        if min_pos == i - k + t:
            hashes.add(wyhash(min(fwd_k, rev_k)))

    return hashes