import numpy as np
from itertools import product
from typing import List

BASES = "ACGT"


class MotifUtils:
    """Utilities for motif enumeration and sequence statistics."""

    @staticmethod
    def enumerate_motifs(s: int) -> List[str]:
        """Return every string of length s over ACGT, in lexicographic base order.

        Args:
            s: Motif size (0 yields the single empty motif)

        Returns:
            List of 4**s distinct motifs
        """
        if s < 0:
            raise ValueError(f"Motif size must be non-negative, got {s}")
        return ["".join(p) for p in product(BASES, repeat=s)]

    @staticmethod
    def count_occurrences(sequence: str, motif: str) -> int:
        """Count overlapping exact matches of motif with a step-1 sliding window."""
        k = len(motif)
        count = 0
        for i in range(len(sequence) - k + 1):
            if sequence[i:i + k] == motif:
                count += 1
        return count

    @staticmethod
    def max_repeat_run(motif: str) -> int:
        """Length of the longest run of one repeated character (AAGC -> 2).

        The empty motif counts as a run of 1, so it can still be selected.
        """
        max_run = 1
        current = 1
        for prev, base in zip(motif, motif[1:]):
            if base == prev:
                current += 1
                max_run = max(max_run, current)
            else:
                current = 1
        return max_run

    @staticmethod
    def base_counts(seq: str) -> List[int]:
        """Counts of A, C, G, T in seq (other characters are ignored)."""
        return [seq.count(b) for b in BASES]

    @staticmethod
    def calculate_entropy(seq: str) -> float:
        """Calculate Shannon entropy of sequence (bits per base, 0-2)."""
        if not seq:
            return 0.0

        n = len(seq)
        entropy = 0.0

        for count in MotifUtils.base_counts(seq):
            if count > 0:
                p = count / n
                entropy -= p * np.log2(p)

        return float(entropy)

    @staticmethod
    def encode(seq: str) -> np.ndarray:
        """View a sequence as a uint8 array of ASCII codes."""
        return np.frombuffer(seq.encode('ascii', errors='replace'), dtype=np.uint8)

    @staticmethod
    def encode_motifs(motifs: List[str], s: int) -> np.ndarray:
        """Stack equal-length motifs into a (len(motifs), s) uint8 matrix."""
        if not motifs:
            return np.zeros((0, s), dtype=np.uint8)
        joined = "".join(motifs)
        return MotifUtils.encode(joined).reshape(len(motifs), s)
