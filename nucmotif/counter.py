import time
import numpy as np
from typing import Dict, List, Optional, Tuple
from numpy.lib.stride_tricks import sliding_window_view

from .models import BestMotif, CounterConfig
from .motif_utils import MotifUtils
from .utils import iter_corpus


class MotifCounter:
    """Brute-force counter of every length-s motif across a line corpus.

    No k-mer index is built: every motif is compared against every window of
    every line. The vectorized mode runs the same comparisons through numpy
    in motif chunks; the pure-Python mode slides a window per motif.
    """

    PROGRESS_EVERY = 10_000

    def __init__(self, s: int, vectorized: bool = True, motif_chunk: int = 4096,
                 show_progress: bool = False):
        if s < 0:
            raise ValueError(f"Motif size must be non-negative, got {s}")
        self.s = s
        self.vectorized = vectorized
        self.motif_chunk = max(1, motif_chunk)
        self.show_progress = show_progress

        self.motifs: List[str] = MotifUtils.enumerate_motifs(s)
        self._motif_codes = MotifUtils.encode_motifs(self.motifs, s)

    def new_table(self) -> Dict[str, int]:
        return {motif: 0 for motif in self.motifs}

    def _count_line_python(self, line: str, table: Dict[str, int]) -> None:
        for motif in table:
            table[motif] += MotifUtils.count_occurrences(line, motif)

    def _count_line_numpy(self, line: str, table: Dict[str, int]) -> None:
        if len(line) < self.s:
            return

        windows = sliding_window_view(MotifUtils.encode(line), self.s)
        for lo in range(0, len(self.motifs), self.motif_chunk):
            codes = self._motif_codes[lo:lo + self.motif_chunk]
            # (chunk, windows, s) comparison, reduced to hits per motif
            hits = (codes[:, None, :] == windows[None, :, :]).all(axis=2).sum(axis=1)
            for offset in np.flatnonzero(hits):
                table[self.motifs[lo + offset]] += int(hits[offset])

    def count_motifs(self, corpus_path: str) -> Dict[str, int]:
        """Count every motif over every corpus line.

        Args:
            corpus_path: Text file with one sequence per line

        Returns:
            Mapping of all 4**s motifs to their total occurrence counts
        """
        table = self.new_table()
        # The empty motif has no window to vectorize over
        use_numpy = self.vectorized and self.s > 0

        t0 = time.time()
        n_lines = 0
        for line in iter_corpus(corpus_path):
            if use_numpy:
                self._count_line_numpy(line, table)
            else:
                self._count_line_python(line, table)
            n_lines += 1

            if self.show_progress and n_lines % self.PROGRESS_EVERY == 0:
                print(f"  [count] {n_lines:,} lines scanned ({time.time() - t0:.2f}s)", flush=True)

        if self.show_progress:
            print(f"  [count] {len(table):,} motifs over {n_lines:,} lines in {time.time() - t0:.2f}s",
                  flush=True)
        return table

    @staticmethod
    def select_best(table: Dict[str, int]) -> Optional[BestMotif]:
        """Pick the most frequent motif, breaking count ties by longest repeat run.

        Only strictly better candidates replace the current best, so exact ties
        go to whichever motif the table yields first. With all counts at zero
        the motif with the longest repeat run wins (AAAAAA for s=6).
        """
        best: Optional[BestMotif] = None
        max_count = 0
        max_repeats = 0

        for motif, count in table.items():
            repeats = MotifUtils.max_repeat_run(motif)
            if count > max_count or (count == max_count and repeats > max_repeats):
                best = BestMotif(motif=motif, count=count, repeat_run=repeats)
                max_count = count
                max_repeats = repeats

        return best

    @staticmethod
    def top_motifs(table: Dict[str, int], k: int) -> List[Tuple[str, int]]:
        """The k most frequent motifs, ties in table order."""
        ranked = sorted(table.items(), key=lambda item: item[1], reverse=True)
        return ranked[:max(0, k)]


def count_motifs(corpus_path: str, s: int, vectorized: bool = True) -> Dict[str, int]:
    return MotifCounter(s, vectorized=vectorized).count_motifs(corpus_path)


def select_best(table: Dict[str, int]) -> Optional[str]:
    best = MotifCounter.select_best(table)
    return best.motif if best else None


def count_from_config(config: CounterConfig, show_progress: bool = False) -> Dict[str, int]:
    counter = MotifCounter(config.s, vectorized=config.vectorized,
                           motif_chunk=config.motif_chunk, show_progress=show_progress)
    return counter.count_motifs(config.input_path)
