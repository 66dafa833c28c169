from dataclasses import dataclass
from typing import Optional, Tuple

DEFAULT_DATABASE = "nucleotide_database.txt"
BEST_MOTIF_LABEL = "The best motif is: "


@dataclass
class GeneratorConfig:
    """Parameters for building a synthetic sequence corpus."""
    n: int = 1_000_000  # Number of sequences to draw
    m: int = 50  # Length of each sequence
    probabilities: Tuple[float, ...] = (0.25, 0.25, 0.25, 0.25)  # A, C, G, T
    output_path: str = DEFAULT_DATABASE
    entropy_threshold: float = 1.5  # Keep sequences strictly above this
    seed: Optional[int] = None


@dataclass
class CounterConfig:
    """Parameters for the brute-force motif count."""
    s: int = 6  # Motif size
    input_path: str = DEFAULT_DATABASE
    vectorized: bool = True
    motif_chunk: int = 4096  # Motifs compared per numpy batch


@dataclass
class GenerationSummary:
    """Outcome of a generation run."""
    output_path: str
    requested: int
    written: int
    elapsed: float = 0.0

    @property
    def rejected(self) -> int:
        return self.requested - self.written

    @property
    def retention(self) -> float:
        """Fraction of drawn sequences that passed the entropy filter."""
        if self.requested <= 0:
            return 0.0
        return self.written / self.requested

    def to_line(self) -> str:
        return (f"Kept {self.written:,}/{self.requested:,} sequences "
                f"({self.retention * 100:.2f}%) in {self.elapsed:.2f}s")


@dataclass
class BestMotif:
    """Winning motif with the keys it was ranked by."""
    motif: str
    count: int
    repeat_run: int

    def to_line(self) -> str:
        return f"{BEST_MOTIF_LABEL}{self.motif}"
