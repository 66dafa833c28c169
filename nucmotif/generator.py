import random
import time
from typing import Optional, Sequence

from .models import GeneratorConfig, GenerationSummary
from .motif_utils import MotifUtils, BASES


class SequenceGenerator:
    """Weighted random sequence generator with Shannon entropy filtering.

    Each position is drawn independently from a distribution over A, C, G, T.
    Sequences at or below the entropy threshold are discarded, which biases
    the corpus away from low-complexity, repetitive strings.
    """

    PROGRESS_EVERY = 100_000

    def __init__(self, probabilities: Sequence[float],
                 entropy_threshold: float = 1.5,
                 seed: Optional[int] = None,
                 show_progress: bool = False):
        if len(probabilities) != len(BASES):
            raise ValueError(f"Expected {len(BASES)} base probabilities (A,C,G,T), got {len(probabilities)}")
        if any(p < 0 for p in probabilities):
            raise ValueError(f"Base probabilities must be non-negative: {list(probabilities)}")

        self.probabilities = tuple(float(p) for p in probabilities)
        self.entropy_threshold = entropy_threshold
        self.show_progress = show_progress
        self.rng = random.Random(seed)

    def weighted_random_base(self) -> str:
        """Select a base by walking the cumulative distribution.

        Falls back to 'A' when the weights sum to less than the drawn value.
        """
        r = self.rng.random()
        cumulative = 0.0
        for base, p in zip(BASES, self.probabilities):
            cumulative += p
            if r <= cumulative:
                return base
        return BASES[0]

    def generate_sequence(self, m: int) -> str:
        return "".join(self.weighted_random_base() for _ in range(m))

    def passes_filter(self, sequence: str) -> bool:
        return MotifUtils.calculate_entropy(sequence) > self.entropy_threshold

    def generate_and_write(self, n: int, m: int, output_path: str) -> GenerationSummary:
        """Draw n sequences of length m and write the ones passing the filter.

        The file is created or truncated and written one line at a time, so an
        I/O failure can leave a partial corpus behind.

        Args:
            n: Number of sequences to draw
            m: Length of each sequence
            output_path: Destination corpus file

        Returns:
            GenerationSummary with drawn and written counts
        """
        t0 = time.time()
        written = 0

        with open(output_path, 'w') as f:
            for i in range(n):
                sequence = self.generate_sequence(m)
                if self.passes_filter(sequence):
                    f.write(sequence + "\n")
                    written += 1

                if self.show_progress and (i + 1) % self.PROGRESS_EVERY == 0:
                    print(f"  [generate] {i + 1:,}/{n:,} drawn, {written:,} kept "
                          f"({time.time() - t0:.2f}s)", flush=True)

        return GenerationSummary(
            output_path=output_path,
            requested=n,
            written=written,
            elapsed=time.time() - t0
        )


def generate_and_write(n: int, m: int, probabilities: Sequence[float], output_path: str,
                       entropy_threshold: float = 1.5, seed: Optional[int] = None,
                       show_progress: bool = False) -> GenerationSummary:
    generator = SequenceGenerator(probabilities, entropy_threshold=entropy_threshold,
                                  seed=seed, show_progress=show_progress)
    return generator.generate_and_write(n, m, output_path)


def generate_from_config(config: GeneratorConfig, show_progress: bool = False) -> GenerationSummary:
    return generate_and_write(
        config.n,
        config.m,
        config.probabilities,
        config.output_path,
        entropy_threshold=config.entropy_threshold,
        seed=config.seed,
        show_progress=show_progress
    )
