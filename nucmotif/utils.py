from typing import Iterator, Tuple


def iter_corpus(file_path: str) -> Iterator[str]:
    """Yield one sequence per corpus line, without the line terminator."""
    with open(file_path, 'r') as f:
        for line in f:
            yield line.rstrip('\r\n')


def parse_probabilities(value: str) -> Tuple[float, ...]:
    """Parse 'pA,pC,pG,pT' into a tuple of four floats."""
    parts = [p.strip() for p in value.split(',') if p.strip()]
    if len(parts) != 4:
        raise ValueError(f"expected 4 comma-separated weights for A,C,G,T, got {len(parts)}")
    return tuple(float(p) for p in parts)
