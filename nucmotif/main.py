import argparse
import sys
import time
from typing import List, Optional

from .counter import MotifCounter, count_from_config
from .generator import generate_from_config
from .models import CounterConfig, GeneratorConfig
from .utils import parse_probabilities


def run_generate(args) -> int:
    config = GeneratorConfig(
        n=args.n,
        m=args.m,
        probabilities=args.probabilities,
        output_path=args.output,
        entropy_threshold=args.entropy_threshold,
        seed=args.seed
    )

    print("Generating and writing sequences...")
    summary = generate_from_config(config, show_progress=args.verbose)
    print("Sequences generated and written to the file.")
    print(summary.to_line())
    return 0


def run_count(args) -> int:
    config = CounterConfig(
        s=args.s,
        input_path=args.input,
        vectorized=not args.pure_python,
        motif_chunk=args.motif_chunk
    )

    if args.verbose:
        print(f"Counting {4 ** config.s:,} motifs of size {config.s} in {config.input_path}...")
    start_total = time.time()

    # Optional profiler
    profiler = None
    if args.profile:
        import cProfile
        profiler = cProfile.Profile()
        profiler.enable()

    table = count_from_config(config, show_progress=args.verbose)

    if profiler is not None:
        profiler.disable()

    best = MotifCounter.select_best(table)
    if best is not None:
        print(best.to_line())

    if args.top:
        for motif, count in MotifCounter.top_motifs(table, args.top):
            print(f"{motif}\t{count}")

    if args.verbose:
        print(f"Total time: {time.time() - start_total:.2f}s")

    if profiler is not None:
        import pstats
        print("Top 20 cumulative time hotspots:")
        stats = pstats.Stats(profiler)
        stats.strip_dirs().sort_stats("cumulative").print_stats(20)
    return 0


def build_parser() -> argparse.ArgumentParser:
    defaults_gen = GeneratorConfig()
    defaults_cnt = CounterConfig()

    parser = argparse.ArgumentParser(description="Synthetic nucleotide corpus generator and brute-force motif counter")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Write an entropy-filtered random sequence corpus")
    gen.add_argument("-n", type=int, default=defaults_gen.n,
                     help=f"Number of sequences to draw (default: {defaults_gen.n})")
    gen.add_argument("-m", type=int, default=defaults_gen.m,
                     help=f"Length of each sequence (default: {defaults_gen.m})")
    gen.add_argument("--probabilities", type=parse_probabilities, default=defaults_gen.probabilities,
                     help="Comma-separated weights for A,C,G,T (default: 0.25,0.25,0.25,0.25)")
    gen.add_argument("--output", "-o", default=defaults_gen.output_path,
                     help=f"Output corpus file (default: {defaults_gen.output_path})")
    gen.add_argument("--entropy-threshold", type=float, default=defaults_gen.entropy_threshold,
                     help=f"Keep sequences with entropy strictly above this (default: {defaults_gen.entropy_threshold})")
    gen.add_argument("--seed", type=int, default=None, help="Random seed for reproducible corpora")
    gen.add_argument("--verbose", "-v", action="store_true", help="Show progress")
    gen.set_defaults(func=run_generate)

    cnt = sub.add_parser("count", help="Count every motif of size s and report the best one")
    cnt.add_argument("-s", type=int, default=defaults_cnt.s,
                     help=f"Motif size (default: {defaults_cnt.s})")
    cnt.add_argument("--input", "-i", default=defaults_cnt.input_path,
                     help=f"Input corpus file (default: {defaults_cnt.input_path})")
    cnt.add_argument("--pure-python", action="store_true",
                     help="Slide a window per motif instead of the numpy comparison")
    cnt.add_argument("--motif-chunk", type=int, default=defaults_cnt.motif_chunk,
                     help=f"Motifs compared per numpy batch (default: {defaults_cnt.motif_chunk})")
    cnt.add_argument("--top", type=int, default=0, help="Also print the K most frequent motifs")
    cnt.add_argument("--verbose", "-v", action="store_true", help="Show progress")
    cnt.add_argument("--profile", action="store_true", help="Profile counting with cProfile and print top hotspots")
    cnt.set_defaults(func=run_count)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        return args.func(args)
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    sys.exit(main())
