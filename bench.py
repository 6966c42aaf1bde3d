import argparse
import statistics
import time

from int_widths import WIDTHS
from number_words import cardinal, ordinal

RANGE_WIDTHS = ("i8", "u8")
MIN_MAX_WIDTHS = ("i8", "u8", "i16", "u16", "i32", "u32", "i64", "u64", "isize", "usize")


def _call_on_range(formatter, width):
    for value in range(width.min_value, width.max_value + 1):
        formatter(value, width)


def _call_on_min_max(formatter, width):
    formatter(width.max_value, width)
    formatter(width.min_value, width)


def collect_benchmarks(only=None, formatter=cardinal):
    benchmarks = []
    if only in (None, "range"):
        for name in RANGE_WIDTHS:
            width = WIDTHS[name]
            benchmarks.append(
                (f"call_on_range_{name}", lambda width=width: _call_on_range(formatter, width))
            )
    if only in (None, "min-max"):
        for name in MIN_MAX_WIDTHS:
            width = WIDTHS[name]
            benchmarks.append(
                (f"call_on_min_max_{name}", lambda width=width: _call_on_min_max(formatter, width))
            )
    return benchmarks


def time_benchmark(func, repeat):
    timings = []
    for _ in range(repeat):
        start = time.perf_counter()
        func()
        timings.append(time.perf_counter() - start)
    return timings


def run_benchmarks(benchmarks, repeat):
    results = {}
    for name, func in benchmarks:
        timings = time_benchmark(func, repeat)
        mean = statistics.mean(timings)
        results[name] = mean
        print(f"{name}: {mean * 1e6:.2f} us/iter (min {min(timings) * 1e6:.2f} us, {repeat} runs)")
    return results


def cmdline_parser():
    parser = argparse.ArgumentParser(
        description="Time the number-to-words formatters.",
    )
    parser.add_argument(
        "--repeat",
        type=int,
        default=100,
        help="Runs per benchmark.",
    )
    parser.add_argument(
        "--only",
        choices=("range", "min-max"),
        help="Run only one group of benchmarks.",
    )
    parser.add_argument(
        "--ordinal",
        action="store_true",
        help="Benchmark the ordinal formatter instead of the cardinal one.",
    )
    return parser


def main():
    parser = cmdline_parser()
    args = parser.parse_args()
    if args.repeat < 1:
        parser.error("--repeat must be at least 1.")
    formatter = ordinal if args.ordinal else cardinal
    run_benchmarks(collect_benchmarks(args.only, formatter), args.repeat)


if __name__ == "__main__":
    main()
