import argparse
import os

from int_widths import fixed_width
from number_words import cardinal, ordinal

FORMATTERS = {
    "cardinal": cardinal,
    "ordinal": ordinal,
}


def _bound_label(value):
    return f"m{-value}" if value < 0 else str(value)


def min_max_cases():
    cases = [(0, None)]
    for bits in (8, 16, 32, 64):
        signed = fixed_width(bits, True)
        unsigned = fixed_width(bits, False)
        cases.append((signed.min_value, signed))
        cases.append((signed.max_value, signed))
        cases.append((unsigned.max_value, unsigned))
    return cases


class GoldenFileGenerator:
    def __init__(
        self,
        output_dir="tests/golden",
        range_low=-256,
        range_high=256,
        verbose=False,
    ):
        if range_low > range_high:
            raise ValueError("range_low must not be greater than range_high.")
        self.output_dir = output_dir
        self.range_low = range_low
        self.range_high = range_high
        self.verbose = verbose

    def _write_lines(self, filename, lines):
        path = os.path.join(self.output_dir, filename)
        os.makedirs(self.output_dir, exist_ok=True)
        with open(path, "w", newline="\n", encoding="utf-8") as handle:
            for line in lines:
                handle.write(f"{line}\n")
        if self.verbose:
            print(f"Wrote {filename} with {len(lines)} rows.")
        return path

    def range_filename(self, mode):
        low = _bound_label(self.range_low)
        high = _bound_label(self.range_high)
        return f"{mode}_{low}..={high}.txt"

    def min_max_filename(self, mode):
        return f"{mode}_min_max.txt"

    def generate_range_files(self):
        paths = []
        for mode, formatter in FORMATTERS.items():
            lines = [
                formatter(value)
                for value in range(self.range_low, self.range_high + 1)
            ]
            paths.append(self._write_lines(self.range_filename(mode), lines))
        return paths

    def generate_min_max_files(self):
        paths = []
        for mode, formatter in FORMATTERS.items():
            lines = [formatter(value, width) for value, width in min_max_cases()]
            paths.append(self._write_lines(self.min_max_filename(mode), lines))
        return paths

    def generate_all(self):
        return self.generate_range_files() + self.generate_min_max_files()


def cmdline_parser():
    parser = argparse.ArgumentParser(
        description="Write golden reference files of spelled-out integers.",
    )
    parser.add_argument(
        "--output-dir",
        default="tests/golden",
        help="Directory the reference files are written to.",
    )
    parser.add_argument(
        "--range-low",
        type=int,
        default=-256,
        help="First value of the contiguous range files.",
    )
    parser.add_argument(
        "--range-high",
        type=int,
        default=256,
        help="Last value (inclusive) of the contiguous range files.",
    )
    return parser


def main():
    parser = cmdline_parser()
    args = parser.parse_args()
    if args.range_low > args.range_high:
        parser.error("--range-low must not be greater than --range-high.")
    generator = GoldenFileGenerator(
        output_dir=args.output_dir,
        range_low=args.range_low,
        range_high=args.range_high,
        verbose=True,
    )
    generator.generate_all()


if __name__ == "__main__":
    main()
