import unittest

from int_widths import WIDTHS
from number_words import (
    SCALES,
    UNITS,
    _push_doublet,
    _push_triplet,
    cardinal,
    compose,
    scale_index,
)


class TestCardinal(unittest.TestCase):
    def test_examples(self):
        cases = {
            0: "zero",
            10: "ten",
            99: "ninety-nine",
            100: "one hundred",
            101: "one hundred one",
            120: "one hundred twenty",
            121: "one hundred twenty-one",
            127: "one hundred twenty-seven",
            999: "nine hundred ninety-nine",
            1000: "one thousand",
            1001: "one thousand one",
            10123: "ten thousand one hundred twenty-three",
            1000000: "one million",
            1001000: "one million one thousand",
            1000000001: "one billion one",
            251334506: (
                "two hundred fifty-one million "
                "three hundred thirty-four thousand "
                "five hundred six"
            ),
        }
        for value, expected in cases.items():
            with self.subTest(value=value):
                self.assertEqual(cardinal(value), expected)

    def test_units(self):
        for value in range(20):
            with self.subTest(value=value):
                self.assertEqual(cardinal(value), UNITS[value])

    def test_zero_for_every_width(self):
        for name in WIDTHS:
            with self.subTest(width=name):
                self.assertEqual(cardinal(0, name), "zero")

    def test_negative_is_minus_positive(self):
        for value in list(range(1, 1100)) + [10**6 + 7, 2**31, 10**18 + 1]:
            with self.subTest(value=value):
                self.assertEqual(cardinal(-value), "minus " + cardinal(value))

    def test_minus_prefix_only_for_negatives(self):
        for value in range(-300, 301):
            with self.subTest(value=value):
                self.assertEqual(cardinal(value).startswith("minus "), value < 0)

    def test_inner_zero_groups_are_skipped(self):
        words = cardinal(1_000_000_001)
        self.assertNotIn("thousand", words)
        self.assertNotIn("million", words)
        self.assertNotIn("zero", cardinal(5_000_000_000_000))
        self.assertEqual(cardinal(5_000_000_000_000), "five trillion")
        self.assertEqual(cardinal(1_000_000_000_000_000_010), "one quintillion ten")

    def test_scale_word_count(self):
        # Every triplet nonzero, so every scale word below the top one appears.
        for value in (1_001, 1_001_001, 111_111_111_111, 1_234_567_891_011_121_314):
            with self.subTest(value=value):
                words = cardinal(value).split()
                present = [scale for scale in SCALES[1:] if scale in words]
                self.assertEqual(len(present), scale_index(value))

    def test_no_doubled_or_trailing_spaces(self):
        for value in (1000, 1_000_000, 2_000_100, 10**18, 999_000_000_000):
            with self.subTest(value=value):
                words = cardinal(value)
                self.assertNotIn("  ", words)
                self.assertEqual(words, words.strip())


class TestScaleIndex(unittest.TestCase):
    def test_power_of_ten_boundaries(self):
        self.assertEqual(scale_index(0), 0)
        for exponent in range(1, 20):
            with self.subTest(exponent=exponent):
                power = 10**exponent
                self.assertEqual(scale_index(power), exponent // 3)
                self.assertEqual(scale_index(power - 1), (exponent - 1) // 3)

    def test_largest_64_bit_magnitude(self):
        self.assertEqual(scale_index(2**64 - 1), 6)
        self.assertEqual(SCALES[scale_index(2**64 - 1)], "quintillion")

    def test_table_headroom(self):
        self.assertEqual(scale_index(10**24), 8)
        self.assertEqual(compose(10**24, False), "one septillion")
        with self.assertRaises(AssertionError):
            scale_index(10**27)


class TestPreconditions(unittest.TestCase):
    def test_doublet_out_of_range(self):
        for value in (100, -1):
            with self.subTest(value=value):
                fragments = ["minus "]
                with self.assertRaises(AssertionError):
                    _push_doublet(value, fragments)
                self.assertEqual(fragments, ["minus "])

    def test_triplet_out_of_range(self):
        for value in (1000, -1):
            with self.subTest(value=value):
                fragments = []
                with self.assertRaises(AssertionError):
                    _push_triplet(value, fragments)
                self.assertEqual(fragments, [])

    def test_in_range_edges(self):
        fragments = []
        _push_doublet(99, fragments)
        self.assertEqual("".join(fragments), "ninety-nine")
        fragments = []
        _push_triplet(999, fragments)
        self.assertEqual("".join(fragments), "nine hundred ninety-nine")


if __name__ == "__main__":
    unittest.main()
