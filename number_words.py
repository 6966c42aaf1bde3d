from bisect import bisect_right

from int_widths import split_sign

UNITS = (
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "eleven",
    "twelve",
    "thirteen",
    "fourteen",
    "fifteen",
    "sixteen",
    "seventeen",
    "eighteen",
    "nineteen",
)
# 10..19 come from UNITS.
TENS = (
    "",
    "",
    "twenty",
    "thirty",
    "forty",
    "fifty",
    "sixty",
    "seventy",
    "eighty",
    "ninety",
)
SCALES = (
    "",
    "thousand",
    "million",
    "billion",
    "trillion",
    "quadrillion",
    "quintillion",
    "sextillion",
    "septillion",
)
ORDINAL_IRREGULAR = {
    "one": "first",
    "two": "second",
    "three": "third",
    "five": "fifth",
    "eight": "eighth",
    "nine": "ninth",
    "twelve": "twelfth",
}

_POWERS = tuple(1000**index for index in range(len(SCALES)))
_SCALE_THRESHOLDS = _POWERS[1:]
_MAX_MAGNITUDE = 1000 ** len(SCALES) - 1


def _require(condition, message):
    if not condition:
        raise AssertionError(message)


def _push_doublet(value, fragments):
    _require(0 <= value < 100, f"doublet out of range: {value}")
    if value == 0:
        return
    if value < 20:
        fragments.append(UNITS[value])
        return
    tens, ones = divmod(value, 10)
    fragments.append(TENS[tens])
    if ones:
        fragments.append("-")
        fragments.append(UNITS[ones])


def _push_triplet(value, fragments):
    _require(0 <= value < 1000, f"triplet out of range: {value}")
    hundreds, rest = divmod(value, 100)
    if hundreds:
        fragments.append(UNITS[hundreds])
        fragments.append(" hundred" if rest == 0 else " hundred ")
    _push_doublet(rest, fragments)


def scale_index(magnitude):
    _require(0 <= magnitude <= _MAX_MAGNITUDE, f"magnitude out of range: {magnitude}")
    return bisect_right(_SCALE_THRESHOLDS, magnitude)


def cardinal_word(word):
    return word


def ordinal_word(word):
    if word in ORDINAL_IRREGULAR:
        return ORDINAL_IRREGULAR[word]
    if word.endswith("y"):
        return word[:-1] + "ieth"
    return word + "th"


def compose(magnitude, negative, final_word=cardinal_word):
    if magnitude == 0:
        return final_word(UNITS[0])
    index = scale_index(magnitude)
    fragments = ["minus "] if negative else []
    while index > 0:
        group, magnitude = divmod(magnitude, _POWERS[index])
        if group:
            _push_triplet(group, fragments)
            fragments.append(" ")
            fragments.append(SCALES[index])
            if magnitude == 0:
                break
            fragments.append(" ")
        index -= 1
    _push_triplet(magnitude, fragments)

    # The last fragment is a single word, possibly led by a space (" hundred").
    last = fragments.pop()
    word = last.lstrip(" ")
    fragments.append(last[: len(last) - len(word)] + final_word(word))
    return "".join(fragments)


def cardinal(value, width=None):
    """Cardinal English form of an integer, e.g. 127 -> "one hundred twenty-seven"."""
    magnitude, negative = split_sign(value, width)
    return compose(magnitude, negative)


def ordinal(value, width=None):
    """Ordinal English form of an integer, e.g. 21 -> "twenty-first"."""
    magnitude, negative = split_sign(value, width)
    return compose(magnitude, negative, ordinal_word)
