import struct
from collections import namedtuple

import torch

POINTER_BITS = struct.calcsize("P") * 8


class IntWidth(namedtuple("IntWidth", ["name", "bits", "signed"])):
    __slots__ = ()

    @property
    def min_value(self):
        if self.signed:
            return -(1 << (self.bits - 1))
        return 0

    @property
    def max_value(self):
        if self.signed:
            return (1 << (self.bits - 1)) - 1
        return (1 << self.bits) - 1

    def contains(self, value):
        return self.min_value <= value <= self.max_value


FIXED_WIDTHS = tuple(
    IntWidth(f"{'i' if signed else 'u'}{bits}", bits, signed)
    for bits in (8, 16, 32, 64)
    for signed in (True, False)
)
WIDTHS = {width.name: width for width in FIXED_WIDTHS}
WIDTHS["isize"] = IntWidth("isize", POINTER_BITS, True)
WIDTHS["usize"] = IntWidth("usize", POINTER_BITS, False)

# Without an explicit width a plain int may be anything a 64-bit type holds.
_DEFAULT_MIN = WIDTHS["i64"].min_value
_DEFAULT_MAX = WIDTHS["u64"].max_value


def fixed_width(bits, signed):
    for width in FIXED_WIDTHS:
        if width.bits == bits and width.signed == signed:
            return width
    kind = "signed" if signed else "unsigned"
    raise ValueError(f"No {bits}-bit {kind} integer width is supported.")


def width_for_dtype(dtype):
    try:
        info = torch.iinfo(dtype)
    except TypeError as exc:
        raise TypeError(f"{dtype} is not an integer dtype.") from exc
    return fixed_width(info.bits, info.min < 0)


def resolve_width(width):
    if width is None or isinstance(width, IntWidth):
        return width
    if isinstance(width, str):
        if width not in WIDTHS:
            raise ValueError(
                f"Unknown integer width {width!r}; expected one of {', '.join(WIDTHS)}."
            )
        return WIDTHS[width]
    if isinstance(width, torch.dtype):
        return width_for_dtype(width)
    raise TypeError(
        "width must be None, an IntWidth, a width name or a torch integer dtype."
    )


def _unwrap(value):
    if isinstance(value, torch.Tensor):
        if value.numel() != 1:
            raise TypeError(
                f"Expected a single-element tensor, got shape {tuple(value.shape)}."
            )
        width = width_for_dtype(value.dtype)
        return int(value.item()), width
    # bool is an int subclass but has no written form here.
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected an integer, got {type(value).__name__}.")
    return value, None


def split_sign(value, width=None):
    value, inferred = _unwrap(value)
    width = resolve_width(width)
    if width is None:
        width = inferred
    if width is None:
        if not _DEFAULT_MIN <= value <= _DEFAULT_MAX:
            raise ValueError(f"{value} does not fit in a 64-bit integer.")
    elif not width.contains(value):
        raise ValueError(
            f"{value} is out of range for {width.name} "
            f"[{width.min_value}, {width.max_value}]."
        )
    if value < 0:
        return -value, True
    return value, False
