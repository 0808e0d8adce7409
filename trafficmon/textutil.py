"""Small text, number and colour helpers shared across the package."""

from __future__ import annotations

import datetime as _dt

_ASCII_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)

_BLANKS = "".join(chr(code) for code in range(33))

_FONT_WEIGHTS = {
    "Light": 300,
    "Semilight": 350,
    "Semibold": 600,
    "Bold": 700,
    "Black": 900,
}

_FACE_NAME_MAX = 31
_UINT32_MASK = 0xFFFFFFFF
_COLOR_DIFF = 24


def string_normalize(text: str) -> str:
    """Strip spaces and control characters (code points 0..32) from both ends."""
    return text.strip(_BLANKS)


def string_split(
    text: str, separator: str, skip_empty: bool = True, trim: bool = True
) -> list[str]:
    """Split ``text`` on ``separator``, optionally trimming and dropping empty parts."""
    if not separator:
        raise ValueError("separator must not be empty")
    parts = text.split(separator)
    if trim:
        parts = [string_normalize(part) for part in parts]
    if skip_empty:
        parts = [part for part in parts if part]
    return parts


def string_transform(text: str, upper: bool) -> str:
    """Change the case of ASCII letters only, leaving other characters alone."""
    return text.translate(_ASCII_UPPER if upper else _ASCII_LOWER)


def similarity_degree(source: str, match: str) -> float:
    """Similarity in 0..1 from the Levenshtein distance; 0 if either string is empty."""
    if not source or not match:
        return 0.0
    previous = list(range(len(match) + 1))
    for row, src_ch in enumerate(source, start=1):
        current = [row]
        for col, match_ch in enumerate(match, start=1):
            cost = 0 if src_ch == match_ch else 1
            current.append(
                min(previous[col] + 1, current[col - 1] + 1, previous[col - 1] + cost)
            )
        previous = current
    return 1 - previous[-1] / max(len(source), len(match))


def int_to_string(
    n: int, thousand_separation: bool = False, is_unsigned: bool = False
) -> str:
    """Format an integer, optionally as unsigned 64-bit and with comma grouping."""
    if is_unsigned:
        n %= 1 << 64
    text = str(n)
    if not thousand_separation or len(text) <= 3:
        return text
    head = len(text) % 3 or 3
    chunks = [text[:head]]
    chunks.extend(text[pos:pos + 3] for pos in range(head, len(text), 3))
    return ",".join(chunks)


def variant_to_string(value: object) -> str:
    """Render an int, float or string the way format parameters are rendered."""
    if isinstance(value, int):
        return "%d" % value
    if isinstance(value, float):
        return "%g" % value
    return str(value)


def string_format(format_str: str, *args: object) -> str:
    """Replace ``<%1%>``, ``<%2%>``... in ``format_str`` with the rendered arguments."""
    result = format_str
    for position, arg in enumerate(args, start=1):
        result = result.replace(f"<%{position}%>", variant_to_string(arg))
    return result


def json_value_simple(json_str: str, name: str) -> str:
    """Pull the raw value of a top-level key out of a JSON text without parsing it."""
    index = json_str.find(f'"{name}"')
    if index < 0:
        return ""
    index = json_str.find(":", index + 1)
    if index < 0:
        return ""
    start = next(
        (pos for pos in range(index + 1, len(json_str)) if json_str[pos] not in '" '),
        None,
    )
    if start is None:
        return ""
    end = next(
        (pos for pos in range(start, len(json_str)) if json_str[pos] in '",]}\r\n'),
        len(json_str),
    )
    return json_str[start:end]


def normalize_font_name(name: str) -> tuple[str, int | None]:
    """Split a weight word (Light, Bold...) off a font face name.

    Returns the cleaned face name and the weight it implies, or ``None``
    when the name carries no recognised weight.
    """
    if not name:
        return name, None
    trimmed = name[:-1] if name.endswith(" ") else name
    index = trimmed.rfind(" ")
    if index < 0:
        return name, None
    weight = _FONT_WEIGHTS.get(trimmed[index + 1:])
    if weight is not None:
        trimmed = trimmed[:index]
    return trimmed[:_FACE_NAME_MAX], weight


def count_one_bits(value: int) -> int:
    """Number of set bits in the 32-bit unsigned form of ``value``."""
    return bin(value & _UINT32_MASK).count("1")


def set_number_bit(num: int, bit: int, value: bool) -> int:
    """Return ``num`` (as 32-bit unsigned) with ``bit`` set or cleared."""
    mask = 1 << bit
    result = num | mask if value else num & ~mask
    return result & _UINT32_MASK


def get_number_bit(num: int, bit: int) -> bool:
    """Whether ``bit`` is set in ``num``."""
    return bool(num & (1 << bit))


def _channels(color: int) -> tuple[int, int, int]:
    return color & 0xFF, (color >> 8) & 0xFF, (color >> 16) & 0xFF


def _rgb(r: int, g: int, b: int) -> int:
    return r | (g << 8) | (b << 16)


def is_color_similar(color1: int, color2: int) -> bool:
    """True when every RGB channel of two 0x00BBGGRR colours differs by less than 24."""
    return all(
        abs(a - b) < _COLOR_DIFF for a, b in zip(_channels(color1), _channels(color2))
    )


def transparent_color_convert(color: int) -> int:
    """Nudge the blue channel by one when red equals blue; black is left as is."""
    if color == 0:
        return color
    r, g, b = _channels(color)
    if r != b:
        return color
    b = b - 1 if b >= 255 else b + 1
    return _rgb(r, g, b)


def compare_clock_time(a: _dt.time, b: _dt.time) -> _dt.time:
    """Difference ``a - b`` in hours, minutes and seconds, wrapped around midnight."""
    seconds_a = a.hour * 3600 + a.minute * 60 + a.second
    seconds_b = b.hour * 3600 + b.minute * 60 + b.second
    diff = (seconds_a - seconds_b) % 86400
    hours, rest = divmod(diff, 3600)
    minutes, seconds = divmod(rest, 60)
    return _dt.time(hours, minutes, seconds)