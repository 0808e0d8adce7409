"""Formatting of transfer speeds, data sizes, temperatures and usage figures."""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass

_UINT64_MASK = (1 << 64) - 1
_UINT32_MASK = 0xFFFFFFFF


class SpeedUnit(enum.Enum):
    """Unit used to display a transfer speed."""

    AUTO = 0
    KBPS = 1
    MBPS = 2


@dataclass
class PublicSettings:
    """Display options shared by the main window and the taskbar window."""

    unit_byte: bool = True
    speed_unit: SpeedUnit = SpeedUnit.AUTO
    speed_short_mode: bool = False
    hide_unit: bool = False
    separate_value_unit_with_space: bool = False
    hide_percent: bool = False


def _f32(value: float) -> float:
    """Round a number to single precision."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _kib(size: int) -> float:
    return _f32(_f32(size) / 1024.0)


def _mib(size: int) -> float:
    return _f32(_kib(size) / 1024.0)


def _gib(size: int) -> float:
    return _f32(_mib(size) / 1024.0)


def _auto_value_and_unit(size: int, short_mode: bool) -> tuple[str, str]:
    if short_mode:
        if size < 1024 * 10:
            return "%.1f" % _kib(size), "K"
        if size < 1024 * 1000:
            return "%.0f" % _kib(size), "K"
        if size < 1024 * 1024 * 1000:
            return "%.1f" % _mib(size), "M"
        return "%.2f" % _gib(size), "G"
    if size < 1024 * 10:
        return "%.2f" % _kib(size), "KB"
    if size < 1024 * 1000:
        return "%.1f" % _kib(size), "KB"
    if size < 1024 * 1024 * 1000:
        return "%.2f" % _mib(size), "MB"
    return "%.2f" % _gib(size), "GB"


def format_speed(size: int, cfg: PublicSettings) -> str:
    """Render a byte count per second according to the display settings."""
    size &= _UINT64_MASK
    if not cfg.unit_byte:
        size = (size * 8) & _UINT64_MASK

    value_str = ""
    unit_str = ""
    if cfg.speed_unit is SpeedUnit.AUTO:
        value_str, unit_str = _auto_value_and_unit(size, cfg.speed_short_mode)
    elif cfg.speed_unit is SpeedUnit.KBPS:
        if cfg.speed_short_mode:
            value_str = ("%.1f" if size < 1024 * 10 else "%.0f") % _kib(size)
            unit_str = "" if cfg.hide_unit else "K"
        else:
            value_str = ("%.2f" if size < 1024 * 10 else "%.1f") % _kib(size)
            unit_str = "" if cfg.hide_unit else "KB"
    elif cfg.speed_unit is SpeedUnit.MBPS:
        if cfg.speed_short_mode:
            value_str = "%.1f" % _mib(size)
            unit_str = "" if cfg.hide_unit else "M"
        else:
            value_str = "%.2f" % _mib(size)
            unit_str = "" if cfg.hide_unit else "MB"

    if cfg.separate_value_unit_with_space and not cfg.hide_unit:
        text = f"{value_str} {unit_str}"
    else:
        text = value_str + unit_str

    if not cfg.unit_byte:
        if cfg.speed_short_mode and not cfg.hide_unit:
            text += "b"
        else:
            text = text.replace("B", "b")
    return text


def format_data_size(size: int) -> str:
    """Render a byte count in KB, MB, GB or TB."""
    size &= _UINT64_MASK
    if size < 1024 * 10:
        return "%.2f KB" % (size / 1024.0)
    if size < 1024 * 1024:
        return "%.1f KB" % (size / 1024.0)
    if size < 1024 * 1024 * 1024:
        return "%.2f MB" % (size / 1024.0 / 1024.0)
    if size < 1024 * 1024 * 1024 * 1024:
        return "%.2f GB" % (size / 1024.0 / 1024.0 / 1024.0)
    return "%.2f TB" % (size / 1024.0 / 1024.0 / 1024.0 / 1024.0)


def format_kbytes(kb_size: int) -> str:
    """Render a kilobyte count in KB, MB, GB or TB."""
    kb_size &= _UINT64_MASK
    if kb_size < 1024:
        low = kb_size & _UINT32_MASK
        if low >= 1 << 31:
            low -= 1 << 32
        return "%d KB" % low
    if kb_size < 1024 * 1024:
        return "%.2f MB" % (kb_size / 1024.0)
    if kb_size < 1024 * 1024 * 1024:
        return "%.2f GB" % (kb_size / 1024.0 / 1024.0)
    return "%.2f TB" % (kb_size / 1024.0 / 1024.0 / 1024.0)


def format_temperature(temperature: float, cfg: PublicSettings) -> str:
    """Render a temperature in degrees Celsius; non-positive values show as ``--``."""
    value = "--" if temperature <= 0 else "%d" % int(temperature)
    if cfg.separate_value_unit_with_space:
        value += " "
    return value + "℃"


def format_usage(usage: int, cfg: PublicSettings) -> str:
    """Render a usage percentage; negative values show as ``--``."""
    value = "--" if usage < 0 else "%d" % usage
    if not cfg.hide_percent:
        if cfg.separate_value_unit_with_space:
            value += " "
        value += "%"
    return value