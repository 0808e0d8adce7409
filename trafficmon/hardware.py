"""Temperatures and GPU load gathered from a tree of hardware sensors."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, Iterable

_UNKNOWN = -1.0


class HardwareType(enum.Enum):
    """Kind of a hardware component."""

    MAINBOARD = "mainboard"
    SUPER_IO = "super_io"
    CPU = "cpu"
    RAM = "ram"
    GPU_NVIDIA = "gpu_nvidia"
    GPU_ATI = "gpu_ati"
    HDD = "hdd"
    OTHER = "other"


class SensorType(enum.Enum):
    """Kind of value a sensor reports."""

    VOLTAGE = "voltage"
    CLOCK = "clock"
    TEMPERATURE = "temperature"
    LOAD = "load"
    FAN = "fan"
    FLOW = "flow"
    CONTROL = "control"
    LEVEL = "level"
    FACTOR = "factor"
    POWER = "power"
    DATA = "data"


@dataclass
class Sensor:
    """A named reading; ``value`` is ``None`` when nothing has been read."""

    name: str
    sensor_type: SensorType
    value: float | None = None


@dataclass
class Hardware:
    """A component with sensors and nested sub-components.

    ``updater`` is called with the component to refresh its sensor values.
    """

    name: str
    hardware_type: HardwareType
    sensors: list[Sensor] = field(default_factory=list)
    sub_hardware: list[Hardware] = field(default_factory=list)
    updater: Callable[[Hardware], None] | None = None

    def update(self) -> None:
        """Refresh this component and then all of its sub-components."""
        if self.updater is not None:
            self.updater(self)
        for sub in self.sub_hardware:
            sub.update()


def _reading(sensor: Sensor) -> float:
    return 0.0 if sensor.value is None else float(sensor.value)


def hardware_temperature(hardware: Hardware) -> float | None:
    """Average of the temperature sensors, searching sub-components if there are none."""
    readings = [
        _reading(sensor)
        for sensor in hardware.sensors
        if sensor.sensor_type is SensorType.TEMPERATURE
    ]
    if readings:
        return sum(readings) / len(readings)
    for sub in hardware.sub_hardware:
        temperature = hardware_temperature(sub)
        if temperature is not None:
            return temperature
    return None


def gpu_core_usage(hardware: Hardware) -> float | None:
    """Value of the load sensor named ``GPU Core``, if the component has one."""
    return next(
        (
            _reading(sensor)
            for sensor in hardware.sensors
            if sensor.sensor_type is SensorType.LOAD and sensor.name == "GPU Core"
        ),
        None,
    )


class HardwareMonitor:
    """Collects temperatures and GPU usage from a set of components.

    Values that could not be read are reported as -1.
    """

    def __init__(self, hardware: Iterable[Hardware] = ()) -> None:
        self.hardware = list(hardware)
        self._reset()

    def _reset(self) -> None:
        self._cpu_temperature = _UNKNOWN
        self._gpu_nvidia_temperature = _UNKNOWN
        self._gpu_ati_temperature = _UNKNOWN
        self._hdd_temperature = _UNKNOWN
        self._mainboard_temperature = _UNKNOWN
        self._gpu_nvidia_usage = _UNKNOWN
        self._gpu_ati_usage = _UNKNOWN

    @staticmethod
    def _temperature(hardware: Hardware) -> float:
        temperature = hardware_temperature(hardware)
        return _UNKNOWN if temperature is None else temperature

    def refresh(self) -> None:
        """Update every component and read the values again."""
        self._reset()
        for hardware in self.hardware:
            hardware.update()
        for hardware in self.hardware:
            kind = hardware.hardware_type
            if kind is HardwareType.CPU:
                if self._cpu_temperature < 0:
                    self._cpu_temperature = self._temperature(hardware)
            elif kind is HardwareType.GPU_NVIDIA:
                if self._gpu_nvidia_temperature < 0:
                    self._gpu_nvidia_temperature = self._temperature(hardware)
                if self._gpu_nvidia_usage < 0:
                    usage = gpu_core_usage(hardware)
                    if usage is not None:
                        self._gpu_nvidia_usage = usage
            elif kind is HardwareType.GPU_ATI:
                if self._gpu_ati_temperature < 0:
                    self._gpu_ati_temperature = self._temperature(hardware)
                if self._gpu_ati_usage < 0:
                    usage = gpu_core_usage(hardware)
                    if usage is not None:
                        self._gpu_ati_usage = usage
            elif kind is HardwareType.HDD:
                if self._hdd_temperature < 0:
                    self._hdd_temperature = self._temperature(hardware)
            elif kind is HardwareType.MAINBOARD:
                if self._mainboard_temperature < 0:
                    self._mainboard_temperature = self._temperature(hardware)

    @property
    def cpu_temperature(self) -> float:
        """CPU temperature in degrees Celsius."""
        return self._cpu_temperature

    @property
    def gpu_temperature(self) -> float:
        """NVIDIA GPU temperature unless it reads 0, then the ATI one."""
        if self._gpu_nvidia_temperature != 0:
            return self._gpu_nvidia_temperature
        return self._gpu_ati_temperature

    @property
    def hdd_temperature(self) -> float:
        """Disk temperature in degrees Celsius."""
        return self._hdd_temperature

    @property
    def mainboard_temperature(self) -> float:
        """Mainboard temperature in degrees Celsius."""
        return self._mainboard_temperature

    @property
    def gpu_usage(self) -> float:
        """NVIDIA GPU core load if known, otherwise the ATI one."""
        if self._gpu_nvidia_usage >= 0:
            return self._gpu_nvidia_usage
        return self._gpu_ati_usage