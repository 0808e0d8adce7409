from trafficmon.hardware import (
    Hardware,
    HardwareMonitor,
    HardwareType,
    Sensor,
    SensorType,
    gpu_core_usage,
    hardware_temperature,
)


def _temp(value, name="t"):
    return Sensor(name, SensorType.TEMPERATURE, value)


def test_temperature_is_average_of_sensors():
    cpu = Hardware(
        "cpu",
        HardwareType.CPU,
        sensors=[_temp(40.0), _temp(60.0), Sensor("Core", SensorType.LOAD, 99.0)],
    )
    assert hardware_temperature(cpu) == (40.0 + 60.0) / 2


def test_temperature_falls_back_to_sub_hardware():
    board = Hardware(
        "board",
        HardwareType.MAINBOARD,
        sub_hardware=[
            Hardware("chip1", HardwareType.SUPER_IO),
            Hardware("chip2", HardwareType.SUPER_IO, sensors=[_temp(33.0)]),
        ],
    )
    assert hardware_temperature(board) == 33.0


def test_temperature_missing_gives_none():
    assert hardware_temperature(Hardware("ram", HardwareType.RAM)) is None


def test_unread_sensor_counts_as_zero():
    cpu = Hardware("cpu", HardwareType.CPU, sensors=[_temp(None), _temp(50.0)])
    assert hardware_temperature(cpu) == 50.0 / 2


def test_gpu_core_usage_uses_named_load_sensor():
    gpu = Hardware(
        "gpu",
        HardwareType.GPU_NVIDIA,
        sensors=[
            Sensor("GPU Memory", SensorType.LOAD, 10.0),
            Sensor("GPU Core", SensorType.LOAD, 42.0),
        ],
    )
    assert gpu_core_usage(gpu) == 42.0
    assert gpu_core_usage(Hardware("x", HardwareType.GPU_ATI)) is None


def test_monitor_reports_unknown_before_refresh():
    monitor = HardwareMonitor([Hardware("cpu", HardwareType.CPU, sensors=[_temp(45.0)])])
    assert monitor.cpu_temperature == -1
    assert monitor.gpu_usage == -1


def test_monitor_refresh_reads_each_kind():
    monitor = HardwareMonitor(
        [
            Hardware("cpu", HardwareType.CPU, sensors=[_temp(45.0)]),
            Hardware("disk", HardwareType.HDD, sensors=[_temp(30.0)]),
            Hardware("board", HardwareType.MAINBOARD, sensors=[_temp(35.0)]),
            Hardware(
                "gpu",
                HardwareType.GPU_NVIDIA,
                sensors=[_temp(55.0), Sensor("GPU Core", SensorType.LOAD, 12.0)],
            ),
        ]
    )
    monitor.refresh()
    assert monitor.cpu_temperature == 45.0
    assert monitor.hdd_temperature == 30.0
    assert monitor.mainboard_temperature == 35.0
    assert monitor.gpu_temperature == 55.0
    assert monitor.gpu_usage == 12.0


def test_first_component_with_reading_wins():
    monitor = HardwareMonitor(
        [
            Hardware("cpu0", HardwareType.CPU),
            Hardware("cpu1", HardwareType.CPU, sensors=[_temp(41.0)]),
            Hardware("cpu2", HardwareType.CPU, sensors=[_temp(70.0)]),
        ]
    )
    monitor.refresh()
    assert monitor.cpu_temperature == 41.0


def test_gpu_values_fall_back_to_ati():
    monitor = HardwareMonitor(
        [
            Hardware("nv", HardwareType.GPU_NVIDIA, sensors=[_temp(0.0)]),
            Hardware(
                "ati",
                HardwareType.GPU_ATI,
                sensors=[_temp(61.0), Sensor("GPU Core", SensorType.LOAD, 77.0)],
            ),
        ]
    )
    monitor.refresh()
    assert monitor.gpu_temperature == 61.0
    assert monitor.gpu_usage == 77.0


def test_refresh_updates_whole_tree_and_resets_values():
    calls = []
    cpu_sensor = _temp(50.0)

    def update_cpu(hardware):
        calls.append(hardware.name)

    sub = Hardware("core", HardwareType.OTHER, updater=update_cpu)
    cpu = Hardware(
        "cpu", HardwareType.CPU, sensors=[cpu_sensor], sub_hardware=[sub], updater=update_cpu
    )
    monitor = HardwareMonitor([cpu])
    monitor.refresh()
    assert calls == ["cpu", "core"]
    assert monitor.cpu_temperature == 50.0
    cpu.sensors.clear()
    monitor.refresh()
    assert monitor.cpu_temperature == -1
    assert len(calls) == 4