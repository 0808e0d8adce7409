# trafficmon

Building blocks for a network traffic monitor: display formatting of speeds,
data sizes, temperatures and usage; CPU usage sampling; a daily traffic
history file; month calendar grids of traffic; matching of network adapters
to interface tables; temperature and load readings from a hardware sensor
tree; and a few text, path and network helpers.

Install with `pip install .` (add `.[test]` for pytest).

## Formatting values

`trafficmon.units` turns raw numbers into display strings:

```python
from trafficmon.units import PublicSettings, SpeedUnit, format_speed, format_kbytes

cfg = PublicSettings(speed_unit=SpeedUnit.AUTO, speed_short_mode=True)
print(format_speed(123456, cfg))   # bytes per second, e.g. "121K"
print(format_kbytes(2048))         # "2.00 MB"
```

`PublicSettings` holds the display options: `unit_byte` (bytes or bits),
`speed_unit` (`SpeedUnit.AUTO`, `KBPS` or `MBPS`), `speed_short_mode`,
`hide_unit`, `separate_value_unit_with_space` and `hide_percent`.
`format_data_size(size)` renders a byte count in KB, MB, GB or TB;
`format_temperature(temperature, cfg)` shows `--` for values at or below zero
and appends `℃`; `format_usage(usage, cfg)` shows `--` for negative values and
appends `%` unless `hide_percent` is set.

## CPU usage

```python
from trafficmon.cpuusage import CpuUsageMeter

meter = CpuUsageMeter()
meter.usage()          # measured against the previous reading
print(meter.usage())   # percentage of busy time since the call before
```

By default the meter reads cumulative CPU times through psutil and reports the
busy share of the time elapsed since the previous call; the very first call
compares against zero counters. With `use_system_times=False` it reads
psutil's percentage sampler instead, returns 0 on the first call after
switching and caps the result at 100. Both sources can be replaced by passing
`times_source` or `percent_source`. `usage_between(previous, current)`
computes the percentage from two `CpuTimes` readings.

## Traffic history

`trafficmon.history.HistoryTrafficFile(path)` holds a list of `HistoryTraffic`
records (kilobytes per day), newest first:

- `load()` reads the file (at most `MAX_RECORDS` lines), skipping malformed
  lines and days without traffic, then sorts the records, merges days that
  appear twice and inserts today if missing. Today's traffic is kept in
  `today_up_traffic` and `today_down_traffic` (in bytes).
- `save()` writes a `lines: "N"` header and one `YYYY/MM/DD up/down` line per
  day (`YYYY/MM/DD total` for records marked `mixed`).
- `load_size()` reads only the count from the header into `size`.
- `merge(other, ignore_same_data)` adds another history's records, skipping
  days already present when `ignore_same_data` is true, otherwise adding their
  traffic together.

## Month grids

`trafficmon.monthgrid.month_grid(year, month, sunday_first)` lays out a month
as six rows of seven `DayTraffic` cells (`day` is 0 outside the month).
`history.fill_month_traffic(grid, traffics, year, month)` copies the history's
traffic into the cells, and `month_total_traffic(grid)` returns the upload and
download totals. `is_leap_year`, `weekday` (0 is Sunday), `days_in_month`,
`is_weekend`, `weekday_index` and `step_month` (moves months forward or back
within a year range) support browsing month by month.

## Adapters

`trafficmon.adapters` works on a table of `InterfaceEntry` rows (description
and byte counters) that the caller supplies. `find_connection` looks for an
exact description; `find_connection_fuzzy` accepts a description that contains
or is contained in the other, and otherwise picks the most similar one by edit
distance. `fill_if_table_info` stores the table index, counters and table
description on each `NetworkConnection`; `all_if_table_info` builds one
connection per table row with addresses from matching adapters; and
`refresh_ip_address` copies fresh addresses onto connections with the same
description.

## Hardware sensors

`trafficmon.hardware` walks a tree of `Hardware` components holding `Sensor`
readings. `hardware_temperature` averages a component's temperature sensors,
or returns those of its first sub-component that has any; `gpu_core_usage`
returns the `GPU Core` load sensor. `HardwareMonitor(hardware).refresh()`
calls each component's `update()` (which runs its `updater` callback and those
of its sub-components) and then exposes `cpu_temperature`, `gpu_temperature`,
`hdd_temperature`, `mainboard_temperature` and `gpu_usage`, each -1 when it
could not be read.

## Other helpers

- `trafficmon.textutil`: `string_split`, `string_normalize`,
  `string_transform`, a `<%1%>`-style `string_format`, `int_to_string` with
  thousands separators, `similarity_degree`, `json_value_simple`,
  `normalize_font_name`, bit helpers and colour helpers.
- `trafficmon.filepath.FilePath`: file name, extension, folder, directory and
  parent directory of a path written with `\` or `/`, and `replace_extension`.
- `trafficmon.netinfo`: `fetch_url` (raises `FetchError` on failure),
  `parse_ip_page` for IP lookup pages, `internet_ip` which queries
  `IPV4_LOOKUP_URL` or `IPV6_LOOKUP_URL` and returns empty strings on failure,
  and `write_log` which appends time-stamped lines to a file. The lookup URLs
  are placeholders at example.com and must be pointed at a real service.

## What this package does not do

It has no command, window, taskbar display or settings screen. It does not
read network interface tables or adapter addresses from the operating system
itself, and it does not discover hardware sensors: the interface tables and
the sensor tree, with their update callbacks, are supplied by the caller.