# evdash

A small simulation of an electric-vehicle dashboard. It models the vehicle's
speed, drive mode (ECO or SPORT), battery drain, remaining range, air
conditioning temperature and fan level, and keeps them in a plain-text CSV
database that a display loop reads back and prints.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running the dashboard

```
evdash
```

Options:

- `--database PATH`: the database file (default `Data/Database.csv`). Its
  directory must already exist.
- `--duration SECONDS`: stop after this many seconds; without it the program
  runs until you quit.

Three loops run side by side until you stop the program:

- an input loop (`evdash.app.input_loop`) that applies your keys every 100 ms
  through `evdash.app.InputHandler` and writes the result to the database;
- a display loop (`evdash.app.display_loop`) that reloads the database once a
  second, prints the dashboard, and prints
  `Warning: Low Battery. Find a Charging Station!` when the battery level is
  20 % or lower;
- a sync loop that copies the database values back into the dashboard once a
  second.

Keys are read from standard input one line at a time: type one or more of the
letters below and press Enter. Each line counts as keys held down for one
tick. Type `q` or `quit` (or press Ctrl-C) to stop.

- `a` accelerator: +2 km/h per tick, capped at 150 km/h in ECO and 200 km/h in
  SPORT
- `b` brake: −2 km/h per tick
- neither `a` nor `b`: the car coasts and loses 1 km/h per tick
- `m`: switch between ECO and SPORT
- `k` / `j`: A/C temperature up / down, kept between 16 and 30 °C
- `l` / `h`: fan level up / down, kept between 1 and 5

Each tick also drains the battery according to speed, A/C temperature and fan
level; when the battery reaches 0 % the speed is reported as 0.

## The database

One `KEY, value` pair on each line:

```
DRIVE MODE, ECO
SPEED, 0
BATTERY LEVEL, 100
AC TEMPERATURE, 25
WIND LEVEL, 0
REMAINING RANGE, 450
```

- `evdash.app.format_database(dashboard)` builds this text.
- `evdash.app.save_to_csv(dashboard, path)` writes it, replacing the file
  whole.
- `evdash.dashboard.read_database(path)` reads it back into a `dict` of
  strings.
- `DashboardController.update_data(path)` loads the values into a dashboard
  and notifies its observers.
- `evdash.app.sync_from_database(dashboard, path)` loads them through the
  dashboard's validating properties; note that it applies the `WIND LEVEL`
  entry to the A/C temperature.

A missing file raises `OSError`, and a numeric field that is not a number
raises `ValueError`.

## Using the pieces directly

```python
from evdash.battery import BatteryManager
from evdash.drive_mode import DriveMode, DriveModeManager
from evdash.speed import SpeedCalculator

speed = SpeedCalculator()
speed.calculate_speed(True, False)           # accelerate one tick
speed.adjust_speed_for_drive_mode(DriveMode.ECO)

battery = BatteryManager()
battery.update_battery_level(80, 22, 2)      # drain for one 100 ms tick
print(battery.calculate_remaining_range())

modes = DriveModeManager()
modes.toggle()                               # ECO -> SPORT
print(modes.power_output)                    # 300
```

`evdash.dashboard.DashboardController` holds the shared state. Its
`battery_level`, `ac_temp` and `wind_level` properties ignore values outside
0–100, 16–30 and 0–5. It notifies registered `evdash.dashboard.Observer`
objects, such as `evdash.display.DisplayManager`, through `notify_observers`.
`evdash.safety.SafetyManager` tracks a brake state and whether both pedals are
pressed together.

## What it does not do

The program does not watch the keyboard directly: keys only take effect once
a line is entered on standard input. There is no graphical display; the
dashboard is printed as text.