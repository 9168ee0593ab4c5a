# tzcli

A small command-line world clock. Keep a list of time zones and see the
current time in each of them, relative to your own.

## Installation

```
pip install .
```

Time zone data comes from the standard library's `zoneinfo`. On systems
that have no system time zone database, such as Windows, also install the
`tzdata` package.

## Usage

Show the current time in every configured zone:

```
tz
```

The output starts with a line for your local time. Below it comes one line
for each configured zone, sorted by hour and minute. Each line shows the
zone's whole-hour offset from local time, for example `(+5h)` or `(-3h)`,
or `(same)` when the offset matches yours. Configured names that cannot be
loaded as time zones are reported as `Invalid timezone` above the overview.
The names `Local` and `UTC` are also understood when they appear in the
configuration.

Keep the display running, clearing the screen and refreshing it every
second until you press Ctrl-C:

```
tz --live
```

Add a time zone. Any fragment that picks out exactly one zone from the
built-in list of known zones works. Case, spaces, underscores and slashes
are ignored.

```
tz add tokyo
tz add new york
```

If a fragment matches no zone, or several, the command says so and lists the
matches so you can be more specific. Adding a zone that is already
configured is refused.

Remove a time zone, with the same matching rules:

```
tz remove new york
```

List the configured zones:

```
tz list
```

Delete the whole configuration:

```
tz reset
```

Print the version:

```
tz --version
```

## Configuration

The zones are stored as JSON, in the form `{"zones": [...]}`, in
`tz/config.json` under your user configuration directory:

- Linux and other Unix systems: `$XDG_CONFIG_HOME`, or `~/.config` when it
  is not set
- macOS: `~/Library/Application Support`
- Windows: `%AppData%`

A missing or unreadable file counts as an empty list.

## Library use

The building blocks can also be imported.

From `tzcli.zones`:

- `find_matching_zone(query)` resolves a fragment to a zone name. It raises
  `ZoneMatchError` (with `query` and `matches` attributes) when no zone or
  more than one zone matches.
- `normalize(text)` applies the matching rules to a string.
- `zone_times(zones, now=None)` returns a sorted list of `ZoneTime` records
  (`name`, `time`, `offset_text`, `emoji`) for the zones that can be loaded.
- `format_zones(zones, now=None)` renders the overview as text;
  `print_zones(zones)` writes it to standard output for the current time.
- `TIME_ZONES` is the tuple of known zone names.

From `tzcli.config`:

- `config_file_path()` returns the path of the configuration file.
- `load_zones()` returns the stored list, or an empty list.
- `add_zone(zone)` and `remove_zone(zone)` change the stored list. They raise
  `ConfigError` when the zone is already present or not present, or when the
  configuration directory cannot be determined.
- `reset()` deletes the configuration file and raises `OSError` (such as
  `FileNotFoundError`) if it cannot.