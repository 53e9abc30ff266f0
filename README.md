# edhighway

Helpers for planning trips in Elite Dangerous. The package is pure Python and has
no runtime dependencies.

## What is in it

- **Route ordering** (`edhighway.route_solver`). A `StarSystem` is a name plus x/y/z
  coordinates. `StarSystem.from_json` reads `name` and `coords` from a JSON object
  and marks the system `blank` when coordinates are missing. `LittleAlgorithm`
  orders systems into a closed tour with Little's branch-and-bound method. It drops
  duplicate names and blank systems first. `get_route(start_at)` returns the names in
  tour order and stores the tour length in `last_route_len`. The function
  `route(systems, start)` returns `(names, length)`. `path_length` measures an open
  path. `matrix_procedure` works directly on a square weight matrix and returns the
  chosen `Bisector` edges.
- **Star names from OCR text** (`edhighway.star_name`). `split_filter` splits OCR
  output into lines. Each line is trimmed, NFD-normalised and upper-cased, and only
  lines longer than three characters are kept. `try_detect_star_from_map_popup`
  picks the system name out of galaxy-map popup lines. It takes the line above
  "DISTANCE: " or "ARRIVAL POINT:". Failing that, it takes the last line shaped like
  a generated system or planet name, with "!" read as "I". It returns an empty string
  if nothing matches.
- **Binary image helpers** (`edhighway.bounding_rect`, `edhighway.furigana`).
  `BinaryImage` is a 1-bit image: build it with `from_rows`, then use `get`, `set`,
  `clear_rect` and `rows`. `find_nearest_black_pixel` searches outward in a spiral.
  `get_bounding_rect` grows a `Box` around the text block nearest a point.
  `erase_furigana_horizontal` and `erase_furigana_vertical` clear narrow text lines in
  place. They return the number of text lines, or `None` if no text span was found.
- **OCR language data** (`edhighway.ocr_languages`). This module maps between
  Tesseract language names and codes (`language_code`, `language_name`,
  `alt_lang_to_lang`). It also finds installed `*.traineddata` files under
  `<folder>/tessdata` (`installed_languages`, `is_lang_installed`,
  `first_installed_language`, `is_lang_code_installed`). `tesseract_language_spec`
  builds the language string, for example `"jpn+jpn_vert"` when the vertical
  dictionary is installed. It raises `ValueError` for an unknown language and
  `FileNotFoundError` for a language that is not installed.
  `default_search_folders` lists the usual folders to search.
- **Settings** (`edhighway.settings_store`, `edhighway.settings`,
  `edhighway.global_settings`).
  - `SettingsStore` keeps values by group and key. It saves them as JSON when it is
    given a path and keeps them in memory otherwise.
  - `Setting` caches one value under `<group>/sub_<n>`. It supports `flush`,
    `reload`, `switch_subgroup`, `set`, `set_default` and change `listeners`. Used as
    a context manager, it flushes on exit.
  - The typed settings are `BoolSetting`, `IntSetting` (range, step and
    `hint_text`), `StringSetting`, `HotkeySetting`, `FileSetting` and `ComboSetting`
    (items from a supplier, `stored_selection`, `user_data`).
  - `SettingsMap` is a read-only mapping sorted by key, with `read_bool`,
    `read_int`, `read_string`, `store_value` and `subscribe`.
  - `make_global_settings` builds the application's settings.
- **Presentation helpers** (`edhighway.json_table`, `edhighway.stylesheets`,
  `edhighway.hotkeys`).
  - `JsonTableModel` is a table model over a JSON array of objects. It has
    `header_data`, `display` and `tooltip`, and `VerticalNums` controls row
    numbering.
  - `StyleSheetsLoader` lists the style-sheet files in a folder and loads them.
    `bigger_font` and `font_size_style` handle font scaling.
  - `HotkeyPicker` is the state machine for capturing a key combination with a
    countdown. `unshift` and `is_modifier` go with it.

## What it does not do

- It does not fetch star system data from the web and has no cache of such data.
  The caller builds `StarSystem` values, for example from JSON it already has.
- It does not capture the screen or run an OCR engine. It works on text and
  `BinaryImage`s that the caller supplies.
- It has no graphical interface and no command-line command. The settings,
  table, style-sheet and hotkey classes hold state and logic only.

## Install

```
pip install .
```

## Example

```python
from edhighway.route_solver import StarSystem, route

systems = [
    StarSystem("Sol", 0.0, 0.0, 0.0),
    StarSystem("Alpha", 10.0, 0.0, 0.0),
    StarSystem("Beta", 10.0, 10.0, 0.0),
    StarSystem("Gamma", 0.0, 10.0, 0.0),
]
names, length = route(systems, "Sol")
print(names, length)
```

## Tests

```
pip install .[test]
pytest
```