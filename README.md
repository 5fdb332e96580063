# deskassistant

A small personal desk assistant for the terminal. It keeps important days and
memos in a local SQLite database, and can show a plain-text dashboard with the
weather, a daily quote, a countdown to the nearest important day and your
newest memos.

- **Important days**: birthdays, anniversaries, deadlines. A day recurs every
  year, and the countdown gives the number of days until its next recurrence
  (0 if that is today). A 29 February counts as 1 March in years without one.
- **Memos**: short notes, each with a title and content.
- **Weather**: current conditions and a four-day forecast, fetched from a
  weather service and formatted as text (in Chinese).
- **Tips**: a quote fetched from a quote service, paired with the name of a
  randomly chosen picture.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
deskassistant [--db FILE] [COMMAND]
```

With no command, the dashboard is shown, as with `show`. `--db` selects the
database file. The default is `data.db` under a per-user directory, see
`deskassistant.database.default_database_path()`:

- `%APPDATA%` on Windows;
- `~/Library/Application Support` on macOS;
- `$XDG_DATA_HOME`, or else `~/.local/share`, on other systems.

In each case the file sits in a `MyOrg/sd-desktop-assistant` directory below
that base. Missing directories are created.

### Dashboard

```
deskassistant show [--offline] [--location CODE] [--key KEY]
```

This prints the weather, the tip, the countdown line and up to three of the
newest memo titles, with a rule between sections. `--offline` skips both
network requests and shows "加载中..." in place of the weather and the tip.
`--location` takes the weather service's location code. The default is
`101180112`. `--key` takes your own key for the weather service. The default
key is only a placeholder, so without your own key the service will refuse the
request. Network failures are shown in the dashboard text and do not abort the
command.

### Important days

```
deskassistant day add TITLE YYYY-MM-DD
deskassistant day list
deskassistant day next
deskassistant day edit TITLE YYYY-MM-DD [--title NEW] [--date NEW]
deskassistant day remove TITLE YYYY-MM-DD [-y]
```

- `add`: the title must not be blank, and the date must be a valid ISO date
  within a hundred years of today.
- `list`: prints `title<TAB>date`, earliest date first.
- `next`: prints the countdown, `距离 <title> 还有 <n> 天`. If no day is stored,
  it prints a prompt instead.
- `edit` and `remove`: pick the day by its exact title and date.
- `remove`: asks for confirmation unless `-y` is given.

### Memos

```
deskassistant memo add TITLE CONTENT
deskassistant memo list
deskassistant memo recent
deskassistant memo show TITLE
deskassistant memo edit TITLE [--title NEW] [--content NEW]
deskassistant memo remove TITLE [-y]
```

- `add`: both the title and the content must not be blank. Both are stored
  with surrounding whitespace removed.
- `list`: prints titles in alphabetical order.
- `recent`: prints the three newest titles.
- `show`, `edit` and `remove`: find a memo by title. If several memos share a
  title, the oldest one is used.

Rejected input, an unknown record or a database failure prints a message on
standard error, and the exit status is 1.

## Library use

```python
from datetime import date

from deskassistant.database import Database
from deskassistant.important_days import ImportantDayManager
from deskassistant.memos import MemoManager
from deskassistant.views import day_tip_text

with Database("assistant.db") as db:
    days = ImportantDayManager(db)
    days.add_day("Mum's birthday", date(1965, 5, 20))
    print(day_tip_text(days.nearest_day(date.today())))

    memos = MemoManager(db)
    memo_id = memos.add_memo("Groceries", "milk, eggs, bread")
    print(memos.list_titles(), memos.content(memo_id))
```

`Database(":memory:")` gives a throw-away database. If the database cannot be
opened or prepared, `DatabaseError` is raised. `add_day`, `update_day`,
`add_memo` and `update_memo` raise `ValueError` for blank titles or content.

### Weather and tips

`WeatherClient` and `TipsClient` take a `fetch` callable. It receives a URL and
returns the response body as bytes, so you can plug in your own HTTP client or
a stub. An `OSError` raised by it becomes the error text of the result. Without
a callable, `urllib` is used.

```python
from deskassistant.weather import WeatherClient
from deskassistant.tips import TipsClient

report = WeatherClient(location="101180112", key="placeholder", fetch=my_fetch).fetch()
print(report.info, report.icon, report.forecast)

tip = TipsClient(fetch=my_fetch).fetch()
print(tip.image, tip.text)
```

The formatting helpers can also be used on their own:

- `format_current`, `format_forecast`, `icon_for` and `weekday_name` in
  `deskassistant.weather`;
- `pick_image` and `decode_quote` in `deskassistant.tips`;
- `render_dashboard`, `weather_panel`, `tips_panel`, `memo_preview` and
  `day_tip_text` in `deskassistant.views`.

## What it does not do

There is no graphical window. The dashboard is plain text. Weather icons and
tip pictures are given only as relative file names, such as
`img/weather/0.png` and `img/tipsimg/7.jpg`. No image files are shipped with
the package, and nothing displays them. Nothing refreshes the dashboard on its
own: each `show` fetches once and exits.