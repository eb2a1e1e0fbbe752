# bloodsugar

A small console tool that works out average blood sugar levels from a log of
daily readings kept in a CSV file.

## Installing

    pip install .

To run the tests as well:

    pip install .[test]
    pytest

## The data file

The file starts with a header line, followed by one reading per line. The lines
end in carriage returns (`\r`). Each line holds a date written as
`month/day/year` and a whole-number reading, separated by a comma:

    Date,BSL
    5/2/20,112
    5/3/20,98
    5/4/20,105

The header is always skipped and blank lines are ignored. A line without a
comma-separated reading, or with a date or reading that is not a number, stops
the reading with a `ValueError`.

## Running

    bloodsugar

The same session can be started with `python -m bloodsugar.cli`.

The program first asks for the file name, which must be a single word ending in
`.csv`. It then asks what to average:

- `r`: the average over a range of dates. It asks for a start date and an end
  date, each written as `month/day/year`, and each must be a date that appears
  in the file. The range covers the readings from the first one on the start
  date to the first one on the end date.
- `n`: the average over the last number of days. The number must be at least 1
  and no more than the number of readings.

Averages are whole numbers, with any fraction dropped. When one average is
done, answer `y` to work out another one, or `n` to stop. Input that is not
valid is asked for again.

The command exits with status 1 when input ends early, when it is interrupted,
or when the end date comes before the start date (the error is printed to
standard error).

## Using it from Python

```python
from bloodsugar.reader import read_file
from bloodsugar.averages import range_average, last_days_average

entries = read_file("readings.csv")
print(last_days_average(entries, 7))                  # whole-number average
print(range_average(entries, "5/2/20", "5/4/20"))     # (average, number of readings)
```

- `bloodsugar.date.Date` holds a month, day and year. `Date.parse("5/2/20")`
  reads one, and `str()` gives it back in the same form.
- `bloodsugar.entry.Entry` pairs a `date` with a whole-number `value`;
  `Entry.from_text("5/2/20", 112)` builds one from text.
- `bloodsugar.reader.read_entries` reads entries from an open text stream, and
  `read_file` from a path.
- `bloodsugar.averages.get_index_for_date` finds the position of the first
  entry on a date. It, `range_average` and `last_days_average` raise
  `ValueError` for dates or day counts that do not fit the entries.
- `bloodsugar.validation` holds the prompting helpers. Each takes an `ask`
  function (by default `input`) and, where it prints messages, a `say`
  function (by default `print`), so a session can be driven without a
  terminal. `bloodsugar.cli.run(ask, say)` runs the whole session that way.

## What it does not do

The file name is taken as typed and is not checked for existence before it is
opened. If the file cannot be opened, the program asks for a file name once
more and then exits without working out any average. Readings are only read;
the program never adds to or changes the data file, and it keeps no history
of the averages it has shown.