# alumgame

A game of matches for the terminal.

The board is a stack of rows, and each row holds from 1 to 10000 matches. On
each turn a player takes 1, 2 or 3 matches from the last row. When a row is
emptied, it is removed. The player who takes the last match loses.

You can play against the computer, or against another person at the same
keyboard.

## Installing

```
pip install .
```

## Playing

To type the rows yourself, run:

```
alumgame
```

Enter one number per line. Each number is the count of matches in that row.
Enter an empty line when you are done.

To load the board from a file instead, run:

```
alumgame board.txt
```

The file holds one number per line and is read to its end.

Next, choose your opponent. Type `1` to play the computer or `2` to play
another person. Any other answer prints `Wrong, try again!` and the question
comes back.

On each turn, type how many matches to take. The game then shows the board,
centred on its widest row.

- **Against the computer:** if the number is out of range, the game asks
  again.
- **Against another person:** if the number is out of range, the turn passes
  to the other player.

The game ends without a winner if input runs out.

When the board is not valid, the game prints an error message and exits with
status 255. This happens in any of these cases:

- a line is not a plain number
- a count is below 1 or above 10000
- the board has no rows
- the file cannot be opened

If you give more than one argument, the game prints the usage line
`alum1 [FILE]` and exits with status 1.

## Using the package

The game:

- `alumgame.board.Board` holds the rows. Its methods are:
  - `append(count)` adds a row.
  - `take(count)` takes matches from the last row.
  - `last_row()` gives the count on the last row.
  - `widest()` gives the width of the widest row.
  - `is_empty()` tells whether any matches are left.
  - `render()` draws the rows with `|`, each row centred.
- `alumgame.rules` handles reading a board:
  - `parse_row` checks one input line.
  - `read_rows` builds the list of rows.
  - Both raise `BoardError` on bad input.
- `alumgame.ai` decides the computer's moves:
  - `bot_take(board)` gives how many matches the computer takes.
  - `endgame_take(matches)` gives its choice when only one row is left.
- `alumgame.game` runs a game:
  - `play_against_ai` and `play_against_person` read moves from any iterable
    of lines, write to any text stream, and return the winner.
  - `choose_opponent` and `choice_prompt` provide the questions the game
    asks.
  - `main(argv=None)` is the `alumgame` command.

Formatted output:

- `alumgame.printf.format_string(fmt, *args)` expands a printf-style format.
  It returns a `Rendered` value that holds the bytes and the character count.
- `alumgame.printf.printf(fmt, *args, out=None)` writes the result to a
  stream.
- Supported conversions are `d i D u U o O x X p c C s S %`. Each accepts the
  flags `- + space # 0`, a width, a precision (`*` is accepted for both) and
  the length modifiers `l hh h j z`.

Helpers:

- `alumgame.chars`: ASCII character tests and case conversion.
- `alumgame.numbers`: `atoi`, `atoi_base`, `itoa_base`, `rgb_to_int`,
  `rgb_smooth` and `format_bits`.
- `alumgame.strings`: comparisons in C style. Searches return an index, or
  `None` when nothing is found. There are also functions for splitting,
  trimming and joining.
- `alumgame.output`: writes UTF-8 encoded characters, strings and numbers to
  a stream.
- `alumgame.linereader.LineReader`: reads a text or binary stream one line at
  a time.

## Running the tests

```
pip install .[test]
pytest
```