# repertoire

A small terminal tool for studying chess opening repertoires.

An opening study is a JSON file with the `.opening` extension. It holds the
opening's name, author, description, a modification timestamp (a non-negative
integer), and a map from move sequences to notes. A sequence is written as
moves joined by dashes, for example `e4-c6-d4-d5-e5`:

```json
{
  "author": "A. Student",
  "date_modified": 1700000000,
  "name": "Caro Kann",
  "description": "Main lines of the Caro-Kann Defence",
  "moves": {
    "e4": {"note": "King's pawn opening."},
    "e4-c6": {"note": "The Caro-Kann."},
    "e4-c6-d4": {"note": "Taking the centre."},
    "e4-c6-d4-d5": {"note": "Challenging e4 at once."}
  }
}
```

## Installing

```
pip install .
```

## Studying a file

```
repertoire --study caro-kann.opening
```

This opens an interactive session with these commands:

- `list` – list every recorded move sequence
- `show <sequence>` – print the note for a sequence, e.g. `show e4-c6`
- `play` – start a practice game; you choose `white` or `black`
- `quit` – leave the session (end of input does the same)

During a practice game:

- `move <move>` – play a move, e.g. `move e4`. If the sequence so far is in
  the repertoire its note is shown and the computer answers with a random
  recorded reply; otherwise the deviation is reported together with an
  analysis link for the position before the move, and the move is not kept.
- `explore` – print an analysis URL on lichess.org for the current position
- `stop` – end the practice game and return to the study session

When you play black, the computer opens with a random recorded first move.

Exactly one of `--study FILENAME` (`-s`) or `--new` (`-n`) must be given,
otherwise the command exits with status 1. Files without the `.opening`
extension, unreadable files, malformed JSON and studies with missing or
mistyped fields are rejected with an error message and exit status 1.
`repertoire --version` prints the version.

## What it does not do

- `--new` only prints a message announcing a new session; there is no way to
  create or edit a study from the command line, and nothing is ever written
  back to disk.
- Moves are compared as plain text against the recorded sequences. There is
  no board, and moves are not checked for legality.

## Using it from Python

```python
from repertoire.explore import MoveSequence

seq = MoveSequence()
for move in ["e4", "c6", "d4"]:
    seq.add_move(move)

seq.to_key()          # 'e4-c6-d4'
seq.to_pgn()          # '1. e4 c6 2. d4'
seq.to_lichess_url()  # analysis link for the position
```

`repertoire.opening.Opening` loads a study with `from_file`, or builds one with
`from_dict` or `create`; `to_dict` gives a JSON-ready dictionary. Loading
problems raise subclasses of `OpeningError`: `InvalidExtensionError`,
`FileReadError` and `ParseError`. `Opening.study_loop` and
`repertoire.play.PlaySession` accept their own input and output streams and a
`random.Random`, so sessions can be driven from code. `PlaySession.next_moves`
lists the recorded replies to the current sequence, and
`PlaySession.handle_player_move` raises `Deviation` for an unrecorded move.
Colours come from `repertoire.theme.Theme`.

## Running the tests

```
pip install .[test]
pytest
```