from urllib.parse import unquote

from repertoire.explore import LICHESS_ANALYSIS_URL, MoveSequence


def _sequence(*moves):
    seq = MoveSequence()
    for move in moves:
        seq.add_move(move)
    return seq


def test_new_sequence_is_empty():
    seq = MoveSequence()
    assert seq.is_empty()
    assert len(seq) == 0
    assert seq.to_pgn() == ""


def test_to_key_joins_with_dashes():
    assert _sequence("e4", "c6", "d4", "d5", "e5").to_key() == "e4-c6-d4-d5-e5"


def test_add_and_remove():
    seq = _sequence("e4", "c6")
    seq.remove_last_move()
    assert seq.to_key() == "e4"
    assert not seq.is_empty()
    seq.remove_last_move()
    assert seq.is_empty()


def test_remove_from_empty_is_noop():
    seq = MoveSequence()
    seq.remove_last_move()
    assert seq.is_empty()


def test_pgn_numbers_move_pairs():
    assert _sequence("e4", "c6", "d4").to_pgn() == "1. e4 c6 2. d4"


def test_pgn_has_no_trailing_space():
    pgn = _sequence("e4", "c6").to_pgn()
    assert pgn == pgn.strip()
    assert pgn.startswith("1. ")


def test_iteration_yields_moves():
    assert list(_sequence("d4", "Nf6")) == ["d4", "Nf6"]


def test_lichess_url_round_trip():
    seq = _sequence("e4", "c6", "d4", "d5")
    url = seq.to_lichess_url()
    assert url.startswith(LICHESS_ANALYSIS_URL)
    encoded = url[len(LICHESS_ANALYSIS_URL):]
    assert " " not in encoded
    assert unquote(encoded) == seq.to_pgn()


def test_lichess_url_encodes_spaces():
    url = _sequence("e4").to_lichess_url()
    assert url == "https://lichess.org/analysis/pgn/1.%20e4"