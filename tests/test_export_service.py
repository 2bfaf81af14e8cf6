from services.export_service import (
    format_cell,
    player_summary_csv,
    standings_csv,
    standings_filename,
    summary_filename,
    to_csv,
)
from services.player_summary import build_player_summary
from services.standings_calculator import compute_standings
from tests.builders import pairing, player, result


def _roster():
    players = [player("a", "Alice", 1800), player("b", "Bob", 1600)]
    pairings = [
        pairing("p1", "a", "b", round_number=1, table_number=3, first_move="a"),
        pairing("p2", "b", "a", round_number=2, table_number=1, first_move="b"),
    ]
    results = [result("p1", 400, 350), result("p2", 375, 375)]
    return players, pairings, results


def test_every_field_quoted_and_rows_newline_joined():
    assert to_csv([["a", 1], ["b", 2.5]]) == '"a","1"\n"b","2.5"'


def test_embedded_quotes_are_not_escaped():
    assert to_csv([['say "hi"']]) == '"say "hi""'


def test_whole_floats_lose_trailing_zero():
    assert format_cell(1.0) == "1"
    assert format_cell(-50.0) == "-50"
    assert format_cell(0.5) == "0.5"
    assert format_cell("x") == "x"


def test_standings_csv():
    standings = compute_standings(*_roster())

    lines = standings_csv(standings).split("\n")

    assert lines == [
        '"Rank","Name","Rating","W-L-D","Points","Spread","Games"',
        '"1","Alice","1800","1-0-1","1.5","50","2"',
        '"2","Bob","1600","0-1-1","0.5","-50","2"',
    ]


def test_standings_csv_empty_has_header_only():
    assert standings_csv([]) == '"Rank","Name","Rating","W-L-D","Points","Spread","Games"'


def test_player_summary_csv():
    players, pairings, results = _roster()
    summary = build_player_summary(players[0], players, pairings, results)

    lines = player_summary_csv(summary).split("\n")

    assert lines == [
        '"Player Summary: Alice"',
        '"Rating: 1800"',
        '"Record: 1-0-1"',
        '"Total Spread: 50"',
        '"Win Percentage: 50.0%"',
        "",
        '"Round","Table","Opponent","Opp Rating","Player Score","Opp Score","Result","Spread","First Move"',
        '"1","3","Bob","1600","400","350","WON","50","Yes"',
        '"2","1","Bob","1600","375","375","DREW","0","No"',
    ]


def test_filenames():
    assert standings_filename("Spring Open") == "Spring Open_Standings.csv"
    assert standings_filename("") == "Tournament_Standings.csv"
    assert standings_filename(None) == "Tournament_Standings.csv"
    assert summary_filename("Alice") == "Alice_Summary.csv"
