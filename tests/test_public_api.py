from peewee import OperationalError

from db.base import db


def test_ping(client):
    response = client.get("/ping")
    assert response.status_code == 200
    assert response.json() == {"message": "Pong!"}


def test_tournament_by_slug_and_id(client, spring_open):
    tournament = spring_open["tournament"]

    by_slug = client.get("/v1/tournaments/spring-open").json()
    by_id = client.get(f"/v1/tournaments/{tournament.id}").json()

    assert by_slug["status"] == "success"
    assert by_slug["data"]["name"] == "Spring Open"
    assert by_slug["data"]["max_rounds"] == 3
    assert by_id["data"] == by_slug["data"]


def test_slug_lookup_is_normalised(client, spring_open):
    body = client.get("/v1/tournaments/Spring-Open").json()
    assert body["status"] == "success"


def test_unknown_tournament(client, database, unknown_ref):
    assert client.get(f"/v1/tournaments/{unknown_ref}").json()["status"] == "not_found"
    assert client.get("/v1/tournaments/no-such-event").json()["status"] == "not_found"
    assert client.get("/v1/tournaments/!!!").json()["status"] == "not_found"
    assert client.get(f"/v1/tournaments/{unknown_ref}/standings").json()["status"] == "not_found"


def test_divisions_fall_back_to_main_division(client, spring_open):
    body = client.get("/v1/tournaments/spring-open/divisions").json()

    assert body["status"] == "success"
    assert body["data"] == [{"id": "default", "name": "Main Division", "division_number": 1}]


def test_divisions_in_number_order(client, divisions):
    body = client.get("/v1/tournaments/spring-open/divisions").json()
    assert [d["name"] for d in body["data"]] == ["Open", "Lite"]


def test_players_by_rating(client, spring_open):
    body = client.get("/v1/tournaments/spring-open/players").json()
    assert [p["name"] for p in body["data"]] == ["Alice", "Bob", "Carol", "Dave"]


def test_pairings_grouped_by_round(client, spring_open):
    body = client.get("/v1/tournaments/spring-open/pairings").json()
    rounds = body["data"]["rounds"]

    assert sorted(rounds) == ["1", "2", "3"]
    assert [p["table_number"] for p in rounds["1"]] == [1, 2]

    r1t1 = rounds["1"][0]
    assert r1t1["player1"]["name"] == "Alice"
    assert r1t1["player2"]["name"] == "Dave"
    assert r1t1["first_move_player_id"] == str(spring_open["alice"].id)
    assert r1t1["result"]["player1_score"] == 400
    assert r1t1["result"]["winner_id"] == str(spring_open["alice"].id)

    assert rounds["1"][1]["result"]["winner_id"] is None
    assert rounds["3"][0]["result"] is None


def test_standings(client, spring_open):
    body = client.get("/v1/tournaments/spring-open/standings").json()

    assert body["status"] == "success"
    rows = body["data"]["players"]
    assert [(r["rank"], r["player_name"]) for r in rows] == [
        (1, "Carol"),
        (2, "Bob"),
        (3, "Alice"),
        (4, "Dave"),
    ]

    carol, bob, alice, dave = rows
    assert (carol["wins"], carol["losses"], carol["draws"]) == (1, 0, 1)
    assert carol["points"] == 1.5
    assert carol["spread"] == 150
    assert carol["last_game"] == {
        "result": "won",
        "player_score": 450,
        "opponent_score": 300,
        "opponent_name": "Dave",
        "opponent_rank": 4,
    }
    assert bob["spread"] == 120
    assert alice["points"] == 1
    assert alice["spread"] == -70
    assert alice["starts"] == 2
    assert dave["games_played"] == 2
    assert dave["spread"] == -200


def test_standings_export(client, spring_open):
    response = client.get("/v1/tournaments/spring-open/standings/export")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert 'filename="Spring Open_Standings.csv"' in response.headers["content-disposition"]

    lines = response.text.split("\n")
    assert lines[0] == '"Rank","Name","Rating","W-L-D","Points","Spread","Games"'
    assert lines[1] == '"1","Carol","1500","1-0-1","1.5","150","2"'
    assert len(lines) == 5


def test_standings_export_unknown_tournament(client, database, unknown_ref):
    response = client.get(f"/v1/tournaments/{unknown_ref}/standings/export")
    assert response.status_code == 404


def test_player_summary(client, spring_open):
    alice_id = spring_open["alice"].id

    body = client.get(f"/v1/tournaments/spring-open/players/{alice_id}/summary").json()

    assert body["status"] == "success"
    summary = body["data"]
    assert summary["name"] == "Alice"
    assert summary["total_games"] == 2
    assert summary["current_rank"] == 3
    assert summary["total_spread"] == -70
    assert summary["first_move_games"] == 1
    assert [g["opponent_name"] for g in summary["games"]] == ["Dave", "Bob"]
    assert [g["result"] for g in summary["games"]] == ["won", "lost"]


def test_player_summary_rank_agrees_with_standings(client, spring_open):
    rows = client.get("/v1/tournaments/spring-open/standings").json()["data"]["players"]

    for row in rows:
        summary = client.get(f"/v1/tournaments/spring-open/players/{row['id']}/summary").json()["data"]
        assert summary["current_rank"] == row["rank"]


def test_player_summary_unknown_player(client, spring_open, unknown_ref):
    body = client.get(f"/v1/tournaments/spring-open/players/{unknown_ref}/summary").json()
    assert body["status"] == "not_found"

    response = client.get(f"/v1/tournaments/spring-open/players/{unknown_ref}/summary/export")
    assert response.status_code == 404


def test_player_summary_export(client, spring_open):
    alice_id = spring_open["alice"].id

    response = client.get(f"/v1/tournaments/spring-open/players/{alice_id}/summary/export")

    assert response.status_code == 200
    assert 'filename="Alice_Summary.csv"' in response.headers["content-disposition"]
    lines = response.text.split("\n")
    assert lines[0] == '"Player Summary: Alice"'
    assert lines[2] == '"Record: 1-1-0"'
    assert lines[-1] == '"2","1","Bob","1600","300","420","LOST","-120","No"'


def test_statistics(client, spring_open):
    body = client.get("/v1/tournaments/spring-open/statistics").json()

    assert body["status"] == "success"
    stats = body["data"]
    assert len(stats["top_combined_scores"]) == 4
    assert stats["largest_spreads"][0]["winner_name"] == "Carol"
    assert stats["largest_spreads"][0]["spread"] == 150
    # the drawn game counts for combined scores only
    assert len(stats["largest_spreads"]) == 3
    assert stats["highest_scoring_games"][0]["highest_scorer"] == "Carol"
    assert stats["fewest_defeats"] == []


def test_correlation_id_is_echoed(client, spring_open):
    response = client.get("/v1/tournaments/spring-open", headers={"X-Correlation-ID": "req-42"})
    assert response.headers["X-Correlation-ID"] == "req-42"

    generated = client.get("/v1/tournaments/spring-open").headers["X-Correlation-ID"]
    assert generated


def test_player_summary_accepts_any_uuid_spelling(client, spring_open):
    alice_id = spring_open["alice"].id

    for spelling in (str(alice_id).upper(), alice_id.hex):
        body = client.get(f"/v1/tournaments/spring-open/players/{spelling}/summary").json()
        assert body["status"] == "success"
        assert body["data"]["name"] == "Alice"


def test_unreachable_database_returns_error_envelope(client, spring_open, monkeypatch):
    def refuse_connection(*args, **kwargs):
        raise OperationalError("unable to open database file")

    monkeypatch.setattr(db, "connect", refuse_connection)

    response = client.get("/v1/tournaments/spring-open/standings")

    assert response.status_code == 503
    assert response.json() == {
        "status": "error",
        "message": "Failed to load tournament data",
        "data": None,
    }
    assert client.get("/ping").status_code == 200
