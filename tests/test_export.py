from footyhub.client.export import STANDINGS_COLUMNS, standings_to_csv, standings_to_frame
from footyhub.data.schemas import parse_standings


def test_standings_to_frame_keeps_table_order(standings_payload):
    df = standings_to_frame(parse_standings(standings_payload))

    assert list(df.columns) == STANDINGS_COLUMNS
    assert df["team"].tolist() == ["Liverpool", "Arsenal", "Tottenham Hotspur FC"]
    assert df["points"].tolist() == [60, 50, 40]


def test_empty_standings_give_empty_frame():
    df = standings_to_frame(parse_standings({"standings": []}))
    assert df.empty
    assert list(df.columns) == STANDINGS_COLUMNS


def test_standings_to_csv_has_header(standings_payload):
    csv_text = standings_to_csv(parse_standings(standings_payload))
    assert csv_text.splitlines()[0] == ",".join(STANDINGS_COLUMNS)
    assert csv_text.splitlines()[1].startswith("1,Liverpool,30,19,3,8,20,60,")
