import json

from invaders.highscores import HighScoreTable


def write(path, content):
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)


def test_missing_file_loads_empty(tmp_path):
    table = HighScoreTable(str(tmp_path / "none.json")).load()
    assert len(table) == 0


def test_malformed_file_loads_empty(tmp_path):
    path = tmp_path / "scores.json"
    for content in ["not json", '{"name": "a"}', '[{"name": "a", "score": "10"}]', "[1, 2]"]:
        write(path, content)
        assert len(HighScoreTable(str(path)).load()) == 0


def test_loaded_table_is_sorted_and_trimmed(tmp_path):
    path = tmp_path / "scores.json"
    entries = [{"name": f"p{i}", "score": i} for i in range(12)]
    write(path, json.dumps(entries))

    table = HighScoreTable(str(path)).load()

    scores = [e["score"] for e in table]
    assert scores == list(range(11, 1, -1))


def test_record_keeps_top_ten_descending():
    table = HighScoreTable()
    for score in [50, 10, 90, 30, 70, 20, 80, 40, 60, 100]:
        assert table.record("p", score)

    assert not table.record("late", 5)
    assert table.record("late", 55)

    scores = [e["score"] for e in table]
    assert len(scores) == 10
    assert scores == sorted(scores, reverse=True)
    assert 55 in scores and 10 not in scores


def test_tie_with_the_lowest_entry_does_not_qualify():
    table = HighScoreTable()
    for score in range(10, 110, 10):
        table.record("old", score)
    assert not table.record("new", 10)
    assert [e["name"] for e in table if e["score"] == 10] == ["old"]


def test_equal_scores_keep_insertion_order():
    table = HighScoreTable()
    table.record("first", 30)
    table.record("second", 30)
    assert [e["name"] for e in table] == ["first", "second"]


def test_save_and_reload(tmp_path):
    path = str(tmp_path / "scores.json")
    table = HighScoreTable(path)
    table.record("ace", 300)
    table.record("bob", 150)
    table.save()

    assert HighScoreTable(path).load().entries == [
        {"name": "ace", "score": 300},
        {"name": "bob", "score": 150},
    ]


def test_save_failure_is_not_raised(tmp_path):
    # a directory cannot be opened for writing
    table = HighScoreTable(str(tmp_path))
    table.record("ace", 300)
    table.save()
