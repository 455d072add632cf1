import pytest

from stepmatch.__main__ import main


class TestMain:
    def test_story(self, definitions_file, story_file, capsys):
        status = main("stepmatch", str(definitions_file), "--story", str(story_file))
        out = capsys.readouterr().out
        assert status == 1
        assert f"{story_file}:7:5: No definition found for the step: I am sad" in out

    def test_story_resolved(self, definitions_file, tmp_path, capsys):
        story = tmp_path / "ok.story"
        story.write_text("Given I have 2 cucumbers\nWhen I eat 2 cucumbers\n", encoding="utf-8")
        assert main("stepmatch", str(definitions_file), "--story", str(story)) == 0
        assert capsys.readouterr().out == ""

    def test_suggestions(self, definitions_file, tmp_path, capsys):
        story = tmp_path / "typo.story"
        story.write_text("When I ate some cucumbers\n", encoding="utf-8")
        assert main("stepmatch", str(definitions_file), "--story", str(story)) == 1
        assert "did you mean: I eat $count cucumbers (steps.py:18)" in capsys.readouterr().out

    def test_complete(self, definitions_file, capsys):
        status = main("stepmatch", str(definitions_file), "--complete", "I have", "--type", "given")
        assert status == 0
        assert capsys.readouterr().out == "I have $count cucumbers\n"

    def test_bad_definitions(self, tmp_path, story_file):
        path = tmp_path / "bad.json"
        path.write_text('[{"type": "but", "template": "x"}]', encoding="utf-8")
        assert main("stepmatch", str(path), "--story", str(story_file)) == 2

    def test_missing_story(self, definitions_file, tmp_path):
        assert main("stepmatch", str(definitions_file), "--story", str(tmp_path / "no.story")) == 2

    def test_bad_later_definition(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(
            '[{"type": "given", "template": "x"}, {"type": 1, "template": "y"}]',
            encoding="utf-8",
        )
        assert main("stepmatch", str(path), "--complete", "x") == 2

    def test_bad_suggestion_count(self, definitions_file, story_file, monkeypatch):
        monkeypatch.setenv("STEPMATCH_SUGGESTIONS", "many")
        assert main("stepmatch", str(definitions_file), "--story", str(story_file)) == 2

    def test_bad_log_level(self, definitions_file, monkeypatch):
        monkeypatch.setenv("STEPMATCH_LOG_LEVEL", "chatty")
        assert main("stepmatch", str(definitions_file), "--complete", "I have") == 2

    def test_type_with_story(self, definitions_file, story_file):
        with pytest.raises(SystemExit) as info:
            main("stepmatch", str(definitions_file), "--story", str(story_file), "--type", "given")
        assert info.value.code == 2
