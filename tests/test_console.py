"""Tests for pomelo.console -- result rendering."""

from __future__ import annotations

from pomelo.bookmarks import Bookmark, BookmarkCollection, Outcome, Result
from pomelo.console import format_entry, format_result, report, report_error


class TestFormatResult:
    def test_added(self):
        result = BookmarkCollection().add("home", "/home/u")
        assert format_result(result) == ["Added bookmark with alias 'home'"]

    def test_removed(self):
        result = Result(Outcome.REMOVED, alias="home")
        assert format_result(result) == ["Removed bookmark with alias 'home'"]

    def test_renamed(self):
        result = Result(Outcome.RENAMED, alias="home", new_alias="h")
        assert format_result(result) == ["Updated alias 'home' to 'h'"]

    def test_not_found(self):
        result = Result(Outcome.NOT_FOUND, alias="zzz")
        assert format_result(result) == ["No bookmark found with alias 'zzz'"]

    def test_empty(self):
        assert format_result(BookmarkCollection().listing()) == ["You have no bookmarks."]

    def test_listed(self):
        collection = BookmarkCollection([Bookmark("a", "/a"), Bookmark("b", "/b")])
        assert format_result(collection.listing()) == [
            "Your bookmarks:",
            "1. Alias: 'a', Path: '/a'",
            "2. Alias: 'b', Path: '/b'",
        ]

    def test_found_is_bare_path(self):
        result = Result(Outcome.FOUND, alias="a", bookmark=Bookmark("a", "/a"))
        assert format_result(result) == ["/a"]

    def test_format_entry(self):
        assert format_entry(1, Bookmark("home", "/home/u")) == "1. Alias: 'home', Path: '/home/u'"


class TestReport:
    def test_markup_is_not_interpreted(self, capsys):
        report(Result(Outcome.ADDED, alias="[bold]x[/bold]"))
        assert capsys.readouterr().out == "Added bookmark with alias '[bold]x[/bold]'\n"

    def test_long_path_not_wrapped(self, capsys):
        path = "/" + "/".join(["segment"] * 40)
        collection = BookmarkCollection([Bookmark("deep", path)])
        report(collection.listing())
        lines = capsys.readouterr().out.splitlines()
        assert lines[1] == f"1. Alias: 'deep', Path: '{path}'"

    def test_error_goes_to_stderr(self, capsys):
        report_error("Failed to parse config file")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error:" in captured.err
        assert "Failed to parse config file" in captured.err
