"""Unit tests — fan-out pipeline."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from usysconf.triggers.fanout import enumerate_matches, expand_all, fan_out, find_wildcard
from usysconf.triggers.models import Bin, ExpandedBin, Replace, TriggerConfig


@pytest.fixture
def icon_themes(tmp_path: Path) -> Path:
    for theme in ("hicolor", "Adwaita", "breeze"):
        (tmp_path / theme).mkdir()
    return tmp_path


@pytest.mark.unit
class TestFindWildcard:
    def test_no_token(self) -> None:
        assert find_wildcard(Bin(task="t", cmd=["/bin/echo", "a"])) is None

    def test_token_in_binary_position_is_ignored(self) -> None:
        assert find_wildcard(Bin(task="t", cmd=["/opt/***"])) is None

    def test_pattern_derived_from_argument(self) -> None:
        wc = find_wildcard(Bin(task="t", cmd=["/bin/x", "-f", "/usr/share/icons/***"]))
        assert wc is not None
        assert wc.index == 2
        assert wc.patterns == ("/usr/share/icons/*",)
        assert wc.whole_argument is True

    def test_patterns_from_replace_table(self) -> None:
        b = Bin(
            task="t",
            cmd=["/bin/x", "--dir=***"],
            replace=Replace(paths=["/a/*", "/b/*"], exclude=["/a/skip"]),
        )
        wc = find_wildcard(b)
        assert wc is not None
        assert wc.patterns == ("/a/*", "/b/*")
        assert wc.exclude == ("/a/skip",)
        assert wc.whole_argument is False


@pytest.mark.unit
class TestFanOut:
    def test_no_token_returns_template_unchanged(self) -> None:
        b = Bin(task="Update cache", cmd=["/usr/bin/ldconfig", "-X"])
        assert fan_out(b) == [ExpandedBin(task="Update cache", argv=("/usr/bin/ldconfig", "-X"))]

    def test_matches_replace_token_in_sorted_order(self) -> None:
        b = Bin(task="t", cmd=["/bin/x", "***"], replace=Replace(paths=["/ignored/*"]))
        with patch("usysconf.triggers.paths.expand", return_value=["/b", "/a"]):
            expanded = fan_out(b)
        assert [e.argv for e in expanded] == [("/bin/x", "/a"), ("/bin/x", "/b")]
        assert [e.sub_task for e in expanded] == ["/a", "/b"]

    def test_no_matches_returns_empty(self, tmp_path: Path) -> None:
        b = Bin(task="t", cmd=["/bin/x", str(tmp_path / "***")])
        assert fan_out(b) == []

    def test_argument_pattern_on_real_directories(self, icon_themes: Path) -> None:
        b = Bin(task="Icon cache", cmd=["/usr/bin/gtk-update-icon-cache", "-q", str(icon_themes / "***")])

        expanded = fan_out(b)

        assert [e.argv[2] for e in expanded] == [
            str(icon_themes / "Adwaita"),
            str(icon_themes / "breeze"),
            str(icon_themes / "hicolor"),
        ]
        assert all(e.argv[:2] == ("/usr/bin/gtk-update-icon-cache", "-q") for e in expanded)

    def test_token_substring_replaced_with_replace_table(self, icon_themes: Path) -> None:
        b = Bin(
            task="t",
            cmd=["/bin/x", "--theme=***"],
            replace=Replace(paths=[str(icon_themes / "*")], exclude=[str(icon_themes / "breeze")]),
        )

        expanded = fan_out(b)

        assert [e.argv[1] for e in expanded] == [
            f"--theme={icon_themes / 'Adwaita'}",
            f"--theme={icon_themes / 'hicolor'}",
        ]

    def test_duplicate_matches_collapsed(self, icon_themes: Path) -> None:
        pattern = str(icon_themes / "h*")
        b = Bin(task="t", cmd=["/bin/x", "***"], replace=Replace(paths=[pattern, pattern]))
        assert len(fan_out(b)) == 1

    def test_enumerate_matches_sorted(self, icon_themes: Path) -> None:
        wc = find_wildcard(Bin(task="t", cmd=["/bin/x", str(icon_themes / "***")]))
        assert wc is not None
        matches = enumerate_matches(wc)
        assert matches == sorted(matches)


@pytest.mark.unit
class TestExpandAll:
    def test_declaration_then_expansion_order(self, icon_themes: Path) -> None:
        config = TriggerConfig(
            description="d",
            bins=[
                Bin(task="first", cmd=["/bin/a"]),
                Bin(task="fan", cmd=["/bin/b", str(icon_themes / "***")]),
                Bin(task="empty", cmd=["/bin/c", str(icon_themes / "missing-***")]),
                Bin(task="last", cmd=["/bin/d"]),
            ],
        )

        expanded, builder = expand_all(config)

        assert [e.task for e in expanded] == ["first", "fan", "fan", "fan", "last"]
        outputs = builder.build()
        assert len(outputs) == len(expanded)
        assert [o.name for o in outputs] == [e.task for e in expanded]
        assert all(o.status is None for o in outputs)
