from __future__ import annotations

from datetime import timedelta

import pytest

from lrc_lyrics.lrc.model import Lyrics, LyricLine
from lrc_lyrics.lrc.parse import parse_lrc, parse_lrc_with_stats


def _ms(n: int) -> timedelta:
    return timedelta(milliseconds=n)


@pytest.mark.parametrize("content", [None, "", "   ", "\n\r\n\t  \r"])
def test_blank_input_is_absent(content):
    assert parse_lrc(content) is None


def test_metadata_only_is_absent():
    assert parse_lrc("[ti:Song]\n[ar:Artist]\n[al:Album]\n") is None


def test_two_digit_fraction_is_hundredths():
    doc = parse_lrc("[00:01.50]Hello")
    assert doc is not None
    assert doc.lines == (LyricLine(time=_ms(1500), text="Hello"),)


def test_three_digit_fraction_is_milliseconds():
    doc = parse_lrc("[00:01.500]Hello")
    assert doc.lines == (LyricLine(time=_ms(1500), text="Hello"),)
    assert parse_lrc("[00:01.005]x").lines[0].t_ms == 1005


def test_parse_multiple_timestamps():
    doc = parse_lrc("[00:01.00][00:05.00]Same text")
    assert [line.time for line in doc.lines] == [_ms(1000), _ms(5000)]
    assert [line.text for line in doc.lines] == ["Same text", "Same text"]


def test_metadata_and_first_line():
    doc = parse_lrc("[ti:My Song]\n[ar:My Artist]\n[00:00.00]First line")
    assert doc == Lyrics(
        lines=(LyricLine(time=timedelta(0), text="First line"),),
        title="My Song",
        artist="My Artist",
        album=None,
    )


def test_garbled_timestamp_is_ignored():
    doc = parse_lrc("[99:XX.00]text\n[00:02.00]ok\n")
    assert doc.lines == (LyricLine(time=_ms(2000), text="ok"),)


def test_lines_are_not_sorted_by_time():
    doc = parse_lrc("[00:10.00][00:30.00]chorus\n[00:05.00]verse\n[00:20.00]bridge\n")
    assert [(line.t_ms, line.text) for line in doc.lines] == [
        (10000, "chorus"),
        (30000, "chorus"),
        (5000, "verse"),
        (20000, "bridge"),
    ]


def test_duplicates_are_kept():
    doc = parse_lrc("[00:01.00]x\n[00:01.00]x\n")
    assert len(doc.lines) == 2


def test_unrecognized_lines_are_dropped_silently():
    text = "\n".join(
        [
            "plain text without tags",
            "[00:01.5]one digit fraction",
            "[00:01]no fraction",
            "[0:01.00]one digit minute",
            "[xx:yy]",
            "[re:some editor]",
            "[00:03.00]kept",
        ]
    )
    doc = parse_lrc(text)
    assert [line.text for line in doc.lines] == ["kept"]


def test_tags_case_insensitive_and_last_wins():
    doc = parse_lrc("[TI:First]\n[Ti:Second]\n[AL:  Album  ]\n[00:00.00]x")
    assert doc.title == "Second"
    assert doc.album == "Album"
    assert doc.artist is None


def test_discarded_tags_do_not_affect_result():
    doc = parse_lrc("[au:Author]\n[length:03:20]\n[by:someone]\n[offset:+500]\n[00:01.00]x")
    assert doc == Lyrics(lines=(LyricLine(time=_ms(1000), text="x"),))


def test_metadata_line_is_not_a_timed_line():
    assert parse_lrc("[ti:[00:01.00]x]") is None


def test_line_terminators():
    doc = parse_lrc("[00:01.00]a\r\n[00:02.00]b\r[00:03.00]c\n[00:04.00]d")
    assert [line.text for line in doc.lines] == ["a", "b", "c", "d"]


def test_text_trimmed_and_may_be_empty():
    doc = parse_lrc("   [00:01.00]   hi there   \n[00:02.00]\n[00:03.00][00:04.00]")
    assert [line.text for line in doc.lines] == ["hi there", "", "", ""]


def test_only_leading_timestamp_run_counts():
    doc = parse_lrc("[00:01.00]a [00:02.00] b")
    assert doc.lines == (LyricLine(time=_ms(1000), text="a [00:02.00] b"),)


def test_no_upper_bound_on_minutes_or_seconds():
    doc = parse_lrc("[120:00.00]late\n[00:75.00]odd")
    assert doc.lines[0].time == timedelta(hours=2)
    assert doc.lines[1].time == timedelta(seconds=75)


def test_out_of_range_timestamp_is_dropped():
    doc = parse_lrc("[99999999999999999:00.00]huge\n[00:01.00]y")
    assert [line.text for line in doc.lines] == ["y"]


def test_parse_is_idempotent():
    text = "[ti:T]\n[00:02.00][00:01.00]a\n[00:03.50]b\n"
    assert parse_lrc(text) == parse_lrc(text)


def test_stats():
    doc, stats = parse_lrc_with_stats("[ti:T]\n\n[00:01.00][00:02.00]a\ngarbage\n[00:03.00]b")
    assert doc is not None
    assert stats.lines_total == 5
    assert stats.lines_blank == 1
    assert stats.lines_metadata == 1
    assert stats.lines_with_timestamps == 2
    assert stats.lines_ignored == 1
    assert stats.events_total == 3


def test_stats_when_absent():
    doc, stats = parse_lrc_with_stats("[ar:A]\nnot lyrics")
    assert doc is None
    assert stats.events_total == 0
    assert stats.lines_ignored == 1


@pytest.mark.parametrize("sep", ["\v", "\f", "\x1c", "\x85", "\u2028", "\u2029"])
def test_other_line_breaks_do_not_split(sep):
    doc = parse_lrc(f"[00:01.00]a{sep}b c")
    assert doc.lines == (LyricLine(time=_ms(1000), text=f"a{sep}b c"),)


def test_empty_tag_value_is_ignored_but_blank_value_is_kept():
    doc = parse_lrc("[ti:]\n[ar: ]\n[00:01.00]x")
    assert doc.title is None
    assert doc.artist == ""


def test_timestamp_after_leading_text_is_not_recognized():
    assert parse_lrc("Intro [00:01.00]Hello") is None
    doc = parse_lrc("Intro [00:01.00]Hello\n[00:02.00]World")
    assert doc.lines == (LyricLine(time=_ms(2000), text="World"),)


def test_stats_line_with_only_out_of_range_stamps_is_ignored():
    doc, stats = parse_lrc_with_stats("[99999999999999999:00.00]huge\n[00:01.00]y")
    assert doc is not None
    assert stats.lines_with_timestamps == 1
    assert stats.lines_ignored == 1
    assert stats.events_total == 1
