"""Tests for the entry parser."""

from datetime import date

from vaultcal.parsing.parser import (
    DateInfo,
    ListEntry,
    clean_content,
    extract_block_link,
    extract_dates,
    extract_recurrence,
    extract_times,
    line_contains_parse_below_token,
    line_contains_time,
    parse_line,
)
from vaultcal.parsing.status import TaskStatus


class TestExtractDates:
    def test_single_date(self):
        dates = extract_dates("Dentist @{2024-03-01}")
        assert len(dates) == 1
        assert dates[0].date == "2024-03-01"
        assert dates[0].value == date(2024, 3, 1)
        assert dates[0].raw_match == " @{2024-03-01}"

    def test_order_of_appearance_and_duplicates(self):
        dates = extract_dates("@{2024-05-02} then @{2024-05-01} again @{2024-05-02}")
        assert [d.date for d in dates] == ["2024-05-02", "2024-05-01", "2024-05-02"]

    def test_no_dates(self):
        assert extract_dates("Nothing here, not even 2024-03-01") == []
        assert extract_dates("") == []

    def test_impossible_calendar_date_is_unresolved(self):
        dates = extract_dates("@{2024-13-45}")
        assert len(dates) == 1
        assert dates[0].date == "2024-13-45"
        assert dates[0].value is None

    def test_leap_day(self):
        assert extract_dates("@{2024-02-29}")[0].value == date(2024, 2, 29)
        assert extract_dates("@{2023-02-29}")[0].value is None


class TestCleanContent:
    def test_strips_match_and_trims(self):
        dates = [DateInfo(date="2024-03-01", value=date(2024, 3, 1), raw_match=" @{2024-03-01}")]
        assert clean_content("Buy milk @{2024-03-01}  ", dates) == "Buy milk"

    def test_removes_one_occurrence_per_match(self):
        dates = extract_dates("a @{2024-01-01} b @{2024-01-01}")
        assert clean_content("a @{2024-01-01} b @{2024-01-01}", dates) == "a b"

    def test_interior_spacing_not_collapsed(self):
        dates = extract_dates("a @{2024-01-01}  b")
        assert clean_content("a @{2024-01-01}  b", dates) == "a  b"


class TestParseLine:
    def test_content_from_header(self):
        parsed = parse_line(ListEntry(header="Task", body="@{2024-04-10}"))
        assert parsed.content == "Task"
        assert [d.date for d in parsed.dates] == ["2024-04-10"]
        assert parsed.original_line == "Task@{2024-04-10}"

    def test_content_from_body_when_no_header(self):
        parsed = parse_line(ListEntry(header="", body="Dentist @{2024-03-02}"))
        assert parsed.content == "Dentist"
        assert parsed.dates[0].date == "2024-03-02"

    def test_header_date_is_extracted_and_stripped(self):
        parsed = parse_line(ListEntry(header="Buy milk @{2024-03-01}", body=""))
        assert parsed.content == "Buy milk"
        assert parsed.dates[0].date == "2024-03-01"

    def test_header_dates_come_before_body_dates(self):
        parsed = parse_line(ListEntry(header="Trip @{2024-07-01}", body="@{2024-06-01}"))
        assert [d.date for d in parsed.dates] == ["2024-07-01", "2024-06-01"]

    def test_no_dates_is_empty_list(self):
        parsed = parse_line(ListEntry(header="Done thing", body=""))
        assert parsed.dates == []

    def test_plain_entry_is_not_a_task(self):
        parsed = parse_line(ListEntry(header="", body="Just prose"))
        assert parsed.is_task is False
        assert parsed.task_status is TaskStatus.NOT_A_TASK
        assert parsed.status_character is None
        assert parsed.is_list_item is False

    def test_checklist_fields_carried_over(self):
        entry = ListEntry(
            header="Doing", body="", indentation="  ", list_marker="*", status_character="/"
        )
        parsed = parse_line(entry)
        assert parsed.is_task is True
        assert parsed.is_list_item is True
        assert parsed.list_marker == "*"
        assert parsed.indentation == "  "
        assert parsed.status_character == "/"
        assert parsed.task_status is TaskStatus.IN_PROGRESS

    def test_times_and_markers_not_filled(self):
        parsed = parse_line(ListEntry(header="", body="Call 10:00 @{2024-01-01} ^blk"))
        assert parsed.start_time is None
        assert parsed.end_time is None
        assert parsed.has_recurrence is False
        assert parsed.block_link is None

    def test_malformed_text_does_not_raise(self):
        parsed = parse_line(ListEntry(header="@{2024-", body="}{@{}} [[["))
        assert parsed.dates == []
        assert parsed.content == "@{2024-"


class TestExtractTimes:
    def test_range(self):
        start, end = extract_times("Meeting 10:30-11:45")
        assert (start.hour, start.minute, start.is_end_time) == (10, 30, False)
        assert (end.hour, end.minute, end.is_end_time) == (11, 45, True)

    def test_tagged_time_wins_over_plain(self):
        start, end = extract_times("at 8:00 <time>09:15</time> standup")
        assert (start.hour, start.minute) == (9, 15)
        assert end is None

    def test_end_marker(self):
        start, end = extract_times("Call 14:00 ⏲ 15:30")
        assert (start.hour, start.minute) == (14, 0)
        assert (end.hour, end.minute) == (15, 30)

    def test_seconds(self):
        start, _ = extract_times("at 07:05:09")
        assert start.second == 9

    def test_out_of_range_ignored(self):
        assert extract_times("at 25:00") == (None, None)

    def test_no_time(self):
        assert extract_times("no time here") == (None, None)


class TestMarkers:
    def test_recurrence(self):
        assert extract_recurrence("Water plants 🔁 every week") == "every week"
        assert extract_recurrence("Water plants") is None

    def test_block_link(self):
        assert extract_block_link("Quote of the day ^quote-1") == "quote-1"
        assert extract_block_link("No anchor") is None


class TestLineContainsTime:
    def test_time_or_date(self):
        assert line_contains_time("Lunch 12:30")
        assert line_contains_time("<time>12:30</time> Lunch")
        assert line_contains_time("Rent @{2024-01-01}")
        assert line_contains_time("Rent 📅 2024-01-01")

    def test_task_line(self):
        assert line_contains_time("- [ ] Something")

    def test_plain_prose(self):
        assert not line_contains_time("Just words")

    def test_repeated_calls_are_independent(self):
        results = [line_contains_time("Lunch 12:30") for _ in range(3)]
        assert results == [True, True, True]


class TestParseBelowToken:
    def test_empty_token_matches_everything(self):
        assert line_contains_parse_below_token("anything", "")

    def test_literal_match(self):
        assert line_contains_parse_below_token("## Tasks (a+b)", "(a+b)")
        assert not line_contains_parse_below_token("## Tasks aab", "(a+b)")
