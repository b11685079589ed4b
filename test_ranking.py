import random

import pytest

from conftest import consolidated_row, subject_row
from report_engine.ranking import (
    class_ranking,
    competition_ranks,
    multi_sheet_cohort,
    multi_sheet_position,
    ordinal,
    rank_of,
    single_sheet_cohort,
    single_sheet_position,
)


@pytest.mark.parametrize("n, expected", [
    (1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"), (11, "11th"), (12, "12th"),
    (13, "13th"), (21, "21st"), (22, "22nd"), (101, "101st"), (111, "111th"), (112, "112th"),
])
def test_ordinal(n, expected):
    assert ordinal(n) == expected


def test_tied_averages_share_rank_and_next_skips():
    cohort = [("A", 90), ("B", 90), ("C", 70)]
    assert rank_of(cohort, "A") == "1st"
    assert rank_of(cohort, "B") == "1st"
    assert rank_of(cohort, "C") == "3rd"


def test_empty_cohort_or_missing_identity_is_not_ranked():
    assert rank_of([], "A") == "N/A"
    assert rank_of([("A", 50)], "Z") == "N/A"


def test_rank_of_trims_identity():
    assert rank_of([(" A ", 50), ("B", 60)], "A ") == "2nd"


def test_competition_ranks_properties_hold_under_shuffle():
    cohort = [("S%d" % i, avg) for i, avg in enumerate([55, 80, 80, 72.5, 40, 72.5, 72.5, 99, 10, 55])]
    expected = {identity: rank for identity, _avg, rank in competition_ranks(cohort)}
    rng = random.Random(7)
    for _ in range(5):
        shuffled = cohort[:]
        rng.shuffle(shuffled)
        ranked = competition_ranks(shuffled)
        assert ranked[0][2] == 1
        ranks = [rank for _identity, _avg, rank in ranked]
        assert ranks == sorted(ranks)
        for (_, avg_a, rank_a), (_, avg_b, rank_b) in zip(ranked, ranked[1:]):
            if avg_a == avg_b:
                assert rank_a == rank_b
        assert {identity: rank for identity, _avg, rank in ranked} == expected


def test_ties_keep_first_seen_order():
    ranked = competition_ranks([("B", 70), ("A", 70), ("C", 80)])
    assert [identity for identity, _avg, _rank in ranked] == ["C", "B", "A"]


def test_class_ranking_table():
    table = class_ranking([("A", 60.0), ("B", 75.0)])
    assert table == [
        {"identity": "B", "average": 75.0, "rank": 1, "position": "1st"},
        {"identity": "A", "average": 60.0, "rank": 2, "position": "2nd"},
    ]


def test_single_sheet_cohort_averages_detected_subjects():
    rows = [
        consolidated_row("1", "Ade", {"Mathematics": (30, 50), "English": (20, 40)}),
        consolidated_row("2", "Bola", {"Mathematics": (40, 60), "English": (10, "ABS")}),
        {"Admission_no": "", "Surname": "TOTALS"},
    ]
    assert single_sheet_cohort(rows) == [("1", 70.0), ("2", 55.0)]
    assert single_sheet_position(rows, "1") == "1st"
    assert single_sheet_position(rows, "2") == "2nd"


def test_single_sheet_without_subject_columns_is_not_ranked():
    rows = [{"Admission_no": "1", "Surname": "Ade"}]
    assert single_sheet_cohort(rows) == []
    assert single_sheet_position(rows, "1") == "N/A"
    assert single_sheet_position([], "1") == "N/A"


def test_multi_sheet_average_divides_by_sheets_present():
    sheets = {
        "Mathematics": [subject_row("1", 40, 30, 20), subject_row("2", 30, 20, 20)],
        "English": [subject_row("1", 10, 10, 10)],
        "French": [subject_row("1", 20, 10, 10, total=50)],
    }
    cohort = dict(multi_sheet_cohort(sheets))
    assert cohort["1"] == pytest.approx((90 + 30 + 50) / 3)
    # Student 2 only appears on the Mathematics sheet.
    assert cohort["2"] == 70.0
    assert multi_sheet_position(sheets, "2") == "1st"
    assert multi_sheet_position(sheets, "1") == "2nd"


def test_multi_sheet_accepts_list_of_sheets_and_skips_blank_ids():
    sheets = [[subject_row("", 40, 30, 30), subject_row("9", 10, 10, 10)]]
    assert multi_sheet_cohort(sheets) == [("9", 30.0)]
    assert multi_sheet_position({}, "9") == "N/A"
