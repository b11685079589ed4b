"""Class positions using standard competition ranking (1, 1, 3, ...)."""

from .headers import CA_SUFFIX, EXAM_SUFFIX, consolidated_subjects, row_identity, sheet_headers
from .scores import ScoreAggregator, parse_score

NOT_RANKED = 'N/A'


def ordinal(value):
    """Return ordinal string for an integer (e.g., 1 -> 1st)."""
    try:
        n = int(value)
    except (TypeError, ValueError):
        return str(value)
    abs_n = abs(n)
    if 10 <= (abs_n % 100) <= 20:
        suffix = 'th'
    else:
        suffix = {1: 'st', 2: 'nd', 3: 'rd'}.get(abs_n % 10, 'th')
    return f"{n}{suffix}"


def competition_ranks(entries):
    """
    Rank (identity, average) pairs, highest average first.

    Equal averages share a rank and the next distinct average resumes at its
    1-based position. Averages are compared exactly, with no tolerance, so two
    averages that differ only by float rounding get different ranks. Ties keep
    their input order.
    """
    ranked = []
    prev_average = None
    current_rank = 0
    ordered = sorted(entries, key=lambda entry: entry[1], reverse=True)
    for index, (identity, average) in enumerate(ordered, 1):
        if prev_average is None or average != prev_average:
            current_rank = index
        ranked.append((identity, average, current_rank))
        prev_average = average
    return ranked


def rank_of(entries, identity):
    """Ordinal position of identity within the cohort, 'N/A' when it is not there."""
    target = str(identity if identity is not None else '').strip()
    positions = {}
    for entry_identity, _average, rank in competition_ranks(entries):
        positions[str(entry_identity).strip()] = rank
    rank = positions.get(target)
    return ordinal(rank) if rank else NOT_RANKED


def class_ranking(entries):
    """Full ranked table for a class, e.g. for the class broadsheet."""
    return [
        {'identity': identity, 'average': average, 'rank': rank, 'position': ordinal(rank)}
        for identity, average, rank in competition_ranks(entries)
    ]


def single_sheet_cohort(rows):
    """
    Cohort from a consolidated sheet: each student's average is the mean of
    their (CA 40) + (Exam 60) totals over every subject the sheet carries.
    """
    subjects = consolidated_subjects(sheet_headers(rows))
    if not subjects:
        return []
    cohort = []
    for row in rows:
        identity = row_identity(row)
        if not identity:
            continue
        total = sum(
            parse_score(row.get(subject + CA_SUFFIX)) + parse_score(row.get(subject + EXAM_SUFFIX))
            for subject in subjects
        )
        cohort.append((identity, total / len(subjects)))
    return cohort


def multi_sheet_cohort(sheets, aggregator=None):
    """
    Cohort from every per-subject sheet of a class.

    A student's average is the sum of their subject totals divided by the
    number of sheets they appear in, not by their registered subject count:
    a student missing from a sheet is averaged over the sheets they are in.
    """
    aggregator = aggregator or ScoreAggregator()
    sheet_rows = sheets.values() if hasattr(sheets, 'values') else sheets
    totals = {}
    for rows in sheet_rows:
        for row in rows or []:
            identity = row_identity(row)
            if not identity:
                continue
            entry = aggregator.subject_score('', row)
            total, count = totals.get(identity, (0.0, 0))
            totals[identity] = (total + entry['total_score'], count + 1)
    return [(identity, total / count) for identity, (total, count) in totals.items()]


def single_sheet_position(rows, identity):
    if not rows:
        return NOT_RANKED
    return rank_of(single_sheet_cohort(rows), identity)


def multi_sheet_position(sheets, identity, aggregator=None):
    if not sheets:
        return NOT_RANKED
    return rank_of(multi_sheet_cohort(sheets, aggregator), identity)
