"""
Per-subject CA + Examination totals for one student.

Two sheet layouts are supported:

- consolidated: one row per student holding "<Subject> (CA 40)" and
  "<Subject> (Exam 60)" for every subject;
- per-subject: one sheet per subject holding "CA (40 MARKS)",
  "MCQ (30 MARKS)", "THEORY (30 MARKS)" and an optional "TOTAL (100)".

Blank cells and stray text read as 0. Nothing in here raises on bad data.
"""

import logging
import math
from types import MappingProxyType

from .config import safe_float
from .headers import CA_SUFFIX, EXAM_SUFFIX, row_identity

# Registrar label -> label used in the consolidated sheet headers.
SUBJECT_SYNONYMS = MappingProxyType({
    'Basic Tech': 'Basic Technology',
    'CCA': 'Cultural and Creative Arts',
    'French': 'Francais',
    'Computer and ICT': 'INFO AND COMMUNICATION TECHNOLOGY',
    'History': 'Nigerian History',
    'PHE': 'Physical and Health Education',
    'Yoruba': 'Yoruba Language',
})

CA_COLUMN = 'CA (40 MARKS)'
MCQ_COLUMN = 'MCQ (30 MARKS)'
THEORY_COLUMN = 'THEORY (30 MARKS)'
TOTAL_COLUMN = 'TOTAL (100)'


def parse_score(value):
    """Cell value as a non-negative float; anything unusable is 0."""
    if isinstance(value, bool):
        return 0.0
    number = safe_float(value, 0)
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def _explicit_total(value):
    """Numeric TOTAL (100) cell, or None when blank or not a number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str) and not value.strip():
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return max(number, 0.0)


def score_entry(subject, ca_score=0.0, exam_score=0.0, total_score=None):
    if total_score is None:
        total_score = ca_score + exam_score
    return {
        'subject': subject,
        'ca_score': ca_score,
        'exam_score': exam_score,
        'total_score': total_score,
    }


def find_student_row(rows, identity):
    """First row whose admission number matches identity after trimming."""
    target = str(identity if identity is not None else '').strip()
    if not target:
        return None
    for row in rows or []:
        if row_identity(row) == target:
            return row
    return None


def average_of(scores):
    if not scores:
        return 0.0
    return sum(entry['total_score'] for entry in scores) / len(scores)


class ScoreAggregator:
    """Builds ScoreEntry dicts from raw rows in either sheet layout."""

    def __init__(self, synonyms=SUBJECT_SYNONYMS):
        self.synonyms = MappingProxyType(dict(synonyms))

    def sheet_subject(self, subject):
        """Consolidated-sheet label for a registrar subject, the label itself when unmapped."""
        return self.synonyms.get(subject, subject)

    def consolidated_scores(self, row, subjects):
        scores = []
        if row is None:
            logging.debug("No consolidated row; scoring %d subjects as zero", len(subjects))
        for subject in subjects:
            if row is None:
                scores.append(score_entry(subject))
                continue
            label = self.sheet_subject(subject)
            if label + CA_SUFFIX not in row and label + EXAM_SUFFIX not in row:
                logging.debug("Consolidated sheet has no columns for %s (looked up as %r)", subject, label)
            ca = parse_score(row.get(label + CA_SUFFIX))
            exam = parse_score(row.get(label + EXAM_SUFFIX))
            scores.append(score_entry(subject, ca, exam))
        return scores

    def subject_score(self, subject, row):
        if row is None:
            return score_entry(subject)
        ca = parse_score(row.get(CA_COLUMN))
        exam = parse_score(row.get(MCQ_COLUMN)) + parse_score(row.get(THEORY_COLUMN))
        # A hand-adjusted TOTAL (100) is authoritative over the component sum.
        return score_entry(subject, ca, exam, _explicit_total(row.get(TOTAL_COLUMN)))

    def per_subject_scores(self, identity, subjects, sheets):
        """
        One entry per registered subject, in registration order.

        sheets maps subject -> rows of that subject's sheet (None or absent
        when the sheet does not exist).
        """
        scores = []
        for subject in subjects:
            rows = sheets.get(subject)
            row = find_student_row(rows, identity) if rows else None
            if row is None:
                logging.debug("No %s score for %s; using zero", subject, identity)
            scores.append(self.subject_score(subject, row))
        return scores
