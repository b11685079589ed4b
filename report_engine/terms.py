import logging

from .scores import ScoreAggregator, average_of, find_student_row

TERM_LABELS = ('First_term', 'Second_term', 'Third_term')

CONSOLIDATED = 'consolidated'
PER_SUBJECT = 'per_subject'


def _term_key(term):
    return ' '.join(str(term or '').replace('_', ' ').lower().split())


def term_number(term, term_labels=TERM_LABELS):
    """
    Position of a term in the year: 'First_term' / 'First Term' -> 1.
    The configured labels are tried first, then the standard term names.
    Unknown terms sort last.
    """
    t = _term_key(term)
    for number, label in enumerate(term_labels or (), 1):
        if t == _term_key(label):
            return number
    if t == 'first term':
        return 1
    if t == 'second term':
        return 2
    if t == 'third term':
        return 3
    return 99


def cumulative_average(term, averages, term_labels=TERM_LABELS):
    """
    Running average up to the term being viewed.

    First term reports term 1 alone, second term the mean of terms 1-2, and
    third term (or any unrecognised term) the mean of all three. A term
    without data reads as 0 and still counts in the mean.
    """
    t1 = float(averages.get('term1') or 0)
    t2 = float(averages.get('term2') or 0)
    t3 = float(averages.get('term3') or 0)
    number = term_number(term, term_labels)
    if number == 1:
        value = t1
    elif number == 2:
        value = (t1 + t2) / 2
    else:
        value = (t1 + t2 + t3) / 3
    return round(value, 2)


class TermAverageCalculator:
    """Per-term averages for one student, reading whichever layout the term was filed in."""

    def __init__(self, source, aggregator=None, term_labels=TERM_LABELS):
        if len(term_labels) != 3:
            raise ValueError('term_labels must name exactly three terms.')
        self.source = source
        self.aggregator = aggregator or ScoreAggregator()
        self.term_labels = tuple(term_labels)

    def layout_for(self, session, term, classname):
        if self.source.consolidated_rows(session, term, classname) is not None:
            return CONSOLIDATED
        return PER_SUBJECT

    def student_scores(self, session, term, classname, identity, subjects):
        rows = self.source.consolidated_rows(session, term, classname)
        if rows is not None:
            row = find_student_row(rows, identity)
            if row is None:
                logging.info("%s not found in consolidated %s %s %s sheet", identity, session, term, classname)
            return self.aggregator.consolidated_scores(row, subjects)
        sheets = {
            subject: self.source.subject_rows(session, term, classname, subject)
            for subject in subjects
        }
        return self.aggregator.per_subject_scores(identity, subjects, sheets)

    def term_average(self, session, term, classname, identity, subjects):
        return average_of(self.student_scores(session, term, classname, identity, subjects))

    def term_averages(self, session, classname, identity, subjects):
        first, second, third = self.term_labels
        return {
            'term1': self.term_average(session, first, classname, identity, subjects),
            'term2': self.term_average(session, second, classname, identity, subjects),
            'term3': self.term_average(session, third, classname, identity, subjects),
        }
