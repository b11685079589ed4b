"""
One student's report card for one term.

ReportBuilder runs the whole scoring flow: subject totals, class position,
term and cumulative averages, the end-of-year promotion verdict and the
principal's remark. The result is a plain dict for the presentation layer.
"""

import logging
import math
from datetime import datetime, timedelta

from .promotion import PromotionEvaluator, is_final_term
from .ranking import multi_sheet_position, ordinal, single_sheet_position
from .remarks import RemarkGenerator
from .scores import ScoreAggregator, average_of
from .terms import CONSOLIDATED, TERM_LABELS, TermAverageCalculator, cumulative_average

EXCEL_EPOCH = datetime(1899, 12, 30)
EXCEL_SERIAL_MIN = 20000
DATE_FORMATS = ('%Y-%m-%d', '%d/%m/%Y', '%d-%m-%Y', '%Y/%m/%d')


def display_session(session):
    """'2025_and_2026' -> '2025/2026'."""
    return (session or '').strip().replace('_and_', '/')


def display_term(term):
    return (term or '').strip().replace('_', ' ')


def format_date_of_birth(value):
    """
    Long-form date of birth, e.g. 'Sunday, 3rd October 2003'.

    Accepts Excel serial day numbers as well as date strings; anything that
    cannot be read as a date is returned unchanged.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return 'Not Recorded'
    if isinstance(value, datetime):
        date = value
    else:
        date = None
        try:
            serial = float(value)
        except (TypeError, ValueError):
            serial = None
        if serial is not None and math.isfinite(serial) and serial > EXCEL_SERIAL_MIN:
            try:
                date = EXCEL_EPOCH + timedelta(days=round(serial))
            except (OverflowError, ValueError):
                return value
        elif serial is None:
            text = str(value).strip()
            try:
                date = datetime.fromisoformat(text)
            except ValueError:
                for fmt in DATE_FORMATS:
                    try:
                        date = datetime.strptime(text, fmt)
                        break
                    except ValueError:
                        continue
        if date is None:
            return value
    return f"{date.strftime('%A')}, {ordinal(date.day)} {date.strftime('%B')} {date.year}"


class ReportBuilder:
    """Assembles one student's report card for a session, term and class."""

    def __init__(self, source, aggregator=None, promotion=None, remarks=None, term_labels=TERM_LABELS):
        self.source = source
        self.aggregator = aggregator or ScoreAggregator()
        self.terms = TermAverageCalculator(source, self.aggregator, term_labels)
        self.promotion = promotion or PromotionEvaluator()
        self.remarks = remarks or RemarkGenerator()

    def position(self, session, term, classname, identity):
        rows = self.source.consolidated_rows(session, term, classname)
        if rows is not None:
            return single_sheet_position(rows, identity)
        sheets = self.source.class_sheets(session, term, classname)
        return multi_sheet_position(sheets, identity, self.aggregator)

    def build(self, session, term, classname, identity, subjects):
        identity = str(identity if identity is not None else '').strip()
        subjects = [s.strip() for s in subjects if s and s.strip()]

        layout = self.terms.layout_for(session, term, classname)
        scores = self.terms.student_scores(session, term, classname, identity, subjects)
        grand_total = sum(entry['total_score'] for entry in scores)
        current_average = round(average_of(scores), 2)
        position = self.position(session, term, classname, identity)

        averages = self.terms.term_averages(session, classname, identity, subjects)
        cumulative = cumulative_average(term, averages, self.terms.term_labels)

        promotion = None
        if is_final_term(term, self.terms.term_labels):
            promotion = self.promotion.evaluate(classname, cumulative)

        logging.info("Report built for %s (%s %s %s): average %.2f, position %s",
                     identity, session, term, classname, current_average, position)
        return {
            'session': display_session(session),
            'term': display_term(term),
            'classname': classname,
            'identity': identity,
            'layout': layout,
            'scores': scores,
            'total_subjects': len(scores),
            'grand_total': grand_total,
            'current_average': current_average,
            'position': position,
            'term_averages': {key: round(value, 2) for key, value in averages.items()},
            'cumulative_average': cumulative,
            'promotion': promotion,
            'remark': self.remarks.generate(current_average, scores, position),
        }
