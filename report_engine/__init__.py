"""
Report Card Engine

Scoring, ranking and remark generation for school report cards: turns
spreadsheet score rows into subject totals, class positions, term and
cumulative averages, promotion verdicts and a principal's remark.
"""

from .headers import HeaderClassifier, normalize_header, offered_subjects, row_identity, sheet_headers
from .promotion import PromotionEvaluator, canonicalize_classname
from .ranking import class_ranking, competition_ranks, ordinal, rank_of
from .remarks import RemarkGenerator
from .report import ReportBuilder, format_date_of_birth
from .scores import ScoreAggregator, parse_score
from .sources import InMemoryRowSource, RowSource
from .terms import TermAverageCalculator, cumulative_average

__version__ = '1.0.0'
