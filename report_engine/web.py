"""
Flask wiring for host portals.

init_app() puts a configured ReportBuilder on the app and registers the
template filters report-card pages use. Routes stay with the host.
"""

import random

from flask import current_app

from .config import configure_logging, load_config
from .promotion import PromotionEvaluator
from .ranking import ordinal
from .remarks import RemarkGenerator
from .report import ReportBuilder, format_date_of_birth

EXTENSION_KEY = 'report_engine'


def two_dp(value):
    """Format a score with two decimal places; blanks show as 0.00."""
    try:
        return f"{float(value):.2f}"
    except (TypeError, ValueError):
        return '0.00'


def init_app(app, source, setup_logging=False):
    config = load_config()
    pass_mark = app.config.get('REPORT_PASS_MARK', config['pass_mark'])
    seed = app.config.get('REPORT_REMARK_SEED', config['remark_seed'])
    if setup_logging:
        configure_logging(config)

    builder = ReportBuilder(
        source,
        promotion=PromotionEvaluator(pass_mark=pass_mark),
        remarks=RemarkGenerator(rng=random.Random(seed)),
    )
    app.extensions[EXTENSION_KEY] = builder
    app.jinja_env.filters['ordinal'] = ordinal
    app.jinja_env.filters['two_dp'] = two_dp
    app.jinja_env.filters['long_date'] = format_date_of_birth
    return builder


def get_report_builder():
    return current_app.extensions[EXTENSION_KEY]
