from dotenv import load_dotenv
import logging
import os

load_dotenv()

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def safe_float(value, default):
    """Parse float safely while preserving valid zero values."""
    try:
        return float(value)
    except (TypeError, ValueError):
        return float(default)


def load_config(environ=None):
    """
    Read engine settings from the environment (and .env, loaded at import).
    Raises RuntimeError on values that cannot be used.
    """
    env = os.environ if environ is None else environ

    raw_pass_mark = (env.get('REPORT_PASS_MARK') or '').strip()
    pass_mark = 50.0
    if raw_pass_mark:
        try:
            pass_mark = float(raw_pass_mark)
        except ValueError:
            raise RuntimeError(f"REPORT_PASS_MARK must be a number, got {raw_pass_mark!r}.")
        if not 0 <= pass_mark <= 100:
            raise RuntimeError("REPORT_PASS_MARK must be between 0 and 100.")

    raw_seed = (env.get('REPORT_REMARK_SEED') or '').strip()
    remark_seed = None
    if raw_seed:
        try:
            remark_seed = int(raw_seed)
        except ValueError:
            raise RuntimeError(f"REPORT_REMARK_SEED must be an integer, got {raw_seed!r}.")

    log_level = (env.get('REPORT_LOG_LEVEL') or 'INFO').strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise RuntimeError(f"REPORT_LOG_LEVEL {log_level!r} is not a valid logging level.")

    return {
        'pass_mark': pass_mark,
        'remark_seed': remark_seed,
        'log_file': (env.get('REPORT_LOG_FILE') or 'app.log').strip(),
        'log_level': log_level,
    }


def configure_logging(config=None):
    config = config or load_config()
    logging.basicConfig(filename=config['log_file'], level=getattr(logging, config['log_level']),
                        format=LOG_FORMAT)
