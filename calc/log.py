import logging
import logging.config

def setup_logging(log_level: str = "WARNING") -> None:
    """
    Route the `calc` loggers to stderr.

    The token trace is emitted at DEBUG by the lexer, so passing "DEBUG" here
    turns it on. Results are printed on stdout and never go through logging.
    """
    logging.config.dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'trace': {'format': '%(message)s'},
        },
        'handlers': {
            'stderr': {
                'class': 'logging.StreamHandler',
                'stream': 'ext://sys.stderr',
                'formatter': 'trace',
                'level': log_level,
            },
        },
        'loggers': {
            'calc': {
                'level': log_level,
                'handlers': ['stderr'],
                'propagate': False,
            },
        },
    })
