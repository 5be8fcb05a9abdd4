from logging.config import dictConfig


def configure_logging(level='INFO'):
    dictConfig({
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'standard': {
                'format': '{asctime} {levelname} {process} [{filename}:{lineno}] - {message}',
                'style': '{',
            }
        },
        'handlers': {
            'console': {
                'level': level,
                'class': 'logging.StreamHandler',
                'formatter': 'standard',
                'stream': 'ext://sys.stdout',
            },
        },
        'loggers': {
            '': {
                'handlers': ['console'],
                'level': 'DEBUG',
                'propagate': True,
            },
            # keep boto's request chatter out of the console
            'botocore': {'level': 'WARNING'},
            'urllib3': {'level': 'WARNING'},
        },
    })
