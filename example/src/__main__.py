import logging

import uvicorn

HOST = 'localhost'
PORT = 8000

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

LOG_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'default': {
            'format': LOG_FORMAT,
        },
    },
    'handlers': {
        'default': {
            'class': 'logging.StreamHandler',
            'formatter': 'default',
        },
    },
    'loggers': {
        'uvicorn.access': {
            'level': 'INFO',
        },
        'api_middleware': {
            'level': 'DEBUG',
        },
        'api_middleware_example': {
            'level': 'DEBUG',
        },
    },
    'root': {
        'level': 'INFO',
        'handlers': ['default'],
    },
}


def main():
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    uvicorn.run(
        'api_middleware_example.main:api',
        host=HOST,
        port=PORT,
        log_config=LOG_CONFIG,
    )


if __name__ == '__main__':
    main()
