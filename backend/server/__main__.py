"""Run the API with uvicorn: python -m server"""

import uvicorn

from server.config import HOST, IS_PRODUCTION, LOG_LEVEL, PORT
from server.logging_setup import setup_logging


def main():
    setup_logging(LOG_LEVEL)
    uvicorn.run("server:app", host=HOST, port=PORT, reload=not IS_PRODUCTION)


if __name__ == "__main__":
    main()
