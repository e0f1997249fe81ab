"""Main application entry point."""

import os

import uvicorn

from sports_events.config.environment import IS_PRODUCTION_ENVIRONMENT

if __name__ == "__main__":
    port = int(os.environ.get('PORT', 8000))

    if not IS_PRODUCTION_ENVIRONMENT:
        # Development mode - import string so reload can re-import the app
        uvicorn.run(
            "sports_events.api.app:app",
            host="127.0.0.1",
            port=port,
            reload=True,
            log_level="debug"
        )
    else:
        uvicorn.run(
            "sports_events.api.app:app",
            host="0.0.0.0",
            port=port,
            workers=int(os.environ.get('WEB_CONCURRENCY', '2')),
            log_level="info"
        )
