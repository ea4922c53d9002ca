"""Main application entry point."""

from community_events.config.environment import IS_PRODUCTION_ENVIRONMENT
from community_events.api.app import app

if __name__ == "__main__":
    import uvicorn
    if not IS_PRODUCTION_ENVIRONMENT:
        # Development mode - use direct app instance for better debugging
        uvicorn.run(
            app,
            host="127.0.0.1",
            port=8000,
            log_level="debug"
        )
    else:
        # Production mode - a single worker, the event store lives in process memory
        uvicorn.run(
            "community_events.api.app:app",
            host="0.0.0.0",
            port=8000,
            reload=False,
            workers=1,
            log_level="info",
            proxy_headers=True,
            forwarded_allow_ips="*"
        )
