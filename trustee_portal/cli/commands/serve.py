"""Run the HTTP API."""

import uvicorn


def serve(host: str = "127.0.0.1", port: int = 8000, reload: bool = False) -> None:
    """Start the API server in the foreground.

    Args:
        host: Host to bind to.
        port: Port to listen on.
        reload: Restart on code changes (development).
    """
    uvicorn.run(
        "trustee_portal.application.api.rest.app:app",
        host=host,
        port=port,
        reload=reload,
    )
