"""API-Version Header — advertises the API version on successful responses.

Invariants:
    - Header set only on 2xx responses; error responses carry no version
"""

from fastapi import FastAPI, Request

API_VERSION_HEADER = "API-Version"


def register_api_version_header(app: FastAPI, version: str) -> None:

    @app.middleware("http")
    async def api_version_header(request: Request, call_next):
        response = await call_next(request)
        if 200 <= response.status_code < 300:
            response.headers[API_VERSION_HEADER] = version
        return response
