import time
from datetime import datetime

import uvicorn
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api import api_router
from .config import get_app_config
from .logging_config import log_api_access

app = FastAPI(title="REST Web", version="1.0.0")
app.include_router(api_router, prefix="/api")

_app_config = get_app_config()


@app.on_event("startup")
async def startup_event():
    _app_config.logger.info(f"Server started at {datetime.now().isoformat()}")

@app.on_event("shutdown")
async def shutdown_event():
    _app_config.logger.info(f"Server stopped at {datetime.now().isoformat()}")


@app.exception_handler(RequestValidationError)
async def bad_request_handler(request: Request, exc: RequestValidationError):
    _app_config.logger.warning(f"{request.method} {request.url.path} rejected: unreadable request body")
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    client = request.client.host if request.client else None

    try:
        response = await call_next(request)
        process_time = time.time() - start_time
        log_api_access(request.method, request.url.path, client, response.status_code, process_time)
        return response
    except Exception as e:
        process_time = time.time() - start_time
        log_api_access(request.method, request.url.path, client, 500, process_time, error=str(e))
        _app_config.logger.error(f"{request.method} {request.url.path} failed: {e} ({process_time:.3f}s)")
        raise


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    uvicorn.run(app, host=_app_config.host, port=_app_config.port)


if __name__ == "__main__":
    run()
