import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from api.router import limiter, router
from config import settings
from exceptions import InvalidInputError
from logging_setup import configure_logging

configure_logging("DEBUG" if settings.debug else settings.log_level)

app = FastAPI(
    title="Resume Matcher API",
    description="Resume to job-description match scoring for the Indian job market",
    version="1.0.0",
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


app.include_router(router)


def serve():
    """Run the API with uvicorn on the configured host and port."""
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level="debug" if settings.debug else settings.log_level.lower(),
    )


if __name__ == "__main__":
    serve()
