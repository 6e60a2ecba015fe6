import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from tasknotes.config import LOG_LEVEL
from tasknotes.database import init_db
from tasknotes.errors import TaskNotesError
from tasknotes.logging_setup import setup_logging
from tasknotes.routers import auth, tasks, notes

setup_logging(LOG_LEVEL)
logger = logging.getLogger("tasknotes.main")

init_db()

app = FastAPI(title="tasknotes")

# API routers
app.include_router(auth.router)
app.include_router(tasks.router)
app.include_router(notes.router)


@app.exception_handler(TaskNotesError)
async def domain_error_handler(request: Request, exc: TaskNotesError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


# Generic error handler to return JSON errors for unexpected exceptions
@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.exception("unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})
