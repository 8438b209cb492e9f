# app/main.py
from fastapi import FastAPI, Request, HTTPException
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.routers import messaging, mentorship, projects
from app.db.mongo import client, verify_mongodb_connection
from app.core.logger import logger
from app.services.live_registry import live_registry
from app.utils.responses import format_error_response


app = FastAPI(
    title="Mentorship Messaging",
    version="0.1.0",
    description="Backend for student/adviser mentorship matching and messaging",
)

# ✅ CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ✅ Startup/shutdown
@app.on_event("startup")
async def startup():
    await verify_mongodb_connection()
    live_registry.start()

@app.on_event("shutdown")
async def shutdown():
    await live_registry.stop()
    client.close()

# ✅ Health check
@app.get("/", tags=["root"], summary="Health check")
async def root():
    return {"status": "ok", "service": "Mentorship Messaging"}

# ✅ Error handlers
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content=format_error_response(exc, status_code=exc.status_code),
        headers=getattr(exc, "headers", None),
    )

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=422,
        content=format_error_response(exc, status_code=422),
    )

@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content=format_error_response(Exception("Internal server error")),
    )

# ✅ Routes
app.include_router(messaging.router,  prefix="/messages")
app.include_router(mentorship.router, prefix="/mentorship")
app.include_router(projects.router,   prefix="/projects")
