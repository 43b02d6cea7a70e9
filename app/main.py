import logging
import threading
import time
import uuid
import psutil
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from .config.settings import settings
from .core.exceptions import ApiError
from .database.connection import connect_to_db
from .routes import hr_routes, finance_routes

logging.basicConfig(level=settings.LOG_LEVEL.upper(), format='%(asctime)s [%(levelname)s] %(name)s: %(message)s')
logger = logging.getLogger(__name__)

GENERIC_ERROR_MSG = "An error has occurred"

app = FastAPI(title="Employees API")


# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allows all origins
    allow_credentials=True,
    allow_methods=["*"],  # Allows all methods
    allow_headers=["*"],  # Allows all headers
)

# Connect to database on startup
@app.on_event("startup")
async def startup_event():
    try:
        connect_to_db()
    except Exception as e:
        logger.error(f"Error connecting to database: {str(e)}")
        raise e

# Include routers
app.include_router(hr_routes.router)
app.include_router(finance_routes.router)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": {"message": message}})


@app.exception_handler(ApiError)
async def api_error_handler(request: Request, exc: ApiError):
    return error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {"loc": (), "msg": "Invalid request"}
    location = "/".join(str(part) for part in first["loc"])
    return error_response(400, f"{location} {first['msg']}".strip())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return error_response(404, f"Route {request.url.path} not found")
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def internal_error_handler(request: Request, exc: Exception):
    request_id = uuid.uuid4().hex[:12]
    logger.exception(f"Unhandled error on {request.method} {request.url.path} ({request_id})")
    message = f"{GENERIC_ERROR_MSG} ({request_id})" if settings.is_production else (str(exc) or GENERIC_ERROR_MSG)
    return error_response(500, message)


# Global metrics storage (thread-safe)
metrics_lock = threading.Lock()
endpoint_metrics = {}

UNMATCHED_ROUTE = "<unmatched>"


@app.middleware("http")
async def performance_monitoring_middleware(request: Request, call_next):
    start_time = time.time()
    start_cpu = psutil.Process().cpu_times().user
    response = await call_next(request)
    end_time = time.time()
    end_cpu = psutil.Process().cpu_times().user
    duration = end_time - start_time
    cpu_time = end_cpu - start_cpu
    # Keyed by route template so path parameters do not add entries
    route = request.scope.get("route")
    endpoint = route.path if route is not None else UNMATCHED_ROUTE
    with metrics_lock:
        if endpoint not in endpoint_metrics:
            endpoint_metrics[endpoint] = {
                "count": 0,
                "total_duration": 0.0,
                "total_cpu_time": 0.0
            }
        endpoint_metrics[endpoint]["count"] += 1
        endpoint_metrics[endpoint]["total_duration"] += duration
        endpoint_metrics[endpoint]["total_cpu_time"] += cpu_time
    return response


# Same set helmet sends by default, minus Content-Security-Policy
SECURITY_HEADERS = {
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Origin-Agent-Cluster": "?1",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Frame-Options": "SAMEORIGIN",
    "X-Permitted-Cross-Domain-Policies": "none",
    "X-XSS-Protection": "0",
}


@app.middleware("http")
async def security_headers_middleware(request: Request, call_next):
    response = await call_next(request)
    if settings.is_production:
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
    return response


@app.get("/performance")
def get_performance_metrics():
    with metrics_lock:
        stats = {}
        for endpoint, data in endpoint_metrics.items():
            count = data["count"]
            stats[endpoint] = {
                "count": count,
                "total_duration": data["total_duration"],
                "avg_duration": data["total_duration"] / count if count else 0,
                "total_cpu_time": data["total_cpu_time"],
                "avg_cpu_time": data["total_cpu_time"] / count if count else 0
            }
    return JSONResponse(content=stats)


@app.get("/")
def read_root():
    return {"message": "Employees API"}


def run():
    import uvicorn
    uvicorn.run("app.main:app", host=settings.ADDR, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


# uvicorn app.main:app --reload
# uvicorn app.main:app --host 0.0.0.0 --port 3000
