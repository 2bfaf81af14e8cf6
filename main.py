from fastapi import FastAPI, APIRouter
from slowapi.errors import RateLimitExceeded

from core.middleware import setup_middleware
from core.db_middleware import DatabaseMiddleware
from core.correlation_middleware import CorrelationMiddleware
from core.logging import setup_logging, get_logger
from core.settings import settings
from core.rate_limit import limiter, rate_limit_exceeded_handler
from db.base import init_db, close_db
from api.v1.public import tournaments, standings, players, statistics


async def lifespan(app: FastAPI):
    # Setup structured logging first
    setup_logging(
        log_level=settings.log_level,
        json_format=settings.log_format == "json",
        service_name=settings.service_name,
    )
    log = get_logger()
    log.info("application_starting", service=settings.service_name, environment=settings.environment)

    init_db()
    log.info("database_initialized")

    yield

    close_db()
    log.info("application_stopped")


app = FastAPI(
    title="Tournament View API",
    description="Public rosters, pairings, live standings and player statistics",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {"name": "Tournaments", "description": "Tournament info, divisions, rosters and pairings"},
        {"name": "Standings", "description": "Live standings and CSV export"},
        {"name": "Players", "description": "Per-player game history and statistics"},
        {"name": "Statistics", "description": "Tournament highlights"},
    ],
)

# Add rate limiter
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

# Add middlewares (order matters - first added = innermost)
app.add_middleware(DatabaseMiddleware)
app.add_middleware(CorrelationMiddleware)
setup_middleware(app)

# API v1 Public routes
api_v1_public = APIRouter(prefix="/v1")
api_v1_public.include_router(tournaments.router)
api_v1_public.include_router(standings.router)
api_v1_public.include_router(players.router)
api_v1_public.include_router(statistics.router)

app.include_router(api_v1_public)


@app.get("/")
async def root():
    return {"message": "Tournament View API"}


# Wake up server
@app.get("/ping")
async def ping():
    return {"message": "Pong!"}
