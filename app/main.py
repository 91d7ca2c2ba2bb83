import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import config
from .api.endpoints import analytics, customer, distribution, response, survey

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


# --- Lifecycle Events ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Anwendung startet...")
    yield
    logger.info("Anwendung fährt herunter, Daten im Speicher werden verworfen.")


# --- FastAPI App Instanz ---
app = FastAPI(title=config.APP_TITLE, lifespan=lifespan)

# --- CORS Middleware (WICHTIG für Frontend-Zugriff) ---
origins = config.allowed_origins()
logger.info("CORS: Erlaubte Origins: %s", origins)

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(survey.router, prefix="/api/surveys", tags=["surveys"])
app.include_router(analytics.router, prefix="/api/surveys", tags=["analytics"])
app.include_router(customer.router, prefix="/api/customers", tags=["customers"])
app.include_router(
    distribution.router, prefix="/api/distributions", tags=["distributions"]
)
app.include_router(response.router, prefix="/api/responses", tags=["responses"])


# --- API Endpunkte ---
@app.get("/")
async def read_root():
    return {"message": "Welcome to the Survey Management Backend!"}


@app.get("/api/health")
async def health():
    return {"status": "ok"}


# --- Starten der Anwendung ---

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=config.APP_HOST,
        port=config.APP_PORT,
        reload=config.RELOAD_APP,
    )
