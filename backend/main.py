from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from api.distance_routes import router as distance_router
from api.emissions_routes import router as emissions_router
from api.status import router as status_router
from core.logging_conf import setup_logging
from services.bootstrap import load_services
from contextlib import asynccontextmanager
import os


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    # tests may pre-populate app.state.services with their own wiring
    if getattr(app.state, "services", None) is None:
        app.state.services = load_services()
    yield


app = FastAPI(title="Trip Carbon Estimator", lifespan=lifespan)

# CORS (adjust for your frontend)
origins = os.getenv("CORS_ALLOW_ORIGINS", "http://localhost:3000").split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register API routes
app.include_router(status_router)
app.include_router(emissions_router)
app.include_router(distance_router)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True)
