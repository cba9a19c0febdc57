from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from api.planning_routes import router as planning_router
from api.emissions_routes import router as emissions_router
from api.status import router as status_router
from config import settings
from core.load_plugins import load_plugins
from core.log import configure_logging
from contextlib import asynccontextmanager


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging(settings.LOG_LEVEL)
    load_plugins()
    yield


app = FastAPI(title="Carbon-Aware Trip Planner", lifespan=lifespan)

# CORS (adjust for your frontend)
origins = settings.CORS_ALLOW_ORIGINS.split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register API routes
app.include_router(planning_router)
app.include_router(emissions_router)
app.include_router(status_router)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True)
