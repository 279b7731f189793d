import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from project_panel.api.endpoints import projects
from project_panel.api.endpoints import panels


from fastapi.middleware.cors import CORSMiddleware
from project_panel.core.config import Settings
from project_panel.registry import registry

settings = Settings()
logging.getLogger("project_panel").setLevel(settings.log_level.upper())


@asynccontextmanager
async def lifespan(_: FastAPI):
    try:
        yield
    finally:
        # Ningún temporizador sobrevive al proceso
        registry.close_all()


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(projects.router, prefix="/projects", tags=["projects"])
app.include_router(panels.router, prefix="/panels", tags=["panels"])
