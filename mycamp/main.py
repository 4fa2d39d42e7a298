import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from mycamp.config import LOG_LEVEL
from mycamp.routers import auth, campsites, facilities, reservations
from mycamp.db import init_database
from mycamp.utils.errors import MyCampError, mycamp_error_handler

logging.basicConfig(level=LOG_LEVEL)


@asynccontextmanager
async def lifespan(_: FastAPI):
    "lifespan for initing database"
    init_database()
    yield


app = FastAPI(
    lifespan=lifespan,
    title="MyCamp",
    description="Campground booking backend based on FastAPI.",
    version="0.1.0",
    license_info={
        "name": "MIT",
        "url": "https://opensource.org/licenses/MIT",
    },
)

app.add_exception_handler(MyCampError, mycamp_error_handler)

app.include_router(auth.router)
app.include_router(facilities.router)
app.include_router(campsites.router)
app.include_router(reservations.router)
