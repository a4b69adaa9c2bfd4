# hidecart/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
import uvicorn

from . import __version__, admin, cart, storefront
from .config import LOG_LEVEL
from .database import engine, Base
from .host import RedirectRequested

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Hide Cart When Empty",
    description="Storefront that hides its cart link, icon and page while the cart is empty",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ✅ Routers
app.include_router(storefront.router)
app.include_router(cart.router)
app.include_router(admin.router)


@app.exception_handler(RedirectRequested)
async def redirect_requested(request: Request, exc: RedirectRequested):
    return RedirectResponse(exc.url, status_code=302)


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.on_event("startup")
async def on_startup():
    # Tables are created in development; the schema is two small tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


if __name__ == "__main__":
    uvicorn.run("hidecart.main:app", host="0.0.0.0", port=8000, reload=True)
