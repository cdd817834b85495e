"""
FastAPI backend for KDP cover geometry

Serves spine width, full cover dimensions and safe zones to the editor.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from kdp_cover.errors import CoverError, DegenerateGeometry
from web.backend.api import cover

logger = logging.getLogger(__name__)

app = FastAPI(
    title="KDP Cover API",
    description="Spine and full-cover geometry for KDP print covers",
    version="1.0.0"
)

# CORS middleware - allow frontend to communicate
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",  # Vite default port
        "http://localhost:3000",  # Alternative React port
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(CoverError)
async def cover_error_handler(request: Request, exc: CoverError):
    """Bad book metadata or unusable geometry"""
    logger.warning("Rejected %s: %s", request.url.path, exc)
    content = {"success": False, "error": str(exc)}
    if isinstance(exc, DegenerateGeometry):
        content["panel"] = exc.panel
    return JSONResponse(status_code=422, content=content)


@app.get("/")
async def root():
    """Root endpoint"""
    return {
        "message": "KDP Cover API",
        "version": "1.0.0",
        "docs": "/docs",
        "status": "running"
    }


@app.get("/health")
async def health():
    """Health check endpoint"""
    return {"status": "healthy"}


app.include_router(cover.router, prefix="/api/cover", tags=["cover"])

if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=logging.INFO)
    logger.info("Starting KDP Cover API on http://localhost:8000 (docs at /docs)")
    uvicorn.run(app, host="0.0.0.0", port=8000)
