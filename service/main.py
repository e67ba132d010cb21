"""
FastAPI service for imageprobe

Exposes header probing as HTTP API for language-agnostic access.
"""

import logging
from typing import Optional

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from imageprobe import FormatDetector, ImageValidator, get_image_info

logger = logging.getLogger("imageprobe.service")

# Initialize FastAPI app
app = FastAPI(
    title="ImageProbe API",
    description="Header-only image metadata service - format, dimensions and orientation",
    version="1.0.0",
)

# CORS - allow upload pipelines to call this service
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure based on deployment
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ImageInfoResponse(BaseModel):
    """Probe result for one uploaded file"""
    width: int
    height: int
    format: str
    orientation: str
    content_type: str
    extension: str
    file_size: int
    supported: bool


class ErrorResponse(BaseModel):
    """Error response"""
    error: str
    detail: Optional[str] = None


# API Endpoints
@app.get("/")
def root():
    """API root - health check"""
    return {
        "service": "ImageProbe API",
        "version": "1.0.0",
        "status": "healthy"
    }


@app.post("/v1/info", response_model=ImageInfoResponse, responses={400: {"model": ErrorResponse}})
async def image_info_endpoint(
    file: UploadFile = File(..., description="Image file to probe"),
    max_size: Optional[int] = Form(None, description="Largest accepted size in bytes. None = 10 MiB default.")
):
    """
    Probe uploaded image file and return its header metadata.

    Nothing is decoded: the format comes from magic bytes and the
    dimensions from the container header. Files in an unrecognized format
    are still answered (fallback 1920x1080, supported=false).

    Args:
        file: Uploaded image file (multipart/form-data)
        max_size: Optional size limit in bytes (form field)

    Returns:
        ImageInfoResponse JSON

    Raises:
        HTTPException 400: If the upload is empty or exceeds max_size

    Example:
        curl -X POST http://localhost:8766/v1/info \\
          -F "file=@photo.avif"
    """
    if max_size is not None and max_size <= 0:
        raise HTTPException(
            status_code=400,
            detail=f"max_size must be positive, got {max_size}"
        )

    limit = max_size if max_size is not None else ImageValidator.MAX_FILE_SIZE
    image_bytes = await file.read()

    if not image_bytes:
        raise HTTPException(status_code=400, detail="File is empty")

    if not ImageValidator.is_valid_file_size(len(image_bytes), limit):
        raise HTTPException(
            status_code=400,
            detail=ImageValidator.too_large_message(len(image_bytes), limit)
        )

    info = get_image_info(image_bytes)
    logger.info(
        "Probed %s: %s %dx%d",
        file.filename, info.format.value, info.width, info.height
    )

    return ImageInfoResponse(
        **info.to_dict(),
        content_type=FormatDetector.get_content_type(info.format),
        extension=FormatDetector.get_extension(info.format),
        file_size=len(image_bytes),
        supported=FormatDetector.is_supported_format(info.format),
    )


@app.get("/health")
def health_check():
    """Health check endpoint for monitoring"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8766)
