"""POST /api/generate-images: annotated animal and brain profile images."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from profile_cards.dependencies import get_image_generator
from profile_cards.engine.composite import ImageGenerator
from profile_cards.engine.errors import CompositeFailure
from profile_cards.models.requests import GenerateImagesRequest
from profile_cards.models.responses import ErrorResponse, GenerateImagesResponse

router = APIRouter()

MISSING_DATA_MESSAGE = 'Request body must contain "animalData" and "brainData" objects.'
INVALID_DATA_MESSAGE = 'Request body has malformed "animalData" or "brainData" objects.'
GENERATION_FAILED_MESSAGE = "Failed to generate images."


@router.post(
    "/generate-images",
    response_model=GenerateImagesResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_images(
    req: GenerateImagesRequest,
    generator: ImageGenerator = Depends(get_image_generator),
) -> GenerateImagesResponse | JSONResponse:
    if req.animal_data is None or req.brain_data is None:
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error=MISSING_DATA_MESSAGE).model_dump(exclude_none=True),
        )

    try:
        result = await generator.generate(
            req.animal_data.model_dump(),
            req.brain_data.model_dump(),
        )
    except CompositeFailure as e:
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=GENERATION_FAILED_MESSAGE, details=str(e)).model_dump(),
        )

    return GenerateImagesResponse(
        animal_image=result.animal.to_data_uri(),
        brain_image=result.brain.to_data_uri(),
    )
