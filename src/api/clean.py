"""Text cleaning endpoint.

Runs the cleaning pipeline over text that was extracted elsewhere.
"""

from fastapi import APIRouter, Depends

from src.cleaning import estimate_narration_minutes, get_pipeline, word_count
from src.config import Settings, get_settings
from src.models.schemas import CleanRequest, CleanResponse

router = APIRouter(prefix="/clean", tags=["clean"])


@router.post("", response_model=CleanResponse)
async def clean_text(
    request: CleanRequest,
    settings: Settings = Depends(get_settings),
) -> CleanResponse:
    """Clean raw extracted text.

    Document mode also removes lines repeated across the text (running
    headers and footers); page mode cleans the text in isolation.
    """
    cleaned = get_pipeline(request.mode).run(request.text)
    words = word_count(cleaned)

    return CleanResponse(
        text=cleaned,
        mode=request.mode,
        word_count=words,
        estimated_minutes=estimate_narration_minutes(words, settings.words_per_minute),
    )
