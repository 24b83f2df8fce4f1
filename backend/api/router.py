import logging

from fastapi import APIRouter, File, Form, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import MatchRequest
from models.responses import MatchResult
from services import matcher, pdf_parser
from services.vocabulary import SKILL_MAPPINGS

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "vocabulary_size": len(SKILL_MAPPINGS),
    }


@router.post("/match", response_model=MatchResult)
@limiter.limit(settings.rate_limit)
def match(request: Request, body: MatchRequest):
    return matcher.match(body.resume_text, body.job_description)


@router.post("/match/upload", response_model=MatchResult)
@limiter.limit(settings.rate_limit)
def match_upload(
    request: Request,
    resume_file: UploadFile = File(...),
    job_description: str = Form(...),
):
    # Validate file type
    if not resume_file.filename or not resume_file.filename.lower().endswith(".pdf"):
        raise HTTPException(status_code=400, detail="Only PDF files are accepted")

    # Read and validate size
    content = resume_file.file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )

    if len(job_description) > settings.max_jd_chars:
        raise HTTPException(
            status_code=400,
            detail=f"Job description too long (max {settings.max_jd_chars} chars)",
        )

    # Extract text from PDF
    try:
        resume_text = pdf_parser.extract_text(content)
    except Exception:
        logger.warning("Could not parse uploaded PDF %s", resume_file.filename, exc_info=True)
        raise HTTPException(status_code=400, detail="Could not parse PDF file")

    if not resume_text.strip():
        raise HTTPException(status_code=400, detail="No text could be extracted from PDF")

    return matcher.match(resume_text, job_description)
