import os
import uuid
import logging
from typing import List, Optional

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware
import aiofiles

from config import settings
from models.resume_models import (
    Domain,
    DownloadResponse,
    EnhancementReport,
    MatchingStrategy,
    SessionState,
    SessionStatus,
    Template,
    TextAnalysisRequest,
)
from services.enhancement_session import SessionStore
from services.exceptions import (
    InvalidTransitionError,
    PDFExtractionError,
    ResumeValidationError,
    SessionNotFoundError,
)
from services.pdf_processor import PDFProcessor
from services.resume_enhancer import ResumeEnhancer
from services.upload_validator import require_fields, validate_resume_upload


app = FastAPI(title="Resume Enhancer API", version="1.0.0")

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Configure logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

# Initialize services
pdf_processor = PDFProcessor()
resume_enhancer = ResumeEnhancer(MatchingStrategy(settings.keyword_matching))
sessions = SessionStore(ttl_seconds=settings.session_ttl_seconds, max_sessions=settings.max_sessions)

# Ensure upload directory exists
os.makedirs(settings.upload_dir, exist_ok=True)


def http_error(error: Exception) -> HTTPException:
    """Map service exceptions to HTTP errors"""
    if isinstance(error, SessionNotFoundError):
        return HTTPException(status_code=404, detail=error.message)
    if isinstance(error, ResumeValidationError):
        return HTTPException(status_code=400, detail=error.message)
    if isinstance(error, InvalidTransitionError):
        # Reviewing before download is a fixable input problem, not a conflict
        status_code = 400 if error.action == "download" else 409
        return HTTPException(status_code=status_code, detail=error.message)
    return HTTPException(status_code=500, detail=f"Error processing resume: {str(error)}")


async def read_resume_upload(file: UploadFile) -> str:
    """
    Validate an uploaded resume, stage it on disk and return its text
    """
    # Reject on the declared size before buffering the body
    if file.size is not None:
        validate_resume_upload(file.content_type, file.size)

    content = await file.read()
    validate_resume_upload(file.content_type, len(content))

    file_path = os.path.join(settings.upload_dir, f"{uuid.uuid4().hex}.pdf")
    try:
        async with aiofiles.open(file_path, 'wb') as f:
            await f.write(content)

        logger.info(f"Processing file: {file.filename}")
        extracted_text = pdf_processor.extract_text(file_path)
    finally:
        if os.path.exists(file_path):
            os.remove(file_path)

    if not extracted_text:
        raise PDFExtractionError(file.filename)

    return extracted_text


@app.get("/")
async def root():
    return {"message": "Resume Enhancer API is working"}

@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "services": {
            "pdf_processor": "running",
            "resume_enhancer": "running",
            "sessions": len(sessions)
        }
    }

@app.get("/domains", response_model=List[Domain])
async def list_domains():
    return list(Domain)

@app.get("/templates", response_model=List[Template])
async def list_templates():
    return list(Template)

@app.post("/analyze", response_model=EnhancementReport)
async def analyze_resume(
    file: Optional[UploadFile] = File(None),
    job_description: str = Form(""),
    domain: Domain = Form(Domain.SOFTWARE),
    template: Template = Form(Template.MODERN),
):
    """
    Upload a PDF resume and score it against a job description
    """
    try:
        require_fields(file is not None, job_description)
        resume_text = await read_resume_upload(file)

        analysis = await resume_enhancer.analyze_async(resume_text, job_description, domain)

        logger.info(f"Analysis completed for: {file.filename}")
        return EnhancementReport(
            filename=file.filename,
            domain=domain,
            template=template,
            analysis=analysis,
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error processing resume: {str(e)}")
        raise http_error(e)

@app.post("/analyze-text", response_model=EnhancementReport)
async def analyze_text(request: TextAnalysisRequest):
    """
    Score already-extracted resume text against a job description
    """
    try:
        require_fields(bool(request.resume_text.strip()), request.job_description)
        analysis = await resume_enhancer.analyze_async(
            request.resume_text, request.job_description, request.domain
        )
        return EnhancementReport(
            domain=request.domain,
            template=request.template,
            analysis=analysis,
        )

    except Exception as e:
        logger.error(f"Error analyzing resume text: {str(e)}")
        raise http_error(e)

@app.post("/sessions", response_model=SessionStatus, status_code=201)
async def create_session():
    return sessions.create().status()

@app.get("/sessions/{session_id}", response_model=SessionStatus)
async def get_session(session_id: str):
    try:
        return sessions.get(session_id).status()
    except Exception as e:
        raise http_error(e)

@app.delete("/sessions/{session_id}", status_code=204)
async def delete_session(session_id: str):
    try:
        sessions.delete(session_id)
    except Exception as e:
        raise http_error(e)

@app.post("/sessions/{session_id}/resume", response_model=SessionStatus)
async def upload_session_resume(session_id: str, file: UploadFile = File(...)):
    """
    Attach a resume to a session, discarding earlier results
    """
    try:
        session = sessions.get(session_id)
        resume_text = await read_resume_upload(file)
        session.select_file(file.filename, resume_text)
        return session.status()

    except Exception as e:
        logger.error(f"Error uploading resume for session {session_id}: {str(e)}")
        raise http_error(e)

@app.post("/sessions/{session_id}/analyze", response_model=SessionStatus)
async def analyze_session(
    session_id: str,
    job_description: str = Form(""),
    domain: Domain = Form(Domain.SOFTWARE),
    template: Template = Form(Template.MODERN),
):
    try:
        session = sessions.get(session_id)
        session.begin_analysis(job_description, domain, template)
    except Exception as e:
        raise http_error(e)

    completed = False
    try:
        analysis = await resume_enhancer.analyze_async(session.resume_text, job_description, domain)
        session.complete_analysis(analysis)
        completed = True
    except Exception as e:
        logger.error(f"Error analyzing resume for session {session_id}: {str(e)}")
        raise http_error(e)
    finally:
        # Cancellation bypasses the except clause
        if not completed and session.state == SessionState.ANALYZING:
            session.fail_analysis()

    return session.status()

@app.post("/sessions/{session_id}/review", response_model=SessionStatus)
async def review_session(session_id: str):
    try:
        session = sessions.get(session_id)
        session.mark_reviewed()
        return session.status()
    except Exception as e:
        raise http_error(e)

@app.post("/sessions/{session_id}/download", response_model=DownloadResponse)
async def download_session(session_id: str):
    """
    Export placeholder: requires reviewed suggestions, produces no file
    """
    try:
        return sessions.get(session_id).request_download()
    except Exception as e:
        raise http_error(e)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
