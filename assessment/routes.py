"""
Assessment API Routes

Access tokens, registration, response storage, scoring and reports.
"""

import base64
import binascii
import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response as RawResponse
from sqlalchemy.orm import Session

from db import get_db
from models.models import StreamAssessment
from models.schemas import ReportIn, ResponseIn, ResponseOut, TokenOut, TokenVerify, UserOut, UserRegister
from utils import crud
from utils.token_utils import generate_unique_token, normalize_token

from .logic import AssessmentEngine, CategoryScore, SurveyVariant, resolve_variant
from .logic.constants import DEFAULT_TOP_N, VHSC_SECTION_PREFIX
from .logic.normalizer import organize_sections
from .report import RespondentDetails, analyze_profile, build_guidance, render_html, render_pdf, render_text

logger = logging.getLogger(__name__)

tokens_router = APIRouter(prefix="/api/tokens", tags=["tokens"])
users_router = APIRouter(prefix="/api/users", tags=["users"])
responses_router = APIRouter(prefix="/api/responses", tags=["responses"])
reports_router = APIRouter(prefix="/api/reports", tags=["reports"])

routers = [tokens_router, users_router, responses_router, reports_router]


def _server_error(action: str, e: Exception) -> JSONResponse:
    logger.exception(f"Error {action}: {e}")
    return JSONResponse(status_code=500, content={"error": f"Failed {action}"})


def _top_n(request: Request) -> int:
    return getattr(request.app.state, "report_top_n", DEFAULT_TOP_N)


# =============================================================================
# SCORING HELPERS
# =============================================================================

def infer_variant(sections: Dict[str, Any], requested: Optional[str]) -> SurveyVariant:
    """An explicit variant wins; otherwise any 'vhsc-' section marks a VHSC survey."""
    if requested:
        return resolve_variant(requested)
    if any(name.startswith(VHSC_SECTION_PREFIX) for name in sections):
        return SurveyVariant.VHSC
    return SurveyVariant.REGULAR


def _snapshot_output(snapshot: StreamAssessment):
    engine = AssessmentEngine(snapshot.variant)
    return engine.score_categories(
        aptitude=CategoryScore(domain="aptitude", scores=dict(snapshot.aptitude_scores or {})),
        interest=CategoryScore(domain="interest", scores=dict(snapshot.interest_scores or {})),
        academic=CategoryScore(domain="academic", scores=dict(snapshot.academic_performance or {})),
        personality=CategoryScore(domain="personality", scores=dict(snapshot.personality_traits or {})),
        context=CategoryScore(domain="context", scores=dict(snapshot.contextual_inputs or {})),
    )


def _respondent(db: Session, token: str) -> RespondentDetails:
    user = crud.get_user_by_token(db, token)
    if user is None:
        return RespondentDetails()
    contact = ", ".join(part for part in (user.email, user.phone_no) if part)
    return RespondentDetails(
        name=user.name,
        current_qualification=user.current_qualification or "",
        contact_info=contact,
    )


def _guidance(payload: Dict[str, Any], sections: Dict[str, Any]):
    insights = None
    if resolve_variant(payload.get("variant")) == SurveyVariant.REGULAR:
        insights = analyze_profile(sections, payload.get("interestScores") or {})
    return build_guidance(payload, insights)


def _score_stored(db: Session, token: str, variant: Optional[str]):
    """Score the stored responses for a token. Returns (payload, sections)."""
    responses: List = crud.list_responses(db, token)
    if not responses:
        raise HTTPException(status_code=404, detail="No responses found for this token")
    sections = organize_sections(responses)
    output = AssessmentEngine(infer_variant(sections, variant)).score_sections(sections)
    return output.to_payload(), sections


# =============================================================================
# TOKENS
# =============================================================================

@tokens_router.get("", summary="List access tokens")
def list_tokens(db_session=Depends(get_db)):
    try:
        db: Session
        with db_session as db:
            return [TokenOut.model_validate(t).model_dump(by_alias=True, mode="json") for t in crud.list_tokens(db)]
    except Exception as e:
        return _server_error("listing tokens", e)


@tokens_router.post("", status_code=201, summary="Create a unique access token")
def create_token(db_session=Depends(get_db)):
    try:
        db: Session
        with db_session as db:
            token = generate_unique_token(lambda t: crud.token_exists(db, t))
            if token is None:
                logger.error("Could not generate a unique access token")
                return JSONResponse(status_code=500, content={"error": "Failed to generate unique token"})
            row = crud.create_token(db, token)
            return TokenOut.model_validate(row).model_dump(by_alias=True, mode="json")
    except Exception as e:
        return _server_error("creating token", e)


@tokens_router.delete("/{token}", summary="Delete an access token")
def delete_token(token: str, db_session=Depends(get_db)):
    token = normalize_token(token)
    try:
        db: Session
        with db_session as db:
            if not crud.delete_token(db, token):
                raise HTTPException(status_code=404, detail="Token not found")
            return {"message": "Token deleted"}
    except HTTPException:
        raise
    except Exception as e:
        return _server_error("deleting token", e)


@tokens_router.get("/verify/{token}", summary="Check that a token exists and is unused")
def check_token(token: str, db_session=Depends(get_db)):
    token = normalize_token(token)
    try:
        db: Session
        with db_session as db:
            row = crud.get_token(db, token)
            return {"valid": bool(row and not row.is_used), "token": token}
    except Exception as e:
        return _server_error("verifying token", e)


@tokens_router.post("/verify", summary="Consume an access token")
def consume_token(body: TokenVerify, db_session=Depends(get_db)):
    token = normalize_token(body.token)
    if not token:
        raise HTTPException(status_code=400, detail="token is required")
    try:
        db: Session
        with db_session as db:
            row = crud.get_token(db, token)
            if row is None or row.is_used:
                raise HTTPException(status_code=400, detail="Invalid or already used token")
            row.is_used = True
            return {"valid": True, "token": token}
    except HTTPException:
        raise
    except Exception as e:
        return _server_error("verifying token", e)


# =============================================================================
# USERS
# =============================================================================

@users_router.post("", status_code=201, summary="Register a respondent")
def register_user(body: UserRegister, db_session=Depends(get_db)):
    try:
        db: Session
        with db_session as db:
            if crud.get_user_by_email(db, body.email):
                raise HTTPException(status_code=400, detail="Email already registered")
            user = crud.create_user(
                db,
                name=body.name,
                email=body.email,
                phone_no=body.phone_no,
                current_qualification=body.current_qualification,
                access_token=normalize_token(body.access_token),
            )
            return UserOut.model_validate(user).model_dump(by_alias=True, mode="json")
    except HTTPException:
        raise
    except Exception as e:
        return _server_error("registering user", e)


@users_router.get("/{token}", summary="Respondent details for a token")
def get_user(token: str, db_session=Depends(get_db)):
    token = normalize_token(token)
    try:
        db: Session
        with db_session as db:
            user = crud.get_user_by_token(db, token)
            if user is None:
                raise HTTPException(status_code=404, detail="User not found")
            return UserOut.model_validate(user).model_dump(by_alias=True, mode="json")
    except HTTPException:
        raise
    except Exception as e:
        return _server_error("fetching user", e)


# =============================================================================
# RESPONSES AND SCORING
# =============================================================================

@responses_router.post("", status_code=201, summary="Save answers for one section")
def save_response(body: ResponseIn, db_session=Depends(get_db)):
    token = normalize_token(body.access_token)
    if not token or not body.section or body.answers is None:
        raise HTTPException(status_code=400, detail="accessToken, section, and answers are required")
    try:
        db: Session
        with db_session as db:
            row = crud.create_response(db, access_token=token, section=body.section, answers=body.answers)
            return ResponseOut.model_validate(row).model_dump(by_alias=True, mode="json")
    except Exception as e:
        return _server_error("saving response", e)


@responses_router.get("/{token}", summary="Stored responses for a token")
def get_responses(token: str, db_session=Depends(get_db)):
    token = normalize_token(token)
    try:
        db: Session
        with db_session as db:
            return [ResponseOut.model_validate(r).model_dump(by_alias=True, mode="json") for r in crud.list_responses(db, token)]
    except Exception as e:
        return _server_error("fetching responses", e)


@responses_router.delete("/{token}", summary="Delete stored responses for a token")
def delete_responses(token: str, db_session=Depends(get_db)):
    token = normalize_token(token)
    try:
        db: Session
        with db_session as db:
            return {"deleted": crud.delete_responses(db, token)}
    except Exception as e:
        return _server_error("deleting responses", e)


@responses_router.post("/calculate-scores/{token}", summary="Score stored responses and snapshot the result")
def calculate_scores(
    token: str,
    variant: Optional[str] = Query(None, description="'regular' or 'vhsc'; inferred from section names when omitted"),
    db_session=Depends(get_db),
):
    token = normalize_token(token)
    try:
        db: Session
        with db_session as db:
            responses = crud.list_responses(db, token)
            if not responses:
                raise HTTPException(status_code=400, detail="No responses found for this token")

            sections = organize_sections(responses)
            engine = AssessmentEngine(infer_variant(sections, variant))
            output = engine.score_sections(sections)

            snapshot = crud.create_assessment(
                db,
                access_token=token,
                variant=output.variant.value,
                scores={
                    "aptitude": output.aptitude.scores,
                    "interest": output.interest.scores,
                    "academic": output.academic.scores,
                    "personality": output.personality.scores,
                    "context": output.context.scores,
                },
            )
            payload = output.to_payload()
            payload["assessmentId"] = snapshot.id
            return payload
    except HTTPException:
        raise
    except Exception as e:
        return _server_error("calculating scores", e)


@responses_router.get("/assessment/{token}", summary="Latest stored assessment for a token")
def get_assessment(token: str, db_session=Depends(get_db)):
    token = normalize_token(token)
    try:
        db: Session
        with db_session as db:
            snapshot = crud.latest_assessment(db, token)
            if snapshot is None:
                raise HTTPException(status_code=404, detail="Assessment not found")
            payload = _snapshot_output(snapshot).to_payload()
            payload["assessmentId"] = snapshot.id
            return payload
    except HTTPException:
        raise
    except Exception as e:
        return _server_error("fetching assessment", e)


# =============================================================================
# REPORTS
# =============================================================================

@reports_router.post("", status_code=201, summary="Store a report (auto-rendered or uploaded)")
def create_report(body: ReportIn, request: Request, db_session=Depends(get_db)):
    token = normalize_token(body.access_token)
    if not token:
        raise HTTPException(status_code=400, detail="accessToken is required")

    pdf_bytes: Optional[bytes] = None
    if body.mode != "auto":
        if not body.pdf_data:
            raise HTTPException(status_code=400, detail="accessToken and pdfData are required")
        try:
            pdf_bytes = base64.b64decode(body.pdf_data, validate=True)
        except (binascii.Error, ValueError):
            raise HTTPException(status_code=400, detail="pdfData must be base64 encoded")

    try:
        db: Session
        with db_session as db:
            if pdf_bytes is None:
                snapshot = crud.latest_assessment(db, token)
                if snapshot is None:
                    raise HTTPException(status_code=404, detail="Assessment not found")
                payload = _snapshot_output(snapshot).to_payload()
                sections = organize_sections(crud.list_responses(db, token))
                guidance = _guidance(payload, sections)
                pdf_bytes = render_pdf(payload, _respondent(db, token), guidance, top_n=_top_n(request))

            report = crud.create_report(db, access_token=token, pdf_data=pdf_bytes)
            return {"id": report.id}
    except HTTPException:
        raise
    except Exception as e:
        return _server_error("saving report", e)


@reports_router.get("/{token}", summary="Latest PDF report for a token")
def get_report(token: str, db_session=Depends(get_db)):
    token = normalize_token(token)
    try:
        db: Session
        with db_session as db:
            report = crud.latest_report(db, token)
            if report is None:
                raise HTTPException(status_code=404, detail="Report not found")
            return RawResponse(
                content=bytes(report.pdf_data),
                media_type="application/pdf",
                headers={"Content-Disposition": f"attachment; filename=report-{token}.pdf"},
            )
    except HTTPException:
        raise
    except Exception as e:
        return _server_error("fetching report", e)


@reports_router.get("/{token}/html", response_class=HTMLResponse, summary="HTML report from stored responses")
def get_report_html(
    token: str,
    request: Request,
    variant: Optional[str] = Query(None),
    db_session=Depends(get_db),
):
    token = normalize_token(token)
    try:
        db: Session
        with db_session as db:
            payload, sections = _score_stored(db, token, variant)
            html = render_html(payload, _respondent(db, token), _guidance(payload, sections), top_n=_top_n(request))
            return HTMLResponse(content=html)
    except HTTPException:
        raise
    except Exception as e:
        return _server_error("rendering report", e)


@reports_router.get("/{token}/text", response_class=PlainTextResponse, summary="Plain-text report from stored responses")
def get_report_text(
    token: str,
    request: Request,
    variant: Optional[str] = Query(None),
    db_session=Depends(get_db),
):
    token = normalize_token(token)
    try:
        db: Session
        with db_session as db:
            payload, sections = _score_stored(db, token, variant)
            text = render_text(payload, _respondent(db, token), _guidance(payload, sections), top_n=_top_n(request))
            return PlainTextResponse(content=text)
    except HTTPException:
        raise
    except Exception as e:
        return _server_error("rendering report", e)
