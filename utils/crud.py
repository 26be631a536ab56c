from typing import Any, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from models.models import AccessToken, Report, Response, StreamAssessment, User

# =============================================================================
# ACCESS TOKENS
# =============================================================================

def list_tokens(db: Session) -> List[AccessToken]:
    return list(db.execute(select(AccessToken).order_by(AccessToken.created_at.desc(), AccessToken.id.desc())).scalars())


def get_token(db: Session, token: str) -> Optional[AccessToken]:
    return db.execute(select(AccessToken).where(AccessToken.token == token)).scalar_one_or_none()


def token_exists(db: Session, token: str) -> bool:
    return get_token(db, token) is not None


def create_token(db: Session, token: str) -> AccessToken:
    row = AccessToken(token=token, is_used=False)
    db.add(row)
    db.flush()
    return row


def delete_token(db: Session, token: str) -> bool:
    row = get_token(db, token)
    if row is None:
        return False
    db.delete(row)
    return True

# =============================================================================
# USERS
# =============================================================================

def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.execute(select(User).where(User.email == email.lower())).scalar_one_or_none()


def get_user_by_token(db: Session, token: str) -> Optional[User]:
    return db.execute(
        select(User).where(User.access_token == token).order_by(User.id.desc())
    ).scalars().first()


def create_user(
    db: Session,
    *,
    name: str,
    email: str,
    phone_no: Optional[str],
    current_qualification: Optional[str],
    access_token: str,
) -> User:
    user = User(
        name=name,
        email=email.lower(),
        phone_no=phone_no,
        current_qualification=current_qualification,
        access_token=access_token,
    )
    db.add(user)
    db.flush()
    return user

# =============================================================================
# RESPONSES
# =============================================================================

def create_response(db: Session, *, access_token: str, section: str, answers: Any) -> Response:
    row = Response(access_token=access_token, section=section, answers=answers)
    db.add(row)
    db.flush()
    return row


def list_responses(db: Session, token: str) -> List[Response]:
    """Responses for a token, oldest first, so later submissions win when organized by section."""
    return list(db.execute(
        select(Response).where(Response.access_token == token).order_by(Response.created_at, Response.id)
    ).scalars())


def delete_responses(db: Session, token: str) -> int:
    rows = list_responses(db, token)
    for row in rows:
        db.delete(row)
    return len(rows)

# =============================================================================
# ASSESSMENTS AND REPORTS
# =============================================================================

def create_assessment(db: Session, *, access_token: str, variant: str, scores: dict) -> StreamAssessment:
    row = StreamAssessment(
        access_token=access_token,
        variant=variant,
        aptitude_scores=scores["aptitude"],
        interest_scores=scores["interest"],
        academic_performance=scores["academic"],
        personality_traits=scores["personality"],
        contextual_inputs=scores["context"],
    )
    db.add(row)
    db.flush()
    return row


def latest_assessment(db: Session, token: str) -> Optional[StreamAssessment]:
    return db.execute(
        select(StreamAssessment)
        .where(StreamAssessment.access_token == token)
        .order_by(StreamAssessment.created_at.desc(), StreamAssessment.id.desc())
    ).scalars().first()


def create_report(db: Session, *, access_token: str, pdf_data: bytes) -> Report:
    row = Report(access_token=access_token, pdf_data=pdf_data)
    db.add(row)
    db.flush()
    return row


def latest_report(db: Session, token: str) -> Optional[Report]:
    return db.execute(
        select(Report)
        .where(Report.access_token == token)
        .order_by(Report.created_at.desc(), Report.id.desc())
    ).scalars().first()
