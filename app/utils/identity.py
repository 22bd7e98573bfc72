"""익명 참여자 신원 생성 모듈.

Anonymous participant identity module.
The evaluation session manager only needs "a new unique participant identity";
the naming scheme is pluggable through ``IdentityGenerator``.
"""

import secrets
from dataclasses import dataclass
from typing import Callable

from app.config import settings


@dataclass(frozen=True)
class ParticipantIdentity:
    """익명 참여자 신원 (Synthetic participant identity)."""

    first_name: str
    last_name: str
    email: str


# 신원 생성기 타입 — Any zero-argument callable returning a fresh identity
IdentityGenerator = Callable[[], ParticipantIdentity]


def generate_anonymous_identity() -> ParticipantIdentity:
    """랜덤 토큰 기반 익명 신원 생성.

    Generate an anonymous identity from a random token.
    Names stay neutral ("Participant" + token); the email is unique per call.
    """
    token: str = secrets.token_hex(6)
    return ParticipantIdentity(
        first_name="Participant",
        last_name=token.upper(),
        email=f"participant.{token}@{settings.PARTICIPANT_EMAIL_DOMAIN}",
    )
