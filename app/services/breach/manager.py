import hashlib
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from app.services.breach.base import BreachProvider

PREFIX_LENGTH = 5


class BreachStatus(str, Enum):
    NOT_CHECKED = "not_checked"
    BREACHED = "breached"
    CLEAN = "clean"


@dataclass(frozen=True)
class BreachVerdict:
    status: BreachStatus
    count: Optional[int] = None

    @property
    def is_breached(self) -> bool:
        return self.status == BreachStatus.BREACHED


NOT_CHECKED = BreachVerdict(BreachStatus.NOT_CHECKED)


def encode_password(password: str) -> bytes:
    """
    UTF-8 bytes of the password. Lone surrogates, which JSON allows,
    become U+FFFD the same way browsers encode them.
    """
    return (
        password.encode("utf-16", "surrogatepass")
        .decode("utf-16", "replace")
        .encode("utf-8")
    )


def split_password_hash(password: str) -> Tuple[str, str]:
    """
    Uppercase SHA-1 hex of the password, split into (prefix, suffix).
    """
    sha1 = hashlib.sha1(encode_password(password)).hexdigest().upper()
    return sha1[:PREFIX_LENGTH], sha1[PREFIX_LENGTH:]


def check_password_breach(password: str, provider: BreachProvider) -> BreachVerdict:
    """
    Password must NEVER be stored or logged; only the prefix is sent out.
    BreachServiceUnavailable from the provider propagates to the caller.
    """
    prefix, suffix = split_password_hash(password)

    for record in provider.fetch_range(prefix):
        # count 0 marks an Add-Padding filler record
        if record.suffix == suffix and record.count > 0:
            return BreachVerdict(BreachStatus.BREACHED, record.count)

    return BreachVerdict(BreachStatus.CLEAN)
