import bcrypt
from cryptography.fernet import Fernet, InvalidToken
from watertrack.config import Config
from watertrack.utils.logging_utils import get_logger

logger = get_logger("crypto")


def get_fernet() -> Fernet:
    if not Config.FERNET_KEY:
        raise RuntimeError("FERNET_KEY is not set")
    return Fernet(Config.FERNET_KEY)


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode(), bcrypt.gensalt()).decode()


def check_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode(), password_hash.encode())
    except ValueError:
        # Malformed stored hash
        logger.warning("Unreadable password hash encountered")
        return False


def issue_token(user_id: int) -> str:
    return get_fernet().encrypt(str(user_id).encode()).decode()


def read_token(token: str):
    """Return the user id carried by a token, or None if it is invalid or expired."""
    try:
        payload = get_fernet().decrypt(token.encode(), ttl=Config.TOKEN_TTL_SECONDS).decode()
    except InvalidToken:
        return None

    try:
        return int(payload)
    except ValueError:
        return None
