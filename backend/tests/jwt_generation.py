import sys
import time
from pathlib import Path
from typing import Optional

# Add parent directory to path so we can import messaging
backend_dir = Path(__file__).parent.parent
sys.path.insert(0, str(backend_dir))

import jwt
from messaging.config.settings import Config


def generate_jwt_token(
    user_id: str = "user-1",
    claim: str = "user_id",
    secret: Optional[str] = None,
    **overrides,
) -> str:
    """Generate a JWT for the API; overrides replace or add claims (e.g. exp, iss)"""
    now = int(time.time())
    payload = {
        claim: user_id,
        "iat": now,
        "exp": now + 3600,
        "iss": Config.JWT_ISSUER,
    }
    payload.update(overrides)

    return jwt.encode(payload, secret or Config.JWT_SECRET, algorithm="HS256")


def bearer(user_id: str = "user-1") -> dict:
    return {"Authorization": f"Bearer {generate_jwt_token(user_id)}"}


if __name__ == "__main__":
    user_id = sys.argv[1] if len(sys.argv) > 1 else "user-1"
    print(f"Bearer {generate_jwt_token(user_id)}")
