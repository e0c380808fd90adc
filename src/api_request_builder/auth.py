import base64

def _base64_encode(text: str) -> str:
    """Encodes a string to base64."""
    return base64.b64encode(text.encode("utf-8")).decode("utf-8")

def encode_basic_auth(username: str, password: str) -> str:
    """Authorization header value for HTTP Basic authentication."""
    return f"Basic {_base64_encode(f'{username}:{password}')}"

def encode_bearer_auth(token: str) -> str:
    """Authorization header value for HTTP Bearer authentication."""
    return f"Bearer {token}"
