from urllib.parse import urlparse


def is_url(text: str) -> bool:
    """Check if the text is an absolute http(s) URL."""
    try:
        result = urlparse(text.strip())
        return result.scheme in ("http", "https") and bool(result.netloc)
    except (AttributeError, ValueError):
        return False
