"""Uri helpers"""
from urllib import parse

__all__ = ["join", "to_content_path"]

ROOT_PATH = "/"


def join(*parts: str, quote: bool = False) -> str:
    """Join uri parts."""
    if not parts:
        return ""

    return parse.urljoin(
        parts[0],
        "/".join(
            (parse.quote_plus(part.strip("/"), safe="/") if quote else part.strip("/"))
            for part in parts[1:]
        ),
    )


def to_content_path(url: str) -> str:
    """
    Reduce a url to the absolute path the CDN caches it under.
    Scheme, host, query and fragment are dropped. Input without a scheme is
    taken as a path, so a leading // is kept.
    """
    url = url.strip()
    if "://" in url:
        path = parse.urlsplit(url).path
    else:
        path = url.split("#", 1)[0].split("?", 1)[0]

    if not path.startswith(ROOT_PATH):
        path = ROOT_PATH + path

    return path
