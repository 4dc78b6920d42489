from __future__ import annotations

from azure_cdn_tools.utils.uris import to_content_path


class UrlPathService:
    """Treats each item as a url or path served by the CDN."""

    def generate_paths(self, item: str) -> list[str]:
        if not item.strip():
            return []
        return [to_content_path(item)]
