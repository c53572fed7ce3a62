from __future__ import annotations


def rewrite_storage_uri(uri: str, base_path: str, scheme: str = "public") -> str:
    """Turn a storage URI such as ``public://images/a.png`` into a public path.

    Only an exact leading ``<scheme>://`` prefix is replaced. Trailing slashes
    of ``base_path`` are collapsed so a single ``/`` joins it to the target.
    URIs of other schemes come back untouched.
    """
    prefix = f"{scheme}://"
    if not uri.startswith(prefix):
        return uri
    target = uri[len(prefix):]
    return f"{base_path.rstrip('/')}/{target}"


class PublicPathResolver:
    """Public base path of the ``public://`` file storage."""

    def __init__(self, directory_path: str) -> None:
        self._directory_path = directory_path

    def get_public_base_path(self) -> str:
        return self._directory_path
