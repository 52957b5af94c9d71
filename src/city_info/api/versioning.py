"""URL path API versioning.

Routes live under `/api/v{version}/...`. Each router declares the versions
it serves; requests for any other version are rejected with 400. Supported
and deprecated versions are reported in response headers.
"""

from __future__ import annotations

from typing import Callable

from fastapi import HTTPException, Path, Response, status

SUPPORTED_VERSIONS_HEADER = "api-supported-versions"
DEPRECATED_VERSIONS_HEADER = "api-deprecated-versions"


def api_version(
    supported: tuple[str, ...],
    deprecated: tuple[str, ...] = (),
) -> Callable[..., str]:
    """Create a dependency that validates the `version` path parameter.

    Args:
        supported: Versions served normally
        deprecated: Versions still served but reported as deprecated

    Returns:
        Dependency returning the requested version string
    """
    accepted = set(supported) | set(deprecated)

    async def dependency(
        response: Response,
        version: str = Path(..., description="API version, e.g. 1"),
    ) -> str:
        if version not in accepted:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Unsupported API version: {version}",
                headers={SUPPORTED_VERSIONS_HEADER: ", ".join(supported)},
            )

        response.headers[SUPPORTED_VERSIONS_HEADER] = ", ".join(supported)
        if deprecated:
            response.headers[DEPRECATED_VERSIONS_HEADER] = ", ".join(deprecated)
        return version

    return dependency


def copy_version_headers(source: Response, target: Response) -> Response:
    """Carry version headers onto a response built inside a route.

    Routes that return their own Response object lose headers set on the
    injected one by `api_version`.
    """
    for header in (SUPPORTED_VERSIONS_HEADER, DEPRECATED_VERSIONS_HEADER):
        if header in source.headers:
            target.headers[header] = source.headers[header]
    return target
