"""API version negotiation.

The version may be carried, in order of precedence, by the URL path
(``/api/v1/...``), the ``api-version`` query parameter or the
``api-version`` request header.  When none is given the configured
``DEFAULT_VERSION`` applies.  Versions are normalised to ``major.minor``
so ``v1`` and ``v1.0`` address the same API.
"""

from __future__ import annotations

from django.conf import settings
from django.utils.cache import patch_vary_headers
from rest_framework import exceptions
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.versioning import BaseVersioning

SUPPORTED_VERSIONS_HEADER = "api-supported-versions"


def normalize_version(version: str) -> str:
    version = version.strip().lstrip("vV")
    if version.isdigit():
        return f"{version}.0"
    return version


class HeaderQueryPathVersioning(BaseVersioning):
    version_param = "api-version"
    invalid_version_message = "The requested API version is not supported."

    def determine_version(self, request: Request, *args, **kwargs) -> str:
        raw = (
            kwargs.get("version")
            or request.query_params.get(self.version_param)
            or request.headers.get(self.version_param)
        )
        if not raw:
            return self.default_version
        version = normalize_version(raw)
        if not self.is_allowed_version(version):
            raise exceptions.NotFound(self.invalid_version_message)
        return version


class ReportApiVersionsMixin:
    """Advertise the supported API versions on every response.

    Responses also vary on ``api-version`` so cached bodies are never
    served across versions.
    """

    def finalize_response(self, request, response: Response, *args, **kwargs):
        response = super().finalize_response(request, response, *args, **kwargs)
        allowed = settings.REST_FRAMEWORK.get("ALLOWED_VERSIONS") or []
        response[SUPPORTED_VERSIONS_HEADER] = ", ".join(allowed)
        patch_vary_headers(response, (HeaderQueryPathVersioning.version_param,))
        return response
