"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from django.conf import settings
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAdminUser
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from pricing.domain.errors import DomainError
from pricing.handlers.serializers import (
    PricingConfigUpdateSerializer,
    QuoteRequestSerializer,
    QuoteSerializer,
)
from pricing.services.pricing_service import PricingService
from pricing.stores.cached_store import CachedPricingConfigStore
from pricing.stores.django_store import DjangoPricingConfigStore

logger = logging.getLogger(__name__)


def get_pricing_service() -> PricingService:
    return PricingService(
        CachedPricingConfigStore(DjangoPricingConfigStore()),
        deposit_rate=settings.PRICING_DEPOSIT_RATE,
    )


def error_response(error: DomainError, status_code: int = status.HTTP_400_BAD_REQUEST) -> Response:
    logger.info("Rejected pricing request: %s", error)
    return Response(
        {"error": {"code": error.code.value, "message": error.message}},
        status=status_code,
    )


class PricingConfigView(APIView):
    """Handler for GET /api/pricing"""

    permission_classes = [AllowAny]

    def get(self, request: Request) -> Response:
        photographer_id = request.query_params.get("photographer") or None
        try:
            config = get_pricing_service().get_effective_config(photographer_id)
        except DomainError as error:
            return error_response(error)
        return Response(config.to_dict())


class AdminPricingConfigView(APIView):
    """Handler for PUT /api/admin/pricing and /api/photographers/{id}/pricing"""

    permission_classes = [IsAdminUser]

    def put(self, request: Request, photographer_id: str | None = None) -> Response:
        serializer = PricingConfigUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        try:
            config = get_pricing_service().update_config(
                serializer.validated_data["config"], photographer_id
            )
        except DomainError as error:
            return error_response(error)
        return Response({"version": config.version, "config": config.to_dict()})

    def delete(self, request: Request, photographer_id: str | None = None) -> Response:
        try:
            deleted = get_pricing_service().reset_config(photographer_id)
        except DomainError as error:
            return error_response(error)
        if not deleted:
            return Response(status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)


class QuoteView(APIView):
    """Handler for POST /api/quotes"""

    permission_classes = [AllowAny]

    def post(self, request: Request) -> Response:
        serializer = QuoteRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = dict(serializer.validated_data)
        photographer_id = data.pop("photographer_id", None) or None
        try:
            snapshot = get_pricing_service().quote(data, photographer_id)
        except DomainError as error:
            return error_response(error)
        body = QuoteSerializer(snapshot).data
        body["record"] = snapshot.to_record()
        return Response(body)
