"""
Storefront Wishlist Views

Endpoints (bearer token required):
- GET    /wishlist             → current wishlist
- POST   /wishlist             → add {courseId, title}, returns updated wishlist
- DELETE /wishlist/<courseId>  → remove course, returns updated wishlist

Every response body is the complete wishlist as a list of
``{"courseId": ..., "title": ...}`` objects.

Author: Storefront Development Team
Version: 1.0.0
"""

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from . import services
from .serializers import WishlistItemSerializer


def _wishlist_response(items) -> Response:
    return Response(WishlistItemSerializer(items, many=True).data, status=status.HTTP_200_OK)


class WishlistView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        return _wishlist_response(services.list_items(request.user))

    def post(self, request: Request) -> Response:
        serializer = WishlistItemSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        items = services.add_item(
            request.user,
            serializer.validated_data["course_id"],
            serializer.validated_data["title"],
        )
        return _wishlist_response(items)


class WishlistItemView(APIView):
    permission_classes = [IsAuthenticated]

    def delete(self, request: Request, course_id: str) -> Response:
        return _wishlist_response(services.remove_item(request.user, course_id))
