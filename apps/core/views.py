"""
Core views and viewsets for the application.
"""
from rest_framework import viewsets
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework.filters import SearchFilter, OrderingFilter

from .pagination import StandardPagination
from .permissions import IsAuthenticatedAndActive


class BaseViewSet(viewsets.GenericViewSet):
    """
    Base ViewSet for command-backed resources.
    Writes are delegated to the app's service layer; subclasses implement
    create/update/destroy explicitly instead of inheriting model CRUD.
    """
    pagination_class = StandardPagination
    permission_classes = [IsAuthenticatedAndActive]
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]


class ReadOnlyViewSet(viewsets.ReadOnlyModelViewSet):
    """Read-only ViewSet."""
    pagination_class = StandardPagination
    permission_classes = [IsAuthenticatedAndActive]
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
