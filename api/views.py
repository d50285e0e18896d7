import logging

from rest_framework import mixins, viewsets
from rest_framework.response import Response
from rest_framework.permissions import IsAdminUser
from .models import StoredValue
from .serializers import StoredValueSerializer
from .storage import set_value

logger = logging.getLogger(__name__)


class StoredValueViewSet(mixins.ListModelMixin,
                         mixins.RetrieveModelMixin,
                         viewsets.GenericViewSet):
    """
    ViewSet for the key/value storage - used by the admin frontend to sync
    its local storage.

    List: GET /api/storage/
    Retrieve: GET /api/storage/{key}/
    Replace: PUT /api/storage/{key}/ (creates the key if missing)
    """
    queryset = StoredValue.objects.all()
    serializer_class = StoredValueSerializer
    permission_classes = [IsAdminUser]
    lookup_field = 'key'
    lookup_value_regex = '[^/]+'
    http_method_names = ['get', 'put', 'head', 'options']

    def update(self, request, key=None):
        """Store the raw value under key, replacing any previous value"""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        stored = set_value(key, serializer.validated_data['value'])
        logger.info(f"Storage key '{key}' updated by {request.user.username}")

        return Response(self.get_serializer(stored).data)
