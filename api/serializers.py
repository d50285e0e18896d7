from rest_framework import serializers
from .models import StoredValue


class StoredValueSerializer(serializers.ModelSerializer):
    """Serializer for stored key/value pairs"""

    class Meta:
        model = StoredValue
        fields = ['key', 'value', 'updated_at']
        read_only_fields = ['key', 'updated_at']
        extra_kwargs = {
            'value': {'required': True, 'allow_blank': True, 'trim_whitespace': False}
        }
