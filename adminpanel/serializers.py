from rest_framework import serializers
from .choices import (
    CATEGORY_FILTER_CHOICES, ISSUE_STATUS_CHOICES, SHOP_ACTIVE, TAB_CHOICES
)


class ShopSerializer(serializers.Serializer):
    """Registry row for one shop account"""
    id = serializers.ReadOnlyField()
    shop_name = serializers.CharField(source='shopName', read_only=True)
    name = serializers.CharField(read_only=True, allow_null=True)
    email = serializers.CharField(read_only=True, allow_null=True)
    phone = serializers.CharField(read_only=True)
    role = serializers.CharField(read_only=True, allow_null=True)
    status = serializers.CharField(read_only=True)
    registration_date = serializers.CharField(source='registrationDate', read_only=True, allow_null=True)
    last_active = serializers.CharField(source='lastActive', read_only=True)
    action_label = serializers.SerializerMethodField()

    def get_action_label(self, obj):
        """Label of the row's suspend/activate button"""
        return 'Suspend' if obj.get('status') == SHOP_ACTIVE else 'Activate'


class FeedbackSerializer(serializers.Serializer):
    """Read-only user feedback entry"""
    id = serializers.ReadOnlyField()
    user_name = serializers.CharField(source='userName', read_only=True, allow_null=True)
    date = serializers.CharField(read_only=True, allow_null=True)
    rating = serializers.ReadOnlyField()
    comment = serializers.CharField(read_only=True, allow_null=True)


class IssueSerializer(serializers.Serializer):
    """Issue report with its lifecycle status and admin note"""
    id = serializers.ReadOnlyField()
    category = serializers.CharField(read_only=True)
    description = serializers.CharField(read_only=True)
    submitted_by = serializers.CharField(source='submittedBy', read_only=True, allow_null=True)
    contact = serializers.CharField(read_only=True, allow_null=True)
    timestamp = serializers.CharField(read_only=True, allow_null=True)
    has_screenshot = serializers.BooleanField(source='hasScreenshot', read_only=True, default=False)
    status = serializers.CharField(read_only=True)
    admin_note = serializers.CharField(source='adminNote', read_only=True, allow_null=True)


class PanelStateSerializer(serializers.Serializer):
    """UI selection part of the panel state"""
    active_tab = serializers.CharField(read_only=True)
    filter_category = serializers.CharField(read_only=True)
    editing_issue_id = serializers.ReadOnlyField()
    note_draft = serializers.CharField(read_only=True)


class TabSelectionSerializer(serializers.Serializer):
    tab = serializers.ChoiceField(choices=TAB_CHOICES)


class CategoryFilterSerializer(serializers.Serializer):
    category = serializers.ChoiceField(choices=CATEGORY_FILTER_CHOICES)


class IssueStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=ISSUE_STATUS_CHOICES)


class NoteDraftSerializer(serializers.Serializer):
    text = serializers.CharField(allow_blank=True, trim_whitespace=False, max_length=2000)
