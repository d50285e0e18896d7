import logging

from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.permissions import IsAdminUser
from .choices import SHOP_ACTIVE, TAB_ISSUES, TAB_SHOPS
from .conf import panel_setting
from .models import PanelSession
from .records import mount_panel_state, save_shops
from .serializers import (
    ShopSerializer, FeedbackSerializer, IssueSerializer, PanelStateSerializer,
    TabSelectionSerializer, CategoryFilterSerializer, IssueStatusSerializer,
    NoteDraftSerializer
)
from .state import AdminPanelState
from .stats import dashboard_stats

logger = logging.getLogger(__name__)


class PanelStateMixin:
    """
    Keeps the operator's AdminPanelState in their PanelSession row, so JWT
    and session-cookie clients see the same state. The first request of an
    operator mounts it from storage.
    """
    permission_classes = [IsAdminUser]

    def get_panel_state(self):
        record, created = PanelSession.objects.get_or_create(user=self.request.user)
        if created or not record.state:
            state = mount_panel_state()
            self.save_panel_state(state)
            return state
        return AdminPanelState.from_dict(record.state)

    def save_panel_state(self, state):
        PanelSession.objects.update_or_create(
            user=self.request.user,
            defaults={'state': state.to_dict()}
        )

    def registry_payload(self, state):
        return {
            'total': len(state.users),
            'shops': ShopSerializer(state.registry(), many=True).data,
        }

    def feedback_payload(self, state):
        return {
            'total': len(state.feedback),
            'feedback': FeedbackSerializer(state.feedback, many=True).data,
        }

    def issues_payload(self, state):
        issues = state.filtered_issues()
        return {
            'category': state.filter_category,
            'total': len(issues),
            'issues': IssueSerializer(issues, many=True).data,
        }

    def not_found(self, message):
        return Response({'error': message}, status=status.HTTP_404_NOT_FOUND)


class AdminPanelViewSet(PanelStateMixin, viewsets.ViewSet):
    """
    Admin panel shell: tab selection and the content of the active tab.

    Overview: GET /api/admin-panel/
    Select tab: POST /api/admin-panel/tab/
    Reload from storage: POST /api/admin-panel/reload/
    Dashboard stats: GET /api/admin-panel/dashboard/
    Staff only.
    """

    def tab_content(self, state):
        if state.active_tab == TAB_SHOPS:
            return self.registry_payload(state)
        if state.active_tab == TAB_ISSUES:
            return {
                'feedback': self.feedback_payload(state),
                'issues': self.issues_payload(state),
            }
        return dashboard_stats(state.users)

    def panel_response(self, state):
        return Response({
            'state': PanelStateSerializer(state).data,
            'content': self.tab_content(state),
        })

    def list(self, request):
        state = self.get_panel_state()
        return self.panel_response(state)

    @action(detail=False, methods=['post'])
    def tab(self, request):
        """Switch the active tab"""
        serializer = TabSelectionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        state = self.get_panel_state()
        state.select_tab(serializer.validated_data['tab'])
        self.save_panel_state(state)
        return self.panel_response(state)

    @action(detail=False, methods=['post'])
    def reload(self, request):
        """Discard the working copy and mount again from storage"""
        state = mount_panel_state()
        self.save_panel_state(state)
        return self.panel_response(state)

    @action(detail=False, methods=['get'])
    def dashboard(self, request):
        """Platform overview stats"""
        state = self.get_panel_state()
        return Response(dashboard_stats(state.users))


class ShopRegistryViewSet(PanelStateMixin, viewsets.ViewSet):
    """
    Shop registry.

    List: GET /api/shops/
    Suspend/activate: POST /api/shops/{id}/toggle-status/
    Staff only.
    """

    def list(self, request):
        state = self.get_panel_state()
        return Response(self.registry_payload(state))

    @action(detail=True, methods=['post'], url_path='toggle-status')
    def toggle_status(self, request, pk=None):
        """Flip a shop between Active and Suspended"""
        state = self.get_panel_state()
        if not state.toggle_status(pk):
            return self.not_found('Shop not found')

        self.save_panel_state(state)
        if panel_setting('PERSIST_MUTATIONS'):
            save_shops(state.users)

        shop = state.find_user(pk)
        logger.info(f"Shop {pk} set to {shop['status']} by {request.user.username}")
        return Response({
            'shop': ShopSerializer(shop).data,
            'message': f'Shop {"activated" if shop["status"] == SHOP_ACTIVE else "suspended"} successfully'
        })


class FeedbackViewSet(PanelStateMixin, viewsets.ViewSet):
    """
    User feedback (read-only).

    List: GET /api/feedback/
    Staff only.
    """

    def list(self, request):
        state = self.get_panel_state()
        return Response(self.feedback_payload(state))


class IssueViewSet(PanelStateMixin, viewsets.ViewSet):
    """
    Issue tracker.

    List (current category filter): GET /api/issues/
    Select category: POST /api/issues/filter/
    Set status: POST /api/issues/{id}/status/
    Open note editor: POST /api/issues/{id}/edit-note/
    Update draft: PATCH /api/issues/note-draft/
    Cancel editor: POST /api/issues/cancel-note/
    Save note: POST /api/issues/{id}/save-note/
    Staff only.
    """

    def list(self, request):
        state = self.get_panel_state()
        return Response(self.issues_payload(state))

    @action(detail=False, methods=['post'], url_path='filter')
    def filter_category(self, request):
        """Select the category chip"""
        serializer = CategoryFilterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        state = self.get_panel_state()
        state.select_category(serializer.validated_data['category'])
        self.save_panel_state(state)
        return Response(self.issues_payload(state))

    @action(detail=True, methods=['post'], url_path='status')
    def set_status(self, request, pk=None):
        """Assign one of the four issue statuses"""
        serializer = IssueStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        state = self.get_panel_state()
        if not state.set_issue_status(pk, serializer.validated_data['status']):
            return self.not_found('Issue not found')

        self.save_panel_state(state)
        return Response({
            'issue': IssueSerializer(state.find_issue(pk)).data,
            'message': 'Issue status updated successfully'
        })

    @action(detail=True, methods=['post'], url_path='edit-note')
    def edit_note(self, request, pk=None):
        """Open the note editor for an issue, seeded with its current note"""
        state = self.get_panel_state()
        issue = state.find_issue(pk)
        if issue is None:
            return self.not_found('Issue not found')

        state.open_editor(issue)
        self.save_panel_state(state)
        return Response(PanelStateSerializer(state).data)

    @action(detail=False, methods=['patch'], url_path='note-draft')
    def note_draft(self, request):
        """Replace the draft text of the open editor"""
        serializer = NoteDraftSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        state = self.get_panel_state()
        if not state.is_editing:
            return Response(
                {'error': 'No issue note is being edited'},
                status=status.HTTP_400_BAD_REQUEST
            )

        state.update_draft(serializer.validated_data['text'])
        self.save_panel_state(state)
        return Response(PanelStateSerializer(state).data)

    @action(detail=False, methods=['post'], url_path='cancel-note')
    def cancel_note(self, request):
        """Close the editor without touching the issue"""
        state = self.get_panel_state()
        state.cancel_editor()
        self.save_panel_state(state)
        return Response(PanelStateSerializer(state).data)

    @action(detail=True, methods=['post'], url_path='save-note')
    def save_note(self, request, pk=None):
        """Commit the draft as the issue's admin note"""
        state = self.get_panel_state()
        if not state.is_editing_issue(pk):
            return Response(
                {'error': 'This issue note is not being edited'},
                status=status.HTTP_400_BAD_REQUEST
            )

        found = state.save_note(pk)
        self.save_panel_state(state)
        if not found:
            return self.not_found('Issue not found')

        return Response({
            'issue': IssueSerializer(state.find_issue(pk)).data,
            'state': PanelStateSerializer(state).data,
            'message': 'Admin note saved'
        })
