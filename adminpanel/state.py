"""
Admin panel state.

One AdminPanelState per operator: the three collections plus the UI
selection (tab, category filter, note editor target and draft). It has no
framework dependencies; views load it from the operator's PanelSession row,
call one method and store it back.
"""
import copy
import logging

from . import operations
from .choices import CATEGORY_ALL, TAB_DASHBOARD

logger = logging.getLogger(__name__)


class AdminPanelState:
    def __init__(self, users=None, issues=None, feedback=None,
                 active_tab=TAB_DASHBOARD, filter_category=CATEGORY_ALL,
                 editing_issue_id=None, note_draft=''):
        self.users = list(users or [])
        self.issues = list(issues or [])
        self.feedback = list(feedback or [])
        self.active_tab = active_tab
        self.filter_category = filter_category
        self.editing_issue_id = editing_issue_id
        self.note_draft = note_draft

    @classmethod
    def mount(cls, users, feedback, issues):
        """Fresh state over copies of the given collections"""
        return cls(
            users=copy.deepcopy(users),
            issues=copy.deepcopy(issues),
            feedback=copy.deepcopy(feedback),
        )

    # Selection

    def select_tab(self, tab):
        self.active_tab = tab

    def select_category(self, category):
        self.filter_category = category

    def filtered_issues(self):
        return operations.filter_by_category(self.issues, self.filter_category)

    def registry(self):
        return operations.registry_shops(self.users)

    def find_user(self, user_id):
        return operations.find_by_id(self.users, user_id)

    def find_issue(self, issue_id):
        return operations.find_by_id(self.issues, issue_id)

    # Mutations. Each returns True when a record matched, False otherwise.

    def toggle_status(self, user_id):
        if self.find_user(user_id) is None:
            logger.info(f"Status toggle ignored, no shop with id {user_id}")
            return False
        self.users = operations.toggle_shop_status(self.users, user_id)
        return True

    def set_issue_status(self, issue_id, status):
        if self.find_issue(issue_id) is None:
            logger.info(f"Status update ignored, no issue with id {issue_id}")
            return False
        self.issues = operations.update_issue_status(self.issues, issue_id, status)
        return True

    # Note editor

    @property
    def is_editing(self):
        return self.editing_issue_id is not None

    def is_editing_issue(self, issue_id):
        return self.is_editing and str(self.editing_issue_id) == str(issue_id)

    def open_editor(self, issue):
        """Start editing ``issue``'s note; replaces any editor already open"""
        self.editing_issue_id = issue['id']
        self.note_draft = issue.get('adminNote') or ''

    def update_draft(self, text):
        self.note_draft = text

    def cancel_editor(self):
        self.editing_issue_id = None
        self.note_draft = ''

    def save_note(self, issue_id):
        """
        Commit the draft to the issue's admin note and close the editor.
        The editor closes even when no issue matches.
        """
        found = self.find_issue(issue_id) is not None
        if found:
            self.issues = operations.attach_admin_note(self.issues, issue_id, self.note_draft)
        else:
            logger.info(f"Note save ignored, no issue with id {issue_id}")
        self.cancel_editor()
        return found

    # Stored round trip

    def to_dict(self):
        return {
            'users': self.users,
            'issues': self.issues,
            'feedback': self.feedback,
            'active_tab': self.active_tab,
            'filter_category': self.filter_category,
            'editing_issue_id': self.editing_issue_id,
            'note_draft': self.note_draft,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            users=data.get('users'),
            issues=data.get('issues'),
            feedback=data.get('feedback'),
            active_tab=data.get('active_tab', TAB_DASHBOARD),
            filter_category=data.get('filter_category', CATEGORY_ALL),
            editing_issue_id=data.get('editing_issue_id'),
            note_draft=data.get('note_draft', ''),
        )
