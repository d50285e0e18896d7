from rest_framework import routers
from adminpanel.views import (
    AdminPanelViewSet, ShopRegistryViewSet, FeedbackViewSet, IssueViewSet
)
from api.views import StoredValueViewSet


router = routers.DefaultRouter()

# Admin panel
router.register(r'admin-panel', AdminPanelViewSet, basename='admin-panel')
router.register(r'shops', ShopRegistryViewSet, basename='shop')
router.register(r'feedback', FeedbackViewSet, basename='feedback')
router.register(r'issues', IssueViewSet, basename='issue')

# Key/value storage
router.register(r'storage', StoredValueViewSet, basename='storage')

urlpatterns = router.urls
