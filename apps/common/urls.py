from django.urls import path

from .health_views import BasicHealthCheckView

app_name = 'common'

urlpatterns = [
    path('health/', BasicHealthCheckView.as_view(), name='health_check'),
]
