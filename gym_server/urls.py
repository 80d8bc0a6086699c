"""
URL configuration for gym_server project.
"""
from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

urlpatterns = [
    path('admin/', admin.site.urls),
    # Staff authentication (Django users)
    path('api/auth/login/', TokenObtainPairView.as_view(), name='staff-login'),
    path('api/auth/refresh/', TokenRefreshView.as_view(), name='staff-token-refresh'),
    path('api/member/', include('apps.members.urls')),
    path('api/member/', include('apps.membership.urls')),
    path('api/announcements/', include('apps.announcements.urls')),
    path('api/analytics/', include('apps.analytics.urls')),
    path('api/', include('apps.common.urls')),
    # OpenAPI documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/schema/swagger-ui/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
    path('api/schema/redoc/', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),
]

# Serve uploaded photos in development
if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
