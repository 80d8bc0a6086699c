from django.urls import path
from . import views

urlpatterns = [
    path('login/', views.MemberLoginView.as_view(), name='member-login'),
    path('me/', views.MemberProfileView.as_view(), name='member-me'),
    path('profile/', views.UpdateProfileView.as_view(), name='member-profile'),
    path('change-password/', views.ChangePasswordView.as_view(), name='member-change-password'),
    path('attendance/', views.MemberAttendanceView.as_view(), name='member-attendance'),
    path('payments/', views.MemberPaymentsView.as_view(), name='member-payments'),
    path('subscribe-push/', views.SubscribePushView.as_view(), name='member-subscribe-push'),
]
