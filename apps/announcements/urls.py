from django.urls import path
from . import views

urlpatterns = [
    path('', views.AnnouncementListCreateView.as_view(), name='announcement-create'),
    path('active/', views.ActiveAnnouncementsView.as_view(), name='announcement-active'),
    path('admin/', views.AdminAnnouncementsView.as_view(), name='announcement-admin-list'),
    path('<int:pk>/', views.AnnouncementDetailView.as_view(), name='announcement-detail'),
]
