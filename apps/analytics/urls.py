from django.urls import path
from . import views

urlpatterns = [
    path('dashboard/', views.DashboardStatsView.as_view(), name='analytics-dashboard'),
    path('plans/', views.PlanPopularityView.as_view(), name='analytics-plans'),
    path('demographics/', views.AgeDemographicsView.as_view(), name='analytics-demographics'),
    path('growth/', views.BusinessGrowthView.as_view(), name='analytics-growth'),
]
