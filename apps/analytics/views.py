"""
Admin analytics views.
"""
from rest_framework.permissions import IsAdminUser
from rest_framework.views import APIView

from apps.common.utils import success_response
from .services import AnalyticsService


class DashboardStatsView(APIView):
    """GET /api/analytics/dashboard/"""
    permission_classes = [IsAdminUser]

    def get(self, request):
        return success_response(AnalyticsService.dashboard_stats())


class PlanPopularityView(APIView):
    """GET /api/analytics/plans/"""
    permission_classes = [IsAdminUser]

    def get(self, request):
        return success_response(AnalyticsService.plan_popularity())


class AgeDemographicsView(APIView):
    """GET /api/analytics/demographics/"""
    permission_classes = [IsAdminUser]

    def get(self, request):
        return success_response(AnalyticsService.age_demographics())


class BusinessGrowthView(APIView):
    """GET /api/analytics/growth/"""
    permission_classes = [IsAdminUser]

    def get(self, request):
        return success_response(AnalyticsService.business_growth())
