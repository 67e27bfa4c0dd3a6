"""
URL configuration for expense endpoints.
"""
from django.urls import path
from apps.finance.views import ExpenseListView, ExpenseDetailView, ExpenseSummaryView

app_name = 'expenses'

urlpatterns = [
    path('', ExpenseListView.as_view(), name='expense-list'),
    path('stats/summary', ExpenseSummaryView.as_view(), name='expense-summary'),
    path('<uuid:pk>', ExpenseDetailView.as_view(), name='expense-detail'),
]
