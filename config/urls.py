from django.contrib import admin
from django.urls import path, include

from apps.dashboard import views as dashboard_views

urlpatterns = [
    path('', dashboard_views.dashboard, name='home'),

    path('admin/', admin.site.urls),
    path('accounts/', include('apps.accounts.urls')),
    path('dashboard/', include('apps.dashboard.urls')),
    path('master/', include('apps.master.urls')),
    path('transactions/', include('apps.transactions.urls')),
    path('report/', dashboard_views.report, name='report'),
]
