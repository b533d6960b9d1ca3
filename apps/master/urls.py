from django.urls import path
from . import views

app_name = 'master'

urlpatterns = [
    # Category
    path('categories/', views.category_list, name='category_list'),
    path('categories/create/', views.category_create, name='category_create'),
    path('categories/<int:pk>/update/', views.category_update, name='category_update'),
    path('categories/<int:pk>/delete/', views.category_delete, name='category_delete'),

    # Payment Mode
    path('payment-modes/', views.payment_mode_list, name='payment_mode_list'),
    path('payment-modes/create/', views.payment_mode_create, name='payment_mode_create'),
    path('payment-modes/<int:pk>/update/', views.payment_mode_update, name='payment_mode_update'),
    path('payment-modes/<int:pk>/delete/', views.payment_mode_delete, name='payment_mode_delete'),
]
