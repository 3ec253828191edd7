from django.urls import path
from . import views

app_name = 'settings'

urlpatterns = [
    path('', views.preferences, name='preferences'),
    path('update/', views.update_preferences, name='update_preferences'),
]
