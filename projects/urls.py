from django.urls import path
from . import views

app_name = 'projects'

urlpatterns = [
    path('', views.project_list, name='project_list'),
    path('<uuid:project_id>/delete/', views.delete_project, name='delete_project'),
]
