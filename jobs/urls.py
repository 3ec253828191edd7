from django.urls import path
from . import views

app_name = 'jobs'

urlpatterns = [
    path('', views.job_list, name='job_list'),
    path('create/', views.create_job, name='create_job'),
    path('<uuid:job_id>/', views.get_job, name='get_job'),
    path('<uuid:job_id>/update/', views.update_job, name='update_job'),
    path('<uuid:job_id>/toggle-completed/', views.toggle_completed, name='toggle_completed'),
    path('<uuid:job_id>/delete/', views.delete_job, name='delete_job'),
]
