from django.urls import path
from . import views

app_name = 'time_entries'

urlpatterns = [
    path('job/<uuid:job_id>/', views.entry_list, name='entry_list'),
    path('job/<uuid:job_id>/log/', views.log_time, name='log_time'),
    path('job/<uuid:job_id>/calendar/', views.activity_calendar, name='activity_calendar'),
    path('job/<uuid:job_id>/export/', views.export_entries, name='export_entries'),
    path('<uuid:entry_id>/delete/', views.delete_entry, name='delete_entry'),
]
