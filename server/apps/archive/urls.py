"""URL routes for archive app."""

from django.urls import path

from server.apps.archive import views

app_name = 'archive'

urlpatterns = [
    path('authentication/files', views.files, name='files'),
    path(
        'authentication/navigation_params',
        views.navigation_params,
        name='navigation_params',
    ),
    path('upload', views.upload, name='upload'),
    path('refresh', views.refresh, name='refresh'),
    path('rename', views.rename, name='rename'),
    path('move', views.move, name='move'),
    path('remove', views.remove, name='remove'),
    path('download', views.download, name='download'),
]
