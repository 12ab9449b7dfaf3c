"""URL routes for members app."""

from django.urls import path

from server.apps.members import views

app_name = 'members'

urlpatterns = [
    path('', views.index, name='index'),
    path('authentication/login', views.login, name='login'),
    path('authentication/welcome', views.welcome, name='welcome'),
    path('logout', views.logout, name='logout'),
]
